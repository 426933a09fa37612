import pytest
from pathlib import Path

from tests.test_server.server import TestHTTPServer

# Settings read these from the environment; keep the host machine out of tests
SETTINGS_ENV_VARS = [
    "HOST",
    "PORT",
    "DEBUG",
    "LOG_LEVEL",
    "ALLOW_INSECURE_TLS",
    "OUTPUT_DIR",
    "FETCH_TIMEOUT_SECONDS",
    "MAX_REDIRECTS",
]


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    directory = tmp_path / "docs"
    monkeypatch.setenv("OUTPUT_DIR", str(directory))
    return directory


@pytest.fixture
def html_files_dir():
    return Path(__file__).parent / "test_server" / "html_files"


@pytest.fixture
def article_html(html_files_dir):
    return (html_files_dir / "article.html").read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def test_server():
    server = TestHTTPServer()
    server.start()
    yield server
    server.stop()
