import pytest
import os
from unittest.mock import patch
from pydantic import ValidationError
from page_to_md.core.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Test default configuration values"""
        settings = Settings()

        assert settings.host == "127.0.0.1"
        assert settings.port == 3000
        assert settings.debug is False
        assert settings.log_level == "INFO"

        assert settings.allow_insecure_tls is False
        assert settings.output_dir == "docs"

        assert settings.fetch_timeout_seconds == 30.0
        assert settings.max_redirects == 20

    def test_custom_values(self):
        """Test settings with custom values"""
        settings = Settings(
            host="0.0.0.0",
            port=9000,
            debug=True,
            log_level="DEBUG",
            allow_insecure_tls=True,
            output_dir="/srv/markdown",
            fetch_timeout_seconds=5,
            max_redirects=3,
        )

        assert settings.host == "0.0.0.0"
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.allow_insecure_tls is True
        assert settings.output_dir == "/srv/markdown"
        assert settings.fetch_timeout_seconds == 5.0
        assert settings.max_redirects == 3

    @patch.dict(os.environ, {
        "HOST": "192.168.1.100",
        "PORT": "8081",
        "DEBUG": "true",
        "OUTPUT_DIR": "converted",
    })
    def test_environment_variables(self):
        """Test loading from environment variables"""
        settings = Settings()

        assert settings.host == "192.168.1.100"
        assert settings.port == 8081
        assert settings.debug is True
        assert settings.output_dir == "converted"

    @pytest.mark.parametrize("value,expected", [
        ("1", True),
        ("true", True),
        ("0", False),
        ("false", False),
        ("YES", True),
        ("", False),
        ("2", False),
        ("off", False),
        ("enabled", False),
    ])
    def test_allow_insecure_tls_environment(self, monkeypatch, value, expected):
        monkeypatch.setenv("ALLOW_INSECURE_TLS", value)
        assert Settings().allow_insecure_tls is expected

    @pytest.mark.parametrize("value,expected", [
        ("app:*", False),
        ("", False),
        ("1", True),
        ("true", True),
    ])
    def test_debug_environment_does_not_break_startup(self, monkeypatch, value, expected):
        monkeypatch.setenv("DEBUG", value)
        assert Settings().debug is expected

    def test_flags_accept_booleans(self):
        settings = Settings(debug=True, allow_insecure_tls=False)

        assert settings.debug is True
        assert settings.allow_insecure_tls is False

    @patch.dict(os.environ, {
        "FETCH_TIMEOUT_SECONDS": "12.5",
        "MAX_REDIRECTS": "5",
    })
    def test_numeric_environment_variables(self):
        settings = Settings()

        assert settings.fetch_timeout_seconds == 12.5
        assert settings.max_redirects == 5

    @patch.dict(os.environ, {"PORT": "not-a-port"})
    def test_invalid_port(self):
        with pytest.raises(ValidationError):
            Settings()

    def test_unrelated_environment_is_ignored(self, monkeypatch):
        monkeypatch.setenv("SOME_OTHER_SETTING", "value")
        assert not hasattr(Settings(), "some_other_setting")


class TestGetSettings:
    def test_returns_settings(self):
        assert isinstance(get_settings(), Settings)

    def test_returns_fresh_instance(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("PORT", "4000")
        second = get_settings()

        assert first.port == 3000
        assert second.port == 4000
