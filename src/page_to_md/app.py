import logging
from litestar import Litestar, get
from litestar.di import Provide
from litestar.response import Response
from litestar.status_codes import HTTP_200_OK
from .core.config import get_settings, Settings
from .core.storage import MarkdownStore
from .controllers import ConvertController
from .converters.url_fetcher import PageFetcher
from .adapters.markitdown_adapter import HtmlToMarkdownTransformer
from .middleware.cors import add_cors_headers
from .models import HealthResponse

_transformer = HtmlToMarkdownTransformer()


@get("/health")
async def health() -> Response[HealthResponse]:
    """Liveness check, independent of any other state"""
    return Response(HealthResponse(), status_code=HTTP_200_OK)


def provide_settings() -> Settings:
    """Provide application settings, re-read from the environment"""
    return get_settings()


def provide_page_fetcher(settings: Settings) -> PageFetcher:
    """Provide a fetcher with TLS trust taken from settings"""
    return PageFetcher.from_settings(settings)


def provide_transformer() -> HtmlToMarkdownTransformer:
    """Provide the HTML to Markdown transformer as singleton"""
    return _transformer


def provide_markdown_store(settings: Settings) -> MarkdownStore:
    return MarkdownStore(settings.output_dir)


def configure_logging() -> None:
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


settings = get_settings()

app = Litestar(
    route_handlers=[health, ConvertController],
    dependencies={
        "settings": Provide(provide_settings, sync_to_thread=False),
        "page_fetcher": Provide(provide_page_fetcher, sync_to_thread=False),
        "transformer": Provide(provide_transformer, sync_to_thread=False),
        "markdown_store": Provide(provide_markdown_store, sync_to_thread=False),
    },
    before_send=[add_cors_headers],
    debug=settings.debug,
    on_startup=[configure_logging],
)
