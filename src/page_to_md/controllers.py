import logging
import re
from typing import Optional, Union

from litestar import Controller, get
from litestar.response import Response
from litestar.status_codes import (
    HTTP_200_OK,
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_502_BAD_GATEWAY,
)

from .adapters.markitdown_adapter import HtmlToMarkdownTransformer
from .converters.url_fetcher import PageFetcher
from .core.exceptions import InvalidInputError, URLFetchError
from .core.storage import MarkdownStore
from .models import ConvertResponse, ErrorResponse

logger = logging.getLogger(__name__)

_HTTP_URL = re.compile(r"^https?://", re.IGNORECASE)

INVALID_URL_MESSAGE = "Invalid or missing url parameter"
SERVER_ERROR_MESSAGE = "Server error"


def validate_url(url: Optional[str]) -> str:
    """Accept only absolute http(s) URLs."""
    if not url or not _HTTP_URL.match(url):
        raise InvalidInputError(INVALID_URL_MESSAGE)
    return url


class ConvertController(Controller):
    path = "/convert-to-markdown"

    @get("")
    async def convert_to_markdown(
        self,
        page_fetcher: PageFetcher,
        transformer: HtmlToMarkdownTransformer,
        markdown_store: MarkdownStore,
        url: Optional[str] = None,
    ) -> Response[Union[ConvertResponse, ErrorResponse]]:
        """Fetch a page, convert it to Markdown and save it under the output directory"""
        try:
            url = validate_url(url)

            result = await page_fetcher.fetch(url)
            result.raise_for_status()

            markdown = await transformer.convert(result.text)
            filename = await markdown_store.asave(url, markdown)

            return Response(ConvertResponse(filename=filename), status_code=HTTP_200_OK)

        except InvalidInputError as e:
            return self._error_response(str(e), HTTP_400_BAD_REQUEST)
        except URLFetchError as e:
            logger.warning(f"Upstream fetch failed for {url}: {e}")
            return self._error_response(str(e), HTTP_502_BAD_GATEWAY)
        except Exception as e:
            logger.exception(f"convert error for {url}: {e}")
            return self._error_response(
                SERVER_ERROR_MESSAGE, HTTP_500_INTERNAL_SERVER_ERROR
            )

    def _error_response(self, message: str, status_code: int) -> Response[ErrorResponse]:
        return Response(ErrorResponse.create_error(message), status_code=status_code)
