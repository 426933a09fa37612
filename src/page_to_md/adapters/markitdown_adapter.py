import asyncio
import logging
from io import BytesIO
from typing import Any, Optional, Tuple

from bs4 import BeautifulSoup
from markitdown import MarkItDown, StreamInfo

from ..core.exceptions import MarkdownConversionError

# Media and embed elements dropped together with everything inside them
IMAGE_ELEMENTS = ("img", "picture", "figure")
CAPTION_ELEMENTS = ("figcaption", "caption")
EMBED_ELEMENTS = ("video", "iframe", "embed", "object", "source")
REMOVED_ELEMENTS: Tuple[str, ...] = IMAGE_ELEMENTS + CAPTION_ELEMENTS + EMBED_ELEMENTS

HTML_STREAM_INFO = StreamInfo(mimetype="text/html", extension=".html", charset="utf-8")


class HtmlToMarkdownTransformer:
    """Converts HTML documents to Markdown with media stripped out.

    Conversion is delegated to MarkItDown's HTML converter, which emits ATX
    headings and fenced code blocks and ignores ``<script>``/``<style>``.
    """

    def __init__(self, removed_elements: Optional[Tuple[str, ...]] = None) -> None:
        self.removed_elements = removed_elements or REMOVED_ELEMENTS
        self._markitdown_instance = None
        self._logger = logging.getLogger(__name__)

    def _get_markitdown_instance(self) -> Any:
        if self._markitdown_instance is None:
            self._markitdown_instance = MarkItDown(enable_plugins=False)
        return self._markitdown_instance

    def strip_media(self, html: str) -> str:
        """Remove every configured element, including its children, from ``html``."""
        soup = BeautifulSoup(html, "html.parser")

        for element in soup.find_all(list(self.removed_elements)):
            # Nested matches are already gone with their ancestor
            if not element.decomposed:
                element.decompose()

        return str(soup)

    def transform(self, html: str) -> str:
        """Convert an HTML document to Markdown.

        Raises:
            MarkdownConversionError: If the HTML cannot be converted
        """
        if not html.strip():
            return ""

        cleaned = self.strip_media(html)

        try:
            md = self._get_markitdown_instance()
            with BytesIO(cleaned.encode("utf-8")) as stream:
                result = md.convert_stream(stream, stream_info=HTML_STREAM_INFO)
        except Exception as e:
            self._logger.error(f"HTML to Markdown conversion failed: {e}")
            raise MarkdownConversionError(f"Failed to convert HTML: {str(e)}") from e

        return result.markdown.strip()

    async def convert(self, html: str) -> str:
        """Run :meth:`transform` in the default executor."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self.transform, html)
