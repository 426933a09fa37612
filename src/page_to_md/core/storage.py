import asyncio
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .filenames import build_markdown_filename


class MarkdownStore:
    """Writes converted Markdown into a flat output directory, one file per page."""

    def __init__(self, output_dir: Union[str, Path] = "docs") -> None:
        self.output_dir = Path(output_dir).resolve()
        self._logger = logging.getLogger(__name__)

    def ensure_directory(self) -> Path:
        # Concurrent first-time creation is harmless with exist_ok
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir

    def save(self, url: str, markdown: str, moment: Optional[datetime] = None) -> str:
        """Write ``markdown`` for ``url`` and return the bare filename.

        An existing file with the same name is overwritten.
        """
        directory = self.ensure_directory()
        filename = build_markdown_filename(url, moment)
        file_path = directory / filename

        file_path.write_text(markdown, encoding="utf-8")

        self._logger.info(
            f"Saved {len(markdown)} characters from {url} to {file_path}"
        )
        return filename

    async def asave(
        self, url: str, markdown: str, moment: Optional[datetime] = None
    ) -> str:
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self.save, url, markdown, moment)
