import logging
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from ..core.config import Settings
from ..core.exceptions import URLFetchError

# Browser-like headers reduce anti-bot rejections
DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/119 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}


@dataclass
class FetchResult:
    """Outcome of a completed HTTP fetch, successful or not."""

    url: str
    status_code: int
    reason_phrase: str
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def raise_for_status(self) -> None:
        if not self.ok:
            raise URLFetchError(self.status_code, self.reason_phrase)


class PageFetcher:
    """Fetches page bodies as text over HTTP(S), following redirects."""

    def __init__(
        self,
        verify_tls: bool = True,
        timeout_seconds: float = 30.0,
        max_redirects: int = 20,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.verify_tls = verify_tls
        self.timeout_seconds = timeout_seconds
        self.max_redirects = max_redirects
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}
        self._transport = transport
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "PageFetcher":
        return cls(
            verify_tls=not settings.allow_insecure_tls,
            timeout_seconds=settings.fetch_timeout_seconds,
            max_redirects=settings.max_redirects,
            **kwargs,
        )

    async def fetch(self, url: str) -> FetchResult:
        """Fetch ``url`` and return its status and decoded body.

        Non-success statuses are returned, not raised; transport failures
        (DNS, refused connections, TLS, timeouts, redirect loops) propagate
        as ``httpx`` exceptions.
        """
        if not self.verify_tls and url.lower().startswith("https:"):
            self._logger.warning(f"TLS certificate verification disabled for {url}")

        async with httpx.AsyncClient(
            headers=self.headers,
            timeout=self.timeout_seconds,
            follow_redirects=True,
            max_redirects=self.max_redirects,
            verify=self.verify_tls,
            transport=self._transport,
        ) as client:
            response = await client.get(url)

        self._logger.debug(
            f"Fetched {url} -> {response.status_code} {response.reason_phrase}"
            f" ({len(response.content)} bytes)"
        )

        return FetchResult(
            url=str(response.url),
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            text=response.text,
        )
