"""
Pure functions for deriving Markdown artifact filenames from URLs.

Names are built from the URL's host and path plus a UTC timestamp, and are
safe to create on any common filesystem.
"""

import re
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlsplit

FALLBACK_NAME = "page"
MAX_FILENAME_BYTES = 255

_ILLEGAL_CHARS = re.compile(r'[/?<>\\:*|"]')
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x80-\x9f]")
_RESERVED_NAMES = re.compile(r"^\.+$")
_WINDOWS_RESERVED_NAMES = re.compile(
    r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE
)
_WINDOWS_TRAILING = re.compile(r"[. ]+$")


def sanitize_filename(name: str) -> str:
    """Strip characters and names that are unsafe as a filename.

    Never raises; may return an empty string when nothing usable is left.
    """
    sanitized = _ILLEGAL_CHARS.sub("", name)
    sanitized = _CONTROL_CHARS.sub("", sanitized)
    sanitized = _RESERVED_NAMES.sub("", sanitized)
    sanitized = _WINDOWS_RESERVED_NAMES.sub("", sanitized)
    sanitized = _WINDOWS_TRAILING.sub("", sanitized)
    return _truncate_utf8(sanitized, MAX_FILENAME_BYTES)


def _truncate_utf8(value: str, max_bytes: int) -> str:
    encoded = value.encode("utf-8")
    if len(encoded) <= max_bytes:
        return value
    # Drop any partial trailing character left by the byte cut
    return encoded[:max_bytes].decode("utf-8", errors="ignore")


def url_base_name(url: str) -> str:
    """Filesystem-safe base name from a URL's host and path.

    The first run of slashes collapses to one and every remaining slash
    becomes an underscore: ``http://example.com/a/b`` -> ``example.com_a_b``.
    """
    parts = urlsplit(url)
    host = parts.hostname or ""
    if ":" in host:
        # IPv6 literal keeps its brackets
        host = f"[{host}]"
    path = parts.path or "/"

    joined = re.sub(r"/+", "/", f"{host}{path}", count=1).replace("/", "_")
    return sanitize_filename(joined) or FALLBACK_NAME


def timestamp_suffix(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, ':' and '.' as '-'."""
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)

    iso = moment.strftime("%Y-%m-%dT%H:%M:%S") + f".{moment.microsecond // 1000:03d}Z"
    return re.sub(r"[:.]", "-", iso)


def build_markdown_filename(url: str, moment: Optional[datetime] = None) -> str:
    """Full artifact name, kept within MAX_FILENAME_BYTES including the suffix."""
    suffix = f"_{timestamp_suffix(moment)}.md"
    budget = MAX_FILENAME_BYTES - len(suffix.encode("utf-8"))
    base = _truncate_utf8(url_base_name(url), budget)
    return f"{base}{suffix}"
