class MarkdownConversionError(Exception):
    pass


class InvalidInputError(MarkdownConversionError):
    pass


class URLFetchError(MarkdownConversionError):
    """Upstream answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Failed to fetch: {status_code} {reason}")
