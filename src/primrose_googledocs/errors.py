"""
Exception types raised by the Google Docs client.

Tool handlers catch these and turn them into error results, so none of
them ever escapes an MCP tool call.
"""


class GoogleDocsMcpError(Exception):
    """Base class for all client-side failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationError(GoogleDocsMcpError):
    """Missing access token, or the API answered 401/403."""


class RateLimitError(GoogleDocsMcpError):
    """The API answered 429."""

    def __init__(self, message: str, retry_after: int = 60):
        super().__init__(message)
        self.retry_after = retry_after


class GoogleDocsApiError(GoogleDocsMcpError):
    """Any other non-success answer (or a transport failure)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
