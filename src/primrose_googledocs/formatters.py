"""
Response envelopes for tool results.

Success is a JSON text {"message", "data"}. Failure is a ToolError whose
text is JSON {"error", ...}; FastMCP turns it into an isError result.
"""

import json
from typing import Any

from fastmcp.exceptions import ToolError

from primrose_googledocs.errors import (
    AuthenticationError,
    GoogleDocsApiError,
    RateLimitError,
)


def format_response(data: Any) -> str:
    """Serialise a raw API payload as-is."""
    return json.dumps(data, indent=2)


def format_success(message: str, data: Any = None) -> str:
    return json.dumps({"message": message, "data": data if data is not None else {}}, indent=2)


def error_payload(error: Exception) -> dict[str, Any]:
    """Build the error body for a failure."""
    if isinstance(error, RateLimitError):
        return {"error": error.message, "retryAfter": error.retry_after}
    if isinstance(error, AuthenticationError):
        return {"error": error.message}
    if isinstance(error, GoogleDocsApiError):
        payload: dict[str, Any] = {"error": error.message}
        if error.status_code is not None:
            payload["statusCode"] = error.status_code
        return payload
    return {"error": str(error) or "Unknown error"}


def format_error(error: Exception) -> ToolError:
    """Wrap a failure in a ToolError carrying the JSON error body."""
    return ToolError(json.dumps(error_payload(error), indent=2))


def reject(message: str) -> ToolError:
    """A local precondition failure; no request was sent."""
    return ToolError(json.dumps({"error": message}, indent=2))
