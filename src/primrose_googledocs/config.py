"""
Runtime configuration for the Google Docs MCP Server.

All settings come from environment variables so the same image can run
as a shared HTTP service or as a local stdio server.
"""

import os
from dataclasses import dataclass

from primrose_googledocs import __version__

SERVER_NAME = "primrose-mcp-googledocs"
SERVER_VERSION = __version__

ACCESS_TOKEN_HEADER = "X-Google-Access-Token"

# Documented for callers only; the Docs API enforces them, not this server
OAUTH_SCOPES = [
    "https://www.googleapis.com/auth/documents (full access)",
    "https://www.googleapis.com/auth/documents.readonly (read-only)",
]

MCP_PATH = "/mcp"
HEALTH_PATH = "/health"

VALID_TRANSPORTS = ("http", "stdio")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """Server settings resolved from the environment."""

    transport: str = "http"
    host: str = "0.0.0.0"
    port: int = 8000
    api_endpoint: str | None = None
    http_timeout: int = 30
    # Only used with the stdio transport, where no request headers exist
    access_token: str | None = None


def load_settings() -> Settings:
    """
    Read settings from environment variables.

    Returns:
        Settings instance

    Raises:
        ValueError: If a variable holds an invalid value
    """
    transport = os.getenv("MCP_TRANSPORT", "http").strip().lower()
    if transport not in VALID_TRANSPORTS:
        raise ValueError(
            f"MCP_TRANSPORT must be one of {', '.join(VALID_TRANSPORTS)}, got {transport!r}"
        )

    port = _env_int("MCP_PORT", 8000)
    if not 0 < port < 65536:
        raise ValueError(f"MCP_PORT must be between 1 and 65535, got {port}")

    http_timeout = _env_int("GOOGLE_DOCS_HTTP_TIMEOUT", 30)
    if http_timeout <= 0:
        raise ValueError(f"GOOGLE_DOCS_HTTP_TIMEOUT must be positive, got {http_timeout}")

    return Settings(
        transport=transport,
        host=os.getenv("MCP_HOST", "0.0.0.0"),
        port=port,
        api_endpoint=os.getenv("GOOGLE_DOCS_API_ENDPOINT") or None,
        http_timeout=http_timeout,
        access_token=os.getenv("GOOGLE_ACCESS_TOKEN") or None,
    )
