"""
Multi-tenant Google Docs MCP Server

Main entry point. Builds the FastMCP server, registers every tool, and
serves it over stateless streamable HTTP (default) or stdio.

Each tool call resolves the tenant's access token from the headers of
the HTTP request that carried it and builds a fresh API client, so one
deployment can serve many tenants without storing anything.

IMPORTANT: All logging must use stderr, never stdout.
The MCP protocol uses stdout for JSON-RPC communication.
"""

import uvicorn
from fastmcp import FastMCP
from fastmcp.server.dependencies import get_http_headers
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from primrose_googledocs.client import GoogleDocsClient, create_google_docs_client
from primrose_googledocs.config import (
    ACCESS_TOKEN_HEADER,
    HEALTH_PATH,
    MCP_PATH,
    OAUTH_SCOPES,
    SERVER_NAME,
    SERVER_VERSION,
    load_settings,
)
from primrose_googledocs.credentials import resolve_credentials
from primrose_googledocs.errors import AuthenticationError
from primrose_googledocs.tools import register_all_tools
from primrose_googledocs.utils import log


# Create MCP server
mcp = FastMCP(
    name=SERVER_NAME,
    version=SERVER_VERSION,
    instructions="""
    This MCP server exposes the Google Docs API as tools.

    Authenticate every request with a Google OAuth access token in the
    X-Google-Access-Token header.

    Key capabilities:
    - Create, read and batch-update documents
    - Insert, delete, replace and append text; page and section breaks
    - Text, paragraph, document and section styling
    - Tables, images, lists, named ranges, headers, footers and footnotes

    Document indexing uses 1-based positions (index 1 is start of document).
    """,
)


def get_client() -> GoogleDocsClient:
    """
    Build a client for the request currently being served.

    Over HTTP the token comes from the inbound request headers. With no HTTP
    request in flight (stdio), GOOGLE_ACCESS_TOKEN is used instead.

    Raises:
        AuthenticationError: If no usable token is available
    """
    settings = load_settings()
    headers = get_http_headers(include_all=True)
    if not headers and settings.access_token:
        headers = {ACCESS_TOKEN_HEADER: settings.access_token}

    credentials = resolve_credentials(headers)
    return create_google_docs_client(
        credentials,
        api_endpoint=settings.api_endpoint,
        timeout=settings.http_timeout,
    )


register_all_tools(mcp, get_client)


# === HTTP ROUTES ===


@mcp.custom_route(HEALTH_PATH, methods=["GET"])
async def health(request: Request) -> JSONResponse:
    """Liveness check; no authentication."""
    return JSONResponse({"status": "ok", "server": SERVER_NAME})


@mcp.custom_route("/", methods=["GET"])
async def server_info(request: Request) -> JSONResponse:
    """Describe the server, how to authenticate, and the tool catalog."""
    tools = await mcp.get_tools()
    catalog = []
    for name, tool in tools.items():
        summary = (tool.description or "").strip().splitlines()
        catalog.append(f"{name} - {summary[0]}" if summary else name)

    return JSONResponse(
        {
            "name": SERVER_NAME,
            "version": SERVER_VERSION,
            "description": "Multi-tenant Google Docs MCP Server",
            "endpoints": {
                "mcp": f"{MCP_PATH} (POST) - Streamable HTTP MCP endpoint",
                "health": f"{HEALTH_PATH} - Health check",
            },
            "authentication": {
                "description": "Pass tenant credentials via request headers",
                "required_headers": {
                    ACCESS_TOKEN_HEADER: "OAuth access token for Google Docs API",
                },
                "oauth_scopes": OAUTH_SCOPES,
            },
            "tools": catalog,
        }
    )


class TenantCredentialsMiddleware(BaseHTTPMiddleware):
    """Reject MCP POSTs that carry no access token before any dispatch."""

    async def dispatch(self, request: Request, call_next):
        if request.method == "POST" and request.url.path.rstrip("/") == MCP_PATH:
            try:
                resolve_credentials(request.headers)
            except AuthenticationError as e:
                log(f"Rejected {request.method} {request.url.path}: {e.message}")
                return JSONResponse(
                    {
                        "error": "Unauthorized",
                        "message": e.message,
                        "required_headers": [ACCESS_TOKEN_HEADER],
                    },
                    status_code=401,
                )
        return await call_next(request)


def create_app():
    """Build the stateless streamable HTTP ASGI app."""
    return mcp.http_app(
        path=MCP_PATH,
        middleware=[Middleware(TenantCredentialsMiddleware)],
        stateless_http=True,
    )


def main() -> None:
    """Run the Google Docs MCP Server."""
    settings = load_settings()
    log(f"Starting {SERVER_NAME} v{SERVER_VERSION} ({settings.transport} transport)...")

    if settings.transport == "stdio":
        mcp.run(transport="stdio")
        return

    log(f"Listening on http://{settings.host}:{settings.port}{MCP_PATH}")
    uvicorn.run(create_app(), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
