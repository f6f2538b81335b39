"""
Primrose Google Docs MCP Server utility modules.
"""

import sys


def log(message: str) -> None:
    """Log a message to stderr.

    With the stdio transport, stdout carries the JSON-RPC stream,
    so diagnostics must never be printed there.
    """
    print(f"[primrose-googledocs] {message}", file=sys.stderr, flush=True)
