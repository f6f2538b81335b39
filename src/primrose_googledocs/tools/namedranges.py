"""
Named range tools.

A named range is addressed by ID or by name. When both are given the ID
wins and the name is not sent, since the API accepts only one of them.
"""

import asyncio
from typing import Annotated

from pydantic import Field

from primrose_googledocs.errors import GoogleDocsMcpError
from primrose_googledocs.formatters import format_error, format_success, reject
from primrose_googledocs.tools.helpers import ClientFactory, DocumentId, EndIndex, StartIndex
from primrose_googledocs.types import CreateNamedRangeReply


def _preview(text: str, limit: int = 50) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


def register_named_range_tools(mcp, get_client: ClientFactory) -> None:
    """Register named range tools on the server."""

    @mcp.tool(name="googledocs_create_named_range")
    async def create_named_range(
        documentId: DocumentId,
        name: Annotated[str, Field(description="Name for the range")],
        startIndex: StartIndex,
        endIndex: EndIndex,
    ) -> str:
        """
        Create a named range over [startIndex, endIndex).

        Named ranges let you find and update a region later, e.g. for templates.
        """
        try:
            result = await asyncio.to_thread(
                get_client().create_named_range, documentId, name, startIndex, endIndex
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)

        reply = result.first_reply()
        suffix = (
            f" (ID: {reply.named_range_id})"
            if isinstance(reply, CreateNamedRangeReply) and reply.named_range_id
            else ""
        )
        return format_success(f'Named range "{name}" created{suffix}', result.raw)

    @mcp.tool(name="googledocs_delete_named_range", annotations={"destructiveHint": True})
    async def delete_named_range(
        documentId: DocumentId,
        namedRangeId: Annotated[str | None, Field(description="ID of the named range")] = None,
        name: Annotated[str | None, Field(description="Name of the named range")] = None,
    ) -> str:
        """
        Delete a named range from the document.

        Provide either namedRangeId or name; the ID takes precedence.
        """
        if not namedRangeId and not name:
            raise reject("Either namedRangeId or name must be provided")

        try:
            result = await asyncio.to_thread(
                get_client().delete_named_range,
                documentId,
                named_range_id=namedRangeId or None,
                name=None if namedRangeId else name,
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        label = f"ID: {namedRangeId}" if namedRangeId else f'"{name}"'
        return format_success(f"Named range {label} deleted", result.raw)

    @mcp.tool(name="googledocs_replace_named_range_content")
    async def replace_named_range_content(
        documentId: DocumentId,
        text: Annotated[str, Field(description="The replacement text")],
        namedRangeId: Annotated[str | None, Field(description="ID of the named range")] = None,
        namedRangeName: Annotated[
            str | None, Field(description="Name of the named range")
        ] = None,
    ) -> str:
        """
        Replace the content of a named range.

        Provide either namedRangeId or namedRangeName; the ID takes precedence.
        """
        if not namedRangeId and not namedRangeName:
            raise reject("Either namedRangeId or namedRangeName must be provided")

        try:
            result = await asyncio.to_thread(
                get_client().replace_named_range_content,
                documentId,
                text,
                named_range_id=namedRangeId or None,
                named_range_name=None if namedRangeId else namedRangeName,
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(
            f'Named range content replaced with "{_preview(text)}"', result.raw
        )
