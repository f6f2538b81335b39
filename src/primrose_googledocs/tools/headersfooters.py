"""
Header, footer and footnote tools.
"""

import asyncio
from typing import Annotated

from pydantic import Field

from primrose_googledocs.errors import GoogleDocsMcpError
from primrose_googledocs.formatters import format_error, format_success
from primrose_googledocs.tools.helpers import ClientFactory, DocumentId
from primrose_googledocs.types import (
    CreateFooterReply,
    CreateFootnoteReply,
    CreateHeaderReply,
    HeaderFooterType,
)

SectionBreakIndex = Annotated[
    int | None,
    Field(ge=1, description="Section break index for a section-specific header/footer"),
]


def register_header_footer_tools(mcp, get_client: ClientFactory) -> None:
    """Register header, footer and footnote tools on the server."""

    @mcp.tool(name="googledocs_create_header")
    async def create_header(
        documentId: DocumentId,
        type: Annotated[HeaderFooterType, Field(description="Header type")] = "DEFAULT",
        sectionBreakIndex: SectionBreakIndex = None,
    ) -> str:
        """Create a header for the document, or for one section if sectionBreakIndex is given."""
        try:
            result = await asyncio.to_thread(
                get_client().create_header, documentId, type, sectionBreakIndex
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)

        reply = result.first_reply()
        suffix = (
            f" (ID: {reply.header_id})"
            if isinstance(reply, CreateHeaderReply) and reply.header_id
            else ""
        )
        return format_success(f"Header created{suffix}", result.raw)

    @mcp.tool(name="googledocs_create_footer")
    async def create_footer(
        documentId: DocumentId,
        type: Annotated[HeaderFooterType, Field(description="Footer type")] = "DEFAULT",
        sectionBreakIndex: SectionBreakIndex = None,
    ) -> str:
        """Create a footer for the document, or for one section if sectionBreakIndex is given."""
        try:
            result = await asyncio.to_thread(
                get_client().create_footer, documentId, type, sectionBreakIndex
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)

        reply = result.first_reply()
        suffix = (
            f" (ID: {reply.footer_id})"
            if isinstance(reply, CreateFooterReply) and reply.footer_id
            else ""
        )
        return format_success(f"Footer created{suffix}", result.raw)

    @mcp.tool(name="googledocs_delete_header", annotations={"destructiveHint": True})
    async def delete_header(
        documentId: DocumentId,
        headerId: Annotated[str, Field(description="ID of the header to delete")],
    ) -> str:
        """Delete a header."""
        try:
            result = await asyncio.to_thread(get_client().delete_header, documentId, headerId)
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Header {headerId} deleted", result.raw)

    @mcp.tool(name="googledocs_delete_footer", annotations={"destructiveHint": True})
    async def delete_footer(
        documentId: DocumentId,
        footerId: Annotated[str, Field(description="ID of the footer to delete")],
    ) -> str:
        """Delete a footer."""
        try:
            result = await asyncio.to_thread(get_client().delete_footer, documentId, footerId)
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Footer {footerId} deleted", result.raw)

    @mcp.tool(name="googledocs_create_footnote")
    async def create_footnote(
        documentId: DocumentId,
        index: Annotated[int, Field(ge=1, description="Position for the footnote reference")],
    ) -> str:
        """Insert a footnote reference at a position and create the footnote."""
        try:
            result = await asyncio.to_thread(get_client().create_footnote, documentId, index)
        except GoogleDocsMcpError as e:
            raise format_error(e)

        reply = result.first_reply()
        suffix = (
            f" (ID: {reply.footnote_id})"
            if isinstance(reply, CreateFootnoteReply) and reply.footnote_id
            else ""
        )
        return format_success(f"Footnote created at index {index}{suffix}", result.raw)
