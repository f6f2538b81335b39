"""
Text content tools: insert, delete, replace, append and breaks.
"""

import asyncio
from typing import Annotated

from pydantic import Field

from primrose_googledocs.errors import GoogleDocsMcpError
from primrose_googledocs.formatters import format_error, format_success
from primrose_googledocs.tools.helpers import ClientFactory, DocumentId, EndIndex, StartIndex
from primrose_googledocs.types import ReplaceAllTextReply, SectionType


def register_content_tools(mcp, get_client: ClientFactory) -> None:
    """Register content manipulation tools on the server."""

    @mcp.tool(name="googledocs_insert_text")
    async def insert_text(
        documentId: DocumentId,
        text: Annotated[str, Field(description="The text to insert")],
        index: Annotated[int, Field(ge=1, description="Position to insert at (1-based)")],
    ) -> str:
        """
        Insert text at a specific position in the document.

        Document indices are 1-based; the body content starts at index 1.
        """
        try:
            result = await asyncio.to_thread(get_client().insert_text, documentId, text, index)
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Text inserted at index {index}", result.raw)

    @mcp.tool(name="googledocs_delete_content", annotations={"destructiveHint": True})
    async def delete_content(
        documentId: DocumentId,
        startIndex: StartIndex,
        endIndex: EndIndex,
    ) -> str:
        """Delete content within a range [startIndex, endIndex) of the document."""
        try:
            result = await asyncio.to_thread(
                get_client().delete_content, documentId, startIndex, endIndex
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Content deleted from {startIndex} to {endIndex}", result.raw)

    @mcp.tool(name="googledocs_replace_text")
    async def replace_text(
        documentId: DocumentId,
        findText: Annotated[str, Field(description="The text to find")],
        replaceText: Annotated[str, Field(description="The replacement text")],
        matchCase: Annotated[bool, Field(description="Whether to match case")] = False,
    ) -> str:
        """
        Replace all occurrences of text in the document.

        Reports the number of occurrences replaced.
        """
        try:
            result = await asyncio.to_thread(
                get_client().replace_all_text, documentId, findText, replaceText, matchCase
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)

        reply = result.first_reply()
        occurrences = reply.occurrences_changed if isinstance(reply, ReplaceAllTextReply) else 0
        return format_success(f'Replaced {occurrences} occurrence(s) of "{findText}"', result.raw)

    @mcp.tool(name="googledocs_append_text")
    async def append_text(
        documentId: DocumentId,
        text: Annotated[str, Field(description="The text to append")],
        requireRevision: Annotated[
            bool,
            Field(
                description=(
                    "Reject the append if the document changes between reading its "
                    "end position and writing"
                )
            ),
        ] = False,
    ) -> str:
        """
        Append text to the end of the document.

        Reads the document to find its end, then inserts just before the final newline.
        """
        try:
            result = await asyncio.to_thread(
                get_client().append_text, documentId, text, guard_revision=requireRevision
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success("Text appended to document", result.raw)

    @mcp.tool(name="googledocs_insert_page_break")
    async def insert_page_break(
        documentId: DocumentId,
        index: Annotated[int, Field(ge=1, description="Position for the page break")],
    ) -> str:
        """Insert a page break at a specific position."""
        try:
            result = await asyncio.to_thread(get_client().insert_page_break, documentId, index)
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Page break inserted at index {index}", result.raw)

    @mcp.tool(name="googledocs_insert_section_break")
    async def insert_section_break(
        documentId: DocumentId,
        index: Annotated[int, Field(ge=1, description="Position for the section break")],
        sectionType: Annotated[SectionType, Field(description="Section break type")] = "NEXT_PAGE",
    ) -> str:
        """Insert a section break (CONTINUOUS or NEXT_PAGE) at a specific position."""
        try:
            result = await asyncio.to_thread(
                get_client().insert_section_break, documentId, index, sectionType
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(
            f"Section break ({sectionType}) inserted at index {index}", result.raw
        )
