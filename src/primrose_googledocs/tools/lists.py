"""
Bulleted and numbered list tools.
"""

import asyncio
from typing import Annotated

from pydantic import Field

from primrose_googledocs.errors import GoogleDocsMcpError
from primrose_googledocs.formatters import format_error, format_success
from primrose_googledocs.tools.helpers import ClientFactory, DocumentId, EndIndex, StartIndex
from primrose_googledocs.types import BulletGlyphPreset


def register_list_tools(mcp, get_client: ClientFactory) -> None:
    """Register list tools on the server."""

    @mcp.tool(name="googledocs_create_bullets")
    async def create_bullets(
        documentId: DocumentId,
        startIndex: StartIndex,
        endIndex: EndIndex,
        bulletPreset: Annotated[
            BulletGlyphPreset | None, Field(description="Bullet or numbering style")
        ] = None,
    ) -> str:
        """
        Convert paragraphs to a bulleted or numbered list.

        Bullet presets: BULLET_DISC_CIRCLE_SQUARE, BULLET_DIAMONDX_ARROW3D_SQUARE,
        BULLET_CHECKBOX, BULLET_ARROW_DIAMOND_DISC, BULLET_STAR_CIRCLE_SQUARE,
        BULLET_ARROW3D_CIRCLE_SQUARE, BULLET_LEFTTRIANGLE_DIAMOND_DISC.

        Numbered presets: NUMBERED_DECIMAL_ALPHA_ROMAN (1, a, i),
        NUMBERED_DECIMAL_ALPHA_ROMAN_PARENS, NUMBERED_DECIMAL_NESTED (1, 1.1, 1.1.1),
        NUMBERED_UPPERALPHA_ALPHA_ROMAN, NUMBERED_UPPERROMAN_UPPERALPHA_DECIMAL,
        NUMBERED_ZERODECIMAL_ALPHA_ROMAN.
        """
        try:
            result = await asyncio.to_thread(
                get_client().create_paragraph_bullets,
                documentId, startIndex, endIndex, bulletPreset
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Bullets created from {startIndex} to {endIndex}", result.raw)

    @mcp.tool(name="googledocs_delete_bullets")
    async def delete_bullets(
        documentId: DocumentId,
        startIndex: StartIndex,
        endIndex: EndIndex,
    ) -> str:
        """Remove bullets or numbering from paragraphs in a range."""
        try:
            result = await asyncio.to_thread(
                get_client().delete_paragraph_bullets, documentId, startIndex, endIndex
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Bullets removed from {startIndex} to {endIndex}", result.raw)
