"""
Image and positioned-object tools.
"""

import asyncio
from typing import Annotated

from pydantic import Field

from primrose_googledocs.errors import GoogleDocsMcpError
from primrose_googledocs.formatters import format_error, format_success
from primrose_googledocs.tools.helpers import ClientFactory, DocumentId, ImageUri
from primrose_googledocs.types import InsertInlineImageReply


def register_image_tools(mcp, get_client: ClientFactory) -> None:
    """Register image tools on the server."""

    @mcp.tool(name="googledocs_insert_image")
    async def insert_image(
        documentId: DocumentId,
        uri: ImageUri,
        index: Annotated[int, Field(ge=1, description="Position to insert the image")],
        width: Annotated[
            float | None, Field(gt=0, description="Width in points (72 = 1 inch)")
        ] = None,
        height: Annotated[float | None, Field(gt=0, description="Height in points")] = None,
    ) -> str:
        """
        Insert an inline image from a public URL.

        The size is applied only when both width and height are given; otherwise
        the image keeps its natural size.
        """
        try:
            result = await asyncio.to_thread(
                get_client().insert_inline_image, documentId, uri, index, width, height
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)

        reply = result.first_reply()
        suffix = (
            f" (ID: {reply.object_id})"
            if isinstance(reply, InsertInlineImageReply) and reply.object_id
            else ""
        )
        return format_success(f"Image inserted at index {index}{suffix}", result.raw)

    @mcp.tool(name="googledocs_replace_image")
    async def replace_image(
        documentId: DocumentId,
        imageObjectId: Annotated[str, Field(description="Object ID of the image to replace")],
        uri: ImageUri,
    ) -> str:
        """Replace an existing image with one fetched from a public URL."""
        try:
            result = await asyncio.to_thread(
                get_client().replace_image, documentId, imageObjectId, uri
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Image {imageObjectId} replaced", result.raw)

    @mcp.tool(name="googledocs_delete_positioned_object", annotations={"destructiveHint": True})
    async def delete_positioned_object(
        documentId: DocumentId,
        objectId: Annotated[str, Field(description="Object ID to delete")],
    ) -> str:
        """Delete a positioned object (such as a floating image) from the document."""
        try:
            result = await asyncio.to_thread(
                get_client().delete_positioned_object, documentId, objectId
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Positioned object {objectId} deleted", result.raw)
