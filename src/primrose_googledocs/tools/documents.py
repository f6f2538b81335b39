"""
Document-level tools: create, get, batch update and the connection test.
"""

import asyncio
import json
from typing import Annotated, Any

from pydantic import Field

from primrose_googledocs.errors import GoogleDocsMcpError
from primrose_googledocs.formatters import format_error, format_response, format_success, reject
from primrose_googledocs.tools.helpers import ClientFactory, DocumentId
from primrose_googledocs.types import PassthroughOperation
from primrose_googledocs.utils import log


def register_document_tools(mcp, get_client: ClientFactory) -> None:
    """Register document-level tools on the server."""

    @mcp.tool(name="googledocs_create")
    async def create_document(
        title: Annotated[str, Field(description="Title for the new document")],
    ) -> str:
        """
        Create a new Google Docs document.

        Returns the created document with its ID and metadata.
        """
        try:
            document = await asyncio.to_thread(get_client().create_document, title)
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Document created: {document.get('documentId')}", document)

    @mcp.tool(name="googledocs_get", annotations={"readOnlyHint": True})
    async def get_document(documentId: DocumentId) -> str:
        """
        Get a Google Docs document by ID.

        Returns the full document with all content, styles and metadata.
        """
        try:
            document = await asyncio.to_thread(get_client().get_document, documentId)
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_response(document)

    @mcp.tool(name="googledocs_batch_update")
    async def batch_update(
        documentId: DocumentId,
        requests: Annotated[
            list[dict[str, Any]],
            Field(
                description=(
                    "Array of request objects, each with exactly one key naming the "
                    "request type, e.g. {'insertText': {'text': 'Hi', 'location': {'index': 1}}}"
                )
            ),
        ],
    ) -> str:
        """
        Apply multiple updates to a document in a single atomic request.

        The most flexible tool for complex modifications. Supported request types
        include insertText, deleteContentRange, replaceAllText, updateTextStyle,
        updateParagraphStyle, createParagraphBullets, insertTable, insertInlineImage,
        createHeader, createFooter, createFootnote, createNamedRange,
        insertPageBreak, insertSectionBreak and updateDocumentStyle.

        Returns the document ID and one reply per request, in request order.
        """
        try:
            operations = [PassthroughOperation.from_request(request) for request in requests]
        except ValueError as e:
            raise reject(str(e))

        try:
            result = await asyncio.to_thread(get_client().batch_update, documentId, operations)
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success("Batch update completed", result.raw)

    @mcp.tool(name="googledocs_test_connection")
    async def test_connection() -> str:
        """Test the connection to the Google Docs API by creating a test document."""
        try:
            client = get_client()
        except GoogleDocsMcpError as e:
            raise format_error(e)
        result = await asyncio.to_thread(client.test_connection)
        log(f"Connection test: connected={result['connected']}")
        return json.dumps(result, indent=2)
