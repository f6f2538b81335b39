"""
Pytest configuration and fixtures for Google Docs MCP Server tests.
"""

import json

import pytest
from fastmcp import FastMCP
from googleapiclient.http import HttpMockSequence
from unittest.mock import MagicMock

from primrose_googledocs.client import GoogleDocsClient
from primrose_googledocs.credentials import TenantCredentials
from primrose_googledocs.tools import register_all_tools
from primrose_googledocs.types import BatchUpdateResponse

# Client methods that return a BatchUpdateResponse
BATCH_METHODS = [
    "batch_update",
    "insert_text",
    "delete_content",
    "replace_all_text",
    "append_text",
    "update_text_style",
    "update_paragraph_style",
    "update_document_style",
    "update_section_style",
    "create_paragraph_bullets",
    "delete_paragraph_bullets",
    "create_named_range",
    "delete_named_range",
    "replace_named_range_content",
    "insert_table",
    "insert_table_row",
    "insert_table_column",
    "delete_table_row",
    "delete_table_column",
    "merge_table_cells",
    "unmerge_table_cells",
    "update_table_cell_style",
    "update_table_row_style",
    "update_table_column_properties",
    "pin_table_header_rows",
    "insert_inline_image",
    "replace_image",
    "delete_positioned_object",
    "insert_page_break",
    "insert_section_break",
    "create_header",
    "create_footer",
    "delete_header",
    "delete_footer",
    "create_footnote",
]


class RecordingHttp(HttpMockSequence):
    """HttpMockSequence that also records every outbound request."""

    def __init__(self, iterable):
        super().__init__(iterable)
        self.requests = []

    def request(
        self,
        uri,
        method="GET",
        body=None,
        headers=None,
        redirections=1,
        connection_type=None,
    ):
        self.requests.append(
            {
                "uri": uri,
                "method": method,
                "body": json.loads(body) if body else None,
                "headers": {k.lower(): v for k, v in (headers or {}).items()},
            }
        )
        return super().request(uri, method, body, headers, redirections, connection_type)


def json_response(payload, status=200, headers=None):
    """Build one (headers, content) pair for RecordingHttp."""
    response_headers = {"status": str(status), "content-type": "application/json"}
    response_headers.update(headers or {})
    return response_headers, json.dumps(payload).encode("utf-8")


@pytest.fixture
def make_client():
    """
    Provide a factory for a real client backed by a scripted transport.

    Returns (client, http); http.requests lists what was sent.
    """

    def _make(responses, token="test-token"):
        http = RecordingHttp(list(responses))
        return GoogleDocsClient(TenantCredentials(access_token=token), http=http), http

    return _make


@pytest.fixture
def mock_docs_client():
    """
    Provide a mock GoogleDocsClient whose mutating methods succeed.
    """
    client = MagicMock(spec=GoogleDocsClient)
    response = BatchUpdateResponse.from_api({"documentId": "doc-1", "replies": [{}]})
    for name in BATCH_METHODS:
        getattr(client, name).return_value = response
    client.create_document.return_value = {"documentId": "doc-1", "title": "Untitled"}
    client.get_document.return_value = {"documentId": "doc-1", "revisionId": "rev-1"}
    client.test_connection.return_value = {"connected": True, "message": "ok"}
    return client


@pytest.fixture
def tool_server(mock_docs_client):
    """
    Provide a FastMCP server with every tool bound to the mock client.
    """
    server = FastMCP(name="test-googledocs")
    register_all_tools(server, lambda: mock_docs_client)
    return server


@pytest.fixture
def sample_document():
    """
    Provide a document whose body ends at index 50.
    """
    return {
        "documentId": "doc-1",
        "revisionId": "rev-42",
        "body": {
            "content": [
                {"endIndex": 1, "sectionBreak": {}},
                {
                    "startIndex": 1,
                    "endIndex": 50,
                    "paragraph": {
                        "elements": [
                            {
                                "startIndex": 1,
                                "endIndex": 50,
                                "textRun": {"content": "x" * 48 + "\n"},
                            }
                        ]
                    },
                },
            ]
        },
    }
