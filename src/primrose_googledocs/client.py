"""
Google Docs API client.

A thin wrapper over the googleapiclient "docs" v1 service. Every mutation
goes through batch_update(); the remaining methods only build Operation
values for it. Failures are classified into the errors in
primrose_googledocs.errors and are never retried.
"""

import json
from typing import Any

import google_auth_httplib2
import httplib2
from google.auth.exceptions import RefreshError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from primrose_googledocs.config import ACCESS_TOKEN_HEADER
from primrose_googledocs.credentials import TenantCredentials
from primrose_googledocs.errors import (
    AuthenticationError,
    GoogleDocsApiError,
    GoogleDocsMcpError,
    RateLimitError,
)
from primrose_googledocs.types import (
    BatchUpdateResponse,
    CreateFooter,
    CreateFootnote,
    CreateHeader,
    CreateNamedRange,
    CreateParagraphBullets,
    DeleteContentRange,
    DeleteFooter,
    DeleteHeader,
    DeleteNamedRange,
    DeleteParagraphBullets,
    DeletePositionedObject,
    DeleteTableColumn,
    DeleteTableRow,
    Dimension,
    InsertInlineImage,
    InsertPageBreak,
    InsertSectionBreak,
    InsertTable,
    InsertTableColumn,
    InsertTableRow,
    InsertText,
    MergeTableCells,
    Operation,
    PinTableHeaderRows,
    ReplaceAllText,
    ReplaceImage,
    ReplaceNamedRangeContent,
    Size,
    TableCellLocation,
    TableRange,
    UnmergeTableCells,
    UpdateDocumentStyle,
    UpdateParagraphStyle,
    UpdateSectionStyle,
    UpdateTableCellStyle,
    UpdateTableColumnProperties,
    UpdateTableRowStyle,
    UpdateTextStyle,
    WriteControl,
    build_batch_update_body,
)
from primrose_googledocs.utils import log

DEFAULT_RETRY_AFTER = 60
CONNECTION_TEST_TITLE = "MCP Connection Test"


def _parse_retry_after(value: str | None) -> int:
    if value is None:
        return DEFAULT_RETRY_AFTER
    try:
        return int(str(value).strip())
    except ValueError:
        return DEFAULT_RETRY_AFTER


def _error_message(status: int, content: bytes | str | None) -> str:
    """Pull error.message, then message, out of an error body."""
    fallback = f"API error: {status}"
    if not content:
        return fallback
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    try:
        payload = json.loads(content)
    except ValueError:
        return fallback
    if not isinstance(payload, dict):
        return fallback

    error = payload.get("error")
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    if payload.get("message"):
        return payload["message"]
    return fallback


def classify_http_error(error: HttpError) -> GoogleDocsMcpError:
    """
    Map a non-success API answer to the error taxonomy.

    Checked in order: 429, then 401/403, then anything else.
    """
    status = error.resp.status
    if status == 429:
        return RateLimitError(
            "Rate limit exceeded", _parse_retry_after(error.resp.get("retry-after"))
        )
    if status in (401, 403):
        return AuthenticationError("Authentication failed. Check your OAuth access token.")
    return GoogleDocsApiError(_error_message(status, error.content), status)


class GoogleDocsClient:
    """Google Docs API client bound to one tenant's access token."""

    def __init__(
        self,
        credentials: TenantCredentials,
        http: Any = None,
        api_endpoint: str | None = None,
        timeout: int = 30,
    ):
        """
        Args:
            credentials: Tenant credentials for this request
            http: Optional base httplib2-compatible transport (tests pass a mock)
            api_endpoint: Optional override of the Docs API root URL
            timeout: Socket timeout in seconds for the default transport
        """
        self._credentials = credentials
        self._base_http = http
        self._api_endpoint = api_endpoint
        self._timeout = timeout
        self._docs = None

    def _service(self):
        if not self._credentials.access_token:
            raise AuthenticationError(
                f"No access token provided. Include {ACCESS_TOKEN_HEADER} header."
            )
        if self._docs is None:
            google_credentials = Credentials(token=self._credentials.access_token)
            # Tenants supply short-lived tokens; there is nothing to refresh with
            authed_http = google_auth_httplib2.AuthorizedHttp(
                google_credentials,
                http=self._base_http or httplib2.Http(timeout=self._timeout),
                refresh_status_codes=(),
            )
            client_options = {"api_endpoint": self._api_endpoint} if self._api_endpoint else None
            self._docs = build(
                "docs",
                "v1",
                http=authed_http,
                client_options=client_options,
                static_discovery=True,
                cache_discovery=False,
            )
        return self._docs

    def _execute(self, request, description: str) -> dict:
        log(f"Calling Docs API: {description}")
        try:
            response = request.execute(num_retries=0)
        except HttpError as e:
            error = classify_http_error(e)
            log(f"Docs API {description} failed ({e.resp.status}): {error.message}")
            raise error from e
        except RefreshError as e:
            log(f"Docs API {description} failed: token refresh rejected")
            raise AuthenticationError(
                "Authentication failed. Check your OAuth access token."
            ) from e
        except (httplib2.HttpLib2Error, OSError) as e:
            log(f"Docs API {description} failed: {e}")
            raise GoogleDocsApiError(f"Request to Google Docs API failed: {e}") from e
        except ValueError as e:
            # Body that does not decode as JSON
            log(f"Docs API {description} returned an unreadable body: {e}")
            raise GoogleDocsApiError(f"Invalid response from Google Docs API: {e}") from e
        # 204 No Content comes back as an empty dict
        return response or {}

    # --- Connection ---
    def test_connection(self) -> dict[str, Any]:
        """Verify the token by creating a throwaway document. Never raises."""
        try:
            document = self.create_document(CONNECTION_TEST_TITLE)
        except GoogleDocsMcpError as e:
            return {"connected": False, "message": e.message}
        return {
            "connected": True,
            "message": (
                "Successfully connected to Google Docs API. "
                f"Test document created with ID: {document.get('documentId')}"
            ),
        }

    # --- Documents ---
    def create_document(self, title: str) -> dict:
        docs = self._service()
        return self._execute(docs.documents().create(body={"title": title}), "documents.create")

    def get_document(self, document_id: str) -> dict:
        docs = self._service()
        return self._execute(
            docs.documents().get(documentId=document_id), f"documents.get {document_id}"
        )

    def batch_update(
        self,
        document_id: str,
        operations: list[Operation],
        write_control: WriteControl | None = None,
    ) -> BatchUpdateResponse:
        """
        Apply operations atomically. The sole mutating primitive.

        Args:
            document_id: Target document
            operations: Ordered operations; replies come back in the same order
            write_control: Optional revision guard

        Returns:
            BatchUpdateResponse with positionally aligned replies
        """
        docs = self._service()
        body = build_batch_update_body(operations, write_control)
        payload = self._execute(
            docs.documents().batchUpdate(documentId=document_id, body=body),
            f"documents.batchUpdate {document_id} ({len(operations)} requests)",
        )
        return BatchUpdateResponse.from_api(payload)

    # --- Text ---
    def insert_text(self, document_id: str, text: str, index: int) -> BatchUpdateResponse:
        return self.batch_update(document_id, [InsertText(text=text, index=index)])

    def delete_content(
        self, document_id: str, start_index: int, end_index: int
    ) -> BatchUpdateResponse:
        return self.batch_update(
            document_id, [DeleteContentRange(start_index=start_index, end_index=end_index)]
        )

    def replace_all_text(
        self, document_id: str, find_text: str, replace_text: str, match_case: bool = False
    ) -> BatchUpdateResponse:
        return self.batch_update(
            document_id,
            [ReplaceAllText(find_text=find_text, replace_text=replace_text, match_case=match_case)],
        )

    def append_text(
        self, document_id: str, text: str, guard_revision: bool = False
    ) -> BatchUpdateResponse:
        """
        Insert text just before the final newline of the body.

        With guard_revision the insert is pinned to the revision that was read,
        so a concurrent edit in between makes the API reject it.
        """
        document = self.get_document(document_id)
        content = document.get("body", {}).get("content", [])
        end_index = content[-1].get("endIndex", 1) if content else 1
        index = max(1, end_index - 1)

        write_control = None
        if guard_revision and document.get("revisionId"):
            write_control = WriteControl(required_revision_id=document["revisionId"])
        return self.batch_update(document_id, [InsertText(text=text, index=index)], write_control)

    # --- Styling ---
    def update_text_style(
        self,
        document_id: str,
        start_index: int,
        end_index: int,
        text_style: dict[str, Any],
        fields: str,
    ) -> BatchUpdateResponse:
        return self.batch_update(
            document_id, [UpdateTextStyle(start_index, end_index, text_style, fields)]
        )

    def update_paragraph_style(
        self,
        document_id: str,
        start_index: int,
        end_index: int,
        paragraph_style: dict[str, Any],
        fields: str,
    ) -> BatchUpdateResponse:
        return self.batch_update(
            document_id, [UpdateParagraphStyle(start_index, end_index, paragraph_style, fields)]
        )

    def update_document_style(
        self, document_id: str, document_style: dict[str, Any], fields: str
    ) -> BatchUpdateResponse:
        return self.batch_update(document_id, [UpdateDocumentStyle(document_style, fields)])

    def update_section_style(
        self,
        document_id: str,
        start_index: int,
        end_index: int,
        section_style: dict[str, Any],
        fields: str,
    ) -> BatchUpdateResponse:
        return self.batch_update(
            document_id, [UpdateSectionStyle(start_index, end_index, section_style, fields)]
        )

    # --- Lists ---
    def create_paragraph_bullets(
        self,
        document_id: str,
        start_index: int,
        end_index: int,
        bullet_preset: str | None = None,
    ) -> BatchUpdateResponse:
        return self.batch_update(
            document_id, [CreateParagraphBullets(start_index, end_index, bullet_preset)]
        )

    def delete_paragraph_bullets(
        self, document_id: str, start_index: int, end_index: int
    ) -> BatchUpdateResponse:
        return self.batch_update(document_id, [DeleteParagraphBullets(start_index, end_index)])

    # --- Named ranges ---
    def create_named_range(
        self, document_id: str, name: str, start_index: int, end_index: int
    ) -> BatchUpdateResponse:
        return self.batch_update(document_id, [CreateNamedRange(name, start_index, end_index)])

    def delete_named_range(
        self, document_id: str, named_range_id: str | None = None, name: str | None = None
    ) -> BatchUpdateResponse:
        return self.batch_update(
            document_id, [DeleteNamedRange(named_range_id=named_range_id, name=name)]
        )

    def replace_named_range_content(
        self,
        document_id: str,
        text: str,
        named_range_id: str | None = None,
        named_range_name: str | None = None,
    ) -> BatchUpdateResponse:
        return self.batch_update(
            document_id,
            [
                ReplaceNamedRangeContent(
                    text=text, named_range_id=named_range_id, named_range_name=named_range_name
                )
            ],
        )

    # --- Tables ---
    def insert_table(
        self, document_id: str, rows: int, columns: int, index: int
    ) -> BatchUpdateResponse:
        return self.batch_update(document_id, [InsertTable(rows, columns, index)])

    def insert_table_row(
        self,
        document_id: str,
        table_start_index: int,
        row_index: int,
        column_index: int = 0,
        insert_below: bool = True,
    ) -> BatchUpdateResponse:
        cell = TableCellLocation(table_start_index, row_index, column_index)
        return self.batch_update(document_id, [InsertTableRow(cell, insert_below)])

    def insert_table_column(
        self,
        document_id: str,
        table_start_index: int,
        row_index: int,
        column_index: int,
        insert_right: bool = True,
    ) -> BatchUpdateResponse:
        cell = TableCellLocation(table_start_index, row_index, column_index)
        return self.batch_update(document_id, [InsertTableColumn(cell, insert_right)])

    def delete_table_row(
        self, document_id: str, table_start_index: int, row_index: int, column_index: int = 0
    ) -> BatchUpdateResponse:
        cell = TableCellLocation(table_start_index, row_index, column_index)
        return self.batch_update(document_id, [DeleteTableRow(cell)])

    def delete_table_column(
        self, document_id: str, table_start_index: int, row_index: int, column_index: int
    ) -> BatchUpdateResponse:
        cell = TableCellLocation(table_start_index, row_index, column_index)
        return self.batch_update(document_id, [DeleteTableColumn(cell)])

    def merge_table_cells(
        self,
        document_id: str,
        table_start_index: int,
        row_index: int,
        column_index: int,
        row_span: int,
        column_span: int,
    ) -> BatchUpdateResponse:
        table_range = TableRange(
            TableCellLocation(table_start_index, row_index, column_index), row_span, column_span
        )
        return self.batch_update(document_id, [MergeTableCells(table_range)])

    def unmerge_table_cells(
        self,
        document_id: str,
        table_start_index: int,
        row_index: int,
        column_index: int,
        row_span: int,
        column_span: int,
    ) -> BatchUpdateResponse:
        table_range = TableRange(
            TableCellLocation(table_start_index, row_index, column_index), row_span, column_span
        )
        return self.batch_update(document_id, [UnmergeTableCells(table_range)])

    def update_table_cell_style(
        self,
        document_id: str,
        table_start_index: int,
        row_index: int,
        column_index: int,
        row_span: int,
        column_span: int,
        table_cell_style: dict[str, Any],
        fields: str,
    ) -> BatchUpdateResponse:
        table_range = TableRange(
            TableCellLocation(table_start_index, row_index, column_index), row_span, column_span
        )
        return self.batch_update(
            document_id, [UpdateTableCellStyle(table_range, table_cell_style, fields)]
        )

    def update_table_row_style(
        self,
        document_id: str,
        table_start_index: int,
        row_indices: list[int],
        table_row_style: dict[str, Any],
        fields: str,
    ) -> BatchUpdateResponse:
        return self.batch_update(
            document_id,
            [UpdateTableRowStyle(table_start_index, tuple(row_indices), table_row_style, fields)],
        )

    def update_table_column_properties(
        self,
        document_id: str,
        table_start_index: int,
        column_indices: list[int],
        table_column_properties: dict[str, Any],
        fields: str,
    ) -> BatchUpdateResponse:
        return self.batch_update(
            document_id,
            [
                UpdateTableColumnProperties(
                    table_start_index, tuple(column_indices), table_column_properties, fields
                )
            ],
        )

    def pin_table_header_rows(
        self, document_id: str, table_start_index: int, pinned_header_rows_count: int
    ) -> BatchUpdateResponse:
        return self.batch_update(
            document_id, [PinTableHeaderRows(table_start_index, pinned_header_rows_count)]
        )

    # --- Images ---
    def insert_inline_image(
        self,
        document_id: str,
        uri: str,
        index: int,
        width: float | None = None,
        height: float | None = None,
    ) -> BatchUpdateResponse:
        size = None
        if width and height:
            size = Size(width=Dimension(width), height=Dimension(height))
        return self.batch_update(document_id, [InsertInlineImage(uri, index, size)])

    def replace_image(
        self, document_id: str, image_object_id: str, uri: str
    ) -> BatchUpdateResponse:
        return self.batch_update(document_id, [ReplaceImage(image_object_id, uri)])

    def delete_positioned_object(self, document_id: str, object_id: str) -> BatchUpdateResponse:
        return self.batch_update(document_id, [DeletePositionedObject(object_id)])

    # --- Breaks ---
    def insert_page_break(self, document_id: str, index: int) -> BatchUpdateResponse:
        return self.batch_update(document_id, [InsertPageBreak(index)])

    def insert_section_break(
        self, document_id: str, index: int, section_type: str = "NEXT_PAGE"
    ) -> BatchUpdateResponse:
        return self.batch_update(document_id, [InsertSectionBreak(index, section_type)])

    # --- Headers, footers and footnotes ---
    def create_header(
        self, document_id: str, type: str = "DEFAULT", section_break_index: int | None = None
    ) -> BatchUpdateResponse:
        return self.batch_update(document_id, [CreateHeader(type, section_break_index)])

    def create_footer(
        self, document_id: str, type: str = "DEFAULT", section_break_index: int | None = None
    ) -> BatchUpdateResponse:
        return self.batch_update(document_id, [CreateFooter(type, section_break_index)])

    def delete_header(self, document_id: str, header_id: str) -> BatchUpdateResponse:
        return self.batch_update(document_id, [DeleteHeader(header_id)])

    def delete_footer(self, document_id: str, footer_id: str) -> BatchUpdateResponse:
        return self.batch_update(document_id, [DeleteFooter(footer_id)])

    def create_footnote(self, document_id: str, index: int) -> BatchUpdateResponse:
        return self.batch_update(document_id, [CreateFootnote(index)])


def create_google_docs_client(
    credentials: TenantCredentials,
    http: Any = None,
    api_endpoint: str | None = None,
    timeout: int = 30,
) -> GoogleDocsClient:
    """Build a client for one request's credentials."""
    return GoogleDocsClient(credentials, http=http, api_endpoint=api_endpoint, timeout=timeout)
