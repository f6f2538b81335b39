"""
Table tools.

Cells are addressed by the table's start index plus a 0-based row and
column; spans count rows/columns from that cell.
"""

import asyncio
from typing import Annotated, Any

from pydantic import Field

from primrose_googledocs.errors import GoogleDocsMcpError
from primrose_googledocs.formatters import format_error, format_success
from primrose_googledocs.tools.helpers import (
    ClientFactory,
    ColumnIndex,
    ColumnSpan,
    DocumentId,
    RowIndex,
    RowSpan,
    StyleFields,
    TableStartIndex,
)


def register_table_tools(mcp, get_client: ClientFactory) -> None:
    """Register table tools on the server."""

    @mcp.tool(name="googledocs_insert_table")
    async def insert_table(
        documentId: DocumentId,
        rows: Annotated[int, Field(ge=1, description="Number of rows")],
        columns: Annotated[int, Field(ge=1, description="Number of columns")],
        index: Annotated[int, Field(ge=1, description="Position to insert the table")],
    ) -> str:
        """Insert an empty table at a specific position."""
        try:
            result = await asyncio.to_thread(
                get_client().insert_table, documentId, rows, columns, index
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Table ({rows}x{columns}) inserted at index {index}", result.raw)

    @mcp.tool(name="googledocs_insert_table_row")
    async def insert_table_row(
        documentId: DocumentId,
        tableStartIndex: TableStartIndex,
        rowIndex: RowIndex,
        columnIndex: ColumnIndex = 0,
        insertBelow: Annotated[bool, Field(description="Insert below the row")] = True,
    ) -> str:
        """Insert a row above or below the referenced cell's row."""
        try:
            result = await asyncio.to_thread(
                get_client().insert_table_row,
                documentId, tableStartIndex, rowIndex, columnIndex, insertBelow
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        position = "below" if insertBelow else "above"
        return format_success(f"Row inserted {position} row {rowIndex}", result.raw)

    @mcp.tool(name="googledocs_insert_table_column")
    async def insert_table_column(
        documentId: DocumentId,
        tableStartIndex: TableStartIndex,
        columnIndex: ColumnIndex,
        rowIndex: RowIndex = 0,
        insertRight: Annotated[bool, Field(description="Insert to the right")] = True,
    ) -> str:
        """Insert a column left or right of the referenced cell's column."""
        try:
            result = await asyncio.to_thread(
                get_client().insert_table_column,
                documentId, tableStartIndex, rowIndex, columnIndex, insertRight
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        position = "right of" if insertRight else "left of"
        return format_success(f"Column inserted {position} column {columnIndex}", result.raw)

    @mcp.tool(name="googledocs_delete_table_row", annotations={"destructiveHint": True})
    async def delete_table_row(
        documentId: DocumentId,
        tableStartIndex: TableStartIndex,
        rowIndex: RowIndex,
        columnIndex: ColumnIndex = 0,
    ) -> str:
        """Delete a row from a table."""
        try:
            result = await asyncio.to_thread(
                get_client().delete_table_row,
                documentId, tableStartIndex, rowIndex, columnIndex
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Row {rowIndex} deleted", result.raw)

    @mcp.tool(name="googledocs_delete_table_column", annotations={"destructiveHint": True})
    async def delete_table_column(
        documentId: DocumentId,
        tableStartIndex: TableStartIndex,
        columnIndex: ColumnIndex,
        rowIndex: RowIndex = 0,
    ) -> str:
        """Delete a column from a table."""
        try:
            result = await asyncio.to_thread(
                get_client().delete_table_column,
                documentId, tableStartIndex, rowIndex, columnIndex
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Column {columnIndex} deleted", result.raw)

    @mcp.tool(name="googledocs_merge_table_cells")
    async def merge_table_cells(
        documentId: DocumentId,
        tableStartIndex: TableStartIndex,
        rowIndex: RowIndex,
        columnIndex: ColumnIndex,
        rowSpan: RowSpan,
        columnSpan: ColumnSpan,
    ) -> str:
        """Merge a rectangular block of cells into one."""
        try:
            result = await asyncio.to_thread(
                get_client().merge_table_cells,
                documentId, tableStartIndex, rowIndex, columnIndex, rowSpan, columnSpan
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(
            f"Merged {rowSpan}x{columnSpan} cells starting at ({rowIndex}, {columnIndex})",
            result.raw,
        )

    @mcp.tool(name="googledocs_unmerge_table_cells")
    async def unmerge_table_cells(
        documentId: DocumentId,
        tableStartIndex: TableStartIndex,
        rowIndex: RowIndex,
        columnIndex: ColumnIndex,
        rowSpan: RowSpan,
        columnSpan: ColumnSpan,
    ) -> str:
        """Split previously merged cells back into individual cells."""
        try:
            result = await asyncio.to_thread(
                get_client().unmerge_table_cells,
                documentId, tableStartIndex, rowIndex, columnIndex, rowSpan, columnSpan
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Unmerged cells at ({rowIndex}, {columnIndex})", result.raw)

    @mcp.tool(name="googledocs_update_table_cell_style")
    async def update_table_cell_style(
        documentId: DocumentId,
        tableStartIndex: TableStartIndex,
        rowIndex: RowIndex,
        columnIndex: ColumnIndex,
        tableCellStyle: Annotated[dict[str, Any], Field(description="TableCellStyle object")],
        fields: StyleFields,
        rowSpan: RowSpan = 1,
        columnSpan: ColumnSpan = 1,
    ) -> str:
        """
        Style a block of table cells.

        TableCellStyle properties include backgroundColor, borderTop/Bottom/Left/Right,
        paddingTop/Bottom/Left/Right and contentAlignment (TOP, MIDDLE, BOTTOM).
        """
        try:
            result = await asyncio.to_thread(
                get_client().update_table_cell_style,
                documentId,
                tableStartIndex,
                rowIndex,
                columnIndex,
                rowSpan,
                columnSpan,
                tableCellStyle,
                fields,
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success("Table cell style updated", result.raw)

    @mcp.tool(name="googledocs_update_table_row_style")
    async def update_table_row_style(
        documentId: DocumentId,
        tableStartIndex: TableStartIndex,
        rowIndices: Annotated[
            list[Annotated[int, Field(ge=0)]],
            Field(description="Row indices to update (0-based)"),
        ],
        tableRowStyle: Annotated[dict[str, Any], Field(description="TableRowStyle object")],
        fields: StyleFields,
    ) -> str:
        """
        Style table rows.

        TableRowStyle properties include minRowHeight {magnitude, unit: "PT"},
        tableHeader and preventOverflow.
        """
        try:
            result = await asyncio.to_thread(
                get_client().update_table_row_style,
                documentId, tableStartIndex, rowIndices, tableRowStyle, fields
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        rows = ", ".join(str(i) for i in rowIndices)
        return format_success(f"Table row style updated for rows: {rows}", result.raw)

    @mcp.tool(name="googledocs_update_table_column_properties")
    async def update_table_column_properties(
        documentId: DocumentId,
        tableStartIndex: TableStartIndex,
        columnIndices: Annotated[
            list[Annotated[int, Field(ge=0)]],
            Field(description="Column indices to update (0-based)"),
        ],
        tableColumnProperties: Annotated[
            dict[str, Any], Field(description="TableColumnProperties object")
        ],
        fields: StyleFields,
    ) -> str:
        """
        Update table column properties.

        TableColumnProperties: widthType (EVENLY_DISTRIBUTED, FIXED_WIDTH) and
        width {magnitude, unit: "PT"}.
        """
        try:
            result = await asyncio.to_thread(
                get_client().update_table_column_properties,
                documentId, tableStartIndex, columnIndices, tableColumnProperties, fields
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        columns = ", ".join(str(i) for i in columnIndices)
        return format_success(
            f"Table column properties updated for columns: {columns}", result.raw
        )

    @mcp.tool(name="googledocs_pin_table_header_rows")
    async def pin_table_header_rows(
        documentId: DocumentId,
        tableStartIndex: TableStartIndex,
        pinnedHeaderRowsCount: Annotated[
            int, Field(ge=0, description="Number of header rows to pin (0 unpins)")
        ],
    ) -> str:
        """Pin the first rows of a table as header rows repeated on each page."""
        try:
            result = await asyncio.to_thread(
                get_client().pin_table_header_rows,
                documentId, tableStartIndex, pinnedHeaderRowsCount
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Pinned {pinnedHeaderRowsCount} header row(s)", result.raw)
