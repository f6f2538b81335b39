"""
Type definitions for the Google Docs batchUpdate contract.

Every mutation the server performs is one of the Operation variants below.
The set mirrors the Docs API v1 Request union and is closed: each variant
serialises to a request dict with exactly one populated key.
"""

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal

# --- Enumerations ---
Alignment = Literal["START", "CENTER", "END", "JUSTIFIED"]

NamedStyleType = Literal[
    "NORMAL_TEXT",
    "TITLE",
    "SUBTITLE",
    "HEADING_1",
    "HEADING_2",
    "HEADING_3",
    "HEADING_4",
    "HEADING_5",
    "HEADING_6",
]

SectionType = Literal["CONTINUOUS", "NEXT_PAGE"]

HeaderFooterType = Literal["DEFAULT"]

BulletGlyphPreset = Literal[
    "BULLET_DISC_CIRCLE_SQUARE",
    "BULLET_DIAMONDX_ARROW3D_SQUARE",
    "BULLET_CHECKBOX",
    "BULLET_ARROW_DIAMOND_DISC",
    "BULLET_STAR_CIRCLE_SQUARE",
    "BULLET_ARROW3D_CIRCLE_SQUARE",
    "BULLET_LEFTTRIANGLE_DIAMOND_DISC",
    "NUMBERED_DECIMAL_ALPHA_ROMAN",
    "NUMBERED_DECIMAL_ALPHA_ROMAN_PARENS",
    "NUMBERED_DECIMAL_NESTED",
    "NUMBERED_UPPERALPHA_ALPHA_ROMAN",
    "NUMBERED_UPPERROMAN_UPPERALPHA_DECIMAL",
    "NUMBERED_ZERODECIMAL_ALPHA_ROMAN",
]

# --- Hex Color Regex ---
HEX_COLOR_REGEX = re.compile(r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


def validate_hex_color(color: str) -> bool:
    """Validate if a string is a valid hex color."""
    return bool(HEX_COLOR_REGEX.match(color))


def hex_to_rgb_color(hex_color: str) -> dict[str, float] | None:
    """
    Convert a hex color string to an RgbColor dict for the Docs API.

    Args:
        hex_color: Hex color string (e.g., "#FF0000" or "F00")

    Returns:
        Dictionary with 'red', 'green', 'blue' values (0.0-1.0) or None if invalid.
    """
    if not hex_color or not validate_hex_color(hex_color):
        return None

    hex_clean = hex_color.lstrip("#")
    if len(hex_clean) == 3:
        hex_clean = "".join(ch * 2 for ch in hex_clean)

    value = int(hex_clean, 16)
    return {
        "red": ((value >> 16) & 255) / 255,
        "green": ((value >> 8) & 255) / 255,
        "blue": (value & 255) / 255,
    }


def hex_to_optional_color(hex_color: str) -> dict[str, Any] | None:
    """Wrap a hex color in the OptionalColor shape used by text styles."""
    rgb = hex_to_rgb_color(hex_color)
    if rgb is None:
        return None
    return {"color": {"rgbColor": rgb}}


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    """Drop unset (None) entries so they are omitted from the request."""
    return {key: value for key, value in values.items() if value is not None}


# --- Value Shapes ---
@dataclass(frozen=True)
class Dimension:
    """A magnitude in points."""

    magnitude: float
    unit: str = "PT"

    def to_api(self) -> dict[str, Any]:
        return {"magnitude": self.magnitude, "unit": self.unit}


@dataclass(frozen=True)
class Size:
    """Width and height of an embedded object."""

    width: Dimension
    height: Dimension

    def to_api(self) -> dict[str, Any]:
        return {"width": self.width.to_api(), "height": self.height.to_api()}


@dataclass(frozen=True)
class Location:
    """A single index in the document body."""

    index: int

    def to_api(self) -> dict[str, Any]:
        return {"index": self.index}


@dataclass(frozen=True)
class Range:
    """A half-open [start_index, end_index) span of the document body."""

    start_index: int
    end_index: int

    def to_api(self) -> dict[str, Any]:
        return {"startIndex": self.start_index, "endIndex": self.end_index}


@dataclass(frozen=True)
class TableCellLocation:
    """A cell addressed by its table's start index and 0-based row/column."""

    table_start_index: int
    row_index: int = 0
    column_index: int = 0

    def to_api(self) -> dict[str, Any]:
        return {
            "tableStartLocation": Location(self.table_start_index).to_api(),
            "rowIndex": self.row_index,
            "columnIndex": self.column_index,
        }


@dataclass(frozen=True)
class TableRange:
    """A rectangular block of cells anchored at a cell location."""

    cell: TableCellLocation
    row_span: int = 1
    column_span: int = 1

    def to_api(self) -> dict[str, Any]:
        return {
            "tableCellLocation": self.cell.to_api(),
            "rowSpan": self.row_span,
            "columnSpan": self.column_span,
        }


@dataclass(frozen=True)
class WriteControl:
    """Optimistic-concurrency guard for a batch update."""

    required_revision_id: str | None = None
    target_revision_id: str | None = None

    def to_api(self) -> dict[str, Any]:
        return _compact(
            {
                "requiredRevisionId": self.required_revision_id,
                "targetRevisionId": self.target_revision_id,
            }
        )


# --- Operations ---
class Operation:
    """Base class of every batchUpdate request variant."""

    kind: ClassVar[str] = ""

    def body(self) -> dict[str, Any]:
        raise NotImplementedError

    def to_request(self) -> dict[str, Any]:
        return {self.kind: self.body()}


@dataclass(frozen=True)
class InsertText(Operation):
    kind: ClassVar[str] = "insertText"
    text: str
    index: int

    def body(self) -> dict[str, Any]:
        return {"text": self.text, "location": Location(self.index).to_api()}


@dataclass(frozen=True)
class DeleteContentRange(Operation):
    kind: ClassVar[str] = "deleteContentRange"
    start_index: int
    end_index: int

    def body(self) -> dict[str, Any]:
        return {"range": Range(self.start_index, self.end_index).to_api()}


@dataclass(frozen=True)
class ReplaceAllText(Operation):
    kind: ClassVar[str] = "replaceAllText"
    find_text: str
    replace_text: str
    match_case: bool = False

    def body(self) -> dict[str, Any]:
        return {
            "containsText": {"text": self.find_text, "matchCase": self.match_case},
            "replaceText": self.replace_text,
        }


@dataclass(frozen=True)
class UpdateTextStyle(Operation):
    kind: ClassVar[str] = "updateTextStyle"
    start_index: int
    end_index: int
    text_style: dict[str, Any]
    fields: str

    def body(self) -> dict[str, Any]:
        return {
            "range": Range(self.start_index, self.end_index).to_api(),
            "textStyle": self.text_style,
            "fields": self.fields,
        }


@dataclass(frozen=True)
class UpdateParagraphStyle(Operation):
    kind: ClassVar[str] = "updateParagraphStyle"
    start_index: int
    end_index: int
    paragraph_style: dict[str, Any]
    fields: str

    def body(self) -> dict[str, Any]:
        return {
            "range": Range(self.start_index, self.end_index).to_api(),
            "paragraphStyle": self.paragraph_style,
            "fields": self.fields,
        }


@dataclass(frozen=True)
class CreateParagraphBullets(Operation):
    kind: ClassVar[str] = "createParagraphBullets"
    start_index: int
    end_index: int
    bullet_preset: str | None = None

    def body(self) -> dict[str, Any]:
        return _compact(
            {
                "range": Range(self.start_index, self.end_index).to_api(),
                "bulletPreset": self.bullet_preset,
            }
        )


@dataclass(frozen=True)
class DeleteParagraphBullets(Operation):
    kind: ClassVar[str] = "deleteParagraphBullets"
    start_index: int
    end_index: int

    def body(self) -> dict[str, Any]:
        return {"range": Range(self.start_index, self.end_index).to_api()}


@dataclass(frozen=True)
class CreateNamedRange(Operation):
    kind: ClassVar[str] = "createNamedRange"
    name: str
    start_index: int
    end_index: int

    def body(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "range": Range(self.start_index, self.end_index).to_api(),
        }


@dataclass(frozen=True)
class DeleteNamedRange(Operation):
    kind: ClassVar[str] = "deleteNamedRange"
    named_range_id: str | None = None
    name: str | None = None

    def body(self) -> dict[str, Any]:
        return _compact({"namedRangeId": self.named_range_id, "name": self.name})


@dataclass(frozen=True)
class ReplaceNamedRangeContent(Operation):
    kind: ClassVar[str] = "replaceNamedRangeContent"
    text: str
    named_range_id: str | None = None
    named_range_name: str | None = None

    def body(self) -> dict[str, Any]:
        return _compact(
            {
                "namedRangeId": self.named_range_id,
                "namedRangeName": self.named_range_name,
                "text": self.text,
            }
        )


@dataclass(frozen=True)
class InsertTable(Operation):
    kind: ClassVar[str] = "insertTable"
    rows: int
    columns: int
    index: int

    def body(self) -> dict[str, Any]:
        return {
            "rows": self.rows,
            "columns": self.columns,
            "location": Location(self.index).to_api(),
        }


@dataclass(frozen=True)
class InsertTableRow(Operation):
    kind: ClassVar[str] = "insertTableRow"
    cell: TableCellLocation
    insert_below: bool = True

    def body(self) -> dict[str, Any]:
        return {"tableCellLocation": self.cell.to_api(), "insertBelow": self.insert_below}


@dataclass(frozen=True)
class InsertTableColumn(Operation):
    kind: ClassVar[str] = "insertTableColumn"
    cell: TableCellLocation
    insert_right: bool = True

    def body(self) -> dict[str, Any]:
        return {"tableCellLocation": self.cell.to_api(), "insertRight": self.insert_right}


@dataclass(frozen=True)
class DeleteTableRow(Operation):
    kind: ClassVar[str] = "deleteTableRow"
    cell: TableCellLocation

    def body(self) -> dict[str, Any]:
        return {"tableCellLocation": self.cell.to_api()}


@dataclass(frozen=True)
class DeleteTableColumn(Operation):
    kind: ClassVar[str] = "deleteTableColumn"
    cell: TableCellLocation

    def body(self) -> dict[str, Any]:
        return {"tableCellLocation": self.cell.to_api()}


@dataclass(frozen=True)
class MergeTableCells(Operation):
    kind: ClassVar[str] = "mergeTableCells"
    table_range: TableRange

    def body(self) -> dict[str, Any]:
        return {"tableRange": self.table_range.to_api()}


@dataclass(frozen=True)
class UnmergeTableCells(Operation):
    kind: ClassVar[str] = "unmergeTableCells"
    table_range: TableRange

    def body(self) -> dict[str, Any]:
        return {"tableRange": self.table_range.to_api()}


@dataclass(frozen=True)
class UpdateTableCellStyle(Operation):
    kind: ClassVar[str] = "updateTableCellStyle"
    table_range: TableRange
    table_cell_style: dict[str, Any]
    fields: str

    def body(self) -> dict[str, Any]:
        return {
            "tableRange": self.table_range.to_api(),
            "tableCellStyle": self.table_cell_style,
            "fields": self.fields,
        }


@dataclass(frozen=True)
class UpdateTableRowStyle(Operation):
    kind: ClassVar[str] = "updateTableRowStyle"
    table_start_index: int
    row_indices: tuple[int, ...]
    table_row_style: dict[str, Any]
    fields: str

    def body(self) -> dict[str, Any]:
        return {
            "tableStartLocation": Location(self.table_start_index).to_api(),
            "rowIndices": list(self.row_indices),
            "tableRowStyle": self.table_row_style,
            "fields": self.fields,
        }


@dataclass(frozen=True)
class UpdateTableColumnProperties(Operation):
    kind: ClassVar[str] = "updateTableColumnProperties"
    table_start_index: int
    column_indices: tuple[int, ...]
    table_column_properties: dict[str, Any]
    fields: str

    def body(self) -> dict[str, Any]:
        return {
            "tableStartLocation": Location(self.table_start_index).to_api(),
            "columnIndices": list(self.column_indices),
            "tableColumnProperties": self.table_column_properties,
            "fields": self.fields,
        }


@dataclass(frozen=True)
class PinTableHeaderRows(Operation):
    kind: ClassVar[str] = "pinTableHeaderRows"
    table_start_index: int
    pinned_header_rows_count: int

    def body(self) -> dict[str, Any]:
        return {
            "tableStartLocation": Location(self.table_start_index).to_api(),
            "pinnedHeaderRowsCount": self.pinned_header_rows_count,
        }


@dataclass(frozen=True)
class InsertInlineImage(Operation):
    kind: ClassVar[str] = "insertInlineImage"
    uri: str
    index: int
    object_size: Size | None = None

    def body(self) -> dict[str, Any]:
        return _compact(
            {
                "uri": self.uri,
                "location": Location(self.index).to_api(),
                "objectSize": self.object_size.to_api() if self.object_size else None,
            }
        )


@dataclass(frozen=True)
class ReplaceImage(Operation):
    kind: ClassVar[str] = "replaceImage"
    image_object_id: str
    uri: str

    def body(self) -> dict[str, Any]:
        return {"imageObjectId": self.image_object_id, "uri": self.uri}


@dataclass(frozen=True)
class DeletePositionedObject(Operation):
    kind: ClassVar[str] = "deletePositionedObject"
    object_id: str

    def body(self) -> dict[str, Any]:
        return {"objectId": self.object_id}


@dataclass(frozen=True)
class InsertPageBreak(Operation):
    kind: ClassVar[str] = "insertPageBreak"
    index: int

    def body(self) -> dict[str, Any]:
        return {"location": Location(self.index).to_api()}


@dataclass(frozen=True)
class InsertSectionBreak(Operation):
    kind: ClassVar[str] = "insertSectionBreak"
    index: int
    section_type: str = "NEXT_PAGE"

    def body(self) -> dict[str, Any]:
        return {"location": Location(self.index).to_api(), "sectionType": self.section_type}


@dataclass(frozen=True)
class CreateHeader(Operation):
    kind: ClassVar[str] = "createHeader"
    type: str = "DEFAULT"
    section_break_index: int | None = None

    def body(self) -> dict[str, Any]:
        location = (
            Location(self.section_break_index).to_api() if self.section_break_index else None
        )
        return _compact({"type": self.type, "sectionBreakLocation": location})


@dataclass(frozen=True)
class CreateFooter(Operation):
    kind: ClassVar[str] = "createFooter"
    type: str = "DEFAULT"
    section_break_index: int | None = None

    def body(self) -> dict[str, Any]:
        location = (
            Location(self.section_break_index).to_api() if self.section_break_index else None
        )
        return _compact({"type": self.type, "sectionBreakLocation": location})


@dataclass(frozen=True)
class DeleteHeader(Operation):
    kind: ClassVar[str] = "deleteHeader"
    header_id: str

    def body(self) -> dict[str, Any]:
        return {"headerId": self.header_id}


@dataclass(frozen=True)
class DeleteFooter(Operation):
    kind: ClassVar[str] = "deleteFooter"
    footer_id: str

    def body(self) -> dict[str, Any]:
        return {"footerId": self.footer_id}


@dataclass(frozen=True)
class CreateFootnote(Operation):
    kind: ClassVar[str] = "createFootnote"
    index: int

    def body(self) -> dict[str, Any]:
        return {"location": Location(self.index).to_api()}


@dataclass(frozen=True)
class UpdateDocumentStyle(Operation):
    kind: ClassVar[str] = "updateDocumentStyle"
    document_style: dict[str, Any]
    fields: str

    def body(self) -> dict[str, Any]:
        return {"documentStyle": self.document_style, "fields": self.fields}


@dataclass(frozen=True)
class UpdateSectionStyle(Operation):
    kind: ClassVar[str] = "updateSectionStyle"
    start_index: int
    end_index: int
    section_style: dict[str, Any]
    fields: str

    def body(self) -> dict[str, Any]:
        return {
            "range": Range(self.start_index, self.end_index).to_api(),
            "sectionStyle": self.section_style,
            "fields": self.fields,
        }


OPERATION_TYPES: tuple[type[Operation], ...] = (
    InsertText,
    DeleteContentRange,
    ReplaceAllText,
    UpdateTextStyle,
    UpdateParagraphStyle,
    CreateParagraphBullets,
    DeleteParagraphBullets,
    CreateNamedRange,
    DeleteNamedRange,
    ReplaceNamedRangeContent,
    InsertTable,
    InsertTableRow,
    InsertTableColumn,
    DeleteTableRow,
    DeleteTableColumn,
    MergeTableCells,
    UnmergeTableCells,
    UpdateTableCellStyle,
    UpdateTableRowStyle,
    UpdateTableColumnProperties,
    PinTableHeaderRows,
    InsertInlineImage,
    ReplaceImage,
    DeletePositionedObject,
    InsertPageBreak,
    InsertSectionBreak,
    CreateHeader,
    CreateFooter,
    DeleteHeader,
    DeleteFooter,
    CreateFootnote,
    UpdateDocumentStyle,
    UpdateSectionStyle,
)

OPERATION_KINDS: frozenset[str] = frozenset(op.kind for op in OPERATION_TYPES)


@dataclass(frozen=True)
class PassthroughOperation(Operation):
    """
    A caller-built request forwarded without field-level validation.

    Only the request kind is checked against the known set; the body is
    sent exactly as given.
    """

    op_kind: str
    payload: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.op_kind not in OPERATION_KINDS:
            raise ValueError(f"Unknown request type: {self.op_kind!r}")

    def body(self) -> dict[str, Any]:
        return self.payload

    def to_request(self) -> dict[str, Any]:
        return {self.op_kind: self.payload}

    @classmethod
    def from_request(cls, request: dict[str, Any]) -> "PassthroughOperation":
        """
        Wrap a raw request dict such as ``{"insertText": {...}}``.

        Raises:
            ValueError: If the dict does not hold exactly one known request type
        """
        if not isinstance(request, dict) or len(request) != 1:
            raise ValueError("Each request must be an object with exactly one request type key")
        op_kind, payload = next(iter(request.items()))
        if not isinstance(payload, dict):
            raise ValueError(f"Request body for {op_kind!r} must be an object")
        return cls(op_kind=op_kind, payload=payload)


def build_batch_update_body(
    operations: list[Operation], write_control: WriteControl | None = None
) -> dict[str, Any]:
    """Serialise operations into a BatchUpdateDocumentRequest body."""
    body: dict[str, Any] = {"requests": [op.to_request() for op in operations]}
    if write_control is not None:
        body["writeControl"] = write_control.to_api()
    return body


# --- Replies ---
@dataclass(frozen=True)
class EmptyReply:
    """Reply for requests that return nothing (most of them)."""


@dataclass(frozen=True)
class ReplaceAllTextReply:
    occurrences_changed: int = 0


@dataclass(frozen=True)
class CreateNamedRangeReply:
    named_range_id: str


@dataclass(frozen=True)
class InsertInlineImageReply:
    object_id: str


@dataclass(frozen=True)
class InsertInlineSheetsChartReply:
    object_id: str


@dataclass(frozen=True)
class CreateHeaderReply:
    header_id: str


@dataclass(frozen=True)
class CreateFooterReply:
    footer_id: str


@dataclass(frozen=True)
class CreateFootnoteReply:
    footnote_id: str


Reply = (
    EmptyReply
    | ReplaceAllTextReply
    | CreateNamedRangeReply
    | InsertInlineImageReply
    | InsertInlineSheetsChartReply
    | CreateHeaderReply
    | CreateFooterReply
    | CreateFootnoteReply
)


def parse_reply(payload: dict[str, Any] | None) -> Reply:
    """Map one reply dict from a batchUpdate response to its variant."""
    if not payload:
        return EmptyReply()
    if "replaceAllText" in payload:
        return ReplaceAllTextReply(
            occurrences_changed=payload["replaceAllText"].get("occurrencesChanged", 0)
        )
    if "createNamedRange" in payload:
        return CreateNamedRangeReply(payload["createNamedRange"].get("namedRangeId", ""))
    if "insertInlineImage" in payload:
        return InsertInlineImageReply(payload["insertInlineImage"].get("objectId", ""))
    if "insertInlineSheetsChart" in payload:
        return InsertInlineSheetsChartReply(
            payload["insertInlineSheetsChart"].get("objectId", "")
        )
    if "createHeader" in payload:
        return CreateHeaderReply(payload["createHeader"].get("headerId", ""))
    if "createFooter" in payload:
        return CreateFooterReply(payload["createFooter"].get("footerId", ""))
    if "createFootnote" in payload:
        return CreateFootnoteReply(payload["createFootnote"].get("footnoteId", ""))
    return EmptyReply()


@dataclass(frozen=True)
class BatchUpdateResponse:
    """Typed view of a batchUpdate response; ``raw`` is the API payload."""

    document_id: str
    replies: tuple[Reply, ...] = ()
    write_control: WriteControl | None = None
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, payload: dict[str, Any] | None) -> "BatchUpdateResponse":
        payload = payload or {}
        write_control = payload.get("writeControl")
        return cls(
            document_id=payload.get("documentId", ""),
            replies=tuple(parse_reply(reply) for reply in payload.get("replies", [])),
            write_control=(
                WriteControl(
                    required_revision_id=write_control.get("requiredRevisionId"),
                    target_revision_id=write_control.get("targetRevisionId"),
                )
                if write_control
                else None
            ),
            raw=payload,
        )

    def first_reply(self) -> Reply:
        return self.replies[0] if self.replies else EmptyReply()
