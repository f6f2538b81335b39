"""
Tests for operation serialisation, reply parsing and color conversion.
"""

import pytest

from primrose_googledocs.types import (
    OPERATION_KINDS,
    OPERATION_TYPES,
    BatchUpdateResponse,
    CreateFooter,
    CreateFooterReply,
    CreateFootnoteReply,
    CreateHeader,
    CreateHeaderReply,
    CreateNamedRangeReply,
    CreateParagraphBullets,
    DeleteNamedRange,
    Dimension,
    EmptyReply,
    InsertInlineImage,
    InsertInlineImageReply,
    InsertTableRow,
    InsertText,
    MergeTableCells,
    PassthroughOperation,
    ReplaceAllText,
    ReplaceAllTextReply,
    ReplaceNamedRangeContent,
    Size,
    TableCellLocation,
    TableRange,
    UpdateTableRowStyle,
    WriteControl,
    build_batch_update_body,
    hex_to_optional_color,
    hex_to_rgb_color,
    parse_reply,
    validate_hex_color,
)


class TestValidateHexColor:
    """Tests for hex color validation."""

    def test_validate_correct_hex_colors(self):
        """Should accept 3 and 6 digit colors with or without hash."""
        assert validate_hex_color("#FF0000") is True
        assert validate_hex_color("#F00") is True
        assert validate_hex_color("00FF00") is True
        assert validate_hex_color("0f0") is True

    def test_reject_invalid_hex_colors(self):
        """Should reject invalid hex colors."""
        assert validate_hex_color("") is False
        assert validate_hex_color("#XYZ") is False
        assert validate_hex_color("#12345") is False
        assert validate_hex_color("#1234567") is False
        assert validate_hex_color("invalid") is False


class TestHexToRgbColor:
    """Tests for hex to RGB color conversion."""

    def test_convert_6_digit_hex(self):
        """Should convert 6-digit hex colors."""
        assert hex_to_rgb_color("#FF0000") == {"red": 1, "green": 0, "blue": 0}
        purple = hex_to_rgb_color("#800080")
        assert purple["red"] == pytest.approx(0.5019607843137255)
        assert purple["green"] == 0

    def test_convert_3_digit_hex(self):
        """Should expand shorthand colors."""
        assert hex_to_rgb_color("#FFF") == {"red": 1, "green": 1, "blue": 1}

    def test_return_none_for_invalid_hex(self):
        """Should return None for invalid colors."""
        assert hex_to_rgb_color("") is None
        assert hex_to_rgb_color("#12345") is None

    def test_optional_color_wrapper(self):
        """Should wrap the RGB color in the OptionalColor shape."""
        assert hex_to_optional_color("#0000FF") == {
            "color": {"rgbColor": {"red": 0, "green": 0, "blue": 1}}
        }
        assert hex_to_optional_color("nope") is None


class TestOperations:
    """Tests for Operation serialisation."""

    def test_operation_kinds_closed_set(self):
        """Should define one variant per request kind."""
        assert len(OPERATION_TYPES) == 33
        assert len(OPERATION_KINDS) == 33

    def test_insert_text_request(self):
        """Should serialise to a single insertText key."""
        request = InsertText(text="Hello", index=5).to_request()
        assert request == {"insertText": {"text": "Hello", "location": {"index": 5}}}

    def test_replace_all_text_defaults_to_case_insensitive(self):
        """Should send matchCase false unless asked."""
        request = ReplaceAllText(find_text="a", replace_text="b").to_request()
        assert request["replaceAllText"] == {
            "containsText": {"text": "a", "matchCase": False},
            "replaceText": "b",
        }

    def test_bullets_omit_unset_preset(self):
        """Should leave bulletPreset out when not given."""
        body = CreateParagraphBullets(1, 10).to_request()["createParagraphBullets"]
        assert "bulletPreset" not in body
        assert body["range"] == {"startIndex": 1, "endIndex": 10}

    def test_named_range_identifiers_omitted_when_unset(self):
        """Should send only the identifier that was given."""
        assert DeleteNamedRange(name="intro").to_request() == {
            "deleteNamedRange": {"name": "intro"}
        }
        body = ReplaceNamedRangeContent(text="t", named_range_id="nr-1").to_request()
        assert body == {"replaceNamedRangeContent": {"namedRangeId": "nr-1", "text": "t"}}

    def test_table_cell_location(self):
        """Should nest the table start location inside the cell location."""
        cell = TableCellLocation(table_start_index=2, row_index=1, column_index=0)
        request = InsertTableRow(cell).to_request()
        assert request == {
            "insertTableRow": {
                "tableCellLocation": {
                    "tableStartLocation": {"index": 2},
                    "rowIndex": 1,
                    "columnIndex": 0,
                },
                "insertBelow": True,
            }
        }

    def test_table_range(self):
        """Should carry row and column spans."""
        table_range = TableRange(TableCellLocation(2, 0, 0), row_span=2, column_span=3)
        body = MergeTableCells(table_range).to_request()["mergeTableCells"]
        assert body["tableRange"]["rowSpan"] == 2
        assert body["tableRange"]["columnSpan"] == 3

    def test_row_indices_serialised_as_list(self):
        """Should send row indices as a JSON list."""
        body = UpdateTableRowStyle(2, (0, 1), {"minRowHeight": {}}, "minRowHeight").body()
        assert body["rowIndices"] == [0, 1]

    def test_inline_image_size_optional(self):
        """Should include objectSize only when a size is given."""
        assert "objectSize" not in InsertInlineImage("https://x/y.png", 1).body()
        sized = InsertInlineImage(
            "https://x/y.png", 1, Size(Dimension(100), Dimension(50))
        ).body()
        assert sized["objectSize"] == {
            "width": {"magnitude": 100, "unit": "PT"},
            "height": {"magnitude": 50, "unit": "PT"},
        }

    def test_header_section_break_optional(self):
        """Should include sectionBreakLocation only when an index is given."""
        assert CreateHeader().body() == {"type": "DEFAULT"}
        assert CreateFooter("DEFAULT", 12).body() == {
            "type": "DEFAULT",
            "sectionBreakLocation": {"index": 12},
        }

    def test_batch_update_body_with_write_control(self):
        """Should attach writeControl only when given."""
        ops = [InsertText("a", 1)]
        assert "writeControl" not in build_batch_update_body(ops)
        body = build_batch_update_body(ops, WriteControl(required_revision_id="rev-1"))
        assert body["writeControl"] == {"requiredRevisionId": "rev-1"}


class TestPassthroughOperation:
    """Tests for caller-built requests."""

    def test_known_kind_passes_body_verbatim(self):
        """Should forward the body untouched."""
        raw = {"insertText": {"text": "x", "location": {"index": 1}, "extra": True}}
        assert PassthroughOperation.from_request(raw).to_request() == raw

    def test_unknown_kind_rejected(self):
        """Should reject request kinds outside the known set."""
        with pytest.raises(ValueError, match="Unknown request type"):
            PassthroughOperation.from_request({"deleteEverything": {}})

    def test_multiple_keys_rejected(self):
        """Should reject objects with more than one key."""
        with pytest.raises(ValueError, match="exactly one"):
            PassthroughOperation.from_request({"insertText": {}, "insertTable": {}})

    def test_empty_object_rejected(self):
        """Should reject empty request objects."""
        with pytest.raises(ValueError):
            PassthroughOperation.from_request({})


class TestReplies:
    """Tests for reply parsing."""

    def test_parse_known_replies(self):
        """Should map each reply kind to its variant."""
        assert parse_reply({"replaceAllText": {"occurrencesChanged": 3}}) == ReplaceAllTextReply(3)
        assert parse_reply({"replaceAllText": {}}) == ReplaceAllTextReply(0)
        assert parse_reply({"createNamedRange": {"namedRangeId": "nr"}}) == CreateNamedRangeReply("nr")
        assert parse_reply({"insertInlineImage": {"objectId": "img"}}) == InsertInlineImageReply("img")
        assert parse_reply({"createHeader": {"headerId": "h"}}) == CreateHeaderReply("h")
        assert parse_reply({"createFooter": {"footerId": "f"}}) == CreateFooterReply("f")
        assert parse_reply({"createFootnote": {"footnoteId": "fn"}}) == CreateFootnoteReply("fn")

    def test_empty_and_unknown_replies(self):
        """Should fall back to EmptyReply."""
        assert parse_reply({}) == EmptyReply()
        assert parse_reply(None) == EmptyReply()
        assert parse_reply({"somethingNew": {}}) == EmptyReply()

    def test_response_replies_aligned_with_requests(self):
        """Should keep one reply per request, in order."""
        payload = {
            "documentId": "doc-1",
            "replies": [{}, {"replaceAllText": {"occurrencesChanged": 2}}, {}],
            "writeControl": {"requiredRevisionId": "rev-2"},
        }
        response = BatchUpdateResponse.from_api(payload)

        assert response.document_id == "doc-1"
        assert len(response.replies) == 3
        assert response.replies[1] == ReplaceAllTextReply(2)
        assert response.write_control == WriteControl(required_revision_id="rev-2")
        assert response.raw is payload

    def test_first_reply_of_empty_response(self):
        """Should return EmptyReply when there are no replies."""
        assert BatchUpdateResponse.from_api({}).first_reply() == EmptyReply()
