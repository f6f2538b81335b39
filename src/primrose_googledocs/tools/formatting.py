"""
Text, paragraph, document and section styling tools.

format_text and format_paragraph build the style object and its field
mask from whichever arguments were given; the update_* tools forward a
caller-built style object and mask unchanged.
"""

import asyncio
from typing import Annotated, Any

from pydantic import Field

from primrose_googledocs.errors import GoogleDocsMcpError
from primrose_googledocs.formatters import format_error, format_success, reject
from primrose_googledocs.tools.helpers import (
    ClientFactory,
    DocumentId,
    EndIndex,
    StartIndex,
    StyleFields,
)
from primrose_googledocs.types import (
    Alignment,
    Dimension,
    NamedStyleType,
    hex_to_optional_color,
)


def build_text_style(
    bold: bool | None = None,
    italic: bool | None = None,
    underline: bool | None = None,
    strikethrough: bool | None = None,
    font_size: float | None = None,
    font_family: str | None = None,
    foreground_color: str | None = None,
    background_color: str | None = None,
    link_url: str | None = None,
) -> tuple[dict[str, Any], list[str]]:
    """
    Build a TextStyle dict and its field mask from the given arguments.

    Returns:
        (text_style, fields); fields is empty when nothing was given

    Raises:
        ValueError: If a color is not a valid hex color
    """
    text_style: dict[str, Any] = {}
    fields: list[str] = []

    for name, value in (
        ("bold", bold),
        ("italic", italic),
        ("underline", underline),
        ("strikethrough", strikethrough),
    ):
        if value is not None:
            text_style[name] = value
            fields.append(name)

    if font_size is not None:
        text_style["fontSize"] = Dimension(font_size).to_api()
        fields.append("fontSize")
    if font_family is not None:
        text_style["weightedFontFamily"] = {"fontFamily": font_family}
        fields.append("weightedFontFamily")

    if foreground_color is not None:
        color = hex_to_optional_color(foreground_color)
        if color is None:
            raise ValueError(f"Invalid foreground hex color format: {foreground_color}")
        text_style["foregroundColor"] = color
        fields.append("foregroundColor")
    if background_color is not None:
        color = hex_to_optional_color(background_color)
        if color is None:
            raise ValueError(f"Invalid background hex color format: {background_color}")
        text_style["backgroundColor"] = color
        fields.append("backgroundColor")

    if link_url is not None:
        text_style["link"] = {"url": link_url}
        fields.append("link")

    return text_style, fields


def build_paragraph_style(
    alignment: str | None = None,
    heading_type: str | None = None,
    line_spacing: float | None = None,
    space_above: float | None = None,
    space_below: float | None = None,
) -> tuple[dict[str, Any], list[str]]:
    """Build a ParagraphStyle dict and its field mask from the given arguments."""
    paragraph_style: dict[str, Any] = {}
    fields: list[str] = []

    if alignment:
        paragraph_style["alignment"] = alignment
        fields.append("alignment")
    if heading_type:
        paragraph_style["namedStyleType"] = heading_type
        fields.append("namedStyleType")
    if line_spacing is not None:
        paragraph_style["lineSpacing"] = line_spacing
        fields.append("lineSpacing")
    if space_above is not None:
        paragraph_style["spaceAbove"] = Dimension(space_above).to_api()
        fields.append("spaceAbove")
    if space_below is not None:
        paragraph_style["spaceBelow"] = Dimension(space_below).to_api()
        fields.append("spaceBelow")

    return paragraph_style, fields


def register_formatting_tools(mcp, get_client: ClientFactory) -> None:
    """Register formatting tools on the server."""

    @mcp.tool(name="googledocs_format_text")
    async def format_text(
        documentId: DocumentId,
        startIndex: StartIndex,
        endIndex: EndIndex,
        bold: Annotated[bool | None, Field(description="Make text bold")] = None,
        italic: Annotated[bool | None, Field(description="Make text italic")] = None,
        underline: Annotated[bool | None, Field(description="Underline text")] = None,
        strikethrough: Annotated[bool | None, Field(description="Strikethrough text")] = None,
        fontSize: Annotated[float | None, Field(gt=0, description="Font size in points")] = None,
        fontFamily: Annotated[str | None, Field(description="Font family name")] = None,
        foregroundColor: Annotated[
            str | None, Field(description="Text color in hex format (e.g. '#FF0000')")
        ] = None,
        backgroundColor: Annotated[
            str | None, Field(description="Highlight color in hex format (e.g. '#FFFF00')")
        ] = None,
        linkUrl: Annotated[str | None, Field(description="Make text a hyperlink to this URL")] = None,
    ) -> str:
        """
        Apply basic formatting to a text range.

        A simplified tool for common styles such as bold, italic, font and color.
        Only the given properties change. For full control use googledocs_update_text_style.
        """
        try:
            text_style, fields = build_text_style(
                bold=bold,
                italic=italic,
                underline=underline,
                strikethrough=strikethrough,
                font_size=fontSize,
                font_family=fontFamily,
                foreground_color=foregroundColor,
                background_color=backgroundColor,
                link_url=linkUrl,
            )
        except ValueError as e:
            raise reject(str(e))

        if not fields:
            return format_success("No formatting changes specified", {})

        try:
            result = await asyncio.to_thread(
                get_client().update_text_style,
                documentId, startIndex, endIndex, text_style, ",".join(fields)
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Text formatted from {startIndex} to {endIndex}", result.raw)

    @mcp.tool(name="googledocs_update_text_style")
    async def update_text_style(
        documentId: DocumentId,
        startIndex: StartIndex,
        endIndex: EndIndex,
        textStyle: Annotated[dict[str, Any], Field(description="TextStyle object")],
        fields: StyleFields,
    ) -> str:
        """
        Apply advanced text styling to a range.

        TextStyle properties include bold, italic, underline, strikethrough, smallCaps,
        fontSize {magnitude, unit: "PT"}, weightedFontFamily {fontFamily, weight},
        foregroundColor / backgroundColor {color: {rgbColor: {red, green, blue}}},
        baselineOffset (NONE, SUPERSCRIPT, SUBSCRIPT) and link {url | bookmarkId | headingId}.
        """
        try:
            result = await asyncio.to_thread(
                get_client().update_text_style,
                documentId, startIndex, endIndex, textStyle, fields
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Text style updated from {startIndex} to {endIndex}", result.raw)

    @mcp.tool(name="googledocs_format_paragraph")
    async def format_paragraph(
        documentId: DocumentId,
        startIndex: StartIndex,
        endIndex: EndIndex,
        alignment: Annotated[Alignment | None, Field(description="Text alignment")] = None,
        headingType: Annotated[NamedStyleType | None, Field(description="Heading style")] = None,
        lineSpacing: Annotated[
            float | None, Field(gt=0, description="Line spacing percentage (100 = single)")
        ] = None,
        spaceAbove: Annotated[float | None, Field(ge=0, description="Space above in points")] = None,
        spaceBelow: Annotated[float | None, Field(ge=0, description="Space below in points")] = None,
    ) -> str:
        """
        Apply basic paragraph formatting to a range.

        For borders, indentation and other properties use googledocs_update_paragraph_style.
        """
        paragraph_style, fields = build_paragraph_style(
            alignment=alignment,
            heading_type=headingType,
            line_spacing=lineSpacing,
            space_above=spaceAbove,
            space_below=spaceBelow,
        )
        if not fields:
            return format_success("No paragraph formatting changes specified", {})

        try:
            result = await asyncio.to_thread(
                get_client().update_paragraph_style,
                documentId, startIndex, endIndex, paragraph_style, ",".join(fields)
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Paragraph formatted from {startIndex} to {endIndex}", result.raw)

    @mcp.tool(name="googledocs_update_paragraph_style")
    async def update_paragraph_style(
        documentId: DocumentId,
        startIndex: StartIndex,
        endIndex: EndIndex,
        paragraphStyle: Annotated[dict[str, Any], Field(description="ParagraphStyle object")],
        fields: StyleFields,
    ) -> str:
        """
        Apply advanced paragraph styling to a range.

        ParagraphStyle properties include namedStyleType, alignment, lineSpacing,
        direction, spacingMode, spaceAbove/spaceBelow, indentFirstLine/indentStart/indentEnd,
        borders, shading, keepLinesTogether, keepWithNext and pageBreakBefore.
        """
        try:
            result = await asyncio.to_thread(
                get_client().update_paragraph_style,
                documentId, startIndex, endIndex, paragraphStyle, fields
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(
            f"Paragraph style updated from {startIndex} to {endIndex}", result.raw
        )

    @mcp.tool(name="googledocs_update_document_style")
    async def update_document_style(
        documentId: DocumentId,
        documentStyle: Annotated[dict[str, Any], Field(description="DocumentStyle object")],
        fields: StyleFields,
    ) -> str:
        """
        Update document-wide styling properties.

        DocumentStyle properties include background, pageSize, margins,
        pageNumberStart, useFirstPageHeaderFooter, useEvenPageHeaderFooter and
        flipPageOrientation.
        """
        try:
            result = await asyncio.to_thread(
                get_client().update_document_style, documentId, documentStyle, fields
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success("Document style updated", result.raw)

    @mcp.tool(name="googledocs_update_section_style")
    async def update_section_style(
        documentId: DocumentId,
        startIndex: StartIndex,
        endIndex: EndIndex,
        sectionStyle: Annotated[dict[str, Any], Field(description="SectionStyle object")],
        fields: StyleFields,
    ) -> str:
        """
        Update section styling properties for a range.

        SectionStyle properties include columnProperties, columnSeparatorStyle,
        contentDirection, margins, sectionType, header/footer IDs and pageNumberStart.
        """
        try:
            result = await asyncio.to_thread(
                get_client().update_section_style,
                documentId, startIndex, endIndex, sectionStyle, fields
            )
        except GoogleDocsMcpError as e:
            raise format_error(e)
        return format_success(f"Section style updated from {startIndex} to {endIndex}", result.raw)
