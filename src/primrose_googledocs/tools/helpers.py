"""
Shared argument types for tool signatures.

FastMCP derives each tool's input schema from these annotations, so the
bounds below are enforced before a handler runs.
"""

from collections.abc import Callable
from typing import Annotated

from pydantic import Field

from primrose_googledocs.client import GoogleDocsClient

# Returns a client bound to the current request's credentials
ClientFactory = Callable[[], GoogleDocsClient]

DocumentId = Annotated[str, Field(description="The document ID")]

StartIndex = Annotated[int, Field(ge=1, description="Start index (inclusive, 1-based)")]
EndIndex = Annotated[int, Field(ge=1, description="End index (exclusive)")]

TableStartIndex = Annotated[int, Field(ge=1, description="Start index of the table")]
RowIndex = Annotated[int, Field(ge=0, description="Row index (0-based)")]
ColumnIndex = Annotated[int, Field(ge=0, description="Column index (0-based)")]
RowSpan = Annotated[int, Field(ge=1, description="Number of rows")]
ColumnSpan = Annotated[int, Field(ge=1, description="Number of columns")]

StyleFields = Annotated[
    str, Field(description="Comma-separated fields to update (e.g. 'bold,italic')")
]

ImageUri = Annotated[str, Field(pattern=r"^https?://\S+$", description="Public http(s) URL")]
