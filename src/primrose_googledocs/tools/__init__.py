"""
MCP tool registry, grouped by category.
"""

from primrose_googledocs.tools.content import register_content_tools
from primrose_googledocs.tools.documents import register_document_tools
from primrose_googledocs.tools.formatting import register_formatting_tools
from primrose_googledocs.tools.headersfooters import register_header_footer_tools
from primrose_googledocs.tools.helpers import ClientFactory
from primrose_googledocs.tools.images import register_image_tools
from primrose_googledocs.tools.lists import register_list_tools
from primrose_googledocs.tools.namedranges import register_named_range_tools
from primrose_googledocs.tools.tables import register_table_tools

__all__ = [
    "register_all_tools",
    "register_content_tools",
    "register_document_tools",
    "register_formatting_tools",
    "register_header_footer_tools",
    "register_image_tools",
    "register_list_tools",
    "register_named_range_tools",
    "register_table_tools",
]


def register_all_tools(mcp, get_client: ClientFactory) -> None:
    """Register every tool category on the server."""
    register_document_tools(mcp, get_client)
    register_content_tools(mcp, get_client)
    register_formatting_tools(mcp, get_client)
    register_table_tools(mcp, get_client)
    register_image_tools(mcp, get_client)
    register_list_tools(mcp, get_client)
    register_named_range_tools(mcp, get_client)
    register_header_footer_tools(mcp, get_client)
