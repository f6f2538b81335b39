"""
Primrose Google Docs MCP Server

A multi-tenant Model Context Protocol (MCP) server for the Google Docs API.
Each request carries its own OAuth access token, so one deployment can
create and edit documents on behalf of many users.
"""

__version__ = "1.0.0"
