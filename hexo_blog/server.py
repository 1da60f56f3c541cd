"""FastMCP server construction and tool registration."""

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from hexo_blog.constants import LOG_LEVEL
from hexo_blog.tools import ToolHandler, build_tool_table

logger = logging.getLogger(__name__)

SERVER_NAME = "hexo_blog"


def create_server(tool_table: Optional[dict[str, ToolHandler]] = None) -> FastMCP:
    """Build a FastMCP server and register every handler of ``tool_table``.

    Args:
        tool_table: Mapping of tool name to handler. Defaults to
            :func:`hexo_blog.tools.build_tool_table`.
    """
    table = build_tool_table() if tool_table is None else tool_table
    server = FastMCP(SERVER_NAME)
    for name, handler in table.items():
        server.add_tool(handler, name=name)
    logger.debug("Registered %d tools: %s", len(table), ", ".join(table))
    return server


def run_server() -> None:
    """Start the MCP server with stdio transport."""
    logging.basicConfig(level=LOG_LEVEL)
    logger.info("Starting Hexo blog MCP server")
    create_server().run(transport="stdio")


if __name__ == "__main__":
    run_server()
