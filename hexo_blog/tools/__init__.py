"""MCP tool handlers for Hexo blog operations.

Tools are plain async functions. ``build_tool_table`` maps each tool name to
its handler; the server registers that table explicitly at startup.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from hexo_blog.tools import blog_tools, classify_tools

ToolHandler = Callable[..., Awaitable[dict[str, Any]]]


def build_tool_table() -> dict[str, ToolHandler]:
    """Return the mapping of tool names to handler functions."""
    return {
        # Blog selection
        "list_hexo_blogs": blog_tools.list_hexo_blogs,
        "set_active_hexo_blog": blog_tools.set_active_hexo_blog,
        # Single post
        "read_hexo_post_metadata": classify_tools.read_hexo_post_metadata,
        "set_hexo_post_classify": classify_tools.set_hexo_post_classify,
        # Blog-wide classify
        "list_hexo_classifies": classify_tools.list_hexo_classifies,
        "add_hexo_classify": classify_tools.add_hexo_classify,
        "rename_hexo_classify": classify_tools.rename_hexo_classify,
        "delete_hexo_classify": classify_tools.delete_hexo_classify,
        "normalize_hexo_category": classify_tools.normalize_hexo_category,
        # Deploy
        "deploy_hexo_blog": blog_tools.deploy_hexo_blog,
    }


__all__ = ["ToolHandler", "build_tool_table", "blog_tools", "classify_tools"]
