"""Per-session blog selection.

A client session may pin a blog with ``set_active_hexo_blog``. Tool calls that
name no blog then use the pinned one, and sessions that never pinned a blog use
the configured default.
"""

import logging
from typing import Optional

from mcp.server.fastmcp import Context

from hexo_blog.config import get_blog_configuration
from hexo_blog.data_models import BlogMetadata

logger = logging.getLogger(__name__)

# session key -> pinned blog name
_PINNED_BLOGS: dict[int, str] = {}


def get_session_key(ctx: Context) -> int:
    """Key of the MCP session behind ``ctx``; stable while the session lives."""
    return id(ctx.session)


def pinned_blog_name(ctx: Optional[Context]) -> Optional[str]:
    """Return the blog name pinned by the session of ``ctx``, if any."""
    if ctx is None:
        return None
    return _PINNED_BLOGS.get(get_session_key(ctx))


def set_active_blog(ctx: Context, blog_name: str) -> BlogMetadata:
    """Pin ``blog_name`` for the session of ``ctx``.

    Raises:
        ValueError: If ``blog_name`` is not configured.
    """
    metadata = get_blog_configuration().get(blog_name)
    _PINNED_BLOGS[get_session_key(ctx)] = metadata.name
    return metadata


def resolve_blog(blog: Optional[str], ctx: Optional[Context] = None) -> BlogMetadata:
    """Pick the blog an operation runs against.

    An explicit ``blog`` wins, then the blog pinned by the session, then the
    configured default.

    Raises:
        ValueError: If the chosen name is not configured.
    """
    configuration = get_blog_configuration()
    name = blog or pinned_blog_name(ctx) or configuration.default_blog
    return configuration.get(name)
