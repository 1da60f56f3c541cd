"""MCP tools for blog management and deployment."""

import logging
from typing import Any

from mcp.server.fastmcp import Context

from hexo_blog.config import get_blog_configuration
from hexo_blog.core.deploy_operations import run_deploy
from hexo_blog.models import DeployBlogInput, ListBlogsInput, SetActiveBlogInput
from hexo_blog.session import (
    get_session_key,
    pinned_blog_name,
    resolve_blog,
    set_active_blog as set_active_blog_session,
)

logger = logging.getLogger(__name__)


async def list_hexo_blogs(
    input: ListBlogsInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """List configured Hexo blogs and current session state.

    Returns:
        {
            "default": str,
            "active": str | None,
            "blogs": [
                {"name": str, "path": str, "description": str,
                 "deploy_command": str, "exists": bool}
            ]
        }

    Error Handling:
        - Config file missing → Error with expected config path
        - Invalid config format → Error describing expected YAML structure
    """
    payload = get_blog_configuration().as_payload()
    # None while the session still follows the default blog
    payload["active"] = pinned_blog_name(ctx)
    return payload


async def set_active_hexo_blog(
    input: SetActiveBlogInput,
    ctx: Context,
) -> dict[str, Any]:
    """Set the active blog for this session.

    All subsequent tool calls that omit the blog parameter use the active blog.

    Returns:
        {"blog": str, "path": str, "status": "active"}

    Error Handling:
        - Unknown blog → ValueError, suggest list_hexo_blogs()
    """
    metadata = set_active_blog_session(ctx, input.blog)
    logger.info("Active blog for session %s set to '%s'", get_session_key(ctx), metadata.name)
    return {
        "blog": metadata.name,
        "path": str(metadata.path),
        "status": "active",
    }


async def deploy_hexo_blog(
    input: DeployBlogInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Run the blog's configured deploy command (default ``npx hexo deploy``).

    The command runs in the blog root with ``HEXO_ROOT`` set to that root.

    Returns:
        {"blog", "command", "return_code", "duration_ms", "output", "status": "deployed"}

    Error Handling:
        - Non-zero exit → DeployError "Command exited with code N"
        - Timeout → DeployError, process killed
    """
    blog = resolve_blog(input.blog, ctx)
    return await run_deploy(blog, timeout=input.timeout)
