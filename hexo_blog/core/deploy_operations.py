"""Run a blog's configured deploy command."""

from __future__ import annotations

import asyncio
import logging
import os
import time
from collections import deque
from typing import Any, Optional

from hexo_blog.constants import DEPLOY_ROOT_ENV, MAX_DEPLOY_OUTPUT_LINES
from hexo_blog.core.blog_operations import ensure_blog_ready
from hexo_blog.data_models import BlogMetadata

logger = logging.getLogger(__name__)


class DeployError(RuntimeError):
    """Raised when the deploy command cannot start or exits unsuccessfully."""

    def __init__(self, message: str, return_code: Optional[int] = None, output: Optional[list[str]] = None):
        super().__init__(message)
        self.return_code = return_code
        self.output = output or []


async def _stream_output(process: asyncio.subprocess.Process, sink: deque[str]) -> None:
    assert process.stdout is not None
    while True:
        raw = await process.stdout.readline()
        if not raw:
            break
        line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
        sink.append(line)
        logger.info("[deploy] %s", line)


async def run_deploy(blog: BlogMetadata, timeout: Optional[float] = None) -> dict[str, Any]:
    """Run ``blog.deploy_command`` in the blog root and stream its output.

    The command runs through the shell with ``HEXO_ROOT`` pointing at the blog
    root. Stdout and stderr are merged and logged line by line; the last
    ``MAX_DEPLOY_OUTPUT_LINES`` lines are returned.

    Args:
        blog: Blog metadata providing the root and the deploy command.
        timeout: Optional limit in seconds; the process is killed when exceeded.

    Returns:
        Dictionary with blog, command, return_code, duration_ms, output, status.

    Raises:
        FileNotFoundError: If the blog root is not accessible.
        DeployError: If the command cannot start, times out, or exits non-zero.
    """
    ensure_blog_ready(blog)
    command = blog.deploy_command
    root = str(blog.path)

    logger.info("Starting deploy of blog '%s'", blog.name)
    logger.info("Working directory: %s", root)
    logger.info("Command: %s", command)

    start_time = time.monotonic()
    try:
        process = await asyncio.create_subprocess_shell(
            command,
            cwd=root,
            env={**os.environ, DEPLOY_ROOT_ENV: root},
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
    except OSError as exc:
        logger.error("Deploy of blog '%s' failed to start: %s", blog.name, exc)
        raise DeployError(f"Unable to start deploy command: {exc}") from exc

    output: deque[str] = deque(maxlen=MAX_DEPLOY_OUTPUT_LINES)
    try:
        await asyncio.wait_for(_stream_output(process, output), timeout=timeout)
        return_code = await process.wait()
    except asyncio.TimeoutError as exc:
        process.kill()
        await process.wait()
        logger.error("Deploy of blog '%s' timed out after %s seconds", blog.name, timeout)
        raise DeployError(
            f"Deploy command timed out after {timeout} seconds",
            output=list(output),
        ) from exc

    duration_ms = (time.monotonic() - start_time) * 1000
    if return_code != 0:
        logger.error("Deploy of blog '%s' failed - exit code %s", blog.name, return_code)
        raise DeployError(
            f"Command exited with code {return_code}",
            return_code=return_code,
            output=list(output),
        )

    logger.info("Deploy of blog '%s' completed successfully", blog.name)
    return {
        "blog": blog.name,
        "command": command,
        "return_code": return_code,
        "duration_ms": round(duration_ms, 1),
        "output": list(output),
        "status": "deployed",
    }
