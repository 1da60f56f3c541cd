"""Tests for the deploy command runner."""

import asyncio
import shutil

import pytest

from hexo_blog.core.deploy_operations import DeployError, run_deploy
from hexo_blog.data_models import BlogMetadata


pytestmark = pytest.mark.skipif(shutil.which("sh") is None, reason="POSIX shell required")


def _blog(path, command):
    return BlogMetadata(
        name="test",
        path=path,
        description="",
        exists=True,
        deploy_command=command,
    )


def test_successful_deploy_streams_output(tmp_path):
    result = asyncio.run(run_deploy(_blog(tmp_path, "echo first; echo second")))

    assert result["status"] == "deployed"
    assert result["return_code"] == 0
    assert result["output"] == ["first", "second"]


def test_deploy_runs_in_blog_root_with_hexo_root_env(tmp_path):
    result = asyncio.run(run_deploy(_blog(tmp_path, 'echo "$HEXO_ROOT"; pwd')))

    assert result["output"][0] == str(tmp_path)
    assert result["output"][1] == str(tmp_path.resolve())


def test_stderr_is_captured(tmp_path):
    result = asyncio.run(run_deploy(_blog(tmp_path, "echo warning >&2")))
    assert result["output"] == ["warning"]


def test_non_zero_exit_raises(tmp_path):
    with pytest.raises(DeployError) as exc_info:
        asyncio.run(run_deploy(_blog(tmp_path, "echo oops; exit 3")))

    assert str(exc_info.value) == "Command exited with code 3"
    assert exc_info.value.return_code == 3
    assert exc_info.value.output == ["oops"]


def test_timeout_kills_command(tmp_path):
    with pytest.raises(DeployError, match="timed out"):
        asyncio.run(run_deploy(_blog(tmp_path, "exec sleep 5"), timeout=0.2))


def test_missing_blog_root_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        asyncio.run(run_deploy(_blog(tmp_path / "missing", "echo hi")))
