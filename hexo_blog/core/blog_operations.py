"""Core blog operations: post discovery, path resolution, metadata loading."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from hexo_blog.constants import DRAFTS_DIR, POSTS_DIR, SOURCE_DIR
from hexo_blog.core.frontmatter_reader import read_cached_metadata
from hexo_blog.data_models import BlogMetadata, PostMetadata

logger = logging.getLogger(__name__)


def ensure_blog_ready(blog: BlogMetadata) -> None:
    """Ensure the blog root is accessible before performing operations.

    Raises:
        FileNotFoundError: If the blog path does not exist or is not a directory.
    """
    if not blog.path.is_dir():
        raise FileNotFoundError(f"Blog '{blog.name}' is not accessible at {blog.path}")


def source_root(blog: BlogMetadata) -> Path:
    """Return the ``source`` directory Hexo renders posts from."""
    return blog.path / SOURCE_DIR


def iter_post_paths(blog: BlogMetadata, include_drafts: bool = True) -> Iterator[Path]:
    """Yield markdown files under ``source/_posts`` (and ``source/_drafts``).

    Paths are yielded in sorted order per folder so that classify groups list
    their files deterministically.
    """
    ensure_blog_ready(blog)
    folders = [POSTS_DIR, DRAFTS_DIR] if include_drafts else [POSTS_DIR]
    for folder in folders:
        directory = source_root(blog) / folder
        if not directory.is_dir():
            continue
        for path in sorted(directory.rglob("*.md")):
            if path.is_file():
                yield path


def construct_post_path(identifier: str) -> Path:
    """Construct a relative Path from a pre-validated post identifier.

    Examples:
        >>> construct_post_path("_posts/hello-world")
        PosixPath('_posts/hello-world.md')
    """
    parts = identifier.split("/")
    leaf_with_extension = f"{parts[-1]}.md"
    if len(parts) == 1:
        return Path(leaf_with_extension)
    return Path(*parts[:-1]) / leaf_with_extension


def resolve_post_path(blog: BlogMetadata, post: str) -> Path:
    """Resolve a pre-validated post identifier to an absolute path.

    Identifiers are relative to the blog's ``source`` directory, e.g.
    ``_posts/hello-world``. A bare name is looked up in ``_posts``.

    Raises:
        ValueError: If the resolved path escapes the blog root.
    """
    relative = construct_post_path(post)
    if len(relative.parts) == 1:
        relative = Path(POSTS_DIR) / relative

    root = source_root(blog).resolve(strict=False)
    candidate = (root / relative).resolve(strict=False)
    if not candidate.is_relative_to(root):
        raise ValueError("Post path escapes the configured blog.")

    return candidate


def post_display_name(blog: BlogMetadata, path: Path) -> str:
    """Convert a post path into a ``source``-relative name without extension.

    Discovered paths are taken relative to ``source`` as found, so a symlinked
    post keeps its link name even when its target lives elsewhere.
    """
    root = source_root(blog)
    try:
        relative = path.relative_to(root)
    except ValueError:
        relative = path.resolve(strict=False).relative_to(root.resolve(strict=False))
    return str(relative.with_suffix("")).replace("\\", "/")


def load_post_metadata(path: Path) -> PostMetadata:
    """Read ``path`` and return its (cached) front-matter metadata.

    Unreadable files produce an empty record titled after the file name with
    ``mtime`` 0, so they never mask a later successful read.
    """
    try:
        mtime = path.stat().st_mtime
        # untranslated, identical to the text update_post_file patches
        with path.open(encoding="utf-8", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read post '%s': %s", path, exc)
        return PostMetadata(title=path.stem, path=path)

    return read_cached_metadata(text, identity=str(path), mtime=mtime, path=path)
