"""Tag and category operations across the posts of a blog."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from hexo_blog.core.blog_operations import (
    iter_post_paths,
    load_post_metadata,
    post_display_name,
    resolve_post_path,
)
from hexo_blog.core.categories import normalize_category
from hexo_blog.core.frontmatter_reader import forget_cached_metadata
from hexo_blog.core.patch_engine import apply_edit
from hexo_blog.data_models import BlogMetadata, ClassifyGroup, ClassifyKind, PostMetadata

logger = logging.getLogger(__name__)


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _normalize_input(kind: ClassifyKind, value: str) -> str:
    """Trim user input; categories are also converted to ``a / b`` form."""
    if kind is ClassifyKind.CATEGORIES:
        return normalize_category(value)
    return value.strip()


def _find_group(blog: BlogMetadata, kind: ClassifyKind, name: str) -> ClassifyGroup:
    for group in collect_classify_groups(blog, kind):
        if group.name == name:
            return group
    raise ValueError(f"No {kind.label} named '{name}' in blog '{blog.name}'.")


def _relative_names(blog: BlogMetadata, paths: Sequence[Path]) -> list[str]:
    return [post_display_name(blog, path) for path in paths]


def update_post_file(path: Path, key: str, values: Sequence[str]) -> bool:
    """Write ``values`` under ``key`` in the post at ``path``.

    The file is re-read right before patching so that the edit always applies
    to its current text. Nothing is written when the text would not change.

    Returns:
        ``True`` when the file was rewritten.
    """
    identity = str(path)
    mtime = path.stat().st_mtime
    # newline="" keeps CRLF line endings untranslated in both directions
    with path.open(encoding="utf-8", newline="") as handle:
        text = handle.read()

    new_text = apply_edit(text, key, values, identity=identity, version=mtime)
    if new_text == text:
        logger.debug("Post '%s' unchanged for key '%s'", path, key)
        return False

    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(new_text)
    forget_cached_metadata(identity)
    logger.debug("Post '%s' updated: %s=%s", path, key, list(values))
    return True


# ==============================================================================
# CLASSIFY OPERATIONS
# ==============================================================================


def collect_classify_groups(blog: BlogMetadata, kind: ClassifyKind) -> list[ClassifyGroup]:
    """Group every post of ``blog`` by each of its tag or category values.

    Returns:
        One :class:`ClassifyGroup` per distinct value, sorted by name. Files keep
        post discovery order.
    """
    grouped: dict[str, list[PostMetadata]] = {}
    for path in iter_post_paths(blog):
        metadata = load_post_metadata(path)
        for value in dict.fromkeys(metadata.values_for(kind)):
            grouped.setdefault(value, []).append(metadata)

    return [
        ClassifyGroup(name=name, files=tuple(files))
        for name, files in sorted(grouped.items())
    ]


def list_classifies(blog: BlogMetadata, kind: ClassifyKind) -> dict[str, Any]:
    """List every tag or category of the blog with the posts using it."""
    groups = collect_classify_groups(blog, kind)
    return {
        "blog": blog.name,
        "kind": kind.value,
        "classifies": [
            {
                "name": group.name,
                "count": len(group.files),
                "posts": _relative_names(blog, [meta.path for meta in group.files if meta.path]),
            }
            for group in groups
        ],
    }


def read_post_classify(blog: BlogMetadata, post: str) -> dict[str, Any]:
    """Return the normalized front-matter metadata of one post.

    Raises:
        FileNotFoundError: If the post does not exist.
    """
    path = resolve_post_path(blog, post)
    if not path.is_file():
        raise FileNotFoundError(f"Post '{post}' not found in blog '{blog.name}'.")

    metadata = load_post_metadata(path)
    return {
        "blog": blog.name,
        "post": post_display_name(blog, path),
        "path": str(path),
        "metadata": metadata.as_payload(),
        "status": "read",
    }


def set_post_values(
    blog: BlogMetadata,
    post: str,
    kind: ClassifyKind,
    values: Sequence[str],
) -> dict[str, Any]:
    """Replace the tag or category list of a single post.

    Empty entries are dropped and duplicates collapsed, keeping first-seen order.

    Raises:
        FileNotFoundError: If the post does not exist.
    """
    path = resolve_post_path(blog, post)
    if not path.is_file():
        raise FileNotFoundError(f"Post '{post}' not found in blog '{blog.name}'.")

    cleaned = list(dict.fromkeys(v for v in (_normalize_input(kind, raw) for raw in values) if v))
    written = update_post_file(path, kind.value, cleaned)
    note = post_display_name(blog, path)

    logger.info(
        "Set %s of post '%s' in blog '%s' to %s (written=%s)",
        kind.value,
        note,
        blog.name,
        cleaned,
        written,
    )
    return {
        "blog": blog.name,
        "post": note,
        "kind": kind.value,
        "values": cleaned,
        "status": "updated" if written else "unchanged",
    }


def add_classify(
    blog: BlogMetadata,
    kind: ClassifyKind,
    name: str,
    new_value: str,
) -> dict[str, Any]:
    """Add ``new_value`` to every post that carries the classify ``name``.

    Raises:
        ValueError: If ``new_value`` is empty after normalization, or no post
            uses ``name``.
    """
    value = _normalize_input(kind, new_value)
    if not value:
        raise ValueError(f"New {kind.label} cannot be empty.")

    group = _find_group(blog, kind, name)
    updated: list[Path] = []
    for metadata in group.files:
        values = metadata.values_for(kind)
        if value in values or metadata.path is None:
            continue
        values.append(value)
        if update_post_file(metadata.path, kind.value, values):
            updated.append(metadata.path)

    logger.info(
        "Added %s '%s' to %d post(s) under '%s' in blog '%s'",
        kind.label,
        value,
        len(updated),
        name,
        blog.name,
    )
    return {
        "blog": blog.name,
        "kind": kind.value,
        "name": name,
        "added": value,
        "updated_posts": _relative_names(blog, updated),
        "status": "updated" if updated else "unchanged",
    }


def rename_classify(
    blog: BlogMetadata,
    kind: ClassifyKind,
    old_name: str,
    new_name: str,
) -> dict[str, Any]:
    """Rename a tag or category in every post that uses it.

    Posts that already carry ``new_name`` simply lose ``old_name``.

    Raises:
        ValueError: If ``new_name`` is empty after normalization, or no post
            uses ``old_name``.
    """
    value = _normalize_input(kind, new_name)
    if not value:
        raise ValueError(f"New {kind.label} name cannot be empty.")

    if value == old_name:
        return {
            "blog": blog.name,
            "kind": kind.value,
            "old_name": old_name,
            "new_name": value,
            "updated_posts": [],
            "status": "unchanged",
        }

    group = _find_group(blog, kind, old_name)
    updated: list[Path] = []
    for metadata in group.files:
        values = metadata.values_for(kind)
        if old_name not in values or metadata.path is None:
            continue
        index = values.index(old_name)
        if value in values:
            del values[index]
        else:
            values[index] = value
        if update_post_file(metadata.path, kind.value, values):
            updated.append(metadata.path)

    logger.info(
        "Renamed %s '%s' to '%s' in %d post(s) of blog '%s'",
        kind.label,
        old_name,
        value,
        len(updated),
        blog.name,
    )
    return {
        "blog": blog.name,
        "kind": kind.value,
        "old_name": old_name,
        "new_name": value,
        "updated_posts": _relative_names(blog, updated),
        "status": "renamed" if updated else "unchanged",
    }


def delete_classify(blog: BlogMetadata, kind: ClassifyKind, name: str) -> dict[str, Any]:
    """Remove a tag or category from every post that uses it.

    Raises:
        ValueError: If no post uses ``name``.
    """
    group = _find_group(blog, kind, name)
    updated: list[Path] = []
    for metadata in group.files:
        values = metadata.values_for(kind)
        if name not in values or metadata.path is None:
            continue
        values = [existing for existing in values if existing != name]
        if update_post_file(metadata.path, kind.value, values):
            updated.append(metadata.path)

    logger.info(
        "Deleted %s '%s' from %d post(s) of blog '%s'",
        kind.label,
        name,
        len(updated),
        blog.name,
    )
    return {
        "blog": blog.name,
        "kind": kind.value,
        "name": name,
        "updated_posts": _relative_names(blog, updated),
        "status": "deleted" if updated else "unchanged",
    }
