"""Line-range patching of a single front-matter key."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Hashable, Optional

from hexo_blog.core.frontmatter_locator import (
    locate_block,
    locate_block_cached,
    locate_key,
    split_lines,
)
from hexo_blog.core.serializer import serialize_value
from hexo_blog.data_models import FrontMatterEdit


def compute_edit(
    lines: Sequence[str],
    key: str,
    values: Sequence[str],
    identity: Optional[Hashable] = None,
    version: Optional[Hashable] = None,
) -> Optional[FrontMatterEdit]:
    """Compute the edit that writes ``values`` under ``key``.

    The key's existing span is replaced in place; a missing key is inserted on
    the line right after the opening delimiter. Lines outside the edit are
    never part of the replacement.

    Args:
        lines: Document lines as produced by ``split_lines``.
        key: Front-matter key to write.
        values: New value list.
        identity: Optional document identity; when given, the block span is
            memoised under it for ``version``.
        version: Change counter of the document, e.g. its mtime.

    Returns:
        A :class:`FrontMatterEdit`, or ``None`` when the document has no
        front-matter block.
    """
    if identity is None:
        span = locate_block(lines)
    else:
        span = locate_block_cached(lines, identity, version)
    if span is None:
        return None

    replacement = serialize_value(key, values).split("\n")
    if lines[span.block_start].endswith("\r"):
        replacement = [f"{line}\r" for line in replacement]

    key_span = locate_key(lines, span, key)
    if key_span is None:
        insert_at = span.block_start + 1
        return FrontMatterEdit(insert_at, insert_at, tuple(replacement))

    return FrontMatterEdit(key_span.start_line, key_span.end_line + 1, tuple(replacement))


def apply_edit_to_lines(lines: Sequence[str], edit: FrontMatterEdit) -> list[str]:
    """Return a new line list with ``edit`` applied."""
    return [*lines[: edit.start_line], *edit.replacement, *lines[edit.end_line :]]


def apply_edit(
    text: str,
    key: str,
    values: Sequence[str],
    identity: Optional[Hashable] = None,
    version: Optional[Hashable] = None,
) -> str:
    """Rewrite ``key`` inside ``text`` and return the new document.

    Documents without a front-matter block are returned unchanged.
    """
    lines = split_lines(text)
    edit = compute_edit(lines, key, values, identity=identity, version=version)
    if edit is None:
        return text
    return "\n".join(apply_edit_to_lines(lines, edit))
