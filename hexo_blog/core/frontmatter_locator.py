"""Locate the front-matter block and the lines owned by one key."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Hashable, Optional

from hexo_blog.constants import FRONT_MATTER_DELIMITER
from hexo_blog.data_models import FrontMatterSpan, KeySpan

# identity -> (version, span)
_SPAN_CACHE: dict[Hashable, tuple[Hashable, Optional[FrontMatterSpan]]] = {}


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n``.

    A ``\\r`` before the newline stays on its line, so ``"\\n".join`` restores
    CRLF documents exactly.
    """
    return text.split("\n")


_BOM = "\ufeff"


def _is_delimiter(line: str) -> bool:
    """A line of ``---`` surrounded by whitespace, optionally after a BOM."""
    return line.lstrip(_BOM).strip() == FRONT_MATTER_DELIMITER


def _is_continuation(line: str) -> bool:
    """Blank, indented, and ``-`` list-item lines belong to the previous key."""
    if not line.strip():
        return True
    return line[0].isspace() or line.startswith("-")


def locate_block(lines: Sequence[str]) -> Optional[FrontMatterSpan]:
    """Return the span of the first ``---`` delimiter pair.

    Args:
        lines: Document lines as produced by :func:`split_lines`.

    Returns:
        The :class:`FrontMatterSpan` of the first opening/closing delimiter
        lines, or ``None`` when the document has fewer than two delimiters.
    """
    start = -1
    for index, line in enumerate(lines):
        if not _is_delimiter(line):
            continue
        if start == -1:
            start = index
        else:
            return FrontMatterSpan(block_start=start, block_end=index)
    return None


def locate_block_cached(
    lines: Sequence[str],
    identity: Hashable,
    version: Hashable,
) -> Optional[FrontMatterSpan]:
    """Memoised :func:`locate_block` keyed by document identity and version."""
    cached = _SPAN_CACHE.get(identity)
    if cached is not None and cached[0] == version:
        return cached[1]

    span = locate_block(lines)
    _SPAN_CACHE[identity] = (version, span)
    return span


def locate_key(
    lines: Sequence[str],
    span: Optional[FrontMatterSpan],
    key: str,
) -> Optional[KeySpan]:
    """Find the inclusive line range of ``key`` inside the front-matter block.

    The first line strictly inside the block that starts with ``"<key>:"``
    opens the range. It then grows over continuation lines (blank, indented,
    or ``-`` items) until another line or the closing delimiter is reached.

    Returns:
        A :class:`KeySpan`, or ``None`` when the block or the key is absent.
    """
    if span is None:
        return None

    prefix = f"{key}:"
    for index in range(span.block_start + 1, span.block_end):
        if not lines[index].startswith(prefix):
            continue

        end = index + 1
        while end < span.block_end and _is_continuation(lines[end]):
            end += 1
        return KeySpan(start_line=index, end_line=end - 1)

    return None


def forget_cached_span(identity: Hashable) -> None:
    _SPAN_CACHE.pop(identity, None)


def clear_span_cache() -> None:
    _SPAN_CACHE.clear()
