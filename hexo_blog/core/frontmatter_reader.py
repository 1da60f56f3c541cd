"""Best-effort parsing of Hexo front matter into normalized metadata."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Hashable, Optional

import yaml
from frontmatter.default_handlers import YAMLHandler

from hexo_blog.constants import CATEGORY_SEPARATOR
from hexo_blog.core.frontmatter_locator import (
    forget_cached_span,
    locate_block,
    locate_block_cached,
    split_lines,
)
from hexo_blog.data_models import ClassifyKind, FrontMatterSpan, PostMetadata

logger = logging.getLogger(__name__)

_YAML_HANDLER = YAMLHandler()

# identity -> metadata computed for metadata.mtime
_METADATA_CACHE: dict[Hashable, PostMetadata] = {}


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _lookup(data: Mapping[str, Any], kind: ClassifyKind) -> Any:
    """Return the value under ``kind``, falling back to its singular alias."""
    value = data.get(kind.value)
    if value is None or value == "":
        value = data.get(kind.alias)
    return value


def _normalize_values(value: Any, kind: ClassifyKind) -> list[str]:
    if value is None or isinstance(value, Mapping):
        return []

    if not isinstance(value, list):
        return [_to_text(value)]

    if kind is ClassifyKind.CATEGORIES:
        # Hexo nests a category path as a one-element list of lists
        return [
            CATEGORY_SEPARATOR.join(_to_text(part) for part in item)
            if isinstance(item, list)
            else _to_text(item)
            for item in value
        ]
    return [_to_text(item) for item in value]


# ==============================================================================
# READER OPERATIONS
# ==============================================================================


def _block_text(lines: Sequence[str], span: Optional[FrontMatterSpan]) -> Optional[str]:
    if span is None:
        return None
    return "\n".join(lines[span.block_start + 1 : span.block_end])


def _load_block(block: Optional[str]) -> dict[str, Any]:
    if block is None:
        return {}

    try:
        data = _YAML_HANDLER.load(block)
    except (yaml.YAMLError, ValueError, TypeError, RecursionError) as exc:
        # SafeLoader raises plain ValueError for bad timestamps and !!int values
        logger.debug("Ignoring unparsable front matter: %s", exc)
        return {}

    if not isinstance(data, Mapping):
        return {}
    return {str(key): value for key, value in data.items()}


def _build_metadata(data: Mapping[str, Any], path: Optional[Path], mtime: float) -> PostMetadata:
    title = data.get("title")
    date = data.get("date")
    return PostMetadata(
        tags=tuple(_normalize_values(_lookup(data, ClassifyKind.TAGS), ClassifyKind.TAGS)),
        categories=tuple(
            _normalize_values(_lookup(data, ClassifyKind.CATEGORIES), ClassifyKind.CATEGORIES)
        ),
        title=_to_text(title) if title is not None else "",
        date=_to_text(date) if date is not None else "",
        mtime=mtime,
        keys=frozenset(data.keys()),
        path=path,
    )


def extract_front_matter(text: str) -> Optional[str]:
    """Return the raw YAML between the first delimiter pair, or ``None``."""
    lines = split_lines(text)
    return _block_text(lines, locate_block(lines))


def parse_front_matter(text: str) -> dict[str, Any]:
    """Parse the front-matter block of ``text`` into a dictionary.

    Missing blocks, unparsable YAML (including out-of-range dates and bad
    explicit tags) and non-mapping documents all produce an empty dictionary;
    nothing is raised to the caller.
    """
    return _load_block(extract_front_matter(text))


def get_current_values(text: str, key: str) -> list[str]:
    """Return the normalized tag or category list stored in ``text``.

    Args:
        text: Full markdown document.
        key: ``"tags"`` or ``"categories"``.

    Returns:
        Ordered values; nested categories are flattened to ``"a / b"``. Unknown
        keys and documents without front matter yield an empty list.
    """
    try:
        kind = ClassifyKind(key)
    except ValueError:
        return []
    return _normalize_values(_lookup(parse_front_matter(text), kind), kind)


def read_metadata(
    text: str,
    path: Optional[Path] = None,
    mtime: float = 0.0,
) -> PostMetadata:
    """Build the :class:`PostMetadata` record for a document."""
    return _build_metadata(parse_front_matter(text), path, mtime)


def read_cached_metadata(
    text: str,
    identity: Hashable,
    mtime: float,
    path: Optional[Path] = None,
) -> PostMetadata:
    """Return cached metadata for ``identity`` unless ``mtime`` has changed.

    On a miss the block is located through the span cache under the same
    identity and ``mtime``.
    """
    hit = _METADATA_CACHE.get(identity)
    if hit is not None and hit.mtime == mtime:
        return hit

    lines = split_lines(text)
    span = locate_block_cached(lines, identity, mtime)
    metadata = _build_metadata(_load_block(_block_text(lines, span)), path, mtime)
    _METADATA_CACHE[identity] = metadata
    return metadata


def forget_cached_metadata(identity: Hashable) -> None:
    """Drop the cached metadata and span of ``identity`` after a rewrite."""
    _METADATA_CACHE.pop(identity, None)
    forget_cached_span(identity)


def clear_metadata_cache() -> None:
    _METADATA_CACHE.clear()
