"""Pure front-matter core plus blog-level operations built on it."""

from hexo_blog.core.categories import normalize_category
from hexo_blog.core.frontmatter_locator import locate_block, locate_key, split_lines
from hexo_blog.core.frontmatter_reader import (
    get_current_values,
    parse_front_matter,
    read_cached_metadata,
    read_metadata,
)
from hexo_blog.core.patch_engine import apply_edit, apply_edit_to_lines, compute_edit
from hexo_blog.core.serializer import serialize_value

__all__ = [
    "normalize_category",
    "locate_block",
    "locate_key",
    "split_lines",
    "get_current_values",
    "parse_front_matter",
    "read_cached_metadata",
    "read_metadata",
    "apply_edit",
    "apply_edit_to_lines",
    "compute_edit",
    "serialize_value",
]
