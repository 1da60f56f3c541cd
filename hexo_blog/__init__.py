"""Hexo Blog MCP Server

Tag, category and deploy management for Hexo blogs via Model Context Protocol.
"""

from hexo_blog.core import (
    apply_edit,
    compute_edit,
    get_current_values,
    normalize_category,
    read_cached_metadata,
    serialize_value,
)
from hexo_blog.data_models import BlogMetadata, BlogConfiguration, ClassifyKind, PostMetadata

__version__ = "0.1.0"
__all__ = [
    "apply_edit",
    "compute_edit",
    "get_current_values",
    "normalize_category",
    "read_cached_metadata",
    "serialize_value",
    "BlogMetadata",
    "BlogConfiguration",
    "ClassifyKind",
    "PostMetadata",
]
