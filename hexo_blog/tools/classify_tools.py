"""Tag and category management MCP tools.

This module provides MCP tool handlers for classify operations:
- Read one post's normalized metadata
- Replace one post's tags or categories
- List tags or categories across the blog
- Add, rename, or delete a tag or category across posts
- Normalize a category path

All tools delegate to core operations in hexo_blog.core.
"""

from typing import Any

from mcp.server.fastmcp import Context

from hexo_blog.session import resolve_blog
from hexo_blog.models import (
    ReadPostMetadataInput,
    SetPostClassifyInput,
    ListClassifiesInput,
    AddClassifyInput,
    RenameClassifyInput,
    DeleteClassifyInput,
    NormalizeCategoryInput,
)
from hexo_blog.core.categories import normalize_category
from hexo_blog.core.classify_operations import (
    add_classify,
    delete_classify,
    list_classifies,
    read_post_classify,
    rename_classify,
    set_post_values,
)


# ==============================================================================
# SINGLE-POST TOOLS
# ==============================================================================


async def read_hexo_post_metadata(
    input: ReadPostMetadataInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Read the normalized front matter (title, date, tags, categories) of a post.

    Args:
        input (ReadPostMetadataInput): Validated input containing:
            - post (str): Post identifier relative to source/, e.g. '_posts/hello'
            - blog (str, optional): Target blog (omit to use active blog)

    Returns:
        {
            "blog": str,
            "post": str,
            "path": str,
            "metadata": {"title", "date", "tags", "categories", "keys"},
            "status": "read"
        }

    Examples:
        - Use when: Showing a picker with the post's current tags pre-selected
        - Nested categories come back flattened as "Parent / Child"
        - Missing or malformed front matter → empty lists, never an error

    Error Handling:
        - ValidationError: Empty identifier or path traversal attempt
        - Post not found → FileNotFoundError
    """
    blog = resolve_blog(input.blog, ctx)
    return read_post_classify(blog, input.post)


async def set_hexo_post_classify(
    input: SetPostClassifyInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Replace the tags or categories of a single post.

    Only the lines of the chosen key are rewritten; the rest of the file keeps
    its exact formatting. A missing key is inserted at the top of the front
    matter. Posts without front matter are left untouched.

    Args:
        input (SetPostClassifyInput): Validated input containing:
            - post (str): Post identifier
            - kind (str): 'tags' or 'categories'
            - values (list[str]): Complete new list
            - blog (str, optional): Target blog

    Returns:
        {"blog": str, "post": str, "kind": str, "values": list[str],
         "status": "updated" | "unchanged"}

    Error Handling:
        - Post not found → FileNotFoundError
    """
    blog = resolve_blog(input.blog, ctx)
    return set_post_values(blog, input.post, input.kind, input.values)


# ==============================================================================
# BLOG-WIDE CLASSIFY TOOLS
# ==============================================================================


async def list_hexo_classifies(
    input: ListClassifiesInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """List every tag or category in the blog with the posts that use it.

    Args:
        input (ListClassifiesInput): Validated input containing:
            - kind (str): 'tags' or 'categories'
            - blog (str, optional): Target blog

    Returns:
        {
            "blog": str,
            "kind": str,
            "classifies": [{"name": str, "count": int, "posts": [str, ...]}, ...]
        }

    Error Handling:
        - Blog root inaccessible → FileNotFoundError
    """
    blog = resolve_blog(input.blog, ctx)
    return list_classifies(blog, input.kind)


async def add_hexo_classify(
    input: AddClassifyInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Add a tag or category to every post that already has ``name``.

    Args:
        input (AddClassifyInput): Validated input containing:
            - kind (str): 'tags' or 'categories'
            - name (str): Existing classify whose posts are updated
            - new_value (str): Value to add ('a/b' allowed for categories)
            - blog (str, optional): Target blog

    Returns:
        {"blog", "kind", "name", "added", "updated_posts", "status"}

    Error Handling:
        - Unknown ``name`` → ValueError
    """
    blog = resolve_blog(input.blog, ctx)
    return add_classify(blog, input.kind, input.name, input.new_value)


async def rename_hexo_classify(
    input: RenameClassifyInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Rename a tag or category across all posts.

    Posts that already carry the new name just drop the old one.

    Returns:
        {"blog", "kind", "old_name", "new_name", "updated_posts", "status"}

    Error Handling:
        - Unknown ``old_name`` → ValueError
    """
    blog = resolve_blog(input.blog, ctx)
    return rename_classify(blog, input.kind, input.old_name, input.new_name)


async def delete_hexo_classify(
    input: DeleteClassifyInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Remove a tag or category from every post (destructive).

    Returns:
        {"blog", "kind", "name", "updated_posts", "status": "deleted" | "unchanged"}

    Error Handling:
        - Unknown ``name`` → ValueError
    """
    blog = resolve_blog(input.blog, ctx)
    return delete_classify(blog, input.kind, input.name)


async def normalize_hexo_category(
    input: NormalizeCategoryInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Convert 'a/b/c' or '[a, b, c]' into the canonical 'a / b / c' form."""
    return {"input": input.value, "category": normalize_category(input.value)}
