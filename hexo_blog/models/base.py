"""Base Pydantic models for MCP tool input validation.

Base Models:
- BaseBlogInput: Optional blog name shared by every blog-scoped tool
- BasePostInput: Adds post identifier validation for single-post operations
- BaseClassifyInput: Adds the tags/categories selector
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field, field_validator

from hexo_blog.data_models import ClassifyKind


class BaseBlogInput(BaseModel):
    """Base model carrying the optional blog name."""

    blog: Optional[str] = Field(
        None,
        description=(
            "Blog name (omit to use active blog). "
            "Use list_hexo_blogs() to discover available blogs."
        )
    )

    @field_validator('blog')
    @classmethod
    def validate_blog(cls, v: Optional[str]) -> Optional[str]:
        """Reject empty blog names; strip surrounding whitespace."""
        if v is not None and not v.strip():
            raise ValueError(
                "Blog name cannot be empty. "
                "Either omit the blog parameter to use the active blog, "
                "or provide a valid blog name from list_hexo_blogs()."
            )

        return v.strip() if v else None


class BasePostInput(BaseBlogInput):
    """Base model for single-post operations with identifier validation."""

    post: str = Field(
        min_length=1,
        description=(
            "Post identifier relative to the blog's source folder, without .md. "
            "Examples: '_posts/hello-world', '_drafts/wip'. "
            "A bare name is looked up in _posts."
        ),
        examples=["_posts/hello-world", "hello-world", "_drafts/upcoming"]
    )

    @field_validator('post')
    @classmethod
    def validate_post(cls, v: str) -> str:
        """Validate a post identifier for safety and format.

        Enforces:
        - Non-empty identifier
        - No '.' or '..' path segments
        - Relative path only
        - Strips a trailing .md extension

        Raises:
            ValueError: If the identifier is empty or unsafe
        """
        cleaned = v.strip().replace("\\", "/")

        if not cleaned:
            raise ValueError(
                "Post identifier cannot be empty. "
                "Provide a post like '_posts/hello-world'."
            )

        if any(part in {".", ".."} for part in cleaned.split("/")):
            raise ValueError(
                "Post identifier cannot contain '.' or '..' path segments. "
                f"Invalid post: '{cleaned}'"
            )

        if cleaned.startswith("/"):
            raise ValueError(
                "Post identifier must be relative to the blog's source folder. "
                f"Invalid post: '{cleaned}'"
            )

        if cleaned.lower().endswith(".md"):
            cleaned = cleaned[:-3]

        if not cleaned or cleaned.endswith("/"):
            raise ValueError(
                "Post identifier must name a markdown file. "
                f"Invalid post: '{v}'"
            )

        return cleaned


class BaseClassifyInput(BaseBlogInput):
    """Base model for operations scoped to tags or categories."""

    kind: ClassifyKind = Field(
        description="Which front-matter list to operate on: 'tags' or 'categories'.",
        examples=["tags", "categories"]
    )
