"""Pydantic input models for blog management and deploy operations."""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field, field_validator

from .base import BaseBlogInput


class ListBlogsInput(BaseModel):
    """Input model for list_hexo_blogs tool.

    Takes no parameters; the model keeps every tool's signature uniform.

    Examples:
        >>> ListBlogsInput()
    """

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [{}]
        }


class SetActiveBlogInput(BaseModel):
    """Input model for set_active_hexo_blog tool.

    Examples:
        >>> SetActiveBlogInput(blog="personal")
    """

    blog: str = Field(
        min_length=1,
        description=(
            "Blog name from hexo.yaml configuration. "
            "Use list_hexo_blogs() to discover valid names."
        ),
        examples=["personal", "work"]
    )

    @field_validator('blog')
    @classmethod
    def validate_blog(cls, v: str) -> str:
        """Validate blog name format.

        Raises:
            ValueError: If blog name is empty or only whitespace
        """
        cleaned = v.strip()

        if not cleaned:
            raise ValueError(
                "Blog name cannot be empty. "
                "Use list_hexo_blogs() to see available blogs."
            )

        return cleaned


class DeployBlogInput(BaseBlogInput):
    """Input model for deploy_hexo_blog tool.

    Examples:
        >>> DeployBlogInput()
        >>> DeployBlogInput(blog="work", timeout=600)
    """

    timeout: Optional[float] = Field(
        None,
        gt=0,
        description="Seconds to wait before killing the deploy command (omit for no limit).",
    )
