"""Pydantic input models for tag and category operations.

This module defines input models for classify management:
- Read the normalized metadata of one post
- Replace the tags or categories of one post
- List tags or categories across the blog
- Add, rename, or delete a tag or category across all posts using it
- Normalize a user-typed category path
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .base import BaseClassifyInput, BasePostInput


def _require_text(value: str, field_name: str) -> str:
    cleaned = value.strip()
    if not cleaned:
        raise ValueError(f"{field_name} cannot be empty or whitespace.")
    return cleaned


class ReadPostMetadataInput(BasePostInput):
    """Input model for read_hexo_post_metadata tool.

    Examples:
        >>> ReadPostMetadataInput(post="_posts/hello-world")
    """

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"post": "_posts/hello-world", "blog": None},
                {"post": "_drafts/upcoming", "blog": "work"}
            ]
        }


class SetPostClassifyInput(BasePostInput, BaseClassifyInput):
    """Input model for set_hexo_post_classify tool.

    Replaces the whole tag or category list of one post. Category entries may
    use 'a/b' or '[a, b]' syntax for nested categories.

    Examples:
        >>> SetPostClassifyInput(post="hello", kind="tags", values=["python", "mcp"])
    """

    values: list[str] = Field(
        default_factory=list,
        description=(
            "Complete new value list. Empty list writes '[]'. "
            "Nested categories: 'Tech/Python' or '[Tech, Python]'."
        ),
        examples=[["python", "hexo"], ["Tech/Python"], []]
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"post": "_posts/hello-world", "kind": "tags", "values": ["python", "hexo"]},
                {"post": "hello-world", "kind": "categories", "values": ["Tech/Python"]}
            ]
        }


class ListClassifiesInput(BaseClassifyInput):
    """Input model for list_hexo_classifies tool.

    Examples:
        >>> ListClassifiesInput(kind="categories")
    """


class AddClassifyInput(BaseClassifyInput):
    """Input model for add_hexo_classify tool.

    Adds ``new_value`` to every post currently classified under ``name``.

    Examples:
        >>> AddClassifyInput(kind="tags", name="python", new_value="programming")
    """

    name: str = Field(
        min_length=1,
        description="Existing tag or category whose posts receive the new value.",
        examples=["python", "Tech / Python"]
    )

    new_value: str = Field(
        min_length=1,
        description="Value to add. Categories accept 'a/b' or '[a, b]'.",
        examples=["programming", "Tech/Web"]
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _require_text(v, "Classify name")

    @field_validator('new_value')
    @classmethod
    def validate_new_value(cls, v: str) -> str:
        return _require_text(v, "New value")


class RenameClassifyInput(BaseClassifyInput):
    """Input model for rename_hexo_classify tool.

    Examples:
        >>> RenameClassifyInput(kind="categories", old_name="Tech", new_name="Tech/General")
    """

    old_name: str = Field(
        min_length=1,
        description="Tag or category to rename, exactly as listed by list_hexo_classifies().",
        examples=["python", "Tech / Python"]
    )

    new_name: str = Field(
        min_length=1,
        description="Replacement name. Categories accept 'a/b' or '[a, b]'.",
        examples=["Python", "Dev/Python"]
    )

    @field_validator('old_name')
    @classmethod
    def validate_old_name(cls, v: str) -> str:
        return _require_text(v, "Old name")

    @field_validator('new_name')
    @classmethod
    def validate_new_name(cls, v: str) -> str:
        return _require_text(v, "New name")


class DeleteClassifyInput(BaseClassifyInput):
    """Input model for delete_hexo_classify tool.

    Examples:
        >>> DeleteClassifyInput(kind="tags", name="obsolete")
    """

    name: str = Field(
        min_length=1,
        description="Tag or category to remove from every post.",
        examples=["obsolete", "Drafts / Old"]
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _require_text(v, "Classify name")


class NormalizeCategoryInput(BaseModel):
    """Input model for normalize_hexo_category tool.

    Examples:
        >>> NormalizeCategoryInput(value="[Tech, Python]")
    """

    value: str = Field(
        description="Category as typed by a user: 'a/b/c' or '[a, b, c]'.",
        examples=["Tech/Python", "[Tech, 'Python']"]
    )
