"""Pydantic input models for MCP tool validation.

Each model represents the input schema of one MCP tool, with field-level
validation and descriptive error messages.

Architecture:
- base: Base models (BaseBlogInput, BasePostInput, BaseClassifyInput)
- classify_models: Input models for tag and category operations
- blog_models: Input models for blog selection and deploy
"""

from .base import BaseBlogInput, BasePostInput, BaseClassifyInput
from .classify_models import (
    ReadPostMetadataInput,
    SetPostClassifyInput,
    ListClassifiesInput,
    AddClassifyInput,
    RenameClassifyInput,
    DeleteClassifyInput,
    NormalizeCategoryInput,
)
from .blog_models import (
    ListBlogsInput,
    SetActiveBlogInput,
    DeployBlogInput,
)

__all__ = [
    # Base models
    "BaseBlogInput",
    "BasePostInput",
    "BaseClassifyInput",
    # Classify models
    "ReadPostMetadataInput",
    "SetPostClassifyInput",
    "ListClassifiesInput",
    "AddClassifyInput",
    "RenameClassifyInput",
    "DeleteClassifyInput",
    "NormalizeCategoryInput",
    # Blog models
    "ListBlogsInput",
    "SetActiveBlogInput",
    "DeployBlogInput",
]
