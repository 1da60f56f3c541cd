"""Tests for Pydantic input models.

Valid inputs are accepted and normalized; invalid inputs raise
ValidationError with descriptive messages.
"""

import pytest
from pydantic import ValidationError

from hexo_blog.data_models import ClassifyKind
from hexo_blog.models import (
    AddClassifyInput,
    BasePostInput,
    DeleteClassifyInput,
    DeployBlogInput,
    ListClassifiesInput,
    RenameClassifyInput,
    SetActiveBlogInput,
    SetPostClassifyInput,
)


class TestBasePostInput:
    """Test suite for post identifier validation."""

    def test_valid_simple_post(self):
        model = BasePostInput(post="hello-world")
        assert model.post == "hello-world"
        assert model.blog is None

    def test_valid_nested_post(self):
        model = BasePostInput(post="_posts/2025/hello")
        assert model.post == "_posts/2025/hello"

    def test_md_extension_is_stripped(self):
        assert BasePostInput(post="_posts/hello.md").post == "_posts/hello"
        assert BasePostInput(post="hello.MD").post == "hello"

    def test_backslashes_are_normalized(self):
        assert BasePostInput(post="_posts\\hello").post == "_posts/hello"

    def test_blog_whitespace_is_stripped(self):
        assert BasePostInput(post="a", blog="  main  ").blog == "main"

    def test_empty_post_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            BasePostInput(post="   ")
        assert "empty" in str(exc_info.value).lower()

    @pytest.mark.parametrize("post", ["../secret", "_posts/../../x", "./hello"])
    def test_traversal_raises(self, post):
        with pytest.raises(ValidationError) as exc_info:
            BasePostInput(post=post)
        errors = exc_info.value.errors()
        assert any("'..'" in str(e) for e in errors)

    def test_absolute_path_raises(self):
        with pytest.raises(ValidationError):
            BasePostInput(post="/etc/passwd")

    def test_only_extension_raises(self):
        with pytest.raises(ValidationError):
            BasePostInput(post=".md")

    def test_empty_blog_raises(self):
        with pytest.raises(ValidationError):
            BasePostInput(post="a", blog="  ")


class TestClassifyInputs:
    """Test suite for tag/category tool inputs."""

    def test_kind_is_parsed_to_enum(self):
        model = ListClassifiesInput(kind="categories")
        assert model.kind is ClassifyKind.CATEGORIES

    def test_invalid_kind_raises(self):
        with pytest.raises(ValidationError):
            ListClassifiesInput(kind="labels")

    def test_set_post_classify_defaults_to_empty_values(self):
        model = SetPostClassifyInput(post="hello", kind="tags")
        assert model.values == []

    def test_add_input_strips_names(self):
        model = AddClassifyInput(kind="tags", name=" python ", new_value=" web ")
        assert model.name == "python"
        assert model.new_value == "web"

    def test_add_whitespace_value_raises(self):
        with pytest.raises(ValidationError):
            AddClassifyInput(kind="tags", name="python", new_value="   ")

    def test_rename_requires_both_names(self):
        with pytest.raises(ValidationError):
            RenameClassifyInput(kind="tags", old_name="a")

    def test_delete_empty_name_raises(self):
        with pytest.raises(ValidationError):
            DeleteClassifyInput(kind="categories", name="")


class TestBlogInputs:
    """Test suite for blog selection and deploy inputs."""

    def test_set_active_blog_strips(self):
        assert SetActiveBlogInput(blog=" main ").blog == "main"

    def test_set_active_blog_whitespace_raises(self):
        with pytest.raises(ValidationError):
            SetActiveBlogInput(blog="   ")

    def test_deploy_timeout_must_be_positive(self):
        assert DeployBlogInput().timeout is None
        assert DeployBlogInput(timeout=30).timeout == 30
        with pytest.raises(ValidationError):
            DeployBlogInput(timeout=0)
