"""Tests for the front-matter patch engine."""

import pytest

from hexo_blog.core.frontmatter_locator import split_lines
from hexo_blog.core.frontmatter_reader import get_current_values
from hexo_blog.core.patch_engine import apply_edit, apply_edit_to_lines, compute_edit
from hexo_blog.data_models import FrontMatterEdit


HELLO = "---\ntitle: Hello\ntags: foo\n---\nbody"


class TestApplyEdit:
    """Full-text rewrites."""

    def test_adding_a_tag_switches_to_flow_list(self):
        values = get_current_values(HELLO, "tags") + ["bar"]
        assert apply_edit(HELLO, "tags", values) == "---\ntitle: Hello\ntags: [foo, bar]\n---\nbody"

    def test_block_list_is_replaced_atomically(self):
        text = "---\ntitle: T\ntags:\n  - a\n  - b\ndate: 2020-01-01\n---\nbody"
        assert apply_edit(text, "tags", ["a"]) == "---\ntitle: T\ntags: a\ndate: 2020-01-01\n---\nbody"

    def test_missing_key_is_inserted_after_opening_delimiter(self):
        text = "---\ntitle: T\n---\nbody"
        expected = "---\ncategories:\n  - [a, b]\ntitle: T\n---\nbody"
        assert apply_edit(text, "categories", ["a / b"]) == expected

    def test_document_without_front_matter_is_unchanged(self):
        text = "# Title\n\ntags: not front matter\n"
        assert apply_edit(text, "tags", ["x"]) == text
        assert apply_edit("---\nonly one", "tags", ["x"]) == "---\nonly one"

    def test_body_lines_matching_key_are_not_touched(self):
        text = "---\ntitle: T\n---\ntags: body"
        assert apply_edit(text, "tags", ["x"]) == "---\ntags: x\ntitle: T\n---\ntags: body"

    def test_trailing_blank_lines_belong_to_the_key(self):
        text = "---\ntags: a\n\ntitle: T\n---\n"
        assert apply_edit(text, "tags", ["b"]) == "---\ntags: b\ntitle: T\n---\n"

    def test_empty_values_write_empty_list(self):
        text = "---\ncategories:\n  - [Tech, Python]\n  - Life\n---\n"
        assert apply_edit(text, "categories", []) == "---\ncategories: []\n---\n"

    def test_crlf_documents_keep_their_line_endings(self):
        text = "---\r\ntitle: T\r\ntags: a\r\n---\r\nbody\r\n"
        expected = "---\r\ntitle: T\r\ntags: [a, b]\r\n---\r\nbody\r\n"
        assert apply_edit(text, "tags", ["a", "b"]) == expected

    def test_other_keys_keep_exact_formatting(self):
        text = (
            "---\n"
            "title:   'Spaced  Title'   \n"
            "tags: [a]\n"
            "custom:\n"
            "  nested: true\n"
            "---\n"
            "body\n"
        )
        result = apply_edit(text, "tags", ["a", "b"])
        assert result == text.replace("tags: [a]", "tags: [a, b]")


class TestNonInterference:
    """Lines outside the edited key span never change."""

    @pytest.mark.parametrize(
        ("key", "values"),
        [("tags", ["x"]), ("tags", []), ("categories", ["a / b", "c"]), ("categories", ["z"])],
    )
    def test_lines_outside_span_are_preserved(self, key, values):
        text = (
            "intro line\n"
            "---\n"
            "title: Post\n"
            "tags:\n"
            "  - one\n"
            "  - two\n"
            "categories: Old\n"
            "date: 2024-01-01\n"
            "---\n"
            "body\n"
            "tags: [not, front, matter]\n"
        )
        lines = split_lines(text)
        edit = compute_edit(lines, key, values)
        assert edit is not None

        new_lines = split_lines(apply_edit(text, key, values))
        assert new_lines[: edit.start_line] == lines[: edit.start_line]
        tail = len(lines) - edit.end_line
        assert new_lines[len(new_lines) - tail :] == lines[edit.end_line :]


class TestIdempotence:
    """Applying the same value set twice is stable."""

    @pytest.mark.parametrize(
        "text",
        [
            HELLO,
            "---\ntitle: T\n---\nbody",
            "---\ntags:\n  - a\n\n---\n",
            "---\r\ntags: a\r\n---\r\n",
        ],
    )
    @pytest.mark.parametrize(
        ("key", "values"),
        [("tags", []), ("tags", ["a", "b"]), ("categories", ["x / y", "z"]), ("categories", ["w"])],
    )
    def test_second_application_is_a_noop(self, text, key, values):
        once = apply_edit(text, key, values)
        assert apply_edit(once, key, values) == once


class TestRoundTrip:
    """Values written by the engine read back identically."""

    @pytest.mark.parametrize(
        ("key", "values"),
        [
            ("tags", []),
            ("tags", ["solo"]),
            ("tags", ["a", "b", "c"]),
            ("categories", []),
            ("categories", ["Life"]),
            ("categories", ["Tech / Python"]),
            ("categories", ["Life", "Tech / Python / Web"]),
        ],
    )
    def test_read_recovers_written_values(self, key, values):
        text = apply_edit("---\ntitle: T\n---\nbody", key, values)
        assert get_current_values(text, key) == values


class TestComputeEdit:
    """Span-plus-replacement descriptors for in-place editing."""

    def test_replacement_edit_covers_key_span(self):
        lines = split_lines("---\ntitle: T\ntags:\n  - a\n  - b\n---\n")
        edit = compute_edit(lines, "tags", ["a"])
        assert edit == FrontMatterEdit(start_line=2, end_line=5, replacement=("tags: a",))

    def test_insertion_edit_is_empty_range(self):
        lines = split_lines("---\ntitle: T\n---\n")
        edit = compute_edit(lines, "tags", ["x", "y"])
        assert edit == FrontMatterEdit(start_line=1, end_line=1, replacement=("tags: [x, y]",))

    def test_no_block_gives_no_edit(self):
        assert compute_edit(["just text"], "tags", ["x"]) is None

    def test_apply_edit_to_lines_returns_new_list(self):
        lines = split_lines("---\ntags: a\n---")
        edit = compute_edit(lines, "tags", ["b"])
        assert apply_edit_to_lines(lines, edit) == ["---", "tags: b", "---"]
        assert lines == ["---", "tags: a", "---"]

    def test_cached_span_is_reused_for_same_version(self):
        lines = split_lines("---\ntags: a\n---\n")
        first = compute_edit(lines, "tags", ["b"], identity="post.md", version=1.0)
        assert first == FrontMatterEdit(start_line=1, end_line=2, replacement=("tags: b",))
        assert apply_edit("---\ntags: a\n---\n", "tags", ["b"], identity="post.md", version=1.0) == (
            "---\ntags: b\n---\n"
        )
