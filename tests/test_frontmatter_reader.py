import unittest
from pathlib import Path

from hexo_blog.core.frontmatter_reader import (
    extract_front_matter,
    forget_cached_metadata,
    get_current_values,
    parse_front_matter,
    read_cached_metadata,
    read_metadata,
)


class FrontMatterReaderTests(unittest.TestCase):
    def test_flow_tags_are_read_in_order(self) -> None:
        text = "---\ntitle: Hello\ntags: [foo, bar]\n---\nbody"
        self.assertEqual(get_current_values(text, "tags"), ["foo", "bar"])

    def test_scalar_tag_becomes_single_item(self) -> None:
        self.assertEqual(get_current_values("---\ntags: foo\n---\n", "tags"), ["foo"])

    def test_non_string_items_are_stringified(self) -> None:
        text = "---\ntags: [2024, python, true]\n---\n"
        self.assertEqual(get_current_values(text, "tags"), ["2024", "python", "true"])

    def test_singular_aliases_are_used_when_plural_missing(self) -> None:
        text = "---\ntag: solo\ncategory: Life\n---\n"
        self.assertEqual(get_current_values(text, "tags"), ["solo"])
        self.assertEqual(get_current_values(text, "categories"), ["Life"])

    def test_empty_plural_key_falls_back_to_alias(self) -> None:
        text = "---\ntags:\ntag: fallback\n---\n"
        self.assertEqual(get_current_values(text, "tags"), ["fallback"])

    def test_nested_categories_are_flattened(self) -> None:
        text = "---\ncategories:\n  - [Tech, Python]\n  - Life\n---\n"
        self.assertEqual(get_current_values(text, "categories"), ["Tech / Python", "Life"])

    def test_invalid_yaml_reads_as_empty(self) -> None:
        text = "---\ntitle: Broken\ntags: [a, b\n---\nbody"
        self.assertEqual(parse_front_matter(text), {})
        self.assertEqual(get_current_values(text, "tags"), [])
        metadata = read_metadata(text)
        self.assertEqual(metadata.tags, ())
        self.assertEqual(metadata.title, "")

    def test_impossible_date_reads_as_empty(self) -> None:
        text = "---\ndate: 2024-02-30 10:00:00\ntags: [a, b]\n---\n"
        self.assertEqual(parse_front_matter(text), {})
        self.assertEqual(get_current_values(text, "tags"), [])

    def test_bad_explicit_tag_reads_as_empty(self) -> None:
        metadata = read_metadata("---\ntags: !!int abc\n---\n")
        self.assertEqual(metadata.tags, ())
        self.assertEqual(metadata.keys, frozenset())

    def test_leading_bom_is_tolerated(self) -> None:
        text = "\ufeff---\ntitle: Hello\ntags: a\n---\nbody"
        self.assertEqual(get_current_values(text, "tags"), ["a"])
        self.assertEqual(read_metadata(text).title, "Hello")

    def test_missing_front_matter_reads_as_empty(self) -> None:
        self.assertEqual(get_current_values("# Title\n\nbody", "tags"), [])
        self.assertIsNone(extract_front_matter("---\nonly one delimiter"))

    def test_non_mapping_front_matter_reads_as_empty(self) -> None:
        self.assertEqual(parse_front_matter("---\n- a\n- b\n---\n"), {})

    def test_unknown_key_reads_as_empty(self) -> None:
        self.assertEqual(get_current_values("---\ntitle: x\n---\n", "title"), [])

    def test_extract_uses_same_span_as_locator(self) -> None:
        text = "preface\n---\ntitle: A\n---\nbody\n---\nmore"
        self.assertEqual(extract_front_matter(text), "title: A")

    def test_read_metadata_collects_title_date_and_keys(self) -> None:
        text = (
            "---\n"
            "title: Hello World\n"
            "date: 2024-01-02 10:00:00\n"
            "tags: [a, b]\n"
            "categories: Notes\n"
            "layout: post\n"
            "---\n"
            "body\n"
        )
        metadata = read_metadata(text, path=Path("hello.md"), mtime=5.0)
        self.assertEqual(metadata.title, "Hello World")
        self.assertEqual(metadata.date, "2024-01-02 10:00:00")
        self.assertEqual(metadata.tags, ("a", "b"))
        self.assertEqual(metadata.categories, ("Notes",))
        self.assertEqual(metadata.keys, {"title", "date", "tags", "categories", "layout"})
        self.assertEqual(metadata.mtime, 5.0)
        self.assertEqual(metadata.path, Path("hello.md"))


class MetadataCacheTests(unittest.TestCase):
    def test_cache_hit_requires_same_mtime(self) -> None:
        first = read_cached_metadata("---\ntags: a\n---\n", "post.md", 1.0)
        again = read_cached_metadata("---\ntags: changed\n---\n", "post.md", 1.0)
        self.assertIs(again, first)

        refreshed = read_cached_metadata("---\ntags: changed\n---\n", "post.md", 2.0)
        self.assertEqual(refreshed.tags, ("changed",))

    def test_cache_is_keyed_by_identity(self) -> None:
        one = read_cached_metadata("---\ntags: a\n---\n", "one.md", 1.0)
        two = read_cached_metadata("---\ntags: b\n---\n", "two.md", 1.0)
        self.assertEqual(one.tags, ("a",))
        self.assertEqual(two.tags, ("b",))

    def test_forget_drops_cached_entry(self) -> None:
        read_cached_metadata("---\ntags: a\n---\n", "post.md", 1.0)
        forget_cached_metadata("post.md")
        fresh = read_cached_metadata("no front matter", "post.md", 1.0)
        self.assertEqual(fresh.tags, ())


if __name__ == "__main__":
    unittest.main()
