"""Data models for blog configuration, post metadata, and front-matter edits."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from hexo_blog.constants import DEFAULT_DEPLOY_COMMAND


class ClassifyKind(str, Enum):
    """Front-matter keys that classify a post."""

    TAGS = "tags"
    CATEGORIES = "categories"

    @property
    def alias(self) -> str:
        """Singular spelling Hexo also accepts for the key."""
        return "tag" if self is ClassifyKind.TAGS else "category"

    @property
    def label(self) -> str:
        return "tag" if self is ClassifyKind.TAGS else "category"


@dataclass(frozen=True)
class FrontMatterSpan:
    """Line indexes of the opening and closing ``---`` delimiters."""

    block_start: int
    block_end: int


@dataclass(frozen=True)
class KeySpan:
    """Inclusive line range owned by one front-matter key."""

    start_line: int
    end_line: int


@dataclass(frozen=True)
class FrontMatterEdit:
    """Replace ``lines[start_line:end_line]`` with ``replacement``.

    An insertion is expressed with ``start_line == end_line``.
    """

    start_line: int
    end_line: int
    replacement: tuple[str, ...]


@dataclass(frozen=True)
class PostMetadata:
    """Normalized front-matter record of a single post."""

    tags: tuple[str, ...] = ()
    categories: tuple[str, ...] = ()
    title: str = ""
    date: str = ""
    mtime: float = 0.0
    keys: frozenset[str] = frozenset()
    path: Optional[Path] = None

    def values_for(self, kind: ClassifyKind) -> list[str]:
        """Return a mutable copy of the values stored under ``kind``."""
        if kind is ClassifyKind.TAGS:
            return list(self.tags)
        return list(self.categories)

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "title": self.title,
            "date": self.date,
            "tags": list(self.tags),
            "categories": list(self.categories),
            "keys": sorted(self.keys),
        }


@dataclass(frozen=True)
class ClassifyGroup:
    """All posts sharing one tag or category value."""

    name: str
    files: tuple[PostMetadata, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class BlogMetadata:
    """Normalized metadata describing a Hexo blog root."""

    name: str
    path: Path
    description: str
    exists: bool
    deploy_command: str = DEFAULT_DEPLOY_COMMAND

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "name": self.name,
            "path": str(self.path),
            "description": self.description,
            "deploy_command": self.deploy_command,
            "exists": self.path.is_dir(),
        }


class BlogConfiguration:
    """Holds blog metadata and default resolution helpers.

    Loaded lazily from hexo.yaml on first use.
    """

    def __init__(self, default_blog: str, blogs: dict[str, BlogMetadata]) -> None:
        self.default_blog = default_blog
        self.blogs = blogs

    def get(self, name: str) -> BlogMetadata:
        """Get blog metadata by name.

        Raises:
            ValueError: If the blog name is not found in configuration.
        """
        try:
            return self.blogs[name]
        except KeyError as exc:
            raise ValueError(f"Unknown blog '{name}'") from exc

    def as_payload(self) -> dict[str, Any]:
        return {
            "default": self.default_blog,
            "blogs": [blog.as_payload() for blog in self.blogs.values()],
        }
