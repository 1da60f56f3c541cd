"""Configuration loading and blog registry."""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from hexo_blog.constants import CONFIG_PATH, DEFAULT_DEPLOY_COMMAND
from hexo_blog.data_models import BlogMetadata, BlogConfiguration

logger = logging.getLogger(__name__)

_CONFIGURATION: Optional[BlogConfiguration] = None


def _blog_root(name: str, raw_path: Any) -> Path:
    if not isinstance(raw_path, str) or not raw_path.strip():
        raise ValueError(f"Blog '{name}' is missing a valid 'path' string")
    root = Path(raw_path.strip()).expanduser()
    try:
        return root.resolve(strict=False)
    except RuntimeError:
        # symlink loop
        return root


def _parse_blog_entry(name: str, entry: Any) -> BlogMetadata:
    """Turn one ``blogs.<name>`` mapping into :class:`BlogMetadata`."""
    if not isinstance(entry, dict):
        raise ValueError(f"Blog '{name}' must map to a dictionary of settings")

    root = _blog_root(name, entry.get("path"))
    deploy_command = entry.get("deploy_command") or DEFAULT_DEPLOY_COMMAND
    if not isinstance(deploy_command, str):
        raise ValueError(f"Blog '{name}' has a non-string 'deploy_command'")

    return BlogMetadata(
        name=name,
        path=root,
        description=str(entry.get("description") or "").strip(),
        exists=root.is_dir(),
        deploy_command=deploy_command.strip(),
    )


def _pick_default(requested: Any, blogs: dict[str, BlogMetadata]) -> str:
    """A lone blog is the default when ``default`` is omitted."""
    if requested is None and len(blogs) == 1:
        return next(iter(blogs))
    if not isinstance(requested, str) or requested not in blogs:
        raise ValueError("Blog configuration must specify a 'default' blog present in the mapping")
    return requested


def load_blog_configuration(config_path: Path = CONFIG_PATH) -> BlogConfiguration:
    """Load and validate the blog configuration file.

    Expected layout::

        default: blog
        blogs:
          blog:
            path: ~/sites/blog
            description: Personal blog
            deploy_command: npx hexo deploy

    Args:
        config_path: YAML file to read. Defaults to ``hexo.yaml`` next to the
            package, or ``$HEXO_BLOG_CONFIG`` when set.

    Raises:
        FileNotFoundError: If the configuration file is missing.
        ValueError: If a section or entry does not have the layout above.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Blog configuration file not found at {config_path}")

    raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw_config, dict):
        raise ValueError("Blog configuration must be a YAML mapping")

    blogs_section = raw_config.get("blogs")
    if not isinstance(blogs_section, dict) or not blogs_section:
        raise ValueError("Blog configuration must include a non-empty 'blogs' mapping")

    blogs = {str(name): _parse_blog_entry(str(name), entry) for name, entry in blogs_section.items()}
    default_blog = _pick_default(raw_config.get("default"), blogs)

    logger.info("Loaded %d blog(s) from %s (default=%s)", len(blogs), config_path, default_blog)
    return BlogConfiguration(default_blog=default_blog, blogs=blogs)


def get_blog_configuration() -> BlogConfiguration:
    """Return the process-wide configuration, loading it on first access."""
    global _CONFIGURATION
    if _CONFIGURATION is None:
        _CONFIGURATION = load_blog_configuration()
    return _CONFIGURATION


def set_blog_configuration(configuration: Optional[BlogConfiguration]) -> None:
    """Install (or with ``None`` reset) the process-wide configuration."""
    global _CONFIGURATION
    _CONFIGURATION = configuration
