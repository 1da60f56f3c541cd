"""Module-level constants for the Hexo blog MCP server."""

import os
from pathlib import Path

# Configuration
CONFIG_PATH = Path(
    os.environ.get("HEXO_BLOG_CONFIG", Path(__file__).parent.parent / "hexo.yaml")
)
DEFAULT_DEPLOY_COMMAND = "npx hexo deploy"
DEPLOY_ROOT_ENV = "HEXO_ROOT"

# Blog layout
SOURCE_DIR = "source"
POSTS_DIR = "_posts"
DRAFTS_DIR = "_drafts"

# Front matter
FRONT_MATTER_DELIMITER = "---"
CATEGORY_SEPARATOR = " / "

# Limits
MAX_DEPLOY_OUTPUT_LINES = 200

# Logging
LOG_LEVEL = "INFO"
