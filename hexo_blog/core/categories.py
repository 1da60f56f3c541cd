"""Normalization of user-entered category paths."""

from __future__ import annotations

import re

from hexo_blog.constants import CATEGORY_SEPARATOR

_QUOTE_PATTERN = re.compile(r"^[\"']|[\"']$")


def normalize_category(user_input: str) -> str:
    """Convert ``a/b/c`` or ``[a, "b", c]`` input into ``"a / b / c"``.

    Examples:
        >>> normalize_category("Tech/Python")
        'Tech / Python'
        >>> normalize_category("[Tech, 'Python']")
        'Tech / Python'
    """
    trimmed = user_input.strip()
    if trimmed.startswith("[") and trimmed.endswith("]"):
        parts = [_QUOTE_PATTERN.sub("", part.strip()) for part in trimmed[1:-1].split(",")]
    else:
        parts = [part.strip() for part in user_input.split("/")]
    return CATEGORY_SEPARATOR.join(part for part in parts if part)
