"""Render tag and category lists in Hexo's on-disk front-matter style."""

from __future__ import annotations

from collections.abc import Sequence

from hexo_blog.constants import CATEGORY_SEPARATOR
from hexo_blog.data_models import ClassifyKind


def _serialize_flow(key: str, values: Sequence[str]) -> str:
    if not values:
        return f"{key}: []"
    if len(values) == 1:
        return f"{key}: {values[0]}"
    return f"{key}: [{', '.join(values)}]"


def _serialize_categories(key: str, values: Sequence[str]) -> str:
    if not values:
        return f"{key}: []"
    if len(values) == 1 and CATEGORY_SEPARATOR not in values[0]:
        return f"{key}: {values[0]}"

    lines = [f"{key}:"]
    for value in values:
        parts = value.split(CATEGORY_SEPARATOR)
        if len(parts) > 1:
            lines.append(f"  - [{', '.join(parts)}]")
        else:
            lines.append(f"  - {parts[0]}")
    return "\n".join(lines)


def serialize_value(key: str, values: Sequence[str]) -> str:
    """Serialize ``values`` for ``key`` as front-matter text.

    Tags use a flow sequence (``tags: [a, b]``), a bare scalar for a single
    value and ``[]`` when empty. Categories use a bare scalar for one flat
    value and otherwise a block list, writing nested paths as ``- [a, b]``.
    Values are written verbatim without quoting.

    Examples:
        >>> serialize_value("tags", ["x", "y"])
        'tags: [x, y]'
        >>> serialize_value("categories", ["a", "b / c"])
        'categories:\\n  - a\\n  - [b, c]'
    """
    if key == ClassifyKind.CATEGORIES.value:
        return _serialize_categories(key, values)
    return _serialize_flow(key, values)
