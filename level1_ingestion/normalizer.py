"""Cell normalization for Level 1 ingestion.

Raw cells are normalized the same way whether they are sampled for
schema inference or converted into record attributes.
"""

import re
from typing import Any

# Exports rewrite intra-workspace links as absolute URLs glued to the page path
_NOTION_LINK_PREFIX = re.compile(r"^https://www\.notion\.so([0-9a-zA-Z])")


def normalize_cell(value: Any) -> str:
    """Return a cell as a string; missing cells become ''."""
    if value is None:
        return ""
    if isinstance(value, float) and value != value:
        # NaN from a DataFrame that was not read as strings
        return ""
    return value if isinstance(value, str) else str(value)


def fix_value(value: Any) -> str:
    """Normalize a raw cell and strip the workspace link prefix.

    ``https://www.notion.soAbc`` becomes ``Abc``; the prefix is only removed
    when an alphanumeric character follows it directly.
    """
    return _NOTION_LINK_PREFIX.sub(r"\1", normalize_cell(value), count=1)
