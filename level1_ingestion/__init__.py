"""Level 1: Table Ingestion.

This module handles locating and loading the exported table, normalizing
raw cells, and looking up per-record text content.
"""

from .content import MarkdownContentLookup
from .loader import (
    Table,
    TableLoadError,
    derive_table_title,
    find_csv_file,
    load_table,
    read_table_file,
    rows_from_dataframe,
)
from .normalizer import fix_value, normalize_cell

__all__ = [
    "MarkdownContentLookup",
    "Table",
    "TableLoadError",
    "derive_table_title",
    "find_csv_file",
    "fix_value",
    "load_table",
    "normalize_cell",
    "read_table_file",
    "rows_from_dataframe",
]
