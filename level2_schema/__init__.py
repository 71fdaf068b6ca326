"""Level 2: Schema Inference.

This module classifies each column of a table into a property type,
assigns option identities and colors to discrete columns, and assembles
the ordered schema used to convert rows.
"""

from .builder import build_schema, collect_column_samples, get_columns
from .classifier import (
    Classification,
    PropertyType,
    classify,
    classify_column,
    parse_date,
)
from .models import ColumnSample, Option, PropertyTemplate, Schema
from .options import OPTION_COLORS, OptionRegistry

__all__ = [
    "build_schema",
    "collect_column_samples",
    "get_columns",
    "Classification",
    "PropertyType",
    "classify",
    "classify_column",
    "parse_date",
    "ColumnSample",
    "Option",
    "PropertyTemplate",
    "Schema",
    "OPTION_COLORS",
    "OptionRegistry",
]
