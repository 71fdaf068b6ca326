"""Level 3: Row Conversion.

This module converts raw table rows into typed attribute maps that
reference the property templates and options of the inferred schema.
"""

from .converter import (
    CHECKBOX_MAPPING,
    PropertyValue,
    RowConversionError,
    convert_row,
    convert_value,
)

__all__ = [
    "CHECKBOX_MAPPING",
    "PropertyValue",
    "RowConversionError",
    "convert_row",
    "convert_value",
]
