"""Row conversion for Level 3.

Translates one raw table row into the typed attribute map of a record,
keyed by property template id. Malformed cell data never raises: values
that cannot be converted are dropped or kept as raw text.
"""

import json
from typing import Any, Mapping, Optional, Union

from level1_ingestion.normalizer import fix_value
from level2_schema import PropertyTemplate, PropertyType, Schema, parse_date
from level2_schema.classifier import split_tokens
from utils import get_logger

logger = get_logger(__name__)

PropertyValue = Union[str, list[str]]

CHECKBOX_MAPPING = {"Yes": "true", "No": "false"}


class RowConversionError(Exception):
    """Raised when a row cannot be converted at all."""

    pass


def convert_checkbox(value: str) -> Optional[str]:
    return CHECKBOX_MAPPING.get(value)


def convert_select(template: PropertyTemplate, value: str) -> Optional[str]:
    option = template.find_option(value)
    return option.id if option else None


def convert_multi_select(template: PropertyTemplate, value: str) -> list[str]:
    """Resolve each token to an option id.

    Unknown tokens map to '' so ids stay aligned with the cell's tokens.
    """
    ids = []
    for token in split_tokens(value):
        option = template.find_option(token)
        ids.append(option.id if option else "")
    return ids


def convert_date(value: str) -> str:
    """Encode a date as ``{"from":<epoch ms>}``; unparseable text is kept raw."""
    timestamp = parse_date(value)
    if timestamp is None:
        return value
    return json.dumps({"from": timestamp}, separators=(",", ":"))


def convert_value(template: PropertyTemplate, value: str) -> Optional[PropertyValue]:
    """Convert a fixed-up, non-empty cell according to its template's type.

    Returns:
        The attribute value, or None if nothing should be written
    """
    if template.type == PropertyType.CHECKBOX:
        return convert_checkbox(value)
    if template.type == PropertyType.SELECT:
        return convert_select(template, value)
    if template.type == PropertyType.MULTI_SELECT:
        return convert_multi_select(template, value)
    if template.type == PropertyType.DATE:
        return convert_date(value)
    # url, email, phone, number and text are stored verbatim
    return value


def convert_row(schema: Schema, row: Mapping[str, Any]) -> dict[str, PropertyValue]:
    """Convert the attribute cells of one row.

    The row's first column is the title column and is skipped.

    Args:
        schema: Schema built from the same table
        row: Raw row, column name to cell

    Returns:
        Attribute map keyed by property template id

    Raises:
        RowConversionError: If the row has no columns
    """
    keys = list(row.keys())
    if len(keys) < 1:
        raise RowConversionError("Expected at least one column")

    properties: dict[str, PropertyValue] = {}
    for key in keys[1:]:
        value = fix_value(row[key])
        if not value:
            continue

        template = schema.get(key)
        if template is None:
            logger.warning(f"Column '{key}' is not part of the schema; value skipped")
            continue

        converted = convert_value(template, value)
        if converted is None:
            logger.debug(f"Column '{key}': value {value!r} has no {template.type.value} mapping")
            continue
        properties[template.id] = converted

    return properties
