"""Column type classification for Level 2.

Each column's non-empty sample values are run through an ordered cascade
of tests; the first test that matches wins. Ratio tests compare the share
of matching values against MATCH_THRESHOLD. Discrete columns (select and
multi-select) additionally report the option values they were inferred
from.
"""

import re
import warnings
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, Optional, Sequence

import pandas as pd

from utils import get_logger

logger = get_logger(__name__)

# Share of values that must match a ratio test
MATCH_THRESHOLD = 0.8

# Tunable: a vocabulary is "closed" when fewer than 90% of tokens are distinct
DISTINCT_TOKEN_RATIO = 0.9

# Tunable: a cell packs several tags when tokens outnumber rows by more than 10%
TOKENS_PER_ROW_RATIO = 1.1

MULTI_VALUE_DELIMITER = ", "

CHECKBOX_VALUES = frozenset({"Yes", "No"})


class PropertyType(str, Enum):
    """Semantic types a column can be classified as."""

    URL = "url"
    EMAIL = "email"
    PHONE = "phone"
    NUMBER = "number"
    DATE = "date"
    CHECKBOX = "checkbox"
    SELECT = "select"
    MULTI_SELECT = "multiSelect"
    TEXT = "text"

    @property
    def is_discrete(self) -> bool:
        """Whether values of this type reference options."""
        return self in (PropertyType.SELECT, PropertyType.MULTI_SELECT)


_URL_PATTERN = re.compile(r"^https?://.+$")
_EMAIL_PATTERN = re.compile(r"^.+?@\w+?\.\w+$", re.ASCII)
_PHONE_PATTERN = re.compile(r"^(0?9\d{9}|(0|\+98)\d{10})$", re.ASCII)
_NUMBER_PATTERN = re.compile(r"^\d+$", re.ASCII)
_DIGIT_PATTERN = re.compile(r"\d", re.ASCII)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_date(value: str) -> Optional[int]:
    """Parse a calendar date/time.

    Args:
        value: Raw cell text

    Returns:
        Milliseconds since the epoch (naive values are taken as UTC),
        or None if the value is not a date
    """
    # A bare month or weekday name carries no date
    if not _DIGIT_PATTERN.search(value):
        return None
    try:
        with warnings.catch_warnings():
            # pandas warns when it has to guess day/month order
            warnings.simplefilter("ignore", UserWarning)
            timestamp = pd.to_datetime(value, utc=True)
            if pd.isna(timestamp):
                return None
            # datetime covers years 1-9999 without the nanosecond range limit
            delta = timestamp.to_pydatetime() - _EPOCH
    except (ValueError, TypeError, OverflowError):
        return None
    return delta // timedelta(milliseconds=1)


def is_url(value: str) -> bool:
    return bool(_URL_PATTERN.match(value))


def is_email(value: str) -> bool:
    return bool(_EMAIL_PATTERN.match(value))


def is_phone(value: str) -> bool:
    return bool(_PHONE_PATTERN.match(value))


def is_number(value: str) -> bool:
    return bool(_NUMBER_PATTERN.match(value))


def is_date(value: str) -> bool:
    return parse_date(value) is not None


# Evaluated top to bottom; order matters (e.g. digit strings also parse as dates)
RATIO_TESTS: list[tuple[PropertyType, Callable[[str], bool]]] = [
    (PropertyType.URL, is_url),
    (PropertyType.EMAIL, is_email),
    (PropertyType.PHONE, is_phone),
    (PropertyType.NUMBER, is_number),
    (PropertyType.DATE, is_date),
]


@dataclass
class Classification:
    """Result of classifying one column.

    ``option_values`` lists the distinct option values, in order of first
    appearance, for select and multi-select columns; it is empty otherwise.
    """

    type: PropertyType
    option_values: list[str] = field(default_factory=list)


def match_ratio(values: Sequence[str], predicate: Callable[[str], bool]) -> float:
    """Share of values satisfying predicate; 0.0 for an empty sample."""
    if not values:
        return 0.0
    matches = sum(1 for value in values if predicate(value))
    return matches / len(values)


def split_tokens(value: str) -> list[str]:
    """Split a multi-value cell into its tokens."""
    return value.split(MULTI_VALUE_DELIMITER)


def classify_column(column_name: str, values: Sequence[str]) -> Classification:
    """Classify a column from its non-empty sample values.

    Args:
        column_name: Column name (used for logging only)
        values: Non-empty cell values of the column, in row order

    Returns:
        Classification with the inferred type and, for discrete types,
        the option values
    """
    if not values:
        logger.debug(f"Column '{column_name}': empty sample, type=text")
        return Classification(PropertyType.TEXT)

    for property_type, predicate in RATIO_TESTS:
        if match_ratio(values, predicate) > MATCH_THRESHOLD:
            logger.debug(f"Column '{column_name}': type={property_type.value}")
            return Classification(property_type)

    if set(values) == CHECKBOX_VALUES:
        logger.debug(f"Column '{column_name}': type=checkbox")
        return Classification(PropertyType.CHECKBOX)

    tokens = [token for value in values for token in split_tokens(value)]
    distinct_tokens = list(dict.fromkeys(tokens))
    if tokens and len(distinct_tokens) / len(tokens) < DISTINCT_TOKEN_RATIO:
        if len(tokens) / len(values) > TOKENS_PER_ROW_RATIO:
            logger.debug(
                f"Column '{column_name}': type=multiSelect, options={len(distinct_tokens)}"
            )
            return Classification(PropertyType.MULTI_SELECT, distinct_tokens)

        distinct_values = list(dict.fromkeys(values))
        logger.debug(f"Column '{column_name}': type=select, options={len(distinct_values)}")
        return Classification(PropertyType.SELECT, distinct_values)

    logger.debug(f"Column '{column_name}': type=text")
    return Classification(PropertyType.TEXT)


def classify(column_name: str, values: Sequence[str]) -> PropertyType:
    """Return only the inferred type of a column."""
    return classify_column(column_name, values).type
