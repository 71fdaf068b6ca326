"""Schema data structures for Level 2.

Property templates and options are created once, while the schema is
built, and are read-only afterwards.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from .classifier import PropertyType


@dataclass
class ColumnSample:
    """A column name and its non-empty values across all rows."""

    name: str
    values: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Option:
    """One allowed value of a select or multi-select property."""

    id: str
    value: str
    color: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "value": self.value, "color": self.color}


@dataclass(frozen=True)
class PropertyTemplate:
    """Schema entry for one attribute column."""

    id: str
    name: str
    type: PropertyType
    options: tuple[Option, ...] = ()

    def find_option(self, value: str) -> Optional[Option]:
        """Return the option whose raw value equals ``value``, if any."""
        for option in self.options:
            if option.value == value:
                return option
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "options": [option.to_dict() for option in self.options],
        }


@dataclass
class Schema:
    """Ordered property templates of one table.

    The title column is recorded but never has a template.
    """

    title_column: Optional[str]
    properties: list[PropertyTemplate] = field(default_factory=list)

    def __iter__(self) -> Iterator[PropertyTemplate]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)

    def get(self, name: str) -> Optional[PropertyTemplate]:
        """Look up a property template by column name."""
        for template in self.properties:
            if template.name == name:
                return template
        return None

    def get_by_id(self, property_id: str) -> Optional[PropertyTemplate]:
        for template in self.properties:
            if template.id == property_id:
                return template
        return None

    def to_dicts(self) -> list[dict[str, Any]]:
        return [template.to_dict() for template in self.properties]
