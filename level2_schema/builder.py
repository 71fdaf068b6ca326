"""Schema builder for Level 2.

Samples every non-title column of a table, classifies it and mints
options for discrete columns. The schema must be complete before any row
is converted, since records reference option ids.
"""

from typing import Any, Mapping, Optional, Sequence

from level1_ingestion.normalizer import fix_value
from utils import IdGenerator, get_logger

from .classifier import classify_column
from .models import ColumnSample, PropertyTemplate, Schema
from .options import OptionRegistry

logger = get_logger(__name__)


def get_columns(rows: Sequence[Mapping[str, Any]]) -> list[str]:
    """Column names of a table, taken from its first row."""
    if not rows:
        return []
    return list(rows[0].keys())


def collect_column_samples(
    rows: Sequence[Mapping[str, Any]], columns: Sequence[str]
) -> list[ColumnSample]:
    """Gather the non-empty, fixed-up values of each column.

    Args:
        rows: Raw table rows
        columns: Attribute columns to sample (title column excluded)

    Returns:
        One ColumnSample per column, in column order
    """
    samples = {column: ColumnSample(column) for column in columns}
    for row in rows:
        for column in columns:
            value = fix_value(row.get(column))
            if not value:
                continue
            samples[column].values.append(value)
    return [samples[column] for column in columns]


def build_schema(
    rows: Sequence[Mapping[str, Any]],
    columns: Optional[Sequence[str]] = None,
    option_registry: Optional[OptionRegistry] = None,
    id_generator: Optional[IdGenerator] = None,
) -> Schema:
    """Infer the schema of a table.

    Args:
        rows: Raw table rows
        columns: All column names, title column first (defaults to the
            first row's keys)
        option_registry: Registry minting options (a fresh one if omitted)
        id_generator: Identifier collaborator for property ids

    Returns:
        Schema with one template per non-title column, in column order
    """
    id_generator = id_generator or IdGenerator()
    option_registry = option_registry or OptionRegistry(id_generator)

    all_columns = list(columns) if columns is not None else get_columns(rows)
    if not all_columns:
        logger.warning("Table has no columns; schema is empty")
        return Schema(title_column=None)

    title_column, attribute_columns = all_columns[0], all_columns[1:]
    logger.info(f"Inferring schema for {len(attribute_columns)} columns")

    schema = Schema(title_column=title_column)
    for sample in collect_column_samples(rows, attribute_columns):
        classification = classify_column(sample.name, sample.values)
        options = ()
        if classification.type.is_discrete:
            options = tuple(option_registry.register_options(classification.option_values))

        schema.properties.append(
            PropertyTemplate(
                id=id_generator.new_id(),
                name=sample.name,
                type=classification.type,
                options=options,
            )
        )
        logger.debug(
            f"Column '{sample.name}': type={classification.type.value}, "
            f"values={len(sample.values)}, options={len(options)}"
        )

    return schema
