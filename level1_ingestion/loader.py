"""Table loader for Level 1 ingestion.

This module locates the exported .csv inside an input folder and reads it
with pandas, keeping every cell as its raw string. It also derives the
collection title from the export's file name.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd

from utils import PathValidationError, get_logger, validate_path_safe

logger = get_logger(__name__)


class TableLoadError(Exception):
    """Raised when the input folder or its table cannot be read."""

    pass


@dataclass
class Table:
    """A materialized input table.

    The first entry of ``columns`` is the title column.
    """

    title: str
    columns: list[str]
    rows: list[dict[str, str]]
    csv_path: Optional[Path] = None
    content_folder: Optional[Path] = None

    @property
    def row_count(self) -> int:
        return len(self.rows)


def find_csv_file(input_folder: str | Path) -> Optional[Path]:
    """Return the first .csv file in a folder, or None if there is none."""
    folder = Path(input_folder)
    for entry in sorted(folder.iterdir()):
        if entry.is_file() and entry.suffix.lower() == ".csv":
            return entry
    return None


def derive_table_title(csv_path: str | Path) -> str:
    """Derive the collection title from an exported file name.

    Exports are named ``<title> <export id>.csv``; the trailing id is
    dropped. A name without an id suffix is used as-is.
    """
    stem = Path(csv_path).stem
    components = stem.split(" ")
    title = " ".join(components[:-1])
    return title if title else stem


def rows_from_dataframe(df: pd.DataFrame) -> list[dict[str, str]]:
    """Convert a string-typed DataFrame into ordered row dictionaries."""
    return df.to_dict(orient="records")


def read_table_file(csv_path: str | Path) -> pd.DataFrame:
    """Read a csv file with every cell kept as a raw string.

    Raises:
        TableLoadError: If the file is empty or cannot be parsed
    """
    try:
        return pd.read_csv(
            csv_path,
            dtype=str,
            keep_default_na=False,
            encoding="utf-8-sig",
        )
    except (OSError, IOError) as e:
        raise TableLoadError(f"Failed to read table file {csv_path}: I/O error: {e}") from e
    except pd.errors.EmptyDataError as e:
        raise TableLoadError(f"Table file is empty: {csv_path}") from e
    except pd.errors.ParserError as e:
        raise TableLoadError(f"Failed to parse table file {csv_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise TableLoadError(f"Failed to decode table file {csv_path}: {e}") from e


def load_table(input_folder: str | Path, title: Optional[str] = None) -> Table:
    """Load the exported table from an input folder.

    Args:
        input_folder: Folder containing one exported .csv file
        title: Optional collection title; derived from the file name if omitted

    Returns:
        Table with raw string rows in column order

    Raises:
        TableLoadError: If the folder or csv file is missing or unreadable
    """
    try:
        folder = validate_path_safe(input_folder, must_exist=True, must_be_dir=True)
    except PathValidationError as e:
        raise TableLoadError(f"Invalid input folder: {e}") from e
    except FileNotFoundError as e:
        raise TableLoadError(f"Folder not found: {input_folder}") from e

    csv_path = find_csv_file(folder)
    if csv_path is None:
        raise TableLoadError(f".csv file not found in folder: {input_folder}")

    logger.info(f"inputFile: {csv_path}")
    df = read_table_file(csv_path)
    rows = rows_from_dataframe(df)
    logger.info(f"Read {len(rows)} rows.")

    table_title = title if title else derive_table_title(csv_path)
    logger.info(f"title: {table_title}")

    return Table(
        title=table_title,
        columns=[str(c) for c in df.columns],
        rows=rows,
        csv_path=csv_path,
        content_folder=folder / csv_path.stem,
    )
