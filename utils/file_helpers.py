"""File helper utilities for the importer.

This module provides the path handling shared by the table loader,
the config loader and the archive writer.
"""

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class PathValidationError(Exception):
    """Raised when path validation fails due to security concerns."""

    pass


def ensure_directory(path: Path) -> Path:
    """Ensure directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure

    Returns:
        Resolved Path object (for chaining)

    Raises:
        OSError: If directory creation fails
    """
    try:
        resolved_path = path.resolve()
        resolved_path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Directory ensured: {resolved_path}")
        return resolved_path
    except (OSError, RuntimeError) as e:
        logger.error(f"Failed to resolve or create directory {path}: {e}")
        raise


def get_file_extension(file_path: str | Path) -> str:
    """Get file extension from path, lower-cased and without the dot."""
    return Path(file_path).suffix.lstrip(".").lower()


def is_supported_config_format(file_path: str | Path) -> bool:
    """Check if file is a YAML or JSON config file."""
    return get_file_extension(file_path) in ["yaml", "yml", "json"]


def validate_path_safe(
    file_path: str | Path,
    base_dir: Optional[Path] = None,
    must_exist: bool = False,
    must_be_file: bool = False,
    must_be_dir: bool = False,
) -> Path:
    """Validate a user-supplied path and resolve it.

    This function:
    - Rejects parent-directory (..) components
    - Resolves symlinks
    - Optionally checks the path stays within a base directory
    - Validates file/directory existence and type

    Args:
        file_path: Path to validate
        base_dir: Optional base directory to restrict paths within
        must_exist: If True, path must exist
        must_be_file: If True, path must be a file
        must_be_dir: If True, path must be a directory

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If path contains traversal or violates constraints
        FileNotFoundError: If the path is required to exist and does not
    """
    path = Path(file_path).expanduser()

    if ".." in path.parts:
        raise PathValidationError(
            f"Path contains directory traversal sequence: {file_path}; "
            "use an absolute path instead"
        )

    try:
        resolved = path.resolve()
    except (OSError, RuntimeError) as e:
        raise PathValidationError(f"Failed to resolve path {file_path}: {e}") from e

    if base_dir is not None:
        base_resolved = Path(base_dir).expanduser().resolve()
        try:
            common = os.path.commonpath([str(resolved), str(base_resolved)])
        except ValueError:
            # Paths on different drives (Windows)
            raise PathValidationError(
                f"Path {file_path} cannot be validated against base directory {base_dir}"
            )
        if common != str(base_resolved):
            raise PathValidationError(
                f"Path {file_path} is outside allowed base directory {base_dir}"
            )

    if must_exist and not resolved.exists():
        raise FileNotFoundError(f"Path does not exist: {file_path}")

    if must_be_file and not resolved.is_file():
        if resolved.exists():
            raise PathValidationError(f"Path is not a file: {file_path}")
        raise FileNotFoundError(f"File does not exist: {file_path}")

    if must_be_dir and not resolved.is_dir():
        if resolved.exists():
            raise PathValidationError(f"Path is not a directory: {file_path}")
        raise FileNotFoundError(f"Directory does not exist: {file_path}")

    return resolved
