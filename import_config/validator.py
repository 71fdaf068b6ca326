"""Config validator for loading and validating import settings.

This module handles loading YAML/JSON configuration files and validating
them against ImportConfig. It provides clear, user-friendly error messages.
"""

import json
import pathlib
from typing import Any, Optional, Union

import yaml

from import_config.schema import ImportConfig
from utils import PathValidationError, is_supported_config_format, validate_path_safe


class ImportConfigError(Exception):
    """Raised when the import configuration cannot be loaded or is invalid."""

    pass


def load_config_file(config_path: Union[str, pathlib.Path]) -> dict:
    """Load configuration from YAML or JSON file.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary containing configuration

    Raises:
        ImportConfigError: If file cannot be loaded or parsed
    """
    try:
        config_path = validate_path_safe(
            config_path, must_exist=True, must_be_file=True
        )
    except PathValidationError as e:
        raise ImportConfigError(f"Invalid configuration path: {e}") from e
    except FileNotFoundError as e:
        raise ImportConfigError(f"Configuration file not found: {config_path}") from e

    if not is_supported_config_format(config_path):
        raise ImportConfigError(
            f"Unsupported file format: {config_path.suffix}. "
            "Supported formats: .yaml, .yml, .json"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.suffix.lower() == ".json":
                config = json.load(f)
            else:
                config = yaml.safe_load(f)
    except (OSError, IOError) as e:
        raise ImportConfigError(f"Failed to read configuration file {config_path}: I/O error: {e}") from e
    except yaml.YAMLError as e:
        raise ImportConfigError(f"Invalid YAML syntax in {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ImportConfigError(f"Invalid JSON syntax in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ImportConfigError(f"Failed to decode configuration file {config_path}: Encoding error: {e}") from e

    if config is None:
        raise ImportConfigError("Configuration file is empty")

    if not isinstance(config, dict):
        raise ImportConfigError(
            f"Configuration must be a dictionary, got {type(config).__name__}"
        )

    return config


def validate_config(config: dict) -> ImportConfig:
    """Validate a configuration dictionary against ImportConfig.

    Args:
        config: Configuration dictionary

    Returns:
        Validated ImportConfig instance

    Raises:
        ImportConfigError: If validation fails, with one line per offending field
    """
    try:
        return ImportConfig(**config)
    except Exception as e:
        error_msg = _format_validation_error(e)
        raise ImportConfigError(f"Configuration validation failed:\n{error_msg}") from e


def _format_validation_error(error: Exception) -> str:
    """Format a pydantic validation error for display."""
    if hasattr(error, "errors"):
        errors = []
        for err in error.errors():
            field_path = " -> ".join(str(loc) for loc in err.get("loc", []))
            error_msg = err.get("msg", "Validation error")
            error_type = err.get("type", "unknown")
            errors.append(f"  {field_path}: {error_msg} ({error_type})")
        return "\n".join(errors)

    return str(error)


def load_and_validate_config(
    config_path: Optional[Union[str, pathlib.Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> ImportConfig:
    """Build the import configuration from a file and/or explicit overrides.

    Overrides whose value is None are ignored, so unset CLI flags never
    clobber values from the file.

    Args:
        config_path: Optional path to a YAML or JSON configuration file
        overrides: Optional settings taking precedence over the file

    Returns:
        Validated ImportConfig instance

    Raises:
        ImportConfigError: If loading or validation fails
    """
    config = load_config_file(config_path) if config_path else {}
    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value
    return validate_config(config)
