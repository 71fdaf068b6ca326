"""Shared utilities for the Notion CSV importer.

This module provides common utilities used across the application.
"""

from .constants import (
    APP_NAME,
    APP_VERSION,
    ARCHIVE_VERSION,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_VIEW_TITLE,
    DEFAULT_VIEW_TYPE,
    EXIT_INPUT_NOT_FOUND,
    EXIT_INVALID_CONFIG,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    NODE_SCHEMA_VERSION,
)
from .file_helpers import (
    PathValidationError,
    ensure_directory,
    get_file_extension,
    is_supported_config_format,
    validate_path_safe,
)
from .identifiers import IdGenerator, SequentialIdGenerator
from .logging import get_logger, setup_logging

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "ARCHIVE_VERSION",
    "DEFAULT_OUTPUT_FILE",
    "DEFAULT_VIEW_TITLE",
    "DEFAULT_VIEW_TYPE",
    "EXIT_INPUT_NOT_FOUND",
    "EXIT_INVALID_CONFIG",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "NODE_SCHEMA_VERSION",
    "IdGenerator",
    "SequentialIdGenerator",
    "PathValidationError",
    "ensure_directory",
    "get_file_extension",
    "get_logger",
    "is_supported_config_format",
    "setup_logging",
    "validate_path_safe",
]
