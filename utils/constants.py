"""Constants for the Notion CSV importer.

This module defines shared constants used across the application.
"""

# Exit codes (matching CLI exit codes)
EXIT_SUCCESS = 0
EXIT_INVALID_CONFIG = 1
EXIT_INPUT_NOT_FOUND = 2
EXIT_RUNTIME_ERROR = 3

# Application metadata
APP_NAME = "notion-import"
APP_VERSION = "1.0.0"

# Default values
DEFAULT_OUTPUT_FILE = "archive.focalboard"
DEFAULT_VIEW_TITLE = "Gallery View"
DEFAULT_VIEW_TYPE = "gallery"

# Archive format
ARCHIVE_VERSION = 1
NODE_SCHEMA_VERSION = 1
