"""Import configuration: schema and loaders."""

from .schema import ImportConfig, ViewType
from .validator import (
    ImportConfigError,
    load_and_validate_config,
    load_config_file,
    validate_config,
)

__all__ = [
    "ImportConfig",
    "ViewType",
    "ImportConfigError",
    "load_and_validate_config",
    "load_config_file",
    "validate_config",
]
