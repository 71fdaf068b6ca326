"""Import configuration schema using Pydantic.

This module defines the validated, immutable settings for one import run.
Settings come from CLI flags, a YAML/JSON file, or both.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.constants import DEFAULT_OUTPUT_FILE, DEFAULT_VIEW_TITLE


class ViewType(str, Enum):
    """Visualizations the default view node can be created with."""

    BOARD = "board"
    TABLE = "table"
    GALLERY = "gallery"


class ImportConfig(BaseModel):
    """Settings for converting one exported table folder into an archive.

    Once validated, the config is read-only.
    """

    input_folder: str = Field(..., min_length=1, description="Folder holding the exported .csv")
    output_file: str = Field(default=DEFAULT_OUTPUT_FILE, min_length=1, description="Archive to write")
    title: Optional[str] = Field(
        default=None, description="Collection title (derived from the csv name if omitted)"
    )
    view_title: str = Field(default=DEFAULT_VIEW_TITLE, description="Title of the default view")
    view_type: ViewType = Field(default=ViewType.GALLERY, description="Type of the default view")
    overwrite: bool = Field(default=True, description="Whether an existing archive may be replaced")
    reproducible_ids: bool = Field(
        default=False, description="Mint sequential ids instead of random ones"
    )

    @field_validator("input_folder", "output_file")
    @classmethod
    def validate_path_field(cls, v: str) -> str:
        """Reject blank paths."""
        if not v or not v.strip():
            raise ValueError("path cannot be empty")
        return v.strip()

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank title as no override."""
        if v is None or not v.strip():
            return None
        return v.strip()

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
