import json

import pytest
from pydantic import ValidationError

from import_config import (
    ImportConfigError,
    ViewType,
    load_and_validate_config,
    load_config_file,
    validate_config,
)


def test_defaults():
    config = validate_config({"input_folder": "export"})

    assert config.output_file == "archive.focalboard"
    assert config.title is None
    assert config.view_title == "Gallery View"
    assert config.view_type == ViewType.GALLERY
    assert config.overwrite is True
    assert config.reproducible_ids is False


def test_input_folder_required():
    with pytest.raises(ImportConfigError, match="input_folder"):
        validate_config({})


def test_blank_input_folder_rejected():
    with pytest.raises(ImportConfigError):
        validate_config({"input_folder": "   "})


def test_extra_fields_rejected():
    with pytest.raises(ImportConfigError, match="unexpected"):
        validate_config({"input_folder": "export", "unexpected": 1})


def test_blank_title_means_no_override():
    assert validate_config({"input_folder": "export", "title": "  "}).title is None


def test_config_is_frozen():
    config = validate_config({"input_folder": "export"})

    with pytest.raises(ValidationError):
        config.title = "changed"


def test_yaml_file_with_overrides(tmp_path):
    path = tmp_path / "import.yaml"
    path.write_text(
        "input_folder: export\noutput_file: out.focalboard\nview_type: board\n",
        encoding="utf-8",
    )

    config = load_and_validate_config(
        path, overrides={"output_file": "cli.focalboard", "title": None}
    )

    assert config.input_folder == "export"
    assert config.output_file == "cli.focalboard"
    assert config.view_type == ViewType.BOARD
    assert config.title is None


def test_json_file(tmp_path):
    path = tmp_path / "import.json"
    path.write_text(json.dumps({"input_folder": "export"}), encoding="utf-8")

    assert load_config_file(path) == {"input_folder": "export"}


def test_unsupported_config_format(tmp_path):
    path = tmp_path / "import.toml"
    path.write_text("input_folder = 'export'", encoding="utf-8")

    with pytest.raises(ImportConfigError, match="Unsupported"):
        load_config_file(path)


def test_missing_config_file(tmp_path):
    with pytest.raises(ImportConfigError, match="not found"):
        load_config_file(tmp_path / "missing.yaml")


def test_empty_config_file(tmp_path):
    path = tmp_path / "import.yaml"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ImportConfigError, match="empty"):
        load_config_file(path)


def test_non_mapping_config(tmp_path):
    path = tmp_path / "import.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ImportConfigError, match="dictionary"):
        load_config_file(path)
