import json

from cli import main
from core.orchestrator import ImportOrchestrator
from import_config import validate_config
from level2_schema import OptionRegistry
from level4_assembly import NodeType
from utils import EXIT_INPUT_NOT_FOUND, EXIT_INVALID_CONFIG, EXIT_SUCCESS


def _blocks(path):
    lines = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    return [line["data"] for line in lines[1:]]


def test_convert_writes_archive(export_folder, tmp_path):
    output = tmp_path / "projects.focalboard"

    exit_code = main(["convert", "-i", str(export_folder), "-o", str(output)])

    assert exit_code == EXIT_SUCCESS
    blocks = _blocks(output)
    assert [b["type"] for b in blocks] == ["board", "view", "card", "text", "card"]
    board = blocks[0]
    assert board["title"] == "Projects"
    types = {p["name"]: p["type"] for p in board["fields"]["cardProperties"]}
    assert types == {"Status": "checkbox", "Tags": "multiSelect", "Website": "url"}
    assert blocks[3]["title"] == "# Alpha\n\nKickoff notes.\n"
    assert blocks[2]["fields"]["contentOrder"] == [blocks[3]["id"]]


def test_convert_with_config_file(export_folder, tmp_path):
    output = tmp_path / "board.focalboard"
    config = tmp_path / "import.yaml"
    config.write_text(
        f"input_folder: '{export_folder}'\n"
        f"output_file: '{output}'\n"
        "title: Roadmap\n"
        "view_type: board\n"
        "view_title: Board View\n",
        encoding="utf-8",
    )

    assert main(["convert", "--config", str(config)]) == EXIT_SUCCESS
    blocks = _blocks(output)
    assert blocks[0]["title"] == "Roadmap"
    assert blocks[1]["title"] == "Board View"
    assert blocks[1]["fields"]["viewType"] == "board"


def test_missing_input_is_config_error():
    assert main(["convert"]) == EXIT_INVALID_CONFIG


def test_missing_folder(tmp_path):
    exit_code = main(["convert", "-i", str(tmp_path / "missing"), "-o", str(tmp_path / "a.focalboard")])

    assert exit_code == EXIT_INPUT_NOT_FOUND


def test_orchestrator_keeps_results(export_folder, tmp_path):
    config = validate_config(
        {
            "input_folder": str(export_folder),
            "output_file": str(tmp_path / "out.focalboard"),
            "reproducible_ids": True,
        }
    )
    orchestrator = ImportOrchestrator(config)

    assert orchestrator.run() == EXIT_SUCCESS
    assert orchestrator.table.row_count == 2
    ids = [n.id for n in orchestrator.nodes]
    assert all(node_id.startswith("id-") for node_id in ids)
    assert len(set(ids)) == len(ids)
    assert [n.type for n in orchestrator.nodes].count(NodeType.RECORD) == 2
    assert orchestrator.archive_path.exists()


def test_orchestrator_shared_registry(export_folder, tmp_path):
    registry = OptionRegistry()
    for name in ("first", "second"):
        config = validate_config(
            {"input_folder": str(export_folder), "output_file": str(tmp_path / f"{name}.focalboard")}
        )
        ImportOrchestrator(config, option_registry=registry).run()

    # Tags mints two options per run
    assert registry.cursor == 4
