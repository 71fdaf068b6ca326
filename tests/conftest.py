import pytest

from utils import SequentialIdGenerator

EXPORT_CSV = (
    "Name,Status,Tags,Website\n"
    'Alpha,Yes,"x, y",https://alpha.example.com\n'
    "Beta,No,x,\n"
)


@pytest.fixture
def id_generator():
    return SequentialIdGenerator()


@pytest.fixture
def export_folder(tmp_path):
    """An export folder: one csv plus a page folder holding Alpha's body."""
    folder = tmp_path / "export"
    folder.mkdir()
    (folder / "Projects 3f2a9c.csv").write_text(EXPORT_CSV, encoding="utf-8")

    pages = folder / "Projects 3f2a9c"
    pages.mkdir()
    (pages / "Alpha 77aa01.md").write_text("# Alpha\n\nKickoff notes.\n", encoding="utf-8")
    return folder
