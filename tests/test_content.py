from level1_ingestion import MarkdownContentLookup
from level1_ingestion.content import title_from_file_name


def test_lookup_matches_title_without_export_id(tmp_path):
    (tmp_path / "Alpha 77aa01.md").write_text("alpha body", encoding="utf-8")
    (tmp_path / "Alpha Beta 88bb02.md").write_text("alpha beta body", encoding="utf-8")
    lookup = MarkdownContentLookup(tmp_path)

    assert lookup("Alpha") == "alpha body"
    assert lookup("Alpha Beta") == "alpha beta body"
    assert lookup("Gamma") is None


def test_missing_folder_has_no_content(tmp_path):
    lookup = MarkdownContentLookup(tmp_path / "missing")

    assert lookup("Alpha") is None


def test_no_folder_has_no_content():
    assert MarkdownContentLookup(None)("Alpha") is None


def test_subdirectories_ignored(tmp_path):
    (tmp_path / "Alpha 77aa01").mkdir()

    assert MarkdownContentLookup(tmp_path)("Alpha") is None


def test_title_from_file_name():
    assert title_from_file_name("Weekly sync 1f2e.md") == "Weekly sync"
    assert title_from_file_name("single.md") == ""
