"""Per-record text lookup for Level 1 ingestion.

An export keeps each record's page body in a folder beside the csv, one
file per record, named ``<record title> <export id>.md``.
"""

from pathlib import Path
from typing import Optional

from utils import get_logger

logger = get_logger(__name__)


def title_from_file_name(file_name: str) -> str:
    """Drop the trailing export id from a page file name."""
    components = file_name.split(" ")
    return " ".join(components[:-1])


class MarkdownContentLookup:
    """Finds the freeform text belonging to a record title.

    Instances are callables ``(title) -> Optional[str]`` so they can be
    passed wherever a content lookup is expected.

    Args:
        folder: Folder of per-record text files (may not exist)
        encoding: Text encoding of the files
    """

    def __init__(self, folder: Optional[str | Path], encoding: str = "utf-8"):
        self.folder = Path(folder) if folder else None
        self.encoding = encoding
        self._files: Optional[list[Path]] = None

    def _list_files(self) -> list[Path]:
        if self._files is None:
            if self.folder is None or not self.folder.is_dir():
                self._files = []
            else:
                self._files = sorted(p for p in self.folder.iterdir() if p.is_file())
            logger.debug(f"Content files available: {len(self._files)}")
        return self._files

    def find_file(self, title: str) -> Optional[Path]:
        """Return the first file whose name matches the record title."""
        for path in self._list_files():
            if title_from_file_name(path.name) == title:
                return path
        return None

    def __call__(self, title: str) -> Optional[str]:
        path = self.find_file(title)
        if path is None:
            return None
        # TODO: strip the leading heading and property lines the export repeats from the csv
        return path.read_text(encoding=self.encoding)
