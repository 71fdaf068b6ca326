"""Archive writer for Level 5.

This module serializes the node graph into a block archive: JSON lines,
a header line first, then one line per node in graph order.

All writes are:
- Deterministic apart from the header date and node timestamps
- Safe (never overwrites unless allowed)
- Preceded by parent directory creation
"""

import json
import time
from pathlib import Path
from typing import Any, Iterable, Optional

from level4_assembly import Node, NodeType
from utils import (
    PathValidationError,
    ensure_directory,
    get_logger,
    validate_path_safe,
)
from utils.constants import ARCHIVE_VERSION

logger = get_logger(__name__)

# Block types understood by the archive's consumers
BLOCK_TYPES = {
    NodeType.COLLECTION: "board",
    NodeType.VIEW: "view",
    NodeType.RECORD: "card",
    NodeType.CONTENT: "text",
}


class ArchiveWriteError(Exception):
    """Raised when the archive cannot be written."""

    pass


def node_to_block(node: Node) -> dict[str, Any]:
    """Serialize a node with its archive block type."""
    block = node.to_dict()
    block["type"] = BLOCK_TYPES[node.type]
    return block


def build_archive(nodes: Iterable[Node], date: Optional[int] = None) -> str:
    """Encode nodes as archive text.

    Args:
        nodes: Nodes in output order
        date: Header timestamp in epoch milliseconds (now if omitted)

    Returns:
        Archive contents, one JSON document per line
    """
    header = {
        "version": ARCHIVE_VERSION,
        "date": date if date is not None else int(time.time() * 1000),
    }
    lines = [json.dumps(header)]
    for node in nodes:
        lines.append(json.dumps({"type": "block", "data": node_to_block(node)}))
    return "\n".join(lines) + "\n"


class ArchiveWriter:
    """Writes a node graph to an archive file.

    Args:
        output_file: Destination path of the archive
        overwrite: Whether an existing file may be replaced
    """

    def __init__(self, output_file: str | Path, overwrite: bool = True):
        self.output_file = Path(output_file)
        self.overwrite = overwrite
        logger.debug(f"ArchiveWriter initialized with output_file: {self.output_file}")

    def _resolve_output_path(self) -> Path:
        if not self.output_file.name:
            raise ArchiveWriteError(f"Invalid archive file name: {self.output_file}")
        try:
            return validate_path_safe(self.output_file)
        except PathValidationError as e:
            raise ArchiveWriteError(f"Invalid archive path: {e}") from e

    def write(self, nodes: Iterable[Node]) -> Path:
        """Write the archive.

        Returns:
            Resolved path of the written archive

        Raises:
            ArchiveWriteError: If the file exists and overwrite is disabled,
                or the write fails
        """
        output_path = self._resolve_output_path()

        if output_path.exists() and not self.overwrite:
            raise ArchiveWriteError(
                f"Archive already exists: {output_path}. Enable overwrite to replace it."
            )

        try:
            ensure_directory(output_path.parent)
            output_path.write_text(build_archive(nodes), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write archive to {output_path}: {e}")
            raise ArchiveWriteError(f"Failed to write archive {output_path}: {e}") from e

        logger.info(f"Exported to {output_path}")
        return output_path
