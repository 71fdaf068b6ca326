"""Level 5: Archive Serialization.

This module encodes the assembled node graph as a block archive file.
It does not modify nodes.
"""

from .writer import ArchiveWriteError, ArchiveWriter, BLOCK_TYPES, build_archive, node_to_block

__all__ = [
    "ArchiveWriteError",
    "ArchiveWriter",
    "BLOCK_TYPES",
    "build_archive",
    "node_to_block",
]
