"""Level 4: Node Graph Assembly.

This module turns a table into the node graph handed to archive
serialization: one collection, one default view, one record per row and
optional content under each record.
"""

from .assembler import ContentLookup, NodeGraphAssembler, assemble
from .nodes import (
    Node,
    NodeType,
    create_collection,
    create_content,
    create_record,
    create_view,
)

__all__ = [
    "ContentLookup",
    "NodeGraphAssembler",
    "assemble",
    "Node",
    "NodeType",
    "create_collection",
    "create_content",
    "create_record",
    "create_view",
]
