"""Node model for Level 4.

A node is the universal output unit. One table yields a collection node,
its default view node, one record node per row and, optionally, one
content node per record.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from level2_schema import Schema
from utils import IdGenerator
from utils.constants import DEFAULT_VIEW_TITLE, DEFAULT_VIEW_TYPE, NODE_SCHEMA_VERSION


class NodeType(str, Enum):
    """Kinds of nodes in the output graph."""

    COLLECTION = "collection"
    VIEW = "view"
    RECORD = "record"
    CONTENT = "content"


def now_millis() -> int:
    return int(time.time() * 1000)


@dataclass
class Node:
    """One node of the output graph.

    ``root_id`` points to the owning collection (a collection is its own
    root); ``parent_id`` points to the immediate structural parent.
    """

    id: str
    root_id: str
    parent_id: str
    type: NodeType
    title: str = ""
    fields: dict[str, Any] = field(default_factory=dict)
    schema: int = NODE_SCHEMA_VERSION
    create_at: int = field(default_factory=now_millis)
    update_at: int = 0
    delete_at: int = 0

    def __post_init__(self):
        if not self.update_at:
            self.update_at = self.create_at

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the archive's camelCase keys."""
        return {
            "id": self.id,
            "parentId": self.parent_id,
            "rootId": self.root_id,
            "schema": self.schema,
            "type": self.type.value,
            "title": self.title,
            "fields": self.fields,
            "createAt": self.create_at,
            "updateAt": self.update_at,
            "deleteAt": self.delete_at,
        }


def create_collection(id_generator: IdGenerator, title: str, schema: Schema) -> Node:
    """Create a collection node owning the schema as ``cardProperties``."""
    node_id = id_generator.new_id()
    return Node(
        id=node_id,
        root_id=node_id,
        parent_id=node_id,
        type=NodeType.COLLECTION,
        title=title,
        fields={
            "icon": "",
            "description": "",
            "showDescription": False,
            "isTemplate": False,
            "columnCalculations": {},
            "cardProperties": schema.to_dicts(),
        },
    )


def create_view(
    id_generator: IdGenerator,
    collection: Node,
    title: str = DEFAULT_VIEW_TITLE,
    view_type: str = DEFAULT_VIEW_TYPE,
) -> Node:
    """Create the default view of a collection."""
    return Node(
        id=id_generator.new_id(),
        root_id=collection.id,
        parent_id=collection.id,
        type=NodeType.VIEW,
        title=title,
        fields={
            "viewType": view_type,
            "sortOptions": [],
            "visiblePropertyIds": [],
            "visibleOptionIds": [],
            "hiddenOptionIds": [],
            "collapsedOptionIds": [],
            "filter": {"operation": "and", "filters": []},
            "cardOrder": [],
            "columnWidths": {},
            "columnCalculations": {},
        },
    )


def create_record(
    id_generator: IdGenerator,
    collection: Node,
    title: str,
    properties: Optional[dict[str, Any]] = None,
) -> Node:
    """Create a record node holding a typed attribute map."""
    return Node(
        id=id_generator.new_id(),
        root_id=collection.id,
        parent_id=collection.id,
        type=NodeType.RECORD,
        title=title,
        fields={
            "icon": "",
            "isTemplate": False,
            "properties": dict(properties or {}),
            "contentOrder": [],
        },
    )


def create_content(id_generator: IdGenerator, record: Node, text: str) -> Node:
    """Create a content node with freeform text under a record."""
    return Node(
        id=id_generator.new_id(),
        root_id=record.root_id,
        parent_id=record.id,
        type=NodeType.CONTENT,
        title=text,
    )
