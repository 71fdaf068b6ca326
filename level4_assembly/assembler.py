"""Node graph assembly for Level 4.

This is the entry point of the conversion core. It builds the schema once,
converts every row against it and wires the resulting nodes into a graph
rooted at the collection node.
"""

from typing import Any, Callable, Mapping, Optional, Sequence

from level1_ingestion.normalizer import normalize_cell
from level2_schema import OptionRegistry, Schema, build_schema
from level3_conversion import RowConversionError, convert_row
from utils import IdGenerator, get_logger
from utils.constants import DEFAULT_VIEW_TITLE, DEFAULT_VIEW_TYPE

from .nodes import (
    Node,
    NodeType,
    create_collection,
    create_content,
    create_record,
    create_view,
)

logger = get_logger(__name__)

ContentLookup = Callable[[str], Optional[str]]


class NodeGraphAssembler:
    """Converts a table into collection, view, record and content nodes.

    The assembler:
    - Infers the schema before touching any row
    - Skips rows that have no columns, with a warning
    - Attaches external text to a record when the lookup returns any

    Args:
        id_generator: Identifier collaborator shared by every node, property and option
        option_registry: Registry minting options; pass a shared instance to
            continue the color rotation from a previous run
        content_lookup: Callable returning the text of a record title, or None
        view_title: Title of the default view
        view_type: Visualization of the default view
    """

    def __init__(
        self,
        id_generator: Optional[IdGenerator] = None,
        option_registry: Optional[OptionRegistry] = None,
        content_lookup: Optional[ContentLookup] = None,
        view_title: str = DEFAULT_VIEW_TITLE,
        view_type: str = DEFAULT_VIEW_TYPE,
    ):
        self.id_generator = id_generator or IdGenerator()
        self.option_registry = option_registry or OptionRegistry(self.id_generator)
        self.content_lookup = content_lookup
        self.view_title = view_title
        self.view_type = view_type
        self.schema: Optional[Schema] = None
        self.skipped_rows = 0

    def assemble(
        self,
        rows: Sequence[Mapping[str, Any]],
        title: str,
        columns: Optional[Sequence[str]] = None,
    ) -> list[Node]:
        """Convert a table into nodes.

        Args:
            rows: Raw rows, title column first
            title: Title of the collection
            columns: Column names; defaults to the first row's keys

        Returns:
            Collection, view, then each record followed by its content node
        """
        self.skipped_rows = 0
        self.schema = build_schema(
            rows,
            columns=columns,
            option_registry=self.option_registry,
            id_generator=self.id_generator,
        )

        nodes: list[Node] = []

        collection = create_collection(self.id_generator, title, self.schema)
        logger.info(f"Collection: {title}")
        nodes.append(collection)

        view = create_view(
            self.id_generator, collection, title=self.view_title, view_type=self.view_type
        )
        nodes.append(view)

        for index, row in enumerate(rows):
            nodes.extend(self._assemble_row(collection, index, row))

        record_count = sum(1 for node in nodes if node.type == NodeType.RECORD)
        logger.info(f"Found {record_count} card(s).")
        return nodes

    def _assemble_row(self, collection: Node, index: int, row: Mapping[str, Any]) -> list[Node]:
        try:
            properties = convert_row(self.schema, row)
        except RowConversionError as e:
            logger.warning(f"Row {index}: {e}; row skipped")
            self.skipped_rows += 1
            return []

        title_key = next(iter(row.keys()))
        record_title = normalize_cell(row[title_key])
        logger.debug(f"Card: {record_title}")

        record = create_record(self.id_generator, collection, record_title, properties)
        nodes = [record]

        text = self.content_lookup(record_title) if self.content_lookup else None
        if text:
            logger.debug(f"Markdown: {len(text)} bytes")
            content = create_content(self.id_generator, record, text)
            record.fields["contentOrder"] = [content.id]
            nodes.append(content)

        return nodes


def assemble(
    rows: Sequence[Mapping[str, Any]],
    title: str,
    content_lookup: Optional[ContentLookup] = None,
    id_generator: Optional[IdGenerator] = None,
    option_registry: Optional[OptionRegistry] = None,
) -> list[Node]:
    """Convert a table into nodes with a one-off assembler."""
    assembler = NodeGraphAssembler(
        id_generator=id_generator,
        option_registry=option_registry,
        content_lookup=content_lookup,
    )
    return assembler.assemble(rows, title)
