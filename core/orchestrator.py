"""Import orchestrator for coordinating one conversion run.

This module defines the ImportOrchestrator class which accepts a validated
config and runs the import levels in order: load the table, assemble the
node graph, write the archive.
"""

from pathlib import Path
from typing import Optional

from import_config import ImportConfig
from level1_ingestion import MarkdownContentLookup, Table, TableLoadError, load_table
from level2_schema import OptionRegistry
from level4_assembly import Node, NodeGraphAssembler
from level5_archive import ArchiveWriteError, ArchiveWriter
from utils import IdGenerator, SequentialIdGenerator, get_logger
from utils.constants import EXIT_INPUT_NOT_FOUND, EXIT_RUNTIME_ERROR, EXIT_SUCCESS

logger = get_logger(__name__)


class ImportOrchestrator:
    """Orchestrates one import run.

    Args:
        config: Validated ImportConfig instance
        id_generator: Optional identifier collaborator; defaults follow
            ``config.reproducible_ids``
        option_registry: Optional registry to continue an earlier color
            rotation; a fresh one is used otherwise
    """

    def __init__(
        self,
        config: ImportConfig,
        id_generator: Optional[IdGenerator] = None,
        option_registry: Optional[OptionRegistry] = None,
    ):
        self.config = config
        if id_generator is None:
            id_generator = SequentialIdGenerator() if config.reproducible_ids else IdGenerator()
        self.id_generator = id_generator
        self.option_registry = option_registry or OptionRegistry(self.id_generator)

        # Results, populated as the levels run
        self.table: Optional[Table] = None
        self.nodes: Optional[list[Node]] = None
        self.archive_path: Optional[Path] = None

        logger.info("ImportOrchestrator initialized")
        logger.debug(f"Input folder: {config.input_folder}, output file: {config.output_file}")

    def _run_level1_ingestion(self) -> None:
        """Load the exported table.

        Raises:
            TableLoadError: If the folder or table is missing or unreadable
        """
        logger.info("=" * 60)
        logger.info("Level 1: Table Ingestion")
        logger.info("=" * 60)
        self.table = load_table(self.config.input_folder, title=self.config.title)

    def _run_assembly(self) -> None:
        """Infer the schema, convert rows and build the node graph (Levels 2-4)."""
        logger.info("=" * 60)
        logger.info("Levels 2-4: Schema Inference, Row Conversion, Node Assembly")
        logger.info("=" * 60)

        assembler = NodeGraphAssembler(
            id_generator=self.id_generator,
            option_registry=self.option_registry,
            content_lookup=MarkdownContentLookup(self.table.content_folder),
            view_title=self.config.view_title,
            view_type=self.config.view_type.value,
        )
        self.nodes = assembler.assemble(
            self.table.rows, self.table.title, columns=self.table.columns
        )
        if assembler.skipped_rows:
            logger.warning(f"{assembler.skipped_rows} row(s) skipped")

    def _run_level5_archive(self) -> None:
        """Write the archive.

        Raises:
            ArchiveWriteError: If the archive cannot be written
        """
        logger.info("=" * 60)
        logger.info("Level 5: Archive Serialization")
        logger.info("=" * 60)
        writer = ArchiveWriter(self.config.output_file, overwrite=self.config.overwrite)
        self.archive_path = writer.write(self.nodes)

    def run(self) -> int:
        """Run the import.

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        try:
            self._run_level1_ingestion()
        except TableLoadError as e:
            logger.error(f"✗ Table loading failed: {e}")
            return EXIT_INPUT_NOT_FOUND

        self._run_assembly()

        try:
            self._run_level5_archive()
        except ArchiveWriteError as e:
            logger.error(f"✗ Archive writing failed: {e}")
            return EXIT_RUNTIME_ERROR

        logger.info(f"✓ Import complete: {len(self.nodes)} nodes")
        return EXIT_SUCCESS
