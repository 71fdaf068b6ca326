"""Command-line interface for the Notion CSV importer.

Usage:

    python -m cli convert -i <export folder> [-o archive.focalboard]
    python -m cli convert --config import.yaml
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from core.orchestrator import ImportOrchestrator
from import_config import ImportConfigError, load_and_validate_config
from utils import (
    APP_NAME,
    APP_VERSION,
    EXIT_INVALID_CONFIG,
    EXIT_RUNTIME_ERROR,
    get_logger,
    setup_logging,
)

logger = get_logger(__name__)

__all__ = [
    "parse_args",
    "run_import",
    "main",
    # Re-export for unit-test patching
    "ImportOrchestrator",
]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Convert an exported Notion table into a block archive",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser(
        "convert", help="Convert an export folder into an archive"
    )
    convert_parser.add_argument(
        "-i",
        "--input",
        dest="input_folder",
        type=str,
        default=None,
        help="Folder containing the exported .csv",
    )
    convert_parser.add_argument(
        "-o",
        "--output",
        dest="output_file",
        type=str,
        default=None,
        help="Archive file to write (default: archive.focalboard)",
    )
    convert_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML/JSON import config; flags override its values",
    )
    convert_parser.add_argument(
        "--title",
        type=str,
        default=None,
        help="Collection title (default: derived from the csv file name)",
    )
    convert_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def run_import(args: argparse.Namespace) -> int:
    """Build the config from parsed arguments and run one import."""
    try:
        config = load_and_validate_config(
            args.config,
            overrides={
                "input_folder": args.input_folder,
                "output_file": args.output_file,
                "title": args.title,
            },
        )
    except ImportConfigError as e:
        print(f"✗ Invalid import configuration:\n{e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    try:
        orchestrator = ImportOrchestrator(config)
        exit_code = orchestrator.run()
    except KeyboardInterrupt:
        print("\n✗ Import interrupted by user", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except OSError as e:
        print(f"✗ I/O error: {e}", file=sys.stderr)
        logger.exception("I/O error during import")
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        print(f"✗ Runtime error: {type(e).__name__}: {e}", file=sys.stderr)
        logger.exception(f"Unexpected error during import: {type(e).__name__}")
        return EXIT_RUNTIME_ERROR

    if exit_code == 0:
        print(f"✓ Exported to {orchestrator.archive_path}")
    else:
        print(f"✗ Import failed with exit code: {exit_code}", file=sys.stderr)
    return exit_code


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for `python -m cli`."""
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    if args.command != "convert":
        return EXIT_RUNTIME_ERROR

    return run_import(args)
