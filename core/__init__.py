"""Core orchestration for the importer."""

from .orchestrator import ImportOrchestrator

__all__ = ["ImportOrchestrator"]
