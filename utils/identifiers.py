"""Identifier minting for nodes, property templates and options.

The importer never generates ids on its own: every component that needs
one receives an IdGenerator. The only contract callers rely on is that
ids are unique within one output set.
"""

import itertools
import uuid


class IdGenerator:
    """Mints random, globally unique identifiers (uuid4)."""

    def new_id(self) -> str:
        """Return a fresh identifier."""
        return str(uuid.uuid4())

    def __call__(self) -> str:
        return self.new_id()


class SequentialIdGenerator(IdGenerator):
    """Mints predictable identifiers (``<prefix>1``, ``<prefix>2``, ...).

    Useful for tests and for producing archives that diff cleanly between
    runs over the same input.

    Args:
        prefix: String prepended to every counter value
        start: First counter value
    """

    def __init__(self, prefix: str = "id-", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def new_id(self) -> str:
        return f"{self.prefix}{next(self._counter)}"
