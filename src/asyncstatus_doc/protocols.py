"""Protocols for dependency injection at the draft boundary."""

from typing import Protocol, runtime_checkable

from asyncstatus_doc.models.node import Node


@runtime_checkable
class DraftStoreProtocol(Protocol):
    """Protocol for stores that keep one editor document per date."""

    def load(self, date: str | None = None) -> Node:
        """Return the draft for ``date``, or a fresh default document."""
        ...

    def save(self, doc: Node, date: str | None = None) -> bool:
        """Persist the draft; return True if anything was written."""
        ...
