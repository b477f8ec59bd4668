"""Reconcile stored status items with a fresh extraction."""

from collections.abc import Sequence
from dataclasses import dataclass

from asyncstatus_doc.models.node import StatusItem


@dataclass(frozen=True)
class ItemChanges:
    to_insert: tuple[StatusItem, ...] = ()
    to_delete: tuple[StatusItem, ...] = ()


def item_signature(item: StatusItem) -> tuple[str, bool, bool, int]:
    """Identity of a stored item: any field change makes it a different item."""
    return (item.content, item.is_blocker, item.is_in_progress, item.order)


def diff_items(existing: Sequence[StatusItem], incoming: Sequence[StatusItem]) -> ItemChanges:
    """Work out which items to insert and which to delete.

    An empty submission leaves the stored items alone.
    """
    if not incoming:
        return ItemChanges()

    existing_signatures = {item_signature(item) for item in existing}
    incoming_signatures = {item_signature(item) for item in incoming}
    return ItemChanges(
        to_insert=tuple(item for item in incoming if item_signature(item) not in existing_signatures),
        to_delete=tuple(item for item in existing if item_signature(item) not in incoming_signatures),
    )
