"""Mutation guards the editing surface calls before committing a change.

Each guard is a pure predicate over the document before and after a
proposed change. A rejected change is simply not committed; telling the
user is up to the editing surface.
"""

from loguru import logger

from asyncstatus_doc.core.tree.stats import TODO_ITEM_TYPES, iter_nodes
from asyncstatus_doc.models.node import Node, NodeType


def count_headings(tree: Node | None) -> int:
    """Count status heading nodes anywhere in ``tree``."""
    return sum(1 for node in iter_nodes(tree) if node.type == NodeType.STATUS_HEADING)


def count_task_items(tree: Node | None) -> int:
    return sum(1 for node in iter_nodes(tree) if node.type in TODO_ITEM_TYPES)


def guard_mutation(old: Node | None, new: Node | None) -> bool:
    """Accept a change unless it removes a status heading.

    Moving, duplicating or editing the heading is fine; only a drop in the
    heading count is rejected.
    """
    old_count = count_headings(old)
    new_count = count_headings(new)
    if new_count < old_count:
        logger.debug("Rejecting change: status headings {} -> {}", old_count, new_count)
        return False
    return True


def guard_task_limit(old: Node | None, new: Node | None, limit: int | None) -> bool:
    """Accept a change unless it pushes the task item count over ``limit``.

    A limit of None or 0 means unlimited. A document already over the limit
    may shrink or stay the same, but not grow.
    """
    if not limit:
        return True

    new_count = count_task_items(new)
    if new_count <= limit:
        return True

    old_count = count_task_items(old)
    if old_count > limit and new_count <= old_count:
        return True

    logger.debug("Rejecting change: task items {} -> {} (limit {})", old_count, new_count, limit)
    return False


def commit_mutation(current: Node, proposed: Node) -> Node:
    """Return the tree to keep: ``proposed`` if the guard accepts it, else ``current``."""
    return proposed if guard_mutation(current, proposed) else current
