"""Whole-document counters for editor feedback."""

from collections.abc import Iterator

from asyncstatus_doc.models.node import DocStats, Node, NodeType

TODO_ITEM_TYPES: frozenset[str] = frozenset({NodeType.TODO_ITEM, NodeType.TASK_ITEM})


def iter_nodes(root: Node | None) -> Iterator[Node]:
    """Yield ``root`` and all its descendants in pre-order."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if node.content:
            stack.extend(child for child in reversed(node.content) if child is not None)


def compute_stats(root: Node | None) -> DocStats:
    """Count task items by status and words over the entire tree.

    Sections are not considered. A blocked item is also counted as done or
    in progress.
    """
    in_progress = done = blocked = words = 0
    for node in iter_nodes(root):
        if node.type in TODO_ITEM_TYPES:
            if node.attrs.get("checked"):
                done += 1
            else:
                in_progress += 1
            if node.attrs.get("blocked"):
                blocked += 1
        if node.text:
            words += len(node.text.split())
    return DocStats(
        in_progress_task_items=in_progress,
        done_task_items=done,
        blocked_task_items=blocked,
        words=words,
    )
