"""Parse editor JSON into document trees."""

from typing import Any

from loguru import logger

from asyncstatus_doc.models.node import Mark, Node


def parse_mark(data: Any) -> Mark | None:
    """Parse a single mark dict; anything without a string type is dropped."""
    if not isinstance(data, dict) or not isinstance(data.get("type"), str):
        return None
    attrs = data.get("attrs")
    return Mark(type=data["type"], attrs=dict(attrs) if isinstance(attrs, dict) else {})


def _build_node(data: dict[str, Any], content: tuple[Node, ...] | None) -> Node:
    node_type = data.get("type")
    if not isinstance(node_type, str):
        logger.debug("Node without a string type: {!r}", node_type)
        node_type = ""

    attrs = data.get("attrs")
    text = data.get("text")
    raw_marks = data.get("marks")
    marks: tuple[Mark, ...] = ()
    if isinstance(raw_marks, list):
        parsed = (parse_mark(mark) for mark in raw_marks)
        marks = tuple(mark for mark in parsed if mark is not None)

    return Node(
        type=node_type,
        attrs=dict(attrs) if isinstance(attrs, dict) else {},
        content=content,
        text=text if isinstance(text, str) else None,
        marks=marks,
    )


def parse_document_data(data: Any) -> Node | None:
    """Parse an editor JSON node (usually the ``doc`` root) into a Node tree.

    Editor output comes from live editing and may be partially shaped, so
    this never raises: malformed fields are dropped or replaced by their
    empty value. Nodes are built bottom-up from an explicit stack, so
    nesting depth is not limited by the interpreter's recursion limit.

    Args:
        data: Raw node dict as produced by the editor's ``getJSON()``.

    Returns:
        The parsed Node, or None if ``data`` is not a dict.
    """
    if not isinstance(data, dict):
        return None

    # Finished children of each open node; the outer list receives the root.
    built: list[list[Node]] = [[]]
    stack: list[tuple[dict[str, Any], bool]] = [(data, False)]
    while stack:
        current, closing = stack.pop()
        if closing:
            children = built.pop()
            built[-1].append(_build_node(current, tuple(children)))
            continue

        raw_content = current.get("content")
        if not isinstance(raw_content, list):
            built[-1].append(_build_node(current, None))
            continue

        stack.append((current, True))
        built.append([])
        stack.extend((child, False) for child in reversed(raw_content) if isinstance(child, dict))
    return built[0][0]
