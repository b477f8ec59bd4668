"""Render document nodes as markdown-flavoured text."""

from collections.abc import Callable, Sequence

from asyncstatus_doc.config import LIST_ITEM_BULLET
from asyncstatus_doc.models.node import Mark, MarkType, Node, NodeType


def _wrap_link(text: str, mark: Mark) -> str:
    href = mark.attrs.get("href")
    if not href:
        return text
    return f"[{text}]({href})"


_MARK_WRAPPERS: dict[str, Callable[[str, Mark], str]] = {
    MarkType.LINK: _wrap_link,
    MarkType.BOLD: lambda text, _mark: f"**{text}**",
    MarkType.ITALIC: lambda text, _mark: f"*{text}*",
    MarkType.CODE: lambda text, _mark: f"`{text}`",
    MarkType.STRIKE: lambda text, _mark: f"~~{text}~~",
}


def apply_marks(text: str, marks: Sequence[Mark]) -> str:
    """Wrap ``text`` in its marks so the first stored mark ends up outermost.

    Marks are applied from last to first; unknown marks are ignored.
    """
    for mark in reversed(marks):
        wrap = _MARK_WRAPPERS.get(mark.type)
        if wrap is not None:
            text = wrap(text, mark)
    return text


MAX_HEADING_LEVEL = 6


def _heading_level(node: Node) -> int:
    level = node.attrs.get("level")
    try:
        level = int(level)
    except (TypeError, ValueError, OverflowError):
        return 1
    return min(max(level, 1), MAX_HEADING_LEVEL)


def _serialize_leaf(node: Node) -> str:
    if node.type == NodeType.TEXT and node.text:
        return apply_marks(node.text, node.marks)
    if node.type == NodeType.HARD_BREAK:
        return "\n"
    return ""


def _wrap_block(node: Node, inner: str) -> str:
    if node.type == NodeType.LIST_ITEM:
        return f"{LIST_ITEM_BULLET}{inner}\n"
    if node.type == NodeType.PARAGRAPH:
        return f"{inner}\n"
    if node.type == NodeType.HEADING:
        return f"{'#' * _heading_level(node)} {inner}\n"
    if node.type == NodeType.CODE_BLOCK:
        return f"```\n{inner}\n```\n"
    return inner


def _is_container(node: Node) -> bool:
    return node.content is not None and not (node.type == NodeType.TEXT and node.text)


def serialize_inline(node: Node | None) -> str:
    """Serialize a node and its descendants as markdown.

    Text nodes get their marks applied. Containers join their children
    depth-first and add block affixes:

    - list items: bullet prefix and trailing newline
    - paragraphs: trailing newline
    - headings: ``#`` times ``level`` (1 to 6) prefix and trailing newline
    - code blocks: fenced with triple backticks
    - bullet/ordered lists: children concatenated as-is

    Hard breaks become a newline. Anything else without text or content
    contributes an empty string. Never raises, however deep the tree.
    """
    if node is None:
        return ""

    # Each open container collects its children's output in its own list.
    parts: list[list[str]] = [[]]
    stack: list[tuple[Node, bool]] = [(node, False)]
    while stack:
        current, closing = stack.pop()
        if closing:
            inner = "".join(parts.pop())
            parts[-1].append(_wrap_block(current, inner))
        elif _is_container(current):
            stack.append((current, True))
            parts.append([])
            stack.extend((child, False) for child in reversed(current.content) if child is not None)
        else:
            parts[-1].append(_serialize_leaf(current))
    return "".join(parts[0])
