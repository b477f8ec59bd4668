"""Domain models for status-update documents."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class NodeType(StrEnum):
    """Node tags known to the status-update editor."""

    DOC = "doc"
    STATUS_HEADING = "statusUpdateHeading"
    NOTES_HEADING = "notesHeading"
    MOOD_HEADING = "moodHeading"
    TODO_LIST = "blockableTodoList"
    TODO_ITEM = "blockableTodoListItem"
    TASK_ITEM = "taskItem"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    CODE_BLOCK = "codeBlock"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    TEXT = "text"
    HARD_BREAK = "hardBreak"


class MarkType(StrEnum):
    """Inline formatting marks."""

    BOLD = "bold"
    ITALIC = "italic"
    STRIKE = "strike"
    CODE = "code"
    LINK = "link"


@dataclass(frozen=True)
class Mark:
    """A formatting mark on a text node."""

    type: str
    attrs: dict[str, Any] = field(default_factory=dict)

    def to_data(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type}
        if self.attrs:
            data["attrs"] = dict(self.attrs)
        return data


@dataclass(frozen=True)
class Node:
    """A single node in an editor document tree.

    ``content`` is None for atomic and leaf nodes, and a (possibly empty)
    tuple for containers. Only text nodes carry ``text`` and ``marks``.
    """

    type: str
    attrs: dict[str, Any] = field(default_factory=dict)
    content: tuple["Node", ...] | None = None
    text: str | None = None
    marks: tuple[Mark, ...] = ()

    def to_data(self) -> dict[str, Any]:
        """Convert back to editor JSON, omitting empty fields."""
        data: dict[str, Any] = {"type": self.type}
        if self.attrs:
            data["attrs"] = dict(self.attrs)
        if self.content is not None:
            data["content"] = [child.to_data() for child in self.content]
        if self.text is not None:
            data["text"] = self.text
        if self.marks:
            data["marks"] = [mark.to_data() for mark in self.marks]
        return data


@dataclass(frozen=True)
class StatusItem:
    """A single status line extracted from the todo list."""

    content: str
    is_blocker: bool
    is_in_progress: bool
    order: int


@dataclass(frozen=True)
class StatusRecord:
    """Structured data extracted from a status-update document."""

    items: tuple[StatusItem, ...] = ()
    notes: str | None = None
    mood: str | None = None
    mood_emoji: str | None = None
    date: str | None = None


@dataclass(frozen=True)
class DocStats:
    """Aggregate counters over a whole document."""

    in_progress_task_items: int = 0
    done_task_items: int = 0
    blocked_task_items: int = 0
    words: int = 0
