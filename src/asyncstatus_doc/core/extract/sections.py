"""Split the top-level children of a status document into sections.

The document has no explicit section containers. Instead, marker nodes
(the notes and mood headings) switch the current section for every
sibling that follows them, and the status heading and todo list switch
back to "no section". This is a three-state machine driven by node tags.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum

from asyncstatus_doc.models.node import Node, NodeType


class Section(StrEnum):
    NONE = "none"
    NOTES = "notes"
    MOOD = "mood"


# Node tag -> section that starts at that node. Tags not listed here are content.
SECTION_TRANSITIONS: dict[str, Section] = {
    NodeType.STATUS_HEADING: Section.NONE,
    NodeType.TODO_LIST: Section.NONE,
    NodeType.NOTES_HEADING: Section.NOTES,
    NodeType.MOOD_HEADING: Section.MOOD,
}


@dataclass(frozen=True)
class ClassifiedNode:
    """A top-level node tagged with its section.

    Boundary nodes carry the section they switch to and are never part of
    a section's content.
    """

    node: Node
    section: Section
    is_boundary: bool = False


def classify_sections(children: Iterable[Node | None]) -> Iterator[ClassifiedNode]:
    """Assign each sibling to a section in a single left-to-right pass."""
    section = Section.NONE
    for node in children:
        if node is None:
            continue
        next_section = SECTION_TRANSITIONS.get(node.type)
        if next_section is not None:
            section = next_section
            yield ClassifiedNode(node=node, section=section, is_boundary=True)
        else:
            yield ClassifiedNode(node=node, section=section)


def section_nodes(root: Node | None, section: Section) -> tuple[Node, ...]:
    """Return the content nodes of one section, in document order."""
    if root is None or not root.content:
        return ()
    return tuple(
        entry.node
        for entry in classify_sections(root.content)
        if entry.section == section and not entry.is_boundary
    )
