"""Build status-update documents."""

from collections.abc import Iterable, Sequence
from datetime import UTC, date, datetime

from asyncstatus_doc.core.extract.sections import Section, section_nodes
from asyncstatus_doc.models.node import Node, NodeType, StatusItem


def start_of_day_iso(value: date | datetime | str) -> str:
    """Normalize a date to UTC midnight in the editor's ISO format.

    >>> start_of_day_iso("2025-01-01T15:30:00Z")
    '2025-01-01T00:00:00.000Z'
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            msg = f"Invalid date: {value!r}"
            raise ValueError(msg) from None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        value = value.date()
    return f"{value.isoformat()}T00:00:00.000Z"


def _paragraph(inline: Iterable[Node] = ()) -> Node:
    return Node(type=NodeType.PARAGRAPH, content=tuple(inline))


def _todo_item(text: str, *, checked: bool = False, blocked: bool = False) -> Node:
    inline = (Node(type=NodeType.TEXT, text=text),) if text else ()
    return Node(
        type=NodeType.TODO_ITEM,
        attrs={"checked": checked, "blocked": blocked},
        content=(_paragraph(inline),),
    )


def build_status_document(
    date_value: date | datetime | str,
    items: Sequence[StatusItem] = (),
    *,
    notes: Iterable[Node] = (),
    mood: Iterable[Node] = (),
) -> Node:
    """Build a status document from items and inline notes/mood content.

    Items are laid out in their ``order``. Without items the todo list
    holds a single empty in-progress item, as in a fresh document.
    """
    if items:
        todo_items = tuple(
            _todo_item(item.content, checked=not item.is_in_progress, blocked=item.is_blocker)
            for item in sorted(items, key=lambda item: item.order)
        )
    else:
        todo_items = (_todo_item(""),)

    return Node(
        type=NodeType.DOC,
        content=(
            Node(type=NodeType.STATUS_HEADING, attrs={"date": start_of_day_iso(date_value)}),
            Node(type=NodeType.TODO_LIST, content=todo_items),
            Node(type=NodeType.NOTES_HEADING),
            _paragraph(notes),
            Node(type=NodeType.MOOD_HEADING),
            _paragraph(mood),
        ),
    )


def default_document(date_value: date | datetime | str) -> Node:
    """The blank status update the editor starts from."""
    return build_status_document(date_value)


def _first_paragraph_inline(root: Node | None, section: Section) -> tuple[Node, ...]:
    for node in section_nodes(root, section):
        if node.type == NodeType.PARAGRAPH:
            return node.content or ()
    return ()


def regenerate_document(
    existing: Node | None,
    date_value: date | datetime | str,
    items: Sequence[StatusItem],
) -> Node:
    """Rebuild a document around new items, keeping the user's notes and mood.

    Only the first paragraph of each section is carried over.
    """
    return build_status_document(
        date_value,
        items,
        notes=_first_paragraph_inline(existing, Section.NOTES),
        mood=_first_paragraph_inline(existing, Section.MOOD),
    )
