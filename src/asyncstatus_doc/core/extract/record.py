"""Extract the structured status record from a status-update document."""

from datetime import UTC, datetime
from typing import Any

from loguru import logger

from asyncstatus_doc.core.extract.emoji import extract_emoji
from asyncstatus_doc.core.extract.sections import Section, classify_sections
from asyncstatus_doc.core.tree.markdown import serialize_inline
from asyncstatus_doc.models.node import Node, NodeType, StatusItem, StatusRecord


def _todo_items(todo_list: Node, start: int) -> list[StatusItem]:
    items: list[StatusItem] = []
    for child in todo_list.content or ():
        if child is None or child.type != NodeType.TODO_ITEM:
            continue
        content = serialize_inline(child).strip()
        if not content:
            continue
        items.append(
            StatusItem(
                content=content,
                is_blocker=child.attrs.get("blocked") is True,
                is_in_progress=child.attrs.get("checked") is False,
                order=start + len(items),
            )
        )
    return items


def extract_status_record(root: Node | None) -> StatusRecord:
    """Derive the status record from the top-level children of ``root``.

    - The status heading supplies the date (the last one wins).
    - Every todo list contributes its non-empty items, numbered from 0
      across all lists with no gaps.
    - Content after the notes/mood markers is serialized, stripped and
      joined with newlines. The mood text loses its leading emoji, which
      is reported separately.

    Args:
        root: The document root, or None.

    Returns:
        A fresh StatusRecord; absent sections are None, never "".
    """
    if root is None or not root.content:
        return StatusRecord()

    date: str | None = None
    items: list[StatusItem] = []
    collected: dict[Section, list[str]] = {Section.NOTES: [], Section.MOOD: []}

    for entry in classify_sections(root.content):
        node = entry.node
        if entry.is_boundary:
            if node.type == NodeType.STATUS_HEADING:
                heading_date = node.attrs.get("date")
                if heading_date and isinstance(heading_date, str):
                    date = heading_date
            elif node.type == NodeType.TODO_LIST:
                items.extend(_todo_items(node, start=len(items)))
            continue

        if entry.section == Section.NONE:
            continue
        text = serialize_inline(node).strip()
        if text:
            collected[entry.section].append(text)

    notes = "\n".join(collected[Section.NOTES]) or None

    mood: str | None = None
    mood_emoji: str | None = None
    if collected[Section.MOOD]:
        split = extract_emoji("\n".join(collected[Section.MOOD]))
        mood_emoji = split.emoji
        mood = split.remaining_text or None

    logger.debug(
        "Extracted {} items, notes={}, mood={}, date={!r}",
        len(items),
        notes is not None,
        mood is not None,
        date,
    )
    return StatusRecord(
        items=tuple(items),
        notes=notes,
        mood=mood,
        mood_emoji=mood_emoji,
        date=date,
    )


def _parse_date(value: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        msg = f"Invalid status update date: {value!r}"
        raise ValueError(msg) from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def to_api_payload(record: StatusRecord, *, now: datetime | None = None) -> dict[str, Any]:
    """Convert a record to the create/update status update payload.

    A record without a date is filed under ``now`` (current UTC time by default).
    """
    if record.date:
        date = _parse_date(record.date)
    else:
        date = now or datetime.now(tz=UTC)
    return {
        "emoji": record.mood_emoji,
        "mood": record.mood,
        "notes": record.notes,
        "date": date,
        "items": [
            {
                "content": item.content,
                "is_blocker": item.is_blocker,
                "is_in_progress": item.is_in_progress,
                "order": item.order,
            }
            for item in record.items
        ],
    }
