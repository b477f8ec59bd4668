"""Tests for status record extraction and the API payload."""

from datetime import UTC, datetime

import pytest

from asyncstatus_doc.core.extract.record import extract_status_record, to_api_payload
from asyncstatus_doc.core.importer.json_reader import parse_document_data
from asyncstatus_doc.models.node import Node, StatusItem, StatusRecord
from tests.unit.docs import (
    GRINNING,
    MOOD_HEADING,
    NOTES_HEADING,
    doc,
    paragraph,
    status_heading,
    text,
    todo_item,
    todo_list,
)


def _extract(*children: dict) -> StatusRecord:
    return extract_status_record(parse_document_data(doc(*children)))


def test_full_status_update(status_doc: Node) -> None:
    assert extract_status_record(status_doc) == StatusRecord(
        items=(
            StatusItem(
                content="Write the release notes", is_blocker=False, is_in_progress=True, order=0
            ),
            StatusItem(
                content="Waiting on **design review**",
                is_blocker=True,
                is_in_progress=True,
                order=1,
            ),
        ),
        notes="Shipped X",
        mood="good week",
        mood_emoji=GRINNING,
        date="2025-01-01",
    )


def test_empty_documents_yield_empty_record() -> None:
    assert extract_status_record(None) == StatusRecord()
    assert _extract() == StatusRecord()
    assert extract_status_record(Node(type="doc")) == StatusRecord()


def test_missing_status_heading_leaves_date_absent() -> None:
    record = _extract(todo_list(todo_item(text("task"))))
    assert record.date is None
    assert len(record.items) == 1


def test_status_heading_without_date() -> None:
    assert _extract(status_heading(None)).date is None


def test_last_status_heading_wins() -> None:
    record = _extract(status_heading("2025-01-01"), status_heading("2025-02-02"))
    assert record.date == "2025-02-02"


def test_missing_todo_list_yields_no_items() -> None:
    assert _extract(status_heading(), NOTES_HEADING, paragraph(text("n"))).items == ()


def test_item_order_has_no_gaps() -> None:
    record = _extract(
        todo_list(
            todo_item(),
            todo_item(text("first")),
            todo_item(text("   ")),
            todo_item(text("second")),
        ),
        paragraph(text("between lists")),
        todo_list(todo_item(), todo_item(text("third"))),
    )
    assert [(item.content, item.order) for item in record.items] == [
        ("first", 0),
        ("second", 1),
        ("third", 2),
    ]


def test_done_and_blocked_item() -> None:
    (item,) = _extract(todo_list(todo_item(text("x"), checked=True, blocked=True))).items
    assert item.is_in_progress is False
    assert item.is_blocker is True


def test_flags_require_real_booleans() -> None:
    data = doc(
        todo_list(
            {
                "type": "blockableTodoListItem",
                "attrs": {"blocked": "true"},
                "content": [paragraph(text("x"))],
            }
        )
    )
    (item,) = extract_status_record(parse_document_data(data)).items
    assert item.is_blocker is False
    assert item.is_in_progress is False


def test_only_todo_items_count() -> None:
    record = _extract(
        {
            "type": "blockableTodoList",
            "content": [paragraph(text("loose paragraph")), todo_item(text("real"))],
        }
    )
    assert [item.content for item in record.items] == ["real"]


def test_missing_todo_items_are_skipped() -> None:
    real = parse_document_data(todo_item(text("real")))
    root = Node(type="doc", content=(Node(type="blockableTodoList", content=(None, real, None)),))
    record = extract_status_record(root)
    assert [(item.content, item.order) for item in record.items] == [("real", 0)]


def test_notes_join_blocks_in_order() -> None:
    record = _extract(
        NOTES_HEADING,
        paragraph(text("Shipped "), text("X", "bold")),
        paragraph(),
        {"type": "heading", "attrs": {"level": 3}, "content": [text("Next")]},
    )
    assert record.notes == "Shipped **X**\n### Next"


def test_blank_sections_are_absent() -> None:
    record = _extract(NOTES_HEADING, paragraph(text("   ")), MOOD_HEADING, paragraph())
    assert record.notes is None
    assert record.mood is None
    assert record.mood_emoji is None


def test_mood_without_emoji() -> None:
    record = _extract(MOOD_HEADING, paragraph(text("steady")))
    assert record.mood == "steady"
    assert record.mood_emoji is None


def test_mood_with_only_emoji() -> None:
    record = _extract(MOOD_HEADING, paragraph(text(GRINNING)))
    assert record.mood is None
    assert record.mood_emoji == GRINNING


def test_multi_paragraph_mood_keeps_leading_emoji_only() -> None:
    record = _extract(
        MOOD_HEADING, paragraph(text(f"{GRINNING} good")), paragraph(text("tired though"))
    )
    assert record.mood_emoji == GRINNING
    assert record.mood == "good\ntired though"


def test_sections_in_any_order() -> None:
    record = _extract(
        MOOD_HEADING,
        paragraph(text("calm")),
        NOTES_HEADING,
        paragraph(text("noted")),
        status_heading("2025-03-03"),
    )
    assert record.mood == "calm"
    assert record.notes == "noted"
    assert record.date == "2025-03-03"


def test_marker_content_is_not_collected() -> None:
    record = _extract(
        {"type": "notesHeading", "content": [text("Notes")]},
        paragraph(text("body")),
    )
    assert record.notes == "body"


def test_extraction_is_repeatable(status_doc: Node) -> None:
    assert extract_status_record(status_doc) == extract_status_record(status_doc)


def test_api_payload(status_doc: Node) -> None:
    record = extract_status_record(status_doc)
    payload = to_api_payload(record)
    assert payload["date"] == datetime(2025, 1, 1, tzinfo=UTC)
    assert payload["emoji"] == GRINNING
    assert payload["mood"] == "good week"
    assert payload["notes"] == "Shipped X"
    assert payload["items"][1] == {
        "content": "Waiting on **design review**",
        "is_blocker": True,
        "is_in_progress": True,
        "order": 1,
    }


def test_api_payload_parses_editor_timestamps() -> None:
    payload = to_api_payload(StatusRecord(date="2025-01-01T00:00:00.000Z"))
    assert payload["date"] == datetime(2025, 1, 1, tzinfo=UTC)


def test_api_payload_without_date_uses_now() -> None:
    now = datetime(2025, 5, 5, 12, tzinfo=UTC)
    assert to_api_payload(StatusRecord(), now=now)["date"] == now
    assert to_api_payload(StatusRecord())["date"].tzinfo is not None


def test_api_payload_rejects_bad_dates() -> None:
    with pytest.raises(ValueError, match="Invalid status update date"):
        to_api_payload(StatusRecord(date="next tuesday"))
