"""File-backed drafts of status-update documents, one per date."""

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from loguru import logger

from asyncstatus_doc.config import BLANK_EDITOR_DOCUMENT, DRAFT_KEY_BASE
from asyncstatus_doc.core.extract.record import extract_status_record
from asyncstatus_doc.core.importer.json_reader import parse_document_data
from asyncstatus_doc.core.tree.stats import compute_stats
from asyncstatus_doc.core.write.builder import default_document
from asyncstatus_doc.models.node import DocStats, Node, StatusRecord
from asyncstatus_doc.protocols import DraftStoreProtocol


def draft_key(date: str | None = None, *, prefix: str | None = None) -> str:
    """Key under which a draft is stored, e.g. ``team-json-content-2025-01-01``."""
    key = f"{DRAFT_KEY_BASE}-{date}" if date else DRAFT_KEY_BASE
    return f"{prefix}-{key}" if prefix else key


class DraftStore:
    """Keep editor JSON drafts as ``<key>.json`` files in a directory.

    - A missing or blank draft loads as a fresh default document.
    - Saving unchanged contents leaves the file untouched.
    """

    def __init__(self, data_dir: str | Path, *, key_prefix: str | None = None) -> None:
        self.data_dir = Path(data_dir).expanduser()
        self.key_prefix = key_prefix

        if self.data_dir.exists() and not self.data_dir.is_dir():
            msg = f"Draft directory {str(self.data_dir)!r} is not a directory"
            raise ValueError(msg)

        logger.debug("Draft store ready: {}, prefix {!r}", self.data_dir, key_prefix)

    def path_for(self, date: str | None = None) -> Path:
        return self.data_dir / f"{draft_key(date, prefix=self.key_prefix)}.json"

    def _read_json(self, path: Path) -> Any | None:
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except json.JSONDecodeError as e:
            logger.warning("Ignoring unreadable draft {}: {}", path, e)
            return None

    def load(self, date: str | None = None) -> Node:
        """Return the stored draft, or the default document for ``date`` (today if None)."""
        data = self._read_json(self.path_for(date))
        doc = None if data is None or data == BLANK_EDITOR_DOCUMENT else parse_document_data(data)
        if doc is None:
            logger.debug("No draft for {!r}, starting from the default document", date)
            return default_document(date or datetime.now(tz=UTC))
        return doc

    def save(self, doc: Node, date: str | None = None) -> bool:
        """Write the draft if its contents changed. Returns True when written."""
        path = self.path_for(date)
        contents = json.dumps(doc.to_data(), ensure_ascii=False, sort_keys=True, indent=2) + "\n"
        try:
            if path.read_text(encoding="utf-8") == contents:
                logger.debug("Draft unchanged: {}", path)
                return False
        except FileNotFoundError:
            pass

        self.data_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
        logger.info("Saved draft {}", path)
        return True


def submit_draft(store: DraftStoreProtocol, *, date: str | None = None) -> tuple[StatusRecord, DocStats]:
    """Load a draft and derive what gets submitted: the record and its stats."""
    doc = store.load(date)
    stats = compute_stats(doc)
    record = extract_status_record(doc)
    logger.info(
        "Draft {!r}: {} in progress, {} done, {} blocked, {} words",
        date,
        stats.in_progress_task_items,
        stats.done_task_items,
        stats.blocked_task_items,
        stats.words,
    )
    return record, stats
