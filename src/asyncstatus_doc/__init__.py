"""Status-update document model: extraction, stats and edit guards."""

from asyncstatus_doc.core.extract.emoji import EmojiSplit, extract_emoji
from asyncstatus_doc.core.extract.record import extract_status_record, to_api_payload
from asyncstatus_doc.core.extract.sections import Section, classify_sections
from asyncstatus_doc.core.importer.json_reader import parse_document_data
from asyncstatus_doc.core.tree.guard import (
    commit_mutation,
    count_headings,
    guard_mutation,
    guard_task_limit,
)
from asyncstatus_doc.core.tree.markdown import serialize_inline
from asyncstatus_doc.core.tree.stats import compute_stats
from asyncstatus_doc.models.node import DocStats, Mark, Node, StatusItem, StatusRecord

__all__ = [
    "DocStats",
    "EmojiSplit",
    "Mark",
    "Node",
    "Section",
    "StatusItem",
    "StatusRecord",
    "classify_sections",
    "commit_mutation",
    "compute_stats",
    "count_headings",
    "extract_emoji",
    "extract_status_record",
    "guard_mutation",
    "guard_task_limit",
    "parse_document_data",
    "serialize_inline",
    "to_api_payload",
]
