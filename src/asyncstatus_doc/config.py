"""Configuration constants for asyncstatus-doc."""

from pathlib import Path
from typing import Any

# Directory with drafts. First directory which is found is used.
DATA_DIRECTORIES: list[Path] = [
    Path("~/.local/share/asyncstatus").expanduser(),
    Path("~/.asyncstatus").expanduser(),
    Path("~/.config/asyncstatus").expanduser(),
]

# Base of the draft key; a date and an optional prefix are added around it.
DRAFT_KEY_BASE: str = "json-content"

# What the editor emits for a document the user never touched.
BLANK_EDITOR_DOCUMENT: dict[str, Any] = {"type": "doc", "content": [{"type": "paragraph"}]}

# Marker written in front of list items when flattening to text.
LIST_ITEM_BULLET: str = "• "


def resolve_data_directory() -> Path:
    """Return the first existing data directory, or the first candidate if none exist."""
    for candidate in DATA_DIRECTORIES:
        if candidate.is_dir():
            return candidate
    return DATA_DIRECTORIES[0]
