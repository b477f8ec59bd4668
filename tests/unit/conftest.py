"""Shared test fixtures."""

import copy
from collections.abc import Iterator
from typing import Any

import pytest
from loguru import logger

from asyncstatus_doc.core.importer.json_reader import parse_document_data
from asyncstatus_doc.models.node import Node
from tests.unit.docs import STATUS_DOC


@pytest.fixture
def status_doc_data() -> dict[str, Any]:
    """Editor JSON for a complete status update (fresh copy per test)."""
    return copy.deepcopy(STATUS_DOC)


@pytest.fixture
def status_doc(status_doc_data: dict[str, Any]) -> Node:
    doc = parse_document_data(status_doc_data)
    assert doc is not None
    return doc


@pytest.fixture(autouse=True)
def _quiet_logging() -> Iterator[None]:
    """Drop loguru sinks added by a test so they never outlive its streams."""
    yield
    logger.remove()
