"""Shared test fixtures."""

from pathlib import Path

import pytest

from techjournal.core.loader import InMemorySource, load_documents
from techjournal.models.node import Document
from tests.unit.fakes import JOURNAL_SOURCE, TODAY, source_path


@pytest.fixture
def journal_documents() -> list[Document]:
    """Documents of JOURNAL_SOURCE, in dict order."""
    source = InMemorySource((source_path(name), text) for name, text in JOURNAL_SOURCE.items())
    return load_documents(source, today=TODAY)


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Return a content directory populated with JOURNAL_SOURCE."""
    root = tmp_path / "posts"
    for name, text in JOURNAL_SOURCE.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root
