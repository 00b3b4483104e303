"""Protocols for the collaborators of the navigation engine."""

from typing import Any, Protocol, runtime_checkable

from techjournal.models.node import RawDocument


@runtime_checkable
class CorpusSourceProtocol(Protocol):
    """Protocol for providers of raw markdown documents."""

    def read_all(self) -> list[RawDocument]:
        """Return every readable document of the corpus as one snapshot."""
        ...


class FrontMatterParser(Protocol):
    """Pure function splitting raw text into (metadata, body)."""

    def __call__(self, raw_text: str) -> tuple[dict[str, Any], str]: ...
