"""Read markdown documents from the content root and build Documents."""

import datetime as dt
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from techjournal.core.frontmatter import parse_front_matter
from techjournal.core.slugs import derive_slug
from techjournal.models.node import Document, Metadata, RawDocument
from techjournal.protocols import CorpusSourceProtocol, FrontMatterParser

MARKDOWN_SUFFIX = ".md"


class FileSystemSource:
    """Corpus of ``*.md`` files below a content root.

    Every call to ``read_all`` rescans the directory; nothing is cached
    between calls. Files that cannot be read are skipped and remembered in
    ``skipped`` for the most recent scan.
    """

    def __init__(self, content_root: str | Path) -> None:
        self.content_root = Path(content_root)
        self.skipped: list[Path] = []

    def read_all(self) -> list[RawDocument]:
        """Read every markdown file, in sorted path order.

        Raises:
            FileNotFoundError: If the content root does not exist.
        """
        if not self.content_root.is_dir():
            msg = f"Content directory not found: {self.content_root}"
            raise FileNotFoundError(msg)

        self.skipped = []
        result: list[RawDocument] = []
        for md_path in sorted(self.content_root.rglob(f"*{MARKDOWN_SUFFIX}")):
            if not md_path.is_file():
                continue
            rel = md_path.relative_to(self.content_root)
            path = (*rel.parts[:-1], rel.name.removesuffix(MARKDOWN_SUFFIX))
            try:
                raw_text = md_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Skipping {}: {}", rel, exc)
                self.skipped.append(md_path)
                continue
            result.append(RawDocument(path=path, raw_text=raw_text))

        logger.debug(
            "Scanned {}: {} documents, {} skipped",
            self.content_root, len(result), len(self.skipped),
        )
        return result


class InMemorySource:
    """Corpus served from fixed ``(path, raw_text)`` pairs."""

    def __init__(self, entries: Iterable[tuple[Iterable[str], str]]) -> None:
        self._documents = [
            RawDocument(path=tuple(path), raw_text=raw_text) for path, raw_text in entries
        ]

    def read_all(self) -> list[RawDocument]:
        return list(self._documents)


def parse_document(
    raw: RawDocument,
    *,
    parse: FrontMatterParser = parse_front_matter,
    today: dt.date | None = None,
) -> Document:
    """Split front matter from a raw document and derive its slug."""
    data, body = parse(raw.raw_text)
    return Document(
        path=raw.path,
        slug=derive_slug(raw.path),
        metadata=Metadata.from_mapping(data, today=today),
        body=body,
    )


def load_documents(
    source: CorpusSourceProtocol,
    *,
    parse: FrontMatterParser = parse_front_matter,
    today: dt.date | None = None,
) -> list[Document]:
    """Load a snapshot of the whole corpus.

    Args:
        source: Provider of raw documents.
        parse: Front matter parser.
        today: Day used as the default ``date`` of undated documents.

    Returns:
        Documents in the order the source returned them.
    """
    documents = [parse_document(raw, parse=parse, today=today) for raw in source.read_all()]
    logger.debug("Loaded {} documents", len(documents))
    return documents
