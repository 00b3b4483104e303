"""Domain models for the journal navigation engine."""

import datetime as dt
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from loguru import logger

from techjournal.config import DEFAULT_READ_TIME, DEFAULT_TITLE


def _coerce_str(key: str, value: Any, default: str) -> str:
    if value is None or value == "":
        return default
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value).strip() or default
    logger.debug("Ignoring front matter {!r}: unsupported value {!r}", key, value)
    return default


def _coerce_date(value: Any, today: dt.date) -> str:
    if isinstance(value, dt.datetime):
        return value.date().isoformat()
    if isinstance(value, dt.date):
        return value.isoformat()
    return _coerce_str("date", value, today.isoformat())


def _coerce_tags(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        raw = value.split(",")
    elif isinstance(value, (list, tuple, set)):
        raw = [str(v) for v in value if v is not None]
    else:
        logger.debug("Ignoring front matter 'tags': unsupported value {!r}", value)
        return ()
    # dict.fromkeys keeps first-seen order while dropping duplicates
    return tuple(dict.fromkeys(t.strip() for t in raw if t.strip()))


@dataclass(frozen=True)
class RawDocument:
    """A document as read from the corpus, before front matter is parsed."""

    path: tuple[str, ...]
    raw_text: str


@dataclass(frozen=True)
class Metadata:
    """Validated front-matter record of a document."""

    title: str = DEFAULT_TITLE
    date: str = ""
    tags: tuple[str, ...] = ()
    excerpt: str = ""
    read_time: str = DEFAULT_READ_TIME
    # False when the front matter had no usable title and ``title`` is the default.
    has_title: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, today: dt.date | None = None) -> "Metadata":
        """Build metadata from raw front matter, applying documented defaults.

        Args:
            data: Key/value mapping as returned by the front-matter parser.
            today: Day used when the document has no ``date`` (defaults to today).
        """
        today = today or dt.date.today()
        read_time = data.get("readTime", data.get("read_time"))
        title = _coerce_str("title", data.get("title"), "")
        return cls(
            title=title or DEFAULT_TITLE,
            date=_coerce_date(data.get("date"), today),
            tags=_coerce_tags(data.get("tags")),
            excerpt=_coerce_str("excerpt", data.get("excerpt"), ""),
            read_time=_coerce_str("readTime", read_time, DEFAULT_READ_TIME),
            has_title=bool(title),
        )


@dataclass(frozen=True)
class Document:
    """A markdown document of the journal, with metadata stripped from its body."""

    path: tuple[str, ...]
    slug: str
    metadata: Metadata
    body: str

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def date(self) -> str:
        return self.metadata.date


class NodeKind(str, Enum):
    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class TreeNode:
    """A node of the navigation tree.

    Folder nodes have no document of their own but still carry a slug, so
    they stay navigable and resolve to a virtual node.
    """

    name: str
    title: str
    slug: str
    kind: NodeKind
    children: tuple["TreeNode", ...] = ()

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE


class ResolutionKind(str, Enum):
    REAL = "real"
    VIRTUAL = "virtual"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Ancestor:
    """A real document above the resolved node."""

    title: str
    slug: str


@dataclass(frozen=True)
class SubArticle:
    """A document exactly one path segment below the resolved node."""

    title: str
    slug: str
    date: str


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    id: str


@dataclass(frozen=True)
class Breadcrumb:
    """A single entry of a breadcrumb trail. ``path`` is None for the current page."""

    label: str
    path: str | None


@dataclass(frozen=True)
class ResolvedNode:
    """The outcome of resolving one requested slug."""

    slug: str
    kind: ResolutionKind
    title: str
    date: str = ""
    tags: tuple[str, ...] = ()
    excerpt: str = ""
    read_time: str = ""
    content: str = ""
    ancestors: tuple[Ancestor, ...] = ()
    sub_articles: tuple[SubArticle, ...] = ()
    headings: tuple[Heading, ...] = ()

    @property
    def found(self) -> bool:
        return self.kind is not ResolutionKind.NOT_FOUND

    @property
    def is_virtual(self) -> bool:
        return self.kind is ResolutionKind.VIRTUAL
