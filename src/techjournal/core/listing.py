"""Home page listing: top-level posts, newest first."""

import datetime as dt
from collections.abc import Iterable

from techjournal.models.node import Document


def _date_key(document: Document) -> dt.date:
    try:
        return dt.date.fromisoformat(document.date[:10])
    except ValueError:
        return dt.date.min


def is_top_level(document: Document) -> bool:
    return "/" not in document.slug


def list_posts(documents: Iterable[Document], *, tag: str | None = None) -> list[Document]:
    """Top-level documents sorted by date, newest first.

    Undated or unparseable dates sort last; equal dates keep document order.
    Nested documents are reachable only through their parents.

    Args:
        documents: The document set.
        tag: Only keep posts carrying this tag.
    """
    posts = [d for d in documents if is_top_level(d)]
    if tag is not None:
        posts = [d for d in posts if tag in d.metadata.tags]
    return sorted(posts, key=_date_key, reverse=True)


def collect_tags(documents: Iterable[Document]) -> list[str]:
    """Unique tags of the top-level posts, in first-seen order."""
    tags: dict[str, None] = {}
    for doc in documents:
        if is_top_level(doc):
            tags.update(dict.fromkeys(doc.metadata.tags))
    return list(tags)
