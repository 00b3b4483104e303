"""Resolve a requested slug against the document set."""

import datetime as dt
from collections.abc import Iterable

from loguru import logger

from techjournal.core.headings import extract_headings
from techjournal.core.slugs import (
    is_descendant,
    is_immediate_child,
    normalize_requested_slug,
    same_slug,
    split_slug,
)
from techjournal.models.node import (
    Ancestor,
    Document,
    ResolutionKind,
    ResolvedNode,
    SubArticle,
)

NOT_FOUND_TITLE = "Not found"


def virtual_title(slug: str) -> str:
    """Display title of a folder without a document: "my-notes" -> "My notes"."""
    text = split_slug(slug)[-1].replace("-", " ")
    return text[:1].upper() + text[1:]


def resolve(
    documents: Iterable[Document],
    requested_slug: str,
    *,
    today: dt.date | None = None,
) -> ResolvedNode:
    """Classify ``requested_slug`` as a real document, a virtual folder, or not found.

    Ancestors are only real documents whose slug is a strict prefix of the
    request; folders without a document of their own are not listed.
    Sub-articles keep document order.

    Args:
        documents: The document set of this resolution pass.
        requested_slug: Slug from the route, e.g. "systems/scheduler-notes".
        today: Day used as the date of virtual nodes (defaults to today).

    Raises:
        InvalidSlugError: If the requested slug is empty or malformed.
    """
    slug = normalize_requested_slug(requested_slug)

    found: Document | None = None
    has_descendant = False
    ancestors: list[Ancestor] = []
    sub_articles: list[SubArticle] = []

    for doc in documents:
        if found is None and same_slug(doc.slug, slug):
            found = doc
        if is_descendant(slug, doc.slug):
            ancestors.append(Ancestor(title=doc.title, slug=doc.slug))
        if is_descendant(doc.slug, slug):
            has_descendant = True
            if is_immediate_child(doc.slug, slug):
                sub_articles.append(SubArticle(title=doc.title, slug=doc.slug, date=doc.date))

    # Stable sort: equally long slugs keep document order.
    ancestors.sort(key=lambda a: len(a.slug))

    if found is not None:
        meta = found.metadata
        return ResolvedNode(
            slug=found.slug,
            kind=ResolutionKind.REAL,
            title=meta.title,
            date=meta.date,
            tags=meta.tags,
            excerpt=meta.excerpt,
            read_time=meta.read_time,
            content=found.body,
            ancestors=tuple(ancestors),
            sub_articles=tuple(sub_articles),
            headings=extract_headings(found.body),
        )

    if has_descendant:
        return ResolvedNode(
            slug=slug,
            kind=ResolutionKind.VIRTUAL,
            title=virtual_title(slug),
            date=(today or dt.date.today()).isoformat(),
            ancestors=tuple(ancestors),
            sub_articles=tuple(sub_articles),
        )

    logger.debug("No document or descendant for slug {!r}", slug)
    return ResolvedNode(slug=slug, kind=ResolutionKind.NOT_FOUND, title=NOT_FOUND_TITLE)
