"""Per-request navigation pipeline and stale-result suppression."""

import asyncio
import datetime as dt
from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from techjournal.core.breadcrumbs import assemble_breadcrumbs
from techjournal.core.listing import collect_tags, list_posts
from techjournal.core.loader import load_documents
from techjournal.core.resolver import resolve
from techjournal.core.tree.builder import build_tree
from techjournal.models.node import Breadcrumb, Document, ResolvedNode, TreeNode
from techjournal.protocols import CorpusSourceProtocol


@dataclass(frozen=True)
class NavigationPayload:
    """Everything a post page needs: the resolved node, its trail and the tree."""

    resolved: ResolvedNode
    breadcrumbs: tuple[Breadcrumb, ...]
    tree: tuple[TreeNode, ...]


@dataclass(frozen=True)
class HomePayload:
    posts: tuple[Document, ...]
    tags: tuple[str, ...]


def build_navigation(
    documents: Sequence[Document],
    slug: str,
    *,
    today: dt.date | None = None,
) -> NavigationPayload:
    """Run one resolution pass over a snapshot of the corpus.

    Raises:
        InvalidSlugError: If the slug is empty or malformed.
    """
    tree = build_tree(documents)
    resolved = resolve(documents, slug, today=today)
    return NavigationPayload(
        resolved=resolved,
        breadcrumbs=assemble_breadcrumbs(resolved.ancestors, resolved),
        tree=tree,
    )


def build_home(documents: Sequence[Document], *, tag: str | None = None) -> HomePayload:
    return HomePayload(
        posts=tuple(list_posts(documents, tag=tag)),
        tags=tuple(collect_tags(documents)),
    )


class NavigationSession:
    """Holds the payload of the most recent navigation.

    Each ``navigate`` call reads a fresh snapshot of the corpus in a worker
    thread. When a newer navigation starts before an older one has finished
    loading, the older result is discarded instead of applied.
    """

    def __init__(self, source: CorpusSourceProtocol, *, today: dt.date | None = None) -> None:
        self.source = source
        self.today = today
        self.current: NavigationPayload | None = None
        self._generation = 0

    async def _load(self) -> list[Document]:
        return await asyncio.to_thread(load_documents, self.source, today=self.today)

    async def navigate(self, slug: str) -> NavigationPayload | None:
        """Resolve ``slug`` and make it the current payload.

        Returns:
            The new payload, or None if a newer navigation superseded this one.
        """
        self._generation += 1
        generation = self._generation

        documents = await self._load()
        payload = build_navigation(documents, slug, today=self.today)

        if generation != self._generation:
            logger.debug("Discarding stale navigation to {!r}", slug)
            return None
        self.current = payload
        return payload

    async def home(self, *, tag: str | None = None) -> HomePayload:
        return build_home(await self._load(), tag=tag)
