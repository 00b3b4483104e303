"""Build the navigation tree from the document set.

The tree is assembled in an arena keyed by raw segment paths. Inserting a
document returns a new arena (copy-on-write), so folders touched by several
documents in any order never share mutable state. The arena is materialized
into immutable ``TreeNode``s at the end.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, replace
from functools import reduce

from techjournal.core.slugs import derive_slug
from techjournal.models.node import Document, NodeKind, TreeNode

PathKey = tuple[str, ...]

# Key of the synthetic root entry holding the top-level nodes.
ROOT_KEY: PathKey = ()


@dataclass(frozen=True)
class ArenaEntry:
    name: str
    title: str
    slug: str
    kind: NodeKind
    children: tuple[PathKey, ...] = ()


Arena = Mapping[PathKey, ArenaEntry]

EMPTY_ARENA: Arena = {ROOT_KEY: ArenaEntry(name="", title="", slug="", kind=NodeKind.FOLDER)}


def insert_document(arena: Arena, document: Document) -> Arena:
    """Return a new arena with ``document`` inserted.

    Siblings are matched on the raw segment name, case-sensitively. Missing
    intermediate segments become Folder stubs. The final segment becomes a
    File with the document's slug. Its title is the front-matter title, or
    the segment name when the front matter has none. A Folder stub at that
    position is overwritten but keeps its children. A File is never turned back into a
    Folder when later documents are inserted below it.
    """
    updated = dict(arena)
    last = len(document.path) - 1
    for depth, name in enumerate(document.path):
        key = document.path[: depth + 1]
        parent_key = key[:-1]
        entry = updated.get(key)
        if entry is None:
            entry = ArenaEntry(
                name=name,
                title=name,
                slug=derive_slug(key),
                kind=NodeKind.FOLDER,
            )
            parent = updated[parent_key]
            updated[parent_key] = replace(parent, children=(*parent.children, key))
        if depth == last:
            title = document.title if document.metadata.has_title else entry.title
            entry = replace(entry, title=title, slug=document.slug, kind=NodeKind.FILE)
        updated[key] = entry
    return updated


def _materialize(arena: Arena, key: PathKey) -> TreeNode:
    entry = arena[key]
    return TreeNode(
        name=entry.name,
        title=entry.title,
        slug=entry.slug,
        kind=entry.kind,
        children=tuple(_materialize(arena, child) for child in entry.children),
    )


def build_tree(documents: Iterable[Document]) -> tuple[TreeNode, ...]:
    """Fold every document into one tree and return its top-level nodes.

    Children keep first-discovery order.
    """
    arena = reduce(insert_document, documents, EMPTY_ARENA)
    return tuple(_materialize(arena, key) for key in arena[ROOT_KEY].children)


def iter_nodes(tree: Iterable[TreeNode]) -> Iterator[tuple[int, TreeNode]]:
    """Yield ``(depth, node)`` pairs in depth-first pre-order."""
    stack = [(0, node) for node in reversed(tuple(tree))]
    while stack:
        depth, node = stack.pop()
        yield depth, node
        stack.extend((depth + 1, child) for child in reversed(node.children))


def flatten_file_slugs(tree: Iterable[TreeNode]) -> list[str]:
    """Slugs of all File nodes, in pre-order."""
    return [node.slug for _depth, node in iter_nodes(tree) if node.is_file]
