"""Tree view state and rendering for the side navigation.

Expand/collapse state lives in ``TreeViewState``, owned by the caller and
passed into the pure functions below. Expansion is keyed by lower-cased slug.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from techjournal.core.slugs import same_slug
from techjournal.models.node import TreeNode


@dataclass(frozen=True)
class TreeViewState:
    expanded: frozenset[str] = frozenset()
    current_slug: str | None = None

    def is_expanded(self, slug: str) -> bool:
        return slug.lower() in self.expanded


@dataclass(frozen=True)
class TreeRow:
    """A visible line of the rendered tree."""

    depth: int
    title: str
    slug: str
    has_children: bool
    is_expanded: bool
    is_current: bool


def find_path(tree: Iterable[TreeNode], slug: str) -> list[TreeNode] | None:
    """Return the chain of nodes from the top level down to the node with ``slug``."""
    for node in tree:
        if same_slug(node.slug, slug):
            return [node]
        below = find_path(node.children, slug)
        if below is not None:
            return [node, *below]
    return None


def find_node(tree: Iterable[TreeNode], slug: str) -> TreeNode | None:
    path = find_path(tree, slug)
    return path[-1] if path else None


def expand_to(tree: Iterable[TreeNode], state: TreeViewState, slug: str) -> TreeViewState:
    """Make ``slug`` the current node and expand everything needed to show it.

    All ancestors are expanded, and so is the node itself when it has children.
    Previously expanded nodes stay expanded. An unknown slug only updates
    ``current_slug``.
    """
    path = find_path(tree, slug)
    if path is None:
        return replace(state, current_slug=slug)
    to_expand = {node.slug.lower() for node in path[:-1]}
    if path[-1].children:
        to_expand.add(path[-1].slug.lower())
    return TreeViewState(expanded=state.expanded | to_expand, current_slug=slug)


def toggle(state: TreeViewState, slug: str) -> TreeViewState:
    key = slug.lower()
    if key in state.expanded:
        return replace(state, expanded=state.expanded - {key})
    return replace(state, expanded=state.expanded | {key})


def expand_all(tree: Iterable[TreeNode], state: TreeViewState) -> TreeViewState:
    keys: set[str] = set()
    stack = list(tree)
    while stack:
        node = stack.pop()
        if node.children:
            keys.add(node.slug.lower())
            stack.extend(node.children)
    return replace(state, expanded=state.expanded | keys)


def render_rows(
    tree: Iterable[TreeNode], state: TreeViewState, *, depth: int = 0
) -> list[TreeRow]:
    """Flatten the visible part of the tree into rows, in display order."""
    rows: list[TreeRow] = []
    for node in tree:
        expanded = state.is_expanded(node.slug)
        rows.append(
            TreeRow(
                depth=depth,
                title=node.title or node.name,
                slug=node.slug,
                has_children=bool(node.children),
                is_expanded=expanded,
                is_current=state.current_slug is not None
                and same_slug(node.slug, state.current_slug),
            )
        )
        if node.children and expanded:
            rows.extend(render_rows(node.children, state, depth=depth + 1))
    return rows
