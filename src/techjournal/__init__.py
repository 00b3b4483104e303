"""Content resolution and navigation for a markdown technical journal."""

from techjournal.core.breadcrumbs import assemble_breadcrumbs
from techjournal.core.headings import anchor_id, extract_headings
from techjournal.core.loader import FileSystemSource, InMemorySource, load_documents
from techjournal.core.resolver import resolve
from techjournal.core.slugs import InvalidSlugError, derive_slug
from techjournal.core.tree.builder import build_tree
from techjournal.navigation import NavigationPayload, NavigationSession, build_navigation

__all__ = [
    "FileSystemSource",
    "InMemorySource",
    "InvalidSlugError",
    "NavigationPayload",
    "NavigationSession",
    "anchor_id",
    "assemble_breadcrumbs",
    "build_navigation",
    "build_tree",
    "derive_slug",
    "extract_headings",
    "load_documents",
    "resolve",
]
