"""Breadcrumb trail for a resolved node."""

from collections.abc import Iterable

from techjournal.config import HOME_ROUTE, post_route
from techjournal.models.node import Ancestor, Breadcrumb, ResolvedNode

HOME_LABEL = "Home"


def assemble_breadcrumbs(
    ancestors: Iterable[Ancestor], resolved: ResolvedNode
) -> tuple[Breadcrumb, ...]:
    """Home, then each ancestor as a link, then the current page without a link."""
    return (
        Breadcrumb(label=HOME_LABEL, path=HOME_ROUTE),
        *(Breadcrumb(label=a.title, path=post_route(a.slug)) for a in ancestors),
        Breadcrumb(label=resolved.title, path=None),
    )


def breadcrumbs_str(breadcrumbs: Iterable[Breadcrumb]) -> str:
    return " > ".join(b.label for b in breadcrumbs)
