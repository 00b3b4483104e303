"""Tests for breadcrumb assembly."""

from techjournal.core.breadcrumbs import assemble_breadcrumbs, breadcrumbs_str
from techjournal.core.resolver import resolve
from techjournal.models.node import Breadcrumb
from tests.unit.fakes import make_document


def test_breadcrumbs_link_ancestors_and_end_on_current_page() -> None:
    docs = [
        make_document("x", title="X"),
        make_document("x/y", title="Y"),
        make_document("x/y/z", title="Z"),
    ]
    resolved = resolve(docs, "x/y/z")

    crumbs = assemble_breadcrumbs(resolved.ancestors, resolved)

    assert crumbs == (
        Breadcrumb(label="Home", path="/"),
        Breadcrumb(label="X", path="/post/x"),
        Breadcrumb(label="Y", path="/post/x/y"),
        Breadcrumb(label="Z", path=None),
    )


def test_breadcrumbs_skip_virtual_ancestors() -> None:
    docs = [make_document("a/b", title="B")]
    resolved = resolve(docs, "a/b")
    crumbs = assemble_breadcrumbs(resolved.ancestors, resolved)
    assert [c.label for c in crumbs] == ["Home", "B"]


def test_breadcrumbs_for_virtual_node() -> None:
    docs = [make_document("notes/deep-dives/x", title="X")]
    resolved = resolve(docs, "notes/deep-dives")
    crumbs = assemble_breadcrumbs(resolved.ancestors, resolved)
    assert crumbs[-1] == Breadcrumb(label="Deep dives", path=None)


def test_breadcrumbs_str_joins_labels() -> None:
    crumbs = (Breadcrumb("Home", "/"), Breadcrumb("X", "/post/x"), Breadcrumb("Y", None))
    assert breadcrumbs_str(crumbs) == "Home > X > Y"
