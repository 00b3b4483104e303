"""Tests for building the navigation tree."""

from techjournal.core.loader import InMemorySource, load_documents
from techjournal.core.resolver import resolve
from techjournal.core.tree.builder import (
    EMPTY_ARENA,
    ROOT_KEY,
    build_tree,
    flatten_file_slugs,
    insert_document,
    iter_nodes,
)
from techjournal.models.node import Document, NodeKind, ResolutionKind
from tests.unit.fakes import TODAY, make_document


def test_tree_mirrors_directories_in_discovery_order(journal_documents: list[Document]) -> None:
    tree = build_tree(journal_documents)

    assert [n.name for n in tree] == ["systems", "tools", "hello"]
    systems = tree[0]
    assert systems.kind is NodeKind.FILE
    assert systems.title == "Systems"
    assert [c.name for c in systems.children] == ["scheduler notes", "memory"]

    scheduler, memory = systems.children
    assert scheduler.slug == "systems/scheduler-notes"
    assert scheduler.title == "Scheduler Notes"
    assert memory.kind is NodeKind.FOLDER
    assert memory.slug == "systems/memory"
    assert memory.title == "memory"
    assert memory.children[0].slug == "systems/memory/paging"


def test_folder_without_document_gets_navigable_slug(journal_documents: list[Document]) -> None:
    tools = build_tree(journal_documents)[1]
    assert tools.kind is NodeKind.FOLDER
    assert tools.slug == "tools"
    assert resolve(journal_documents, tools.slug).kind is ResolutionKind.VIRTUAL


def test_folder_slug_replaces_spaces() -> None:
    tree = build_tree([make_document("My Notes/First Post", title="First")])
    folder = tree[0]
    assert folder.slug == "My-Notes"
    assert folder.children[0].slug == "My-Notes/First-Post"


def test_document_discovered_after_its_folder_overwrites_stub() -> None:
    docs = [make_document("a/b", title="B"), make_document("a", title="A doc")]
    [a] = build_tree(docs)
    assert a.kind is NodeKind.FILE
    assert a.title == "A doc"
    assert [c.title for c in a.children] == ["B"]


def test_file_stays_file_when_children_are_added() -> None:
    docs = [make_document("a", title="A doc"), make_document("a/b", title="B")]
    [a] = build_tree(docs)
    assert a.kind is NodeKind.FILE
    assert a.title == "A doc"
    assert [c.slug for c in a.children] == ["a/b"]


def test_sibling_match_is_case_sensitive() -> None:
    # Known limitation: raw names differing only by case become separate nodes.
    docs = [make_document("Notes/x"), make_document("notes/y")]
    tree = build_tree(docs)
    assert [n.name for n in tree] == ["Notes", "notes"]


def test_insert_document_does_not_mutate_input_arena() -> None:
    first = insert_document(EMPTY_ARENA, make_document("a/b"))
    second = insert_document(first, make_document("a/c"))

    assert first[("a",)].children == (("a", "b"),)
    assert second[("a",)].children == (("a", "b"), ("a", "c"))
    assert EMPTY_ARENA[ROOT_KEY].children == ()


def test_empty_corpus_builds_empty_tree() -> None:
    assert build_tree([]) == ()


def test_file_slugs_round_trip(journal_documents: list[Document]) -> None:
    tree = build_tree(journal_documents)
    assert sorted(flatten_file_slugs(tree)) == sorted(d.slug for d in journal_documents)


def test_every_tree_slug_resolves(journal_documents: list[Document]) -> None:
    for _depth, node in iter_nodes(build_tree(journal_documents)):
        assert resolve(journal_documents, node.slug).kind is not ResolutionKind.NOT_FOUND


def test_iter_nodes_reports_depth(journal_documents: list[Document]) -> None:
    depths = {node.slug: depth for depth, node in iter_nodes(build_tree(journal_documents))}
    assert depths["systems"] == 0
    assert depths["systems/memory"] == 1
    assert depths["systems/memory/paging"] == 2


def test_untitled_document_keeps_file_name_as_title() -> None:
    source = InMemorySource([(("scratch notes",), "# hi\n")])
    [node] = build_tree(load_documents(source, today=TODAY))
    assert node.kind is NodeKind.FILE
    assert node.title == "scratch notes"
    assert node.slug == "scratch-notes"


def test_untitled_document_overwriting_stub_keeps_folder_name() -> None:
    [a] = build_tree([make_document("a/b", title="B"), make_document("a")])
    assert a.kind is NodeKind.FILE
    assert a.title == "a"
