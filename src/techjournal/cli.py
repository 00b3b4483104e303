"""CLI for the technical journal (posts, show, tree, render, MCP server)."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from techjournal.config import resolve_content_directory
from techjournal.core.breadcrumbs import breadcrumbs_str
from techjournal.core.loader import FileSystemSource, load_documents
from techjournal.core.slugs import InvalidSlugError
from techjournal.core.tree.builder import build_tree
from techjournal.core.tree.view import TreeViewState, expand_all, expand_to, render_rows
from techjournal.logging_config import configure_logging
from techjournal.mcp.server import (
    journal_get_post,
    journal_get_tree,
    journal_list_posts,
    journal_render_post,
)
from techjournal.models.node import Document, ResolutionKind
from techjournal.navigation import build_home, build_navigation

app = typer.Typer(help="Technical journal: browse markdown posts as a navigable tree.")

ContentDirOption = Annotated[
    Path | None,
    typer.Option("--content-dir", "-c", help="Directory with markdown posts"),
]
JsonOption = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _load(content_dir: Path | None) -> list[Document]:
    """Load the corpus, exiting with an error if the directory is missing."""
    src = content_dir or resolve_content_directory()
    try:
        return load_documents(FileSystemSource(src))
    except FileNotFoundError:
        logger.error("Content directory not found: {}", src)
        raise typer.Exit(1) from None


def _echo_json(data: object) -> None:
    typer.echo(json.dumps(data, indent=2))


@app.command()
def posts(
    tag: Annotated[str | None, typer.Option("--tag", "-t", help="Only posts with this tag")] = None,
    content_dir: ContentDirOption = None,
    output_json: JsonOption = False,
) -> None:
    """List top-level posts, newest first."""
    documents = _load(content_dir)
    if output_json:
        _echo_json(journal_list_posts(documents, tag=tag))
        return

    home = build_home(documents, tag=tag)
    typer.echo(f"{len(home.posts)} posts:\n")
    for doc in home.posts:
        meta = doc.metadata
        typer.echo(f"  {meta.date}  {meta.title}  [{doc.slug}]")
        if meta.excerpt:
            typer.echo(f"    {meta.excerpt[:80]}")
    if home.tags:
        typer.echo(f"\nTags: {', '.join(home.tags)}")


@app.command()
def show(
    slug: str = typer.Argument(..., help="Post slug, e.g. systems/scheduler-notes"),
    content_dir: ContentDirOption = None,
    output_json: JsonOption = False,
) -> None:
    """Show a post: breadcrumbs, metadata, table of contents and sub-articles."""
    documents = _load(content_dir)
    if output_json:
        result = journal_get_post(documents, slug=slug)
        _echo_json(result)
        if "error" in result:
            raise typer.Exit(1)
        return

    try:
        payload = build_navigation(documents, slug)
    except InvalidSlugError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None

    resolved = payload.resolved
    if resolved.kind is ResolutionKind.NOT_FOUND:
        typer.echo(f"Post '{slug}' not found.")
        raise typer.Exit(1)

    typer.echo(breadcrumbs_str(payload.breadcrumbs))
    typer.echo()
    typer.echo(resolved.title)
    if resolved.is_virtual:
        typer.echo("  (folder)")
    else:
        typer.echo(f"  {resolved.date}  {resolved.read_time}")
        if resolved.tags:
            typer.echo(f"  tags: {', '.join(resolved.tags)}")

    if resolved.headings:
        typer.echo("\nContents:")
        for h in resolved.headings:
            typer.echo(f"  {'  ' * (h.level - 1)}{h.text}  #{h.id}")

    if resolved.sub_articles:
        typer.echo("\nSub-articles:")
        for sub in resolved.sub_articles:
            typer.echo(f"  {sub.title}  [{sub.slug}]")


@app.command()
def tree(
    current: Annotated[
        str | None,
        typer.Option("--current", help="Expand the tree down to this slug"),
    ] = None,
    expand_everything: bool = typer.Option(False, "--all", "-a", help="Expand every folder"),
    content_dir: ContentDirOption = None,
    output_json: JsonOption = False,
) -> None:
    """Print the navigation tree."""
    documents = _load(content_dir)
    if output_json:
        _echo_json(journal_get_tree(documents))
        return

    nodes = build_tree(documents)

    state = TreeViewState()
    if expand_everything:
        state = expand_all(nodes, state)
    if current:
        state = expand_to(nodes, state, current)

    for row in render_rows(nodes, state):
        marker = "-" if not row.has_children else ("v" if row.is_expanded else ">")
        pointer = "  <" if row.is_current else ""
        typer.echo(f"{'  ' * row.depth}{marker} {row.title}  [{row.slug}]{pointer}")


@app.command()
def render(
    slug: str = typer.Argument(..., help="Post slug"),
    content_dir: ContentDirOption = None,
) -> None:
    """Render a post to HTML."""
    result = journal_render_post(_load(content_dir), slug=slug)
    if "error" in result:
        typer.echo(result["error"])
        raise typer.Exit(1)
    typer.echo(result["html"])


@app.command()
def serve() -> None:
    """Start the MCP server (stdio transport)."""
    from techjournal.mcp.server import run_mcp_server

    run_mcp_server()
