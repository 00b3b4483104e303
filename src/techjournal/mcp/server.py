"""MCP server exposing journal navigation: posts, tree, resolved pages."""

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from loguru import logger
from mcp.server.fastmcp import Context, FastMCP

from techjournal.config import post_route, resolve_content_directory
from techjournal.core.breadcrumbs import breadcrumbs_str
from techjournal.core.loader import FileSystemSource, load_documents
from techjournal.core.rendering import render_markdown
from techjournal.core.slugs import InvalidSlugError
from techjournal.core.tree.builder import build_tree
from techjournal.models.node import Document, ResolutionKind, ResolvedNode, TreeNode
from techjournal.navigation import build_home, build_navigation


def _tree_node_dict(node: TreeNode) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "name": node.name,
        "title": node.title,
        "slug": node.slug,
        "type": node.kind.value,
        "url": post_route(node.slug),
    }
    if node.children:
        entry["children"] = [_tree_node_dict(c) for c in node.children]
    return entry


def _post_summary(doc: Document) -> dict[str, Any]:
    meta = doc.metadata
    return {
        "slug": doc.slug,
        "title": meta.title,
        "date": meta.date,
        "tags": list(meta.tags),
        "excerpt": meta.excerpt,
        "read_time": meta.read_time,
        "url": post_route(doc.slug),
    }


def resolved_to_dict(resolved: ResolvedNode, *, include_content: bool = True) -> dict[str, Any]:
    """Serialize a resolved node to plain JSON-compatible data."""
    result: dict[str, Any] = {
        "slug": resolved.slug,
        "kind": resolved.kind.value,
        "title": resolved.title,
        "date": resolved.date,
        "tags": list(resolved.tags),
        "excerpt": resolved.excerpt,
        "read_time": resolved.read_time,
        "ancestors": [{"title": a.title, "slug": a.slug} for a in resolved.ancestors],
        "sub_articles": [
            {"title": s.title, "slug": s.slug, "date": s.date} for s in resolved.sub_articles
        ],
        "headings": [{"level": h.level, "text": h.text, "id": h.id} for h in resolved.headings],
    }
    if include_content:
        result["content"] = resolved.content
    return result


# --- Core functions (testable without MCP context) ---


def journal_get_post(
    documents: Sequence[Document],
    *,
    slug: str,
    include_content: bool = True,
    include_tree: bool = False,
) -> dict[str, Any]:
    """Resolve a slug to a post, a virtual folder page, or not-found.

    Args:
        slug: Post slug, e.g. "systems/scheduler-notes".
        include_content: Include the markdown body.
        include_tree: Include the whole navigation tree.
    """
    try:
        payload = build_navigation(documents, slug)
    except InvalidSlugError as e:
        return {"error": str(e)}

    if payload.resolved.kind is ResolutionKind.NOT_FOUND:
        return {"error": f"Post '{slug}' not found.", "kind": ResolutionKind.NOT_FOUND.value}

    result = resolved_to_dict(payload.resolved, include_content=include_content)
    result["url"] = post_route(payload.resolved.slug)
    result["breadcrumbs"] = [{"label": b.label, "path": b.path} for b in payload.breadcrumbs]
    result["breadcrumbs_str"] = breadcrumbs_str(payload.breadcrumbs)
    if include_tree:
        result["tree"] = [_tree_node_dict(n) for n in payload.tree]
    return result


def journal_get_tree(documents: Sequence[Document]) -> dict[str, Any]:
    """Return the navigation tree of the whole journal."""
    tree = build_tree(documents)
    return {"tree": [_tree_node_dict(n) for n in tree], "document_count": len(documents)}


def journal_list_posts(documents: Sequence[Document], *, tag: str | None = None) -> dict[str, Any]:
    """List top-level posts, newest first, optionally filtered by tag."""
    home = build_home(documents, tag=tag)
    return {
        "posts": [_post_summary(d) for d in home.posts],
        "count": len(home.posts),
        "tags": list(home.tags),
    }


def journal_render_post(documents: Sequence[Document], *, slug: str) -> dict[str, Any]:
    """Render a real post to HTML."""
    try:
        payload = build_navigation(documents, slug)
    except InvalidSlugError as e:
        return {"error": str(e)}
    if payload.resolved.kind is not ResolutionKind.REAL:
        return {"error": f"Post '{slug}' has no document to render."}
    return {
        "slug": payload.resolved.slug,
        "title": payload.resolved.title,
        "html": render_markdown(payload.resolved.content),
    }


# --- MCP Server Setup ---


@dataclass
class ServerContext:
    """Shared resources for the MCP server lifetime."""

    source: FileSystemSource


@asynccontextmanager
async def server_lifespan(_server: FastMCP) -> AsyncIterator[ServerContext]:
    """Locate the content directory on startup."""
    content_dir = resolve_content_directory()
    if not content_dir.is_dir():
        logger.warning("Content directory not found: {}", content_dir)
    yield ServerContext(source=FileSystemSource(content_dir))


mcp_server = FastMCP(
    "techjournal",
    instructions="""\
A personal technical journal of markdown posts arranged in folders.

1. Use journal_list_posts_tool to see top-level posts, or journal_tree_tool for
   the full hierarchy.
2. Call journal_get_post_tool with a slug to read a post. Folder slugs without a
   post of their own return kind "virtual" and list their sub_articles.
3. Headings carry ids usable as "#id" anchors in post URLs.
""",
    lifespan=server_lifespan,
)


def _ctx(mcp_ctx: Context) -> ServerContext:
    return mcp_ctx.request_context.lifespan_context  # type: ignore[return-value]


def _documents(ctx: ServerContext) -> list[Document] | None:
    try:
        return load_documents(ctx.source)
    except FileNotFoundError:
        logger.warning("Content directory missing: {}", ctx.source.content_root)
        return None


def _missing_content(ctx: ServerContext) -> dict[str, Any]:
    return {"error": f"Content directory not found: {ctx.source.content_root}"}


# --- MCP Tool Wrappers ---


@mcp_server.tool()
async def journal_get_post_tool(
    ctx: Context,
    slug: str,
    include_content: bool = True,
    include_tree: bool = False,
) -> dict[str, Any]:
    """Read a journal post with breadcrumbs, headings and sub-articles.

    Args:
        slug: Post slug, e.g. "systems/scheduler-notes".
        include_content: Include the markdown body.
        include_tree: Include the whole navigation tree.
    """
    documents = _documents(_ctx(ctx))
    if documents is None:
        return _missing_content(_ctx(ctx))
    return journal_get_post(
        documents, slug=slug, include_content=include_content, include_tree=include_tree
    )


@mcp_server.tool()
async def journal_tree_tool(ctx: Context) -> dict[str, Any]:
    """Return the navigation tree of the journal."""
    documents = _documents(_ctx(ctx))
    if documents is None:
        return _missing_content(_ctx(ctx))
    return journal_get_tree(documents)


@mcp_server.tool()
async def journal_list_posts_tool(ctx: Context, tag: str | None = None) -> dict[str, Any]:
    """List top-level posts, newest first.

    Args:
        tag: Only list posts with this tag.
    """
    documents = _documents(_ctx(ctx))
    if documents is None:
        return _missing_content(_ctx(ctx))
    return journal_list_posts(documents, tag=tag)


@mcp_server.tool()
async def journal_render_post_tool(ctx: Context, slug: str) -> dict[str, Any]:
    """Render a post's markdown to HTML.

    Args:
        slug: Post slug.
    """
    documents = _documents(_ctx(ctx))
    if documents is None:
        return _missing_content(_ctx(ctx))
    return journal_render_post(documents, slug=slug)


def run_mcp_server() -> None:
    """Run the MCP server with stdio transport."""
    from techjournal.logging_config import configure_logging

    configure_logging(verbose=False)
    mcp_server.run(transport="stdio")
