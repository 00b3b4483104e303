"""Markdown rendering sharing the engine's heading-id and wiki-link rules."""

import re

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.rules_inline import StateInline

from techjournal.config import post_route
from techjournal.core.headings import anchor_id
from techjournal.core.slugs import derive_slug

# [[Target]], [[Target|Label]], [[Target#Heading|Label]]
_WIKI_LINK_RE = re.compile(r"\[\[([^\[\]|\n]+?)(?:\|([^\[\]\n]+))?\]\]")


def wiki_link_href(target: str) -> str:
    """Route of a wiki link target such as "systems/Scheduler Notes#Run queue"."""
    page, _, heading = target.strip().partition("#")
    segments = [s.strip() for s in page.split("/") if s.strip()]
    if not segments:
        # [[#Heading]] links within the current page
        return "#" + anchor_id(heading)
    href = post_route(derive_slug(segments))
    if heading.strip():
        href += "#" + anchor_id(heading)
    return href


def _wiki_link_rule(state: StateInline, silent: bool) -> bool:
    if not state.src.startswith("[[", state.pos):
        return False
    match = _WIKI_LINK_RE.match(state.src, state.pos)
    if match is None or match.end() > state.posMax:
        return False
    if not silent:
        target = match.group(1)
        label = (match.group(2) or target).strip()
        token = state.push("link_open", "a", 1)
        token.attrSet("href", wiki_link_href(target))
        token = state.push("text", "", 0)
        token.content = label
        state.push("link_close", "a", -1)
    state.pos = match.end()
    return True


def _heading_ids_rule(state: StateCore) -> None:
    # Ids come from the raw heading source so they equal extract_headings() ids.
    tokens = state.tokens
    for idx, token in enumerate(tokens):
        if token.type != "heading_open" or idx + 1 >= len(tokens):
            continue
        inline = tokens[idx + 1]
        if inline.type == "inline":
            token.attrSet("id", anchor_id(inline.content))


def create_renderer() -> MarkdownIt:
    md = MarkdownIt("commonmark", {"html": True}).enable(["table", "strikethrough"])
    md.inline.ruler.before("link", "wiki_link", _wiki_link_rule)
    md.core.ruler.push("heading_ids", _heading_ids_rule)
    return md


_md = create_renderer()


def render_markdown(body: str) -> str:
    """Render a document body to HTML."""
    return _md.render(body)
