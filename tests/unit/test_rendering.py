"""Tests for markdown rendering with heading ids and wiki links."""

import re

from techjournal.core.headings import extract_headings
from techjournal.core.rendering import render_markdown, wiki_link_href
from tests.unit.fakes import JOURNAL_SOURCE


def test_heading_ids_match_extracted_headings() -> None:
    body = "# Scheduler\n\n## Run queue\n\n### API & Design!\n"
    html = render_markdown(body)
    rendered_ids = re.findall(r'<h\d id="([^"]*)"', html)
    assert rendered_ids == [h.id for h in extract_headings(body)]


def test_heading_in_code_block_is_not_rendered_as_heading() -> None:
    html = render_markdown("```bash\n# not a heading\n```\n")
    assert "<h1" not in html
    assert "# not a heading" in html


def test_duplicate_headings_share_id() -> None:
    html = render_markdown("## Setup\n\n## Setup\n")
    assert html.count('<h2 id="setup">') == 2


def test_wiki_link_with_label() -> None:
    html = render_markdown("See [[systems/Scheduler Notes|the scheduler]].")
    assert '<a href="/post/systems/Scheduler-Notes">the scheduler</a>' in html


def test_wiki_link_without_label_shows_target() -> None:
    html = render_markdown("[[tools/git]]")
    assert '<a href="/post/tools/git">tools/git</a>' in html


def test_wiki_link_in_code_span_is_left_alone() -> None:
    html = render_markdown("`[[tools/git]]`")
    assert "<a" not in html
    assert "<code>[[tools/git]]</code>" in html


def test_regular_links_still_work() -> None:
    html = render_markdown("[docs](https://example.com)")
    assert '<a href="https://example.com">docs</a>' in html


def test_wiki_link_href_with_heading() -> None:
    assert wiki_link_href("systems/Scheduler Notes#Run queue") == (
        "/post/systems/Scheduler-Notes#run-queue"
    )
    assert wiki_link_href(" tools / git ") == "/post/tools/git"


def test_tables_are_enabled() -> None:
    html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n")
    assert "<table>" in html


def test_journal_post_renders() -> None:
    html = render_markdown(JOURNAL_SOURCE["tools/git.md"].split("---\n", 2)[2])
    assert html == '<h2 id="rebase">Rebase</h2>\n'


def test_same_page_wiki_link_keeps_route() -> None:
    assert wiki_link_href("#Run queue") == "#run-queue"
    html = render_markdown("[[#Run queue|below]]")
    assert '<a href="#run-queue">below</a>' in html


def test_toc_ids_match_rendered_ids_for_tilde_fence() -> None:
    body = "~~~\n# comment\n~~~\n## Real\n"
    rendered_ids = re.findall(r'<h\d id="([^"]*)"', render_markdown(body))
    assert rendered_ids == [h.id for h in extract_headings(body)] == ["real"]


def test_toc_ids_match_rendered_ids_for_nested_fences() -> None:
    body = "````md\n```\n# inner\n```\n````\n## After\n"
    rendered_ids = re.findall(r'<h\d id="([^"]*)"', render_markdown(body))
    assert rendered_ids == [h.id for h in extract_headings(body)] == ["after"]


def test_toc_ids_match_rendered_ids_for_closing_hashes() -> None:
    body = "   ## Setup ##\n"
    rendered_ids = re.findall(r'<h\d id="([^"]*)"', render_markdown(body))
    assert rendered_ids == [h.id for h in extract_headings(body)] == ["setup"]
