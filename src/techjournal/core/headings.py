"""Extract headings from a markdown body for in-page navigation."""

import re

from techjournal.models.node import Heading

# CommonMark fences: 3+ backticks or tildes, indented at most 3 spaces.
_FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")
_HEADING_RE = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.*)$")
# Optional closing sequence of an ATX heading: "## Title ##".
_CLOSING_HASHES_RE = re.compile(r"(?:^|[ \t]+)#+[ \t]*$")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def strip_fenced_code(body: str) -> str:
    """Remove fenced code blocks, fences included.

    A fence closes only on a bare line of the same character that is at least
    as long as the opener, so a "````" block may contain "```" lines. A
    backtick opener cannot have a backtick in its info string. An unclosed
    fence runs to the end of the body, as it renders.
    """
    kept: list[str] = []
    fence: str | None = None
    for line in body.splitlines():
        match = _FENCE_RE.match(line)
        if fence is not None:
            if (
                match
                and match.group(1)[0] == fence[0]
                and len(match.group(1)) >= len(fence)
                and not match.group(2).strip()
            ):
                fence = None
            continue
        if match and not (match.group(1)[0] == "`" and "`" in match.group(2)):
            fence = match.group(1)
            continue
        kept.append(line)
    return "\n".join(kept)


def anchor_id(text: str) -> str:
    """Anchor id of a heading.

    Lowercased, every run of characters outside [a-z0-9] collapsed to a single
    "-", leading and trailing "-" dropped. The renderer uses this same function
    for heading ids.
    """
    return _NON_ALNUM_RE.sub("-", text.lower()).strip("-")


def extract_headings(body: str) -> tuple[Heading, ...]:
    """Return ATX headings of ``body`` in document order.

    Identical headings are not deduplicated and share one id.
    """
    headings: list[Heading] = []
    for line in strip_fenced_code(body).splitlines():
        match = _HEADING_RE.match(line)
        if not match:
            continue
        text = _CLOSING_HASHES_RE.sub("", match.group(2).strip())
        if not text:
            continue
        headings.append(Heading(level=len(match.group(1)), text=text, id=anchor_id(text)))
    return tuple(headings)
