"""Slug derivation and comparison.

Every slug in the engine (document slugs, folder slugs, ancestor slugs) goes
through ``derive_slug``. Slugs preserve case, but two slugs naming the same
document compare case-insensitively.
"""

from collections.abc import Sequence


class InvalidSlugError(ValueError):
    """A requested slug that cannot name any document or folder."""


def derive_slug(path: Sequence[str]) -> str:
    """Join path segments with "/" and replace spaces with "-"."""
    return "/".join(path).replace(" ", "-")


def split_slug(slug: str) -> list[str]:
    return slug.split("/")


def same_slug(a: str, b: str) -> bool:
    return a.lower() == b.lower()


def is_descendant(slug: str, ancestor: str) -> bool:
    """True if ``slug`` lies strictly below ``ancestor``.

    Requires a "/" boundary after the prefix: "foo-bar" is not below "foo".
    """
    return slug.lower().startswith(ancestor.lower() + "/")


def is_immediate_child(slug: str, parent: str) -> bool:
    """True if ``slug`` is exactly one path segment below ``parent``."""
    if not is_descendant(slug, parent):
        return False
    return "/" not in slug[len(parent) + 1 :]


def normalize_requested_slug(raw: str) -> str:
    """Validate a slug taken from a route.

    Surrounding whitespace and slashes are dropped, so "/a/b/" and "a/b" are
    the same request.

    Raises:
        InvalidSlugError: If the slug is empty or has an empty segment ("a//b").
    """
    slug = raw.strip().strip("/")
    if not slug:
        msg = f"Empty slug requested: {raw!r}"
        raise InvalidSlugError(msg)
    if "" in split_slug(slug):
        msg = f"Slug has an empty path segment: {raw!r}"
        raise InvalidSlugError(msg)
    return slug
