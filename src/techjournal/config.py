"""Configuration constants for techjournal."""

import os
from pathlib import Path

# Environment variable overriding the content directory.
CONTENT_DIR_ENV: str = "TECHJOURNAL_CONTENT_DIR"

# Environment variable overriding the log level (e.g. "DEBUG").
LOG_LEVEL_ENV: str = "TECHJOURNAL_LOG_LEVEL"

# Directory with markdown posts. First directory which is found is used.
CONTENT_DIRECTORIES: list[Path] = [
    Path("content/posts"),
    Path("src/content/posts"),
    Path("~/.local/share/techjournal/posts").expanduser(),
]

# Routes of the site. Post routes may contain further "/" after the prefix.
HOME_ROUTE: str = "/"
POST_ROUTE_PREFIX: str = "/post/"

# Front matter defaults.
DEFAULT_TITLE: str = "Untitled"
DEFAULT_READ_TIME: str = "5 min read"


def resolve_content_directory() -> Path:
    """Return the content directory.

    The environment override wins; otherwise the first existing candidate is
    used, falling back to the first candidate so callers can report it.
    """
    override = os.environ.get(CONTENT_DIR_ENV)
    if override:
        return Path(override).expanduser()
    for candidate in CONTENT_DIRECTORIES:
        if candidate.is_dir():
            return candidate
    return CONTENT_DIRECTORIES[0]


def post_route(slug: str) -> str:
    """Build the addressable route of a document or virtual node."""
    return POST_ROUTE_PREFIX + slug
