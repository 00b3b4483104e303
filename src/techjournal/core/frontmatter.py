"""Front matter boundary: split raw document text into metadata and body."""

from typing import Any

import frontmatter
import yaml
from loguru import logger


def parse_front_matter(raw_text: str) -> tuple[dict[str, Any], str]:
    """Parse YAML front matter using python-frontmatter.

    Args:
        raw_text: Full document text, optionally starting with a ``---`` block.

    Returns:
        Tuple of (metadata dict, body string). Malformed front matter, or
        metadata that is not a mapping, degrades to ``({}, raw_text)``.
    """
    try:
        post = frontmatter.loads(raw_text)
    except (yaml.YAMLError, ValueError) as exc:
        logger.warning("Failed to parse front matter: {}", exc)
        return {}, raw_text

    if not isinstance(post.metadata, dict):
        logger.warning("Front matter is not a mapping: {}", type(post.metadata).__name__)
        return {}, raw_text

    return dict(post.metadata), post.content
