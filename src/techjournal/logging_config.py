"""Loguru setup shared by the CLI and the MCP server."""

import os
import sys

from loguru import logger

from techjournal.config import LOG_LEVEL_ENV


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Route loguru to stderr.

    ``verbose`` wins over ``quiet``; both are overridden by ``TECHJOURNAL_LOG_LEVEL``.
    Stdout stays free for command output and the MCP stdio transport.
    """
    logger.remove()
    level = "DEBUG" if verbose else "WARNING" if quiet else "INFO"
    level = os.environ.get(LOG_LEVEL_ENV, level).upper()
    logger.add(sys.stderr, level=level, format="{level.icon} {message}")
