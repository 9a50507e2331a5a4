"""
narrative_graph.logging - Centralized logging configuration.

Extractors log their tallies at DEBUG level; the CLI turns that on with --verbose.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("narrative_graph")


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the narrative_graph package.

    Args:
        verbose: If True, enable DEBUG level logging; otherwise WARNING level
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
    logger.setLevel(level)
