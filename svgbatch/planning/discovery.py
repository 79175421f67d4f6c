"""Source discovery and output file naming."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import NotFoundError

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".svg"
RASTER_SUFFIX = ".png"


def is_source(path: Path) -> bool:
    """Return True when ``path`` is a file with the exact ``.svg`` suffix."""
    return path.is_file() and path.suffix == SOURCE_SUFFIX


def discover(root: Path) -> list[Path]:
    """Find candidate SVG files at ``root``.

    A source file yields itself; a directory yields its immediate SVG
    children in directory-listing order (not sorted). Anything else yields
    nothing.

    Args:
        root: File or directory to search

    Returns:
        Discovered source paths

    Raises:
        NotFoundError: If ``root`` does not exist
    """
    if not root.exists():
        raise NotFoundError(root)

    if is_source(root):
        return [root]

    if root.is_dir():
        sources = [child for child in root.iterdir() if is_source(child)]
        logger.debug(f"Discovered {len(sources)} SVG(s) in {root}")
        return sources

    return []


def raster_name(source: Path) -> str:
    """File name of the raster output for ``source``.

    The source suffix is replaced with ``.png``; a suffix-less name gets
    ``.png`` appended.
    """
    return Path(source.name).with_suffix(RASTER_SUFFIX).name
