"""svgbatch - Batch SVG to PNG renderer.

Plans one render job per (source, scale) pair and executes them on a
bounded thread pool.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
