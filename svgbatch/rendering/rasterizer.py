"""SVG to PNG rasterization backed by CairoSVG."""

from __future__ import annotations

import cairosvg

from ..core.errors import RasterError


def render(source: bytes, scale: int = 1) -> bytes:
    """Rasterize SVG bytes to PNG bytes.

    The PNG has the SVG's intrinsic width and height multiplied by ``scale``.

    Args:
        source: SVG document
        scale: Positive integer scale factor

    Returns:
        Encoded PNG

    Raises:
        RasterError: If the document cannot be parsed or rendered
    """
    if scale < 1:
        raise RasterError(f"Scale must be a positive integer, got {scale}")
    try:
        png = cairosvg.svg2png(bytestring=source, scale=scale)
    except Exception as exc:
        raise RasterError(f"{type(exc).__name__}: {exc}") from exc
    if not png:
        raise RasterError("Rasterizer produced no output")
    return png
