"""CLI argument parsers and validators."""

from __future__ import annotations

import typer


def parse_scales(values: list[str]) -> list[int]:
    """Parse repeatable, optionally comma-separated scale values.

    ``["1,2", "4"]`` becomes ``[1, 2, 4]``.
    """
    scales: list[int] = []
    for value in values:
        for item in value.split(","):
            item = item.strip()
            if not item:
                continue
            try:
                scale = int(item)
            except ValueError as e:
                raise typer.BadParameter(f"Invalid scale: {item!r}") from e
            if scale < 1:
                raise typer.BadParameter(f"Scale must be a positive integer, got: {scale}")
            scales.append(scale)
    return scales
