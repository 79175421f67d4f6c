"""Render job planning.

Turns discovered sources, requested scales and an output path into an
ordered list of :class:`RenderJob`. The output path is classified once as a
directory or a single file; a single file accepts at most one job.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from ..core.errors import AmbiguousOutputError
from ..core.models import DirectoryTarget, FileTarget, OutputTarget, RenderJob
from .discovery import discover, raster_name

logger = logging.getLogger(__name__)


def scale_dir_name(scale: int) -> str:
    """Subdirectory name for a non-identity scale, e.g. ``2.0x``."""
    return f"{scale}.0x"


def classify_target(output: Path) -> OutputTarget:
    """Classify the output path as an existing directory or a file path."""
    if output.is_dir():
        return DirectoryTarget(path=output)
    return FileTarget(path=output)


def scaled_destination(destination: Path, scale: int) -> Path:
    """Relocate ``destination`` into a ``{scale}.0x`` sibling directory.

    Scale 1 is returned unchanged.
    """
    if scale == 1:
        return destination
    return destination.parent / scale_dir_name(scale) / destination.name


def _pairs(sources: Iterable[Path], scales: Sequence[int]) -> list[tuple[Path, int]]:
    # Source-major; scale varies fastest.
    return [(source, scale) for source in sources for scale in scales]


def plan_jobs(
    sources: Sequence[Path], scales: Sequence[int], target: OutputTarget
) -> list[RenderJob]:
    """Plan one job per (source, scale) pair.

    Args:
        sources: Source SVG paths
        scales: Positive integer scale factors
        target: Classified output target

    Returns:
        Ordered render jobs

    Raises:
        AmbiguousOutputError: If more than one pair targets a single file
    """
    pairs = _pairs(sources, scales)

    if isinstance(target, DirectoryTarget):
        return [
            RenderJob(
                source=source,
                destination=scaled_destination(
                    target.path / raster_name(source), scale
                ),
                scale=scale,
            )
            for source, scale in pairs
        ]

    if not pairs:
        return []
    if len(pairs) > 1:
        raise AmbiguousOutputError(target.path, pairs)

    source, scale = pairs[0]
    return [
        RenderJob(
            source=source,
            destination=scaled_destination(target.path, scale),
            scale=scale,
        )
    ]


def build_plan(input_root: Path, output: Path, scales: Sequence[int]) -> list[RenderJob]:
    """Discover sources under ``input_root`` and plan jobs against ``output``.

    Sources are sorted so that the plan is reproducible across runs.
    """
    sources = sorted(discover(input_root))
    target = classify_target(output)

    if isinstance(target, FileTarget) and input_root.is_dir():
        logger.warning(
            "Attempting to write directory to single file:\n"
            f"\tinput directory: {input_root}\n"
            f"\toutput file: {output}"
        )

    jobs = plan_jobs(sources, scales, target)
    logger.debug(
        f"Planned {len(jobs)} job(s) from {len(sources)} source(s) x {len(scales)} scale(s)"
    )
    return jobs
