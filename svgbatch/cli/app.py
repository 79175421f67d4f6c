"""Main CLI application."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..config import loader
from ..core.errors import SvgBatchError
from ..planning import planner
from ..rendering import engine
from .parsers import parse_scales

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="svgbatch",
    help="Batch-render SVG files to PNG at one or more scales.",
)


@app.command()
def render(
    input_path: Annotated[
        Path,
        typer.Option(
            "--input",
            "-i",
            help="SVG file, or directory whose immediate *.svg children are rendered.",
            metavar="PATH",
        ),
    ],
    output_path: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Existing directory, or a single PNG file path.",
            metavar="PATH",
        ),
    ],
    scales: Annotated[
        list[str],
        typer.Option(
            "--scale",
            "-s",
            help="Scale factor(s), comma-separated or repeated (default: from render.yaml, else 1).",
            metavar="N[,N...]",
        ),
    ] = [],
    threads: Annotated[
        Optional[int],
        typer.Option(
            "--threads",
            "-t",
            min=1,
            help="Worker threads (default: from render.yaml, else one per core).",
        ),
    ] = None,
    fail_fast: Annotated[
        bool,
        typer.Option(
            "--fail-fast",
            help="Stop scheduling new jobs after the first failure.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render SVG files to PNG."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    start = time.monotonic()
    requested_scales = parse_scales(scales)

    try:
        config = loader.resolve_config(
            input_path, scales=requested_scales or None, thread_count=threads
        )
        jobs = planner.build_plan(input_path, output_path, config.scales)

        dispatcher = engine.Dispatcher(
            thread_count=config.thread_count, fail_fast=fail_fast
        )
        report = dispatcher.run(jobs)
        if report.skipped:
            logger.warning(f"Skipped {len(report.skipped)} job(s) after failure")
        report.raise_for_failures()
    except SvgBatchError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc

    logger.info(
        f"Done - rendered {len(report.rendered)} PNGs to: {output_path.resolve()}\n"
        f"(Time taken: {int((time.monotonic() - start) * 1000)}ms)"
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
