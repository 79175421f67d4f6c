"""Concurrent render job dispatch."""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..core.errors import (
    DirectoryCreationError,
    JobIOError,
    RasterError,
    SvgBatchError,
)
from ..core.models import JobResult, RenderJob, RunReport
from .io import atomic_write_bytes, ensure_parent

logger = logging.getLogger(__name__)

Rasterize = Callable[[bytes, int], bytes]


def default_rasterizer() -> Rasterize:
    """Return the CairoSVG-backed rasterizer."""
    from .rasterizer import render

    return render


def ensure_directories(jobs: Sequence[RenderJob]) -> None:
    """Create missing parent directories for every job destination.

    Runs sequentially and stops at the first failure.

    Raises:
        DirectoryCreationError: If a directory cannot be created
    """
    for job in jobs:
        if job.destination.exists():
            continue
        try:
            ensure_parent(job.destination)
        except OSError as exc:
            raise DirectoryCreationError(job.destination.parent, str(exc)) from exc


def render_job(job: RenderJob, rasterize: Rasterize) -> Path:
    """Render a single job from its source file to its destination file.

    Args:
        job: Job to execute
        rasterize: Function turning SVG bytes and a scale into PNG bytes

    Returns:
        Output file path

    Raises:
        JobIOError: If the source cannot be read or the output written
        RasterError: If rasterization fails
    """
    logger.debug(f"Rendering {job.source} at {job.scale}x")

    try:
        svg_bytes = job.source.read_bytes()
    except OSError as exc:
        raise JobIOError(job.source, str(exc)) from exc

    png_bytes = rasterize(svg_bytes, job.scale)

    try:
        atomic_write_bytes(job.destination, png_bytes)
    except OSError as exc:
        raise JobIOError(job.destination, str(exc)) from exc

    logger.debug(f"Rendered {job.source} → {job.destination}")
    return job.destination


class Dispatcher:
    """Runs render jobs on a bounded thread pool.

    By default every job runs to completion and all failures are collected.
    With ``fail_fast`` the first failure cancels jobs that have not started.
    """

    def __init__(
        self,
        rasterize: Optional[Rasterize] = None,
        thread_count: Optional[int] = None,
        fail_fast: bool = False,
    ) -> None:
        if thread_count is not None and thread_count < 1:
            raise ValueError(f"thread_count must be positive, got {thread_count}")
        self.rasterize = rasterize or default_rasterizer()
        self.thread_count = thread_count or os.cpu_count() or 1
        self.fail_fast = fail_fast

    def _execute(self, job: RenderJob) -> JobResult:
        try:
            render_job(job, self.rasterize)
        except SvgBatchError as exc:
            logger.error(f"Failed to render {job.source}: {exc}")
            return JobResult(job=job, error=exc)
        except Exception as exc:
            # Third-party rasterizers may raise anything.
            logger.error(f"Failed to render {job.source}: {exc}")
            return JobResult(job=job, error=RasterError(str(exc)))
        return JobResult(job=job)

    def run(self, jobs: Sequence[RenderJob]) -> RunReport:
        """Create destination directories, then render all jobs concurrently.

        Args:
            jobs: Planned render jobs

        Returns:
            Report with one result per job, in plan order

        Raises:
            DirectoryCreationError: If the directory pre-pass fails; no job
                is rendered in that case
        """
        start = time.monotonic()
        ensure_directories(jobs)

        logger.info(f"Rendering {len(jobs)} job(s) on {self.thread_count} thread(s)")

        results: dict[int, JobResult] = {}
        with ThreadPoolExecutor(max_workers=self.thread_count) as executor:
            futures: dict[Future[JobResult], int] = {
                executor.submit(self._execute, job): index
                for index, job in enumerate(jobs)
            }
            for future in as_completed(futures):
                if future.cancelled():
                    continue
                result = future.result()
                results[futures[future]] = result
                if self.fail_fast and result.error is not None:
                    for other, index in futures.items():
                        if other.cancel():
                            results[index] = JobResult(job=jobs[index], skipped=True)

        report = RunReport(
            results=[results[index] for index in range(len(jobs))],
            elapsed_ms=int((time.monotonic() - start) * 1000),
        )
        logger.debug(
            f"Completed {len(report.rendered)} job(s), "
            f"{len(report.failures)} failed, {len(report.skipped)} skipped"
        )
        return report
