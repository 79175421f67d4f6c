"""Exception hierarchy for planning and dispatching render jobs."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .models import JobResult


class SvgBatchError(Exception):
    """Base class for all svgbatch errors."""


class NotFoundError(SvgBatchError):
    """Raised when the input root does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Path doesn't exist: {path}")


class ConfigParseError(SvgBatchError):
    """Raised when a declarative configuration file is malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration file {path}: {reason}")


class AmbiguousOutputError(SvgBatchError):
    """Raised when several (source, scale) pairs would target one output file."""

    def __init__(self, output: Path, pairs: Sequence[tuple[Path, int]]) -> None:
        self.output = output
        self.pairs = list(pairs)
        listing = "\n".join(f"\t{source} (scale {scale})" for source, scale in self.pairs)
        super().__init__(
            f"Attempted to write {len(self.pairs)} renders to single file {output}:\n"
            f"{listing}"
        )


class DirectoryCreationError(SvgBatchError):
    """Raised when a destination directory cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not create directory {path}: {reason}")


class RasterError(SvgBatchError):
    """Raised when the rasterizer rejects or fails to process a source."""


class JobIOError(SvgBatchError):
    """Raised when reading a source or writing a destination fails."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"I/O error on {path}: {reason}")


class DispatchError(SvgBatchError):
    """Raised when one or more render jobs failed."""

    def __init__(self, failures: Sequence[JobResult]) -> None:
        self.failures = list(failures)
        lines = [
            f"\t{result.job.source} -> {result.job.destination}: {result.error}"
            for result in self.failures
        ]
        super().__init__(
            f"{len(self.failures)} render job(s) failed:\n" + "\n".join(lines)
        )
