"""Domain models for render planning, configuration and results."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    field_validator,
)

from .errors import DispatchError

DEFAULT_SCALES: tuple[int, ...] = (1,)


def _dedupe(scales: list[int]) -> list[int]:
    return list(dict.fromkeys(scales))


class RenderJob(BaseModel):
    """A single (source, destination, scale) unit of rendering work."""

    model_config = ConfigDict(frozen=True)

    source: Path = Field(..., description="Source SVG file")
    destination: Path = Field(..., description="Destination PNG file")
    scale: PositiveInt = Field(default=1, description="Scale factor")


class ConfigFile(BaseModel):
    """Contents of a declarative ``render.yaml`` file.

    Both fields are optional; unset fields fall through to the defaults
    during resolution.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, strict=True)

    scales: Optional[list[PositiveInt]] = Field(default=None, min_length=1)
    thread_count: Optional[PositiveInt] = Field(default=None, alias="threads")

    @field_validator("scales")
    @classmethod
    def _unique_scales(cls, value: Optional[list[int]]) -> Optional[list[int]]:
        return None if value is None else _dedupe(value)


class RenderConfig(BaseModel):
    """Resolved settings for one invocation."""

    model_config = ConfigDict(frozen=True)

    scales: list[PositiveInt] = Field(
        default_factory=lambda: list(DEFAULT_SCALES), min_length=1
    )
    thread_count: Optional[PositiveInt] = Field(
        default=None, description="Worker count; None means one per logical core"
    )

    @field_validator("scales")
    @classmethod
    def _unique_scales(cls, value: list[int]) -> list[int]:
        return _dedupe(value)


class DirectoryTarget(BaseModel):
    """Output is an existing directory; any number of jobs may write into it."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["directory"] = "directory"
    path: Path


class FileTarget(BaseModel):
    """Output is a single file path, existing or not; at most one job fits."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    path: Path


OutputTarget = Annotated[Union[DirectoryTarget, FileTarget], Field(discriminator="kind")]


class JobResult(BaseModel):
    """Outcome of one dispatched job."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    job: RenderJob
    error: Optional[Exception] = None
    skipped: bool = Field(
        default=False, description="Cancelled before running (fail-fast mode)"
    )

    @property
    def ok(self) -> bool:
        return self.error is None and not self.skipped


class RunReport(BaseModel):
    """Aggregated results of a dispatcher run."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    results: list[JobResult] = Field(default_factory=list)
    elapsed_ms: int = 0

    @property
    def rendered(self) -> list[JobResult]:
        return [result for result in self.results if result.ok]

    @property
    def failures(self) -> list[JobResult]:
        return [result for result in self.results if result.error is not None]

    @property
    def skipped(self) -> list[JobResult]:
        return [result for result in self.results if result.skipped]

    @property
    def ok(self) -> bool:
        return all(result.ok for result in self.results)

    def raise_for_failures(self) -> None:
        """Raise DispatchError listing every failed job, if any."""
        if self.failures:
            raise DispatchError(self.failures)
