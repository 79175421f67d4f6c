"""Configuration file discovery and merging."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import yaml
from pydantic import ValidationError

from ..core.errors import ConfigParseError
from ..core.models import DEFAULT_SCALES, ConfigFile, RenderConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "render.yaml"


def find_config_file(input_root: Path) -> Optional[Path]:
    """Locate ``render.yaml`` at or directly under ``input_root``.

    Args:
        input_root: Input file or directory

    Returns:
        Config file path, or None if there is none
    """
    if input_root.is_file():
        return input_root if input_root.name == CONFIG_FILENAME else None
    if input_root.is_dir():
        candidate = input_root / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def load_config_file(path: Path) -> ConfigFile:
    """Parse and validate a declarative configuration file.

    Args:
        path: Path to a ``render.yaml`` file

    Returns:
        Validated file contents

    Raises:
        ConfigParseError: If the file cannot be read, is not YAML, or does
            not match the expected schema
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigParseError(path, str(exc)) from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigParseError(path, str(exc)) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigParseError(
            path, f"expected a mapping at top level, got {type(data).__name__}"
        )

    try:
        return ConfigFile.model_validate(data)
    except ValidationError as exc:
        raise ConfigParseError(path, _format_validation_error(exc)) from exc


def resolve_config(
    input_root: Path,
    scales: Optional[Sequence[int]] = None,
    thread_count: Optional[int] = None,
) -> RenderConfig:
    """Merge explicit settings with a discovered ``render.yaml``.

    Each field is merged independently: an explicit value wins, then the
    file's value, then the default.

    Args:
        input_root: Input file or directory searched for ``render.yaml``
        scales: Explicit scales, or None/empty to defer
        thread_count: Explicit worker count, or None to defer

    Returns:
        Resolved configuration

    Raises:
        ConfigParseError: If a config file exists but is malformed
    """
    file_config = ConfigFile()
    config_path = find_config_file(input_root)
    if config_path is not None:
        logger.debug(f"Loading configuration from {config_path}")
        file_config = load_config_file(config_path)

    resolved_scales = (
        list(scales) if scales else file_config.scales or list(DEFAULT_SCALES)
    )
    resolved_threads = (
        thread_count if thread_count is not None else file_config.thread_count
    )

    config = RenderConfig(scales=resolved_scales, thread_count=resolved_threads)
    logger.debug(f"Resolved config: scales={config.scales} threads={config.thread_count}")
    return config
