"""Pytest configuration for svgbatch."""

from __future__ import annotations

import sys
import threading
from pathlib import Path

import pytest

from svgbatch.core.errors import RasterError

SIMPLE_SVG = (
    b'<svg xmlns="http://www.w3.org/2000/svg" width="10" height="20">'
    b'<rect width="10" height="20" fill="red"/></svg>'
)


def _ensure_repo_on_path() -> None:
    """Make the repository importable without an editable install."""
    repo_root = Path(__file__).resolve().parent.parent
    if repo_root.exists():
        path_str = str(repo_root)
        if path_str not in sys.path:
            sys.path.insert(0, path_str)


_ensure_repo_on_path()


class FakeRasterizer:
    """Records calls and returns ``PNG:<scale>:<source>`` bytes."""

    def __init__(self, fail_on: tuple[bytes, ...] = ()) -> None:
        self.fail_on = fail_on
        self.calls: list[tuple[bytes, int]] = []
        self._lock = threading.Lock()

    def __call__(self, source: bytes, scale: int) -> bytes:
        with self._lock:
            self.calls.append((source, scale))
        if source in self.fail_on:
            raise RasterError(f"cannot render {source!r}")
        return b"PNG:" + str(scale).encode() + b":" + source


@pytest.fixture
def fake_rasterizer() -> FakeRasterizer:
    return FakeRasterizer()


@pytest.fixture
def svg_dir(tmp_path: Path) -> Path:
    """Directory holding a.svg, b.svg and some non-sources."""
    root = tmp_path / "input"
    root.mkdir()
    (root / "a.svg").write_bytes(SIMPLE_SVG)
    (root / "b.svg").write_bytes(SIMPLE_SVG.replace(b"red", b"blue"))
    (root / "notes.txt").write_text("not an svg")
    (root / "upper.SVG").write_bytes(SIMPLE_SVG)
    (root / "nested.svg").mkdir()
    return root
