from pathlib import Path

import pytest

from svgbatch.core.errors import NotFoundError
from svgbatch.planning.discovery import discover, is_source, raster_name


def test_raster_name_replaces_or_appends_extension():
    assert raster_name(Path("example.svg")) == "example.png"
    assert raster_name(Path("noExtension")) == "noExtension.png"
    assert raster_name(Path("deeply/nested/image.svg")) == "image.png"
    assert raster_name(Path("icon.v2.svg")) == "icon.v2.png"


def test_is_source(svg_dir: Path):
    assert is_source(svg_dir / "a.svg")
    assert not is_source(svg_dir / "notes.txt")
    assert not is_source(svg_dir / "upper.SVG")
    assert not is_source(svg_dir / "nested.svg")
    assert not is_source(svg_dir / "doesnt_exist.svg")


def test_discover_directory_returns_immediate_svg_files(svg_dir: Path):
    (svg_dir / "nested.svg" / "deep.svg").write_text("<svg/>")

    assert sorted(discover(svg_dir)) == [svg_dir / "a.svg", svg_dir / "b.svg"]


def test_discover_single_file(svg_dir: Path):
    assert discover(svg_dir / "a.svg") == [svg_dir / "a.svg"]


def test_discover_non_source_file_is_empty(svg_dir: Path):
    assert discover(svg_dir / "notes.txt") == []


def test_discover_empty_directory(tmp_path: Path):
    assert discover(tmp_path) == []


def test_discover_missing_root_raises(tmp_path: Path):
    with pytest.raises(NotFoundError) as excinfo:
        discover(tmp_path / "doesnt_exist")
    assert excinfo.value.path == tmp_path / "doesnt_exist"
