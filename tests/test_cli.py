from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from svgbatch.cli import app
from svgbatch.cli.parsers import parse_scales
from svgbatch.rendering import engine
from tests.conftest import FakeRasterizer

runner = CliRunner()


@pytest.fixture(autouse=True)
def fake_default_rasterizer(monkeypatch) -> FakeRasterizer:
    rasterize = FakeRasterizer(fail_on=(b"broken",))
    monkeypatch.setattr(engine, "default_rasterizer", lambda: rasterize)
    return rasterize


def test_parse_scales():
    assert parse_scales([]) == []
    assert parse_scales(["1,2", "4"]) == [1, 2, 4]
    assert parse_scales([" 3 , 5 "]) == [3, 5]


@pytest.mark.parametrize("value", ["0", "x", "1,-2"])
def test_parse_scales_rejects_invalid(value):
    with pytest.raises(typer.BadParameter):
        parse_scales([value])


def test_render_directory(svg_dir: Path, tmp_path: Path):
    out = tmp_path / "out"
    out.mkdir()

    result = runner.invoke(app, ["-i", str(svg_dir), "-o", str(out), "-s", "1,2", "-t", "2"])

    assert result.exit_code == 0, result.output
    assert sorted(p.relative_to(out).as_posix() for p in out.rglob("*.png")) == [
        "2.0x/a.png",
        "2.0x/b.png",
        "a.png",
        "b.png",
    ]


def test_render_uses_config_file_scales(svg_dir: Path, tmp_path: Path):
    (svg_dir / "render.yaml").write_text("scales: [1, 3]\n")
    out = tmp_path / "out"
    out.mkdir()

    result = runner.invoke(app, ["--input", str(svg_dir), "--output", str(out)])

    assert result.exit_code == 0, result.output
    assert (out / "3.0x" / "a.png").exists()


def test_explicit_scale_overrides_config_file(svg_dir: Path, tmp_path: Path):
    (svg_dir / "render.yaml").write_text("scales: [1, 3]\n")
    out = tmp_path / "out"
    out.mkdir()

    result = runner.invoke(app, ["-i", str(svg_dir), "-o", str(out), "-s", "1"])

    assert result.exit_code == 0, result.output
    assert not (out / "3.0x").exists()


def test_render_single_file(svg_dir: Path, tmp_path: Path):
    output = tmp_path / "single.png"

    result = runner.invoke(app, ["-i", str(svg_dir / "a.svg"), "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert output.read_bytes().startswith(b"PNG:1:")


def test_missing_input_exits_non_zero(tmp_path: Path):
    result = runner.invoke(app, ["-i", str(tmp_path / "nope"), "-o", str(tmp_path)])

    assert result.exit_code == 1


def test_ambiguous_output_exits_non_zero(svg_dir: Path, tmp_path: Path):
    output = tmp_path / "single.png"

    result = runner.invoke(app, ["-i", str(svg_dir), "-o", str(output)])

    assert result.exit_code == 1
    assert not output.exists()


def test_malformed_config_exits_non_zero(svg_dir: Path, tmp_path: Path):
    (svg_dir / "render.yaml").write_text("scales: [1, 2\n")

    result = runner.invoke(app, ["-i", str(svg_dir), "-o", str(tmp_path)])

    assert result.exit_code == 1


def test_job_failure_exits_non_zero_after_rendering_others(svg_dir: Path, tmp_path: Path):
    (svg_dir / "c.svg").write_bytes(b"broken")
    out = tmp_path / "out"
    out.mkdir()

    result = runner.invoke(app, ["-i", str(svg_dir), "-o", str(out)])

    assert result.exit_code == 1
    assert (out / "a.png").exists()
    assert (out / "b.png").exists()
    assert not (out / "c.png").exists()


def test_invalid_scale_is_usage_error(svg_dir: Path, tmp_path: Path):
    result = runner.invoke(app, ["-i", str(svg_dir), "-o", str(tmp_path), "-s", "0"])

    assert result.exit_code == 2


def test_invalid_thread_count_is_usage_error(svg_dir: Path, tmp_path: Path):
    result = runner.invoke(app, ["-i", str(svg_dir), "-o", str(tmp_path), "-t", "0"])

    assert result.exit_code == 2
