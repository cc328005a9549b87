import logging
from pathlib import Path

import pytest
from click.testing import CliRunner
from PIL import Image

from mapstitch.main import render
from mapstitch.palette import PALETTE
from tests.utils import make_indices, make_tree, write_map_file


def write_maps(directory: Path) -> None:
    write_map_file(directory / "map_0.dat", make_tree(scale=1, center=(0, 0), indices=make_indices(6)))
    write_map_file(directory / "map_1.dat", make_tree(scale=0, center=(0, 0), indices=make_indices(10)))
    write_map_file(directory / "map_2.dat", make_tree(scale=0, dimension=-1, center=(5000, 5000)))


def test_render_directory(tmp_path: Path) -> None:
    maps = tmp_path / "data"
    maps.mkdir()
    write_maps(maps)
    output = tmp_path / "out" / "world.png"

    result = CliRunner().invoke(render, [str(maps), "-o", str(output)])
    assert result.exit_code == 0, result.output
    assert "Read 3 map files: 2 overworld, 1 other dimensions, 0 skipped as invalid" in result.output

    with Image.open(output) as image:
        assert image.mode == "RGBA"
        # The nether map is ignored, so the canvas is just the scale 1 map
        assert image.size == (256, 256)
        assert image.getpixel((0, 0)) == PALETTE[6]
        assert image.getpixel((128, 128)) == PALETTE[10]


def test_render_upscale(tmp_path: Path) -> None:
    path = write_map_file(tmp_path / "map_0.dat", make_tree(scale=0))
    output = tmp_path / "big.png"
    result = CliRunner().invoke(render, [str(path), "-o", str(output), "--upscale", "2"])
    assert result.exit_code == 0, result.output
    with Image.open(output) as image:
        assert image.size == (256, 256)


def test_render_debug_outlines(tmp_path: Path) -> None:
    path = write_map_file(tmp_path / "map_0.dat", make_tree(scale=0, indices=make_indices(0)))
    output = tmp_path / "outlined.png"
    result = CliRunner().invoke(render, [str(path), "-o", str(output), "--debug-outlines"])
    assert result.exit_code == 0, result.output
    with Image.open(output) as image:
        assert image.getpixel((0, 0)) == (255, 0, 0, 255)
        assert image.getpixel((10, 10)) == (0, 0, 0, 0)


def test_render_skips_invalid_files(tmp_path: Path) -> None:
    write_maps(tmp_path)
    (tmp_path / "notes.txt").write_text("not a map")
    output = tmp_path / "out.png"

    result = CliRunner().invoke(render, [str(tmp_path), "-o", str(output)])
    assert result.exit_code == 0, result.output
    assert "Read 4 map files: 2 overworld, 1 other dimensions, 1 skipped as invalid" in result.output
    assert output.exists()


def test_render_strict_stops_on_invalid_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    write_maps(tmp_path)
    (tmp_path / "notes.txt").write_text("not a map")
    output = tmp_path / "out.png"

    with caplog.at_level(logging.DEBUG):
        result = CliRunner().invoke(render, [str(tmp_path), "-o", str(output), "--strict"])
    assert result.exit_code == 1
    errors = [record for record in caplog.records if record.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert "notes.txt" in errors[0].getMessage()
    assert "notes.txt" in result.output
    assert not output.exists()


def test_render_without_overworld_maps(tmp_path: Path) -> None:
    path = write_map_file(tmp_path / "map_0.dat", make_tree(dimension=1))
    output = tmp_path / "out.png"
    result = CliRunner().invoke(render, [str(path), "-o", str(output)])
    assert result.exit_code == 1
    assert "no overworld maps" in result.output
    assert not output.exists()


def test_render_requires_paths() -> None:
    result = CliRunner().invoke(render, [])
    assert result.exit_code == 2


def test_render_missing_path(tmp_path: Path) -> None:
    result = CliRunner().invoke(render, [str(tmp_path / "missing")])
    assert result.exit_code == 2
