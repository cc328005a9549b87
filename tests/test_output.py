from pathlib import Path

import pytest
from PIL import Image

from mapstitch.config import OutputConfig
from mapstitch.errors import OutputError
from mapstitch.palette import PALETTE
from mapstitch.render.output import OutputWriter
from tests.utils import make_indices, make_tile, pattern_indices


def make_writer(path: Path) -> OutputWriter:
    return OutputWriter(output_config=OutputConfig(output_path=str(path)))


def test_save_composite_writes_rgba_png(tmp_path: Path) -> None:
    indices = bytearray(pattern_indices())
    indices[0] = 0
    tile = make_tile(scale=0, center=(0, 0), indices=bytes(indices))
    path = tmp_path / "maps" / "world.png"

    saved = make_writer(path).save_composite([tile])
    assert saved == path

    with Image.open(path) as image:
        assert image.format == "PNG"
        assert image.mode == "RGBA"
        assert image.size == (128, 128)
        assert image.getpixel((0, 0)) == (0, 0, 0, 0)
        assert image.getpixel((1, 0)) == PALETTE[indices[1]]


def test_save_composite_without_tiles(tmp_path: Path) -> None:
    path = tmp_path / "empty.png"
    with pytest.raises(OutputError) as exc_info:
        make_writer(path).save_composite([])
    assert "empty" in str(exc_info.value)
    assert not path.exists()


def test_save_to_directory_path(tmp_path: Path) -> None:
    target = tmp_path / "taken"
    target.mkdir()
    with pytest.raises(OutputError) as exc_info:
        make_writer(target).save_composite([make_tile(indices=make_indices(6))])
    assert str(target) in str(exc_info.value)


def test_save_image_rejects_empty_image(tmp_path: Path) -> None:
    with pytest.raises(OutputError):
        make_writer(tmp_path / "out.png").save_image(Image.new("RGBA", (0, 0)))
