from pathlib import Path
from typing import Optional, Union

import numpy as np
from nbtlib import Byte, ByteArray, Compound, File, Int

from mapstitch.types import TILE_PIXELS, Dimension, MapTile


def make_indices(fill: int = 0) -> bytes:
    return bytes([fill]) * TILE_PIXELS


def pattern_indices() -> bytes:
    # Every row and column gets a distinct, mostly opaque color
    grid = (np.arange(TILE_PIXELS) * 7 + np.arange(TILE_PIXELS) // 128) % 248 + 4
    return grid.astype(np.uint8).tobytes()


def make_tile(
    scale: int = 0,
    center: tuple[int, int] = (0, 0),
    indices: Optional[bytes] = None,
    dimension: Union[Dimension, int] = Dimension.OVERWORLD,
) -> MapTile:
    if indices is None:
        indices = make_indices(4)
    return MapTile(scale=scale, dimension=dimension, center=center, indices=indices)


def make_colors(indices: Union[bytes, list[int]]) -> ByteArray:
    unsigned = np.array(list(bytes(indices)), dtype=np.uint8)
    return ByteArray(unsigned.view(np.int8))


def make_data(
    scale: int = 0,
    dimension: int = 0,
    center: tuple[int, int] = (0, 0),
    indices: Optional[bytes] = None,
) -> Compound:
    if indices is None:
        indices = make_indices(4)
    return Compound(
        {
            "scale": Byte(scale),
            "dimension": Int(dimension),
            "xCenter": Int(center[0]),
            "zCenter": Int(center[1]),
            "colors": make_colors(indices),
            "trackingPosition": Byte(1),
            "width": Int(128),
            "height": Int(128),
        }
    )


def make_tree(**kwargs) -> Compound:
    return Compound({"data": make_data(**kwargs), "DataVersion": Int(1343)})


def write_map_file(path: Path, tree: Compound) -> Path:
    File(tree, gzipped=True).save(str(path))
    return path
