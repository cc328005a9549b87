"""Extraction of map tiles from decoded NBT tag trees."""

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

import numpy as np
from nbtlib import Byte, ByteArray, Compound, Int

from .errors import (
    ExtractionError,
    MalformedLengthError,
    MapStitchError,
    ScaleRangeError,
    TypeMismatchError,
)
from .types import MAX_SCALE, MIN_SCALE, TILE_PIXELS, Dimension, MapTile

logger = logging.getLogger(__name__)


def _tag_name(value) -> Optional[str]:
    if value is None:
        return None
    return type(value).__name__


def _expect(compound: Mapping, key: str, tag_type: type, field: str, source: Optional[str]):
    """Fetch ``compound[key]`` and check it is a ``tag_type`` tag."""
    value = compound.get(key)
    if not isinstance(value, tag_type):
        raise TypeMismatchError(field, tag_type.__name__, _tag_name(value), source)
    return value


def extract_tile(tree: Mapping, source: Optional[str] = None) -> MapTile:
    """Build a map tile from the root compound of a map item file.

    Expected layout::

        {
            "data": {
                "scale": Byte,
                "dimension": Int,
                "xCenter": Int,
                "zCenter": Int,
                "colors": ByteArray[16384],
                ...
            }
        }

    Args:
        tree: Decoded root compound
        source: Identifier of the originating file, used in error messages

    Returns:
        The extracted tile

    Raises:
        TypeMismatchError: If a tag is missing or has the wrong type
        MalformedLengthError: If ``colors`` is not exactly 16384 bytes
        ScaleRangeError: If ``scale`` is outside 0-4
    """
    if not isinstance(tree, Compound):
        raise TypeMismatchError("root", Compound.__name__, _tag_name(tree), source)

    data = _expect(tree, "data", Compound, "data", source)
    scale = _expect(data, "scale", Byte, "data.scale", source)
    dimension = _expect(data, "dimension", Int, "data.dimension", source)
    x_center = _expect(data, "xCenter", Int, "data.xCenter", source)
    z_center = _expect(data, "zCenter", Int, "data.zCenter", source)
    colors = _expect(data, "colors", ByteArray, "data.colors", source)

    if len(colors) != TILE_PIXELS:
        raise MalformedLengthError("data.colors", len(colors), source)

    if not MIN_SCALE <= int(scale) <= MAX_SCALE:
        raise ScaleRangeError("data.scale", int(scale), source)

    # NBT bytes are signed; palette indices are not
    indices = np.asarray(colors, dtype=np.int8).view(np.uint8).tobytes()

    return MapTile(
        scale=int(scale),
        dimension=Dimension.from_value(int(dimension)),
        center=(int(x_center), int(z_center)),
        indices=indices,
        source=source,
    )


@dataclass
class ExtractionResult:
    """Outcome of reading one map: either a tile or the error that stopped it."""

    source: Optional[str]
    tile: Optional[MapTile] = None
    error: Optional[MapStitchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def extract_all(trees: Iterable[tuple[Optional[str], Mapping]]) -> list[ExtractionResult]:
    """Extract tiles from ``(source, tree)`` pairs without stopping on failures.

    Args:
        trees: Pairs of file identifier and decoded root compound

    Returns:
        One result per input, in input order
    """
    results: list[ExtractionResult] = []
    for source, tree in trees:
        try:
            tile = extract_tile(tree, source)
        except ExtractionError as e:
            logger.debug(f"Extraction failed: {e}")
            results.append(ExtractionResult(source=source, error=e))
            continue
        results.append(ExtractionResult(source=source, tile=tile))

    failed = sum(1 for result in results if not result.ok)
    logger.info(f"Extracted {len(results) - failed} tiles ({failed} failed)")
    return results
