"""Stitch Minecraft map items into a single world image."""

from .errors import (
    ExtractionError,
    LoadError,
    MalformedLengthError,
    MapStitchError,
    OutputError,
    ScaleRangeError,
    TypeMismatchError,
)
from .extract import ExtractionResult, extract_all, extract_tile
from .palette import PALETTE
from .render.compositor import Canvas, Compositor, composite
from .types import Dimension, MapTile, Region

__all__ = [
    "Canvas",
    "Compositor",
    "Dimension",
    "ExtractionError",
    "ExtractionResult",
    "LoadError",
    "MalformedLengthError",
    "MapStitchError",
    "MapTile",
    "OutputError",
    "PALETTE",
    "Region",
    "ScaleRangeError",
    "TypeMismatchError",
    "composite",
    "extract_all",
    "extract_tile",
]
