"""Type definitions for map tiles and world-space geometry."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from .errors import MalformedLengthError, ScaleRangeError

# Every map item stores a fixed 128x128 grid of palette indices
TILE_SIZE = 128
TILE_PIXELS = TILE_SIZE * TILE_SIZE

MIN_SCALE = 0
MAX_SCALE = 4


class Dimension(IntEnum):
    """Dimensions a map item can be recorded in."""

    OVERWORLD = 0
    NETHER = -1
    END = 1

    @classmethod
    def from_value(cls, value: int) -> Union["Dimension", int]:
        """Convert a raw dimension id, keeping unknown ids as plain ints."""
        try:
            return cls(value)
        except ValueError:
            return value


@dataclass(frozen=True)
class Region:
    """Half-open axis-aligned rectangle in world coordinates.

    Covers ``left <= x < right`` and ``top <= z < bottom``. World z grows
    southward, which is also the image row direction.
    """

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def empty(self) -> bool:
        return self.left >= self.right or self.top >= self.bottom

    def translate(self, dx: int, dz: int) -> "Region":
        return Region(self.left + dx, self.top + dz, self.right + dx, self.bottom + dz)

    def union(self, other: "Region") -> "Region":
        """Smallest region containing both; an empty region is the identity."""
        if self.empty:
            return other
        if other.empty:
            return self
        return Region(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def intersect(self, other: "Region") -> "Region":
        """Overlap of both regions, or the empty region if they are disjoint."""
        result = Region(
            max(self.left, other.left),
            max(self.top, other.top),
            min(self.right, other.right),
            min(self.bottom, other.bottom),
        )
        if result.empty:
            return Region()
        return result

    def contains(self, x: int, z: int) -> bool:
        return self.left <= x < self.right and self.top <= z < self.bottom


@dataclass(frozen=True)
class MapTile:
    """One decoded map item: a 128x128 palette index grid placed in the world."""

    scale: int
    dimension: Union[Dimension, int]
    center: tuple[int, int]  # (x, z) in world coordinates
    indices: bytes  # row-major, TILE_PIXELS long
    source: Optional[str] = None

    def __post_init__(self):
        """Validate the index grid size and scale."""
        if len(self.indices) != TILE_PIXELS:
            raise MalformedLengthError("colors", len(self.indices), self.source)
        if not MIN_SCALE <= self.scale <= MAX_SCALE:
            raise ScaleRangeError("scale", self.scale, self.source)

    @property
    def width(self) -> int:
        """World units covered along each side."""
        return TILE_SIZE << self.scale

    @property
    def region(self) -> Region:
        """World-space square covered by this tile, centered on ``center``."""
        width = self.width
        cx, cz = self.center
        return Region(0, 0, width, width).translate(-(width // 2), -(width // 2)).translate(cx, cz)

    def index_at(self, x: int, z: int) -> int:
        """Palette index covering world coordinate ``(x, z)``.

        Raises:
            IndexError: If the coordinate lies outside the tile region
        """
        region = self.region
        if not region.contains(x, z):
            raise IndexError(f"({x}, {z}) is outside tile region {region}")
        col = (x - region.left) >> self.scale
        row = (z - region.top) >> self.scale
        return self.indices[col + row * TILE_SIZE]
