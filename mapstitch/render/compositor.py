"""Map compositor for assembling tiles into one world-aligned image."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import numpy as np
from PIL import Image, ImageDraw

from ..config import RenderConfig
from ..palette import render_indices
from ..types import MAX_SCALE, MIN_SCALE, TILE_SIZE, MapTile, Region

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Canvas:
    """RGBA pixel buffer covering a world-space region.

    ``pixels[row, col]`` holds world coordinate
    ``(region.left + col, region.top + row)``.
    """

    region: Region
    pixels: np.ndarray  # (height, width, 4) uint8

    @classmethod
    def allocate(cls, region: Region) -> "Canvas":
        """Create a fully transparent canvas over ``region``."""
        if region.empty:
            region = Region()
        return cls(region, np.zeros((region.height, region.width, 4), dtype=np.uint8))

    @property
    def size(self) -> tuple[int, int]:
        return (self.region.width, self.region.height)

    @property
    def empty(self) -> bool:
        return self.region.empty

    def pixel(self, x: int, z: int) -> tuple[int, int, int, int]:
        """RGBA value at world coordinate ``(x, z)``."""
        if not self.region.contains(x, z):
            raise IndexError(f"({x}, {z}) is outside canvas region {self.region}")
        r, g, b, a = self.pixels[z - self.region.top, x - self.region.left]
        return (int(r), int(g), int(b), int(a))

    def to_image(self) -> Image.Image:
        """Convert to a Pillow RGBA image."""
        if self.empty:
            return Image.new("RGBA", (0, 0))
        return Image.fromarray(self.pixels)


def render_tile(tile: MapTile) -> np.ndarray:
    """Render a tile through the palette at world resolution.

    Each stored index is expanded to a ``1 << scale`` square, giving an array
    of shape ``(tile.width, tile.width, 4)``.
    """
    grid = np.frombuffer(tile.indices, dtype=np.uint8).reshape(TILE_SIZE, TILE_SIZE)
    pixels = render_indices(grid)
    factor = 1 << tile.scale
    if factor > 1:
        pixels = np.repeat(np.repeat(pixels, factor, axis=0), factor, axis=1)
    return pixels


def draw_tile(canvas: Canvas, tile: MapTile):
    """Overwrite the canvas pixels covered by ``tile`` with its colors.

    Pixels are replaced, not blended, so transparent indices clear whatever
    was drawn underneath.
    """
    tile_region = tile.region
    overlap = canvas.region.intersect(tile_region)
    if overlap.empty:
        return

    source = render_tile(tile)
    canvas.pixels[
        overlap.top - canvas.region.top : overlap.bottom - canvas.region.top,
        overlap.left - canvas.region.left : overlap.right - canvas.region.left,
    ] = source[
        overlap.top - tile_region.top : overlap.bottom - tile_region.top,
        overlap.left - tile_region.left : overlap.right - tile_region.left,
    ]


def union_region(tiles: Iterable[MapTile]) -> Region:
    """Smallest region containing every tile's region."""
    region = Region()
    for tile in tiles:
        region = region.union(tile.region)
    return region


class Compositor:
    """Assembles map tiles into a single image, finer scales drawn last."""

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize the compositor.

        Args:
            config: Render settings used by the debug and upscale helpers
        """
        self.config = config or RenderConfig()

    def compose(self, tiles: Iterable[MapTile]) -> Canvas:
        """Composite tiles onto a canvas covering all of their regions.

        Tiles are drawn grouped by scale from coarsest (4) to finest (0), so
        finer detail always overdraws coarser detail. Tiles sharing a scale
        are drawn in input order.

        Args:
            tiles: Tiles to draw, already filtered to one dimension

        Returns:
            Canvas covering the union of all tile regions; zero-sized if
            ``tiles`` is empty
        """
        tiles = list(tiles)
        canvas = Canvas.allocate(union_region(tiles))
        logger.info(f"Compositing {len(tiles)} tiles into {canvas.region.width}x{canvas.region.height} canvas")

        for scale in range(MAX_SCALE, MIN_SCALE - 1, -1):
            group = [tile for tile in tiles if tile.scale == scale]
            if not group:
                continue
            logger.debug(f"Drawing {len(group)} tiles at scale {scale}")
            for tile in group:
                draw_tile(canvas, tile)

        logger.info("Composition complete")
        return canvas

    def compose_with_outlines(self, tiles: Sequence[MapTile]) -> Image.Image:
        """Composite tiles and outline every tile region.

        Useful for seeing which map items contributed to which area.
        Outlines of finer tiles are drawn over coarser ones.

        Args:
            tiles: Tiles to draw

        Returns:
            Composite image with region outlines
        """
        canvas = self.compose(tiles)
        image = canvas.to_image()
        if canvas.empty:
            return image

        draw = ImageDraw.Draw(image)
        origin = canvas.region
        for tile in sorted(tiles, key=lambda t: -t.scale):
            region = tile.region
            draw.rectangle(
                [
                    (region.left - origin.left, region.top - origin.top),
                    (region.right - origin.left - 1, region.bottom - origin.top - 1),
                ],
                outline=self.config.outline_colors.get(tile.scale, (255, 255, 255, 255)),
                width=self.config.outline_width,
            )

        return image

    def render_image(self, tiles: Sequence[MapTile], factor: Optional[int] = None) -> Image.Image:
        """Composite tiles into an image, with optional outlines and upscaling.

        Args:
            tiles: Tiles to draw
            factor: Upscale factor; defaults to the configured one

        Returns:
            Upscaled composite image
        """
        if factor is None:
            factor = self.config.upscale
        if factor < 1:
            raise ValueError(f"Upscale factor must be at least 1, got {factor}")

        if self.config.debug_outlines:
            image = self.compose_with_outlines(tiles)
        else:
            image = self.compose(tiles).to_image()

        if factor != 1 and image.width and image.height:
            new_size = (image.width * factor, image.height * factor)
            image = image.resize(new_size, Image.Resampling.NEAREST)
            logger.info(f"Scaled composite to {new_size[0]}x{new_size[1]}")

        return image


def composite(tiles: Sequence[MapTile]) -> Canvas:
    """Composite tiles with default settings."""
    return Compositor().compose(tiles)
