"""Output file writing for composited maps."""

import logging
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image

from ..config import OutputConfig, RenderConfig
from ..errors import OutputError
from ..types import MapTile
from .compositor import Compositor

logger = logging.getLogger(__name__)


class OutputWriter:
    """Handles compositing tiles and saving the result as PNG."""

    def __init__(
        self,
        output_config: Optional[OutputConfig] = None,
        render_config: Optional[RenderConfig] = None,
    ):
        """Initialize the output writer.

        Args:
            output_config: Destination and encoder settings
            render_config: Settings passed to the compositor
        """
        self.config = output_config or OutputConfig()
        self.compositor = Compositor(render_config)

    @property
    def output_path(self) -> Path:
        return Path(self.config.output_path)

    def save_composite(self, tiles: Sequence[MapTile]) -> Path:
        """Composite the tiles and save the image.

        Args:
            tiles: Tiles to draw

        Returns:
            Path to the saved image

        Raises:
            OutputError: If there is nothing to draw or the file can't be written
        """
        image = self.compositor.render_image(tiles)
        self.save_image(image)
        logger.info(f"Saved composite to {self.output_path}")
        return self.output_path

    def save_image(self, image: Image.Image):
        """Save an image to the configured path as PNG.

        Args:
            image: RGBA image to save

        Raises:
            OutputError: If the image is empty or the file can't be written
        """
        if image.width == 0 or image.height == 0:
            raise OutputError(f"{self.output_path}: cannot encode an empty image")

        self._ensure_output_dir()
        try:
            image.save(self.output_path, "PNG", optimize=self.config.optimize)
        except OSError as e:
            raise OutputError(f"{self.output_path}: {e}") from e

    def _ensure_output_dir(self):
        """Create the parent directory if it doesn't exist."""
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(f"{self.output_path}: {e}") from e
