"""Rendering and output modules for composited maps."""

from .compositor import Canvas, Compositor, composite, render_tile
from .output import OutputWriter

__all__ = ["Canvas", "Compositor", "OutputWriter", "composite", "render_tile"]
