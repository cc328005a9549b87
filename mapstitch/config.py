"""Configuration settings for the map compositor."""

from dataclasses import dataclass, field


@dataclass
class RenderConfig:
    """Configuration for compositing."""

    # Nearest-neighbour upscale factor applied after compositing (1 = none)
    upscale: int = 1

    # Draw each tile's region outline on top of the composite
    debug_outlines: bool = False

    # Outline width in pixels
    outline_width: int = 1

    # Outline color per map scale, finest first
    outline_colors: dict[int, tuple[int, int, int, int]] = field(
        default_factory=lambda: {
            0: (255, 0, 0, 255),
            1: (255, 160, 0, 255),
            2: (255, 255, 0, 255),
            3: (0, 200, 255, 255),
            4: (160, 0, 255, 255),
        }
    )


@dataclass
class OutputConfig:
    """Configuration for writing the composite."""

    output_path: str = "out.png"

    # Let Pillow spend extra time shrinking the PNG
    optimize: bool = True


@dataclass
class Config:
    """Main configuration combining all settings."""

    render: RenderConfig = field(default_factory=RenderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # Abort on the first unreadable or malformed map file
    strict: bool = False

