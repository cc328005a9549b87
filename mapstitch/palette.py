"""Minecraft map color palette.

Map items store one byte per pixel. The upper six bits select a base color
and the lower two bits select one of four shades of it, so the full palette
has 256 entries. Base color 0 is transparent.
"""

import numpy as np

# Base map colors in id order, as 0xRRGGBB
BASE_COLORS: tuple[int, ...] = (
    0x000000,  # NONE (transparent)
    0x7FB238,  # GRASS
    0xF7E9A3,  # SAND
    0xC7C7C7,  # WOOL
    0xFF0000,  # FIRE
    0xA0A0FF,  # ICE
    0xA7A7A7,  # METAL
    0x007C00,  # PLANT
    0xFFFFFF,  # SNOW
    0xA4A8B8,  # CLAY
    0x976D4D,  # DIRT
    0x707070,  # STONE
    0x4040FF,  # WATER
    0x8F7748,  # WOOD
    0xFFFCF5,  # QUARTZ
    0xD87F33,  # COLOR_ORANGE
    0xB24CD8,  # COLOR_MAGENTA
    0x6699D8,  # COLOR_LIGHT_BLUE
    0xE5E533,  # COLOR_YELLOW
    0x7FCC19,  # COLOR_LIGHT_GREEN
    0xF27FA5,  # COLOR_PINK
    0x4C4C4C,  # COLOR_GRAY
    0x999999,  # COLOR_LIGHT_GRAY
    0x4C7F99,  # COLOR_CYAN
    0x7F3FB2,  # COLOR_PURPLE
    0x334CB2,  # COLOR_BLUE
    0x664C33,  # COLOR_BROWN
    0x667F33,  # COLOR_GREEN
    0x993333,  # COLOR_RED
    0x191919,  # COLOR_BLACK
    0xFAEE4D,  # GOLD
    0x5CDBD5,  # DIAMOND
    0x4A80FF,  # LAPIS
    0x00D93A,  # EMERALD
    0x815631,  # PODZOL
    0x700200,  # NETHER
    0xD1B1A1,  # TERRACOTTA_WHITE
    0x9F5224,  # TERRACOTTA_ORANGE
    0x95576C,  # TERRACOTTA_MAGENTA
    0x706C8A,  # TERRACOTTA_LIGHT_BLUE
    0xBA8524,  # TERRACOTTA_YELLOW
    0x677535,  # TERRACOTTA_LIGHT_GREEN
    0xA04D4E,  # TERRACOTTA_PINK
    0x392923,  # TERRACOTTA_GRAY
    0x876B62,  # TERRACOTTA_LIGHT_GRAY
    0x575C5C,  # TERRACOTTA_CYAN
    0x7A4958,  # TERRACOTTA_PURPLE
    0x4C3E5C,  # TERRACOTTA_BLUE
    0x4C3223,  # TERRACOTTA_BROWN
    0x4C522A,  # TERRACOTTA_GREEN
    0x8E3C2E,  # TERRACOTTA_RED
    0x251610,  # TERRACOTTA_BLACK
    0xBD3031,  # CRIMSON_NYLIUM
    0x943F61,  # CRIMSON_STEM
    0x5C191D,  # CRIMSON_HYPHAE
    0x167E86,  # WARPED_NYLIUM
    0x3A8E8C,  # WARPED_STEM
    0x562C3E,  # WARPED_HYPHAE
    0x14B485,  # WARPED_WART_BLOCK
    0x646464,  # DEEPSLATE
    0xD8AF93,  # RAW_IRON
    0x7FA796,  # GLOW_LICHEN
)

# Brightness multipliers for the four shades of each base color
SHADE_MULTIPLIERS: tuple[int, ...] = (180, 220, 255, 135)

TRANSPARENT = (0, 0, 0, 0)


def _build_palette() -> tuple[tuple[int, int, int, int], ...]:
    entries = []
    for index in range(256):
        base, shade = divmod(index, len(SHADE_MULTIPLIERS))
        if base == 0 or base >= len(BASE_COLORS):
            entries.append(TRANSPARENT)
            continue

        rgb = BASE_COLORS[base]
        multiplier = SHADE_MULTIPLIERS[shade]
        entries.append(
            (
                ((rgb >> 16) & 0xFF) * multiplier // 255,
                ((rgb >> 8) & 0xFF) * multiplier // 255,
                (rgb & 0xFF) * multiplier // 255,
                255,
            )
        )
    return tuple(entries)


PALETTE: tuple[tuple[int, int, int, int], ...] = _build_palette()

# Same table as a (256, 4) lookup array for vectorized rendering
PALETTE_ARRAY = np.array(PALETTE, dtype=np.uint8)
PALETTE_ARRAY.setflags(write=False)


def color(index: int) -> tuple[int, int, int, int]:
    """RGBA color for a palette index (0-255)."""
    return PALETTE[index & 0xFF]


def render_indices(indices: np.ndarray) -> np.ndarray:
    """Map an array of palette indices to an RGBA array of shape ``(..., 4)``."""
    return PALETTE_ARRAY[np.asarray(indices, dtype=np.uint8)]
