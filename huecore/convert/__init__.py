# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color conversion core for Huecore.

Pure functions between OKLCH, OKLab, linear RGB, sRGB, 8-bit RGB and hex,
plus gamut mapping into sRGB. Nothing here holds state between calls.
"""

from huecore.convert.colorspace import (
    linear_rgb_to_oklab,
    linear_rgb_to_rgb,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    rgb_to_linear_rgb,
    srgb_uint8_to_oklch,
)
from huecore.convert.hexcolor import hex_to_oklch, hex_to_rgb, rgb_to_hex
from huecore.convert.gamut import (
    gamut_map_oklch,
    is_in_gamut,
    oklch_to_hex,
    oklch_to_rgb,
)
from huecore.convert.shades import (
    SHADE_OFFSETS,
    chroma_ramp,
    hue_ramp,
    lightness_ramp,
    shade_ladder,
)

__all__ = [
    # OKLCH ↔ OKLab ↔ linear RGB ↔ sRGB
    "oklch_to_oklab",
    "oklab_to_oklch",
    "oklab_to_linear_rgb",
    "linear_rgb_to_oklab",
    "linear_rgb_to_rgb",
    "rgb_to_linear_rgb",
    "srgb_uint8_to_oklch",
    # Gamut
    "is_in_gamut",
    "gamut_map_oklch",
    "oklch_to_rgb",
    "oklch_to_hex",
    # Hex
    "rgb_to_hex",
    "hex_to_rgb",
    "hex_to_oklch",
    # Shades
    "SHADE_OFFSETS",
    "shade_ladder",
    "hue_ramp",
    "chroma_ramp",
    "lightness_ramp",
]
