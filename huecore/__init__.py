# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Huecore -- OKLCH color conversion and dominant hue extraction.

Converts between OKLCH, OKLab, linear RGB, sRGB and hex with gamut
mapping, and infers a single dominant hue from an image.

Quick start::

    from huecore import extract_dominant_hue, oklch_to_hex, hex_to_oklch

    hue = extract_dominant_hue(rgba_bytes)
    oklch_to_hex(0.55, 0.19, hue)   # "#..."
    hex_to_oklch("#2a9d8f")         # OklchColor(L=..., C=..., h=...)
"""

from __future__ import annotations

__version__ = "1.0.0"

from huecore.convert import (
    gamut_map_oklch,
    hex_to_oklch,
    hex_to_rgb,
    oklch_to_hex,
    oklch_to_rgb,
    rgb_to_hex,
    shade_ladder,
)
from huecore.hue import (
    HueExtractionConfig,
    analyze_hue,
    extract_dominant_hue,
    image_hue,
)
from huecore.schema import (
    HueAnalysis,
    OklabColor,
    OklchColor,
    Rgb,
)

__all__ = [
    # Conversion
    "oklch_to_rgb",
    "oklch_to_hex",
    "hex_to_rgb",
    "hex_to_oklch",
    "rgb_to_hex",
    "gamut_map_oklch",
    "shade_ladder",
    # Hue extraction
    "extract_dominant_hue",
    "analyze_hue",
    "image_hue",
    "HueExtractionConfig",
    # Types (commonly needed)
    "OklchColor",
    "OklabColor",
    "Rgb",
    "HueAnalysis",
    # Version
    "__version__",
]
