# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Dominant hue extraction.

Turns a decoded image (an RGBA pixel buffer) into one representative hue
in degrees. Deterministic: the same buffer always yields the same hue.
"""

from huecore.hue.extract import (
    COLOR_GROUPS,
    HueExtractionConfig,
    analyze_hue,
    circular_hue_distance,
    complementary_hue,
    extract_dominant_hue,
    hue_color_group,
    rgb_to_hsl,
    smooth_histogram,
)
from huecore.hue.image import image_hue, load_rgba

__all__ = [
    "extract_dominant_hue",
    "analyze_hue",
    "HueExtractionConfig",
    "image_hue",
    "load_rgba",
    # Helpers
    "COLOR_GROUPS",
    "rgb_to_hsl",
    "smooth_histogram",
    "circular_hue_distance",
    "complementary_hue",
    "hue_color_group",
]
