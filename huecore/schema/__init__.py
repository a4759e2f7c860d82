# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Value types for Huecore.

All types in this module are immutable (frozen dataclasses) and are
created and discarded within a single conversion or extraction call.
"""

from huecore.schema.colors import (
    ColorBucket,
    HueAnalysis,
    LinearRgb,
    OklabColor,
    OklchColor,
    Rgb,
    ShadeSwatch,
)

__all__ = [
    # Color values
    "OklchColor",
    "OklabColor",
    "LinearRgb",
    "Rgb",
    # Shade ladder
    "ShadeSwatch",
    # Hue extraction
    "ColorBucket",
    "HueAnalysis",
]
