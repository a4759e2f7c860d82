# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Gamut mapping from OKLCH into displayable sRGB.

Colors outside sRGB keep their lightness and hue; only chroma is reduced,
by bisection, to the largest value that still displays.
"""

from __future__ import annotations

import math

from huecore.schema import LinearRgb, OklchColor, Rgb
from huecore.convert.colorspace import (
    linear_rgb_to_rgb,
    oklab_to_linear_rgb,
    oklch_to_oklab,
)
from huecore.convert.hexcolor import rgb_to_hex


GAMUT_TOLERANCE = 0.000005
GAMUT_SEARCH_STEPS = 20


def is_in_gamut(r: float, g: float, b: float, tolerance: float = GAMUT_TOLERANCE) -> bool:
    """True if every gamma-encoded channel lies in [-tolerance, 1 + tolerance]."""
    return all(-tolerance <= c <= 1 + tolerance for c in (r, g, b))


def _oklch_to_srgb(L: float, C: float, h: float) -> LinearRgb:
    """OKLCH → gamma-encoded sRGB floats, unclipped."""
    lab = oklch_to_oklab(L, C, h)
    linear = oklab_to_linear_rgb(lab.L, lab.a, lab.b)
    return linear_rgb_to_rgb(linear.r, linear.g, linear.b)


def gamut_map_oklch(L: float, C: float, h: float) -> OklchColor:
    """
    Reduce chroma until the color fits in sRGB.

    At the lightness extremes (L <= 0 or L >= 1) no chroma survives:
    L is clamped and C forced to 0. Colors already in gamut are returned
    unchanged. Otherwise chroma is bisected over [0, C] for
    GAMUT_SEARCH_STEPS iterations, keeping the best in-gamut midpoint.

    Hue is preserved modulo 360 (the result wraps it into [0, 360)).
    """
    if L <= 0 or L >= 1:
        return OklchColor(L=max(0.0, min(1.0, L)), C=0.0, h=h)

    C = max(0.0, C)
    if is_in_gamut(*_oklch_to_srgb(L, C, h)):
        return OklchColor(L=L, C=C, h=h)

    chroma_min = 0.0
    chroma_max = C
    best_chroma = 0.0

    for _ in range(GAMUT_SEARCH_STEPS):
        test_chroma = (chroma_min + chroma_max) / 2
        if is_in_gamut(*_oklch_to_srgb(L, test_chroma, h)):
            best_chroma = test_chroma
            chroma_min = test_chroma
        else:
            chroma_max = test_chroma

    return OklchColor(L=L, C=best_chroma, h=h)


def _to_byte(c: float) -> int:
    # Round half up, as browsers do
    return math.floor(min(1.0, max(0.0, c)) * 255 + 0.5)


def oklch_to_rgb(L: float, C: float, h: float) -> Rgb:
    """
    Convert OKLCH to a displayable 8-bit sRGB color.

    Gamut-maps first, then clamps each channel to [0, 1] before scaling,
    so the result is always a valid Rgb.
    """
    mapped = gamut_map_oklch(L, C, h)
    srgb = _oklch_to_srgb(mapped.L, mapped.C, mapped.h)
    return Rgb(r=_to_byte(srgb.r), g=_to_byte(srgb.g), b=_to_byte(srgb.b))


def oklch_to_hex(L: float, C: float, h: float) -> str:
    """
    Convert OKLCH values to a gamut-mapped hex color string.

    Returns:
        Hex string like "#2a9d8f"
    """
    rgb = oklch_to_rgb(L, C, h)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)
