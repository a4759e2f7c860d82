# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Shade ladders and channel ramps around a base OKLCH color.

A shade ladder steps lightness up and down while holding chroma and hue,
which is how a single hue becomes a set of theme swatches. Channel ramps
sweep one OKLCH channel and are used to paint slider tracks.
"""

from __future__ import annotations

from huecore.schema import OklchColor, ShadeSwatch
from huecore.convert.gamut import oklch_to_hex, oklch_to_rgb


SHADE_OFFSETS = (-0.4, -0.3, -0.2, -0.1, 0.0, 0.1, 0.2, 0.3, 0.4)

HUE_STOPS = (0, 60, 120, 180, 240, 300, 360)
CHROMA_STOPS = (0.0, 0.05, 0.1, 0.15, 0.2, 0.25, 0.3)
LIGHTNESS_STOPS = (0.0, 0.2, 0.4, 0.6, 0.8, 1.0)

# Swatches lighter than this get dark text
_DARK_TEXT_ABOVE = 0.6


def shade_ladder(
    L: float,
    C: float,
    h: float,
    offsets: tuple[float, ...] = SHADE_OFFSETS,
) -> tuple[ShadeSwatch, ...]:
    """
    Build a lightness ladder around a base color.

    Each offset is added to L and the result clamped to [0, 1]; chroma and
    hue are held. Hex values are gamut-mapped, so steps near black or
    white lose chroma rather than clipping.

    Args:
        L, C, h: Base color in OKLCH
        offsets: Lightness offsets, in display order

    Returns:
        One ShadeSwatch per offset, in the same order
    """
    swatches = []
    for offset in offsets:
        lightness = max(0.0, min(1.0, L + offset))
        swatches.append(ShadeSwatch(
            offset=offset,
            color=OklchColor(L=lightness, C=C, h=h),
            hex=oklch_to_hex(lightness, C, h),
            text_hex="#000" if lightness > _DARK_TEXT_ABOVE else "#fff",
        ))
    return tuple(swatches)


def hue_ramp(L: float, C: float) -> tuple[str, ...]:
    """CSS rgb() stops sweeping hue at fixed L and C."""
    return tuple(oklch_to_rgb(L, C, stop).css() for stop in HUE_STOPS)


def chroma_ramp(L: float, h: float) -> tuple[str, ...]:
    """CSS rgb() stops sweeping chroma at fixed L and h."""
    return tuple(oklch_to_rgb(L, stop, h).css() for stop in CHROMA_STOPS)


def lightness_ramp(C: float, h: float) -> tuple[str, ...]:
    """CSS rgb() stops sweeping lightness at fixed C and h."""
    return tuple(oklch_to_rgb(stop, C, h).css() for stop in LIGHTNESS_STOPS)
