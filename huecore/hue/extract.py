# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Dominant hue extraction from RGBA pixel buffers.

Two independent signals vote on the hue:

1. Histogram: every informative pixel adds a weight (favoring saturated
   mid-tones) to a 360-bin hue histogram, which is smoothed circularly;
   the peak bin wins.
2. Quantization: pixels are floored to a coarse RGB grid and counted;
   the hue of the most frequent grid color wins.

If the two agree within a threshold they are blended. Otherwise the
histogram wins for vibrant images (one hue group dominates) and the
quantized color wins for everything else.

Downsampling is the caller's job (see huecore.hue.image). All state is
local to a call.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from huecore.schema import ColorBucket, HueAnalysis


logger = logging.getLogger(__name__)

PixelBuffer = Union[bytes, bytearray, memoryview, ArrayLike]

HISTOGRAM_BINS = 360

# Named hue groups, by lower bound of each range in degrees.
# Red wraps: [0, 30) and [330, 360).
COLOR_GROUPS = ("red", "yellow", "green", "cyan", "blue", "magenta")
_GROUP_BOUNDS = (30, 90, 150, 210, 270, 330)


@dataclass(frozen=True)
class HueExtractionConfig:
    """Tuning constants for dominant hue extraction."""

    # Pixel rejection before HSL conversion
    min_alpha: int = 128  # Below this the pixel is treated as transparent
    near_black: int = 20  # All channels below this = near-black
    near_white: int = 235  # All channels above this = near-white

    # HSL gates: low-saturation or extreme-lightness pixels carry no hue
    min_saturation: float = 0.08
    min_lightness: float = 0.15
    max_lightness: float = 0.85

    # Pixel weight = s^saturation_exponent * (1 - |l - 0.5| * lightness_falloff) * weight_scale
    saturation_exponent: float = 1.2
    lightness_falloff: float = 1.5
    weight_scale: float = 2.0

    # Circular moving-average window over the histogram, in bins
    smoothing_window: int = 15

    # RGB quantization grid
    quantization_step: int = 10

    # Reconciliation
    agreement_threshold: float = 30.0  # Degrees
    histogram_weight: float = 0.4
    quantization_weight: float = 0.6
    vibrancy_ratio: float = 0.5

    # Blend along the shorter arc instead of linearly. Off by default:
    # the linear blend skews toward 180 when the two signals straddle 0/360.
    circular_blend: bool = False


# =============================================================================
# Helpers
# =============================================================================


def rgb_to_hsl_array(
    rgb: NDArray,
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """
    Convert 8-bit RGB to HSL.

    Args:
        rgb: Array of shape (..., 3) with values in [0, 255]

    Returns:
        (h, s, l) arrays, each in [0, 1]. Hue is 0 for grays.
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    lightness = (mx + mn) / 2
    d = mx - mn
    chromatic = d != 0

    with np.errstate(divide="ignore", invalid="ignore"):
        saturation = np.where(
            lightness > 0.5, d / (2 - mx - mn), d / (mx + mn)
        )
        hue = np.select(
            [mx == r, mx == g],
            [(g - b) / d + np.where(g < b, 6.0, 0.0), (b - r) / d + 2],
            (r - g) / d + 4,
        ) / 6

    saturation = np.where(chromatic, saturation, 0.0)
    hue = np.where(chromatic, hue, 0.0)
    return hue, saturation, lightness


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert one 8-bit RGB color to (h, s, l), each in [0, 1]."""
    h, s, l = rgb_to_hsl_array(np.array([[r, g, b]]))
    return float(h[0]), float(s[0]), float(l[0])


def _hue_degrees(h: NDArray[np.float64]) -> NDArray[np.int64]:
    """Fractional HSL hue → integer degree bin in [0, 360)."""
    return np.floor(h * 360).astype(np.int64) % 360


def smooth_histogram(histogram: ArrayLike, window_size: int) -> NDArray[np.float64]:
    """
    Circular moving average.

    Each bin becomes the mean of the ``window_size // 2`` bins on either
    side of it plus itself, wrapping around the ends.
    """
    histogram = np.asarray(histogram, dtype=np.float64)
    half = window_size // 2
    shifted = [np.roll(histogram, -offset) for offset in range(-half, half + 1)]
    return np.sum(shifted, axis=0) / len(shifted)


def circular_hue_distance(a: float, b: float) -> float:
    """Shortest angular distance between two hues, in [0, 180]."""
    diff = abs(a - b) % 360.0
    return min(diff, 360.0 - diff)


def complementary_hue(hue: float) -> float:
    """Hue on the opposite side of the wheel (used for accent colors)."""
    return (hue + 180) % 360


def hue_color_group(hue: float) -> str:
    """Name of the color group a hue (degrees) belongs to."""
    degree = int(math.floor(hue)) % 360
    return COLOR_GROUPS[_group_index(np.array([degree]))[0]]


def _group_index(degrees: NDArray[np.int64]) -> NDArray[np.int64]:
    # searchsorted gives 0..6; 6 (>= 330) wraps back to red
    return np.searchsorted(_GROUP_BOUNDS, degrees, side="right") % len(COLOR_GROUPS)


def _as_rgba(pixels: PixelBuffer) -> NDArray[np.uint8]:
    """View a pixel buffer as an (N, 4) uint8 array."""
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(pixels, dtype=np.uint8)
    else:
        flat = np.asarray(pixels, dtype=np.uint8).reshape(-1)

    if flat.size % 4 != 0:
        raise ValueError(
            f"RGBA buffer length must be a multiple of 4, got {flat.size}"
        )
    return flat.reshape(-1, 4)


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


# =============================================================================
# Extraction
# =============================================================================


def analyze_hue(
    pixels: PixelBuffer,
    config: Optional[HueExtractionConfig] = None,
) -> HueAnalysis:
    """
    Run both hue signals over a pixel buffer and reconcile them.

    Args:
        pixels: RGBA bytes (row-major, 4 per pixel) as bytes-like or a
            uint8 array of any shape whose size is a multiple of 4
        config: Tuning constants (defaults if None)

    Returns:
        HueAnalysis with the reconciled hue and both signals. A buffer
        with no informative pixels yields hue 0.
    """
    if config is None:
        config = HueExtractionConfig()

    rgba = _as_rgba(pixels)
    rgb = rgba[:, :3].astype(np.int64)
    alpha = rgba[:, 3]

    # Transparent, near-black and near-white pixels carry no hue
    keep = (
        (alpha >= config.min_alpha)
        & ~np.all(rgb < config.near_black, axis=1)
        & ~np.all(rgb > config.near_white, axis=1)
    )
    rgb = rgb[keep]

    h, s, l = rgb_to_hsl_array(rgb)
    informative = (
        (s > config.min_saturation)
        & (l > config.min_lightness)
        & (l < config.max_lightness)
    )
    rgb = rgb[informative]
    h, s, l = h[informative], s[informative], l[informative]
    pixels_analyzed = int(len(rgb))

    # --- Histogram signal ---
    degrees = _hue_degrees(h)
    weights = (
        np.power(s, config.saturation_exponent)
        * (1 - np.abs(l - 0.5) * config.lightness_falloff)
        * config.weight_scale
    )
    histogram = np.bincount(degrees, weights=weights, minlength=HISTOGRAM_BINS)
    group_weights = np.bincount(
        _group_index(degrees), weights=weights, minlength=len(COLOR_GROUPS)
    )

    smoothed = smooth_histogram(histogram, config.smoothing_window)
    histogram_hue = int(np.argmax(smoothed)) if pixels_analyzed else 0

    # --- Quantization signal ---
    top_colors = _top_quantized_colors(rgb, config.quantization_step)
    quantization_hue = 0
    if top_colors:
        top = top_colors[0]
        quantization_hue = int(_hue_degrees(
            rgb_to_hsl_array(np.array([[top.r, top.g, top.b]]))[0]
        )[0])
        logger.debug("Top quantized color hue: %d", quantization_hue)

    # --- Reconciliation ---
    distance = circular_hue_distance(histogram_hue, quantization_hue)
    is_vibrant = bool(
        float(group_weights.max()) > pixels_analyzed * config.vibrancy_ratio
    )

    if distance < config.agreement_threshold:
        hue = _blend(histogram_hue, quantization_hue, config)
    elif is_vibrant:
        hue = histogram_hue
    else:
        hue = quantization_hue

    return HueAnalysis(
        hue=hue,
        histogram_hue=histogram_hue,
        quantization_hue=quantization_hue,
        hue_distance=distance,
        is_vibrant=is_vibrant,
        pixels_analyzed=pixels_analyzed,
        color_groups={
            name: float(w) for name, w in zip(COLOR_GROUPS, group_weights)
        },
        top_colors=top_colors,
    )


def extract_dominant_hue(
    pixels: PixelBuffer,
    config: Optional[HueExtractionConfig] = None,
) -> int:
    """
    Extract a single dominant hue from an RGBA pixel buffer.

    Returns:
        Hue in whole degrees [0, 360). 0 for a degenerate image (fully
        transparent, black, white or gray).
    """
    hue = analyze_hue(pixels, config).hue
    logger.debug("Extracted hue: %d", hue)
    return hue


def _top_quantized_colors(
    rgb: NDArray[np.int64],
    step: int,
    limit: int = 5,
) -> tuple[ColorBucket, ...]:
    """
    Count pixels per quantized RGB color.

    Ordered by count descending; ties go to the color seen first.
    """
    if len(rgb) == 0:
        return ()

    quantized = (rgb // step) * step
    keys = (quantized[:, 0] << 16) | (quantized[:, 1] << 8) | quantized[:, 2]
    unique_keys, first_index, counts = np.unique(
        keys, return_index=True, return_counts=True
    )
    order = np.lexsort((first_index, -counts))[:limit]

    return tuple(
        ColorBucket(
            r=int(unique_keys[i] >> 16),
            g=int((unique_keys[i] >> 8) & 0xFF),
            b=int(unique_keys[i] & 0xFF),
            count=int(counts[i]),
        )
        for i in order
    )


def _blend(histogram_hue: int, quantization_hue: int, config: HueExtractionConfig) -> int:
    if config.circular_blend:
        # Signed shortest step from the histogram hue to the quantized hue
        delta = (quantization_hue - histogram_hue + 180) % 360 - 180
        total = config.histogram_weight + config.quantization_weight
        blended = histogram_hue + delta * config.quantization_weight / total
        return _round_half_up(blended) % 360
    return _round_half_up(
        histogram_hue * config.histogram_weight
        + quantization_hue * config.quantization_weight
    )
