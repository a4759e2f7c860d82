# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: OKLCH ↔ OKLab ↔ Linear RGB ↔ sRGB (gamma) ↔ 8-bit RGB

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)

All four matrices are the published literals, including the two inverse
directions, so results agree with CSS ``oklch()`` rendering to displayed
precision. Scalar functions return schema value types; the ``*_array``
helpers work on arrays of shape (..., 3) for batch callers.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from huecore.schema import LinearRgb, OklabColor, OklchColor


# =============================================================================
# Matrices
# =============================================================================

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS (cube-rooted) to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# OKLab to LMS (cube-rooted)
_M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

# LMS to linear sRGB
_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)

# Gamma curve breakpoints
_LINEAR_CUTOFF = 0.0031308
_SRGB_CUTOFF = 0.04045


# =============================================================================
# OKLCH ↔ OKLab
# =============================================================================


def oklch_to_oklab(L: float, C: float, h: float) -> OklabColor:
    """
    Convert OKLCH to OKLab.

    Args:
        L: Lightness
        C: Chroma
        h: Hue in degrees (any angle)

    Returns:
        OklabColor with a = C·cos(h), b = C·sin(h)
    """
    h_rad = h * math.pi / 180.0
    return OklabColor(L=L, a=C * math.cos(h_rad), b=C * math.sin(h_rad))


def oklab_to_oklch(L: float, a: float, b: float) -> OklchColor:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Hue is atan2(b, a) in degrees, shifted into [0, 360).
    """
    C = math.sqrt(a * a + b * b)
    h = math.degrees(math.atan2(b, a))
    if h < 0:
        h += 360.0
    return OklchColor(L=L, C=C, h=h)


# =============================================================================
# OKLab ↔ Linear RGB
# =============================================================================


def oklab_to_linear_rgb(L: float, a: float, b: float) -> LinearRgb:
    """
    Convert OKLab to linear RGB.

    The result is not clipped: channels outside [0, 1] mean the color
    is outside the sRGB gamut.
    """
    r, g, b_ = oklab_to_linear_rgb_array(np.array([L, a, b], dtype=np.float64))
    return LinearRgb(r=float(r), g=float(g), b=float(b_))


def linear_rgb_to_oklab(r: float, g: float, b: float) -> OklabColor:
    """Convert linear RGB to OKLab."""
    L, a, b_ = linear_rgb_to_oklab_array(np.array([r, g, b], dtype=np.float64))
    return OklabColor(L=float(L), a=float(a), b=float(b_))


def oklab_to_linear_rgb_array(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lab = np.asarray(lab, dtype=np.float64)

    # OKLab to LMS (cube-rooted), then cube
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3

    return np.einsum('...j,ij->...i', lms, _M1_INV)


def linear_rgb_to_oklab_array(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # np.cbrt keeps the sign of out-of-gamut (negative) responses
    lms_cbrt = np.cbrt(lms)

    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


# =============================================================================
# Linear RGB ↔ sRGB
# =============================================================================


def _gamma_encode(c: float) -> float:
    magnitude = abs(c)
    if magnitude > _LINEAR_CUTOFF:
        return math.copysign(1.055 * magnitude ** (1.0 / 2.4) - 0.055, c)
    return 12.92 * c


def _gamma_decode(c: float) -> float:
    if c <= _SRGB_CUTOFF:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_rgb_to_rgb(r: float, g: float, b: float) -> LinearRgb:
    """
    Gamma-encode linear RGB into sRGB floats (not yet rounded).

    Uses the sRGB piecewise curve on the magnitude and restores the sign,
    so negative out-of-gamut channels stay negative instead of being
    clipped. That keeps the result usable for gamut testing.
    """
    return LinearRgb(r=_gamma_encode(r), g=_gamma_encode(g), b=_gamma_encode(b))


def rgb_to_linear_rgb(r: int, g: int, b: int) -> LinearRgb:
    """
    Convert 8-bit sRGB channels [0, 255] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: value/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    return LinearRgb(
        r=_gamma_decode(r / 255),
        g=_gamma_decode(g / 255),
        b=_gamma_decode(b / 255),
    )


def srgb_to_linear_array(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert sRGB values [0,1] to linear RGB (vectorized)."""
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= _SRGB_CUTOFF,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


# =============================================================================
# Convenience: 8-bit sRGB → OKLCH (full chain, batch)
# =============================================================================


def srgb_uint8_to_oklch(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Convert uint8 sRGB pixels [0,255] to OKLCH.

    Args:
        pixels: Array of shape (..., 3) with uint8 sRGB values [0, 255]

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H), H in [0, 360)
    """
    linear = srgb_to_linear_array(np.asarray(pixels).astype(np.float64) / 255.0)
    lab = linear_rgb_to_oklab_array(linear)

    L = lab[..., 0]
    C = np.sqrt(lab[..., 1] ** 2 + lab[..., 2] ** 2)
    H = np.degrees(np.arctan2(lab[..., 2], lab[..., 1])) % 360.0

    return np.stack([L, C, H], axis=-1)
