# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Hex string conversions.

Wire format: ``^#?[0-9A-Fa-f]{6}$`` on input (case-insensitive, optional
leading '#'), lowercase zero-padded ``#rrggbb`` on output. No alpha.
"""

from __future__ import annotations

import re
from typing import Optional

from huecore.schema import OklchColor, Rgb
from huecore.convert.colorspace import (
    linear_rgb_to_oklab,
    oklab_to_oklch,
    rgb_to_linear_rgb,
)


_HEX_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Format 8-bit channels as a hex color string.

    Returns:
        Hex string like "#2a9d8f"
    """
    for value in (r, g, b):
        if not 0 <= value <= 255:
            raise ValueError(f"Channel must be 0-255, got {value}")
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def hex_to_rgb(hex_color: str) -> Optional[Rgb]:
    """
    Parse a hex color string.

    Args:
        hex_color: "#3941C8", "3941c8", ...

    Returns:
        Rgb, or None if the string is not exactly six hex digits with an
        optional leading '#'. Never raises for bad input.
    """
    if not isinstance(hex_color, str):
        return None
    m = _HEX_RE.fullmatch(hex_color)
    if not m:
        return None
    return Rgb(
        r=int(m.group(1), 16),
        g=int(m.group(2), 16),
        b=int(m.group(3), 16),
    )


def hex_to_oklch(hex_color: str) -> Optional[OklchColor]:
    """
    Convert a hex color string to OKLCH.

    Full chain: hex → 8-bit RGB → linear RGB → OKLab → OKLCH

    Returns:
        OklchColor, or None if the hex string is malformed
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None

    linear = rgb_to_linear_rgb(rgb.r, rgb.g, rgb.b)
    lab = linear_rgb_to_oklab(linear.r, linear.g, linear.b)
    return oklab_to_oklch(lab.L, lab.a, lab.b)
