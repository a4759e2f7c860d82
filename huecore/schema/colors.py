# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Value types for color conversion and hue extraction.

Design principles:
- Immutable: All types are frozen dataclasses
- Call-local: Nothing here is cached or shared between calls
- Serializable: JSON-ready dictionaries via to_dict()

OKLCH Color Space:
- L (Lightness): 0.0 = black, 1.0 = white
- C (Chroma): 0.0 = gray, ~0.37 = max saturation in sRGB
- h (Hue): 0-360 degrees (≈30=orange, ≈110=yellow, ≈145=green, ≈265=blue)
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Iterator, Optional


def _normalize_hue(h: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    h = h % 360.0
    # Tiny negative angles wrap to exactly 360.0 in float arithmetic
    if h >= 360.0:
        h = 0.0
    return h


# =============================================================================
# Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class OklchColor:
    """
    A color in OKLCH (polar Oklab) space.

    Out-of-range components are normalized on construction rather than
    rejected, since upstream numeric noise routinely lands a hair outside
    the nominal ranges.

    Attributes:
        L: Lightness, clamped to [0, 1]
        C: Chroma, clamped to >= 0 (typically <= ~0.4)
        h: Hue in degrees, wrapped into [0, 360)
    """
    L: float
    C: float
    h: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "L", min(1.0, max(0.0, float(self.L))))
        object.__setattr__(self, "C", max(0.0, float(self.C)))
        object.__setattr__(self, "h", _normalize_hue(float(self.h)))

    def __iter__(self) -> Iterator[float]:
        return iter((self.L, self.C, self.h))

    @property
    def hex(self) -> str:
        """Gamut-mapped hex string like "#2a9d8f"."""
        from huecore.convert.gamut import oklch_to_hex
        return oklch_to_hex(self.L, self.C, self.h)

    def css(self) -> str:
        """CSS functional notation, e.g. "oklch(0.55 0.19 169)"."""
        return f"oklch({self.L:g} {self.C:g} {self.h:g})"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"L": self.L, "C": self.C, "h": self.h}

    @classmethod
    def from_dict(cls, data: dict) -> OklchColor:
        """Deserialize from dictionary."""
        return cls(L=data["L"], C=data["C"], h=data.get("h", 0.0))


@dataclass(frozen=True, slots=True)
class OklabColor:
    """
    A color in Oklab (Cartesian) space.

    Attributes:
        L: Lightness
        a: Green-red opponent axis
        b: Blue-yellow opponent axis
    """
    L: float
    a: float
    b: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.L, self.a, self.b))

    @property
    def chroma(self) -> float:
        return math.hypot(self.a, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"L": self.L, "a": self.a, "b": self.b}


@dataclass(frozen=True, slots=True)
class LinearRgb:
    """
    Floating-point RGB triple.

    Used both for linear-light RGB and for gamma-encoded RGB before
    rounding. Values are unbounded: a channel outside [0, 1] is the
    out-of-gamut signal.
    """
    r: float
    g: float
    b: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True, slots=True)
class Rgb:
    """
    Displayable 8-bit sRGB color.

    Attributes:
        r, g, b: Integer channels in [0, 255]
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channels are bytes."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")
            object.__setattr__(self, name, int(value))

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    @property
    def hex(self) -> str:
        from huecore.convert.hexcolor import rgb_to_hex
        return rgb_to_hex(self.r, self.g, self.b)

    def css(self) -> str:
        """CSS functional notation, e.g. "rgb(42, 157, 143)"."""
        return f"rgb({self.r}, {self.g}, {self.b})"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> Rgb:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


# =============================================================================
# Extraction Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorBucket:
    """
    A quantized RGB color and the number of analyzed pixels that fell in it.

    Channels are floored to a multiple of the quantization step (10 by
    default), so (127, 64, 3) lands in bucket (120, 60, 0).
    """
    r: int
    g: int
    b: int
    count: int

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "count": self.count}


@dataclass(frozen=True, slots=True)
class ShadeSwatch:
    """
    One step of a lightness ladder around a base OKLCH color.

    Attributes:
        offset: Lightness offset applied to the base color
        color: Requested color after clamping L to [0, 1] (chroma as given)
        hex: Gamut-mapped hex of the color
        text_hex: Readable foreground on top of the swatch ("#000" or "#fff")
    """
    offset: float
    color: OklchColor
    hex: str
    text_hex: str

    @property
    def label(self) -> str:
        """Two-decimal OKLCH label, e.g. "oklch(0.55 0.19 169)"."""
        return (
            f"oklch({self.color.L:.2f} {self.color.C:.2f} {self.color.h:g})"
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "offset": self.offset,
            "color": self.color.to_dict(),
            "hex": self.hex,
            "text_hex": self.text_hex,
        }


@dataclass(frozen=True, slots=True)
class HueAnalysis:
    """
    Full record of a dominant-hue extraction.

    The reconciled ``hue`` comes from two independent signals: the peak of
    a smoothed, weighted hue histogram and the hue of the most frequent
    quantized color. Both are kept so callers can see how the vote went.

    Attributes:
        hue: Reconciled dominant hue in whole degrees [0, 360)
        histogram_hue: Peak of the smoothed weighted histogram
        quantization_hue: Hue of the most frequent quantized color
        hue_distance: Circular distance between the two signals
        is_vibrant: True if one color group holds more than the vibrancy
            ratio of the analyzed-pixel count
        pixels_analyzed: Pixels that survived every filter
        color_groups: Accumulated weight per named hue group
        top_colors: Up to five most frequent quantized colors
    """
    hue: int
    histogram_hue: int
    quantization_hue: int
    hue_distance: float
    is_vibrant: bool
    pixels_analyzed: int
    color_groups: dict[str, float] = field(default_factory=dict)
    top_colors: tuple[ColorBucket, ...] = ()

    @property
    def dominant_group(self) -> Optional[str]:
        """Name of the heaviest color group, or None for a degenerate image."""
        if self.pixels_analyzed == 0 or not self.color_groups:
            return None
        return max(self.color_groups, key=self.color_groups.__getitem__)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hue": self.hue,
            "histogram_hue": self.histogram_hue,
            "quantization_hue": self.quantization_hue,
            "hue_distance": self.hue_distance,
            "is_vibrant": self.is_vibrant,
            "pixels_analyzed": self.pixels_analyzed,
            "color_groups": dict(self.color_groups),
            "top_colors": [c.to_dict() for c in self.top_colors],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
