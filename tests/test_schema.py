# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for the value types."""

import dataclasses
import json

import pytest

from huecore.schema import (
    ColorBucket,
    HueAnalysis,
    LinearRgb,
    OklabColor,
    OklchColor,
    Rgb,
)


class TestOklchColor:

    def test_lightness_clamped(self):
        assert OklchColor(L=1.5, C=0.1, h=10).L == 1.0
        assert OklchColor(L=-0.2, C=0.1, h=10).L == 0.0

    def test_chroma_never_negative(self):
        assert OklchColor(L=0.5, C=-0.1, h=10).C == 0.0

    def test_hue_wrapped(self):
        assert OklchColor(L=0.5, C=0.1, h=370).h == pytest.approx(10.0)
        assert OklchColor(L=0.5, C=0.1, h=-30).h == pytest.approx(330.0)
        assert OklchColor(L=0.5, C=0.1, h=360).h == 0.0

    def test_tiny_negative_hue_is_zero(self):
        assert OklchColor(L=0.5, C=0.1, h=-1e-20).h == 0.0

    def test_immutable(self):
        color = OklchColor(L=0.5, C=0.1, h=10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            color.L = 0.6

    def test_unpacking(self):
        L, C, h = OklchColor(L=0.5, C=0.1, h=10)
        assert (L, C, h) == (0.5, 0.1, 10.0)

    def test_css(self):
        assert OklchColor(0.55, 0.19, 169).css() == "oklch(0.55 0.19 169)"

    def test_hex(self):
        assert OklchColor(1.0, 0.2, 40).hex == "#ffffff"

    def test_dict_roundtrip(self):
        color = OklchColor(L=0.62, C=0.2, h=29.2)
        assert OklchColor.from_dict(color.to_dict()) == color


class TestRgb:

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError, match="0-255"):
            Rgb(256, 0, 0)
        with pytest.raises(ValueError):
            Rgb(0, 0, -1)

    def test_css_and_hex(self):
        rgb = Rgb(42, 157, 143)
        assert rgb.css() == "rgb(42, 157, 143)"
        assert rgb.hex == "#2a9d8f"

    def test_dict_roundtrip(self):
        rgb = Rgb(1, 2, 3)
        assert Rgb.from_dict(rgb.to_dict()) == rgb


class TestOtherTypes:

    def test_oklab_chroma(self):
        assert OklabColor(0.5, 0.3, 0.4).chroma == pytest.approx(0.5)

    def test_linear_rgb_is_unbounded(self):
        linear = LinearRgb(-0.2, 0.5, 1.3)
        assert tuple(linear) == (-0.2, 0.5, 1.3)

    def test_hue_analysis_json(self):
        analysis = HueAnalysis(
            hue=12,
            histogram_hue=10,
            quantization_hue=14,
            hue_distance=4.0,
            is_vibrant=True,
            pixels_analyzed=3,
            color_groups={"red": 5.0, "blue": 1.0},
            top_colors=(ColorBucket(250, 20, 0, 3),),
        )
        data = json.loads(analysis.to_json())
        assert data["hue"] == 12
        assert data["top_colors"] == [{"r": 250, "g": 20, "b": 0, "count": 3}]
        assert analysis.dominant_group == "red"
