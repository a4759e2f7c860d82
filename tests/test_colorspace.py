# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (OKLCH ↔ OKLab ↔ linear RGB ↔ sRGB)."""

import math

import numpy as np
import pytest

from huecore.convert.colorspace import (
    linear_rgb_to_oklab,
    linear_rgb_to_rgb,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    rgb_to_linear_rgb,
    srgb_uint8_to_oklch,
)
from huecore.convert.hexcolor import hex_to_oklch
from huecore.schema import LinearRgb, OklabColor, OklchColor


class TestOKLCHToOKLab:

    def test_zero_hue_is_positive_a(self):
        lab = oklch_to_oklab(0.5, 0.1, 0.0)
        assert isinstance(lab, OklabColor)
        assert lab.L == 0.5
        assert lab.a == pytest.approx(0.1, abs=1e-12)
        assert lab.b == pytest.approx(0.0, abs=1e-12)

    def test_quarter_turn_is_positive_b(self):
        lab = oklch_to_oklab(0.5, 0.1, 90.0)
        assert lab.a == pytest.approx(0.0, abs=1e-12)
        assert lab.b == pytest.approx(0.1, abs=1e-12)

    def test_zero_chroma_is_neutral(self):
        lab = oklch_to_oklab(0.7, 0.0, 123.0)
        assert lab.a == 0.0
        assert lab.b == 0.0


class TestOKLabToOKLCH:

    def test_chroma_calculation(self):
        lch = oklab_to_oklch(0.5, 0.3, 0.4)
        assert lch.C == pytest.approx(0.5, abs=1e-12)

    def test_negative_angle_wraps(self):
        """atan2 in the third quadrant is negative; hue must be shifted into [0, 360)."""
        lch = oklab_to_oklch(0.5, -0.1, -0.1)
        assert lch.h == pytest.approx(225.0, abs=1e-9)

    def test_roundtrip_chromatic(self):
        lch = oklab_to_oklch(0.7, 0.1, -0.05)
        lab = oklch_to_oklab(lch.L, lch.C, lch.h)
        assert lab.a == pytest.approx(0.1, abs=1e-12)
        assert lab.b == pytest.approx(-0.05, abs=1e-12)

    def test_achromatic_zero_chroma(self):
        lch = oklab_to_oklch(0.5, 0.0, 0.0)
        assert lch.C == 0.0
        assert lch.h == 0.0


class TestGamma:

    def test_white_decodes_to_one(self):
        linear = rgb_to_linear_rgb(255, 255, 255)
        assert tuple(linear) == pytest.approx((1.0, 1.0, 1.0), abs=1e-12)

    def test_black_decodes_to_zero(self):
        assert tuple(rgb_to_linear_rgb(0, 0, 0)) == (0.0, 0.0, 0.0)

    def test_linear_segment_below_threshold(self):
        """10/255 ≈ 0.039 sits below 0.04045 and uses the linear segment."""
        linear = rgb_to_linear_rgb(10, 0, 0)
        assert linear.r == pytest.approx((10 / 255) / 12.92, abs=1e-15)

    def test_encode_linear_segment(self):
        srgb = linear_rgb_to_rgb(0.002, 0.0, 0.0)
        assert srgb.r == pytest.approx(12.92 * 0.002, abs=1e-15)

    def test_encode_preserves_sign(self):
        """Negative (out-of-gamut) channels stay negative rather than clipping."""
        srgb = linear_rgb_to_rgb(-0.5, 0.5, 1.5)
        expected = 1.055 * 0.5 ** (1 / 2.4) - 0.055
        assert srgb.r == pytest.approx(-expected, abs=1e-12)
        assert srgb.g == pytest.approx(expected, abs=1e-12)
        assert srgb.b > 1.0

    def test_encode_decode_roundtrip(self):
        for value in (0, 1, 10, 64, 128, 200, 255):
            linear = rgb_to_linear_rgb(value, value, value)
            srgb = linear_rgb_to_rgb(linear.r, linear.g, linear.b)
            assert srgb.r * 255 == pytest.approx(value, abs=1e-9)


class TestOKLab:

    def test_white_lightness_is_one(self):
        lab = linear_rgb_to_oklab(1.0, 1.0, 1.0)
        assert lab.L == pytest.approx(1.0, abs=1e-6)
        assert lab.a == pytest.approx(0.0, abs=1e-6)
        assert lab.b == pytest.approx(0.0, abs=1e-6)

    def test_black_lightness_is_zero(self):
        lab = linear_rgb_to_oklab(0.0, 0.0, 0.0)
        assert lab.L == pytest.approx(0.0, abs=1e-12)

    def test_roundtrip(self):
        rng = np.random.RandomState(42)
        for r, g, b in rng.random((50, 3)):
            lab = linear_rgb_to_oklab(r, g, b)
            linear = oklab_to_linear_rgb(lab.L, lab.a, lab.b)
            assert isinstance(linear, LinearRgb)
            assert tuple(linear) == pytest.approx((r, g, b), abs=1e-6)

    def test_out_of_gamut_is_not_clipped(self):
        linear = oklab_to_linear_rgb(0.7, 0.4, 0.0)
        assert min(linear) < 0.0 or max(linear) > 1.0


class TestKnownColors:

    def test_red(self):
        """sRGB red is oklch(0.628 0.2577 29.23)."""
        lch = hex_to_oklch("#ff0000")
        assert lch.L == pytest.approx(0.628, abs=1e-3)
        assert lch.C == pytest.approx(0.2577, abs=1e-3)
        assert lch.h == pytest.approx(29.23, abs=0.05)

    def test_blue(self):
        lch = hex_to_oklch("#0000ff")
        assert lch.L == pytest.approx(0.452, abs=1e-3)
        assert lch.h == pytest.approx(264.05, abs=0.1)

    def test_hue_in_range(self):
        lch = hex_to_oklch("#ff00aa")
        assert 0.0 <= lch.h < 360.0


class TestBatch:

    def test_batch_matches_scalar(self):
        pixels = np.array([[255, 0, 0], [12, 200, 90], [128, 64, 200]], dtype=np.uint8)
        batch = srgb_uint8_to_oklch(pixels)
        assert batch.shape == (3, 3)

        for row, (r, g, b) in zip(batch, pixels):
            lch = hex_to_oklch(f"#{r:02x}{g:02x}{b:02x}")
            assert row[0] == pytest.approx(lch.L, abs=1e-9)
            assert row[1] == pytest.approx(lch.C, abs=1e-9)
            assert math.cos(math.radians(row[2] - lch.h)) == pytest.approx(1.0, abs=1e-9)

    def test_image_shape_preserved(self):
        pixels = np.zeros((4, 5, 3), dtype=np.uint8)
        assert srgb_uint8_to_oklch(pixels).shape == (4, 5, 3)


class TestReturnTypes:

    def test_oklab_to_oklch_returns_value_type(self):
        assert isinstance(oklab_to_oklch(0.5, 0.1, 0.1), OklchColor)
