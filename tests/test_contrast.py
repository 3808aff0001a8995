# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""Tests for WCAG luminance, contrast ratios and verdicts."""

import numpy as np
import pytest

from swatchkit.color.codec import hex_to_rgb
from swatchkit.color.contrast import (
    BLACK,
    WHITE,
    ContrastThresholds,
    check_contrast,
    contrast_matrix,
    contrast_ratio,
    contrast_verdict,
    relative_luminance,
    text_color_for_background,
)
from swatchkit.schema import RGBColor


class TestRelativeLuminance:

    def test_white_is_one(self):
        assert relative_luminance(RGBColor(255, 255, 255)) == pytest.approx(1.0)

    def test_black_is_zero(self):
        assert relative_luminance(RGBColor(0, 0, 0)) == 0.0

    def test_low_channel_uses_linear_segment(self):
        """10/255 sits below 0.03928, so it divides by 12.92."""
        lum = relative_luminance(RGBColor(10, 10, 10))
        assert lum == pytest.approx((10 / 255) / 12.92, abs=1e-12)

    def test_high_channel_uses_gamma_curve(self):
        lum = relative_luminance(RGBColor(128, 128, 128))
        expected = ((128 / 255 + 0.055) / 1.055) ** 2.4
        assert lum == pytest.approx(expected, abs=1e-12)

    def test_green_weighs_most(self):
        r = relative_luminance(RGBColor(255, 0, 0))
        g = relative_luminance(RGBColor(0, 255, 0))
        b = relative_luminance(RGBColor(0, 0, 255))
        assert r == pytest.approx(0.2126)
        assert g == pytest.approx(0.7152)
        assert b == pytest.approx(0.0722)

    def test_returns_python_float(self):
        assert type(relative_luminance(RGBColor(1, 2, 3))) is float


class TestContrastRatio:

    def test_white_on_black_is_21(self):
        ratio = contrast_ratio(hex_to_rgb(WHITE), hex_to_rgb(BLACK))
        assert ratio == pytest.approx(21.0)

    def test_self_contrast_is_one(self):
        for hex_color in ("#6c5ce7", "#000000", "#ffffff", "#00cec9"):
            rgb = hex_to_rgb(hex_color)
            assert contrast_ratio(rgb, rgb) == 1.0

    def test_symmetric(self):
        rows = np.random.default_rng(7).integers(0, 256, size=(50, 6))
        for r1, g1, b1, r2, g2, b2 in rows:
            a = RGBColor(int(r1), int(g1), int(b1))
            b = RGBColor(int(r2), int(g2), int(b2))
            assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_range(self):
        rows = np.random.default_rng(8).integers(0, 256, size=(50, 6))
        for r1, g1, b1, r2, g2, b2 in rows:
            ratio = contrast_ratio(RGBColor(int(r1), int(g1), int(b1)),
                                   RGBColor(int(r2), int(g2), int(b2)))
            assert 1.0 <= ratio <= 21.0 + 1e-9


class TestCheckContrast:

    def test_white_black_passes_everything(self):
        result = check_contrast("#ffffff", "#000000")
        assert result.ratio == "21.00"
        assert result.aa_normal
        assert result.aa_large
        assert result.aaa_normal
        assert result.aaa_large

    def test_same_color_fails_everything(self):
        result = check_contrast("#6c5ce7", "#6c5ce7")
        assert result.ratio == "1.00"
        assert not any([
            result.aa_normal, result.aa_large, result.aaa_normal, result.aaa_large,
        ])

    def test_gray_777_is_large_text_only(self):
        result = check_contrast("#777777", "#ffffff")
        assert result.ratio == "4.48"
        assert not result.aa_normal
        assert result.aa_large
        assert not result.aaa_large

    def test_gray_767676_just_passes_aa(self):
        result = check_contrast("#767676", "#ffffff")
        assert result.ratio == "4.54"
        assert result.aa_normal
        assert result.aaa_large
        assert not result.aaa_normal

    def test_custom_thresholds(self):
        strict = ContrastThresholds(aa_normal=5.0)
        assert not check_contrast("#767676", "#ffffff", strict).aa_normal

    def test_to_dict(self):
        d = check_contrast("#ffffff", "#000000").to_dict()
        assert set(d) == {"ratio", "aa_normal", "aa_large", "aaa_normal", "aaa_large"}


class TestVerdict:

    def test_excellent(self):
        assert contrast_verdict(check_contrast(WHITE, BLACK)).startswith("Excellent")

    def test_good(self):
        assert contrast_verdict(check_contrast("#767676", WHITE)).startswith("Good")

    def test_acceptable(self):
        assert contrast_verdict(check_contrast("#777777", WHITE)).startswith("Acceptable")

    def test_fail(self):
        assert contrast_verdict(check_contrast("#eeeeee", WHITE)).startswith("Fail")


class TestTextColorForBackground:

    def test_dark_background_gets_white(self):
        assert text_color_for_background("#1a1a2e") == "#ffffff"

    def test_light_background_gets_black(self):
        assert text_color_for_background("#ffff00") == "#000000"

    def test_mid_gray_gets_black(self):
        # 4.69 against black beats 4.48 against white
        assert text_color_for_background("#777777") == "#000000"

    def test_pure_extremes(self):
        assert text_color_for_background("#000000") == "#ffffff"
        assert text_color_for_background("#ffffff") == "#000000"


class TestContrastMatrix:

    def test_shape_and_diagonal(self):
        m = contrast_matrix(["#ffffff", "#000000", "#6c5ce7"])
        assert m.shape == (3, 3)
        np.testing.assert_allclose(np.diag(m), 1.0)

    def test_symmetric(self):
        m = contrast_matrix(["#ffffff", "#000000", "#6c5ce7", "#00cec9"])
        np.testing.assert_allclose(m, m.T)

    def test_matches_scalar_ratio(self):
        hexes = ["#6c5ce7", "#00cec9", "#fdcb6e"]
        m = contrast_matrix(hexes)
        for i, a in enumerate(hexes):
            for j, b in enumerate(hexes):
                expected = contrast_ratio(hex_to_rgb(a), hex_to_rgb(b))
                assert m[i, j] == pytest.approx(expected, rel=1e-12)
