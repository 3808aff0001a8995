# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""Tests for schema value types."""

import dataclasses

import pytest

from swatchkit.schema import (
    ColorInfo,
    HarmonyResult,
    HarmonyType,
    HSLColor,
    LockMap,
    RGBColor,
)


class TestRGBColor:

    def test_valid(self):
        c = RGBColor(1, 2, 3)
        assert c.as_tuple() == (1, 2, 3)

    @pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 300)])
    def test_out_of_range(self, channels):
        with pytest.raises(ValueError, match="Channel"):
            RGBColor(*channels)

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            RGBColor(1, 2, 3).r = 9

    def test_dict_roundtrip(self):
        c = RGBColor(10, 20, 30)
        assert RGBColor.from_dict(c.to_dict()) == c


class TestHSLColor:

    def test_hue_360_folds_to_zero(self):
        assert HSLColor(360, 50, 50).h == 0

    def test_invalid_hue(self):
        with pytest.raises(ValueError, match="Hue"):
            HSLColor(361, 50, 50)

    def test_invalid_saturation(self):
        with pytest.raises(ValueError, match="Saturation"):
            HSLColor(10, 101, 50)

    def test_invalid_lightness(self):
        with pytest.raises(ValueError, match="Lightness"):
            HSLColor(10, 50, -1)

    def test_dict_roundtrip(self):
        c = HSLColor(249, 75, 63)
        assert HSLColor.from_dict(c.to_dict()) == c


class TestHarmonyTypes:

    def test_values(self):
        assert [t.value for t in HarmonyType] == [
            "complementary",
            "analogous",
            "triadic",
            "split-complementary",
            "tetradic",
        ]

    def test_result_needs_two_colors(self):
        with pytest.raises(ValueError, match="at least 2"):
            HarmonyResult(HarmonyType.COMPLEMENTARY, "Complementary", ("#ffffff",))


class TestColorInfo:

    def test_to_dict(self):
        info = ColorInfo(hex="#ffffff", rgb="rgb(255, 255, 255)", hsl="hsl(0, 0%, 100%)")
        assert info.to_dict()["hex"] == "#ffffff"


class TestLockMap:

    def test_string_keys_converted(self):
        locks = LockMap.from_mapping({"0": "#6c5ce7", "2": "#00cec9"})
        assert locks[0] == "#6c5ce7"
        assert 2 in locks
        assert 1 not in locks
        assert len(locks) == 2

    def test_iterates_in_index_order(self):
        locks = LockMap.from_mapping({"3": "#000000", 1: "#ffffff"})
        assert list(locks) == [1, 3]

    def test_none_is_empty(self):
        assert len(LockMap.from_mapping(None)) == 0

    def test_from_mapping_passes_lockmap_through(self):
        locks = LockMap({0: "#000000"})
        assert LockMap.from_mapping(locks) is locks

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            LockMap({-1: "#000000"})

    @pytest.mark.parametrize("key", ["-1", "1.5", "x", True])
    def test_bad_keys_rejected(self, key):
        with pytest.raises(ValueError):
            LockMap.from_mapping({key: "#000000"})

    def test_read_only(self):
        locks = LockMap({0: "#000000"})
        with pytest.raises(TypeError):
            locks[1] = "#ffffff"

    def test_out_of_range(self):
        locks = LockMap({0: "#000000", 4: "#111111", 7: "#222222"})
        assert locks.out_of_range(5) == (7,)

    def test_to_dict_uses_string_keys(self):
        assert LockMap({2: "#000000"}).to_dict() == {"2": "#000000"}
