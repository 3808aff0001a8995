# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Color harmonies derived from a base hue.

Every harmony keeps the base color's saturation and lightness and only
rotates the hue. The set and order are fixed:

    complementary         0, 180
    analogous           -30, 0, 30
    triadic               0, 120, 240
    split-complementary   0, 150, 210
    tetradic              0, 90, 180, 270
"""

from __future__ import annotations

from swatchkit.color.codec import hex_to_hsl, hsl_to_hex, normalize_hue
from swatchkit.schema import HarmonyResult, HarmonyType, HSLColor

HARMONY_OFFSETS: dict[HarmonyType, tuple[int, ...]] = {
    HarmonyType.COMPLEMENTARY: (0, 180),
    HarmonyType.ANALOGOUS: (-30, 0, 30),
    HarmonyType.TRIADIC: (0, 120, 240),
    HarmonyType.SPLIT_COMPLEMENTARY: (0, 150, 210),
    HarmonyType.TETRADIC: (0, 90, 180, 270),
}


def _rotate(base: HSLColor, offset: int) -> HSLColor:
    return HSLColor(h=normalize_hue(base.h + offset), s=base.s, l=base.l)


def get_harmony(hex_color: str, harmony: HarmonyType) -> HarmonyResult:
    """
    Derive a single harmony from a canonical hex color.

    The zero-offset member is the input hex itself, not a round trip
    through HSL, so the base color always appears exactly.
    """
    base = hex_to_hsl(hex_color)
    colors = tuple(
        hex_color if offset == 0 else hsl_to_hex(_rotate(base, offset))
        for offset in HARMONY_OFFSETS[harmony]
    )
    return HarmonyResult(type=harmony, label=harmony.label, colors=colors)


def get_harmonies(hex_color: str) -> tuple[HarmonyResult, ...]:
    """All five harmonies in fixed order: complementary first, tetradic last."""
    return tuple(get_harmony(hex_color, harmony) for harmony in HarmonyType)
