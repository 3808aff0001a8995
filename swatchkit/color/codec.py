# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion graph: hex ↔ RGB ↔ HSL

All functions here are total over already-valid values. Text input goes
through swatchkit.color.parser first.

Rounding is half-up (2.5 -> 3) and happens once, at the end of each
conversion. Python's built-in round() rounds half to even, which shifts
some channels by one relative to browser color pickers.
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from swatchkit.schema import ColorInfo, HSLColor, RGBColor


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positives."""
    return int(math.floor(value + 0.5))


def normalize_hue(hue: float) -> float:
    """Fold any hue angle into [0, 360)."""
    return hue % 360


# =============================================================================
# HSL ↔ RGB
# =============================================================================


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """
    Convert HSL to RGB.

    Uses the chroma / second-component / match-value form with six
    60-degree hue sectors:

        C = (1 - |2L - 1|) * S
        X = C * (1 - |(H / 60) mod 2 - 1|)
        m = L - C / 2
    """
    h = normalize_hue(hsl.h)
    sn = hsl.s / 100
    ln = hsl.l / 100
    c = (1 - abs(2 * ln - 1)) * sn
    x = c * (1 - abs(((h / 60) % 2) - 1))
    m = ln - c / 2

    if h < 60:
        r1, g1, b1 = c, x, 0.0
    elif h < 120:
        r1, g1, b1 = x, c, 0.0
    elif h < 180:
        r1, g1, b1 = 0.0, c, x
    elif h < 240:
        r1, g1, b1 = 0.0, x, c
    elif h < 300:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    return RGBColor(
        r=round_half_up((r1 + m) * 255),
        g=round_half_up((g1 + m) * 255),
        b=round_half_up((b1 + m) * 255),
    )


def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    """
    Convert RGB to HSL with integer hue, saturation and lightness.

    Achromatic colors (max == min) get hue 0 and saturation 0.
    """
    rn = rgb.r / 255
    gn = rgb.g / 255
    bn = rgb.b / 255
    hi = max(rn, gn, bn)
    lo = min(rn, gn, bn)
    d = hi - lo
    l = (hi + lo) / 2

    if d == 0:
        return HSLColor(h=0, s=0, l=round_half_up(l * 100))

    s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
    if hi == rn:
        h = ((gn - bn) / d + (6 if gn < bn else 0)) * 60
    elif hi == gn:
        h = ((bn - rn) / d + 2) * 60
    else:
        h = ((rn - gn) / d + 4) * 60

    # Rounding can land exactly on 360; HSLColor folds that to 0
    return HSLColor(
        h=round_half_up(h),
        s=round_half_up(s * 100),
        l=round_half_up(l * 100),
    )


# =============================================================================
# Hex ↔ RGB / HSL
# =============================================================================


def rgb_to_hex(rgb: RGBColor) -> str:
    """Format as canonical "#rrggbb"."""
    return f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"


def hex_to_rgb(hex_color: str) -> RGBColor:
    """
    Parse a 6-digit hex string, with or without "#", into RGB.

    Expects canonical input; shorthand and loose text belong to
    parse_color().
    """
    clean = hex_color.lstrip("#")
    return RGBColor(
        r=int(clean[0:2], 16),
        g=int(clean[2:4], 16),
        b=int(clean[4:6], 16),
    )


def hsl_to_hex(hsl: HSLColor) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl))


def hex_to_hsl(hex_color: str) -> HSLColor:
    return rgb_to_hsl(hex_to_rgb(hex_color))


def hex_to_rgb_array(hex_colors: Iterable[str]) -> NDArray[np.uint8]:
    """
    Convert canonical hex strings to an (N, 3) uint8 array.

    Used by vectorized luminance and contrast calculations.
    """
    rows = [hex_to_rgb(h).as_tuple() for h in hex_colors]
    return np.array(rows, dtype=np.uint8).reshape(-1, 3)


# =============================================================================
# Display Formatting
# =============================================================================


def format_rgb(rgb: RGBColor) -> str:
    """Format as "rgb(108, 92, 231)"."""
    return f"rgb({rgb.r}, {rgb.g}, {rgb.b})"


def format_hsl(hsl: HSLColor) -> str:
    """Format as "hsl(247, 74%, 63%)"."""
    h = int(hsl.h) if float(hsl.h).is_integer() else hsl.h
    return f"hsl({h}, {hsl.s}%, {hsl.l}%)"


def color_info(hex_color: str) -> ColorInfo:
    """
    Return hex, rgb and hsl representations of a canonical hex color.

    Always recomputed from the hex; there is nothing cached to go stale.
    """
    rgb = hex_to_rgb(hex_color)
    return ColorInfo(
        hex=hex_color,
        rgb=format_rgb(rgb),
        hsl=format_hsl(rgb_to_hsl(rgb)),
    )
