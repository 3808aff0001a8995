# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Swatchkit -- Color conversion, palettes, harmonies and WCAG contrast.

Parses loose color text into canonical hex, converts between hex, RGB
and HSL, generates golden-ratio palettes with locked slots, derives the
five standard harmonies and checks WCAG contrast.

Quick start::

    from swatchkit import parse_color, check_contrast, get_harmonies

    base = parse_color("rgb(108, 92, 231)")   # "#6c5ce7"
    check_contrast(base, "#ffffff").aa_normal
    [h.colors for h in get_harmonies(base)]
"""

from __future__ import annotations

__version__ = "1.0.0"

from swatchkit.color import (
    ParseError,
    check_contrast,
    color_info,
    contrast_ratio,
    generate_palette,
    get_harmonies,
    hex_to_rgb,
    parse_color,
    text_color_for_background,
)
from swatchkit.schema import (
    ColorInfo,
    ContrastResult,
    HarmonyResult,
    HarmonyType,
    HSLColor,
    LockMap,
    RGBColor,
)

__all__ = [
    # Core API
    "parse_color",
    "color_info",
    "generate_palette",
    "get_harmonies",
    "check_contrast",
    "text_color_for_background",
    "contrast_ratio",
    "hex_to_rgb",
    "ParseError",
    # Types (commonly needed)
    "RGBColor",
    "HSLColor",
    "ColorInfo",
    "ContrastResult",
    "HarmonyType",
    "HarmonyResult",
    "LockMap",
    # Version
    "__version__",
]
