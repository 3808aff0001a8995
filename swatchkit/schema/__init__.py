# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Schema definitions for swatchkit.

All types in this module are immutable. Colors move between components
as canonical "#rrggbb" strings; the types here are the structured forms
either side of that interchange.
"""

from swatchkit.schema.color_types import (
    ColorInfo,
    ContrastResult,
    HarmonyResult,
    HarmonyType,
    HSLColor,
    LockMap,
    RGBColor,
)

__all__ = [
    # Color representations
    "RGBColor",
    "HSLColor",
    # Display bundles
    "ColorInfo",
    "ContrastResult",
    # Harmonies
    "HarmonyType",
    "HarmonyResult",
    # Palette locking
    "LockMap",
]
