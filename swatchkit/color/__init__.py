# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Color core for swatchkit.

Conversion, parsing, contrast, palette generation and harmonies.
All operations are synchronous and pure; palette generation draws from
an injected NumPy random generator.
"""

from swatchkit.color.codec import (
    color_info,
    format_hsl,
    format_rgb,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    normalize_hue,
    rgb_to_hex,
    rgb_to_hsl,
)
from swatchkit.color.contrast import (
    ContrastThresholds,
    check_contrast,
    contrast_matrix,
    contrast_ratio,
    contrast_verdict,
    relative_luminance,
    text_color_for_background,
)
from swatchkit.color.harmony import get_harmonies, get_harmony
from swatchkit.color.palette import PaletteConfig, generate_palette
from swatchkit.color.parser import ParseError, parse_color, parse_colors

__all__ = [
    # Codec
    "hsl_to_rgb",
    "rgb_to_hsl",
    "rgb_to_hex",
    "hex_to_rgb",
    "hsl_to_hex",
    "hex_to_hsl",
    "normalize_hue",
    "format_rgb",
    "format_hsl",
    "color_info",
    # Parser
    "parse_color",
    "parse_colors",
    "ParseError",
    # Contrast
    "relative_luminance",
    "contrast_ratio",
    "check_contrast",
    "contrast_verdict",
    "contrast_matrix",
    "text_color_for_background",
    "ContrastThresholds",
    # Generation
    "generate_palette",
    "PaletteConfig",
    "get_harmonies",
    "get_harmony",
]
