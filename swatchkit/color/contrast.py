# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
WCAG contrast evaluation.

Chain: sRGB [0,255] → linear RGB → relative luminance → contrast ratio

References:
- WCAG 2.x relative luminance:
  https://www.w3.org/TR/WCAG21/#dfn-relative-luminance

The linearization threshold is 0.03928, as written in WCAG 2.x, not the
0.04045 of the sRGB standard. The two differ only for channel values
near 10/255, but verdicts at the margins depend on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from swatchkit.color.codec import hex_to_rgb, hex_to_rgb_array
from swatchkit.schema import ContrastResult, RGBColor

WHITE = "#ffffff"
BLACK = "#000000"

_LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


@dataclass(frozen=True)
class ContrastThresholds:
    """Minimum ratios for each WCAG verdict."""

    aa_normal: float = 4.5
    aa_large: float = 3.0
    aaa_normal: float = 7.0
    aaa_large: float = 4.5


# =============================================================================
# Luminance
# =============================================================================


def _linearize(channels: NDArray) -> NDArray[np.float64]:
    """
    Convert 8-bit sRGB channels to linear light.

    Piecewise:
    - For c <= 0.03928: c / 12.92
    - For c > 0.03928: ((c + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(channels, dtype=np.float64) / 255.0
    return np.where(
        srgb <= 0.03928,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def _luminance(rgb: NDArray) -> NDArray[np.float64]:
    """Relative luminance for an array of shape (..., 3)."""
    return _linearize(rgb) @ _LUMA_WEIGHTS


def relative_luminance(rgb: RGBColor) -> float:
    """
    WCAG relative luminance of an RGB color.

    Returns:
        0.0 for black up to 1.0 for white
    """
    return float(_luminance(np.array(rgb.as_tuple())))


# =============================================================================
# Contrast
# =============================================================================


def _ratio(la: float, lb: float) -> float:
    lighter = max(la, lb)
    darker = min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(a: RGBColor, b: RGBColor) -> float:
    """
    WCAG contrast ratio between two colors.

    Symmetric in its arguments. Ranges from 1.0 (identical luminance)
    to 21.0 (black on white).
    """
    return _ratio(relative_luminance(a), relative_luminance(b))


def check_contrast(
    hex1: str,
    hex2: str,
    thresholds: Optional[ContrastThresholds] = None,
) -> ContrastResult:
    """
    Evaluate a color pair against the WCAG AA and AAA levels.

    Args:
        hex1: Canonical hex of one color (usually the text)
        hex2: Canonical hex of the other (usually the background)
        thresholds: Override the WCAG minimum ratios

    Returns:
        ContrastResult with the ratio formatted to two decimals
    """
    t = thresholds or ContrastThresholds()
    ratio = contrast_ratio(hex_to_rgb(hex1), hex_to_rgb(hex2))
    return ContrastResult(
        ratio=f"{ratio:.2f}",
        aa_normal=ratio >= t.aa_normal,
        aa_large=ratio >= t.aa_large,
        aaa_normal=ratio >= t.aaa_normal,
        aaa_large=ratio >= t.aaa_large,
    )


def contrast_verdict(result: ContrastResult) -> str:
    """One-line human summary of a ContrastResult."""
    if result.aaa_normal:
        return "Excellent: passes AAA for all text"
    if result.aa_normal:
        return "Good: passes AA for all text"
    if result.aa_large:
        return "Acceptable: passes AA for large text only (18px+ bold or 24px+)"
    return "Fail: insufficient contrast for any text use"


def text_color_for_background(hex_color: str) -> str:
    """
    Pick white or black text, whichever contrasts more with the background.

    White wins only on a strictly higher ratio.
    """
    rgb = hex_to_rgb(hex_color)
    on_white = contrast_ratio(rgb, hex_to_rgb(WHITE))
    on_black = contrast_ratio(rgb, hex_to_rgb(BLACK))
    return WHITE if on_white > on_black else BLACK


def contrast_matrix(hex_colors: Sequence[str]) -> NDArray[np.float64]:
    """
    Pairwise contrast ratios for a palette.

    Returns:
        Array of shape (N, N); entry [i, j] is the ratio between colors
        i and j. The diagonal is 1.0 and the matrix is symmetric.
    """
    lum = _luminance(hex_to_rgb_array(hex_colors))
    lighter = np.maximum.outer(lum, lum)
    darker = np.minimum.outer(lum, lum)
    return (lighter + 0.05) / (darker + 0.05)
