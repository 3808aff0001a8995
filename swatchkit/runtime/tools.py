# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Tool operations for function-calling clients.

Each function takes raw argument values as they arrive from a tool call
(strings, numbers, nested dicts), parses every color through
parse_color(), and returns a JSON-ready dict. Transport, routing and
schema declaration belong to the server that calls these.

ParseError and ValueError propagate; wrap them with tool_error() at the
server boundary.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence, Union

import numpy as np

from swatchkit.color.codec import color_info, hex_to_rgb
from swatchkit.color.contrast import (
    ContrastThresholds,
    check_contrast,
    contrast_matrix,
    contrast_ratio,
    contrast_verdict,
    text_color_for_background,
)
from swatchkit.color.harmony import get_harmonies
from swatchkit.color.palette import PaletteConfig, generate_palette
from swatchkit.color.parser import parse_color, parse_colors
from swatchkit.schema import LockMap

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "#ffffff"
NO_ISSUES = "No accessibility issues found."


def generate_palette_tool(
    count: Optional[float] = None,
    locked: Optional[Mapping[Union[int, str], str]] = None,
    *,
    rng: Optional[np.random.Generator] = None,
    config: Optional[PaletteConfig] = None,
) -> dict:
    """Generate a palette, keeping locked positions.

    Args:
        count: Requested size; clamped to [2, 8], default 5.
        locked: Position -> color text, e.g. {"0": "#6C5CE7"}.
        rng: Random source passed through to generate_palette().

    Example output::

        {
          "count": 3,
          "colors": [
            {"position": 0, "locked": true, "hex": "#6c5ce7",
             "rgb": "rgb(108, 92, 231)", "hsl": "hsl(247, 74%, 63%)"},
            ...
          ]
        }
    """
    cfg = config or PaletteConfig()
    n = cfg.clamp_count(count)
    locks = LockMap.from_mapping(
        {key: parse_color(value) for key, value in (locked or {}).items()}
    )
    hexes = generate_palette(n, locks, rng=rng, config=cfg)
    return {
        "count": n,
        "colors": [
            {"position": i, "locked": i in locks, **color_info(h).to_dict()}
            for i, h in enumerate(hexes)
        ],
    }


def get_harmonies_tool(color: str) -> dict:
    """All five harmonies for a base color, each member as ColorInfo."""
    hex_color = parse_color(color)
    return {
        "base": color_info(hex_color).to_dict(),
        "harmonies": [
            {
                "type": h.type.value,
                "label": h.label,
                "colors": [color_info(c).to_dict() for c in h.colors],
            }
            for h in get_harmonies(hex_color)
        ],
    }


def check_contrast_tool(foreground: str, background: str) -> dict:
    """WCAG verdicts for text on a background, with a one-line summary."""
    fg = parse_color(foreground)
    bg = parse_color(background)
    result = check_contrast(fg, bg)
    return {
        "foreground": color_info(fg).to_dict(),
        "background": color_info(bg).to_dict(),
        **result.to_dict(),
        "verdict": contrast_verdict(result),
    }


def suggest_text_color_tool(background: str) -> dict:
    bg = parse_color(background)
    text_hex = text_color_for_background(bg)
    ratio = contrast_ratio(hex_to_rgb(bg), hex_to_rgb(text_hex))
    return {
        "background": color_info(bg).to_dict(),
        "recommended_text": color_info(text_hex).to_dict(),
        "contrast_ratio": f"{ratio:.2f}",
    }


def convert_color_tool(color: str) -> dict:
    return color_info(parse_color(color)).to_dict()


def analyze_palette_tool(
    colors: Sequence[str],
    background: Optional[str] = None,
) -> dict:
    """Audit a palette for accessibility.

    Checks every pair of colors and every color against the background.
    A pair is flagged when it fails AA for large text (unusable as a
    text/background combination); a color is flagged when it fails AA
    for normal text on the background.

    Raises:
        ValueError: If colors is empty.
        ParseError: If any color (or the background) cannot be parsed.
    """
    if not colors:
        raise ValueError("colors array is required")

    hexes = parse_colors(colors)
    bg = parse_color(background if background is not None else DEFAULT_BACKGROUND)

    thresholds = ContrastThresholds()
    ratios = contrast_matrix(hexes)
    pairs = []
    for i, j in zip(*np.triu_indices(len(hexes), k=1)):
        ratio = float(ratios[i, j])
        pairs.append({
            "pair": [hexes[i], hexes[j]],
            "ratio": f"{ratio:.2f}",
            "aa_normal": ratio >= thresholds.aa_normal,
            "aa_large": ratio >= thresholds.aa_large,
        })

    on_background = [
        {
            "color": h,
            "vs_background": check_contrast(h, bg).to_dict(),
            "suggested_text": text_color_for_background(h),
        }
        for h in hexes
    ]

    issues = []
    for p in pairs:
        if not p["aa_large"]:
            issues.append(
                f"{p['pair'][0]} and {p['pair'][1]} have very low contrast "
                f"({p['ratio']}:1), unusable as text/background pair"
            )
    for ob in on_background:
        vs = ob["vs_background"]
        if not vs["aa_normal"]:
            issues.append(
                f"{ob['color']} on background {bg} fails AA for normal text "
                f"({vs['ratio']}:1)"
            )

    logger.debug("Analyzed %d colors against %s: %d issues", len(hexes), bg, len(issues))

    return {
        "colors": [
            {"position": i, **color_info(h).to_dict()} for i, h in enumerate(hexes)
        ],
        "background": color_info(bg).to_dict(),
        "contrast_pairs": pairs,
        "on_background": on_background,
        "issues": issues or [NO_ISSUES],
    }
