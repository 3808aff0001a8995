# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Flexible color text parsing.

Accepts the formats people actually paste and normalizes them to the
canonical "#rrggbb" form:

    #6C5CE7   6C5CE7   #6CE   6CE
    rgb(108, 92, 231)
    hsl(249, 75%, 63%)   hsl(249, 75, 63)

Out-of-range numbers inside rgb()/hsl() are clamped (300 -> 255), not
rejected. Negative numbers, alpha channels and named colors are not
accepted.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from swatchkit.color.codec import hsl_to_hex, rgb_to_hex
from swatchkit.schema import HSLColor, RGBColor

logger = logging.getLogger(__name__)

ACCEPTED_FORMATS = "#6C5CE7, 6C5CE7, #6CE, rgb(108,92,231), hsl(249,75%,63%)"

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_RE = re.compile(
    r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$",
    re.IGNORECASE,
)
_HSL_RE = re.compile(
    r"^hsl\(\s*(\d{1,3})\s*,\s*(\d{1,3})%?\s*,\s*(\d{1,3})%?\s*\)$",
    re.IGNORECASE,
)


class ParseError(ValueError):
    """Raised when text is not a color in any accepted format."""

    def __init__(self, text: object) -> None:
        self.text = text
        super().__init__(
            f'Cannot parse "{text}". Accepted formats: {ACCEPTED_FORMATS}'
        )


def parse_color(text: str) -> str:
    """
    Parse color text into a canonical "#rrggbb" string.

    Args:
        text: Hex (3 or 6 digits, "#" optional), rgb(r, g, b) or
            hsl(h, s%, l%) with optional "%" signs. Surrounding
            whitespace is ignored, as is case.

    Returns:
        Lowercase 6-digit hex with a leading "#".

    Raises:
        ParseError: If the text matches none of the accepted formats.
    """
    if not isinstance(text, str):
        logger.debug("Rejected non-string color input %r", text)
        raise ParseError(text)

    s = text.strip()

    m = _HEX_RE.match(s)
    if m:
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return f"#{digits.lower()}"

    m = _RGB_RE.match(s)
    if m:
        r, g, b = (min(255, int(v)) for v in m.groups())
        return rgb_to_hex(RGBColor(r=r, g=g, b=b))

    m = _HSL_RE.match(s)
    if m:
        h = min(360, int(m.group(1)))
        sat = min(100, int(m.group(2)))
        light = min(100, int(m.group(3)))
        return hsl_to_hex(HSLColor(h=h, s=sat, l=light))

    logger.debug("No color format matched %r", text)
    raise ParseError(text)


def parse_colors(values: Iterable[str]) -> list[str]:
    """Parse several colors in order. The first failure propagates."""
    return [parse_color(v) for v in values]
