# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Palette generation by golden-ratio hue stepping.

Each generated slot advances a hue cursor by 360 * 0.618... degrees.
Because the golden ratio conjugate is irrational, successive hues never
repeat and any prefix of the sequence is spread close to evenly around
the color wheel.

Locked slots pass through unchanged and do not advance the cursor, so
regenerating with the same locks keeps those slots fixed while the rest
reshuffle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Union

import numpy as np

from swatchkit.color.codec import hsl_to_hex, round_half_up
from swatchkit.schema import HSLColor, LockMap

logger = logging.getLogger(__name__)

GOLDEN_RATIO_CONJUGATE = 0.618033988749895


@dataclass(frozen=True)
class PaletteConfig:
    """Configuration for palette generation."""

    # Saturation and lightness are drawn uniformly from [low, high)
    saturation_range: tuple[float, float] = (55.0, 85.0)
    lightness_range: tuple[float, float] = (45.0, 70.0)

    # Fraction of a full turn the hue cursor advances per generated slot
    hue_step: float = GOLDEN_RATIO_CONJUGATE

    # Bounds applied by clamp_count(); generate_palette() itself is unbounded
    min_count: int = 2
    max_count: int = 8
    default_count: int = 5

    def clamp_count(self, count: Optional[float]) -> int:
        """Clamp a caller-supplied count into [min_count, max_count]."""
        if count is None:
            return self.default_count
        return int(min(self.max_count, max(self.min_count, int(count))))


def generate_palette(
    count: int,
    locked: Optional[Union[LockMap, Mapping[Union[int, str], str]]] = None,
    *,
    rng: Optional[np.random.Generator] = None,
    config: Optional[PaletteConfig] = None,
) -> list[str]:
    """
    Generate `count` canonical hex colors.

    Args:
        count: Number of colors. Callers are expected to clamp this
            (see PaletteConfig.clamp_count); no bound is enforced here.
        locked: Positions to keep fixed, as a LockMap or a mapping with
            int or decimal-string keys. Values must already be
            canonical hex.
        rng: Random source. Pass a seeded np.random.default_rng(seed)
            for reproducible output; defaults to a fresh unseeded one.
        config: Saturation/lightness ranges and hue step.

    Returns:
        List of exactly `count` hex strings.

    Example:
        >>> generate_palette(5, {0: "#6c5ce7", 2: "#00cec9"},
        ...                  rng=np.random.default_rng(7))[0]
        '#6c5ce7'
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    cfg = config or PaletteConfig()
    locks = LockMap.from_mapping(locked)
    gen = rng if rng is not None else np.random.default_rng()

    ignored = locks.out_of_range(count)
    if ignored:
        logger.debug("Ignoring locks beyond palette length %d: %s", count, ignored)

    s_low, s_high = cfg.saturation_range
    l_low, l_high = cfg.lightness_range
    step = 360 * cfg.hue_step

    hue = float(gen.random()) * 360
    colors: list[str] = []

    for i in range(count):
        if i in locks:
            colors.append(locks[i])
            continue

        hue = (hue + step) % 360
        s = round_half_up(s_low + float(gen.random()) * (s_high - s_low))
        l = round_half_up(l_low + float(gen.random()) * (l_high - l_low))
        colors.append(hsl_to_hex(HSLColor(h=round_half_up(hue) % 360, s=s, l=l)))

    logger.debug(
        "Generated palette of %d (%d locked): %s",
        count, len(locks) - len(ignored), colors,
    )
    return colors
