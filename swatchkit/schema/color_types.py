# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Value types shared by every swatchkit component.

Design principles:
- Immutable: All types are frozen dataclasses
- Canonical: Colors travel between components as "#rrggbb" strings
- Derived: ColorInfo, ContrastResult and HarmonyResult are recomputed
  on demand, never cached

RGB/HSL ranges:
- RGB: integer channels 0-255
- HSL: H in degrees [0, 360), S and L integer percentages 0-100
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union


# =============================================================================
# Color Representations
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    An sRGB color with 8-bit integer channels.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channels are within 0-255."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    A color in HSL space.

    Hue 360 is the same angle as 0 and is stored as 0, so every
    HSLColor has h in [0, 360).

    Attributes:
        h: Hue in degrees (0=red, 120=green, 240=blue)
        s: Saturation percentage (0-100)
        l: Lightness percentage (0-100)
    """
    h: float
    s: int
    l: int

    def __post_init__(self) -> None:
        """Validate ranges and fold hue 360 back to 0."""
        if not 0 <= self.h <= 360:
            raise ValueError(f"Hue must be 0-360, got {self.h}")
        if self.h == 360:
            object.__setattr__(self, "h", 0)
        if not 0 <= self.s <= 100:
            raise ValueError(f"Saturation must be 0-100, got {self.s}")
        if not 0 <= self.l <= 100:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSLColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


# =============================================================================
# Derived Display Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorInfo:
    """
    All three representations of one color, ready for display.

    Attributes:
        hex: Canonical hex string like "#6c5ce7"
        rgb: Formatted string like "rgb(108, 92, 231)"
        hsl: Formatted string like "hsl(247, 75%, 63%)"
    """
    hex: str
    rgb: str
    hsl: str

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"hex": self.hex, "rgb": self.rgb, "hsl": self.hsl}


@dataclass(frozen=True, slots=True)
class ContrastResult:
    """
    WCAG 2.x verdicts for a pair of colors.

    The ratio is pre-formatted to two decimals for stable display; use
    contrast_ratio() when a number is needed.

    Attributes:
        ratio: Contrast ratio as a string like "4.56"
        aa_normal: Passes AA for normal text (>= 4.5)
        aa_large: Passes AA for large text (>= 3.0)
        aaa_normal: Passes AAA for normal text (>= 7.0)
        aaa_large: Passes AAA for large text (>= 4.5)
    """
    ratio: str
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "ratio": self.ratio,
            "aa_normal": self.aa_normal,
            "aa_large": self.aa_large,
            "aaa_normal": self.aaa_normal,
            "aaa_large": self.aaa_large,
        }


# =============================================================================
# Harmony Types
# =============================================================================


class HarmonyType(Enum):
    """
    The five supported hue relationships.

    Declaration order is the order get_harmonies() returns them in.
    """
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TETRADIC = "tetradic"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. "Split Complementary"."""
        return self.value.replace("-", " ").title()


@dataclass(frozen=True, slots=True)
class HarmonyResult:
    """
    One harmony derived from a base color.

    Attributes:
        type: Which relationship this is
        label: Human-readable name
        colors: Canonical hex colors, base color first (analogous lists
                the -30 degree neighbour before the base)
    """
    type: HarmonyType
    label: str
    colors: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.colors) < 2:
            raise ValueError("Harmony must have at least 2 colors")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "type": self.type.value,
            "label": self.label,
            "colors": list(self.colors),
        }


# =============================================================================
# Lock Map
# =============================================================================


class LockMap(Mapping[int, str]):
    """
    Sparse, read-only mapping of palette position to a fixed color.

    Positions are non-negative integers. Tool callers send positions as
    JSON object keys ("0", "2"), so from_mapping() also accepts decimal
    strings and converts them at the boundary.

    Usage:
        locks = LockMap.from_mapping({"0": "#6c5ce7", 2: "#00cec9"})
        locks[0]        # "#6c5ce7"
        1 in locks      # False
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[int, str]] = None) -> None:
        checked: dict[int, str] = {}
        for index, color in (entries or {}).items():
            if isinstance(index, bool) or not isinstance(index, int):
                raise ValueError(f"Lock index must be an int, got {index!r}")
            if index < 0:
                raise ValueError(f"Lock index must be >= 0, got {index}")
            checked[index] = color
        self._entries = MappingProxyType(checked)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[Union[int, str], str]]) -> LockMap:
        """Build a LockMap from int or decimal-string keys."""
        if isinstance(data, LockMap):
            return data
        entries: dict[int, str] = {}
        for key, color in (data or {}).items():
            entries[_coerce_index(key)] = color
        return cls(entries)

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LockMap({dict(self._entries)!r})"

    def out_of_range(self, count: int) -> tuple[int, ...]:
        """Indices that fall outside a palette of `count` colors."""
        return tuple(i for i in self if i >= count)

    def to_dict(self) -> dict:
        """Serialize with string keys, matching the tool wire form."""
        return {str(i): self._entries[i] for i in self}


def _coerce_index(key: Union[int, str]) -> int:
    """Convert a lock key to a non-negative int position."""
    if isinstance(key, bool):
        raise ValueError(f"Lock index must be an int, got {key!r}")
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.strip().isdigit():
        return int(key.strip())
    raise ValueError(f"Lock index must be a non-negative integer, got {key!r}")
