"""
Color model for Hue lights.

Provides the xy chromaticity Color value, the Maybe wrapper used for
"leave this attribute unchanged", blending helpers and the named presets.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Generic, Mapping, Sequence, TypeVar

T = TypeVar("T")

# Chromaticity coordinates are stored as fixed point with this scale.
SCALE = 10000

# Brightest and dimmest brightness values.
BRIGHT = 255
DIM = 0


def _to_fixed(value: float) -> int:
    return math.floor(value * SCALE + 0.5)


def round_brightness(value: float) -> int:
    """Round a blended brightness to the nearest integer (halves round up)."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Color:
    """
    A color in the CIE xy space, with an optional brightness.

    Coordinates are quantized to 1/10000 on construction, so two colors
    built from values that differ by less than half a unit compare equal.

    Examples:
        Color(0.675, 0.322)          # Red
        Color(0.3848, 0.3629, 200)   # Bright-ish white
    """
    x: float
    y: float
    brightness: int | None = None

    def __post_init__(self):
        object.__setattr__(self, "x", _to_fixed(self.x) / SCALE)
        object.__setattr__(self, "y", _to_fixed(self.y) / SCALE)

    def blend(self, other: "Color", ratio: float) -> "Color":
        """
        Blend this color with another.

        ratio=0 gives this color, ratio=1 gives other. Ratios outside
        [0, 1] extrapolate; they are not clamped. Brightness is blended
        only when both colors carry one, otherwise this color's is kept.
        """
        inv = 1.0 - ratio
        brightness = self.brightness
        if self.brightness is not None and other.brightness is not None:
            brightness = round_brightness(self.brightness * inv + other.brightness * ratio)
        return Color(
            self.x * inv + other.x * ratio,
            self.y * inv + other.y * ratio,
            brightness,
        )

    def with_brightness(self, brightness: int | None) -> "Color":
        """Return a copy with updated brightness."""
        return Color(self.x, self.y, brightness)

    def __str__(self) -> str:
        return f"({self.x:.4f}, {self.y:.4f})"


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """
    A value or nothing.

    Nothing means "do not change this attribute". Use Maybe.just(value)
    or the NOTHING constant rather than building instances directly.
    """
    valid: bool = False
    value: T | None = None

    @classmethod
    def just(cls, value: T) -> "Maybe[T]":
        return cls(True, value)

    @classmethod
    def from_optional(cls, value: T | None) -> "Maybe[T]":
        """Wrap value, treating None as nothing."""
        if value is None:
            return NOTHING
        return cls(True, value)

    def get(self, default: T | None = None) -> T | None:
        return self.value if self.valid else default

    def __str__(self) -> str:
        if not self.valid:
            return "Nothing"
        return f"Just {self.value}"


NOTHING: Maybe = Maybe()


def maybe_blend_color(first: Maybe[Color], second: Maybe[Color], ratio: float) -> Maybe[Color]:
    """
    Blend two optional colors.

    Returns the blend only when both are present. Otherwise first is
    returned unchanged, so a missing value holds the last known one.
    """
    if first.valid and second.valid:
        return Maybe.just(first.value.blend(second.value, ratio))
    return first


def maybe_blend_brightness(first: Maybe[int], second: Maybe[int], ratio: float) -> Maybe[int]:
    """Blend two optional brightness values with the same rule as colors."""
    if first.valid and second.valid:
        return Maybe.just(round_brightness((1.0 - ratio) * first.value + ratio * second.value))
    return first


# Named presets
RED = Color(0.675, 0.322)
GREEN = Color(0.4077, 0.5154)
BLUE = Color(0.167, 0.04)
YELLOW = RED.blend(GREEN, 0.5)
MAGENTA = BLUE.blend(RED, 0.5)
CYAN = BLUE.blend(GREEN, 0.5)
PURPLE = Color(0.2522, 0.0882)
WHITE = Color(0.3848, 0.3629)
PINK = Color(0.55, 0.3394)
ORANGE = RED.blend(YELLOW, 0.5)

NAMED_COLORS: Mapping[str, Color] = MappingProxyType({
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "yellow": YELLOW,
    "magenta": MAGENTA,
    "cyan": CYAN,
    "purple": PURPLE,
    "white": WHITE,
    "pink": PINK,
    "orange": ORANGE,
})


def color_from_name(name: str) -> Color:
    """
    Resolve a preset name to a Color.

    Raises:
        ValueError: If the name is not a known preset
    """
    name_lower = name.lower().strip()
    if name_lower in NAMED_COLORS:
        return NAMED_COLORS[name_lower]
    raise ValueError(f"Unknown color name: {name}")


def resolve_color(color: Color | str | Sequence[float]) -> Color:
    """
    Resolve a color given as a Color, a preset name or an [x, y] pair.

    Raises:
        ValueError: If the value cannot be interpreted as a color
    """
    if isinstance(color, Color):
        return color
    if isinstance(color, str):
        return color_from_name(color)
    try:
        x, y = color
        return Color(float(x), float(y))
    except (TypeError, ValueError):
        raise ValueError(f"Invalid color: {color!r}")
