"""Hue light color model, patches and bridge transport."""

from .color import (
    Color,
    Maybe,
    NOTHING,
    BRIGHT,
    DIM,
    NAMED_COLORS,
    color_from_name,
    resolve_color,
    maybe_blend_color,
    maybe_blend_brightness,
)
from .patch import LightPatch
from .bridge import Setter, HueBridge, MockSetter

__all__ = [
    "Color",
    "Maybe",
    "NOTHING",
    "BRIGHT",
    "DIM",
    "NAMED_COLORS",
    "color_from_name",
    "resolve_color",
    "maybe_blend_color",
    "maybe_blend_brightness",
    "LightPatch",
    "Setter",
    "HueBridge",
    "MockSetter",
]
