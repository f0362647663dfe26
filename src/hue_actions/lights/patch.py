"""Partial light state changes sent to the bridge."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .color import Color, Maybe, NOTHING


@dataclass(frozen=True)
class LightPatch:
    """
    A desired partial state change for a light.

    Every field is independent; NOTHING means leave the attribute as-is.

    Attributes:
        color: Target xy color
        brightness: Target brightness (0-255)
        on: True to turn the light on, False to turn it off
        transition_time: Transition time in multiples of 100ms
    """
    color: Maybe[Color] = NOTHING
    brightness: Maybe[int] = NOTHING
    on: Maybe[bool] = NOTHING
    transition_time: Maybe[int] = NOTHING

    @classmethod
    def of(
        cls,
        color: Color | None = None,
        brightness: int | None = None,
        on: bool | None = None,
        transition_time: int | None = None,
    ) -> "LightPatch":
        """Build a patch from plain values; None means leave unchanged."""
        return cls(
            color=Maybe.from_optional(color),
            brightness=Maybe.from_optional(brightness),
            on=Maybe.from_optional(on),
            transition_time=Maybe.from_optional(transition_time),
        )

    @property
    def is_empty(self) -> bool:
        return not (
            self.color.valid
            or self.brightness.valid
            or self.on.valid
            or self.transition_time.valid
        )

    def to_json(self) -> dict[str, Any]:
        """
        Return the bridge request body holding only the present fields.

        A brightness carried by the color is sent when the patch has no
        brightness of its own.
        """
        body: dict[str, Any] = {}
        if self.color.valid:
            body["xy"] = [self.color.value.x, self.color.value.y]
        if self.brightness.valid:
            body["bri"] = self.brightness.value
        elif self.color.valid and self.color.value.brightness is not None:
            body["bri"] = self.color.value.brightness
        if self.on.valid:
            body["on"] = self.on.value
        if self.transition_time.valid:
            body["transitiontime"] = self.transition_time.value
        return body

    def __str__(self) -> str:
        parts = [
            f"{name}={value}"
            for name, value in (
                ("color", self.color),
                ("bri", self.brightness),
                ("on", self.on),
                ("transition", self.transition_time),
            )
            if value.valid
        ]
        return "LightPatch(" + ", ".join(parts) + ")"
