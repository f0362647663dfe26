"""
Gradients: color and brightness changes over time.

A GradientCurve is a list of keyframes. While a gradient runs, the light
is refreshed every `refresh` seconds with the color and brightness
linearly interpolated between the two keyframes around the elapsed time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..errors import ConfigurationError
from ..lights.bridge import Setter
from ..lights.color import (
    Color,
    Maybe,
    NOTHING,
    maybe_blend_brightness,
    maybe_blend_color,
)
from ..lights.patch import LightPatch
from ..tasks import Execution
from .dispatch import dispatch

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Keyframe:
    """
    The color and/or brightness a light should have at a point in a gradient.

    Attributes:
        offset: Seconds into the gradient
        color: Color at this point; NOTHING leaves color unchanged
        brightness: Brightness at this point; NOTHING leaves it unchanged
    """
    offset: float
    color: Maybe[Color] = NOTHING
    brightness: Maybe[int] = NOTHING


@dataclass(frozen=True)
class GradientCurve:
    """
    Keyframes plus the refresh interval.

    The first keyframe must have offset 0 and offsets must not decrease.
    Keyframes sharing an offset make an instantaneous jump.
    """
    keyframes: tuple[Keyframe, ...]
    refresh: float

    def __post_init__(self):
        object.__setattr__(self, "keyframes", tuple(self.keyframes))

    @property
    def duration(self) -> float:
        return self.keyframes[-1].offset if self.keyframes else 0.0


def validate_curve(curve: GradientCurve) -> None:
    """
    Raises:
        ConfigurationError: If the curve is empty, does not start at 0 or
                            has a non-positive refresh
    """
    if curve.refresh <= 0:
        raise ConfigurationError(f"Gradient refresh must be positive, got {curve.refresh}")
    if not curve.keyframes:
        raise ConfigurationError("Gradient must have at least one keyframe")
    if curve.keyframes[0].offset != 0:
        raise ConfigurationError(
            f"First keyframe offset must be 0, got {curve.keyframes[0].offset}"
        )


def run_gradient(
    execution: Execution,
    setter: Setter,
    lights: Sequence[int],
    curve: GradientCurve,
    turn_on: bool = False,
) -> None:
    """
    Play curve on lights until the last keyframe is reached.

    The first patch carries on=True when turn_on is set; no later patch
    does. After the loop the last keyframe is always sent verbatim so the
    light ends in the exact final state. Dispatch failures propagate;
    cancellation during a refresh sleep stops without the final patch.
    """
    keyframes = curve.keyframes
    start_time = execution.now()
    elapsed = 0.0
    on = Maybe.just(True) if turn_on else NOTHING
    idx = 1
    while idx < len(keyframes):
        if elapsed >= keyframes[idx].offset:
            idx += 1
            continue
        first = keyframes[idx - 1]
        second = keyframes[idx]
        ratio = (elapsed - first.offset) / (second.offset - first.offset)
        patch = LightPatch(
            color=maybe_blend_color(first.color, second.color, ratio),
            brightness=maybe_blend_brightness(first.brightness, second.brightness, ratio),
            on=on,
        )
        dispatch(setter, lights, patch)
        on = NOTHING
        if not execution.sleep(curve.refresh):
            LOGGER.debug("Gradient cancelled at %.3fs", elapsed)
            return
        elapsed = execution.now() - start_time

    # on is still set here only when nothing was emitted yet.
    last = keyframes[-1]
    dispatch(setter, lights, LightPatch(color=last.color, brightness=last.brightness, on=on))
