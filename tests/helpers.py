"""Recording setter shared by the action tests."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from hue_actions.lights.color import Color, Maybe, NOTHING
from hue_actions.lights.patch import LightPatch
from hue_actions.tasks import Clock


@dataclass(frozen=True)
class Request:
    """One recorded Setter call, stamped with the elapsed fake time."""
    light: int
    color: Maybe = NOTHING
    brightness: Maybe = NOTHING
    on: Maybe = NOTHING
    at: float = 0.0


def request(
    light: int,
    color: Color | None = None,
    brightness: int | None = None,
    on: bool | None = None,
    at: float = 0.0,
) -> Request:
    return Request(
        light=light,
        color=Maybe.from_optional(color),
        brightness=Maybe.from_optional(brightness),
        on=Maybe.from_optional(on),
        at=at,
    )


class RecordingSetter:
    """
    Setter that records each call and optionally raises.

    Args:
        clock: Clock used to stamp calls relative to construction time
        error: Exception raised after recording a call
        fail_on: Light ids that raise error; None means every light
    """

    def __init__(self, clock: Clock, error: Exception | None = None, fail_on: set[int] | None = None):
        self.clock = clock
        self.start = clock.now()
        self.error = error
        self.fail_on = fail_on
        self.requests: list[Request] = []
        self.patches: list[LightPatch] = []
        self._lock = threading.Lock()

    def set(self, light_id: int, patch: LightPatch) -> bytes:
        with self._lock:
            self.patches.append(patch)
            self.requests.append(Request(
                light=light_id,
                color=patch.color,
                brightness=patch.brightness,
                on=patch.on,
                at=self.clock.now() - self.start,
            ))
        if self.error is not None and (self.fail_on is None or light_id in self.fail_on):
            raise self.error
        return b'[{"success": {}}]'
