"""
Action tree nodes.

An action tree describes light behavior over time. Each node is exactly
one of Immediate, Gradient, Sleep, Series or Parallel, and can also
override the lights it targets and ask to be repeated.

Example:
    Series([
        Immediate.of(on=True, lights=[2, 3]),
        Sleep(3.0),
        Immediate.of(on=False),
    ])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

from ..lights.color import Color
from ..lights.patch import LightPatch
from .gradient import GradientCurve

if TYPE_CHECKING:
    from ..lights.bridge import Setter
    from ..tasks import Task


@dataclass(frozen=True, kw_only=True)
class Action:
    """
    Fields shared by every node.

    Attributes:
        lights: Light ids to target. Empty means the lights inherited from
                the parent (or passed to compile_action for the root).
        repeat: Run the node this many times in a row; below 2 means once.
    """
    lights: tuple[int, ...] = ()
    repeat: int = 0

    def __post_init__(self):
        object.__setattr__(self, "lights", tuple(self.lights))

    def resolve_lights(self, default: Sequence[int]) -> tuple[int, ...]:
        """Return this node's lights, or default when it has no override."""
        return self.lights if self.lights else tuple(default)

    def as_task(self, setter: "Setter", lights: Sequence[int] = ()) -> "Task":
        """Compile this tree; see compile_action."""
        from .compiler import compile_action
        return compile_action(self, setter, lights)


@dataclass(frozen=True)
class Immediate(Action):
    """Send one patch right away."""
    patch: LightPatch = field(default_factory=LightPatch)

    @classmethod
    def of(
        cls,
        color: Color | None = None,
        brightness: int | None = None,
        on: bool | None = None,
        transition_time: int | None = None,
        lights: Sequence[int] = (),
        repeat: int = 0,
    ) -> "Immediate":
        """Build from plain values; None means leave unchanged."""
        patch = LightPatch.of(
            color=color,
            brightness=brightness,
            on=on,
            transition_time=transition_time,
        )
        return cls(patch, lights=tuple(lights), repeat=repeat)


@dataclass(frozen=True)
class Gradient(Action):
    """Play a gradient curve. turn_on adds on=True to the first patch."""
    curve: GradientCurve
    turn_on: bool = False


@dataclass(frozen=True)
class Sleep(Action):
    """Wait for duration seconds without touching any light."""
    duration: float


@dataclass(frozen=True)
class Series(Action):
    """Run children one after another."""
    children: tuple[Action, ...]

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class Parallel(Action):
    """Run children at the same time."""
    children: tuple[Action, ...]

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "children", tuple(self.children))
