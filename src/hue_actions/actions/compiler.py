"""Lower an action tree into runnable tasks."""

from __future__ import annotations

from typing import Sequence

from ..errors import ConfigurationError
from ..lights.bridge import Setter
from ..tasks import (
    Execution,
    ParallelTask,
    RepeatingTask,
    SeriesTask,
    Task,
    TaskFunc,
)
from .dispatch import dispatch
from .gradient import run_gradient, validate_curve
from .nodes import Action, Gradient, Immediate, Parallel, Series, Sleep


def compile_action(action: Action, setter: Setter, lights: Sequence[int] = ()) -> Task:
    """
    Compile action into a Task that drives lights through setter.

    Args:
        action: Root of the action tree
        setter: What changes the lights
        lights: Default lights for the root; empty means all lights

    Raises:
        ConfigurationError: If a gradient curve is malformed
    """
    task = _compile_once(action, setter, tuple(lights))
    if action.repeat < 2:
        return task
    return RepeatingTask(task, action.repeat)


def _compile_once(action: Action, setter: Setter, default_lights: tuple[int, ...]) -> Task:
    lights = action.resolve_lights(default_lights)

    if isinstance(action, Series):
        return SeriesTask(compile_action(child, setter, lights) for child in action.children)

    if isinstance(action, Parallel):
        return ParallelTask(compile_action(child, setter, lights) for child in action.children)

    if isinstance(action, Gradient):
        validate_curve(action.curve)
        curve = action.curve
        turn_on = action.turn_on

        def do_gradient(e: Execution) -> None:
            run_gradient(e, setter, lights, curve, turn_on)

        return TaskFunc(do_gradient)

    if isinstance(action, Immediate):
        patch = action.patch
        return TaskFunc(lambda e: dispatch(setter, lights, patch))

    if isinstance(action, Sleep):
        if action.duration < 0:
            raise ConfigurationError(f"Sleep duration must not be negative, got {action.duration}")
        duration = action.duration
        return TaskFunc(lambda e: e.sleep(duration))

    raise ConfigurationError(f"Unknown action type: {type(action).__name__}")
