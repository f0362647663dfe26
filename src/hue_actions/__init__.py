"""
hue-actions: timed action trees for Philips Hue lights.

Build an action tree, compile it against a Setter (usually a HueBridge)
and run the resulting task:

    from hue_actions import HueBridge, Series, Immediate, Sleep, compile_action, run

    bridge = HueBridge("192.168.1.2", "username")
    show = Series([Immediate.of(on=True), Sleep(3.0), Immediate.of(on=False)])
    run(compile_action(show, bridge, lights=[1, 2]))
"""

from .actions import (
    Action,
    Immediate,
    Gradient,
    Sleep,
    Series,
    Parallel,
    Keyframe,
    GradientCurve,
    compile_action,
    load_action,
)
from .errors import (
    HueActionsError,
    ConfigurationError,
    SetError,
    NoSuchResourceError,
    DispatchError,
    InvalidTargetError,
    UnknownLightError,
    OpaqueDispatchError,
)
from .lights import Color, Maybe, NOTHING, LightPatch, HueBridge, MockSetter
from .tasks import run, start

__version__ = "0.1.0"

__all__ = [
    # Actions
    "Action",
    "Immediate",
    "Gradient",
    "Sleep",
    "Series",
    "Parallel",
    "Keyframe",
    "GradientCurve",
    "compile_action",
    "load_action",
    # Errors
    "HueActionsError",
    "ConfigurationError",
    "SetError",
    "NoSuchResourceError",
    "DispatchError",
    "InvalidTargetError",
    "UnknownLightError",
    "OpaqueDispatchError",
    # Lights
    "Color",
    "Maybe",
    "NOTHING",
    "LightPatch",
    "HueBridge",
    "MockSetter",
    # Runtime
    "run",
    "start",
]
