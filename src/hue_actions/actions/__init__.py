"""
Action trees for Hue lights.

This package provides:
- Action nodes (Immediate, Gradient, Sleep, Series, Parallel)
- Gradient curves built from keyframes
- The compiler turning a tree into a runnable task
- The dispatcher that sends one patch to a set of lights
- YAML action file loading
"""

from .nodes import Action, Immediate, Gradient, Sleep, Series, Parallel
from .gradient import Keyframe, GradientCurve, run_gradient, validate_curve
from .dispatch import ALL_LIGHTS, dispatch
from .compiler import compile_action
from .loader import load_action, parse_action

__all__ = [
    # Nodes
    "Action",
    "Immediate",
    "Gradient",
    "Sleep",
    "Series",
    "Parallel",
    # Gradients
    "Keyframe",
    "GradientCurve",
    "run_gradient",
    "validate_curve",
    # Dispatch
    "ALL_LIGHTS",
    "dispatch",
    # Compiler
    "compile_action",
    # Files
    "load_action",
    "parse_action",
]
