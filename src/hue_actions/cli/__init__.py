"""
CLI entry points for hue-actions.

Contains the main executable script:
- run_action: run a YAML action file against a bridge
"""

from .run_action import main as run_action_main

__all__ = [
    "run_action_main",
]
