"""Configuration schema and loading."""

from .schema import BridgeConfig, HueActionsConfig
from .loader import load_config, save_config

__all__ = [
    "BridgeConfig",
    "HueActionsConfig",
    "load_config",
    "save_config",
]
