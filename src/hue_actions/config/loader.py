"""Configuration file loading and saving."""

import logging
from pathlib import Path
from typing import Any
import yaml

from ..errors import ConfigurationError
from .schema import BridgeConfig, HueActionsConfig


def load_config(config_path: Path) -> HueActionsConfig:
    """
    Load configuration from YAML file.

    Raises:
        ConfigurationError: If the file is not valid YAML, the bridge
                            section is missing a required key or the
                            log level is unknown
    """
    with open(config_path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"{config_path}: invalid YAML: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{config_path}: expected a mapping at the top level")

    # Parse bridge config
    bridge = None
    if data.get("bridge"):
        bridge_data = data["bridge"]
        try:
            bridge = BridgeConfig(
                bridge_ip=bridge_data["bridge_ip"],
                username=bridge_data["username"],
                timeout=bridge_data.get("timeout", 5.0),
            )
        except KeyError as e:
            raise ConfigurationError(f"{config_path}: bridge is missing {e.args[0]!r}") from e

    default_lights = data.get("default_lights") or []
    if not isinstance(default_lights, list) or not all(
        isinstance(light, int) and not isinstance(light, bool) for light in default_lights
    ):
        raise ConfigurationError(f"{config_path}: default_lights must be a list of light ids")

    log_level = str(data.get("log_level", "INFO")).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"{config_path}: unknown log_level {data['log_level']!r}")

    return HueActionsConfig(
        bridge=bridge,
        default_lights=default_lights,
        log_level=log_level,
    )


def save_config(config: HueActionsConfig, config_path: Path) -> None:
    """Save configuration to YAML file."""
    data: dict[str, Any] = {
        "default_lights": list(config.default_lights),
        "log_level": config.log_level,
    }

    if config.bridge:
        data["bridge"] = {
            "bridge_ip": config.bridge.bridge_ip,
            "username": config.bridge.username,
            "timeout": config.bridge.timeout,
        }

    with open(config_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
