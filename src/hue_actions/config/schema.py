"""Configuration dataclasses."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class BridgeConfig:
    """Philips Hue bridge configuration."""
    bridge_ip: str
    username: str
    timeout: float = 5.0  # Seconds per request


@dataclass
class HueActionsConfig:
    """Main application configuration."""
    bridge: Optional[BridgeConfig] = None
    default_lights: list[int] = field(default_factory=list)  # Empty = all lights
    log_level: str = "INFO"
