"""
Action file loading.

Action files are YAML documents describing one action tree.

Format:
    lights: [1, 4]
    series:
      - on: true
        color: red
      - gradient:
          refresh: 0.5
          keyframes:
            - {at: 0, color: [0.2, 0.1], brightness: 0}
            - {at: 10, color: blue, brightness: 255}
      - sleep: 3
      - off: true
        repeat: 2
"""

from pathlib import Path
from typing import Any

import yaml

from ..errors import ConfigurationError
from ..lights.color import Maybe, NOTHING, resolve_color
from ..lights.patch import LightPatch
from .gradient import GradientCurve, Keyframe
from .nodes import Action, Gradient, Immediate, Parallel, Series, Sleep

_COMMON_KEYS = {"lights", "repeat"}
_IMMEDIATE_KEYS = {"color", "brightness", "on", "off", "transition_time"}
_PAYLOAD_KEYS = ("series", "parallel", "gradient", "sleep")
_ALL_KEYS = _COMMON_KEYS | _IMMEDIATE_KEYS | set(_PAYLOAD_KEYS)


def load_action(path: Path) -> Action:
    """
    Load an action tree from a YAML file.

    Raises:
        ConfigurationError: If the file is not a valid action tree
    """
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"{path}: invalid YAML: {e}") from e
    return parse_action(data)


def parse_action(data: Any, where: str = "action") -> Action:
    """
    Build an action tree from parsed YAML data.

    Args:
        data: Mapping describing one node
        where: Location used in error messages

    Raises:
        ConfigurationError: If a key is unknown, payload kinds are mixed,
                            or a value is malformed
    """
    if not isinstance(data, dict):
        raise ConfigurationError(f"{where}: expected a mapping, got {type(data).__name__}")

    unknown = set(data) - _ALL_KEYS
    if unknown:
        raise ConfigurationError(f"{where}: unknown key(s) {sorted(unknown)}")

    kinds = [key for key in _PAYLOAD_KEYS if key in data]
    immediate_keys = _IMMEDIATE_KEYS & set(data)
    if "gradient" in data:
        # 'on' may accompany a gradient to turn the lights on first
        immediate_keys.discard("on")
    if immediate_keys:
        kinds.append("immediate")
    if len(kinds) != 1:
        raise ConfigurationError(
            f"{where}: expected exactly one of series, parallel, gradient, sleep "
            f"or light settings, got {kinds or 'none'}"
        )

    common = {
        "lights": _parse_lights(data.get("lights", []), where),
        "repeat": _parse_int(data.get("repeat", 0), f"{where}.repeat"),
    }

    kind = kinds[0]
    if kind == "series":
        return Series(_parse_children(data["series"], f"{where}.series"), **common)
    if kind == "parallel":
        return Parallel(_parse_children(data["parallel"], f"{where}.parallel"), **common)
    if kind == "gradient":
        turn_on = data.get("on", False)
        if not isinstance(turn_on, bool):
            raise ConfigurationError(f"{where}.on: expected true or false")
        return Gradient(_parse_curve(data["gradient"], f"{where}.gradient"), turn_on=turn_on, **common)
    if kind == "sleep":
        duration = _parse_number(data["sleep"], f"{where}.sleep")
        if duration < 0:
            raise ConfigurationError(f"{where}.sleep: must not be negative")
        return Sleep(duration, **common)
    return Immediate(_parse_patch(data, where), **common)


def _parse_children(data: Any, where: str) -> list[Action]:
    if not isinstance(data, list):
        raise ConfigurationError(f"{where}: expected a list")
    return [parse_action(child, f"{where}[{i}]") for i, child in enumerate(data)]


def _parse_patch(data: dict, where: str) -> LightPatch:
    if data.get("on") and data.get("off"):
        raise ConfigurationError(f"{where}: 'on' and 'off' cannot both be set")
    on: Maybe[bool] = NOTHING
    for key, value in (("on", True), ("off", False)):
        if key in data:
            if not isinstance(data[key], bool):
                raise ConfigurationError(f"{where}.{key}: expected true or false")
            if data[key]:
                on = Maybe.just(value)

    transition = NOTHING
    if "transition_time" in data:
        transition = Maybe.just(
            _parse_ranged_int(data["transition_time"], 0, 0xFFFF, f"{where}.transition_time")
        )

    return LightPatch(
        color=_parse_color(data, where),
        brightness=_parse_brightness(data, where),
        on=on,
        transition_time=transition,
    )


def _parse_curve(data: Any, where: str) -> GradientCurve:
    if not isinstance(data, dict):
        raise ConfigurationError(f"{where}: expected a mapping")
    unknown = set(data) - {"refresh", "keyframes"}
    if unknown:
        raise ConfigurationError(f"{where}: unknown key(s) {sorted(unknown)}")
    if "refresh" not in data:
        raise ConfigurationError(f"{where}: missing 'refresh'")
    refresh = _parse_number(data["refresh"], f"{where}.refresh")
    if refresh <= 0:
        raise ConfigurationError(f"{where}.refresh: must be positive")

    raw_keyframes = data.get("keyframes")
    if not isinstance(raw_keyframes, list):
        raise ConfigurationError(f"{where}.keyframes: expected a list")

    keyframes = []
    for i, item in enumerate(raw_keyframes):
        item_where = f"{where}.keyframes[{i}]"
        if not isinstance(item, dict):
            raise ConfigurationError(f"{item_where}: expected a mapping")
        unknown = set(item) - {"at", "color", "brightness"}
        if unknown:
            raise ConfigurationError(f"{item_where}: unknown key(s) {sorted(unknown)}")
        if "at" not in item:
            raise ConfigurationError(f"{item_where}: missing 'at'")
        keyframes.append(Keyframe(
            offset=_parse_number(item["at"], f"{item_where}.at"),
            color=_parse_color(item, item_where),
            brightness=_parse_brightness(item, item_where),
        ))
    return GradientCurve(tuple(keyframes), refresh)


def _parse_color(data: dict, where: str) -> Maybe:
    if "color" not in data:
        return NOTHING
    try:
        color = resolve_color(data["color"])
    except ValueError as e:
        raise ConfigurationError(f"{where}.color: {e}") from e
    if not (0 <= color.x <= 1 and 0 <= color.y <= 1):
        raise ConfigurationError(f"{where}.color: xy {color} is outside 0-1")
    return Maybe.just(color)


def _parse_brightness(data: dict, where: str) -> Maybe:
    if "brightness" not in data:
        return NOTHING
    return Maybe.just(_parse_ranged_int(data["brightness"], 0, 255, f"{where}.brightness"))


def _parse_lights(data: Any, where: str) -> tuple[int, ...]:
    if not isinstance(data, list):
        raise ConfigurationError(f"{where}.lights: expected a list of light ids")
    return tuple(_parse_int(light, f"{where}.lights") for light in data)


def _parse_int(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{where}: expected an integer, got {value!r}")
    return value


def _parse_ranged_int(value: Any, low: int, high: int, where: str) -> int:
    result = _parse_int(value, where)
    if not low <= result <= high:
        raise ConfigurationError(f"{where}: {result} is outside {low}-{high}")
    return result


def _parse_number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{where}: expected a number, got {value!r}")
    return float(value)
