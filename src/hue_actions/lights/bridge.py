"""Hue bridge REST transport."""

from __future__ import annotations

import json
import logging
import threading
from typing import Any, Protocol

import requests

from ..errors import NoSuchResourceError, SetError
from .color import Color
from .patch import LightPatch

LOGGER = logging.getLogger(__name__)

# Bridge error type for "resource not available".
_NO_SUCH_RESOURCE = 3


class Setter(Protocol):
    """
    Anything that can apply a LightPatch to a light.

    light_id 0 means all lights. Returns the raw bridge response and
    raises SetError (or NoSuchResourceError) on failure.
    """

    def set(self, light_id: int, patch: LightPatch) -> bytes:
        ...


class HueBridge:
    """
    Connection to a Hue bridge over the v1 REST API.

    Args:
        bridge_ip: Private IP address of the bridge
        username: Whitelisted user id (see the Hue developer docs)
        timeout: Seconds to wait for each request
    """

    def __init__(self, bridge_ip: str, username: str, timeout: float = 5.0):
        self.bridge_ip = bridge_ip
        self.username = username
        self.timeout = timeout

    def set(self, light_id: int, patch: LightPatch) -> bytes:
        """
        Apply patch to a light, or to every light when light_id is 0.

        Returns:
            Raw response body from the bridge

        Raises:
            NoSuchResourceError: If the bridge does not know light_id
            SetError: If the request fails or the bridge reports any other error
        """
        body = json.dumps(patch.to_json())
        try:
            response = requests.put(self._state_url(light_id), data=body, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise SetError(str(e).encode("utf-8")) from e
        raw = response.content
        _raise_for_bridge_error(raw)
        return raw

    def get(self, light_id: int) -> LightPatch:
        """
        Read the current state of a light.

        Returns:
            LightPatch with color, brightness and on populated

        Raises:
            NoSuchResourceError: If the bridge does not know light_id
            SetError: If the request fails or the response has no state
        """
        url = f"{self._base_url()}/lights/{light_id}"
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise SetError(str(e).encode("utf-8")) from e
        raw = response.content
        try:
            data = json.loads(raw)
        except ValueError:
            data = None

        state = data.get("state") if isinstance(data, dict) else None
        if not state or len(state.get("xy") or []) != 2:
            _raise_for_bridge_error(raw)
            raise SetError(raw, "Bridge response contains no light state")

        x, y = state["xy"]
        return LightPatch.of(
            color=Color(x, y),
            brightness=state.get("bri", 0),
            on=state.get("on", False),
        )

    def _base_url(self) -> str:
        return f"http://{self.bridge_ip}/api/{self.username}"

    def _state_url(self, light_id: int) -> str:
        if light_id == 0:
            return f"{self._base_url()}/groups/0/action"
        return f"{self._base_url()}/lights/{light_id}/state"


def _raise_for_bridge_error(raw: bytes) -> None:
    """Raise if raw is a bridge error list; unparsable bodies count as success."""
    try:
        response: Any = json.loads(raw)
    except ValueError:
        return
    if not isinstance(response, list) or not response:
        return
    first = response[0]
    if not isinstance(first, dict) or not first.get("error"):
        return
    error = first["error"]
    if isinstance(error, dict) and error.get("type") == _NO_SUCH_RESOURCE:
        raise NoSuchResourceError(raw)
    raise SetError(raw)


class MockSetter:
    """Setter that records patches instead of talking to a bridge."""

    def __init__(self):
        self._lock = threading.Lock()
        self.calls: list[tuple[int, LightPatch]] = []

    def set(self, light_id: int, patch: LightPatch) -> bytes:
        with self._lock:
            self.calls.append((light_id, patch))
        LOGGER.info("light %d <- %s", light_id, patch)
        return b"[]"
