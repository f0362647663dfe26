"""Apply one patch to a set of target lights."""

from __future__ import annotations

import logging
from typing import Sequence

from ..errors import (
    DispatchError,
    InvalidTargetError,
    NoSuchResourceError,
    OpaqueDispatchError,
    SetError,
    UnknownLightError,
)
from ..lights.bridge import Setter
from ..lights.patch import LightPatch

LOGGER = logging.getLogger(__name__)

# Light id meaning "every light".
ALL_LIGHTS = 0


def dispatch(setter: Setter, lights: Sequence[int], patch: LightPatch) -> None:
    """
    Send patch to each light in order.

    An empty lights sequence broadcasts once to ALL_LIGHTS. Dispatch stops
    at the first failure; later lights are never contacted.

    Raises:
        InvalidTargetError: If ALL_LIGHTS appears in a non-empty lights list
        UnknownLightError: If the bridge does not know a light
        OpaqueDispatchError: For any other Setter failure
    """
    if not lights:
        _set_one(setter, ALL_LIGHTS, patch)
        return
    for light_id in lights:
        if light_id == ALL_LIGHTS:
            LOGGER.warning("Light id 0 is not allowed in an explicit list %s", list(lights))
            raise InvalidTargetError()
        _set_one(setter, light_id, patch)


def _set_one(setter: Setter, light_id: int, patch: LightPatch) -> None:
    LOGGER.debug("light %d <- %s", light_id, patch)
    try:
        setter.set(light_id, patch)
    except SetError as e:
        error = classify(light_id, e)
        LOGGER.warning("Dispatch to light %d failed: %s", light_id, type(error).__name__)
        raise error from e


def classify(light_id: int, error: SetError) -> DispatchError:
    """Turn a Setter failure into the matching DispatchError."""
    if isinstance(error, NoSuchResourceError):
        return UnknownLightError(light_id, error.response)
    return OpaqueDispatchError(light_id, error.response)
