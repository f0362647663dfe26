"""Error types raised while compiling and running light actions."""

from __future__ import annotations


class HueActionsError(Exception):
    """Base class for every error raised by hue_actions."""


class ConfigurationError(HueActionsError, ValueError):
    """Raised when an action tree, action file or config is malformed."""


class SetError(HueActionsError):
    """
    Raised by a Setter when the bridge rejects or never receives a patch.

    Attributes:
        response: Raw bytes received from the bridge (may be empty)
    """

    def __init__(self, response: bytes = b"", message: str | None = None):
        self.response = response
        super().__init__(message if message is not None else _decode(response))


class NoSuchResourceError(SetError):
    """Raised by a Setter when the bridge reports the light id does not exist."""


class DispatchError(HueActionsError):
    """
    A classified dispatch failure reported by a running action.

    The string form is always the raw bridge response.
    """

    def __init__(self, light_id: int, raw_response: bytes):
        self.light_id = light_id
        self.raw_response = raw_response
        super().__init__(_decode(raw_response))

    def __str__(self) -> str:
        return _decode(self.raw_response)


class InvalidTargetError(DispatchError):
    """Light id 0 was found inside an explicit, non-empty list of lights."""

    RAW_RESPONSE = b"Invalid light id"

    def __init__(self) -> None:
        super().__init__(0, self.RAW_RESPONSE)


class UnknownLightError(DispatchError):
    """The bridge reported that light_id does not exist."""


class OpaqueDispatchError(DispatchError):
    """Any other dispatch failure; only the raw response is known."""


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")
