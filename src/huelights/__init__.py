"""Async client for a lighting bridge's local lights API."""

from huelights.bridge import BridgeConnection, DispatchResult
from huelights.client import LightClient
from huelights.models import Light, LightCommand
from huelights.utils.errors import (
    BridgeReportedError,
    HueLightsError,
    InputValidationError,
    NotInitializedError,
    PartialDispatchError,
    ProtocolDecodingError,
)

__all__ = [
    "BridgeConnection",
    "BridgeReportedError",
    "DispatchResult",
    "HueLightsError",
    "InputValidationError",
    "Light",
    "LightClient",
    "LightCommand",
    "NotInitializedError",
    "PartialDispatchError",
    "ProtocolDecodingError",
]
