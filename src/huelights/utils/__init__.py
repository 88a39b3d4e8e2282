"""Utility modules for huelights."""

from huelights.utils.errors import (
    BridgeErrorType,
    BridgeReportedError,
    HueLightsError,
    InputValidationError,
    NotInitializedError,
    PartialDispatchError,
    ProtocolDecodingError,
    validate_identifier,
)

__all__ = [
    "BridgeErrorType",
    "BridgeReportedError",
    "HueLightsError",
    "InputValidationError",
    "NotInitializedError",
    "PartialDispatchError",
    "ProtocolDecodingError",
    "validate_identifier",
]
