"""Error types for huelights.

Validation and initialization errors are raised before any request leaves the
client. Bridge-reported errors carry the bridge's own description verbatim.
"""

from enum import IntEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from huelights.bridge.dispatch import DispatchFailure, DispatchResult


class BridgeErrorType(IntEnum):
    """Error codes documented for the bridge's v1 API."""

    UNAUTHORIZED_USER = 1
    INVALID_JSON = 2
    RESOURCE_NOT_AVAILABLE = 3
    METHOD_NOT_AVAILABLE = 4
    MISSING_PARAMETERS = 5
    PARAMETER_NOT_AVAILABLE = 6
    INVALID_VALUE = 7
    PARAMETER_NOT_MODIFIABLE = 8
    TOO_MANY_ITEMS = 11
    PORTAL_CONNECTION_REQUIRED = 12
    LINK_BUTTON_NOT_PRESSED = 101
    DEVICE_OFF = 201
    INTERNAL_ERROR = 901


class HueLightsError(Exception):
    """Base class for all huelights errors."""


class InputValidationError(HueLightsError, ValueError):
    """Raised when an argument is missing or blank."""

    def __init__(self, argument: str, message: str | None = None):
        self.argument = argument
        super().__init__(message or f"{argument} can not be None")


class NotInitializedError(HueLightsError, RuntimeError):
    """Raised when an operation is attempted before the bridge address is known."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message or "Client is not initialized, call initialize() with a bridge connection first"
        )


class BridgeReportedError(HueLightsError):
    """Raised when the bridge answers with an error entry."""

    def __init__(
        self,
        error_type: int,
        description: str,
        address: str | None = None,
    ):
        self.error_type = error_type
        self.description = description
        self.address = address
        super().__init__(description)

    @property
    def known_type(self) -> BridgeErrorType | None:
        """The documented error code, or None if the bridge sent an unknown one."""
        try:
            return BridgeErrorType(self.error_type)
        except ValueError:
            return None

    @classmethod
    def from_payload(cls, error: dict[str, Any]) -> "BridgeReportedError":
        """Build from the bridge's ``{"type", "address", "description"}`` object."""
        error_type = error.get("type")
        description = error.get("description")
        if not isinstance(error_type, int) or not isinstance(description, str):
            raise ProtocolDecodingError(f"Malformed error entry: {error!r}")
        return cls(error_type, description, error.get("address"))


class ProtocolDecodingError(HueLightsError):
    """Raised when a response body does not match any expected shape."""


class PartialDispatchError(HueLightsError):
    """Raised after a fan-out completes with one or more failed targets."""

    def __init__(self, result: "DispatchResult"):
        self.result = result
        failed = ", ".join(failure.target for failure in result.failures)
        super().__init__(
            f"Command failed for {len(result.failures)} of {len(result.targets)} "
            f"light(s): {failed}"
        )

    @property
    def failures(self) -> list["DispatchFailure"]:
        """Every failed target with the exception it raised."""
        return self.result.failures


def validate_identifier(value: str | None, argument: str = "id") -> str:
    """Reject None and blank identifiers.

    Returns:
        The identifier, unchanged

    Raises:
        InputValidationError: If the identifier is None or blank after trimming
    """
    if value is None:
        raise InputValidationError(argument)
    if value.strip() == "":
        raise InputValidationError(
            argument, f"{argument} can not be empty or a blank string"
        )
    return value
