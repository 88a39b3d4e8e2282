"""Light model."""

from dataclasses import dataclass, field
from typing import Any

from huelights.utils.errors import ProtocolDecodingError


@dataclass(eq=False)
class Light:
    """A light known to the bridge.

    Ids are assigned by the bridge. Two lights are equal when their ids match,
    regardless of name or state.
    """

    id: str
    name: str = ""
    state: dict[str, Any] = field(default_factory=dict)
    type: str | None = None
    model_id: str | None = None
    sw_version: str | None = None
    unique_id: str | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Light):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def is_on(self) -> bool:
        """Whether the last known state has the light switched on."""
        return bool(self.state.get("on", False))

    @classmethod
    def from_envelope(cls, light_id: str, data: dict[str, Any]) -> "Light":
        """Build a light from the bridge's JSON object for it.

        Args:
            light_id: Id the light is addressed by (not part of the body)
            data: Parsed light object

        Raises:
            ProtocolDecodingError: If a field has the wrong type
        """
        name = data.get("name", "")
        state = data.get("state", {})
        if not isinstance(name, str):
            raise ProtocolDecodingError(f"Light {light_id} has a non-string name: {name!r}")
        if not isinstance(state, dict):
            raise ProtocolDecodingError(f"Light {light_id} has a non-object state: {state!r}")

        return cls(
            id=light_id,
            name=name,
            state=dict(state),
            type=data.get("type"),
            model_id=data.get("modelid"),
            sw_version=data.get("swversion"),
            unique_id=data.get("uniqueid"),
        )

    def to_state_dict(self) -> dict[str, Any]:
        """Return current state as dict."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "is_on": self.is_on,
            "state": dict(self.state),
        }
