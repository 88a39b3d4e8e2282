"""Light state commands and their wire encoding."""

from datetime import timedelta
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from huelights.utils.color import hex_to_hue_sat_bri
from huelights.utils.errors import InputValidationError

UnitFloat = Annotated[float, Field(ge=0.0, le=1.0)]


class Alert(str, Enum):
    """Alert effects a light can play."""

    NONE = "none"
    SELECT = "select"  # single breathe cycle
    LSELECT = "lselect"  # breathe for 15 seconds


class Effect(str, Enum):
    """Dynamic effects."""

    NONE = "none"
    COLORLOOP = "colorloop"


class LightCommand(BaseModel):
    """A typed state change for one or more lights.

    Every field is optional. Fields left as None are omitted from the wire
    body, so a brightness-only command never switches a light off.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    on: bool | None = None
    brightness: int | None = Field(default=None, alias="bri", ge=0, le=254)
    hue: int | None = Field(default=None, ge=0, le=65535)
    saturation: int | None = Field(default=None, alias="sat", ge=0, le=254)
    color_coordinates: tuple[UnitFloat, UnitFloat] | None = Field(default=None, alias="xy")
    color_temperature: int | None = Field(default=None, alias="ct", ge=153, le=500)
    alert: Alert | None = None
    effect: Effect | None = None
    transition_time: timedelta | None = Field(default=None, alias="transitiontime")

    @field_serializer("transition_time")
    def _serialize_transition_time(self, value: timedelta | None) -> int | None:
        # Bridge counts in multiples of 100ms
        if value is None:
            return None
        return round(value.total_seconds() * 10)

    @classmethod
    def turn_on(cls) -> "LightCommand":
        return cls(on=True)

    @classmethod
    def turn_off(cls) -> "LightCommand":
        return cls(on=False)

    @classmethod
    def from_hex(cls, color: str) -> "LightCommand":
        """Build a command that sets hue, saturation and brightness from "#RRGGBB"."""
        hue, saturation, brightness = hex_to_hue_sat_bri(color)
        return cls(hue=hue, saturation=saturation, brightness=brightness)


def encode_state_command(command: LightCommand | None) -> str:
    """Encode a typed command as compact JSON with unset fields omitted.

    Raises:
        InputValidationError: If command is None
    """
    if command is None:
        raise InputValidationError("command")
    return command.model_dump_json(by_alias=True, exclude_none=True)


def encode_raw_command(text: str | None) -> str:
    """Pass a pre-built command body through untouched.

    The bridge accepts some bodies that are not strict JSON, e.g.
    ``{"hue":+10000}`` for a relative change, so the text is never parsed.

    Raises:
        InputValidationError: If text is None
    """
    if text is None:
        raise InputValidationError("command")
    return text
