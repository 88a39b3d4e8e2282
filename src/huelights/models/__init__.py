"""Data models for huelights."""

from huelights.models.command import (
    Alert,
    Effect,
    LightCommand,
    encode_raw_command,
    encode_state_command,
)
from huelights.models.light import Light

__all__ = [
    "Alert",
    "Effect",
    "Light",
    "LightCommand",
    "encode_raw_command",
    "encode_state_command",
]
