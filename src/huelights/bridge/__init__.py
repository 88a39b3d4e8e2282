"""Bridge access: connection, transport, response interpretation and fan-out."""

from huelights.bridge.connection import BridgeConnection, BridgeSnapshot
from huelights.bridge.dispatch import (
    ALL_LIGHTS_GROUP,
    DispatchFailure,
    DispatchResult,
    FanOutDispatcher,
)
from huelights.bridge.responses import (
    Envelope,
    EnvelopeShape,
    interpret_action_results,
    interpret_bridge_snapshot,
    interpret_discovered_devices,
    interpret_single_resource,
    parse_envelope,
)
from huelights.bridge.transport import BridgeTransport

__all__ = [
    "ALL_LIGHTS_GROUP",
    "BridgeConnection",
    "BridgeSnapshot",
    "BridgeTransport",
    "DispatchFailure",
    "DispatchResult",
    "Envelope",
    "EnvelopeShape",
    "FanOutDispatcher",
    "interpret_action_results",
    "interpret_bridge_snapshot",
    "interpret_discovered_devices",
    "interpret_single_resource",
    "parse_envelope",
]
