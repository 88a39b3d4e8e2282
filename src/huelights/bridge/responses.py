"""Interpretation of bridge response bodies.

The bridge reports domain errors inside 200 responses, as an array of
``{"error": {...}}`` entries, so the JSON shape decides the outcome rather
than the HTTP status. Each body is parsed once into an ``Envelope`` and the
interpreters branch on its shape.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from huelights.bridge.connection import BridgeSnapshot
from huelights.models.light import Light
from huelights.utils.errors import (
    BridgeErrorType,
    BridgeReportedError,
    ProtocolDecodingError,
)

logger = logging.getLogger(__name__)

# Metadata key in the new-lights listing, not a device
LAST_SCAN_KEY = "lastscan"


class EnvelopeShape(Enum):
    """Top-level JSON shape of a response body."""

    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"


@dataclass(frozen=True)
class Envelope:
    """A parsed response body tagged with its shape."""

    shape: EnvelopeShape
    value: Any


def parse_envelope(body: str) -> Envelope:
    """Parse a response body and tag it with its shape.

    Raises:
        ProtocolDecodingError: If the body is not JSON
    """
    try:
        value = json.loads(body)
    except (TypeError, ValueError) as e:
        raise ProtocolDecodingError(f"Bridge response is not JSON: {e}") from e

    if isinstance(value, dict):
        return Envelope(EnvelopeShape.OBJECT, value)
    if isinstance(value, list):
        return Envelope(EnvelopeShape.ARRAY, value)
    return Envelope(EnvelopeShape.SCALAR, value)


def _first_error(entries: list[Any]) -> BridgeReportedError:
    """Build the error carried by the first entry of an error envelope."""
    if not entries:
        raise ProtocolDecodingError("Bridge returned an empty error array")
    first = entries[0]
    error = first.get("error") if isinstance(first, dict) else None
    if not isinstance(error, dict):
        raise ProtocolDecodingError(f"Bridge array has no error entry: {first!r}")
    return BridgeReportedError.from_payload(error)


def interpret_single_resource(light_id: str, body: str) -> Light | None:
    """Interpret the response to ``GET lights/{id}``.

    Returns:
        The light, or None if the bridge reports it does not exist

    Raises:
        BridgeReportedError: For any bridge error other than not-found
        ProtocolDecodingError: If the body has an unexpected shape
    """
    envelope = parse_envelope(body)

    if envelope.shape is EnvelopeShape.ARRAY:
        error = _first_error(envelope.value)
        if error.error_type == BridgeErrorType.RESOURCE_NOT_AVAILABLE:
            logger.debug(f"Light {light_id} not found on bridge")
            return None
        raise error

    if envelope.shape is EnvelopeShape.OBJECT:
        return Light.from_envelope(light_id, envelope.value)

    raise ProtocolDecodingError(f"Unexpected response for light {light_id}: {envelope.value!r}")


def interpret_discovered_devices(body: str) -> list[Light]:
    """Interpret the response to ``GET lights/new``.

    Every key except ``lastscan`` is a newly found light. Lights come back in
    the bridge's key order. A body that is not an object means nothing was
    found and yields an empty list.

    Raises:
        ProtocolDecodingError: If the body is not JSON or an entry is malformed
    """
    envelope = parse_envelope(body)
    if envelope.shape is not EnvelopeShape.OBJECT:
        logger.debug(f"No new lights in {envelope.shape.value} response")
        return []

    lights = []
    for light_id, entry in envelope.value.items():
        if light_id == LAST_SCAN_KEY:
            continue
        if not isinstance(entry, dict):
            raise ProtocolDecodingError(f"New light {light_id} is not an object: {entry!r}")
        lights.append(Light.from_envelope(light_id, entry))

    return lights


def interpret_action_results(body: str) -> list[dict[str, Any]]:
    """Interpret the response to a PUT on a light or group.

    Returns:
        The ``success`` payloads, in order

    Raises:
        BridgeReportedError: For the first error entry
        ProtocolDecodingError: If the body is not an array of results
    """
    envelope = parse_envelope(body)
    if envelope.shape is not EnvelopeShape.ARRAY:
        raise ProtocolDecodingError(f"Expected a result array, got: {envelope.value!r}")

    successes = []
    for entry in envelope.value:
        if not isinstance(entry, dict):
            raise ProtocolDecodingError(f"Malformed result entry: {entry!r}")
        if "error" in entry:
            error = entry["error"]
            if not isinstance(error, dict):
                raise ProtocolDecodingError(f"Malformed error entry: {error!r}")
            raise BridgeReportedError.from_payload(error)
        if "success" in entry:
            successes.append(entry["success"])
        else:
            raise ProtocolDecodingError(f"Result entry is neither success nor error: {entry!r}")

    return successes


def interpret_bridge_snapshot(body: str) -> BridgeSnapshot:
    """Interpret the full datastore returned by ``GET {base}``.

    Raises:
        BridgeReportedError: If the bridge answered with an error array
        ProtocolDecodingError: If the body has an unexpected shape
    """
    envelope = parse_envelope(body)

    if envelope.shape is EnvelopeShape.ARRAY:
        raise _first_error(envelope.value)
    if envelope.shape is not EnvelopeShape.OBJECT:
        raise ProtocolDecodingError(f"Unexpected bridge snapshot: {envelope.value!r}")

    lights_data = envelope.value.get("lights", {})
    config = envelope.value.get("config", {})
    if not isinstance(lights_data, dict) or not isinstance(config, dict):
        raise ProtocolDecodingError("Bridge snapshot has malformed lights or config section")

    lights = []
    for light_id, entry in lights_data.items():
        if not isinstance(entry, dict):
            raise ProtocolDecodingError(f"Light {light_id} is not an object: {entry!r}")
        lights.append(Light.from_envelope(light_id, entry))

    return BridgeSnapshot(lights=lights, config=config)
