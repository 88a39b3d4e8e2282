"""Light client for the bridge's lights API."""

import json
import logging
from pathlib import Path
from typing import Iterable

from huelights.bridge.connection import BridgeConnection, BridgeSnapshot
from huelights.bridge.dispatch import (
    DEFAULT_PARALLEL_REQUESTS,
    DispatchResult,
    FanOutDispatcher,
)
from huelights.bridge.responses import (
    interpret_action_results,
    interpret_bridge_snapshot,
    interpret_discovered_devices,
    interpret_single_resource,
)
from huelights.bridge.transport import BridgeTransport
from huelights.config import HueLightsConfig, SecretsConfig, load_config, load_secrets
from huelights.models.command import LightCommand, encode_raw_command, encode_state_command
from huelights.models.light import Light
from huelights.utils.errors import (
    InputValidationError,
    NotInitializedError,
    PartialDispatchError,
    validate_identifier,
)

logger = logging.getLogger(__name__)

# Not strict JSON: the leading "+" asks the bridge for a relative change
NEXT_HUE_COLOR_COMMAND = '{"hue":+10000,"sat":255}'


def _validate_targets(light_ids: Iterable[str] | None) -> list[str]:
    """Materialise a target set, rejecting bare strings and blank ids."""
    if light_ids is None:
        return []
    if isinstance(light_ids, str):
        raise InputValidationError(
            "light_ids", "light_ids must be a collection of ids, not a single string"
        )
    targets = list(light_ids)
    for light_id in targets:
        validate_identifier(light_id, "light_ids")
    return targets


class LightClient:
    """Reads, renames and commands lights through a bridge.

    A client needs a ``BridgeConnection`` before it can do anything. Pass one
    to the constructor or to ``initialize()``. Until then every operation
    raises ``NotInitializedError`` without touching the network.
    """

    def __init__(
        self,
        connection: BridgeConnection | None = None,
        *,
        transport: BridgeTransport | None = None,
        parallel_requests: int = DEFAULT_PARALLEL_REQUESTS,
    ):
        if parallel_requests < 1:
            raise ValueError(f"parallel_requests must be at least 1, got {parallel_requests}")
        self._transport = transport or BridgeTransport()
        self.parallel_requests = parallel_requests
        self._dispatcher: FanOutDispatcher | None = None
        if connection is not None:
            self.initialize(connection)

    @classmethod
    def from_config(cls, config: HueLightsConfig, secrets: SecretsConfig) -> "LightClient":
        """Create an initialized client from loaded configuration."""
        return cls(
            BridgeConnection.from_config(config, secrets),
            transport=BridgeTransport(timeout=config.timeout),
            parallel_requests=config.parallel_requests,
        )

    @classmethod
    def from_config_dir(cls, config_dir: Path | None = None) -> "LightClient":
        """Create an initialized client from config.yaml and secrets.yaml.

        Args:
            config_dir: Directory holding both files, found with
                ``find_config_dir()`` when omitted
        """
        return cls.from_config(load_config(config_dir), load_secrets(config_dir))

    def initialize(self, connection: BridgeConnection) -> None:
        """Attach the bridge connection this client talks to."""
        self._dispatcher = FanOutDispatcher(
            self._transport,
            connection,
            parallel_requests=self.parallel_requests,
        )
        logger.debug(f"Light client initialized for {connection.base_url}")

    @property
    def is_initialized(self) -> bool:
        return self._dispatcher is not None

    def _require_dispatcher(self) -> FanOutDispatcher:
        if self._dispatcher is None:
            raise NotInitializedError()
        return self._dispatcher

    def _require_connection(self) -> BridgeConnection:
        return self._require_dispatcher().connection

    async def get_light(self, light_id: str) -> Light | None:
        """Get a single light.

        Returns:
            The light, or None if the bridge has no light with this id

        Raises:
            InputValidationError: If light_id is None or blank
            NotInitializedError: If no connection has been attached
            BridgeReportedError: If the bridge reports another error
        """
        validate_identifier(light_id)
        connection = self._require_connection()

        text = await self._transport.get(connection.url(f"lights/{light_id}"))
        return interpret_single_resource(light_id, text)

    async def get_bridge(self) -> BridgeSnapshot:
        """Fetch the bridge's full datastore."""
        connection = self._require_connection()
        text = await self._transport.get(connection.url())
        return interpret_bridge_snapshot(text)

    async def get_lights(self) -> list[Light]:
        """Get every light registered with the bridge."""
        self._require_connection()
        snapshot = await self.get_bridge()
        return snapshot.lights

    async def set_light_name(self, light_id: str, name: str) -> None:
        """Rename a light.

        Raises:
            InputValidationError: If light_id or name is None, or light_id is blank
        """
        validate_identifier(light_id)
        if name is None:
            raise InputValidationError("name")
        connection = self._require_connection()

        body = json.dumps({"name": name})
        text = await self._transport.put(connection.url(f"lights/{light_id}"), body)
        interpret_action_results(text)
        logger.info(f"Renamed light {light_id} to {name!r}")

    async def send_command(
        self,
        command: LightCommand,
        light_ids: Iterable[str] | None = None,
    ) -> DispatchResult:
        """Send a typed command to some lights, or to all when light_ids is empty.

        Raises:
            InputValidationError: If command is None, light_ids is a bare string
                or holds a None or blank id
            NotInitializedError: If no connection has been attached
            PartialDispatchError: After all requests resolved, if any failed
        """
        body = encode_state_command(command)
        return await self.send_command_raw(body, light_ids)

    async def send_command_raw(
        self,
        command: str,
        light_ids: Iterable[str] | None = None,
    ) -> DispatchResult:
        """Send a pre-built command body to some lights, or to all.

        The body is sent exactly as given.

        Raises:
            InputValidationError: If command is None, light_ids is a bare string
                or holds a None or blank id
            NotInitializedError: If no connection has been attached
            PartialDispatchError: After all requests resolved, if any failed
        """
        body = encode_raw_command(command)
        targets = _validate_targets(light_ids)
        dispatcher = self._require_dispatcher()

        result = await dispatcher.dispatch(body, targets)
        if not result.ok:
            raise PartialDispatchError(result)
        return result

    async def set_next_hue_color(self, light_ids: Iterable[str] | None = None) -> DispatchResult:
        """Shift the hue of some lights, or all, one step along the color wheel."""
        return await self.send_command_raw(NEXT_HUE_COLOR_COMMAND, light_ids)

    async def search_new_lights(self) -> None:
        """Ask the bridge to start searching for new lights."""
        connection = self._require_connection()
        await self._transport.post(connection.url("lights"))
        logger.info("Started search for new lights")

    async def get_new_lights(self) -> list[Light]:
        """Get the lights found by the last search.

        The bridge clears this list when a new search starts.
        """
        connection = self._require_connection()
        text = await self._transport.get(connection.url("lights/new"))
        lights = interpret_discovered_devices(text)
        logger.debug(f"Bridge reports {len(lights)} new light(s)")
        return lights

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._transport.close()

    async def __aenter__(self) -> "LightClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
