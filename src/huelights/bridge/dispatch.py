"""Bounded fan-out of one command to many lights."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Iterable

from huelights.bridge.connection import BridgeConnection
from huelights.bridge.responses import interpret_action_results
from huelights.bridge.transport import BridgeTransport

logger = logging.getLogger(__name__)

# Group 0 always contains every light known to the bridge
ALL_LIGHTS_GROUP = "0"
DEFAULT_PARALLEL_REQUESTS = 5


@dataclass(frozen=True)
class DispatchFailure:
    """A target whose request failed, with the exception it raised."""

    target: str
    error: Exception


@dataclass
class DispatchResult:
    """Outcome of a dispatch once every request has resolved."""

    targets: list[str] = field(default_factory=list)
    failures: list[DispatchFailure] = field(default_factory=list)
    broadcast: bool = False

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def failed_targets(self) -> list[str]:
        return [failure.target for failure in self.failures]

    @property
    def succeeded_targets(self) -> list[str]:
        remaining = list(self.failed_targets)
        succeeded = []
        for target in self.targets:
            if target in remaining:
                remaining.remove(target)
            else:
                succeeded.append(target)
        return succeeded


class FanOutDispatcher:
    """Sends a command body to a set of lights, a few requests at a time.

    At most ``parallel_requests`` requests are in flight at once. A failure on
    one light never stops the others; failures are collected and returned
    after every request has resolved.
    """

    def __init__(
        self,
        transport: BridgeTransport,
        connection: BridgeConnection,
        parallel_requests: int = DEFAULT_PARALLEL_REQUESTS,
    ):
        if parallel_requests < 1:
            raise ValueError(f"parallel_requests must be at least 1, got {parallel_requests}")
        self.transport = transport
        self.connection = connection
        self.parallel_requests = parallel_requests

    async def dispatch(self, body: str, targets: Iterable[str] | None = None) -> DispatchResult:
        """Send ``body`` to each target, or to all lights when targets is empty.

        Args:
            body: Encoded command, sent as-is
            targets: Light ids, one request per occurrence

        Returns:
            DispatchResult listing every target and every failure

        Raises:
            Any transport or bridge error from the single all-lights request
        """
        target_list = list(targets) if targets is not None else []

        if not target_list:
            await self.send_group_action(body, ALL_LIGHTS_GROUP)
            return DispatchResult(broadcast=True)

        semaphore = asyncio.Semaphore(self.parallel_requests)

        async def send_one(light_id: str) -> None:
            async with semaphore:
                await self.send_light_state(body, light_id)

        logger.debug(
            f"Dispatching to {len(target_list)} light(s), "
            f"{self.parallel_requests} at a time"
        )
        results = await asyncio.gather(
            *(send_one(light_id) for light_id in target_list),
            return_exceptions=True,
        )

        result = DispatchResult(targets=target_list)
        for light_id, outcome in zip(target_list, results):
            if isinstance(outcome, Exception):
                logger.warning(f"Command to light {light_id} failed: {outcome}")
                result.failures.append(DispatchFailure(light_id, outcome))
            elif isinstance(outcome, BaseException):
                raise outcome

        if result.failures:
            logger.info(
                f"Dispatch finished with {len(result.failures)} failure(s) "
                f"out of {len(target_list)}"
            )
        else:
            logger.debug(f"Dispatch finished for {len(target_list)} light(s)")
        return result

    async def send_light_state(self, body: str, light_id: str) -> None:
        """PUT a command body to one light's state."""
        text = await self.transport.put(self.connection.url(f"lights/{light_id}/state"), body)
        interpret_action_results(text)

    async def send_group_action(self, body: str, group_id: str) -> None:
        """PUT a command body to a group's action."""
        text = await self.transport.put(self.connection.url(f"groups/{group_id}/action"), body)
        interpret_action_results(text)
