"""Bridge connection details and the bridge snapshot."""

import logging
from dataclasses import dataclass, field
from typing import Any

from huelights.config import HueLightsConfig, SecretsConfig
from huelights.models.light import Light
from huelights.utils.errors import NotInitializedError, validate_identifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BridgeConnection:
    """Result of initializing against a bridge.

    Holding one means the API base address is known. A client is handed this
    object instead of checking a readiness flag.
    """

    base_url: str

    def __post_init__(self) -> None:
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")

    @classmethod
    def for_bridge(
        cls,
        ip: str,
        username: str,
        port: int | None = None,
        use_https: bool = False,
    ) -> "BridgeConnection":
        """Build the ``{scheme}://{ip}/api/{username}/`` base address."""
        validate_identifier(ip, "ip")
        validate_identifier(username, "username")
        scheme = "https" if use_https else "http"
        host = f"{ip}:{port}" if port else ip
        return cls(f"{scheme}://{host}/api/{username}/")

    @classmethod
    def from_config(cls, config: HueLightsConfig, secrets: SecretsConfig) -> "BridgeConnection":
        """Build a connection from loaded config and secrets.

        Raises:
            NotInitializedError: If no bridge username is configured
        """
        if not secrets.username:
            raise NotInitializedError("No bridge username configured in secrets")
        connection = cls.for_bridge(
            config.bridge.ip,
            secrets.username,
            port=config.bridge.port,
            use_https=config.bridge.use_https,
        )
        logger.info(f"Using bridge at {config.bridge.ip}")
        return connection

    def url(self, path: str = "") -> str:
        """Absolute URL for a path below the API base."""
        return f"{self.base_url}{path.lstrip('/')}"


@dataclass
class BridgeSnapshot:
    """Full datastore of the bridge, reduced to what this client reads."""

    lights: list[Light] = field(default_factory=list)
    config: dict[str, Any] = field(default_factory=dict)
