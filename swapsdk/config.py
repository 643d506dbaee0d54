"""SDK configuration."""

import os
from dataclasses import dataclass

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class SdkConfig:
    """Behavior flags for the SDK value objects.

    Attributes:
        strict_chain_ids: If True, chain ids outside ChainId are rejected.
            If False (default), unknown ids pass through as plain ints.
    """

    strict_chain_ids: bool = False

    @classmethod
    def from_env(cls) -> "SdkConfig":
        """Build a config from SWAPSDK_* environment variables."""
        strict = os.environ.get("SWAPSDK_STRICT_CHAIN_IDS", "false").lower() in _TRUTHY
        return cls(strict_chain_ids=strict)


# Default configuration instance
DEFAULT_SDK_CONFIG = SdkConfig.from_env()
