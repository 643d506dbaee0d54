"""Protocol constants shared by the SDK.

Chain ids are part of the public contract: downstream consumers store them
in configuration and wire data, so values never change once released.
"""

from enum import IntEnum
from typing import Any, TypeAlias

import structlog

from swapsdk import config as sdk_config
from swapsdk.errors import InvalidBigintIsh, UnknownChainId

logger = structlog.get_logger()

# Values accepted wherever the SDK expects a big integer
BigintIsh: TypeAlias = int | str


class ChainId(IntEnum):
    """Networks the SDK ships canonical data for."""

    MAINNET = 1
    ROPSTEN = 3
    RINKEBY = 4
    GOERLI = 5
    KOVAN = 42
    MUMBAI = 80001
    MATIC = 137
    XDAI = 100
    HARMONY = 1666600000
    HARMONY_B = 1666700000
    OETH = 10
    BSC = 56
    CHAPEL = 97


class TradeType(IntEnum):
    """Which side of a trade is fixed."""

    EXACT_INPUT = 0
    EXACT_OUTPUT = 1


class Rounding(IntEnum):
    """Rounding modes for fixed-point arithmetic."""

    ROUND_DOWN = 0
    ROUND_HALF_UP = 1
    ROUND_UP = 2


# Maximum uint256 value, used as the "unlimited allowance" sentinel
MAX_UINT256 = int("0x" + "ff" * 32, 16)
MaxUint256 = MAX_UINT256

_KNOWN_CHAIN_IDS = frozenset(chain.value for chain in ChainId)


def parse_bigintish(value: Any) -> int:
    """Convert a BigintIsh value to an int.

    Args:
        value: An int, a decimal string, or a 0x-prefixed hex string

    Returns:
        The value as a non-negative int

    Raises:
        InvalidBigintIsh: If value has the wrong type, is malformed or negative
    """
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool):
        raise InvalidBigintIsh(f"BigintIsh cannot be a bool: {value}")

    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            if text[:2].lower() == "0x":
                int_value = int(text[2:], 16)
            else:
                int_value = int(text, 10)
        except ValueError as err:
            raise InvalidBigintIsh(f"BigintIsh must be a decimal or hex string: '{value}'") from err
    else:
        raise InvalidBigintIsh(f"BigintIsh must be int or str, got {type(value).__name__}")

    if int_value < 0:
        raise InvalidBigintIsh(f"BigintIsh cannot be negative: {value}")

    return int_value


def resolve_chain_id(value: Any, *, strict: bool | None = None) -> ChainId | int:
    """Map a raw chain id onto ChainId.

    Args:
        value: A ChainId member or a positive integer
        strict: Reject ids outside ChainId. None uses the SDK default config.

    Returns:
        The ChainId member when known, otherwise the plain int

    Raises:
        UnknownChainId: If value is not a positive int, or is unknown under strict mode
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnknownChainId(f"Chain id must be an int, got {type(value).__name__}")
    if value <= 0:
        raise UnknownChainId(f"Chain id must be positive: {value}")

    if value in _KNOWN_CHAIN_IDS:
        return ChainId(value)

    if strict is None:
        strict = sdk_config.DEFAULT_SDK_CONFIG.strict_chain_ids
    if strict:
        logger.debug("unknown_chain_id_rejected", chain_id=value)
        raise UnknownChainId(f"Unknown chain id: {value}")

    return int(value)


__all__ = [
    "BigintIsh",
    "ChainId",
    "TradeType",
    "Rounding",
    "MAX_UINT256",
    "MaxUint256",
    "parse_bigintish",
    "resolve_chain_id",
]
