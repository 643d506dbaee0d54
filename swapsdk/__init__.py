"""Value objects for a DEX SDK: networks, currencies and tokens."""

from swapsdk.constants import (
    MAX_UINT256,
    BigintIsh,
    ChainId,
    MaxUint256,
    Rounding,
    TradeType,
    parse_bigintish,
    resolve_chain_id,
)
from swapsdk.errors import (
    ChainMismatch,
    DuplicateAddress,
    InvalidAddress,
    InvalidBigintIsh,
    SdkError,
    UnknownChainId,
)
from swapsdk.models import (
    ETHER,
    AnyCurrency,
    Currency,
    NativeCurrency,
    Token,
    currency_equals,
    sort_tokens,
)
from swapsdk.weth9 import WETH9, get_weth9, wrapped_currency

__version__ = "0.1.0"
__all__ = [
    # Constants
    "BigintIsh",
    "ChainId",
    "MAX_UINT256",
    "MaxUint256",
    "Rounding",
    "TradeType",
    "parse_bigintish",
    "resolve_chain_id",
    # Errors
    "SdkError",
    "InvalidAddress",
    "ChainMismatch",
    "DuplicateAddress",
    "UnknownChainId",
    "InvalidBigintIsh",
    # Models
    "AnyCurrency",
    "Currency",
    "NativeCurrency",
    "ETHER",
    "Token",
    "currency_equals",
    "sort_tokens",
    # WETH9
    "WETH9",
    "get_weth9",
    "wrapped_currency",
    "__version__",
]
