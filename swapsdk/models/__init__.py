"""Pydantic models for currencies and tokens."""

from swapsdk.models.currency import ETHER, Currency, NativeCurrency
from swapsdk.models.token import AnyCurrency, Token, currency_equals, sort_tokens
from swapsdk.models.types import (
    is_valid_address,
    normalize_address,
    validate_and_parse_address,
)

__all__ = [
    # Types
    "is_valid_address",
    "normalize_address",
    "validate_and_parse_address",
    # Currencies
    "AnyCurrency",
    "Currency",
    "NativeCurrency",
    "ETHER",
    "Token",
    "currency_equals",
    "sort_tokens",
]
