"""Shared type definitions for SDK models.

Addresses are stored in EIP-55 checksummed form. Comparisons that must
ignore casing go through normalize_address().
"""

import re
from typing import Any

import structlog
from eth_utils import to_checksum_address

from swapsdk.errors import InvalidAddress

logger = structlog.get_logger()

_ADDRESS_RE = re.compile(r"(0x)?[0-9a-fA-F]{40}")
_MIXED_CASE_RE = re.compile(r"[a-f].*[A-F]|[A-F].*[a-f]")


def is_valid_address(address: Any) -> bool:
    """Check if a value is a well-formed Ethereum address.

    Args:
        address: Value to check

    Returns:
        True if address is 40 hex chars, optionally 0x-prefixed
    """
    if not isinstance(address, str):
        return False
    return _ADDRESS_RE.fullmatch(address) is not None


def validate_and_parse_address(address: Any) -> str:
    """Validate an address and return its checksummed form.

    Lowercase and uppercase inputs are accepted as-is. Mixed-case input is
    treated as a checksum claim and must match EIP-55 exactly.

    Args:
        address: Raw address string, with or without 0x prefix

    Returns:
        EIP-55 checksummed address with 0x prefix

    Raises:
        InvalidAddress: If address is malformed or carries a bad checksum
    """
    if not is_valid_address(address):
        logger.debug("invalid_address", address=address, reason="malformed")
        raise InvalidAddress(address)

    body = address[2:] if address.startswith("0x") else address
    checksummed = to_checksum_address("0x" + body)

    if _MIXED_CASE_RE.search(body) and checksummed[2:] != body:
        logger.debug("invalid_address", address=address, reason="bad_checksum")
        raise InvalidAddress(address)

    return checksummed


def normalize_address(address: str) -> str:
    """Normalize an address to lowercase with 0x prefix.

    This does NOT validate. Use it for case-insensitive comparison keys.
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr
    return addr
