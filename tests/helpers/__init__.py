"""Test helpers module for shared test utilities.

- constants: Token addresses in lowercase and checksummed form
"""

from tests.helpers.constants import (
    DAI,
    DAI_CHECKSUM,
    UNI,
    USDC,
    USDC_CHECKSUM,
    WBTC,
    WETH,
    WETH_CHECKSUM,
)

__all__ = [
    "WETH",
    "USDC",
    "DAI",
    "WBTC",
    "UNI",
    "WETH_CHECKSUM",
    "USDC_CHECKSUM",
    "DAI_CHECKSUM",
]
