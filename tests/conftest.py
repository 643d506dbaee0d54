"""Pytest configuration and fixtures."""

import pytest

from swapsdk import config as sdk_config
from swapsdk.config import SdkConfig
from swapsdk.constants import ChainId
from swapsdk.models import Token
from tests.helpers import DAI, USDC, WETH


@pytest.fixture
def weth() -> Token:
    """Mainnet WETH built from a lowercase address."""
    return Token(ChainId.MAINNET, WETH, 18, "WETH", "Wrapped Ether")


@pytest.fixture
def usdc() -> Token:
    """Mainnet USDC."""
    return Token(ChainId.MAINNET, USDC, 6, "USDC", "USD Coin")


@pytest.fixture
def dai() -> Token:
    """Mainnet DAI."""
    return Token(ChainId.MAINNET, DAI, 18, "DAI", "Dai Stablecoin")


@pytest.fixture
def strict_chain_ids(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reject chain ids outside ChainId for the duration of a test."""
    monkeypatch.setattr(sdk_config, "DEFAULT_SDK_CONFIG", SdkConfig(strict_chain_ids=True))
