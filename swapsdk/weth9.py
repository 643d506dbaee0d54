"""Canonical wrapped-native-asset token per network.

WETH9 is built once at import from a static table and exposed read-only.
"""

from collections.abc import Mapping
from types import MappingProxyType

from swapsdk.constants import ChainId, resolve_chain_id
from swapsdk.errors import UnknownChainId
from swapsdk.models.currency import Currency
from swapsdk.models.token import Token

WETH9_DECIMALS = 18
WETH9_SYMBOL = "WETH9"

# Wrapped native asset per network: (address, name)
_WETH9_TABLE: dict[ChainId, tuple[str, str]] = {
    ChainId.MAINNET: ("0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", "Wrapped Ether"),
    ChainId.ROPSTEN: ("0xc778417E063141139Fce010982780140Aa0cD5Ab", "Wrapped Ether"),
    ChainId.RINKEBY: ("0xc778417E063141139Fce010982780140Aa0cD5Ab", "Wrapped Ether"),
    ChainId.GOERLI: ("0xB4FBF271143F4FBf7B91A5ded31805e42b2208d6", "Wrapped Ether"),
    ChainId.KOVAN: ("0xd0A1E359811322d97991E03f863a0C30C2cF029C", "Wrapped Ether"),
    ChainId.MATIC: ("0x0d500B1d8E8eF31E21C99d1Db9A6444d3ADf1270", "Wrapped Matic"),
    ChainId.MUMBAI: ("0x9c3C9283D3e44854697Cd22D3Faa240Cfb032889", "Wrapped Matic"),
    ChainId.HARMONY: ("0x9c3C9283D3e44854697Cd22D3Faa240Cfb032889", "Wrapped ONE"),
    ChainId.HARMONY_B: ("0x9c3C9283D3e44854697Cd22D3Faa240Cfb032889", "Wrapped ONE"),
    ChainId.OETH: ("0x9c3C9283D3e44854697Cd22D3Faa240Cfb032889", "Wrapped OETH"),
    ChainId.BSC: ("0x9c3C9283D3e44854697Cd22D3Faa240Cfb032889", "Wrapped BNB"),
    ChainId.CHAPEL: ("0x9c3C9283D3e44854697Cd22D3Faa240Cfb032889", "Wrapped BNB"),
    ChainId.XDAI: ("0x9c3C9283D3e44854697Cd22D3Faa240Cfb032889", "Wrapped XDAI"),
}


def _build_registry() -> Mapping[ChainId, Token]:
    """Build the WETH9 mapping, failing if any ChainId lacks an entry."""
    missing = [chain.name for chain in ChainId if chain not in _WETH9_TABLE]
    if missing:
        raise RuntimeError(f"WETH9 table missing chains: {', '.join(missing)}")

    registry = {
        chain: Token(chain, address, WETH9_DECIMALS, WETH9_SYMBOL, name)
        for chain, (address, name) in _WETH9_TABLE.items()
    }
    return MappingProxyType(registry)


WETH9: Mapping[ChainId, Token] = _build_registry()


def get_weth9(chain_id: ChainId | int) -> Token:
    """Return the wrapped native token for a network.

    Raises:
        UnknownChainId: If the network has no WETH9 entry
    """
    chain = resolve_chain_id(chain_id)
    try:
        return WETH9[chain]  # type: ignore[index]
    except KeyError as err:
        raise UnknownChainId(f"No WETH9 for chain id: {chain_id}") from err


def wrapped_currency(currency: Currency, chain_id: ChainId | int) -> Token:
    """Return the token a currency trades as on-chain.

    Tokens map to themselves; native currencies map to the chain's WETH9.
    """
    if currency.is_token:
        return currency  # type: ignore[return-value]
    return get_weth9(chain_id)
