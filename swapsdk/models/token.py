"""ERC20 token model with identity and ordering semantics."""

from typing import Annotated, Any, Literal, TypeAlias

from pydantic import Field, ValidationError, field_validator

from swapsdk.constants import ChainId, resolve_chain_id
from swapsdk.errors import ChainMismatch, DuplicateAddress, SdkError
from swapsdk.models.currency import Currency, NativeCurrency
from swapsdk.models.types import validate_and_parse_address


class Token(Currency):
    """An ERC20 token identified by chain id and address.

    Two tokens are the same asset iff chain_id and address match; decimals,
    symbol and name play no part in equality.

    Attributes:
        chain_id: Network the token lives on (ChainId, or plain int for
            networks outside ChainId)
        address: EIP-55 checksummed contract address
    """

    kind: Literal["token"] = "token"
    chain_id: ChainId | int
    address: str

    def __init__(
        self,
        chain_id: ChainId | int,
        address: str,
        decimals: int,
        symbol: str | None = None,
        name: str | None = None,
        **data: Any,
    ) -> None:
        try:
            super().__init__(
                chain_id=chain_id,
                address=address,
                decimals=decimals,
                symbol=symbol,
                name=name,
                **data,
            )
        except ValidationError as err:
            # Surface InvalidAddress / UnknownChainId rather than pydantic's wrapper
            for detail in err.errors():
                cause = detail.get("ctx", {}).get("error")
                if isinstance(cause, SdkError):
                    raise cause from err
            raise

    @field_validator("chain_id", mode="before")
    @classmethod
    def _resolve_chain_id(cls, value: Any) -> ChainId | int:
        return resolve_chain_id(value)

    @field_validator("address", mode="before")
    @classmethod
    def _checksum_address(cls, value: Any) -> str:
        return validate_and_parse_address(value)

    def equals(self, other: "Token") -> bool:
        """Return True if both tokens have the same chain_id and address."""
        # short circuit on identity
        if self is other:
            return True
        if not isinstance(other, Token):
            return False
        return self.chain_id == other.chain_id and self.address == other.address

    def sorts_before(self, other: "Token") -> bool:
        """Return True if this token's address sorts before the other's.

        Addresses compare case-insensitively.

        Raises:
            ChainMismatch: If the tokens are on different chains
            DuplicateAddress: If the tokens have the same address
        """
        if self.chain_id != other.chain_id:
            raise ChainMismatch(self.chain_id, other.chain_id)
        if self.address == other.address:
            raise DuplicateAddress(self.address)
        return self.address.lower() < other.address.lower()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Token):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((int(self.chain_id), self.address))


# Union of all currency variants, discriminated on `kind`
AnyCurrency: TypeAlias = Annotated[NativeCurrency | Token, Field(discriminator="kind")]


def currency_equals(currency_a: Currency, currency_b: Currency) -> bool:
    """Compare two currencies for equality.

    Tokens compare by chain_id and address. A token never equals a
    non-token. Non-token currencies compare by identity.
    """
    if currency_a.is_token and currency_b.is_token:
        return currency_a.equals(currency_b)  # type: ignore[attr-defined]
    if currency_a.is_token or currency_b.is_token:
        return False
    return currency_a is currency_b


def sort_tokens(token_a: Token, token_b: Token) -> tuple[Token, Token]:
    """Return the pair in canonical (address) order.

    Raises:
        ChainMismatch: If the tokens are on different chains
        DuplicateAddress: If the tokens have the same address
    """
    if token_a.sorts_before(token_b):
        return token_a, token_b
    return token_b, token_a
