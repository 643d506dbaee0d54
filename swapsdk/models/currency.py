"""Currency base model and the native-currency variant."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Currency(BaseModel):
    """Decimals, symbol and name shared by every currency variant.

    The `kind` tag tells variants apart without isinstance checks. Only the
    variants are instantiable, so the tag always matches the class.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["native", "token"]
    decimals: int = Field(strict=True, ge=0, le=255)
    symbol: str | None = None
    name: str | None = None

    def model_post_init(self, __context: Any) -> None:
        if type(self) is Currency:
            raise TypeError("Currency is abstract, use NativeCurrency or Token")

    @property
    def is_native(self) -> bool:
        """Return True if this is a network's native currency."""
        return self.kind == "native"

    @property
    def is_token(self) -> bool:
        """Return True if this is an ERC20 token."""
        return self.kind == "token"


class NativeCurrency(Currency):
    """The native coin of a network (e.g. Ether on mainnet).

    Native currencies are singletons, compared by identity.
    """

    kind: Literal["native"] = "native"


# The only native currency the SDK ships
ETHER = NativeCurrency(decimals=18, symbol="ETH", name="Ether")
