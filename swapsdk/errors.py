"""SDK error classes.

Every precondition violation on the value objects maps to one of these.
"""


class SdkError(Exception):
    """Base error for SDK value objects."""

    pass


class InvalidAddress(SdkError, ValueError):
    """Address is not 0x followed by 40 hex characters."""

    def __init__(self, address: object) -> None:
        super().__init__(f"Invalid address: {address!r}")
        self.address = address


class ChainMismatch(SdkError):
    """Tokens on different chains have no relative order."""

    def __init__(self, chain_a: int, chain_b: int) -> None:
        super().__init__(f"Chain ids differ: {int(chain_a)} != {int(chain_b)}")
        self.chain_a = chain_a
        self.chain_b = chain_b


class DuplicateAddress(SdkError):
    """Tokens with the same chain and address are the same asset."""

    def __init__(self, address: str) -> None:
        super().__init__(f"Tokens share address: {address}")
        self.address = address


class UnknownChainId(SdkError, ValueError):
    """Chain id is malformed, or not a known network under strict mode."""

    pass


class InvalidBigintIsh(SdkError, ValueError):
    """Value cannot be read as a non-negative big integer."""

    pass
