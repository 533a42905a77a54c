"""
Token value type shared by the registry, pool identity and providers.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from eth_utils import is_hex_address, to_checksum_address

from .errors import InvalidToken


def normalize_address(address: str) -> str:
    """
    Validate an address and return its checksummed form.

    Any casing is accepted; the EIP-55 checksum is not enforced on input
    because token lists from different sources disagree on casing.

    Raises:
        InvalidToken: If the address is empty or not a 20-byte hex address
    """
    if not isinstance(address, str) or not address.strip():
        raise InvalidToken(f"Token address must be a non-empty string, got: {address!r}")

    address = address.strip()
    if not is_hex_address(address):
        raise InvalidToken(f"Invalid token address: {address}")

    return to_checksum_address(address)


@dataclass(frozen=True, eq=False)
class Token:
    """
    ERC20 token on a single network.

    Attributes:
        chain_id: Network the token lives on
        address: Checksummed contract address
        decimals: Token decimals (display only)
        symbol: Token symbol (display only)
        name: Token name (display only)
    """

    chain_id: int
    address: str
    decimals: Optional[int] = None
    symbol: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "address", normalize_address(self.address))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (
            self.chain_id == other.chain_id
            and self.address.lower() == other.address.lower()
        )

    def __hash__(self) -> int:
        return hash((self.chain_id, self.address.lower()))

    def __repr__(self) -> str:
        label = self.symbol or self.address
        return f"Token({label}, chain={int(self.chain_id)})"

    def equals(self, other: "Token") -> bool:
        """Same token by network and address."""
        return self == other

    def sorts_before(self, other: "Token") -> bool:
        """
        Whether this token is token0 in a pool with ``other``.

        Tokens are ordered by their lowercase hex address, which matches
        the numeric ordering the pool factory applies.

        Raises:
            InvalidToken: If the tokens are on different networks or share an address
        """
        if self.chain_id != other.chain_id:
            raise InvalidToken(
                f"Cannot order tokens from different chains: {self.chain_id} and {other.chain_id}"
            )
        if self.address.lower() == other.address.lower():
            raise InvalidToken(f"Cannot order a token against itself: {self.address}")
        return self.address.lower() < other.address.lower()

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.address}
