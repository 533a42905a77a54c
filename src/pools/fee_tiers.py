"""Uniswap V3 fee tiers."""

from decimal import Decimal
from enum import IntEnum
from typing import Union


class FeeTier(IntEnum):
    """
    Fee tiers a V3 pool can be created with.

    Values are the on-chain ``uint24`` fee in hundredths of a basis point
    (fee = value / 1,000,000, e.g. 3000 = 0.3%). Member order is the order
    candidate pools are expanded in.
    """

    LOWEST = 100  # 0.01% - stable pairs
    LOW = 500  # 0.05% - stable pairs
    MEDIUM = 3000  # 0.30% - most pairs
    HIGH = 10000  # 1.00% - exotic pairs

    @property
    def basis_points(self) -> int:
        return self.value // 100

    @property
    def percent(self) -> Decimal:
        return Decimal(self.value) / Decimal(10000)

    @property
    def tick_spacing(self) -> int:
        return _TICK_SPACING[self]

    def to_subgraph(self) -> str:
        """Canonical string form used in subgraph pool records."""
        return str(self.value)

    @classmethod
    def parse(cls, value: Union[int, str]) -> "FeeTier":
        """
        Parse a fee tier from its integer or string form.

        Raises:
            ValueError: If the value is not one of the four tiers
        """
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise ValueError(f"Unknown fee tier: {value!r}")


_TICK_SPACING = {
    FeeTier.LOWEST: 1,
    FeeTier.LOW: 10,
    FeeTier.MEDIUM: 60,
    FeeTier.HIGH: 200,
}
