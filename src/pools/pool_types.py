"""
Core types for candidate pools.

Domain models handed to the router when pool data comes from a provider.
"""

from dataclasses import dataclass
from typing import Any, Dict

from .fee_tiers import FeeTier
from .token import Token

# Placeholder values carried by synthesized pools. Consumers treat a pool
# with these exact values as having no real liquidity data.
STATIC_POOL_LIQUIDITY = "100"
STATIC_POOL_TVL_ETH = 100
STATIC_POOL_TVL_USD = 100


@dataclass(frozen=True)
class PoolDescriptor:
    """
    V3 pool record in the shape of a subgraph pool.

    Attributes:
        id: Checksummed pool address
        fee_tier: Fee tier of the pool
        token0: Lower-sorting token of the pair
        token1: Higher-sorting token of the pair
        liquidity: Pool liquidity as a decimal string
        tvl_eth: Total value locked in ETH
        tvl_usd: Total value locked in USD
    """

    id: str
    fee_tier: FeeTier
    token0: Token
    token1: Token
    liquidity: str = STATIC_POOL_LIQUIDITY
    tvl_eth: float = STATIC_POOL_TVL_ETH
    tvl_usd: float = STATIC_POOL_TVL_USD

    @property
    def is_placeholder(self) -> bool:
        """True when the valuation fields are the static sentinels."""
        return (
            self.liquidity == STATIC_POOL_LIQUIDITY
            and self.tvl_eth == STATIC_POOL_TVL_ETH
            and self.tvl_usd == STATIC_POOL_TVL_USD
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "feeTier": self.fee_tier.to_subgraph(),
            "liquidity": self.liquidity,
            "token0": self.token0.to_dict(),
            "token1": self.token1.to_dict(),
            "tvlETH": self.tvl_eth,
            "tvlUSD": self.tvl_usd,
        }
