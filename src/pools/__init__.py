"""Tokens, fee tiers, base tokens and V3 pool identity."""

from src.pools.base_tokens import BASES_TO_CHECK_TRADES_AGAINST, BaseTokenRegistry
from src.pools.errors import InvalidToken, PoolGenerationError, UnsupportedNetwork
from src.pools.fee_tiers import FeeTier
from src.pools.pool_address import compute_pool_address, get_pool_address, sort_tokens
from src.pools.pool_types import (
    STATIC_POOL_LIQUIDITY,
    STATIC_POOL_TVL_ETH,
    STATIC_POOL_TVL_USD,
    PoolDescriptor,
)
from src.pools.token import Token, normalize_address

__all__ = [
    "BASES_TO_CHECK_TRADES_AGAINST",
    "BaseTokenRegistry",
    "FeeTier",
    "InvalidToken",
    "PoolDescriptor",
    "PoolGenerationError",
    "STATIC_POOL_LIQUIDITY",
    "STATIC_POOL_TVL_ETH",
    "STATIC_POOL_TVL_USD",
    "Token",
    "UnsupportedNetwork",
    "compute_pool_address",
    "get_pool_address",
    "normalize_address",
    "sort_tokens",
]
