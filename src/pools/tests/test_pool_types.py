"""
Test suite for pool descriptors.
"""

from dataclasses import FrozenInstanceError

import pytest

from src.config.chains import ChainId
from src.pools.fee_tiers import FeeTier
from src.pools.pool_address import get_pool_address
from src.pools.pool_types import (
    STATIC_POOL_LIQUIDITY,
    STATIC_POOL_TVL_ETH,
    STATIC_POOL_TVL_USD,
    PoolDescriptor,
)
from src.pools.tokens import USDC_MAINNET, WETH9


@pytest.fixture
def usdc_weth_pool():
    return PoolDescriptor(
        id=get_pool_address(ChainId.MAINNET, USDC_MAINNET, WETH9[ChainId.MAINNET], FeeTier.LOW),
        fee_tier=FeeTier.LOW,
        token0=USDC_MAINNET,
        token1=WETH9[ChainId.MAINNET],
    )


class TestPoolDescriptor:
    """Test pool descriptor defaults and serialization."""

    def test_defaults_are_placeholders(self, usdc_weth_pool):
        assert usdc_weth_pool.liquidity == STATIC_POOL_LIQUIDITY == "100"
        assert usdc_weth_pool.tvl_eth == STATIC_POOL_TVL_ETH == 100
        assert usdc_weth_pool.tvl_usd == STATIC_POOL_TVL_USD == 100
        assert usdc_weth_pool.is_placeholder

    def test_real_liquidity_is_not_placeholder(self, usdc_weth_pool):
        observed = PoolDescriptor(
            id=usdc_weth_pool.id,
            fee_tier=usdc_weth_pool.fee_tier,
            token0=usdc_weth_pool.token0,
            token1=usdc_weth_pool.token1,
            liquidity="18342009834519082",
            tvl_eth=51234.5,
            tvl_usd=178000000.0,
        )
        assert not observed.is_placeholder

    def test_to_dict_subgraph_shape(self, usdc_weth_pool):
        assert usdc_weth_pool.to_dict() == {
            "id": "0x88e6A0c2dDD26FEEb64F039a2c41296FcB3f5640",
            "feeTier": "500",
            "liquidity": "100",
            "token0": {"id": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"},
            "token1": {"id": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"},
            "tvlETH": 100,
            "tvlUSD": 100,
        }

    def test_descriptor_is_immutable(self, usdc_weth_pool):
        with pytest.raises(FrozenInstanceError):
            usdc_weth_pool.liquidity = "0"

    def test_descriptors_compare_by_value(self, usdc_weth_pool):
        copy = PoolDescriptor(
            id=usdc_weth_pool.id,
            fee_tier=FeeTier.LOW,
            token0=USDC_MAINNET,
            token1=WETH9[ChainId.MAINNET],
        )
        assert copy == usdc_weth_pool
        assert hash(copy) == hash(usdc_weth_pool)
