"""
Test suite for the base token registry and fee tiers.
"""

import pytest

from src.config.chains import ChainId
from src.config.protocols import V3_CORE_FACTORY_ADDRESSES
from src.pools.base_tokens import BASES_TO_CHECK_TRADES_AGAINST, BaseTokenRegistry
from src.pools.errors import UnsupportedNetwork
from src.pools.fee_tiers import FeeTier
from src.pools.tokens import (
    DAI_MAINNET,
    USDC_MAINNET,
    USDT_MAINNET,
    WBTC_MAINNET,
    WETH9,
    WMATIC_POLYGON,
)


class TestBaseTokenRegistry:
    """Test base token lookup."""

    def test_every_chain_is_covered(self, registry):
        for chain_id in ChainId:
            assert chain_id in registry
            assert len(registry.get_bases(chain_id)) > 0

    def test_every_chain_has_a_factory(self, registry):
        for chain_id in registry.supported_chains:
            assert chain_id in V3_CORE_FACTORY_ADDRESSES

    def test_mainnet_bases_in_order(self, registry):
        assert registry.get_bases(ChainId.MAINNET) == (
            WETH9[ChainId.MAINNET],
            DAI_MAINNET,
            USDC_MAINNET,
            USDT_MAINNET,
            WBTC_MAINNET,
        )

    def test_lookup_by_plain_int(self, registry):
        assert registry.get_bases(1) == registry.get_bases(ChainId.MAINNET)

    def test_bases_are_on_their_chain_and_distinct(self, registry):
        for chain_id in registry.supported_chains:
            bases = registry.get_bases(chain_id)
            assert all(token.chain_id == chain_id for token in bases)
            assert len(set(bases)) == len(bases)

    def test_wrapped_native_first(self, registry):
        assert registry.wrapped_native(ChainId.ARBITRUM_ONE) == WETH9[ChainId.ARBITRUM_ONE]
        assert registry.wrapped_native(ChainId.POLYGON) == WMATIC_POLYGON

    @pytest.mark.parametrize("chain_id", [3, 4, 56, 999999])
    def test_unsupported_network(self, registry, chain_id):
        with pytest.raises(UnsupportedNetwork) as exc_info:
            registry.get_bases(chain_id)
        assert exc_info.value.chain_id == chain_id
        assert chain_id not in registry

    def test_default_registry_is_shared(self):
        assert BaseTokenRegistry.default() is BaseTokenRegistry.default()

    def test_registry_is_read_only(self, registry):
        with pytest.raises(TypeError):
            registry._bases[56] = ()

    def test_registry_copies_its_table(self):
        table = {ChainId.MAINNET: [DAI_MAINNET, USDC_MAINNET]}
        registry = BaseTokenRegistry(table)
        table[ChainId.MAINNET].append(WBTC_MAINNET)
        table[ChainId.BASE] = []
        assert registry.get_bases(ChainId.MAINNET) == (DAI_MAINNET, USDC_MAINNET)
        assert ChainId.BASE not in registry

    def test_token_under_wrong_chain_rejected(self):
        with pytest.raises(ValueError, match="registered under network"):
            BaseTokenRegistry({ChainId.BASE: [DAI_MAINNET]})

    def test_empty_base_set_has_no_wrapped_native(self):
        registry = BaseTokenRegistry({ChainId.SEPOLIA: []})
        assert registry.get_bases(ChainId.SEPOLIA) == ()
        with pytest.raises(UnsupportedNetwork):
            registry.wrapped_native(ChainId.SEPOLIA)

    def test_default_table_matches_registry(self, registry):
        assert set(BASES_TO_CHECK_TRADES_AGAINST) == set(registry.supported_chains)


class TestFeeTier:
    """Test the closed set of fee tiers."""

    def test_expansion_order(self):
        assert list(FeeTier) == [FeeTier.LOWEST, FeeTier.LOW, FeeTier.MEDIUM, FeeTier.HIGH]

    @pytest.mark.parametrize("fee,bps,spacing,text", [
        (FeeTier.LOWEST, 1, 1, "100"),
        (FeeTier.LOW, 5, 10, "500"),
        (FeeTier.MEDIUM, 30, 60, "3000"),
        (FeeTier.HIGH, 100, 200, "10000"),
    ])
    def test_tier_attributes(self, fee, bps, spacing, text):
        assert fee.basis_points == bps
        assert fee.tick_spacing == spacing
        assert fee.to_subgraph() == text

    def test_percent(self):
        assert str(FeeTier.MEDIUM.percent) == "0.3"

    def test_parse(self):
        assert FeeTier.parse("3000") is FeeTier.MEDIUM
        assert FeeTier.parse(500) is FeeTier.LOW

    @pytest.mark.parametrize("value", [0, 250, "abc", None])
    def test_parse_rejects_custom_tiers(self, value):
        with pytest.raises(ValueError, match="Unknown fee tier"):
            FeeTier.parse(value)
