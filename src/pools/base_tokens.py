"""
Base tokens to check trades against, per network.

Base tokens are assumed to have deep liquidity against most other tokens on
their network (wrapped native asset, major stablecoins, wrapped BTC). The
wrapped native asset is always listed first.
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from src.config.chains import ChainId

from .errors import UnsupportedNetwork
from .token import Token
from .tokens import (
    DAI_ARBITRUM,
    DAI_BASE,
    DAI_MAINNET,
    DAI_OPTIMISM,
    DAI_POLYGON,
    USDBC_BASE,
    USDC_ARBITRUM,
    USDC_BASE,
    USDC_MAINNET,
    USDC_OPTIMISM,
    USDC_POLYGON,
    USDC_SEPOLIA,
    USDT_ARBITRUM,
    USDT_MAINNET,
    USDT_OPTIMISM,
    USDT_POLYGON,
    WBTC_ARBITRUM,
    WBTC_MAINNET,
    WBTC_OPTIMISM,
    WBTC_POLYGON,
    WETH9,
    WMATIC_POLYGON,
)


BASES_TO_CHECK_TRADES_AGAINST: Mapping[int, Tuple[Token, ...]] = MappingProxyType({
    ChainId.MAINNET: (
        WETH9[ChainId.MAINNET],
        DAI_MAINNET,
        USDC_MAINNET,
        USDT_MAINNET,
        WBTC_MAINNET,
    ),
    ChainId.OPTIMISM: (
        WETH9[ChainId.OPTIMISM],
        USDC_OPTIMISM,
        DAI_OPTIMISM,
        USDT_OPTIMISM,
        WBTC_OPTIMISM,
    ),
    ChainId.POLYGON: (
        WMATIC_POLYGON,
        WETH9[ChainId.POLYGON],
        USDC_POLYGON,
        DAI_POLYGON,
        USDT_POLYGON,
        WBTC_POLYGON,
    ),
    ChainId.BASE: (
        WETH9[ChainId.BASE],
        USDC_BASE,
        USDBC_BASE,
        DAI_BASE,
    ),
    ChainId.ARBITRUM_ONE: (
        WETH9[ChainId.ARBITRUM_ONE],
        WBTC_ARBITRUM,
        DAI_ARBITRUM,
        USDC_ARBITRUM,
        USDT_ARBITRUM,
    ),
    ChainId.SEPOLIA: (
        WETH9[ChainId.SEPOLIA],
        USDC_SEPOLIA,
    ),
})


class BaseTokenRegistry:
    """
    Read-only lookup of base tokens by network.

    The table is copied on construction and never changes afterwards.
    """

    def __init__(self, table: Mapping[int, Iterable[Token]]):
        """
        Initialize the registry.

        Args:
            table: Mapping of chain ID to its ordered base tokens

        Raises:
            ValueError: If a token is registered under another network
        """
        bases = {}
        for chain_id, tokens in table.items():
            tokens = tuple(tokens)
            for token in tokens:
                if token.chain_id != chain_id:
                    raise ValueError(
                        f"Base token {token!r} registered under network {chain_id}"
                    )
            bases[chain_id] = tokens

        self._bases = MappingProxyType(bases)

    @classmethod
    def default(cls) -> "BaseTokenRegistry":
        """Registry over the built-in base token table."""
        global _default_registry
        if _default_registry is None:
            _default_registry = cls(BASES_TO_CHECK_TRADES_AGAINST)
        return _default_registry

    @property
    def supported_chains(self) -> List[int]:
        return list(self._bases)

    def get_bases(self, chain_id: int) -> Tuple[Token, ...]:
        """
        Get the ordered base tokens for a network.

        Raises:
            UnsupportedNetwork: If the network has no base tokens configured
        """
        try:
            return self._bases[chain_id]
        except KeyError:
            raise UnsupportedNetwork(chain_id) from None

    def wrapped_native(self, chain_id: int) -> Token:
        """The wrapped native asset of a network (its first base token)."""
        bases = self.get_bases(chain_id)
        if not bases:
            raise UnsupportedNetwork(chain_id, f"No base tokens configured for network: {chain_id}")
        return bases[0]

    def __contains__(self, chain_id: object) -> bool:
        return chain_id in self._bases

    def __len__(self) -> int:
        return len(self._bases)

    def __repr__(self) -> str:
        return f"BaseTokenRegistry(chains={[int(c) for c in self._bases]})"


_default_registry: Optional[BaseTokenRegistry] = None
