"""
Chain-specific configuration for the static pool provider.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Union

from .base import BaseConfig


class ChainId(IntEnum):
    """Networks the router supports."""

    MAINNET = 1
    OPTIMISM = 10
    POLYGON = 137
    BASE = 8453
    ARBITRUM_ONE = 42161
    SEPOLIA = 11155111


@dataclass
class ChainConfig(BaseConfig):
    """Chain-specific configuration for different blockchains."""

    # Default chain settings
    DEFAULT_CHAIN: str = BaseConfig.get_env("DEFAULT_CHAIN", "ethereum")

    # Chain-specific RPC URLs
    ETHEREUM_RPC_URL: str = BaseConfig.get_env(
        "ETHEREUM_RPC_URL", "https://eth.llamarpc.com"
    )
    OPTIMISM_RPC_URL: str = BaseConfig.get_env(
        "OPTIMISM_RPC_URL", "https://mainnet.optimism.io"
    )
    POLYGON_RPC_URL: str = BaseConfig.get_env(
        "POLYGON_RPC_URL", "https://polygon-rpc.com"
    )
    BASE_RPC_URL: str = BaseConfig.get_env("BASE_RPC_URL", "https://mainnet.base.org")
    ARBITRUM_RPC_URL: str = BaseConfig.get_env(
        "ARBITRUM_RPC_URL", "https://arb1.arbitrum.io/rpc"
    )
    SEPOLIA_RPC_URL: str = BaseConfig.get_env(
        "SEPOLIA_RPC_URL", "https://rpc.sepolia.org"
    )

    @property
    def supported_chains(self) -> Dict[str, Dict]:
        """Get configuration for all supported chains."""
        return {
            "ethereum": {
                "chain_id": ChainId.MAINNET,
                "rpc_url": self.ETHEREUM_RPC_URL,
                "native_token": "ETH",
                "explorer_url": "https://etherscan.io",
            },
            "optimism": {
                "chain_id": ChainId.OPTIMISM,
                "rpc_url": self.OPTIMISM_RPC_URL,
                "native_token": "ETH",
                "explorer_url": "https://optimistic.etherscan.io",
            },
            "polygon": {
                "chain_id": ChainId.POLYGON,
                "rpc_url": self.POLYGON_RPC_URL,
                "native_token": "MATIC",
                "explorer_url": "https://polygonscan.com",
            },
            "base": {
                "chain_id": ChainId.BASE,
                "rpc_url": self.BASE_RPC_URL,
                "native_token": "ETH",
                "explorer_url": "https://basescan.org",
            },
            "arbitrum": {
                "chain_id": ChainId.ARBITRUM_ONE,
                "rpc_url": self.ARBITRUM_RPC_URL,
                "native_token": "ETH",
                "explorer_url": "https://arbiscan.io",
            },
            "sepolia": {
                "chain_id": ChainId.SEPOLIA,
                "rpc_url": self.SEPOLIA_RPC_URL,
                "native_token": "ETH",
                "explorer_url": "https://sepolia.etherscan.io",
            },
        }

    def get_chain_config(self, chain_name: str) -> Dict:
        """Get configuration for a specific chain."""
        if chain_name not in self.supported_chains:
            raise ValueError(f"Unsupported chain: {chain_name}")
        return self.supported_chains[chain_name]

    def get_rpc_url(self, chain_name: str) -> str:
        """Get RPC URL for a specific chain."""
        return self.get_chain_config(chain_name)["rpc_url"]

    def get_chain_id(self, chain_name: str) -> ChainId:
        """Get chain ID for a specific chain."""
        return self.get_chain_config(chain_name)["chain_id"]

    def get_chain_name(self, chain_id: int) -> str:
        """Get the configured chain name for a chain ID."""
        for name, chain in self.supported_chains.items():
            if chain["chain_id"] == chain_id:
                return name
        raise ValueError(f"Unsupported chain: {chain_id}")

    def resolve_chain_id(self, chain: Union[str, int]) -> int:
        """
        Resolve a chain name or numeric ID to a chain ID.

        Numeric IDs pass through unchanged (known ones as ChainId) so that
        callers can ask about networks without a configured entry.

        Args:
            chain: Chain name ("ethereum"), numeric string ("1") or integer

        Returns:
            Chain ID
        """
        if isinstance(chain, int):
            return self._as_chain_id(chain)
        if chain.strip().isdigit():
            return self._as_chain_id(int(chain))
        return self.get_chain_id(chain.strip().lower())

    @staticmethod
    def _as_chain_id(value: int) -> int:
        try:
            return ChainId(value)
        except ValueError:
            return value
