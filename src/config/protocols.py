"""
Protocol-specific configuration for the static pool provider.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .base import BaseConfig
from .chains import ChainId

# Init code hash of the Uniswap V3 pool contract, identical on every chain
POOL_INIT_CODE_HASH: str = (
    "0xe34f199b19b2b4f47f68442619d555527d244f78a3297ea89325f843f87b8b54"
)

V3_CORE_FACTORY_ADDRESSES: Dict[int, str] = {
    ChainId.MAINNET: "0x1F98431c8aD98523631AE4a59f267346ea31F984",
    ChainId.OPTIMISM: "0x1F98431c8aD98523631AE4a59f267346ea31F984",
    ChainId.POLYGON: "0x1F98431c8aD98523631AE4a59f267346ea31F984",
    ChainId.BASE: "0x33128a8fC17869897dcE68Ed026d694621f6FDfD",
    ChainId.ARBITRUM_ONE: "0x1F98431c8aD98523631AE4a59f267346ea31F984",
    ChainId.SEPOLIA: "0x0227628f3F023bb0B980b67D528571c95c6DaC1c",
}

# Contracts exposing validate(token, baseToken, amountToBorrow) for fee-on-transfer detection
TOKEN_FEE_DETECTOR_ADDRESSES: Dict[int, str] = {
    ChainId.MAINNET: "0x19C97dc2a25845C7f9d1d519c8C2d4809c58b43f",
}


@dataclass
class ProtocolConfig(BaseConfig):
    """Configuration for the Uniswap V3 protocol and the token fee lookup."""

    # Overrides the per-chain detector table when set
    TOKEN_FEE_DETECTOR_ADDRESS: Optional[str] = BaseConfig.get_env(
        "TOKEN_FEE_DETECTOR_ADDRESS"
    )
    # Amount of the probed token flash-borrowed by the detector
    FEE_AMOUNT_TO_BORROW: int = BaseConfig.get_env_int("FEE_AMOUNT_TO_BORROW", 100000)
    FEE_FETCH_BATCH_SIZE: int = BaseConfig.get_env_int("FEE_FETCH_BATCH_SIZE", 50)
    FEE_CACHE_TTL_SECONDS: int = BaseConfig.get_env_int("FEE_CACHE_TTL_SECONDS", 3600)

    @property
    def uniswap_v3_config(self) -> Dict[int, Dict]:
        """Uniswap V3 configuration by chain."""
        return {
            chain_id: {
                "factory_address": factory,
                "init_code_hash": POOL_INIT_CODE_HASH,
                "token_fee_detector": TOKEN_FEE_DETECTOR_ADDRESSES.get(chain_id),
            }
            for chain_id, factory in V3_CORE_FACTORY_ADDRESSES.items()
        }

    def get_protocol_config(self, chain_id: int) -> Dict:
        """Get Uniswap V3 configuration for a chain."""
        if chain_id not in self.uniswap_v3_config:
            raise ValueError(f"Uniswap V3 not supported on chain: {chain_id}")
        return self.uniswap_v3_config[chain_id]

    def get_factory_address(self, chain_id: int) -> str:
        """Get the V3 core factory address for a chain."""
        return self.get_protocol_config(chain_id)["factory_address"]

    def get_token_fee_detector(self, chain_id: int) -> Optional[str]:
        """Get the token fee detector address for a chain, if any."""
        if self.TOKEN_FEE_DETECTOR_ADDRESS:
            return self.TOKEN_FEE_DETECTOR_ADDRESS
        return self.get_protocol_config(chain_id)["token_fee_detector"]
