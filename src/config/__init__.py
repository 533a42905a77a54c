"""
Configuration management for the static pool provider.

Use get_config() to access all configuration settings.

Example:
    from src.config import get_config

    config = get_config()

    # Access chain settings
    ethereum_rpc = config.chains.get_rpc_url("ethereum")
    chain_id = config.chains.resolve_chain_id("arbitrum")

    # Access protocol settings
    factory = config.protocols.get_factory_address(chain_id)
"""

from .base import BaseConfig, ConfigError
from .chains import ChainConfig, ChainId
from .manager import ConfigManager, get_config, reload_config
from .protocols import (
    POOL_INIT_CODE_HASH,
    TOKEN_FEE_DETECTOR_ADDRESSES,
    V3_CORE_FACTORY_ADDRESSES,
    ProtocolConfig,
)

__all__ = [
    "BaseConfig",
    "ConfigError",
    "ChainConfig",
    "ChainId",
    "ProtocolConfig",
    "POOL_INIT_CODE_HASH",
    "TOKEN_FEE_DETECTOR_ADDRESSES",
    "V3_CORE_FACTORY_ADDRESSES",
    "ConfigManager",
    "get_config",
    "reload_config",
]
