"""
Configuration manager for the static pool provider.

This module provides a centralized way to access all configuration settings
across the application. It combines all configuration classes into a single
easy-to-use interface.
"""

import logging
from typing import Dict, Any
from .base import BaseConfig, ConfigError
from .chains import ChainConfig
from .protocols import ProtocolConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Centralized configuration manager that combines all configuration classes.

    This class provides easy access to all configuration settings and ensures
    that configurations are properly initialized and validated.
    """

    def __init__(self, environment: str = None):
        """
        Initialize the configuration manager.

        Args:
            environment: Override the environment (local, dev, staging, production)
        """
        self._environment = environment
        self._base_config = None
        self._chain_config = None
        self._protocol_config = None
        self._initialize_configs()

    def _initialize_configs(self):
        """Initialize all configuration objects."""
        try:
            # Initialize base configuration first
            self._base_config = BaseConfig()
            if self._environment:
                self._base_config.ENVIRONMENT = self._environment
                self._base_config._validate_config()

            self._chain_config = ChainConfig()
            self._protocol_config = ProtocolConfig()

            logger.info(f"Configuration initialized for environment: {self.environment}")

        except Exception as e:
            logger.error(f"Failed to initialize configuration: {e}")
            raise ConfigError(f"Configuration initialization failed: {e}")

    @property
    def environment(self) -> str:
        """Get current environment."""
        return self._base_config.ENVIRONMENT

    @property
    def base(self) -> BaseConfig:
        """Get base configuration."""
        return self._base_config

    @property
    def chains(self) -> ChainConfig:
        """Get chain configuration."""
        return self._chain_config

    @property
    def protocols(self) -> ProtocolConfig:
        """Get protocol configuration."""
        return self._protocol_config

    def get_chain_protocol_config(self, chain_name: str) -> Dict[str, Any]:
        """
        Get combined chain and Uniswap V3 configuration.

        Args:
            chain_name: Name of the blockchain (ethereum, base, arbitrum, ...)

        Returns:
            Combined configuration dictionary
        """
        chain_config = self.chains.get_chain_config(chain_name)
        chain_id = chain_config["chain_id"]
        return {
            "chain_name": chain_name,
            "chain_id": chain_id,
            "rpc_url": chain_config["rpc_url"],
            "factory_address": self.protocols.get_factory_address(chain_id),
            "token_fee_detector": self.protocols.get_token_fee_detector(chain_id),
        }

    def validate_configuration(self) -> bool:
        """
        Validate all configuration settings.

        Returns:
            True if all configurations are valid

        Raises:
            ConfigError: If any configuration is invalid
        """
        try:
            supported_chains = self.chains.supported_chains
            if not supported_chains:
                raise ConfigError("No chains configured")

            for chain_name, chain in supported_chains.items():
                try:
                    self.protocols.get_factory_address(chain["chain_id"])
                except ValueError:
                    raise ConfigError(f"No Uniswap V3 factory configured for {chain_name}")

                if not self.protocols.get_token_fee_detector(chain["chain_id"]):
                    logger.debug(f"No token fee detector for {chain_name}")

            logger.info("Configuration validation successful")
            return True

        except ConfigError as e:
            logger.error(f"Configuration validation failed: {e}")
            raise

    def to_dict(self) -> Dict[str, Any]:
        """Convert all configurations to dictionary format."""
        return {
            "environment": self.environment,
            "base": self.base.to_dict() if self.base else {},
            "chains": self.chains.to_dict() if self.chains else {},
            "protocols": self.protocols.to_dict() if self.protocols else {},
        }

    def __repr__(self) -> str:
        """String representation of the configuration manager."""
        return f"ConfigManager(environment={self.environment})"


# Global configuration manager instance
_config_manager = None


def get_config(environment: str = None, force_reload: bool = False) -> ConfigManager:
    """
    Get the global configuration manager instance.

    Args:
        environment: Override environment
        force_reload: Force reload of configuration

    Returns:
        ConfigManager instance
    """
    global _config_manager

    if _config_manager is None or force_reload:
        _config_manager = ConfigManager(environment=environment)
        _config_manager.validate_configuration()

    return _config_manager


def reload_config(environment: str = None) -> ConfigManager:
    """
    Reload the global configuration manager.

    Args:
        environment: Override environment

    Returns:
        New ConfigManager instance
    """
    return get_config(environment=environment, force_reload=True)
