"""
Base classes for pool providers.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import logging

from src.pools.pool_types import PoolDescriptor
from src.pools.token import Token

logger = logging.getLogger(__name__)


class PoolProviderError(Exception):
    """Base exception for pool provider failures."""
    pass


class BasePoolProvider(ABC):
    """
    Abstract base class for V3 pool providers.

    A provider returns the pools the router should consider on one chain,
    optionally narrowed to the pools relevant to a swap of token_in for
    token_out.
    """

    def __init__(self, chain_id: int):
        """
        Initialize provider.

        Args:
            chain_id: Network the provider serves
        """
        self.chain_id = chain_id
        self.logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    @abstractmethod
    async def get_pools(
        self,
        token_in: Optional[Token] = None,
        token_out: Optional[Token] = None,
    ) -> List[PoolDescriptor]:
        """
        Get candidate pools.

        Args:
            token_in: Token being sold (optional)
            token_out: Token being bought (optional)

        Returns:
            List of pool descriptors
        """
        pass

    def get_identifier(self) -> str:
        """Get unique identifier for this provider."""
        return f"{self.__class__.__name__}_{int(self.chain_id)}"
