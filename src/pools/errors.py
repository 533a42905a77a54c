"""
Exceptions raised while building candidate pools.
"""

from typing import Optional


class PoolGenerationError(Exception):
    """Base exception for candidate pool generation."""
    pass


class UnsupportedNetwork(PoolGenerationError):
    """Raised when a network has no configured base tokens or factory."""

    def __init__(self, chain_id: int, message: Optional[str] = None):
        super().__init__(message or f"Unsupported network: {chain_id}")
        self.chain_id = chain_id


class InvalidToken(PoolGenerationError, ValueError):
    """Raised when a token reference is malformed or unusable."""
    pass
