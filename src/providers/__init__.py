"""
V3 pool providers.

This package provides the pool sources the router draws candidate pools
from, including the static provider used when live data is unavailable.
"""

from .base import BasePoolProvider, PoolProviderError
from .fallback_provider import FallbackPoolProvider
from .static_pool_provider import (
    CandidatePoolGenerator,
    StaticPoolProvider,
    generate_candidate_pools,
)

__all__ = [
    'BasePoolProvider',
    'PoolProviderError',
    'FallbackPoolProvider',
    'CandidatePoolGenerator',
    'StaticPoolProvider',
    'generate_candidate_pools',
]
