"""
Blockchain batch calling utilities.

This package provides batch calling functionality for on-chain lookups,
reducing RPC overhead and isolating retry policy from callers.
"""

from .base import BaseBatcher, BatchResult, BatchConfig
from .errors import BatchError, ErrorHandler
from .token_fee_fetcher import (
    CachingTokenFeeFetcher,
    OnChainTokenFeeFetcher,
    TokenFeeFetcher,
    TokenFeeInfo,
)

__all__ = [
    'BaseBatcher',
    'BatchResult',
    'BatchConfig',
    'BatchError',
    'ErrorHandler',
    'CachingTokenFeeFetcher',
    'OnChainTokenFeeFetcher',
    'TokenFeeFetcher',
    'TokenFeeInfo',
]
