"""
Base classes for blockchain batch calling.

This module provides abstract interfaces for batching blockchain calls
to reduce RPC overhead using direct eth.call() operations.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from web3 import Web3

from .errors import BatchError, ErrorHandler

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Result from a batch operation."""

    success: bool
    data: Dict[str, Any]
    block_number: Optional[int] = None
    timestamp: Optional[datetime] = None
    error: Optional[str] = None


@dataclass
class BatchConfig:
    """Configuration for batch operations."""

    batch_size: int = 100
    max_retries: int = 3
    retry_delay: float = 1.0
    timeout: float = 30.0


class BaseBatcher(ABC):
    """
    Abstract base class for blockchain batch operations.

    Provides common functionality for batching RPC calls to reduce
    network overhead and improve performance.
    """

    def __init__(self, web3: Web3, config: Optional[BatchConfig] = None):
        self.web3 = web3
        self.config = config or BatchConfig()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.error_handler = ErrorHandler(self.logger)

    @abstractmethod
    async def batch_call(
        self, addresses: List[str], block_identifier: Union[int, str] = "latest"
    ) -> BatchResult:
        """
        Execute a batch call for the given addresses.

        Args:
            addresses: List of contract addresses to batch call
            block_identifier: Block to call at

        Returns:
            BatchResult with success status and data
        """
        pass

    def _chunk_addresses(self, addresses: List[str]) -> List[List[str]]:
        """Split addresses into chunks based on batch_size."""
        chunk_size = self.config.batch_size
        return [
            addresses[i : i + chunk_size] for i in range(0, len(addresses), chunk_size)
        ]

    async def _retry_operation(self, operation, *args, **kwargs) -> Any:
        """Retry an operation with exponential backoff and intelligent error handling."""
        last_error = None

        for attempt in range(self.config.max_retries):
            try:
                return await operation(*args, **kwargs)
            except Exception as e:
                last_error = e

                # Log error with context
                self.error_handler.log_error(
                    e,
                    {
                        "attempt": attempt + 1,
                        "max_retries": self.config.max_retries,
                        "operation": operation.__name__
                        if hasattr(operation, "__name__")
                        else str(operation),
                    },
                )

                # Check if we should retry this error
                if not self.error_handler.should_retry(
                    e, attempt, self.config.max_retries
                ):
                    self.logger.debug(f"Not retrying error: {e}")
                    raise

                if attempt == self.config.max_retries - 1:
                    raise

                # Calculate delay based on error type
                delay = self.error_handler.get_retry_delay(e, attempt) * self.config.retry_delay
                self.logger.info(
                    f"Retrying in {delay}s... (attempt {attempt + 1}/{self.config.max_retries})"
                )
                await asyncio.sleep(delay)

        # Only reached when max_retries < 1
        if last_error:
            raise last_error
        raise BatchError("Operation was not attempted (max_retries < 1)")

    def _validate_addresses(self, addresses: List[str]) -> List[str]:
        """Validate and normalize Ethereum addresses, dropping invalid ones."""
        validated = []
        for addr in addresses:
            try:
                validated.append(Web3.to_checksum_address(addr))
            except (ValueError, TypeError) as e:
                self.logger.warning(f"Invalid address {addr}: {e}")
                continue
        return validated

    def _make_call(
        self, to: str, call_data: bytes, block_identifier: Union[int, str] = "latest"
    ) -> bytes:
        """
        Make a single eth.call() against a deployed contract.

        Args:
            to: Contract address
            call_data: ABI-encoded call data including the selector
            block_identifier: Block to call at

        Returns:
            Raw bytes response from the call
        """
        return self.web3.eth.call(
            {"to": to, "data": call_data}, block_identifier=block_identifier
        )
