"""
Token transfer fee lookup.

Determines which tokens charge a fee on transfer (fee-on-transfer tokens) by
calling a fee detector contract. The detector flash-borrows a small amount of
the token from a pool against the wrapped native asset and measures what
arrives on buy and on sell.

The router uses the result to exclude or specially handle taxed tokens. The
static pool provider never calls into this module.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple, Union

from eth_abi import decode, encode
from web3 import Web3

from src.config.protocols import ProtocolConfig
from src.pools.base_tokens import BaseTokenRegistry

from .base import BaseBatcher, BatchConfig, BatchResult
from .errors import BatchError

VALIDATE_SELECTOR = Web3.keccak(text="validate(address,address,uint256)")[:4]


@dataclass(frozen=True)
class TokenFeeInfo:
    """Transfer fees of a token in basis points."""

    buy_fee_bps: int
    sell_fee_bps: int

    @property
    def has_fee(self) -> bool:
        return self.buy_fee_bps > 0 or self.sell_fee_bps > 0


class TokenFeeFetcher(ABC):
    """Interface for looking up token transfer fees in bulk."""

    @abstractmethod
    async def fetch_fees(self, addresses: Iterable[str]) -> Dict[str, TokenFeeInfo]:
        """
        Fetch transfer fees for a set of tokens.

        Args:
            addresses: Token addresses

        Returns:
            Mapping of checksummed address to fee info. Tokens that could not
            be classified are left out.
        """
        pass


class OnChainTokenFeeFetcher(BaseBatcher, TokenFeeFetcher):
    """
    Fee lookup through the on-chain fee detector contract.

    Each token is probed with its own eth.call() so that one reverting token
    does not fail the rest of the batch. The wrapped native asset is never
    probed and never appears in the result.
    """

    def __init__(
        self,
        web3: Web3,
        chain_id: int,
        detector_address: Optional[str] = None,
        amount_to_borrow: Optional[int] = None,
        registry: Optional[BaseTokenRegistry] = None,
        config: Optional[BatchConfig] = None,
        protocol_config: Optional[ProtocolConfig] = None,
    ):
        """
        Initialize the fee fetcher.

        Args:
            web3: Web3 instance connected to the chain
            chain_id: Chain the tokens live on
            detector_address: Fee detector contract (defaults to the configured one)
            amount_to_borrow: Token amount the detector borrows per probe
            registry: Base token registry used to find the wrapped native asset
            config: Batch configuration
            protocol_config: Protocol configuration (defaults to environment)

        Raises:
            BatchError: If no fee detector is known for the chain
            UnsupportedNetwork: If the chain has no base tokens
        """
        protocol_config = protocol_config or ProtocolConfig()
        if config is None:
            config = BatchConfig(batch_size=protocol_config.FEE_FETCH_BATCH_SIZE)
        super().__init__(web3, config)

        self.chain_id = chain_id

        if detector_address is None:
            try:
                detector_address = protocol_config.get_token_fee_detector(chain_id)
            except ValueError as e:
                raise BatchError(str(e)) from e
        if not detector_address:
            raise BatchError(f"No token fee detector configured for chain {chain_id}")
        self.detector_address = Web3.to_checksum_address(detector_address)

        self.amount_to_borrow = (
            amount_to_borrow
            if amount_to_borrow is not None
            else protocol_config.FEE_AMOUNT_TO_BORROW
        )

        registry = registry if registry is not None else BaseTokenRegistry.default()
        self.base_token = registry.wrapped_native(chain_id)

    async def fetch_fees(self, addresses: Iterable[str]) -> Dict[str, TokenFeeInfo]:
        result = await self.batch_call(list(addresses))
        if not result.success:
            raise BatchError(f"Token fee lookup failed: {result.error}")
        return result.data

    async def batch_call(
        self,
        addresses: List[str],
        block_identifier: Union[int, str] = "latest",
    ) -> BatchResult:
        """
        Probe transfer fees for multiple tokens.

        Args:
            addresses: Token addresses as hex strings
            block_identifier: Block to call at

        Returns:
            BatchResult whose data maps checksummed address to TokenFeeInfo
        """
        try:
            tokens = self._select_tokens(addresses)
            fees: Dict[str, TokenFeeInfo] = {}

            for chunk in self._chunk_addresses(tokens):
                chunk_fees = await asyncio.gather(
                    *(self._fetch_token_fee(token, block_identifier) for token in chunk)
                )
                for token, fee in zip(chunk, chunk_fees):
                    if fee is not None:
                        fees[token] = fee

            self.logger.info(
                f"Fetched transfer fees for {len(fees)}/{len(tokens)} tokens "
                f"on chain {int(self.chain_id)}"
            )

            return BatchResult(
                success=True,
                data=fees,
                timestamp=datetime.now(timezone.utc),
            )

        except Exception as e:
            self.logger.error(f"Token fee batch call failed: {e}")
            return BatchResult(success=False, data={}, error=str(e))

    def _select_tokens(self, addresses: List[str]) -> List[str]:
        """Validated, de-duplicated addresses without the wrapped native asset."""
        validated = dict.fromkeys(self._validate_addresses(addresses))
        validated.pop(self.base_token.address, None)
        return list(validated)

    def _encode_validate_call(self, token: str) -> bytes:
        return VALIDATE_SELECTOR + encode(
            ["address", "address", "uint256"],
            [token, self.base_token.address, self.amount_to_borrow],
        )

    async def _fetch_token_fee(
        self, token: str, block_identifier: Union[int, str]
    ) -> Optional[TokenFeeInfo]:
        async def _call():
            return self._make_call(
                self.detector_address, self._encode_validate_call(token), block_identifier
            )

        try:
            raw_response = await self._retry_operation(_call)
            buy_fee_bps, sell_fee_bps = decode(["uint256", "uint256"], bytes(raw_response))
        except Exception as e:
            self.logger.warning(f"Could not determine transfer fee for {token}: {e}")
            return None

        return TokenFeeInfo(buy_fee_bps=buy_fee_bps, sell_fee_bps=sell_fee_bps)


class CachingTokenFeeFetcher(TokenFeeFetcher):
    """
    In-memory TTL cache in front of another fee fetcher.

    Only tokens that were classified are cached; tokens the wrapped fetcher
    left out are asked for again on the next call.
    """

    def __init__(
        self,
        fetcher: TokenFeeFetcher,
        ttl_seconds: Optional[float] = None,
        protocol_config: Optional[ProtocolConfig] = None,
    ):
        if ttl_seconds is None:
            ttl_seconds = (protocol_config or ProtocolConfig()).FEE_CACHE_TTL_SECONDS
        self.fetcher = fetcher
        self.ttl_seconds = ttl_seconds
        # lowercase address -> (checksummed address, fee, expiry timestamp)
        self._cache: Dict[str, Tuple[str, TokenFeeInfo, float]] = {}

    async def fetch_fees(self, addresses: Iterable[str]) -> Dict[str, TokenFeeInfo]:
        now = time.time()
        fees: Dict[str, TokenFeeInfo] = {}
        misses: List[str] = []

        for address in addresses:
            entry = self._cache.get(address.lower())
            if entry is not None and entry[2] > now:
                fees[entry[0]] = entry[1]
            else:
                misses.append(address)

        if misses:
            fetched = await self.fetcher.fetch_fees(misses)
            expiry = time.time() + self.ttl_seconds
            for address, fee in fetched.items():
                self._cache[address.lower()] = (address, fee, expiry)
                fees[address] = fee

        return fees

    def clear(self) -> None:
        self._cache.clear()
