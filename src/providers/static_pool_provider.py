"""
Static V3 pool provider.

Synthesizes candidate pools from the base token table instead of reading them
from a live data source. Useful when other data sources are unavailable,
e.g. the subgraph is down.

Since the pools are not read from chain, their liquidity and TVL values are
placeholders (see src.pools.pool_types) and must not be relied on. Pools are
not checked for existence either: a candidate may name a pool that was never
deployed.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from src.pools.base_tokens import BaseTokenRegistry
from src.pools.errors import InvalidToken
from src.pools.fee_tiers import FeeTier
from src.pools.pool_address import get_pool_address, sort_tokens
from src.pools.pool_types import PoolDescriptor
from src.pools.token import Token

from .base import BasePoolProvider

TokenPair = Tuple[Token, Token]
PoolRow = Tuple[Token, Token, FeeTier]


class CandidatePoolGenerator:
    """
    Build the candidate pool universe for a network.

    Covers every base/base pair and, for a requested swap, the direct pair
    plus each side of the swap against every base, all at every fee tier.
    Output order is fixed: base/base pools first, then the requested-pair
    pools, each in fee tier order. When the same pool is reached twice, the
    first occurrence is kept.
    """

    def __init__(self, registry: Optional[BaseTokenRegistry] = None):
        """
        Initialize the generator.

        Args:
            registry: Base token registry (defaults to the built-in table)
        """
        self.registry = registry if registry is not None else BaseTokenRegistry.default()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def generate(
        self,
        chain_id: int,
        token_in: Optional[Token] = None,
        token_out: Optional[Token] = None,
    ) -> List[PoolDescriptor]:
        """
        Generate candidate pools for a network.

        Args:
            chain_id: Network to generate pools for
            token_in: Token being sold, given together with token_out
            token_out: Token being bought, given together with token_in

        Returns:
            De-duplicated pool descriptors in generation order

        Raises:
            UnsupportedNetwork: If the network has no base tokens
            InvalidToken: If the requested tokens are unusable
        """
        bases = self.registry.get_bases(chain_id)
        self._validate_request(chain_id, token_in, token_out)

        pairs = self._build_pairs(bases, token_in, token_out)
        distinct_pairs = [pair for pair in pairs if not self._is_self_pair(*pair)]
        rows = self._expand_fee_tiers(distinct_pairs)
        pools = self._build_pools(chain_id, rows)

        self.logger.debug(
            f"Chain {int(chain_id)}: {len(pairs)} pairs, {len(distinct_pairs)} after "
            f"self-pair filter, {len(rows)} rows, {len(pools)} unique pools"
        )
        self.logger.info(f"Generated {len(pools)} static candidate pools for chain {int(chain_id)}")
        return pools

    @staticmethod
    def _validate_request(
        chain_id: int, token_in: Optional[Token], token_out: Optional[Token]
    ) -> None:
        if (token_in is None) != (token_out is None):
            raise InvalidToken("token_in and token_out must be given together")

        for token in (token_in, token_out):
            if token is None:
                continue
            if not isinstance(token, Token):
                raise InvalidToken(f"Expected a Token, got {type(token).__name__}")
            if token.chain_id != chain_id:
                raise InvalidToken(f"{token!r} is not on network {int(chain_id)}")

    @staticmethod
    def _build_pairs(
        bases: Sequence[Token],
        token_in: Optional[Token],
        token_out: Optional[Token],
    ) -> List[TokenPair]:
        """Ordered pair list, self pairs and mirrored pairs included."""
        pairs = [(base, other) for base in bases for other in bases]

        if token_in is not None and token_out is not None:
            pairs.append((token_in, token_out))
            pairs.extend((token_in, base) for base in bases)
            pairs.extend((token_out, base) for base in bases)

        return pairs

    def _is_self_pair(self, token_a: Token, token_b: Token) -> bool:
        same_address = token_a.address.lower() == token_b.address.lower()
        same_token = token_a.equals(token_b)

        if same_address != same_token:
            self.logger.warning(
                f"Token identity mismatch for {token_a!r} and {token_b!r}: "
                f"same_address={same_address}, same_token={same_token}"
            )

        return same_address or same_token

    @staticmethod
    def _expand_fee_tiers(pairs: Sequence[TokenPair]) -> List[PoolRow]:
        return [(token_a, token_b, fee) for token_a, token_b in pairs for fee in FeeTier]

    @staticmethod
    def _build_pools(chain_id: int, rows: Sequence[PoolRow]) -> List[PoolDescriptor]:
        seen_pool_ids = set()
        pools = []

        for token_a, token_b, fee in rows:
            pool_id = get_pool_address(chain_id, token_a, token_b, fee)
            if pool_id in seen_pool_ids:
                continue
            seen_pool_ids.add(pool_id)

            token0, token1 = sort_tokens(token_a, token_b)
            pools.append(
                PoolDescriptor(id=pool_id, fee_tier=fee, token0=token0, token1=token1)
            )

        return pools


def generate_candidate_pools(
    chain_id: int,
    token_in: Optional[Token] = None,
    token_out: Optional[Token] = None,
    registry: Optional[BaseTokenRegistry] = None,
) -> List[PoolDescriptor]:
    """Generate candidate pools for a network. See CandidatePoolGenerator."""
    return CandidatePoolGenerator(registry).generate(chain_id, token_in, token_out)


class StaticPoolProvider(BasePoolProvider):
    """Pool provider backed by CandidatePoolGenerator."""

    def __init__(self, chain_id: int, registry: Optional[BaseTokenRegistry] = None):
        super().__init__(chain_id)
        self.generator = CandidatePoolGenerator(registry)

    async def get_pools(
        self,
        token_in: Optional[Token] = None,
        token_out: Optional[Token] = None,
    ) -> List[PoolDescriptor]:
        self.logger.debug(f"In static pool provider for chain {int(self.chain_id)}")
        return self.generator.generate(self.chain_id, token_in, token_out)
