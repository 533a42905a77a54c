"""
Pool provider that falls back through a list of providers.
"""

from typing import List, Optional, Sequence

from src.pools.pool_types import PoolDescriptor
from src.pools.token import Token

from .base import BasePoolProvider, PoolProviderError


class FallbackPoolProvider(BasePoolProvider):
    """
    Try providers in order and return the first successful result.

    Typically a live provider (subgraph, indexer) followed by
    StaticPoolProvider as the last resort.
    """

    def __init__(self, providers: Sequence[BasePoolProvider], empty_on_failure: bool = False):
        """
        Initialize the fallback chain.

        Args:
            providers: Providers to try, in order
            empty_on_failure: Return no pools instead of raising when every provider fails

        Raises:
            ValueError: If no providers are given or they serve different chains
        """
        if not providers:
            raise ValueError("At least one pool provider is required")

        chain_ids = {provider.chain_id for provider in providers}
        if len(chain_ids) > 1:
            raise ValueError(f"Providers serve different chains: {sorted(chain_ids)}")

        super().__init__(providers[0].chain_id)
        self.providers = list(providers)
        self.empty_on_failure = empty_on_failure

    async def get_pools(
        self,
        token_in: Optional[Token] = None,
        token_out: Optional[Token] = None,
    ) -> List[PoolDescriptor]:
        errors = []

        for index, provider in enumerate(self.providers):
            try:
                pools = await provider.get_pools(token_in, token_out)
            except Exception as e:
                errors.append(f"{provider.get_identifier()}: {e}")
                self.logger.warning(
                    f"Pool provider {provider.get_identifier()} failed "
                    f"({index + 1}/{len(self.providers)}): {e}"
                )
                continue

            if index > 0:
                self.logger.info(f"Using fallback pool provider {provider.get_identifier()}")
            return pools

        self.logger.error(f"All {len(self.providers)} pool providers failed")
        if self.empty_on_failure:
            return []
        raise PoolProviderError(f"All pool providers failed: {'; '.join(errors)}")
