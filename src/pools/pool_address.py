"""
Canonical Uniswap V3 pool identity.

A V3 pool is deployed by its factory with CREATE2, salted by the sorted token
pair and the fee, so its address is a pure function of
(factory, token0, token1, fee). Every component that needs to name a V3 pool,
synthetic or observed on-chain, goes through get_pool_address().
"""

from typing import Tuple

from eth_abi import encode
from eth_utils import keccak, to_bytes, to_checksum_address

from src.config.protocols import POOL_INIT_CODE_HASH, V3_CORE_FACTORY_ADDRESSES

from .errors import InvalidToken, UnsupportedNetwork
from .fee_tiers import FeeTier
from .token import Token, normalize_address


def sort_tokens(token_a: Token, token_b: Token) -> Tuple[Token, Token]:
    """Return the pair as (token0, token1)."""
    if token_a.sorts_before(token_b):
        return token_a, token_b
    return token_b, token_a


def compute_pool_address(
    factory_address: str,
    token_a: Token,
    token_b: Token,
    fee: FeeTier,
    init_code_hash: str = POOL_INIT_CODE_HASH,
) -> str:
    """
    Compute the CREATE2 address of a V3 pool.

    address = keccak256(0xff ++ factory ++ salt ++ init_code_hash)[12:]
    salt    = keccak256(abi.encode(token0, token1, fee))

    Args:
        factory_address: Pool deployer (V3 core factory)
        token_a: One token of the pair, in any order
        token_b: The other token
        fee: Fee tier of the pool
        init_code_hash: Hash of the pool creation code

    Returns:
        Checksummed pool address

    Raises:
        InvalidToken: If the tokens are identical or on different chains
    """
    token0, token1 = sort_tokens(token_a, token_b)

    salt = keccak(
        encode(
            ["address", "address", "uint24"],
            [token0.address, token1.address, int(fee)],
        )
    )
    packed = (
        b"\xff"
        + to_bytes(hexstr=normalize_address(factory_address))
        + salt
        + to_bytes(hexstr=init_code_hash)
    )

    return to_checksum_address(keccak(packed)[12:])


def get_pool_address(chain_id: int, token_a: Token, token_b: Token, fee: FeeTier) -> str:
    """
    Pool address for a token pair and fee tier on a network.

    Raises:
        UnsupportedNetwork: If no V3 factory is known for the network
        InvalidToken: If the tokens are identical or on different chains
    """
    factory_address = V3_CORE_FACTORY_ADDRESSES.get(chain_id)
    if factory_address is None:
        raise UnsupportedNetwork(chain_id, f"No Uniswap V3 factory for network: {chain_id}")
    if token_a.chain_id != chain_id:
        raise InvalidToken(f"{token_a!r} is not on network {chain_id}")

    return compute_pool_address(factory_address, token_a, token_b, fee)
