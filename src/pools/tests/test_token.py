"""
Test suite for the Token value type.
"""

import pytest

from src.config.chains import ChainId
from src.pools.errors import InvalidToken
from src.pools.token import Token, normalize_address

WETH_ADDRESS = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USDC_ADDRESS = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


class TestNormalization:
    """Test address validation and normalization."""

    def test_lowercase_address_is_checksummed(self):
        assert normalize_address(WETH_ADDRESS.lower()) == WETH_ADDRESS

    def test_uppercase_hex_is_checksummed(self):
        upper = "0x" + WETH_ADDRESS[2:].upper()
        assert normalize_address(upper) == WETH_ADDRESS

    def test_surrounding_whitespace_is_ignored(self):
        assert normalize_address(f"  {WETH_ADDRESS} ") == WETH_ADDRESS

    @pytest.mark.parametrize("address", ["", "   ", None, "0x", "0x1234", "not-an-address", 42])
    def test_malformed_address_raises(self, address):
        with pytest.raises(InvalidToken):
            normalize_address(address)


class TestToken:
    """Test token equality, hashing and ordering."""

    def test_token_stores_checksum_address(self):
        token = Token(ChainId.MAINNET, WETH_ADDRESS.lower(), 18, "WETH")
        assert token.address == WETH_ADDRESS

    def test_empty_address_fails_fast(self):
        with pytest.raises(InvalidToken):
            Token(ChainId.MAINNET, "")

    def test_equality_ignores_casing_and_metadata(self):
        a = Token(ChainId.MAINNET, WETH_ADDRESS, 18, "WETH")
        b = Token(ChainId.MAINNET, WETH_ADDRESS.lower(), None, "weth")
        assert a == b
        assert a.equals(b)
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_same_address_on_other_chain_is_different_token(self):
        a = Token(ChainId.OPTIMISM, "0x4200000000000000000000000000000000000006")
        b = Token(ChainId.BASE, "0x4200000000000000000000000000000000000006")
        assert a != b
        assert not a.equals(b)

    def test_sorts_before_uses_address_order(self):
        usdc = Token(ChainId.MAINNET, USDC_ADDRESS)
        weth = Token(ChainId.MAINNET, WETH_ADDRESS)
        # 0xa0b8... < 0xc02a...
        assert usdc.sorts_before(weth)
        assert not weth.sorts_before(usdc)

    def test_sorts_before_rejects_same_token(self):
        weth = Token(ChainId.MAINNET, WETH_ADDRESS)
        with pytest.raises(InvalidToken):
            weth.sorts_before(Token(ChainId.MAINNET, WETH_ADDRESS.lower()))

    def test_sorts_before_rejects_cross_chain(self):
        a = Token(ChainId.MAINNET, USDC_ADDRESS)
        b = Token(ChainId.ARBITRUM_ONE, WETH_ADDRESS)
        with pytest.raises(InvalidToken, match="different chains"):
            a.sorts_before(b)

    def test_token_is_immutable(self):
        token = Token(ChainId.MAINNET, WETH_ADDRESS)
        with pytest.raises(AttributeError):
            token.address = USDC_ADDRESS

    def test_to_dict(self):
        token = Token(ChainId.MAINNET, WETH_ADDRESS.lower())
        assert token.to_dict() == {"id": WETH_ADDRESS}
