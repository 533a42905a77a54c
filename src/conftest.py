"""Shared test fixtures."""

import pytest

from src.config.chains import ChainId
from src.pools.base_tokens import BaseTokenRegistry
from src.pools.token import Token


@pytest.fixture(scope="session")
def registry():
    """Default base token registry."""
    return BaseTokenRegistry.default()


@pytest.fixture
def uni_mainnet():
    """Mainnet token outside the base set."""
    return Token(ChainId.MAINNET, "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984", 18, "UNI")


@pytest.fixture
def link_mainnet():
    """Another mainnet token outside the base set."""
    return Token(ChainId.MAINNET, "0x514910771AF9Ca656af840dff83E8264EcF986CA", 18, "LINK")
