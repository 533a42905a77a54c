"""
Tests for batch error classification and the retry loop.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.batchers.base import BaseBatcher, BatchConfig, BatchResult
from src.batchers.errors import BatchError, ErrorHandler


class EchoBatcher(BaseBatcher):
    """Minimal batcher for exercising the shared helpers."""

    async def batch_call(self, addresses, block_identifier="latest"):
        return BatchResult(success=True, data={a: a for a in addresses})


@pytest.fixture
def handler():
    return ErrorHandler()


@pytest.fixture
def batcher():
    return EchoBatcher(MagicMock(), BatchConfig(batch_size=2, max_retries=3, retry_delay=0))


class TestErrorHandler:
    """Test error classification and retry policy."""

    @pytest.mark.parametrize("message,category", [
        ("429 Too Many Requests", "rate_limit"),
        ("Connection refused", "network"),
        ("Read timeout", "network"),
        ("execution reverted", "contract"),
        ("out of gas", "contract"),
        ("invalid opcode", "validation"),
        ("something odd", "unknown"),
    ])
    def test_classify_error(self, handler, message, category):
        assert handler.classify_error(Exception(message)) == category

    def test_retry_policy(self, handler):
        assert handler.should_retry(Exception("connection reset"), 0, 3)
        assert handler.should_retry(Exception("rate limit"), 1, 3)
        assert handler.should_retry(Exception("something odd"), 2, 3)
        assert not handler.should_retry(Exception("execution reverted"), 0, 3)
        assert not handler.should_retry(Exception("invalid argument"), 0, 3)
        assert not handler.should_retry(Exception("connection reset"), 3, 3)

    def test_retry_delay(self, handler):
        assert handler.get_retry_delay(Exception("timeout"), 0) == 1
        assert handler.get_retry_delay(Exception("timeout"), 3) == 8
        assert handler.get_retry_delay(Exception("rate limit"), 1) == 4
        assert handler.get_retry_delay(Exception("something odd"), 0) == 1.5
        assert handler.get_retry_delay(Exception("timeout"), 10) == 60


class TestBaseBatcher:
    """Test helpers shared by all batchers."""

    def test_chunk_addresses(self, batcher):
        assert batcher._chunk_addresses(["a", "b", "c", "d", "e"]) == [
            ["a", "b"], ["c", "d"], ["e"]
        ]

    def test_validate_addresses(self, batcher):
        validated = batcher._validate_addresses([
            "0x1f9840a85d5af5bf1d1762f925bdaddc4201f984",
            "0x1234",
        ])
        assert validated == ["0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984"]

    @pytest.mark.asyncio
    async def test_retry_until_success(self, batcher):
        operation = AsyncMock(side_effect=[ConnectionError("connection reset"), "ok"])
        assert await batcher._retry_operation(operation) == "ok"
        assert operation.await_count == 2

    @pytest.mark.asyncio
    async def test_retry_gives_up(self, batcher):
        operation = AsyncMock(side_effect=ConnectionError("connection reset"))
        with pytest.raises(ConnectionError):
            await batcher._retry_operation(operation)
        assert operation.await_count == 3

    @pytest.mark.asyncio
    async def test_revert_is_not_retried(self, batcher):
        operation = AsyncMock(side_effect=ValueError("execution reverted"))
        with pytest.raises(ValueError):
            await batcher._retry_operation(operation)
        assert operation.await_count == 1

    @pytest.mark.asyncio
    async def test_zero_retries(self):
        batcher = EchoBatcher(MagicMock(), BatchConfig(max_retries=0))
        with pytest.raises(BatchError, match="not attempted"):
            await batcher._retry_operation(AsyncMock())

    def test_make_call(self, batcher):
        batcher.web3.eth.call.return_value = b"\x01"
        assert batcher._make_call("0xabc", b"\x00", 123) == b"\x01"
        batcher.web3.eth.call.assert_called_once_with(
            {"to": "0xabc", "data": b"\x00"}, block_identifier=123
        )
