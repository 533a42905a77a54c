#!/usr/bin/env python3
"""
Print the static candidate pools for a chain as JSON.

Usage:
    python -m src.scripts.generate_candidate_pools --chain ethereum
    python -m src.scripts.generate_candidate_pools --chain 42161 \
        --token-in 0x912CE59144191C1204E64559FE8253a0e49E6548 \
        --token-out 0xFF970A61A04b1cA14834A43f5dE4533eBDDB5CC8
    python -m src.scripts.generate_candidate_pools --chain base --output pools.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import ujson

from src.config import ConfigManager
from src.pools.errors import PoolGenerationError
from src.pools.token import Token
from src.providers.static_pool_provider import generate_candidate_pools

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate static Uniswap V3 candidate pools for a chain",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--chain",
        default=None,
        help="Chain name (ethereum, optimism, polygon, base, arbitrum, sepolia) or chain ID",
    )
    parser.add_argument("--token-in", help="Address of the token being sold")
    parser.add_argument("--token-out", help="Address of the token being bought")
    parser.add_argument("--output", type=Path, help="Write JSON to this file instead of stdout")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function."""
    args = parse_args(argv)
    config = ConfigManager()

    try:
        chain_id = config.chains.resolve_chain_id(args.chain or config.chains.DEFAULT_CHAIN)
    except ValueError as e:
        logger.error(f"❌ {e}")
        return 1

    try:
        token_in = Token(chain_id, args.token_in) if args.token_in else None
        token_out = Token(chain_id, args.token_out) if args.token_out else None
        pools = generate_candidate_pools(chain_id, token_in, token_out)
    except PoolGenerationError as e:
        logger.error(f"❌ {e}")
        return 1

    payload = ujson.dumps([pool.to_dict() for pool in pools], indent=2)

    if args.output:
        args.output.write_text(payload + "\n")
        logger.info(f"💾 Wrote {len(pools)} pools to {args.output}")
    else:
        print(payload)

    return 0


if __name__ == "__main__":
    sys.exit(main())
