"""
Well-known tokens per network.
"""

from typing import Dict

from src.config.chains import ChainId

from .token import Token

# Wrapped native assets
WETH9: Dict[int, Token] = {
    ChainId.MAINNET: Token(ChainId.MAINNET, "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", 18, "WETH", "Wrapped Ether"),
    ChainId.OPTIMISM: Token(ChainId.OPTIMISM, "0x4200000000000000000000000000000000000006", 18, "WETH", "Wrapped Ether"),
    ChainId.POLYGON: Token(ChainId.POLYGON, "0x7ceB23fD6bC0adD59E62ac25578270cFf1b9f619", 18, "WETH", "Wrapped Ether"),
    ChainId.BASE: Token(ChainId.BASE, "0x4200000000000000000000000000000000000006", 18, "WETH", "Wrapped Ether"),
    ChainId.ARBITRUM_ONE: Token(ChainId.ARBITRUM_ONE, "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1", 18, "WETH", "Wrapped Ether"),
    ChainId.SEPOLIA: Token(ChainId.SEPOLIA, "0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14", 18, "WETH", "Wrapped Ether"),
}

WMATIC_POLYGON = Token(ChainId.POLYGON, "0x0d500B1d8E8eF31E21C99d1Db9A6444d3ADf1270", 18, "WMATIC", "Wrapped Matic")

# Mainnet
DAI_MAINNET = Token(ChainId.MAINNET, "0x6B175474E89094C44Da98b954EedeAC495271d0F", 18, "DAI", "Dai Stablecoin")
USDC_MAINNET = Token(ChainId.MAINNET, "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", 6, "USDC", "USD//C")
USDT_MAINNET = Token(ChainId.MAINNET, "0xdAC17F958D2ee523a2206206994597C13D831ec7", 6, "USDT", "Tether USD")
WBTC_MAINNET = Token(ChainId.MAINNET, "0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599", 8, "WBTC", "Wrapped BTC")

# Optimism
USDC_OPTIMISM = Token(ChainId.OPTIMISM, "0x7F5c764cBc14f9669B88837ca1490cCa17c31607", 6, "USDC", "USD//C")
DAI_OPTIMISM = Token(ChainId.OPTIMISM, "0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1", 18, "DAI", "Dai Stablecoin")
USDT_OPTIMISM = Token(ChainId.OPTIMISM, "0x94b008aA00579c1307B0EF2c499aD98a8ce58e58", 6, "USDT", "Tether USD")
WBTC_OPTIMISM = Token(ChainId.OPTIMISM, "0x68f180fcCe6836688e9084f035309E29Bf0A2095", 8, "WBTC", "Wrapped BTC")

# Polygon
USDC_POLYGON = Token(ChainId.POLYGON, "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174", 6, "USDC", "USD//C")
DAI_POLYGON = Token(ChainId.POLYGON, "0x8f3Cf7ad23Cd3CaDbD9735AFf958023239c6A063", 18, "DAI", "Dai Stablecoin")
USDT_POLYGON = Token(ChainId.POLYGON, "0xc2132D05D31c914a87C6611C10748AEb04B58e8F", 6, "USDT", "Tether USD")
WBTC_POLYGON = Token(ChainId.POLYGON, "0x1BFD67037B42Cf73acF2047067bd4F2C47D9BfD6", 8, "WBTC", "Wrapped BTC")

# Base
USDC_BASE = Token(ChainId.BASE, "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913", 6, "USDC", "USD Coin")
USDBC_BASE = Token(ChainId.BASE, "0xd9aAEc86B65D86f6A7B5B1b0c42FFA531710b6CA", 6, "USDbC", "USD Base Coin")
DAI_BASE = Token(ChainId.BASE, "0x50c5725949A6F0c72E6C4a641F24049A917DB0Cb", 18, "DAI", "Dai Stablecoin")

# Arbitrum
WBTC_ARBITRUM = Token(ChainId.ARBITRUM_ONE, "0x2f2a2543B76A4166549F7aaB2e75Bef0aefC5B0f", 8, "WBTC", "Wrapped BTC")
DAI_ARBITRUM = Token(ChainId.ARBITRUM_ONE, "0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1", 18, "DAI", "Dai Stablecoin")
USDC_ARBITRUM = Token(ChainId.ARBITRUM_ONE, "0xFF970A61A04b1cA14834A43f5dE4533eBDDB5CC8", 6, "USDC", "USD//C")
USDT_ARBITRUM = Token(ChainId.ARBITRUM_ONE, "0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9", 6, "USDT", "Tether USD")

# Sepolia
USDC_SEPOLIA = Token(ChainId.SEPOLIA, "0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238", 6, "USDC", "USDC")
