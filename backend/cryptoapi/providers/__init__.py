"""
Data providers for cryptocurrencies

Each provider is an independent module implementing an interface for data retrieval.

Structure:
- dex/ - DEX aggregator (DexScreener)
- coingecko_client - market data aggregator (CoinGecko)
"""

from .base_adapters import BaseDexAdapter, BaseMarketAdapter
from .base_client import BaseProviderClient
from .endpoints import Endpoint
from .coingecko_client import CoinGeckoClient, coingecko_client
from .dex import DexScreenerClient, dexscreener_client

__all__ = [
    "BaseDexAdapter",
    "BaseMarketAdapter",
    "BaseProviderClient",
    "Endpoint",
    "CoinGeckoClient",
    "coingecko_client",
    "DexScreenerClient",
    "dexscreener_client",
]
