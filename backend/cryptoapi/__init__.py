"""
cryptoapi - async client for the DexScreener and CoinGecko public APIs

    from cryptoapi import dexscreener_client, coingecko_client

    pairs = await dexscreener_client.search_pairs("PEPE")
    prices = await coingecko_client.get_price(["bitcoin", "ethereum"], ["usd"])
    await cryptoapi.aclose()
"""
from cryptoapi.core.config import Settings, settings
from cryptoapi.core.errors import ApiError, DecodeError, RequestError, TransportError
from cryptoapi.providers import (
    BaseDexAdapter,
    BaseMarketAdapter,
    CoinGeckoClient,
    DexScreenerClient,
    coingecko_client,
    dexscreener_client,
)
from cryptoapi.utils.http_client import SharedHTTPClient, build_async_client, fetch_json


async def aclose():
    """Close the shared HTTP client"""
    await SharedHTTPClient.close()


__all__ = [
    "Settings",
    "settings",
    "ApiError",
    "RequestError",
    "TransportError",
    "DecodeError",
    "BaseDexAdapter",
    "BaseMarketAdapter",
    "DexScreenerClient",
    "CoinGeckoClient",
    "dexscreener_client",
    "coingecko_client",
    "SharedHTTPClient",
    "build_async_client",
    "fetch_json",
    "aclose",
]
