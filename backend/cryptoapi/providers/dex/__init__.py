"""
DEX (Decentralized Exchange / Aggregator) Providers

DexScreener aggregator for token profiles, boosts, pairs and pools
"""

from .dexscreener_client import DexScreenerClient, dexscreener_client

__all__ = [
    "DexScreenerClient",
    "dexscreener_client",
]
