"""
DexScreener HTTP Client

Client for the DexScreener public API: token profiles, boosts, orders,
pairs and pools. Responses are returned as decoded, unmodified.

get_top_coins, get_trending and get_most_liked are simulated views:
DexScreener has no such endpoints, so they reorder the latest token
profiles (shuffle, shuffle + cut to 70%, reverse).
"""
import random
from typing import Any, Optional

import httpx

from cryptoapi.core.config import settings
from cryptoapi.providers.base_adapters import BaseDexAdapter
from cryptoapi.providers.base_client import BaseProviderClient
from cryptoapi.providers.endpoints import Endpoint
from cryptoapi.utils.display import most_liked_items, shuffle_items, trending_items

LATEST_PROFILES = Endpoint("/token-profiles/latest/v1")
LATEST_BOOSTS = Endpoint("/token-boosts/latest/v1")
TOP_BOOSTS = Endpoint("/token-boosts/top/v1")
ORDERS = Endpoint("/orders/v1/{chain_id}/{token_address}")
PAIR = Endpoint("/latest/dex/pairs/{chain_id}/{pair_address}")
SEARCH = Endpoint("/latest/dex/search", params=("q",))
TOKEN_POOLS = Endpoint("/latest/dex/tokens/{token_address}")
TOKEN_DETAILS = Endpoint("/latest/dex/tokens/{chain_id}/{token_address}")


class DexScreenerClient(BaseProviderClient, BaseDexAdapter):

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(base_url or settings.DEXSCREENER_BASE_URL, http_client)
        self.rng = rng

    async def get_latest_profiles(self) -> Any:
        return await self.get(LATEST_PROFILES, "fetching latest profiles")

    async def get_latest_boosts(self) -> Any:
        return await self.get(LATEST_BOOSTS, "fetching latest boosts")

    async def get_top_boosts(self) -> Any:
        return await self.get(TOP_BOOSTS, "fetching top boosts")

    async def check_orders(self, chain_id: str, token_address: str) -> Any:
        return await self.get(
            ORDERS,
            "checking orders",
            path_params={"chain_id": chain_id, "token_address": token_address},
        )

    async def get_pair_info(self, chain_id: str, pair_address: str) -> Any:
        return await self.get(
            PAIR,
            "fetching pair info",
            path_params={"chain_id": chain_id, "pair_address": pair_address},
        )

    async def search_pairs(self, query: str) -> Any:
        """
        Search pairs by token name, symbol or address

        Args:
            query: Free-text query, percent-encoded into ?q=
        """
        return await self.get(SEARCH, "searching pairs", query={"q": query})

    async def get_token_pools(self, token_address: str) -> Any:
        return await self.get(
            TOKEN_POOLS,
            "fetching token pools",
            path_params={"token_address": token_address},
        )

    async def get_token_details(self, chain_id: str, token_address: str) -> Any:
        return await self.get(
            TOKEN_DETAILS,
            "fetching token details",
            path_params={"chain_id": chain_id, "token_address": token_address},
        )

    # Simulated sections, all derived from the latest profiles

    async def get_top_coins(self) -> Any:
        data = await self.get(LATEST_PROFILES, "fetching top coins")
        if isinstance(data, list):
            return shuffle_items(data, self.rng)
        return data

    async def get_trending(self) -> Any:
        data = await self.get(LATEST_PROFILES, "fetching trending coins")
        if isinstance(data, list):
            return trending_items(data, rng=self.rng)
        return data

    async def get_most_liked(self) -> Any:
        data = await self.get(LATEST_PROFILES, "fetching most liked coins")
        if isinstance(data, list):
            return most_liked_items(data)
        return data


# Global instance
dexscreener_client = DexScreenerClient()
