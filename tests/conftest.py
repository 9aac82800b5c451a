from __future__ import annotations

import random

import httpx
import pytest
import pytest_asyncio

from cryptoapi.providers.coingecko_client import CoinGeckoClient
from cryptoapi.providers.dex.dexscreener_client import DexScreenerClient

DEX_URL = "https://api.dexscreener.com"
GECKO_URL = "https://api.coingecko.com/api/v3"

respx = pytest.importorskip("respx")


@pytest.fixture
def api_mock() -> "respx.Router":
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def http_client() -> httpx.AsyncClient:
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def dex(http_client: httpx.AsyncClient) -> DexScreenerClient:
    return DexScreenerClient(DEX_URL, http_client=http_client, rng=random.Random(42))


@pytest.fixture
def gecko(http_client: httpx.AsyncClient) -> CoinGeckoClient:
    return CoinGeckoClient(GECKO_URL, http_client=http_client)


def last_url(route: "respx.Route") -> str:
    return str(route.calls.last.request.url)
