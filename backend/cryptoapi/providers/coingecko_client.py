"""
CoinGecko HTTP Client

Client for the CoinGecko public API (v3): simple prices, coin lists,
coin data, history and market charts. Responses are returned as decoded,
unmodified.
"""
from datetime import date
from typing import Any, Optional, Union

import httpx

from cryptoapi.core.config import settings
from cryptoapi.providers.base_adapters import BaseMarketAdapter, Ids
from cryptoapi.providers.base_client import BaseProviderClient
from cryptoapi.providers.endpoints import Endpoint, join_values
from cryptoapi.utils.formatters import format_history_date

SIMPLE_PRICE = Endpoint(
    "/simple/price",
    params=("ids", "vs_currencies"),
    flags=(
        "include_market_cap",
        "include_24hr_vol",
        "include_24hr_change",
        "include_last_updated_at",
    ),
    joined=("ids", "vs_currencies"),
)
TOKEN_PRICE = Endpoint(
    "/simple/token_price/{platform}",
    params=("contract_addresses", "vs_currencies"),
    joined=("contract_addresses", "vs_currencies"),
)
SUPPORTED_CURRENCIES = Endpoint("/simple/supported_vs_currencies")
COINS_LIST = Endpoint("/coins/list")
COINS_MARKETS = Endpoint(
    "/coins/markets",
    fixed=(
        ("vs_currency", "usd"),
        ("order", "market_cap_desc"),
        ("per_page", "100"),
        ("page", "1"),
    ),
)
COIN_DATA = Endpoint(
    "/coins/{coin_id}",
    fixed=(("localization", "false"),),
    flags=("tickers", "market_data", "community_data", "developer_data"),
)
COIN_HISTORY = Endpoint("/coins/{coin_id}/history", params=("date",))
MARKET_CHART = Endpoint("/coins/{coin_id}/market_chart", params=("vs_currency", "days"))


def _enabled(**flags: bool):
    return [name for name, on in flags.items() if on]


class CoinGeckoClient(BaseProviderClient, BaseMarketAdapter):

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(base_url or settings.COINGECKO_BASE_URL, http_client)

    async def get_price(
        self,
        ids: Ids,
        vs_currencies: Ids = ("usd",),
        *,
        include_market_cap: bool = False,
        include_24hr_vol: bool = False,
        include_24hr_change: bool = False,
        include_last_updated_at: bool = False,
    ) -> Any:
        return await self.get(
            SIMPLE_PRICE,
            "fetching prices",
            query={"ids": join_values(ids), "vs_currencies": join_values(vs_currencies)},
            enabled=_enabled(
                include_market_cap=include_market_cap,
                include_24hr_vol=include_24hr_vol,
                include_24hr_change=include_24hr_change,
                include_last_updated_at=include_last_updated_at,
            ),
        )

    async def get_token_price(self, platform: str, addresses: Ids, vs_currencies: Ids = ("usd",)) -> Any:
        """
        Get prices by token contract address

        Args:
            platform: Asset platform ID (e.g., "ethereum", "binance-smart-chain")
            addresses: Contract addresses on that platform
            vs_currencies: Target currencies
        """
        return await self.get(
            TOKEN_PRICE,
            "fetching token prices",
            path_params={"platform": platform},
            query={
                "contract_addresses": join_values(addresses),
                "vs_currencies": join_values(vs_currencies),
            },
        )

    async def get_supported_currencies(self) -> Any:
        return await self.get(SUPPORTED_CURRENCIES, "fetching supported currencies")

    async def get_coins_list(self, include_market_data: bool = False) -> Any:
        """
        Get all coins, or the top 100 by market cap with market data

        Args:
            include_market_data: Use /coins/markets (USD, first page of 100)
                instead of the plain /coins/list
        """
        endpoint = COINS_MARKETS if include_market_data else COINS_LIST
        return await self.get(endpoint, "fetching coins list")

    async def get_coin_data(
        self,
        coin_id: str,
        *,
        tickers: bool = False,
        market_data: bool = False,
        community_data: bool = False,
        developer_data: bool = False,
    ) -> Any:
        return await self.get(
            COIN_DATA,
            "fetching coin data",
            path_params={"coin_id": coin_id},
            enabled=_enabled(
                tickers=tickers,
                market_data=market_data,
                community_data=community_data,
                developer_data=developer_data,
            ),
        )

    async def get_coin_history(self, coin_id: str, day: Union[str, date]) -> Any:
        """
        Get coin snapshot for a given day

        Args:
            coin_id: CoinGecko coin ID (e.g., "bitcoin")
            day: "dd-mm-yyyy" string (format kept, percent-encoded) or a date/datetime
        """
        return await self.get(
            COIN_HISTORY,
            "fetching coin history",
            path_params={"coin_id": coin_id},
            query={"date": format_history_date(day)},
        )

    async def get_coin_market_chart(self, coin_id: str, days: str = "1", currency: str = "usd") -> Any:
        """
        Get price, market cap and volume series

        Args:
            coin_id: CoinGecko coin ID
            days: 1, 7, 14, 30, 90, 180, 365 or "max"
            currency: Target currency
        """
        return await self.get(
            MARKET_CHART,
            "fetching market chart",
            path_params={"coin_id": coin_id},
            query={"vs_currency": currency, "days": str(days)},
        )


# Global instance
coingecko_client = CoinGeckoClient()
