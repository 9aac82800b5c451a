"""
Base classes for data provider adapters

Consumers depend on these interfaces; the concrete clients are
DexScreenerClient and CoinGeckoClient. Every method returns the
provider JSON as decoded, without normalization.
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Iterable, Union

Ids = Union[str, Iterable[str]]


class BaseDexAdapter(ABC):
    """DEX aggregator: token profiles, boosts, pairs and pools"""

    @abstractmethod
    async def get_latest_profiles(self) -> Any:
        pass

    @abstractmethod
    async def get_latest_boosts(self) -> Any:
        pass

    @abstractmethod
    async def get_top_boosts(self) -> Any:
        pass

    @abstractmethod
    async def check_orders(self, chain_id: str, token_address: str) -> Any:
        """
        Get paid orders for a token

        Args:
            chain_id: Chain ID (e.g., "solana")
            token_address: Token address on that chain
        """
        pass

    @abstractmethod
    async def get_pair_info(self, chain_id: str, pair_address: str) -> Any:
        pass

    @abstractmethod
    async def search_pairs(self, query: str) -> Any:
        pass

    @abstractmethod
    async def get_token_pools(self, token_address: str) -> Any:
        pass

    @abstractmethod
    async def get_token_details(self, chain_id: str, token_address: str) -> Any:
        pass

    @abstractmethod
    async def get_top_coins(self) -> Any:
        pass

    @abstractmethod
    async def get_trending(self) -> Any:
        pass

    @abstractmethod
    async def get_most_liked(self) -> Any:
        pass


class BaseMarketAdapter(ABC):
    """Market data: prices, coin lists, coin data and history"""

    @abstractmethod
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
        """
        Get prices for several coins

        Args:
            ids: Coin IDs (e.g., ["bitcoin", "ethereum"]) or a comma-joined string
            vs_currencies: Target currencies
            include_*: Extra fields to request
        """
        pass

    @abstractmethod
    async def get_token_price(self, platform: str, addresses: Ids, vs_currencies: Ids = ("usd",)) -> Any:
        pass

    @abstractmethod
    async def get_supported_currencies(self) -> Any:
        pass

    @abstractmethod
    async def get_coins_list(self, include_market_data: bool = False) -> Any:
        pass

    @abstractmethod
    async def get_coin_data(
        self,
        coin_id: str,
        *,
        tickers: bool = False,
        market_data: bool = False,
        community_data: bool = False,
        developer_data: bool = False,
    ) -> Any:
        pass

    @abstractmethod
    async def get_coin_history(self, coin_id: str, day: Union[str, date]) -> Any:
        pass

    @abstractmethod
    async def get_coin_market_chart(self, coin_id: str, days: str = "1", currency: str = "usd") -> Any:
        pass
