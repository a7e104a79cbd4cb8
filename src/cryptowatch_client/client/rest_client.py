"""Async client exposing one method per Cryptowatch REST endpoint."""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from cryptowatch_client.client.envelope import ApiRequester
from cryptowatch_client.client.routes import Route
from cryptowatch_client.config import ClientConfig
from cryptowatch_client.errors import DecodeError
from cryptowatch_client.models import (
    OHLC,
    AggregatePrice,
    AggregateSummary,
    Allowance,
    Asset,
    DetailedAsset,
    DetailedExchange,
    DetailedMarket,
    GeneralExchange,
    GeneralMarket,
    OrderBook,
    Pair,
    PairMarket,
    Summary,
    Trade,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_assets = TypeAdapter(list[Asset])
_pairs = TypeAdapter(list[Pair])
_exchanges = TypeAdapter(list[GeneralExchange])
_markets = TypeAdapter(list[GeneralMarket])
_trades = TypeAdapter(list[Trade])
_price = TypeAdapter(dict[str, float | None])
_asset = TypeAdapter(DetailedAsset)
_pair = TypeAdapter(PairMarket)
_exchange = TypeAdapter(DetailedExchange)
_market = TypeAdapter(DetailedMarket)
_summary = TypeAdapter(Summary)
_order_book = TypeAdapter(OrderBook)
_ohlc = TypeAdapter(OHLC)
_aggregate_prices = TypeAdapter(AggregatePrice)
_aggregate_summaries = TypeAdapter(AggregateSummary)


def decode(adapter: TypeAdapter[T], payload: Any, what: str) -> T:
    """Validate an unwrapped payload into its declared shape.

    Raises:
        DecodeError: If the payload does not match the expected shape.
    """
    try:
        return adapter.validate_python(payload)
    except ValidationError as e:
        logger.warning(f"Failed to decode {what} payload ({e.error_count()} errors)")
        raise DecodeError(f"Unexpected {what} payload: {e}") from e


class CryptowatchClient:
    """Client for the public Cryptowatch market-data REST API.

    Each method performs a single GET, unwraps the response envelope and
    decodes the result. Nothing is cached or retried; callers handle
    ``RateLimitError`` themselves.

    Example:
        async with CryptowatchClient() as client:
            price = await client.market_price("kraken", "btcusd")
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Client configuration. Defaults to the public API endpoint.
            transport: Optional httpx transport, mainly for tests.
        """
        self.config = config or ClientConfig()
        self._requester = ApiRequester(self.config, transport=transport)

    @property
    def last_allowance(self) -> Allowance | None:
        """Allowance reported by the most recent successful call, if any."""
        return self._requester.last_allowance

    async def raw(self, path: str) -> Any:
        """Return the unwrapped ``result`` of any route as plain JSON values.

        Useful when the API adds fields the typed models do not know yet.

        Args:
            path: Path relative to the base URL (e.g., 'markets/kraken/btcusd').
        """
        return await self._requester.get(path)

    async def _get(self, route: Route, *args: str) -> Any:
        return await self._requester.get(route.path(*args))

    # Assets

    async def assets(self) -> list[Asset]:
        """Return all assets, in no particular order."""
        result = await self._get(Route.ASSETS)
        return decode(_assets, result, "assets")

    async def asset_markets(self, asset: str) -> DetailedAsset:
        """Return an asset with every market that has it as base or quote."""
        result = await self._get(Route.ASSET, asset)
        return decode(_asset, result, "asset")

    # Pairs

    async def pairs(self) -> list[Pair]:
        """Return all pairs, in no particular order."""
        result = await self._get(Route.PAIRS)
        return decode(_pairs, result, "pairs")

    async def pair_markets(self, pair: str) -> PairMarket:
        """Return a pair with all markets it is listed on."""
        result = await self._get(Route.PAIR, pair)
        return decode(_pair, result, "pair")

    # Exchanges

    async def exchanges(self) -> list[GeneralExchange]:
        """Return all supported exchanges."""
        result = await self._get(Route.EXCHANGES)
        return decode(_exchanges, result, "exchanges")

    async def exchange(self, name: str) -> DetailedExchange:
        """Return a single exchange with its routes."""
        result = await self._get(Route.EXCHANGE, name)
        return decode(_exchange, result, "exchange")

    # Markets

    async def markets(self) -> list[GeneralMarket]:
        """Return all supported markets."""
        result = await self._get(Route.MARKETS)
        return decode(_markets, result, "markets")

    async def market(self, exchange: str, pair: str) -> DetailedMarket:
        """Return a single market with the routes of its sub-resources."""
        result = await self._get(Route.MARKET, exchange, pair)
        return decode(_market, result, "market")

    async def market_price(self, exchange: str, pair: str) -> float:
        """Return a market's last price, or 0.0 when the payload omits it."""
        result = await self._get(Route.MARKET_PRICE, exchange, pair)
        prices = decode(_price, result, "price")
        price = prices.get("price")
        return price if price is not None else 0.0

    async def market_summary(self, exchange: str, pair: str) -> Summary:
        """Return a market's last price and 24-hour sliding-window stats."""
        result = await self._get(Route.MARKET_SUMMARY, exchange, pair)
        return decode(_summary, result, "summary")

    async def trades(self, exchange: str, pair: str) -> list[Trade]:
        """Return a market's most recent trades, oldest first."""
        result = await self._get(Route.MARKET_TRADES, exchange, pair)
        return decode(_trades, result, "trades")

    async def order_book(self, exchange: str, pair: str) -> OrderBook:
        """Return a market's current order book."""
        result = await self._get(Route.MARKET_ORDER_BOOK, exchange, pair)
        return decode(_order_book, result, "order book")

    async def ohlc(self, exchange: str, pair: str) -> OHLC:
        """Return a market's candles for every period length."""
        result = await self._get(Route.MARKET_OHLC, exchange, pair)
        return decode(_ohlc, result, "OHLC")

    # Aggregates

    async def aggregate_prices(self) -> AggregatePrice:
        """Return the last price of every market.

        Some values may be a few seconds out of date.
        """
        result = await self._get(Route.AGGREGATE_PRICES)
        return decode(_aggregate_prices, result, "aggregate prices")

    async def aggregate_summaries(self) -> AggregateSummary:
        """Return the summary of every market.

        Some values may be a few seconds out of date.
        """
        result = await self._get(Route.AGGREGATE_SUMMARIES)
        return decode(_aggregate_summaries, result, "aggregate summaries")

    async def close(self) -> None:
        """Close pooled HTTP connections and release resources."""
        await self._requester.close()

    async def __aenter__(self) -> "CryptowatchClient":
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit."""
        await self.close()
