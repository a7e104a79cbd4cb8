"""Result models for the Cryptowatch REST API."""

from cryptowatch_client.models.asset import Asset, AssetMarket, AssetMarkets, DetailedAsset
from cryptowatch_client.models.envelope import Allowance
from cryptowatch_client.models.exchange import (
    DetailedExchange,
    ExchangeRoutes,
    GeneralExchange,
)
from cryptowatch_client.models.market import (
    OHLC,
    AggregatePrice,
    AggregateSummary,
    Candle,
    DetailedMarket,
    GeneralMarket,
    MarketRoutes,
    OrderBook,
    OrderBookEntry,
    PriceChange,
    Summary,
    SummaryPrice,
    Trade,
    market_key,
)
from cryptowatch_client.models.pair import Pair, PairData, PairMarket

__all__ = [
    # Asset
    "Asset",
    "AssetMarket",
    "AssetMarkets",
    "DetailedAsset",
    # Envelope
    "Allowance",
    # Exchange
    "DetailedExchange",
    "ExchangeRoutes",
    "GeneralExchange",
    # Market
    "AggregatePrice",
    "AggregateSummary",
    "Candle",
    "DetailedMarket",
    "GeneralMarket",
    "MarketRoutes",
    "OHLC",
    "OrderBook",
    "OrderBookEntry",
    "PriceChange",
    "Summary",
    "SummaryPrice",
    "Trade",
    "market_key",
    # Pair
    "Pair",
    "PairData",
    "PairMarket",
]
