"""Typed async client for the Cryptowatch public market-data REST API."""

from cryptowatch_client.client import CryptowatchClient, Route
from cryptowatch_client.config import DEFAULT_BASE_URL, ClientConfig
from cryptowatch_client.errors import (
    APIError,
    CryptowatchError,
    DecodeError,
    RateLimitError,
    TransportError,
)
from cryptowatch_client.models import (
    OHLC,
    AggregatePrice,
    AggregateSummary,
    Allowance,
    Asset,
    Candle,
    DetailedAsset,
    DetailedExchange,
    DetailedMarket,
    GeneralExchange,
    GeneralMarket,
    OrderBook,
    OrderBookEntry,
    Pair,
    PairMarket,
    Summary,
    Trade,
)

__all__ = [
    # Client
    "CryptowatchClient",
    "Route",
    # Config
    "ClientConfig",
    "DEFAULT_BASE_URL",
    # Errors
    "APIError",
    "CryptowatchError",
    "DecodeError",
    "RateLimitError",
    "TransportError",
    # Models
    "AggregatePrice",
    "AggregateSummary",
    "Allowance",
    "Asset",
    "Candle",
    "DetailedAsset",
    "DetailedExchange",
    "DetailedMarket",
    "GeneralExchange",
    "GeneralMarket",
    "OHLC",
    "OrderBook",
    "OrderBookEntry",
    "Pair",
    "PairMarket",
    "Summary",
    "Trade",
]
