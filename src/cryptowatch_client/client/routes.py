"""Path templates of the REST API, relative to the configured base URL."""

from enum import Enum


class Route(str, Enum):
    """Available API routes."""

    ASSETS = "assets"
    ASSET = "assets/{}"
    PAIRS = "pairs"
    PAIR = "pairs/{}"
    EXCHANGES = "exchanges"
    EXCHANGE = "exchanges/{}"
    MARKETS = "markets"
    MARKET = "markets/{}/{}"
    MARKET_PRICE = "markets/{}/{}/price"
    MARKET_SUMMARY = "markets/{}/{}/summary"
    MARKET_TRADES = "markets/{}/{}/trades"
    MARKET_ORDER_BOOK = "markets/{}/{}/orderbook"
    MARKET_OHLC = "markets/{}/{}/ohlc"
    AGGREGATE_PRICES = "markets/prices"
    AGGREGATE_SUMMARIES = "markets/summaries"

    def path(self, *args: str) -> str:
        """Fill the template with the given arguments, inserted unescaped."""
        expected = self.value.count("{}")
        if len(args) != expected:
            raise TypeError(
                f"Route {self.name} takes {expected} argument(s), got {len(args)}"
            )
        return self.value.format(*args)
