"""Market models: listings, summaries, trades, order books and candles."""

from typing import NamedTuple

from pydantic import Field, RootModel

from cryptowatch_client.models.base import ResponseModel


def market_key(exchange: str, pair: str) -> str:
    """Build the 'exchange:pair' key used by the aggregate endpoints."""
    return f"{exchange}:{pair}"


class GeneralMarket(ResponseModel):
    """A pair as listed on a specific exchange."""

    exchange: str = Field("", description="Exchange symbol (e.g., 'kraken')")
    pair: str = Field("", description="Pair symbol (e.g., 'btcusd')")
    active: bool = Field(False, description="Whether the market is currently trading")
    route: str = Field("", description="Link to the detailed market resource")


class MarketRoutes(ResponseModel):
    """Links to the sub-resources of a market."""

    price: str = Field("")
    summary: str = Field("")
    orderbook: str = Field("")
    trades: str = Field("")
    ohlc: str = Field("")


class DetailedMarket(ResponseModel):
    """A market with the routes of its sub-resources."""

    exchange: str = Field("", description="Exchange symbol")
    pair: str = Field("", description="Pair symbol")
    active: bool = Field(False)
    routes: MarketRoutes = Field(default_factory=MarketRoutes)


class PriceChange(ResponseModel):
    percentage: float = Field(0.0, description="Relative change over 24h (0.01 == 1%)")
    absolute: float = Field(0.0, description="Absolute change over 24h")


class SummaryPrice(ResponseModel):
    last: float = Field(0.0, description="Last traded price")
    high: float = Field(0.0, description="Highest price in last 24h")
    low: float = Field(0.0, description="Lowest price in last 24h")
    change: PriceChange = Field(default_factory=PriceChange)


class Summary(ResponseModel):
    """Rolling 24-hour statistics for a market."""

    price: SummaryPrice = Field(default_factory=SummaryPrice)
    volume: float = Field(0.0, description="24h volume in base currency")
    volume_quote: float = Field(
        0.0, alias="volumeQuote", description="24h volume in quote currency"
    )


class Trade(NamedTuple):
    """One executed trade, decoded from a positional array.

    ``id`` and ``timestamp`` are integers so large trade ids stay exact. Whole
    floats such as ``1500000000.0`` are accepted; a fractional value is a
    decode error.
    """

    id: int
    timestamp: int
    price: float
    amount: float


class OrderBookEntry(NamedTuple):
    price: float
    amount: float


class OrderBook(ResponseModel):
    """Current asks and bids of a market."""

    asks: list[OrderBookEntry] = Field(default_factory=list)
    bids: list[OrderBookEntry] = Field(default_factory=list)


class Candle(NamedTuple):
    """One OHLC bucket.

    The API appends a quote-volume column in newer responses; older ones stop
    at the base volume, so it defaults to zero. ``close_time`` is an integer
    Unix timestamp and, like ``Trade.timestamp``, rejects fractional values.
    """

    close_time: int
    open: float
    high: float
    low: float
    close: float
    volume: float
    quote_volume: float = 0.0


class OHLC(RootModel[dict[str, list[Candle]]]):
    """Candles keyed by period length in seconds ('60', '180', ..., '604800')."""

    def periods(self) -> list[str]:
        """Return the available period labels, shortest first."""
        return sorted(self.root, key=lambda period: int(period) if period.isdigit() else 0)

    def __getitem__(self, period: str | int) -> list[Candle]:
        return self.root[str(period)]

    def __contains__(self, period: object) -> bool:
        return str(period) in self.root

    def __len__(self) -> int:
        return len(self.root)


class AggregatePrice(RootModel[dict[str, float]]):
    """Last price of every market, keyed by 'exchange:pair'."""

    def for_market(self, exchange: str, pair: str) -> float | None:
        return self.root.get(market_key(exchange, pair))

    def __getitem__(self, key: str) -> float:
        return self.root[key]

    def __len__(self) -> int:
        return len(self.root)


class AggregateSummary(RootModel[dict[str, Summary]]):
    """Summary of every market, keyed by 'exchange:pair'."""

    def for_market(self, exchange: str, pair: str) -> Summary | None:
        return self.root.get(market_key(exchange, pair))

    def __getitem__(self, key: str) -> Summary:
        return self.root[key]

    def __len__(self) -> int:
        return len(self.root)
