"""Conversion of positional market data into pandas DataFrames."""

from collections.abc import Iterable

import pandas as pd

from cryptowatch_client.models import Candle, OrderBook, Trade

TRADE_COLUMNS = ["id", "timestamp", "price", "amount"]
CANDLE_COLUMNS = ["timestamp", "open", "high", "low", "close", "volume", "quote_volume"]
ORDER_BOOK_COLUMNS = ["side", "price", "amount"]


def trades_to_dataframe(trades: Iterable[Trade]) -> pd.DataFrame:
    """Convert trades to a DataFrame.

    Args:
        trades: Trades as returned by ``CryptowatchClient.trades``.

    Returns:
        DataFrame with columns: id, timestamp, price, amount.
    """
    return pd.DataFrame([tuple(t) for t in trades], columns=TRADE_COLUMNS)


def candles_to_dataframe(candles: Iterable[Candle]) -> pd.DataFrame:
    """Convert candles of one period to an OHLCV DataFrame sorted by timestamp.

    The candle close time becomes the ``timestamp`` column (Unix seconds).

    Args:
        candles: Candles for a single period, e.g. ``ohlc["3600"]``.

    Returns:
        DataFrame with columns: timestamp, open, high, low, close, volume, quote_volume.
    """
    df = pd.DataFrame([tuple(c) for c in candles], columns=CANDLE_COLUMNS)
    return df.sort_values("timestamp").reset_index(drop=True)


def order_book_to_dataframe(book: OrderBook) -> pd.DataFrame:
    """Flatten an order book into one row per level, asks first."""
    rows = [("ask", e.price, e.amount) for e in book.asks]
    rows += [("bid", e.price, e.amount) for e in book.bids]
    return pd.DataFrame(rows, columns=ORDER_BOOK_COLUMNS)
