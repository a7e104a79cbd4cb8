"""Tests for DataFrame conversion helpers."""

import pandas as pd

from cryptowatch_client.data import (
    candles_to_dataframe,
    order_book_to_dataframe,
    trades_to_dataframe,
)
from cryptowatch_client.models import Candle, OrderBook, OrderBookEntry, Trade


class TestTradesToDataFrame:
    def test_columns_and_values(self):
        trades = [Trade(1, 1500000000, 6300.0, 0.5), Trade(2, 1500000005, 6301.0, 0.1)]

        df = trades_to_dataframe(trades)

        assert list(df.columns) == ["id", "timestamp", "price", "amount"]
        assert len(df) == 2
        assert df.iloc[1]["price"] == 6301.0

    def test_empty(self):
        df = trades_to_dataframe([])

        assert df.empty
        assert list(df.columns) == ["id", "timestamp", "price", "amount"]


class TestCandlesToDataFrame:
    def test_sorted_by_timestamp(self):
        """Test that candles are sorted by close time."""
        candles = [
            Candle(1500000120, 2.0, 2.5, 1.5, 2.2, 5.0),
            Candle(1500000060, 1.0, 2.0, 0.5, 1.5, 10.0, 15.0),
        ]

        df = candles_to_dataframe(candles)

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == [
            "timestamp",
            "open",
            "high",
            "low",
            "close",
            "volume",
            "quote_volume",
        ]
        assert df["timestamp"].tolist() == [1500000060, 1500000120]
        assert df.iloc[0]["quote_volume"] == 15.0
        assert df.iloc[1]["quote_volume"] == 0.0


class TestOrderBookToDataFrame:
    def test_asks_then_bids(self):
        book = OrderBook(
            asks=[OrderBookEntry(6325.0, 1.2), OrderBookEntry(6326.0, 0.3)],
            bids=[OrderBookEntry(6310.0, 0.8)],
        )

        df = order_book_to_dataframe(book)

        assert df["side"].tolist() == ["ask", "ask", "bid"]
        assert df.iloc[2]["amount"] == 0.8
