"""Tabular helpers for market data."""

from cryptowatch_client.data.frames import (
    candles_to_dataframe,
    order_book_to_dataframe,
    trades_to_dataframe,
)

__all__ = [
    "candles_to_dataframe",
    "order_book_to_dataframe",
    "trades_to_dataframe",
]
