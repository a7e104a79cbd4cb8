"""Tests for the result models."""

import pytest
from pydantic import ValidationError

from cryptowatch_client.config import ClientConfig
from cryptowatch_client.models import (
    OHLC,
    AggregatePrice,
    Asset,
    Candle,
    DetailedAsset,
    OrderBook,
    PairData,
    Summary,
    market_key,
)


class TestZeroValueDefaults:
    """Tests that missing fields decode to zero values."""

    def test_empty_summary(self):
        summary = Summary.model_validate({})

        assert summary.price.last == 0.0
        assert summary.price.change.percentage == 0.0
        assert summary.volume == 0.0

    def test_empty_detailed_asset(self):
        asset = DetailedAsset.model_validate({"symbol": "btc"})

        assert asset.id == 0
        assert asset.markets.base == []
        assert asset.markets.quote == []

    def test_unknown_fields_ignored(self):
        asset = Asset.model_validate({"symbol": "eth", "sid": "ethereum", "id": 77})

        assert asset.symbol == "eth"
        assert not hasattr(asset, "sid")

    def test_null_fields_use_defaults(self):
        """Test that JSON nulls decode like missing keys."""
        asset = DetailedAsset.model_validate(
            {"id": None, "symbol": "btc", "name": None, "markets": None}
        )

        assert asset.id == 0
        assert asset.name == ""
        assert asset.markets.base == []

    def test_nested_null_fields_use_defaults(self):
        summary = Summary.model_validate(
            {"price": {"last": None, "change": {"absolute": None}}, "volume": None}
        )

        assert summary.price.last == 0.0
        assert summary.price.change.absolute == 0.0
        assert summary.volume == 0.0

    def test_empty_order_book(self):
        book = OrderBook.model_validate({"seqNum": 42})

        assert book.asks == []
        assert book.bids == []


class TestAliases:
    """Tests for camelCase field aliases."""

    def test_pair_data_accepts_alias_and_name(self):
        assert PairData.model_validate({"isFiat": True}).is_fiat is True
        assert PairData(is_fiat=True).is_fiat is True

    def test_summary_volume_quote(self):
        assert Summary.model_validate({"volumeQuote": 12.5}).volume_quote == 12.5


class TestShapeMismatch:
    """Tests that wrong JSON types are rejected rather than zeroed."""

    def test_markets_must_be_object(self):
        with pytest.raises(ValidationError):
            DetailedAsset.model_validate({"markets": [1, 2]})

    def test_order_book_entry_needs_two_numbers(self):
        with pytest.raises(ValidationError):
            OrderBook.model_validate({"asks": [[6325.0]]})


class TestOHLC:
    """Tests for the OHLC container."""

    def test_periods_sorted_numerically(self):
        ohlc = OHLC.model_validate({"3600": [], "60": [], "180": []})

        assert ohlc.periods() == ["60", "180", "3600"]

    def test_lookup_by_int_or_str(self):
        candle = [1500000060, 1.0, 2.0, 0.5, 1.5, 10.0]
        ohlc = OHLC.model_validate({"60": [candle]})

        assert ohlc[60] == ohlc["60"]
        assert 60 in ohlc
        assert "300" not in ohlc
        assert ohlc["60"][0] == Candle(1500000060, 1.0, 2.0, 0.5, 1.5, 10.0)


class TestAggregates:
    def test_market_key(self):
        assert market_key("kraken", "btcusd") == "kraken:btcusd"

    def test_for_market_missing(self):
        prices = AggregatePrice.model_validate({"kraken:btcusd": 1.0})

        assert prices.for_market("kraken", "btcusd") == 1.0
        assert prices.for_market("gdax", "btcusd") is None


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_defaults(self):
        config = ClientConfig()

        assert config.base_url == "https://api.cryptowat.ch/"
        assert config.timeout == 5.0
        assert config.user_agent is None

    def test_trailing_slash_added(self):
        assert ClientConfig(base_url="http://localhost:8080").base_url == "http://localhost:8080/"

    def test_frozen(self):
        config = ClientConfig()

        with pytest.raises(ValidationError):
            config.timeout = 1.0

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ClientConfig(timeout=0)
