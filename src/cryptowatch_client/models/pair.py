"""Pair models."""

from pydantic import Field

from cryptowatch_client.models.asset import AssetMarket
from cryptowatch_client.models.base import ResponseModel


class PairData(ResponseModel):
    """The base or quote side of a pair."""

    symbol: str = Field("", description="Asset symbol")
    name: str = Field("", description="Display name")
    is_fiat: bool = Field(False, alias="isFiat", description="True for fiat currencies")
    route: str = Field("", description="Link to the asset resource")


class Pair(ResponseModel):
    """A tradable combination of a base and a quote asset."""

    symbol: str = Field("", description="Pair symbol (e.g., 'btcusd')")
    id: int = Field(0, description="Numeric pair id")
    base: PairData = Field(default_factory=PairData)
    quote: PairData = Field(default_factory=PairData)
    route: str = Field("", description="Link to the detailed pair resource")


class PairMarket(Pair):
    """A pair together with the markets it is listed on."""

    markets: list[AssetMarket] = Field(default_factory=list)
