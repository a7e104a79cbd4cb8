"""Asset models."""

from pydantic import Field

from cryptowatch_client.models.base import ResponseModel


class AssetMarket(ResponseModel):
    """A market reference listed under an asset or a pair."""

    exchange: str = Field("", description="Exchange symbol (e.g., 'kraken')")
    pair: str = Field("", description="Pair symbol (e.g., 'btcusd')")
    active: bool = Field(False, description="Whether the market is currently trading")
    route: str = Field("", description="Link to the market resource")


class Asset(ResponseModel):
    """General data for a tradable currency or token."""

    symbol: str = Field("", description="Asset symbol (e.g., 'btc')")
    name: str = Field("", description="Display name (e.g., 'Bitcoin')")
    fiat: bool = Field(False, description="True for fiat currencies")
    route: str = Field("", description="Link to the detailed asset resource")


class AssetMarkets(ResponseModel):
    """Markets grouped by the side the asset appears on."""

    base: list[AssetMarket] = Field(
        default_factory=list, description="Markets where the asset is the base"
    )
    quote: list[AssetMarket] = Field(
        default_factory=list, description="Markets where the asset is the quote"
    )


class DetailedAsset(ResponseModel):
    """An asset together with every market it trades on."""

    id: int = Field(0, description="Numeric asset id")
    symbol: str = Field("", description="Asset symbol")
    name: str = Field("", description="Display name")
    fiat: bool = Field(False, description="True for fiat currencies")
    markets: AssetMarkets = Field(default_factory=AssetMarkets)
