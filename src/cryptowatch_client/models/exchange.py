"""Exchange models."""

from pydantic import Field

from cryptowatch_client.models.base import ResponseModel


class GeneralExchange(ResponseModel):
    """A supported trading venue."""

    symbol: str = Field("", description="Exchange symbol (e.g., 'kraken')")
    name: str = Field("", description="Display name")
    active: bool = Field(False, description="Whether the venue is currently supported")
    route: str = Field("", description="Link to the detailed exchange resource")


class ExchangeRoutes(ResponseModel):
    markets: str = Field("", description="Link to the exchange's market list")


class DetailedExchange(ResponseModel):
    """A venue with its sub-resource routes."""

    id: int = Field(0, description="Numeric exchange id")
    name: str = Field("", description="Display name")
    active: bool = Field(False)
    routes: ExchangeRoutes = Field(default_factory=ExchangeRoutes)
