"""Client configuration."""

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://api.cryptowat.ch/"


class ClientConfig(BaseModel):
    """Immutable settings for a single client instance.

    Nothing is read from the environment; build one explicitly and pass it to
    the client, or rely on the defaults.
    """

    base_url: str = Field(DEFAULT_BASE_URL, description="Root URL of the REST API")
    timeout: float = Field(
        5.0, gt=0, description="Per-request timeout in seconds (httpx default)"
    )
    user_agent: str | None = Field(
        None, description="Optional User-Agent header sent with every request"
    )

    model_config = {
        "frozen": True,
    }

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        if not value.endswith("/"):
            value += "/"
        return value
