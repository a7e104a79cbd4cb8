"""Common base for decoded API payloads."""

from typing import Any

from pydantic import BaseModel, model_validator


class ResponseModel(BaseModel):
    """Base model for API result objects.

    Missing keys and JSON nulls both fall back to the field defaults, so a
    sparse payload never fails to decode.
    """

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data
