"""Models for the response envelope metadata."""

from pydantic import Field

from cryptowatch_client.models.base import ResponseModel


class Allowance(ResponseModel):
    """Request allowance reported alongside a successful result.

    Costs are expressed in the vendor's credit units.
    """

    cost: float = Field(0.0, description="Cost of the request that was just made")
    remaining: float = Field(0.0, description="Remaining allowance for the period")
    remaining_paid: float = Field(
        0.0, alias="remainingPaid", description="Remaining paid allowance"
    )
    upgrade: str = Field("", description="Upgrade hint returned by the API")
