"""Response schema for the balance endpoint."""

from decimal import Decimal

from pydantic import BaseModel, Field


class BalanceResponse(BaseModel):
    """Current balance only; no other account fields are exposed."""

    balance: Decimal = Field(..., description="Balance with two fractional digits")
