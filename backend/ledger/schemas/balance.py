"""Balance Schemas — deposit request and result.

Invariants:
    - amount > 0 with at most two decimal places (cents)
    - The deposit cap is NOT checked here; that needs the client's debt (services/deposit_guard.py)
"""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field


class DepositRequest(BaseModel):
    """Deposit body — positive money amount."""
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)


class DepositResponse(BaseModel):
    status: Literal["deposited"]
    profile_id: int
    balance: Decimal
