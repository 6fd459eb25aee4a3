"""Job Schemas — job records and payment results.

Invariants:
    - payment_date is present iff paid is true
    - PaymentResponse.status mirrors PaymentOutcome values
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict


class JobResponse(BaseModel):
    """Public job record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    description: str
    price: Decimal
    paid: bool
    payment_date: datetime | None = None
    contract_id: int


class PaymentResponse(BaseModel):
    """Result of POST /jobs/{job_id}/pay. already_paid is a success, not an error."""
    status: Literal["paid", "already_paid"]
    job: JobResponse
