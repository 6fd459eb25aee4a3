"""Contract Schemas — public shape of a contract record."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict


class ContractResponse(BaseModel):
    """Contract as seen by one of its parties."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    terms: str
    status: Literal["new", "in_progress", "terminated"]
    client_id: int
    contractor_id: int
    created_at: datetime
    updated_at: datetime
