"""Report Schemas — admin ranking responses.

Design Decisions:
    - fullName keeps the camelCase key existing dashboards already read
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class BestProfessionResponse(BaseModel):
    profession: str


class ClientSpendResponse(BaseModel):
    """One ranked client: total paid in the window."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    full_name: str = Field(serialization_alias="fullName")
    paid: Decimal
