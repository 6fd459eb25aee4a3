"""API Schemas — Pydantic request/response models, one file per resource.

Invariants:
    - Money crosses the API boundary as Decimal (serialized as a string), never float
    - Response models read ORM rows directly (from_attributes)
"""
