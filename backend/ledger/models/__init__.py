"""ORM Models — SQLAlchemy declarative models for profiles, contracts and jobs.

Invariants:
    - All models inherit from Base (db/base.py)
    - Contract joins two Profiles; Job belongs to exactly one Contract

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from ledger.models.profile import Profile  # noqa: F401
from ledger.models.contract import Contract  # noqa: F401
from ledger.models.job import Job  # noqa: F401
