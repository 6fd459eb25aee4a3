"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProfileId, ContractId, JobId wrap ints — never mix entity ids in domain logic
    - Valid ids lie in 1..MAX_ID; larger values never reach the database
    - Money is always Decimal with two places (cents), never float
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders, compare equal to DB strings
"""

from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProfileId = NewType("ProfileId", int)
ContractId = NewType("ContractId", int)
JobId = NewType("JobId", int)

# Ids are INTEGER columns: anything above int32 max cannot name a row
MAX_ID = 2**31 - 1


# ─── Value Types ─────────────────────────────────────────────────

CENTS = Decimal("0.01")


def to_money(value: Decimal | int | str) -> Decimal:
    """Quantize to cents. Accepts str/int so callers never route through float."""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


# ─── Enums ───────────────────────────────────────────────────────

class ProfileRole(str, Enum):
    """Profile kind — maps to DB `role` column."""
    CLIENT = "client"
    CONTRACTOR = "contractor"


class ContractStatus(str, Enum):
    """Contract lifecycle: new -> in_progress -> terminated (terminal)."""
    NEW = "new"
    IN_PROGRESS = "in_progress"
    TERMINATED = "terminated"


class PaymentOutcome(str, Enum):
    """Successful pay_job results. Failures are raised as LedgerError subclasses."""
    PAID = "paid"
    ALREADY_PAID = "already_paid"


class DepositOutcome(str, Enum):
    """Successful deposit result."""
    DEPOSITED = "deposited"
