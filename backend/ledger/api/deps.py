"""Request Dependencies — caller identity and per-request service construction.

Invariants:
    - Caller identity is the integer `profile_id` header, resolved to a Profile
    - Missing, malformed, out-of-range (1..MAX_ID) or unknown profile_id -> 401
    - Services are built per request around the request's AsyncSession

Design Decisions:
    - Header parsed by hand instead of `Header(int)`: a bad header is an auth
      failure (401), not a validation failure (400)
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.config import Settings, get_settings
from ledger.core.domain_types import MAX_ID, ProfileId
from ledger.core.errors import UnauthorizedError
from ledger.infrastructure.database import get_db
from ledger.models.profile import Profile
from ledger.services.deposit_guard import DepositGuard
from ledger.services.entity_store import SqlEntityStore
from ledger.services.payment_engine import PaymentEngine
from ledger.services.reporting_engine import ReportingEngine


def parse_profile_id(raw: str | None) -> ProfileId | None:
    """Header value -> ProfileId, or None when it cannot name a profile row."""
    if raw is None:
        return None
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()) or len(raw) > len(str(MAX_ID)):
        return None
    value = int(raw)
    if not 1 <= value <= MAX_ID:
        return None
    return ProfileId(value)


async def get_profile(
    profile_id: str | None = Header(None, alias="profile_id", convert_underscores=False),
    db: AsyncSession = Depends(get_db),
) -> Profile:
    """Resolve the caller's profile from the profile_id header."""
    caller_id = parse_profile_id(profile_id)
    if caller_id is None:
        raise UnauthorizedError("Missing or malformed profile_id header")
    profile = await SqlEntityStore(db).find_profile(caller_id)
    if profile is None:
        raise UnauthorizedError(f"Unknown profile {caller_id}")
    return profile


def get_store(db: AsyncSession = Depends(get_db)) -> SqlEntityStore:
    return SqlEntityStore(db)


def get_payment_engine(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> PaymentEngine:
    return PaymentEngine(db, max_attempts=settings.payment_max_attempts)


def get_deposit_guard(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> DepositGuard:
    return DepositGuard(
        db,
        cap_ratio=settings.deposit_cap_ratio,
        max_attempts=settings.payment_max_attempts,
    )


def get_reporting_engine(db: AsyncSession = Depends(get_db)) -> ReportingEngine:
    return ReportingEngine(db)
