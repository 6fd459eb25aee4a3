"""Demo Seed — reference dataset of profiles, contracts and jobs.

Invariants:
    - Idempotent only on an empty database (ids are fixed)
    - Every paid job carries a payment_date; unpaid jobs carry none

Design Decisions:
    - Fixed ids: API examples and tests address rows by id
    - `python -m ledger.db.seed` creates tables via metadata for local demos;
      real deployments run Alembic first and then seed
"""

import asyncio
import logging
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from ledger.config import get_settings
from ledger.core.domain_types import ProfileRole
from ledger.db.base import Base
from ledger.db.session import create_session_factory
from ledger.infrastructure.observability import setup_logging
from ledger.models import Contract, Job, Profile

logger = logging.getLogger(__name__)


def _ts(day: int, hour: int = 19) -> datetime:
    return datetime(2020, 8, day, hour, 11, 26, 737000, tzinfo=timezone.utc)


PROFILES = [
    # id, first, last, profession, balance, role
    (1, "Harry", "Potter", "Wizard", "1150", ProfileRole.CLIENT),
    (2, "Mr", "Robot", "Hacker", "231.11", ProfileRole.CLIENT),
    (3, "John", "Snow", "Knows nothing", "451.3", ProfileRole.CLIENT),
    (4, "Ash", "Kethcum", "Pokemon master", "1.3", ProfileRole.CLIENT),
    (5, "John", "Lenon", "Musician", "64", ProfileRole.CONTRACTOR),
    (6, "Linus", "Torvalds", "Programmer", "1214", ProfileRole.CONTRACTOR),
    (7, "Alan", "Turing", "Programmer", "22", ProfileRole.CONTRACTOR),
    (8, "Aragorn", "II Elessar Telcontarion", "Fighter", "314", ProfileRole.CONTRACTOR),
]

CONTRACTS = [
    # id, status, client, contractor
    (1, "terminated", 1, 5),
    (2, "in_progress", 1, 6),
    (3, "in_progress", 2, 6),
    (4, "in_progress", 2, 7),
    (5, "new", 3, 8),
    (6, "in_progress", 3, 7),
    (7, "in_progress", 4, 7),
    (8, "in_progress", 4, 6),
    (9, "in_progress", 4, 8),
]

JOBS = [
    # id, price, contract, payment_date (None = unpaid)
    (1, "200", 1, None),
    (2, "201", 2, None),
    (3, "202", 3, None),
    (4, "200", 4, None),
    (5, "200", 7, None),
    (6, "2020", 7, _ts(15)),
    (7, "200", 2, _ts(15)),
    (8, "200", 3, _ts(16)),
    (9, "200", 1, _ts(17)),
    (10, "200", 5, _ts(17)),
    (11, "21", 1, _ts(10)),
    (12, "21", 2, _ts(15)),
    (13, "121", 3, _ts(15)),
    (14, "121", 3, _ts(14, hour=23)),
]


async def seed_demo_data(db: AsyncSession) -> None:
    """Insert the reference dataset and commit."""
    db.add_all([
        Profile(
            id=pid, first_name=first, last_name=last, profession=profession,
            balance=Decimal(balance), role=role.value,
        )
        for pid, first, last, profession, balance, role in PROFILES
    ])
    await db.flush()
    db.add_all([
        Contract(
            id=cid, terms="bla bla bla", status=status,
            client_id=client_id, contractor_id=contractor_id,
        )
        for cid, status, client_id, contractor_id in CONTRACTS
    ])
    await db.flush()
    db.add_all([
        Job(
            id=jid, description="work", price=Decimal(price), contract_id=cid,
            paid=paid_at is not None, payment_date=paid_at,
        )
        for jid, price, cid, paid_at in JOBS
    ])
    await db.commit()
    logger.info(
        f"Seeded {len(PROFILES)} profiles, {len(CONTRACTS)} contracts, {len(JOBS)} jobs",
    )


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    engine = create_async_engine(settings.database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        async with create_session_factory(engine)() as db:
            await seed_demo_data(db)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
