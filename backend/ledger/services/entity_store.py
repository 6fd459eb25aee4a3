"""Entity Store — SQL accessors over profiles, contracts and jobs.

Invariants:
    - No business rules here beyond the query predicates themselves
    - Balances change only through `UPDATE ... SET balance = balance + :delta`
      (relative deltas, never read-modify-write in Python)
    - A debit carries `AND balance >= :amount`, so it cannot take a balance negative
      even when two debits race
    - mark_job_paid only touches rows still unpaid; the caller learns from the
      row count whether it won

Design Decisions:
    - synchronize_session=False on bulk UPDATEs: callers re-read with
      populate_existing instead of trusting the identity map
    - find_job_for_update takes a row lock (FOR UPDATE OF jobs) where the dialect
      supports it; SQLite ignores it and relies on the conditional UPDATEs
"""

from datetime import datetime
from decimal import Decimal
from typing import Sequence

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from ledger.core.access_policy import can_view_contract
from ledger.core.domain_types import (
    ContractId, ContractStatus, JobId, ProfileId, to_money,
)
from ledger.models.contract import Contract
from ledger.models.job import Job
from ledger.models.profile import Profile


def _involves(profile_id: ProfileId):
    return or_(
        Contract.client_id == profile_id,
        Contract.contractor_id == profile_id,
    )


def _is_active():
    return Contract.status != ContractStatus.TERMINATED.value


class SqlEntityStore:
    """EntityStore implementation on an AsyncSession (one per request)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Profiles ────────────────────────────────────────────────

    async def find_profile(self, profile_id: ProfileId) -> Profile | None:
        return await self.db.get(Profile, profile_id, populate_existing=True)

    async def increment_balance(
        self, profile_id: ProfileId, delta: Decimal,
    ) -> Decimal | None:
        """Apply a relative delta. Returns the new balance, or None if nothing matched.

        Negative deltas only match when the balance covers them.
        """
        stmt = (
            update(Profile)
            .where(Profile.id == profile_id)
            .values(balance=Profile.balance + delta)
            .returning(Profile.balance)
            .execution_options(synchronize_session=False)
        )
        if delta < 0:
            stmt = stmt.where(Profile.balance >= -delta)
        result = await self.db.execute(stmt)
        new_balance = result.scalar_one_or_none()
        return None if new_balance is None else to_money(new_balance)

    # ─── Contracts ───────────────────────────────────────────────

    async def find_contract(self, contract_id: ContractId) -> Contract | None:
        return await self.db.get(Contract, contract_id, populate_existing=True)

    async def find_contract_for_profile(
        self, contract_id: ContractId, profile_id: ProfileId,
    ) -> Contract | None:
        """Contract by id, but only if the profile is one of its parties."""
        contract = await self.find_contract(contract_id)
        if contract is None or not can_view_contract(contract, profile_id):
            return None
        return contract

    async def find_contracts_for_profile(
        self, profile_id: ProfileId, active_only: bool = False,
    ) -> Sequence[Contract]:
        query = (
            select(Contract)
            .where(_involves(profile_id))
            .order_by(Contract.id)
        )
        if active_only:
            query = query.where(_is_active())
        result = await self.db.execute(query)
        return result.scalars().all()

    # ─── Jobs ────────────────────────────────────────────────────

    async def find_job(self, job_id: JobId) -> Job | None:
        return await self.db.get(Job, job_id, populate_existing=True)

    async def find_job_for_update(self, job_id: JobId) -> Job | None:
        """Job with contract, client and contractor loaded; job row locked."""
        query = (
            select(Job)
            .options(
                joinedload(Job.contract, innerjoin=True)
                .joinedload(Contract.client, innerjoin=True),
                joinedload(Job.contract, innerjoin=True)
                .joinedload(Contract.contractor, innerjoin=True),
            )
            .where(Job.id == job_id)
            .with_for_update(of=Job)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        return result.unique().scalar_one_or_none()

    async def find_unpaid_jobs_for_profile(
        self, profile_id: ProfileId,
    ) -> Sequence[Job]:
        """Unpaid jobs on the profile's active contracts (either side)."""
        query = (
            select(Job)
            .join(Job.contract)
            .where(_involves(profile_id))
            .where(_is_active())
            .where(Job.paid.is_(False))
            .order_by(Job.id)
        )
        result = await self.db.execute(query)
        return result.scalars().all()

    async def mark_job_paid(self, job_id: JobId, paid_at: datetime) -> bool:
        """Flip paid false -> true. False means the job was already paid (or gone)."""
        result = await self.db.execute(
            update(Job)
            .where(Job.id == job_id)
            .where(Job.paid.is_(False))
            .values(paid=True, payment_date=paid_at)
            .execution_options(synchronize_session=False),
        )
        return result.rowcount == 1

    async def sum_unpaid_debt(self, client_id: ProfileId) -> Decimal:
        """Sum of prices of the client's unpaid jobs on non-terminated contracts."""
        result = await self.db.execute(
            select(func.coalesce(func.sum(Job.price), 0))
            .select_from(Job)
            .join(Job.contract)
            .where(Contract.client_id == client_id)
            .where(_is_active())
            .where(Job.paid.is_(False)),
        )
        return to_money(result.scalar_one())
