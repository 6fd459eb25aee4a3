"""Payment Engine — pays one job as an atomic client -> contractor transfer.

Invariants:
    - A job is paid at most once: the paid flag flips only via
      `UPDATE jobs SET paid = true ... WHERE paid = false`
    - Debit, credit and the job update commit in ONE transaction or not at all
    - A client balance never goes negative (guarded debit + affordability check)
    - Total balance across profiles is unchanged by a payment (debit == credit)
    - Lost races surface as StoreConflictError and re-run the WHOLE operation
      from the initial read, never a partial step

Design Decisions:
    - AlreadyPaid is a success outcome: clients retrying a successful payment
      get a 200, not an error
    - Read-only exits commit instead of rolling back: a rollback would expire the
      loaded rows, and expire_on_commit=False keeps them usable for the response
    - Clock injected: tests pin payment_date without patching datetime
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.core.access_policy import authorize_payment
from ledger.core.domain_types import JobId, PaymentOutcome, ProfileId
from ledger.core.enforce_funds import check_affordable
from ledger.core.errors import (
    ErrorContext, LedgerError, ResourceNotFoundError, StoreConflictError,
)
from ledger.core.repository_protocols import EntityStore
from ledger.infrastructure.database import is_conflict
from ledger.models.job import Job
from ledger.services.entity_store import SqlEntityStore

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PaymentEngine:
    """Validates and executes job payments inside the caller's session."""

    def __init__(
        self,
        db: AsyncSession,
        max_attempts: int = 3,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.db = db
        self.store: EntityStore = SqlEntityStore(db)
        self.max_attempts = max_attempts
        self._clock = clock

    async def pay_job(
        self, caller_id: ProfileId, job_id: JobId,
    ) -> tuple[PaymentOutcome, Job]:
        """Pay `job_id` on behalf of `caller_id`. Re-runs on store conflicts."""
        for attempt in range(1, self.max_attempts + 1):
            context = ErrorContext(
                profile_id=caller_id, job_id=job_id, attempt=attempt,
            )
            try:
                return await self._attempt(caller_id, job_id, context)
            except StoreConflictError:
                logger.warning(
                    f"Payment conflict on job {job_id}, attempt {attempt}/{self.max_attempts}",
                    extra={"job_id": job_id, "profile_id": caller_id, "attempt": attempt},
                )
        raise StoreConflictError(
            f"Payment for job {job_id} could not commit after "
            f"{self.max_attempts} attempts",
            ErrorContext(profile_id=caller_id, job_id=job_id, attempt=self.max_attempts),
        )

    async def _attempt(
        self, caller_id: ProfileId, job_id: JobId, context: ErrorContext,
    ) -> tuple[PaymentOutcome, Job]:
        """One pass: load, authorize, check, transfer, commit."""
        try:
            job = await self.store.find_job_for_update(job_id)
            if job is None:
                raise ResourceNotFoundError("Job", job_id, context)

            contract = job.contract
            client = contract.client
            error = authorize_payment(contract, caller_id, context)
            if error:
                raise error

            if job.paid:
                await self.db.commit()
                logger.info(
                    f"Job {job_id} already paid",
                    extra={"job_id": job_id, "outcome": PaymentOutcome.ALREADY_PAID.value},
                )
                return PaymentOutcome.ALREADY_PAID, job

            error = check_affordable(job.price, client.balance, context)
            if error:
                raise error

            await self._transfer(job, context)
            await self.db.commit()
        except StoreConflictError:
            await self.db.rollback()
            raise
        except LedgerError:
            # Nothing written yet; ends the read and releases the row lock
            await self.db.commit()
            raise
        except DBAPIError as e:
            await self.db.rollback()
            if is_conflict(e):
                raise StoreConflictError(
                    "Concurrent update conflict, retry", context,
                ) from e
            raise

        await self.db.refresh(job)
        logger.info(
            f"Job {job_id} paid: {job.price} from profile {client.id} "
            f"to profile {contract.contractor_id}",
            extra={
                "job_id": job_id, "profile_id": caller_id,
                "amount": str(job.price), "outcome": PaymentOutcome.PAID.value,
            },
        )
        return PaymentOutcome.PAID, job

    async def _transfer(self, job: Job, context: ErrorContext) -> None:
        """Flip the job to paid, debit the client, credit the contractor."""
        contract = job.contract
        if not await self.store.mark_job_paid(job.id, self._clock()):
            raise StoreConflictError(
                f"Job {job.id} was paid by a concurrent request", context,
            )
        debited = await self.store.increment_balance(
            contract.client_id, -job.price,
        )
        if debited is None:
            raise StoreConflictError(
                f"Balance of profile {contract.client_id} changed concurrently",
                context,
            )
        await self.store.increment_balance(contract.contractor_id, job.price)
