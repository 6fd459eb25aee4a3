"""Deposit Guard — balance top-ups bounded by the client's outstanding debt.

Invariants:
    - debt = sum of prices of unpaid jobs on the client's non-terminated contracts
    - A deposit succeeds iff amount <= debt * deposit_cap_ratio
    - With no debt, every positive deposit is refused
    - The increment is a single relative-delta UPDATE, committed with the guard's read
    - Lost races surface as StoreConflictError and re-run the WHOLE deposit
      from the profile read, so the cap is checked against fresh debt

Design Decisions:
    - amount > 0 is validated at the HTTP boundary (schemas/balance.py), not here
    - Ratio comes from settings so the overfunding guard can be tuned without a deploy
    - Same attempt loop as PaymentEngine, sharing payment_max_attempts
"""

import logging
from decimal import Decimal

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.core.domain_types import DepositOutcome, ProfileId, to_money
from ledger.core.enforce_funds import check_deposit_within_cap
from ledger.core.errors import (
    ErrorContext, LedgerError, ResourceNotFoundError, StoreConflictError,
)
from ledger.core.repository_protocols import EntityStore
from ledger.infrastructure.database import is_conflict
from ledger.services.entity_store import SqlEntityStore

logger = logging.getLogger(__name__)


class DepositGuard:
    """Validates and executes deposits inside the caller's session."""

    def __init__(
        self,
        db: AsyncSession,
        cap_ratio: Decimal = Decimal("1.25"),
        max_attempts: int = 3,
    ):
        self.db = db
        self.store: EntityStore = SqlEntityStore(db)
        self.cap_ratio = cap_ratio
        self.max_attempts = max_attempts

    async def deposit(
        self, client_id: ProfileId, amount: Decimal,
    ) -> tuple[DepositOutcome, Decimal]:
        """Top up `client_id` by `amount`. Returns the outcome and the new balance."""
        amount = to_money(amount)
        for attempt in range(1, self.max_attempts + 1):
            context = ErrorContext(profile_id=client_id, attempt=attempt)
            try:
                return await self._attempt(client_id, amount, context)
            except StoreConflictError:
                logger.warning(
                    f"Deposit conflict on profile {client_id}, "
                    f"attempt {attempt}/{self.max_attempts}",
                    extra={"profile_id": client_id, "attempt": attempt},
                )
        raise StoreConflictError(
            f"Deposit for profile {client_id} could not commit after "
            f"{self.max_attempts} attempts",
            ErrorContext(profile_id=client_id, attempt=self.max_attempts),
        )

    async def _attempt(
        self, client_id: ProfileId, amount: Decimal, context: ErrorContext,
    ) -> tuple[DepositOutcome, Decimal]:
        """One pass: load, sum debt, check cap, increment, commit."""
        try:
            profile = await self.store.find_profile(client_id)
            if profile is None:
                raise ResourceNotFoundError("Profile", client_id, context)

            debt = await self.store.sum_unpaid_debt(client_id)
            error = check_deposit_within_cap(amount, debt, self.cap_ratio, context)
            if error:
                logger.info(
                    f"Deposit of {amount} refused for profile {client_id} (debt {debt})",
                    extra={
                        "profile_id": client_id, "amount": str(amount),
                        "error_code": error.code,
                    },
                )
                raise error

            new_balance = await self.store.increment_balance(client_id, amount)
            if new_balance is None:
                raise StoreConflictError(
                    f"Profile {client_id} vanished during deposit", context,
                )
            await self.db.commit()
        except StoreConflictError:
            await self.db.rollback()
            raise
        except LedgerError:
            # Nothing written yet; ends the read
            await self.db.commit()
            raise
        except DBAPIError as e:
            await self.db.rollback()
            if is_conflict(e):
                raise StoreConflictError(
                    "Concurrent update conflict, retry", context,
                ) from e
            raise

        logger.info(
            f"Deposited {amount} to profile {client_id}",
            extra={
                "profile_id": client_id, "amount": str(amount),
                "outcome": DepositOutcome.DEPOSITED.value,
            },
        )
        return DepositOutcome.DEPOSITED, new_balance
