"""Reporting Engine — admin rankings over paid jobs in a payment window.

Invariants:
    - Read-only: plain SELECT ... GROUP BY, no locks, committed data only
    - Only jobs with paid = true and start <= payment_date < end count
    - best_profession: highest total earned per contractor profession;
      ties go to the alphabetically first profession
    - best_clients: highest total paid per client, descending;
      ties go to the lower client id

Design Decisions:
    - Totals are grouped in SQL, ranked in Python (core/ranking.py) so ordering
      compares exact Decimals on every dialect
    - No result is None/[] rather than an error; the route turns None into a 404
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.core.domain_types import ProfileId, to_money
from ledger.core.ranking import rank_totals
from ledger.core.report_window import PaymentWindow
from ledger.models.contract import Contract
from ledger.models.job import Job
from ledger.models.profile import Profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientSpend:
    """One row of the best-clients ranking."""
    id: ProfileId
    full_name: str
    paid: Decimal


def _paid_in(window: PaymentWindow):
    return (
        Job.paid.is_(True),
        Job.payment_date >= window.start,
        Job.payment_date < window.end,
    )


class ReportingEngine:
    """Aggregation queries over Job ⋈ Contract ⋈ Profile."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def profession_earnings(self, window: PaymentWindow) -> dict[str, Decimal]:
        result = await self.db.execute(
            select(Profile.profession, func.sum(Job.price))
            .select_from(Job)
            .join(Contract, Job.contract_id == Contract.id)
            .join(Profile, Contract.contractor_id == Profile.id)
            .where(*_paid_in(window))
            .group_by(Profile.profession),
        )
        return {profession: to_money(total) for profession, total in result.all()}

    async def best_profession(self, window: PaymentWindow) -> str | None:
        """Profession whose contractors earned the most in the window."""
        ranked = rank_totals(await self.profession_earnings(window), limit=1)
        if not ranked:
            return None
        profession, total = ranked[0]
        logger.info(
            f"Best profession {window.start.isoformat()}..{window.end.isoformat()}: "
            f"{profession} ({total})",
        )
        return profession

    async def best_clients(
        self, window: PaymentWindow, limit: int = 2,
    ) -> list[ClientSpend]:
        """Clients who paid the most in the window, top `limit`."""
        result = await self.db.execute(
            select(
                Profile.id, Profile.first_name, Profile.last_name,
                func.sum(Job.price),
            )
            .select_from(Job)
            .join(Contract, Job.contract_id == Contract.id)
            .join(Profile, Contract.client_id == Profile.id)
            .where(*_paid_in(window))
            .group_by(Profile.id, Profile.first_name, Profile.last_name),
        )
        rows = result.all()
        names = {row[0]: f"{row[1]} {row[2]}" for row in rows}
        totals = {row[0]: to_money(row[3]) for row in rows}
        return [
            ClientSpend(id=ProfileId(client_id), full_name=names[client_id], paid=total)
            for client_id, total in rank_totals(totals, limit=limit)
        ]
