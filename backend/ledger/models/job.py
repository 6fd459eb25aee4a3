"""Job ORM — a billable unit of work under a contract.

Invariants:
    - Always belongs to a Contract (contract_id FK)
    - price > 0, NUMERIC(12, 2)
    - paid flips false -> true exactly once; payment_date is set in the same UPDATE
    - payment_date IS NOT NULL iff paid (CHECK constraint)

Design Decisions:
    - paid defaults to false (never NULL): "unpaid" is a single predicate
    - Index on (paid, payment_date): admin reports scan paid jobs by window
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    Boolean, CheckConstraint, DateTime, ForeignKey, Index, Integer, Numeric, Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ledger.db.base import Base


class Job(Base):
    """Job entity — paid at most once, by its contract's client."""
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_jobs_price_positive"),
        CheckConstraint(
            "(paid AND payment_date IS NOT NULL) OR "
            "(NOT paid AND payment_date IS NULL)",
            name="ck_jobs_paid_has_payment_date",
        ),
        Index("ix_jobs_paid_payment_date", "paid", "payment_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    paid: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    payment_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    contract_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("contracts.id"), nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    contract: Mapped["Contract"] = relationship(
        "Contract", back_populates="jobs",
    )
