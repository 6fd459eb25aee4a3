"""Contract ORM — agreement between one client and one contractor.

Invariants:
    - client_id and contractor_id both reference profiles
    - status transitions: new -> in_progress -> terminated (terminal)
    - Active means status != 'terminated'

Design Decisions:
    - String status with CHECK over a native ENUM: migrations stay portable
      between PostgreSQL and SQLite
    - Jobs cascade with the contract that owns them
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ledger.core.domain_types import ContractStatus
from ledger.db.base import Base

_STATUSES = ", ".join(f"'{status.value}'" for status in ContractStatus)


class Contract(Base):
    """Contract between a client and a contractor — owns its jobs."""
    __tablename__ = "contracts"
    __table_args__ = (
        CheckConstraint(
            f"status IN ({_STATUSES})",
            name="ck_contracts_status",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    terms: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ContractStatus.NEW.value,
    )
    client_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("profiles.id"), nullable=False, index=True,
    )
    contractor_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("profiles.id"), nullable=False, index=True,
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
    client: Mapped["Profile"] = relationship(
        "Profile", back_populates="client_contracts",
        foreign_keys=[client_id],
    )
    contractor: Mapped["Profile"] = relationship(
        "Profile", back_populates="contractor_contracts",
        foreign_keys=[contractor_id],
    )
    jobs: Mapped[list["Job"]] = relationship(
        "Job", back_populates="contract",
        cascade="all, delete-orphan",
    )
