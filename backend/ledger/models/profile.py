"""Profile ORM — an account (client or contractor) holding a money balance.

Invariants:
    - balance is NUMERIC(12, 2) and never negative (CHECK constraint)
    - role is 'client' or 'contractor' (CHECK constraint)
    - balance only changes through relative-delta UPDATEs (services/entity_store.py)

Design Decisions:
    - Two name columns, full_name derived: reports show "First Last"
    - Integer ids: profile_id travels in a request header as a plain int
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ledger.core.domain_types import ProfileRole
from ledger.db.base import Base

_ROLES = ", ".join(f"'{role.value}'" for role in ProfileRole)


class Profile(Base):
    """Client or contractor account."""
    __tablename__ = "profiles"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_profiles_balance_non_negative"),
        CheckConstraint(
            f"role IN ({_ROLES})", name="ck_profiles_role",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    profession: Mapped[str] = mapped_column(String(100), nullable=False)
    balance: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=Decimal("0.00"),
    )
    role: Mapped[str] = mapped_column(String(20), nullable=False)
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
    client_contracts: Mapped[list["Contract"]] = relationship(
        "Contract", back_populates="client",
        foreign_keys="Contract.client_id",
    )
    contractor_contracts: Mapped[list["Contract"]] = relationship(
        "Contract", back_populates="contractor",
        foreign_keys="Contract.contractor_id",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
