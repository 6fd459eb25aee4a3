"""Initial schema — profiles, contracts, jobs.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("profession", sa.String(100), nullable=False),
        sa.Column("balance", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("balance >= 0", name="ck_profiles_balance_non_negative"),
        sa.CheckConstraint("role IN ('client', 'contractor')", name="ck_profiles_role"),
    )

    op.create_table(
        "contracts",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("terms", sa.Text, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="new"),
        sa.Column("client_id", sa.Integer, sa.ForeignKey("profiles.id"), nullable=False),
        sa.Column("contractor_id", sa.Integer, sa.ForeignKey("profiles.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(
            "status IN ('new', 'in_progress', 'terminated')", name="ck_contracts_status",
        ),
    )
    op.create_index("ix_contracts_client_id", "contracts", ["client_id"])
    op.create_index("ix_contracts_contractor_id", "contracts", ["contractor_id"])

    op.create_table(
        "jobs",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("paid", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("payment_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("contract_id", sa.Integer, sa.ForeignKey("contracts.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("price > 0", name="ck_jobs_price_positive"),
        sa.CheckConstraint(
            "(paid AND payment_date IS NOT NULL) OR (NOT paid AND payment_date IS NULL)",
            name="ck_jobs_paid_has_payment_date",
        ),
    )
    op.create_index("ix_jobs_contract_id", "jobs", ["contract_id"])
    op.create_index("ix_jobs_paid_payment_date", "jobs", ["paid", "payment_date"])


def downgrade() -> None:
    op.drop_index("ix_jobs_paid_payment_date", table_name="jobs")
    op.drop_index("ix_jobs_contract_id", table_name="jobs")
    op.drop_table("jobs")
    op.drop_index("ix_contracts_contractor_id", table_name="contracts")
    op.drop_index("ix_contracts_client_id", table_name="contracts")
    op.drop_table("contracts")
    op.drop_table("profiles")
