"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - *Like protocols let pure policy functions accept ORM rows or plain test doubles
    - Async in EntityStore: implementations do IO, but the policy functions that
      consume the loaded rows are never async themselves
"""

from datetime import datetime
from decimal import Decimal
from typing import Protocol, Sequence

from ledger.core.domain_types import ProfileId, ContractId, JobId


class ProfileLike(Protocol):
    """Structural contract for Profile rows handed to the policy layer."""
    id: int
    first_name: str
    last_name: str
    profession: str
    balance: Decimal
    role: str


class ContractLike(Protocol):
    """Structural contract for Contract rows handed to the policy layer."""
    id: int
    client_id: int
    contractor_id: int
    status: str


class JobLike(Protocol):
    """Structural contract for Job rows handed to the policy layer."""
    id: int
    contract_id: int
    price: Decimal
    paid: bool
    payment_date: datetime | None


class EntityStore(Protocol):
    """Contract for profile/contract/job persistence — implemented by shell."""
    async def find_profile(self, profile_id: ProfileId) -> ProfileLike | None: ...
    async def find_contract(self, contract_id: ContractId) -> ContractLike | None: ...
    async def find_contract_for_profile(
        self, contract_id: ContractId, profile_id: ProfileId,
    ) -> ContractLike | None: ...
    async def find_contracts_for_profile(
        self, profile_id: ProfileId, active_only: bool = False,
    ) -> Sequence[ContractLike]: ...
    async def find_unpaid_jobs_for_profile(
        self, profile_id: ProfileId,
    ) -> Sequence[JobLike]: ...
    async def find_job(self, job_id: JobId) -> JobLike | None: ...
    async def find_job_for_update(self, job_id: JobId) -> JobLike | None: ...
    async def mark_job_paid(self, job_id: JobId, paid_at: datetime) -> bool: ...
    async def increment_balance(
        self, profile_id: ProfileId, delta: Decimal,
    ) -> Decimal | None: ...
    async def sum_unpaid_debt(self, client_id: ProfileId) -> Decimal: ...
