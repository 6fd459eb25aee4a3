"""Access Policy — who may see and who may pay for a contract.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - A profile sees a contract iff it is the contract's client or contractor
    - Only the contract's client may pay, and never on a terminated contract
    - check_* functions return an error on violation, None on success

Design Decisions:
    - Return errors (not raise): callers chain checks with `or`, first error wins,
      and the service decides when to raise
    - Visibility failures surface as not-found upstream; the policy only answers yes/no
"""

from ledger.core.domain_types import ContractStatus
from ledger.core.errors import ErrorContext, ForbiddenError
from ledger.core.repository_protocols import ContractLike


def is_active(contract: ContractLike) -> bool:
    """Active means anything but terminated (new and in_progress both count)."""
    return contract.status != ContractStatus.TERMINATED


def is_party(contract: ContractLike, profile_id: int) -> bool:
    return profile_id in (contract.client_id, contract.contractor_id)


def can_view_contract(contract: ContractLike, profile_id: int) -> bool:
    """Owner-of-contract visibility rule used by every read path."""
    return is_party(contract, profile_id)


def check_is_client(
    contract: ContractLike, profile_id: int, context: ErrorContext | None = None,
) -> ForbiddenError | None:
    """Rule 1: only the contract's client may pay its jobs."""
    if contract.client_id != profile_id:
        return ForbiddenError(
            f"Profile {profile_id} is not the client of contract {contract.id}",
            context,
        )
    return None


def check_contract_open(
    contract: ContractLike, context: ErrorContext | None = None,
) -> ForbiddenError | None:
    """Rule 2: terminated contracts accept no payments."""
    if not is_active(contract):
        return ForbiddenError(
            f"Contract {contract.id} is terminated", context,
        )
    return None


def authorize_payment(
    contract: ContractLike, profile_id: int, context: ErrorContext | None = None,
) -> ForbiddenError | None:
    """Chain the payment authorization checks. Returns first error or None."""
    return (
        check_is_client(contract, profile_id, context)
        or check_contract_open(contract, context)
    )
