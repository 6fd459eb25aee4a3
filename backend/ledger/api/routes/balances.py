"""Balance Routes — client deposits.

Invariants:
    - The body amount is validated positive before the guard runs
    - The cap (1.25x unpaid debt by default) is enforced by DepositGuard
"""

import logging

from fastapi import APIRouter, Depends, Path

from ledger.api.deps import get_deposit_guard, get_profile
from ledger.core.domain_types import MAX_ID, ProfileId
from ledger.models.profile import Profile
from ledger.schemas.balance import DepositRequest, DepositResponse
from ledger.services.deposit_guard import DepositGuard

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/balances", tags=["balances"])


@router.post("/deposit/{user_id}", response_model=DepositResponse)
async def deposit(
    body: DepositRequest,
    user_id: int = Path(ge=1, le=MAX_ID),
    profile: Profile = Depends(get_profile),
    guard: DepositGuard = Depends(get_deposit_guard),
):
    """Deposit money into a client's balance."""
    logger.info(
        f"Deposit request for profile {user_id} by profile {profile.id}",
        extra={"profile_id": profile.id, "amount": str(body.amount)},
    )
    outcome, balance = await guard.deposit(ProfileId(user_id), body.amount)
    return DepositResponse(
        status=outcome.value, profile_id=user_id, balance=balance,
    )
