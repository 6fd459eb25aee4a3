"""Contract Routes — a caller's view of their own contracts.

Invariants:
    - A contract is visible only to its client and its contractor
    - Non-parties get 404, never 403: contract ids are not disclosed
    - The listing returns non-terminated contracts only
"""

import logging

from fastapi import APIRouter, Depends, Path

from ledger.api.deps import get_profile, get_store
from ledger.core.domain_types import MAX_ID, ContractId, ProfileId
from ledger.core.errors import ErrorContext, ResourceNotFoundError
from ledger.models.profile import Profile
from ledger.schemas.contract import ContractResponse
from ledger.services.entity_store import SqlEntityStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/contracts", tags=["contracts"])


@router.get("/{contract_id}", response_model=ContractResponse)
async def get_contract(
    contract_id: int = Path(ge=1, le=MAX_ID),
    profile: Profile = Depends(get_profile),
    store: SqlEntityStore = Depends(get_store),
):
    """Contract by id, if the caller is a party to it."""
    contract = await store.find_contract_for_profile(
        ContractId(contract_id), ProfileId(profile.id),
    )
    if contract is None:
        raise ResourceNotFoundError(
            "Contract", contract_id, ErrorContext(profile_id=profile.id),
        )
    return contract


@router.get("", response_model=list[ContractResponse])
async def list_contracts(
    profile: Profile = Depends(get_profile),
    store: SqlEntityStore = Depends(get_store),
):
    """Caller's active (non-terminated) contracts."""
    return await store.find_contracts_for_profile(
        ProfileId(profile.id), active_only=True,
    )
