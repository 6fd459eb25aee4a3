"""Job Routes — unpaid job listing and job payment.

Invariants:
    - /jobs/unpaid lists unpaid jobs on the caller's active contracts (either side)
    - /jobs/{id}/pay is only allowed to the contract's client (403 otherwise)
    - Paying an already-paid job is a 200 with status "already_paid"
"""

import logging

from fastapi import APIRouter, Depends, Path

from ledger.api.deps import get_payment_engine, get_profile, get_store
from ledger.core.domain_types import MAX_ID, JobId, ProfileId
from ledger.models.profile import Profile
from ledger.schemas.job import JobResponse, PaymentResponse
from ledger.services.entity_store import SqlEntityStore
from ledger.services.payment_engine import PaymentEngine

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/jobs", tags=["jobs"])


@router.get("/unpaid", response_model=list[JobResponse])
async def list_unpaid_jobs(
    profile: Profile = Depends(get_profile),
    store: SqlEntityStore = Depends(get_store),
):
    """Unpaid jobs for the caller, active contracts only."""
    return await store.find_unpaid_jobs_for_profile(ProfileId(profile.id))


@router.post("/{job_id}/pay", response_model=PaymentResponse)
async def pay_job(
    job_id: int = Path(ge=1, le=MAX_ID),
    profile: Profile = Depends(get_profile),
    engine: PaymentEngine = Depends(get_payment_engine),
):
    """Pay for a job: client balance -> contractor balance."""
    outcome, job = await engine.pay_job(ProfileId(profile.id), JobId(job_id))
    return PaymentResponse(
        status=outcome.value, job=JobResponse.model_validate(job),
    )
