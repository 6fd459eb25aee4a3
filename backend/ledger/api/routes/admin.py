"""Admin Routes — earnings and spend rankings over a payment window.

Invariants:
    - Window is half-open: start <= payment_date < end
    - start >= end -> 400 INVALID_WINDOW
    - best-profession with no paid jobs in the window -> 404
    - best-clients limit defaults to settings.best_clients_default_limit (2)

Design Decisions:
    - Unauthenticated: administrative scope, deployed behind the admin network
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query

from ledger.api.deps import get_reporting_engine
from ledger.config import Settings, get_settings
from ledger.core.errors import ResourceNotFoundError
from ledger.core.report_window import PaymentWindow
from ledger.schemas.report import BestProfessionResponse, ClientSpendResponse
from ledger.services.reporting_engine import ReportingEngine

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.get("/best-profession", response_model=BestProfessionResponse)
async def best_profession(
    start: datetime = Query(...),
    end: datetime = Query(...),
    engine: ReportingEngine = Depends(get_reporting_engine),
):
    """Profession that earned the most in [start, end)."""
    window = PaymentWindow.of(start, end)
    profession = await engine.best_profession(window)
    if profession is None:
        raise ResourceNotFoundError(
            "Paid jobs in window",
            f"{window.start.isoformat()}..{window.end.isoformat()}",
        )
    return BestProfessionResponse(profession=profession)


@router.get("/best-clients", response_model=list[ClientSpendResponse])
async def best_clients(
    start: datetime = Query(...),
    end: datetime = Query(...),
    limit: int | None = Query(None, ge=1, le=100),
    engine: ReportingEngine = Depends(get_reporting_engine),
    settings: Settings = Depends(get_settings),
):
    """Clients who paid the most in [start, end)."""
    window = PaymentWindow.of(start, end)
    ranked = await engine.best_clients(
        window, limit=limit or settings.best_clients_default_limit,
    )
    return [ClientSpendResponse.model_validate(row) for row in ranked]
