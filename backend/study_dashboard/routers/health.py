"""
health.py
- Purpose: Liveness of the API and reachability of the configured status store.
"""

from fastapi import APIRouter, Depends

from study_dashboard.api.deps import get_status_service
from study_dashboard.core.config import settings
from study_dashboard.services.status_service import StatusService

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health():
    return {
        "status": "ok",
        "backend": settings.DATA_STORE_BACKEND,
        "statisticsWindowHours": settings.STATISTICS_WINDOW_HOURS,
    }


@router.get("/db/health")
def store_health(svc: StatusService = Depends(get_status_service)):
    """Runs the statistics routine once; a store failure surfaces as the usual 500."""
    svc.check_store()
    return {"status": "ok", "backend": settings.DATA_STORE_BACKEND, "db": "connected"}
