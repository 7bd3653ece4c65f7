"""
study_status.py
- Purpose: API routes for the study status lookup and the token page.
- Design: Keep router thin. Delegate business logic to services.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from study_dashboard.schemas.study_status import DashboardView, StatusHistoryEntry, StudyStatusResponse
from study_dashboard.services.status_service import StatusService
from study_dashboard.api.deps import get_status_service

router = APIRouter(tags=["Study Status"])


@router.get("/api/study-status", response_model=StudyStatusResponse)
def get_study_status(
    token: str | None = Query(None),
    svc: StatusService = Depends(get_status_service),
):
    return svc.resolve_status(token)


@router.options("/api/study-status", status_code=status.HTTP_200_OK)
def study_status_options():
    return Response(status_code=status.HTTP_200_OK)


@router.get("/api/study-status/history", response_model=list[StatusHistoryEntry])
def get_study_status_history(
    token: str | None = Query(None),
    svc: StatusService = Depends(get_status_service),
):
    return svc.status_history(token)


@router.get("/token/{token}", response_model=DashboardView)
def get_token_page(token: str, svc: StatusService = Depends(get_status_service)):
    """Loading /token/<token> runs the same lookup as the search form."""
    return svc.dashboard_view(token)
