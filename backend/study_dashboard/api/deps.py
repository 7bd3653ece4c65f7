from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from study_dashboard.core import ErrorCode
from study_dashboard.core.config import settings
from study_dashboard.core.errors import internal_error
from study_dashboard.db.session import SessionLocal
from study_dashboard.services.datastore.base import StudyStatusStore
from study_dashboard.services.datastore.postgres_store import SqlStudyStatusStore
from study_dashboard.services.datastore.supabase_store import SupabaseStudyStatusStore
from study_dashboard.services.status_service import StatusService

def get_db() -> Generator[Session, None, None]:
    """
    Yields a DB session per request.
    Ensures the session is closed even on exceptions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_status_store(db: Session = Depends(get_db)) -> StudyStatusStore:
    """
    Provides the live status store selected by DATA_STORE_BACKEND.
    Using Depends(get_status_store) allows for easy faking of the store in tests.
    """
    backend = (settings.DATA_STORE_BACKEND or "").lower()
    if backend == "postgres":
        return SqlStudyStatusStore(db)
    if backend == "supabase":
        return SupabaseStudyStatusStore()
    raise internal_error(code=ErrorCode.CONFIG_ERROR, details=f"Unsupported data store backend: {backend!r}")


def get_status_service(store: StudyStatusStore = Depends(get_status_store)) -> StatusService:
    """Service dependency for status lookups."""
    return StatusService(store=store)
