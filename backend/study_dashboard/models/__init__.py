"""
models package
- Purpose: Import all ORM models so Alembic autogenerate discovers them.
- Important: Alembic only sees models that are imported somewhere.
"""

from study_dashboard.models.base import Base
from study_dashboard.models.study_status import StudyStatusEvent

__all__ = [
    "Base",
    "StudyStatusEvent",
]
