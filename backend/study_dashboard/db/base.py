"""
db/base.py
- Purpose: Provide Base + ensure models are imported for Alembic.
"""

from study_dashboard.models.base import Base
import study_dashboard.models  # noqa: F401  (ensures models are imported)

__all__ = ["Base"]
