# study_dashboard/core/__init__.py
from study_dashboard.core.errors import AppError
from study_dashboard.core.error_codes import ErrorCode
from study_dashboard.core.error_reasons import ErrorReason

__all__ = ["AppError", "ErrorCode", "ErrorReason"]
