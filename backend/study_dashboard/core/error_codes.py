# study_dashboard/core/error_codes.py
from enum import Enum

class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DB_ERROR = "DB_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"

    # Study status
    TOKEN_MISSING = "TOKEN_MISSING"
    UNKNOWN_STATUS = "UNKNOWN_STATUS"
