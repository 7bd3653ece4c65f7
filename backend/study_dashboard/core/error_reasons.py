"""
error_reasons.py
- Purpose: Human-friendly "reason" strings.
- Keep these stable; the dashboard shows them verbatim in its error banner.
"""

from enum import Enum


class ErrorReason(str, Enum):
    INVALID_INPUT = "Invalid input"
    TOKEN_REQUIRED = "Token is required"
    STUDY_NOT_FOUND = "Study not found"

    INTERNAL_ERROR = "Internal server error"
