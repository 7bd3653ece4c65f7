"""
token_validators.py
- Purpose: Validate the study token at the boundary, keep services clean.
"""

from study_dashboard.core import ErrorCode, ErrorReason
from study_dashboard.core.errors import bad_request


def normalize_token(token: str | None) -> str:
    """Strip surrounding whitespace; a missing or blank token is a 400."""
    t = (token or "").strip()
    if not t:
        raise bad_request(ErrorReason.TOKEN_REQUIRED, code=ErrorCode.TOKEN_MISSING)
    return t
