"""
errors.py
- Purpose: AppError used across services/repos for consistent errors.
- Pattern: raise AppError(...) in service/repo, handler converts to JSON response.
- Wire format is flat: {"error": <message>} plus "details" when present.
"""

from dataclasses import dataclass

from fastapi import status as http_status
from study_dashboard.core.error_codes import ErrorCode
from study_dashboard.core.error_reasons import ErrorReason


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: str | None = None
    message: str | None = None  # Optional human-readable message

    def __str__(self) -> str:
        return self.details or self.message or self.reason

    def to_dict(self) -> dict[str, str]:
        payload = {"error": self.message if self.message else self.reason}
        if self.details:
            payload["details"] = self.details
        return payload


def _text(reason) -> str:
    return reason.value if isinstance(reason, ErrorReason) else str(reason)


# Convenience constructors (optional but makes services cleaner)
def bad_request(reason: str = ErrorReason.INVALID_INPUT, *, code: ErrorCode = ErrorCode.VALIDATION_ERROR, details: str | None = None) -> AppError:
    return AppError(code=code, reason=_text(reason), status_code=http_status.HTTP_400_BAD_REQUEST, details=details)


def unknown_status(value: object) -> AppError:
    return AppError(
        code=ErrorCode.UNKNOWN_STATUS,
        reason=ErrorReason.INTERNAL_ERROR.value,
        status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
        details=f"Unknown study status: {value!r}",
    )


def internal_error(reason: str = ErrorReason.INTERNAL_ERROR, *, code: ErrorCode = ErrorCode.INTERNAL_ERROR, details: str | None = None) -> AppError:
    return AppError(code=code, reason=_text(reason), status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR, details=details)
