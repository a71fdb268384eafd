"""
Custom exceptions for loadwatch.

The analytics engine itself never raises: missing or malformed inputs are
closed by explicit default policies. Exceptions only appear at the
boundary, where plain records and snapshot files are turned into engine
types. Each exception includes:
- A descriptive message
- An error code
- Optional details for debugging
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent error reporting."""

    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Record errors
    RECORD_VALIDATION_ERROR = "RECORD_VALIDATION_ERROR"
    INVALID_DATE_KEY = "INVALID_DATE_KEY"

    # Snapshot errors
    SNAPSHOT_NOT_FOUND = "SNAPSHOT_NOT_FOUND"
    SNAPSHOT_UNREADABLE = "SNAPSHOT_UNREADABLE"
    ATHLETE_NOT_FOUND = "ATHLETE_NOT_FOUND"


class LoadwatchError(Exception):
    """
    Base exception for all loadwatch errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class RecordValidationError(LoadwatchError):
    """Raised when an athlete record payload cannot be parsed."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        code: ErrorCode = ErrorCode.RECORD_VALIDATION_ERROR,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=code,
            details=error_details,
        )


class SnapshotError(LoadwatchError):
    """Raised when a snapshot file is missing or is not valid JSON."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        code: ErrorCode = ErrorCode.SNAPSHOT_UNREADABLE,
    ) -> None:
        details = {"path": path} if path else None
        super().__init__(message=message, code=code, details=details)


class AthleteNotFoundError(LoadwatchError):
    """Raised when a requested athlete is not present in a snapshot."""

    def __init__(self, athlete_id: str) -> None:
        super().__init__(
            message=f"Athlete with ID '{athlete_id}' not found",
            code=ErrorCode.ATHLETE_NOT_FOUND,
            details={"athlete_id": athlete_id},
        )
