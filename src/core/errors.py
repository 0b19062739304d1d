"""Chore engine errors and their classification into HTTP-friendly responses."""

from enum import Enum

from pydantic import BaseModel

from src.core.config import constants


class ChoreEngineError(Exception):
    """Base class for errors raised by the cadence engine."""


class ChoreNotFoundError(ChoreEngineError):
    """No chore record exists for the requested id."""

    def __init__(self, chore_id: int) -> None:
        self.chore_id = chore_id
        super().__init__(f"Chore not found: {chore_id}")


class InvariantViolationError(ChoreEngineError):
    """An on-cadence chore is missing the fields the toggle needs."""


class StorageFailureError(ChoreEngineError):
    """The storage collaborator failed; the cause is chained."""


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCode:
    """Error codes for specific error conditions."""

    ERR_CHORE_NOT_FOUND = "ERR_CHORE_NOT_FOUND"
    ERR_INVARIANT_VIOLATION = "ERR_INVARIANT_VIOLATION"
    ERR_STORAGE_FAILURE = "ERR_STORAGE_FAILURE"
    ERR_UNKNOWN = "ERR_UNKNOWN"


class ErrorResponse(BaseModel):
    """Structured error response with user-friendly messaging."""

    code: str
    message: str
    suggestion: str
    severity: ErrorSeverity
    status_code: int


def classify_error_with_response(exception: Exception) -> ErrorResponse:
    """Classify an engine error and return a structured response with recovery suggestions.

    Args:
        exception: The exception raised while listing or toggling chores

    Returns:
        ErrorResponse with code, message, suggestion, severity and HTTP status
    """
    if isinstance(exception, ChoreNotFoundError):
        return ErrorResponse(
            code=ErrorCode.ERR_CHORE_NOT_FOUND,
            message=f"I couldn't find chore {exception.chore_id}.",
            suggestion="Reload the chore list and try again.",
            severity=ErrorSeverity.LOW,
            status_code=constants.HTTP_NOT_FOUND,
        )

    if isinstance(exception, InvariantViolationError):
        return ErrorResponse(
            code=ErrorCode.ERR_INVARIANT_VIOLATION,
            message="This chore's schedule is inconsistent and cannot be toggled.",
            suggestion="Check the chore's frequency and last completion time in storage.",
            severity=ErrorSeverity.HIGH,
            status_code=constants.HTTP_CONFLICT,
        )

    if isinstance(exception, StorageFailureError):
        return ErrorResponse(
            code=ErrorCode.ERR_STORAGE_FAILURE,
            message="The chore store is unavailable.",
            suggestion="Please try again later.",
            severity=ErrorSeverity.CRITICAL,
            status_code=constants.HTTP_SERVICE_UNAVAILABLE,
        )

    return ErrorResponse(
        code=ErrorCode.ERR_UNKNOWN,
        message="An unexpected error occurred.",
        suggestion="Please try again later. If the problem persists, check the server logs.",
        severity=ErrorSeverity.MEDIUM,
        status_code=constants.HTTP_SERVER_ERROR,
    )
