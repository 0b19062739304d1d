"""Tests for error classification."""

import pytest

from src.core.config import constants
from src.core.errors import (
    ChoreNotFoundError,
    ErrorCode,
    ErrorSeverity,
    InvariantViolationError,
    StorageFailureError,
    classify_error_with_response,
)


@pytest.mark.unit
class TestClassifyErrorWithResponse:
    """Tests for classify_error_with_response."""

    def test_not_found(self):
        response = classify_error_with_response(ChoreNotFoundError(5))

        assert response.code == ErrorCode.ERR_CHORE_NOT_FOUND
        assert response.status_code == 404
        assert "5" in response.message
        assert response.severity == ErrorSeverity.LOW

    def test_invariant_violation(self):
        response = classify_error_with_response(InvariantViolationError("missing anchor"))

        assert response.code == ErrorCode.ERR_INVARIANT_VIOLATION
        assert response.status_code == 409
        assert response.severity == ErrorSeverity.HIGH

    def test_storage_failure(self):
        response = classify_error_with_response(StorageFailureError("disk full"))

        assert response.code == ErrorCode.ERR_STORAGE_FAILURE
        assert response.status_code == 503
        assert response.severity == ErrorSeverity.CRITICAL

    def test_unknown(self):
        response = classify_error_with_response(RuntimeError("boom"))

        assert response.code == ErrorCode.ERR_UNKNOWN
        assert response.status_code == 500

    def test_not_found_message(self):
        assert str(ChoreNotFoundError(12)) == "Chore not found: 12"

    @pytest.mark.parametrize(
        ("exception", "expected"),
        [
            (ChoreNotFoundError(1), constants.HTTP_NOT_FOUND),
            (InvariantViolationError("x"), constants.HTTP_CONFLICT),
            (StorageFailureError("x"), constants.HTTP_SERVICE_UNAVAILABLE),
            (RuntimeError("x"), constants.HTTP_SERVER_ERROR),
        ],
    )
    def test_status_codes_come_from_constants(self, exception, expected):
        assert classify_error_with_response(exception).status_code == expected
