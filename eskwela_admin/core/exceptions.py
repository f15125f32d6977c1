"""
Domain errors raised inside the mock services.

They never leave the service boundary: every public operation converts them
into a failure envelope carrying the message and the error code.
"""
from typing import Any, Dict, Optional


class MockAPIError(Exception):
    """Base error for the mock API services."""

    error_code = "MOCK_API_ERROR"
    status_code = 500

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}


class NotFoundError(MockAPIError):
    """Referenced record is absent from the store."""

    error_code = "NOT_FOUND"
    status_code = 404

    def __init__(self, entity: str, entity_id: Any = None):
        super().__init__(f"{entity} not found", extra={"id": entity_id})
        self.entity = entity


class ConflictError(MockAPIError):
    """Uniqueness violation (duplicate email)."""

    error_code = "CONFLICT"
    status_code = 409


class ValidationFailure(MockAPIError):
    """Payload violates a record invariant."""

    error_code = "VALIDATION_ERROR"
    status_code = 422


ERROR_STATUS_CODES = {
    cls.error_code: cls.status_code
    for cls in (MockAPIError, NotFoundError, ConflictError, ValidationFailure)
}
