"""
Domain errors raised by the service layer.

Services never raise HTTPException; main.py maps each ErrorKind to a
status code so callers can tell a missing company from a duplicate
application.
"""

import enum


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    VALIDATION = "VALIDATION"


class ServiceError(Exception):
    """Base class for expected business-rule failures."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """A referenced Job or Company does not exist."""
    kind = ErrorKind.NOT_FOUND


class ConflictError(ServiceError):
    """The write would break a uniqueness rule (duplicate application, company name)."""
    kind = ErrorKind.CONFLICT


class ValidationError(ServiceError):
    """Malformed or missing input that passed schema validation."""
    kind = ErrorKind.VALIDATION


STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.VALIDATION: 400,
}
