"""
Application error types and their HTTP mapping.
"""
from typing import Any, Dict, Optional

from fastapi import status


class AppError(Exception):
    """
    Base class for errors surfaced to API callers.

    The message is returned verbatim; ``kind`` and ``field`` let clients
    react to an error without parsing its text.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_kind: str = "error"

    def __init__(self, message: str, kind: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.kind = kind or self.default_kind
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        body = {"message": self.message, "kind": self.kind}
        if self.field:
            body["field"] = self.field
        return body


class ValidationError(AppError):
    """Missing or malformed field, enum violation or uniqueness conflict."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_kind = "validation"


class NotFoundError(AppError):
    """The identifier has no matching record."""

    status_code = status.HTTP_404_NOT_FOUND
    default_kind = "not_found"


class StoreError(AppError):
    """Unexpected failure in the persistence layer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_kind = "store"


def duplicate_error(field: str, value: Any = None) -> ValidationError:
    """Build the uniqueness-conflict error for a field."""
    if value is None:
        message = f"duplicate key error: an employee with this {field} already exists"
    else:
        message = f"duplicate key error: {field} '{value}' already exists"
    return ValidationError(message, kind="duplicate", field=field)
