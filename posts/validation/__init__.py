"""
Centralized Validation Module

Domain validation rules and the error types used to report them.
Server is authoritative; clients mirror constraints for UX.
"""

from .schemas import (
    PostSchema,
    FieldConstraints,
    get_validation_constraints,
)
from .errors import (
    APIError,
    ErrorCode,
    ErrorResponse,
    FieldError,
    NotFoundError,
    format_validation_errors,
)

__all__ = [
    "PostSchema",
    "FieldConstraints",
    "get_validation_constraints",
    "APIError",
    "ErrorCode",
    "ErrorResponse",
    "FieldError",
    "NotFoundError",
    "format_validation_errors",
]
