"""
Django REST Framework Exception Handler

Gives API endpoints the same error envelope as the middleware.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional

from rest_framework.views import exception_handler
from rest_framework.exceptions import (
    APIException,
    PermissionDenied,
    NotFound,
)
from rest_framework.response import Response

from .errors import (
    ErrorCode,
    ErrorDetail,
    ErrorResponse,
    FieldError,
)

logger = logging.getLogger(__name__)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    request = context.get("request")
    request_id = getattr(request, "request_id", None) if request else None
    if not request_id:
        request_id = str(uuid.uuid4())

    response = exception_handler(exc, context)

    if response is not None:
        error_response = _convert_to_standard_format(exc, request_id)
        return Response(error_response.to_dict(), status=response.status_code)

    return response


def _convert_to_standard_format(exc: Exception, request_id: str) -> ErrorResponse:
    if isinstance(exc, PermissionDenied):
        code, message = ErrorCode.PERMISSION_DENIED, "You do not have permission to perform this action."
    elif isinstance(exc, NotFound):
        code, message = ErrorCode.RESOURCE_NOT_FOUND, "Resource not found."
    elif isinstance(exc, APIException):
        code = ErrorCode.INTERNAL_ERROR if exc.status_code >= 500 else ErrorCode.REQUEST_INVALID
        message = "An error occurred."
    else:
        code, message = ErrorCode.INTERNAL_ERROR, "An unexpected error occurred."

    if isinstance(exc, APIException) and isinstance(exc.detail, str) and exc.detail:
        message = str(exc.detail)

    return ErrorResponse(
        error=ErrorDetail(
            code=code.value,
            message=message,
            fields=_extract_field_errors(exc),
        ),
        request_id=request_id,
    )


def _extract_field_errors(exc: Exception) -> Optional[List[FieldError]]:
    detail = getattr(exc, "detail", None)
    if not isinstance(detail, dict):
        return None

    errors = []
    for field_name, field_errors in detail.items():
        if not isinstance(field_errors, list):
            field_errors = [field_errors]
        for error in field_errors:
            errors.append(FieldError(
                field=field_name,
                code=ErrorCode.FIELD_INVALID.value,
                message=str(error),
            ))
    return errors
