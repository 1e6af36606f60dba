"""
Standardized Error Handling

Field-level validation failures are data: a ``FieldError`` per failed rule,
attached to the model and rendered inline in the form markup. They never
cross a view boundary as exceptions.

Request-level failures are ``APIError`` subclasses, converted into
responses by ``ErrorHandlingMiddleware``:
API/XHR: { success: false, error: { code, message, fields? }, request_id }
HTML: dedicated error page

HTTP Status Code Standards:
- 200: Success (including a validation round trip that found errors)
- 400: Bad Request
- 404: Not Found
- 422: Unprocessable Entity (form submit that failed validation)
- 500: Internal Server Error
"""

from __future__ import annotations

import uuid
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import JsonResponse

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Field rules
    PRESENCE = "presence"
    LENGTH = "length"
    FIELD_INVALID = "invalid"

    PERMISSION_DENIED = "PERMISSION_DENIED"

    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    REQUEST_INVALID = "REQUEST_INVALID"

    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class FieldError:
    field: str
    code: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "field": self.field,
            "code": self.code,
            "message": self.message,
        }


@dataclass
class ErrorDetail:
    code: str
    message: str
    fields: Optional[List[FieldError]] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.fields:
            result["fields"] = [f.to_dict() for f in self.fields]
        return result


@dataclass
class ErrorResponse:
    success: bool = False
    error: Optional[ErrorDetail] = None
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "error": self.error.to_dict() if self.error else None,
            "request_id": self.request_id,
        }

    def to_json_response(self, status: int = 400) -> JsonResponse:
        return JsonResponse(self.to_dict(), status=status)


class APIError(Exception):
    def __init__(
        self,
        code: Union[ErrorCode, str],
        message: str,
        status: int = 400,
        fields: Optional[List[FieldError]] = None,
        request_id: Optional[str] = None,
    ):
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.message = message
        self.status = status
        self.fields = fields
        self.request_id = request_id or str(uuid.uuid4())
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            success=False,
            error=ErrorDetail(
                code=self.code,
                message=self.message,
                fields=self.fields,
            ),
            request_id=self.request_id,
        )

    def to_json_response(self) -> JsonResponse:
        return self.to_response().to_json_response(self.status)


class NotFoundError(APIError):
    def __init__(
        self,
        message: str = "Resource not found",
        request_id: Optional[str] = None,
    ):
        super().__init__(
            code=ErrorCode.RESOURCE_NOT_FOUND,
            message=message,
            status=404,
            request_id=request_id,
        )


_DJANGO_CODE_MAP = {
    "presence": ErrorCode.PRESENCE.value,
    "required": ErrorCode.PRESENCE.value,
    "blank": ErrorCode.PRESENCE.value,
    "null": ErrorCode.PRESENCE.value,
    "length": ErrorCode.LENGTH.value,
    "min_length": ErrorCode.LENGTH.value,
    "max_length": ErrorCode.LENGTH.value,
}


def format_validation_errors(exc: DjangoValidationError) -> Dict[str, List[FieldError]]:
    """Group a Django ``ValidationError`` into ``FieldError`` lists keyed by field."""
    if not hasattr(exc, "error_dict"):
        return {
            "__all__": [
                FieldError(field="__all__", code=ErrorCode.FIELD_INVALID.value, message=message)
                for message in exc.messages
            ]
        }

    grouped: Dict[str, List[FieldError]] = {}
    for field_name, error_list in exc.error_dict.items():
        for error in error_list:
            code = _DJANGO_CODE_MAP.get(error.code or "", ErrorCode.FIELD_INVALID.value)
            for message in error.messages:
                grouped.setdefault(field_name, []).append(
                    FieldError(field=field_name, code=code, message=message)
                )
    return grouped


def to_django_validation_error(errors: List[FieldError]) -> DjangoValidationError:
    by_field: Dict[str, List[DjangoValidationError]] = {}
    for error in errors:
        by_field.setdefault(error.field, []).append(
            DjangoValidationError(error.message, code=error.code)
        )
    return DjangoValidationError(by_field)


def create_success_response(
    data: Any = None,
    message: Optional[str] = None,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    response = {
        "success": True,
        "request_id": request_id or str(uuid.uuid4()),
    }
    if data is not None:
        response["data"] = data
    if message:
        response["message"] = message
    return response
