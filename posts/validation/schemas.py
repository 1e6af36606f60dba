"""
Domain Validation Schemas

Centralized validation rules per domain object.
Server is authoritative; the constraints API lets clients mirror them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .errors import ErrorCode, FieldError, to_django_validation_error


@dataclass(frozen=True)
class FieldConstraints:
    required: bool = True
    min_length: Optional[int] = None
    max_length: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "required": self.required,
            "min_length": self.min_length,
            "max_length": self.max_length,
        }


class BaseSchema:
    FIELDS: Dict[str, FieldConstraints] = {}

    @classmethod
    def validate(
        cls,
        data: Dict[str, Any],
        check_max_length: bool = True,
    ) -> Tuple[bool, List[FieldError]]:
        errors = []

        for field_name, constraints in cls.FIELDS.items():
            value = data.get(field_name)
            errors.extend(cls._validate_field(field_name, value, constraints, check_max_length))

        return len(errors) == 0, errors

    @classmethod
    def _validate_field(
        cls,
        field_name: str,
        value: Any,
        constraints: FieldConstraints,
        check_max_length: bool = True,
    ) -> List[FieldError]:
        errors = []
        text = "" if value is None else str(value)

        # Whitespace-only counts as missing.
        if constraints.required and not text.strip():
            errors.append(FieldError(
                field=field_name,
                code=ErrorCode.PRESENCE.value,
                message=f"{cls._humanize(field_name)} can't be blank",
            ))
            return errors

        # Length rules apply to empty values too when the field is optional.
        if constraints.min_length is not None and len(text) < constraints.min_length:
            errors.append(FieldError(
                field=field_name,
                code=ErrorCode.LENGTH.value,
                message=(
                    f"{cls._humanize(field_name)} is too short "
                    f"(minimum is {constraints.min_length} characters)"
                ),
            ))

        if check_max_length and constraints.max_length is not None and len(text) > constraints.max_length:
            errors.append(FieldError(
                field=field_name,
                code=ErrorCode.LENGTH.value,
                message=(
                    f"{cls._humanize(field_name)} is too long "
                    f"(maximum is {constraints.max_length} characters)"
                ),
            ))

        return errors

    @staticmethod
    def _humanize(field_name: str) -> str:
        return field_name.replace("_", " ").capitalize()

    @classmethod
    def raise_if_invalid(cls, data: Dict[str, Any], check_max_length: bool = True) -> None:
        """Raise a Django ``ValidationError`` keyed by field, for ``Model.clean``."""
        is_valid, errors = cls.validate(data, check_max_length)
        if not is_valid:
            raise to_django_validation_error(errors)

    @classmethod
    def constraints(cls) -> Dict[str, Dict[str, Any]]:
        return {name: c.to_dict() for name, c in cls.FIELDS.items()}


class PostSchema(BaseSchema):
    TITLE_MAX_LENGTH = 255
    BODY_MIN_LENGTH = 10

    FIELDS = {
        "title": FieldConstraints(required=True, max_length=TITLE_MAX_LENGTH),
        "body": FieldConstraints(required=False, min_length=BODY_MIN_LENGTH),
    }


VALIDATION_CONSTRAINTS = {
    "post": PostSchema.constraints(),
}


def get_validation_constraints() -> Dict[str, Any]:
    return VALIDATION_CONSTRAINTS
