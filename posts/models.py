from __future__ import annotations

import logging
from typing import Any, Dict, List

from django.db import models

from .validation.errors import FieldError
from .validation.schemas import PostSchema

logger = logging.getLogger(__name__)


class Post(models.Model):
    # Presence and length rules live in PostSchema, so the columns are blank=True
    # to keep Django's own blank check from pre-empting them.
    title = models.CharField(max_length=PostSchema.TITLE_MAX_LENGTH, blank=True)
    body = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    EDITABLE_FIELDS = ("title", "body")

    class Meta:
        ordering = ["-created_at", "-id"]

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.errors: Dict[str, List[FieldError]] = {}

    def __str__(self) -> str:
        return self.title or f"Post #{self.pk}"

    def field_values(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in self.EDITABLE_FIELDS}

    def assign_attributes(self, params: Dict[str, str]) -> None:
        """Merge submitted values; attributes missing from ``params`` are kept."""
        for name, value in params.items():
            if name in self.EDITABLE_FIELDS:
                setattr(self, name, value)

    def validate(self) -> bool:
        """Run the validation rules and record the failures on ``self.errors``."""
        _, field_errors = PostSchema.validate(self.field_values())
        self.errors = {}
        for error in field_errors:
            self.errors.setdefault(error.field, []).append(error)
        return not self.errors

    @property
    def error_messages(self) -> List[str]:
        return [error.message for errors in self.errors.values() for error in errors]

    def clean(self) -> None:
        # clean_fields already enforces the column max_length.
        PostSchema.raise_if_invalid(self.field_values(), check_max_length=False)
