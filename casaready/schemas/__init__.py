# This project was developed with assistance from AI tools.
"""Shared schema components."""

import enum

from pydantic import BaseModel


class FieldErrorCode(str, enum.Enum):
    REQUIRED = "required"
    MUST_BE_POSITIVE = "must_be_positive"
    CANNOT_BE_NEGATIVE = "cannot_be_negative"
    OUT_OF_RANGE = "out_of_range"
    INVALID = "invalid"


class FieldError(BaseModel):
    """Typed validation failure for a single form field."""

    field: str
    code: FieldErrorCode
    message: str
