# This project was developed with assistance from AI tools.
"""Numeric and string normalization for wizard input.

Pure functions. Every numeric field coming from the wizard goes through
``parse_numeric`` (directly or via the validators below) before the engine
uses it; nothing else in the package re-implements parsing.
"""

import math
import re
from decimal import Decimal

from ..schemas import FieldError, FieldErrorCode

_FORMATTING_CHARS = re.compile(r"[$,\s]")
_NON_NUMERIC_CHARS = re.compile(r"[^\d.\-]")
_EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
_NUMBER_PREFIX = re.compile(r"-?\d*\.?\d+|-?\d+\.?")


def parse_numeric(value: float | int | Decimal | str | None) -> float | None:
    """Parse a raw form value into a float, or None when there is no usable number.

    Strips currency symbols, thousands separators and whitespace, then any
    other non-numeric character. Never raises.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
        return None if math.isnan(number) or math.isinf(number) else number

    cleaned = _NON_NUMERIC_CHARS.sub("", _FORMATTING_CHARS.sub("", str(value)))
    match = _NUMBER_PREFIX.match(cleaned)
    if not match:
        return None
    try:
        return float(match.group(0))
    except ValueError:
        return None


def parse_positive(value, field_name: str = "value") -> float | FieldError:
    """Parse a required, strictly positive number."""
    parsed = parse_numeric(value)
    if parsed is None:
        return FieldError(
            field=field_name,
            code=FieldErrorCode.REQUIRED,
            message=f"{field_name} is required",
        )
    if parsed <= 0:
        return FieldError(
            field=field_name,
            code=FieldErrorCode.MUST_BE_POSITIVE,
            message=f"{field_name} must be positive",
        )
    return parsed


def parse_non_negative(
    value,
    field_name: str = "value",
    *,
    required: bool = False,
) -> float | None | FieldError:
    """Parse a number that may be zero. Empty input means "not provided" unless required."""
    parsed = parse_numeric(value)
    if parsed is None:
        if required:
            return FieldError(
                field=field_name,
                code=FieldErrorCode.REQUIRED,
                message=f"{field_name} is required",
            )
        return None
    if parsed < 0:
        return FieldError(
            field=field_name,
            code=FieldErrorCode.CANNOT_BE_NEGATIVE,
            message=f"{field_name} cannot be negative",
        )
    return parsed


def parse_percentage(value, field_name: str = "value") -> float | None | FieldError:
    """Parse an optional percentage in [0, 100]."""
    parsed = parse_non_negative(value, field_name)
    if isinstance(parsed, float) and parsed > 100:
        return FieldError(
            field=field_name,
            code=FieldErrorCode.OUT_OF_RANGE,
            message=f"{field_name} must be between 0 and 100",
        )
    return parsed


def sanitize_string(value: str | None, max_length: int | None = None) -> str | None:
    """Trim a string; empty becomes None and overlong input is truncated."""
    if value is None:
        return None
    trimmed = str(value).strip()
    if not trimmed:
        return None
    if max_length is not None:
        trimmed = trimmed[:max_length].rstrip()
    return trimmed


def format_currency(amount: float | None, *, decimals: int = 0) -> str:
    """Format a dollar amount for display, e.g. ``$65,000``.

    Both locales use US-style separators since amounts are always USD.
    """
    if amount is None or math.isnan(amount) or math.isinf(amount):
        return "$0"
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.{decimals}f}"


def format_percentage(value: float | None, decimals: int = 1) -> str:
    if value is None or math.isnan(value) or math.isinf(value):
        return "0%"
    return f"{value:.{decimals}f}%"


def format_phone_number(phone: str | None) -> str:
    """Format US numbers as ``(512) 555-0123``; anything else is returned as-is."""
    if not phone:
        return ""
    digits = re.sub(r"\D", "", phone)
    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    if len(digits) == 11 and digits.startswith("1"):
        return f"+1 ({digits[1:4]}) {digits[4:7]}-{digits[7:]}"
    return phone


def validate_email(value: str | None, field_name: str = "email") -> str | FieldError:
    """Return the normalized (trimmed, lower-cased) email or a FieldError."""
    cleaned = sanitize_string(value)
    if cleaned is None:
        return FieldError(
            field=field_name, code=FieldErrorCode.REQUIRED, message="Email is required"
        )
    cleaned = cleaned.lower()
    if not _EMAIL_PATTERN.fullmatch(cleaned):
        return FieldError(
            field=field_name,
            code=FieldErrorCode.INVALID,
            message="Please enter a valid email address",
        )
    return cleaned


def validate_phone(value: str | None, field_name: str = "phone") -> str | FieldError:
    """Return the display-formatted phone number or a FieldError."""
    cleaned = sanitize_string(value)
    if cleaned is None:
        return FieldError(
            field=field_name, code=FieldErrorCode.REQUIRED, message="Phone number is required"
        )
    digits = re.sub(r"\D", "", cleaned)
    if len(digits) < 10:
        return FieldError(
            field=field_name,
            code=FieldErrorCode.INVALID,
            message="Phone number must be at least 10 digits",
        )
    if len(digits) > 11:
        return FieldError(
            field=field_name, code=FieldErrorCode.INVALID, message="Phone number is too long"
        )
    return format_phone_number(cleaned)
