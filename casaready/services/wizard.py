# This project was developed with assistance from AI tools.
"""Wizard finalization.

Converts the step-by-step ``WizardDraft`` into immutable ``WizardAnswers``.
All numeric input is parsed by the normalizer here, once; the engine never
sees raw strings.
"""

import logging

from pydantic import ValidationError

from ..schemas import FieldError, FieldErrorCode
from ..schemas.enums import BuyerTag, CreditBand, EmploymentType, LocationPriority, Timeline
from ..schemas.wizard import (
    MAX_ANNUAL_INCOME,
    MAX_MONTHLY_DEBTS,
    MAX_PRICE,
    Budget,
    DownPayment,
    WizardAnswers,
    WizardDraft,
)
from .normalizer import (
    parse_non_negative,
    parse_numeric,
    parse_percentage,
    parse_positive,
    sanitize_string,
)

logger = logging.getLogger(__name__)

MAX_CITY_LENGTH = 100
MAX_ZIP_LENGTH = 10
MIN_HOUSEHOLD = 1
MAX_HOUSEHOLD = 10


class WizardIncompleteError(ValueError):
    """Raised when a draft cannot be finalized. Carries one error per bad field."""

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        fields = ", ".join(error.field for error in errors)
        super().__init__(f"Wizard answers are incomplete or invalid: {fields}")


def _invalid(field: str, message: str) -> FieldError:
    return FieldError(field=field, code=FieldErrorCode.INVALID, message=message)


def _parse_enum(enum_cls, value, field, errors):
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return enum_cls(value.strip() if isinstance(value, str) else value)
    except ValueError:
        errors.append(_invalid(field, f"{value!r} is not a valid {field}"))
        return None


def _parse_enum_set(enum_cls, values, field, errors) -> frozenset:
    parsed = set()
    for value in values or []:
        item = _parse_enum(enum_cls, value, field, errors)
        if item is not None:
            parsed.add(item)
    return frozenset(parsed)


def _collect(result, errors: list[FieldError]):
    """Return the parsed value, or record the FieldError and return None."""
    if isinstance(result, FieldError):
        errors.append(result)
        return None
    return result


def _at_most(value: float | None, limit: float, field: str, errors: list[FieldError]):
    if value is None or value <= limit:
        return value
    errors.append(
        FieldError(
            field=field,
            code=FieldErrorCode.OUT_OF_RANGE,
            message=f"{field} must be at most {limit:,.0f}",
        )
    )
    return None


def _budget(draft: WizardDraft, errors: list[FieldError]) -> Budget | None:
    target_price = parse_numeric(draft.target_price)
    monthly_budget = parse_numeric(draft.monthly_budget)
    if target_price is None and monthly_budget is None:
        return None
    if target_price is not None and monthly_budget is not None:
        errors.append(_invalid("budget", "Provide either a target price or a monthly budget"))
        return None
    if target_price is not None:
        field, raw = "target_price", target_price
    else:
        field, raw = "monthly_budget", monthly_budget
    amount = _at_most(_collect(parse_positive(raw, field), errors), MAX_PRICE, field, errors)
    if amount is None:
        return None
    if field == "target_price":
        return Budget(target_price=amount)
    return Budget(monthly_budget=amount)


def _down_payment(draft: WizardDraft, errors: list[FieldError]) -> DownPayment | None:
    amount = _at_most(
        _collect(parse_non_negative(draft.down_payment_amount, "down_payment_amount"), errors),
        MAX_PRICE,
        "down_payment_amount",
        errors,
    )
    percent = _collect(parse_percentage(draft.down_payment_percent, "down_payment_percent"), errors)
    if amount is None and percent is None:
        return None
    if amount is not None and percent is not None:
        errors.append(
            _invalid("down_payment", "Provide either a down payment amount or a percentage")
        )
        return None
    if amount is not None:
        return DownPayment(amount=amount)
    return DownPayment(percent=percent)


def _household_size(draft: WizardDraft, errors: list[FieldError]) -> int:
    size = parse_numeric(draft.household_size)
    if size is None:
        return MIN_HOUSEHOLD
    if not MIN_HOUSEHOLD <= size <= MAX_HOUSEHOLD or size != int(size):
        errors.append(
            FieldError(
                field="household_size",
                code=FieldErrorCode.OUT_OF_RANGE,
                message=f"household_size must be a whole number from {MIN_HOUSEHOLD} "
                f"to {MAX_HOUSEHOLD}",
            )
        )
        return MIN_HOUSEHOLD
    return int(size)


def finalize_answers(draft: WizardDraft) -> WizardAnswers:
    """Validate a draft and freeze it into ``WizardAnswers``.

    Raises:
        WizardIncompleteError: with every field-level problem found, not just
            the first one.
    """
    errors: list[FieldError] = []

    annual_income = _at_most(
        _collect(parse_non_negative(draft.annual_income, "annual_income", required=True), errors),
        MAX_ANNUAL_INCOME,
        "annual_income",
        errors,
    )
    monthly_debts = _at_most(
        _collect(parse_non_negative(draft.monthly_debts, "monthly_debts"), errors),
        MAX_MONTHLY_DEBTS,
        "monthly_debts",
        errors,
    )

    timeline = _parse_enum(Timeline, draft.timeline, "timeline", errors)
    employment_type = _parse_enum(EmploymentType, draft.employment_type, "employment_type", errors)
    buyer_tags = _parse_enum_set(BuyerTag, draft.buyer_type, "buyer_type", errors)
    priorities = _parse_enum_set(
        LocationPriority, draft.location_priorities, "location_priorities", errors
    )

    budget = _budget(draft, errors)
    down_payment = _down_payment(draft, errors)
    household_size = _household_size(draft, errors)

    if errors:
        logger.info("Wizard draft rejected: %s", [e.field for e in errors])
        raise WizardIncompleteError(errors)

    try:
        return WizardAnswers(
            city=sanitize_string(draft.city, MAX_CITY_LENGTH),
            zip_code=sanitize_string(draft.zip_code, MAX_ZIP_LENGTH),
            location_priorities=priorities,
            timeline=timeline,
            budget=budget,
            annual_income=annual_income,
            monthly_debts=monthly_debts or 0.0,
            credit_band=sanitize_string(draft.credit_score) or CreditBand.UNKNOWN.value,
            down_payment=down_payment,
            employment_type=employment_type or EmploymentType.W2,
            buyer_tags=buyer_tags,
            household_size=household_size,
        )
    except ValidationError as exc:
        raise WizardIncompleteError(
            [
                _invalid(".".join(str(part) for part in err["loc"]) or "answers", err["msg"])
                for err in exc.errors()
            ]
        ) from exc
