# This project was developed with assistance from AI tools.
"""Lead classification.

Turns finalized wizard answers into a ``LeadProfile``: one lead type from a
fixed priority order, employment stability, loan eligibility and advisory
tags. Pure and deterministic; every input maps to at least STANDARD_BUYER.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..schemas.enums import (
    CreditTier,
    EmploymentStability,
    EmploymentType,
    LeadCategory,
    LeadType,
    Locale,
)
from ..schemas.lead import LeadProfile
from ..schemas.wizard import WizardAnswers
from .calculator import (
    HIGH_DTI_THRESHOLD,
    STRONG_DTI_THRESHOLD,
    credit_tier,
    debt_to_income,
    income_level,
)
from .eligibility import resolve_loan_eligibility
from .messages import lead_type_label

logger = logging.getLogger(__name__)

HIGH_NET_WORTH_INCOME = 150_000
HIGH_NET_WORTH_DOWN_PCT = 20.0
STRONG_DOWN_PAYMENT_PCT = 20.0
EXCELLENT_STABILITY_INCOME = 80_000

# Advisory tags
RISK_HIGH_DTI = "High DTI"
RISK_CREDIT = "Credit needs improvement"
RISK_DTI_UNDEFINED = "DTI undefined (no income reported)"
STRENGTH_CREDIT = "Excellent credit"
STRENGTH_DTI = "Strong DTI"
STRENGTH_DOWN_PAYMENT = "Strong down payment"


@dataclass(frozen=True)
class BuyerFacts:
    """Answers plus the derived values every rule needs."""

    answers: WizardAnswers
    credit_tier: CreditTier
    down_payment_percent: float | None

    @property
    def employment_type(self) -> EmploymentType:
        return self.answers.employment_type


@dataclass(frozen=True)
class ClassificationRule:
    name: str
    category: LeadCategory
    applies: Callable[[BuyerFacts], bool]
    resolve: Callable[[BuyerFacts], LeadType]


def _by_intent(
    investor: LeadType, first_time: LeadType, otherwise: LeadType
) -> Callable[[BuyerFacts], LeadType]:
    """Subtype by buyer intent: investor first, then first-time, else upsizing."""

    def _resolve(facts: BuyerFacts) -> LeadType:
        if facts.answers.is_investor:
            return investor
        if facts.answers.is_first_time:
            return first_time
        return otherwise

    return _resolve


def _veteran_subtype(facts: BuyerFacts) -> LeadType:
    if facts.answers.is_first_time:
        return LeadType.MILITARY_VETERAN_FIRST_TIME
    return LeadType.MILITARY_VETERAN_UPSIZING


def _w2_subtype(facts: BuyerFacts) -> LeadType:
    if facts.answers.is_investor:
        return LeadType.W2_INVESTOR
    if facts.answers.is_first_time:
        if facts.credit_tier.needs_improvement:
            return LeadType.W2_FIRST_TIME_LOW_CREDIT
        return LeadType.W2_FIRST_TIME_GOOD_CREDIT
    return LeadType.W2_UPSIZING


def _is_high_net_worth(facts: BuyerFacts) -> bool:
    return (
        facts.answers.annual_income >= HIGH_NET_WORTH_INCOME
        and facts.down_payment_percent is not None
        and facts.down_payment_percent >= HIGH_NET_WORTH_DOWN_PCT
    )


# Evaluated top to bottom; the first rule that applies decides the lead type.
CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        name="itin",
        category=LeadCategory.ITIN,
        applies=lambda f: f.employment_type is EmploymentType.ITIN,
        resolve=_by_intent(
            LeadType.ITIN_INVESTOR, LeadType.ITIN_FIRST_TIME, LeadType.ITIN_UPSIZING
        ),
    ),
    ClassificationRule(
        name="military",
        category=LeadCategory.MILITARY,
        applies=lambda f: f.answers.is_veteran,
        resolve=_veteran_subtype,
    ),
    ClassificationRule(
        name="high_net_worth",
        category=LeadCategory.HIGH_NET_WORTH,
        applies=_is_high_net_worth,
        resolve=lambda f: LeadType.HIGH_NET_WORTH,
    ),
    ClassificationRule(
        name="retired",
        category=LeadCategory.RETIRED,
        applies=lambda f: f.employment_type is EmploymentType.RETIRED,
        resolve=lambda f: LeadType.RETIRED_BUYER,
    ),
    ClassificationRule(
        name="self_employed",
        category=LeadCategory.SELF_EMPLOYED,
        applies=lambda f: f.employment_type.is_self_employed,
        resolve=_by_intent(
            LeadType.SELF_EMPLOYED_INVESTOR,
            LeadType.SELF_EMPLOYED_FIRST_TIME,
            LeadType.SELF_EMPLOYED_UPSIZING,
        ),
    ),
    ClassificationRule(
        name="mixed",
        category=LeadCategory.MIXED,
        applies=lambda f: f.employment_type is EmploymentType.MIXED,
        resolve=lambda f: LeadType.MIXED_INCOME_BUYER,
    ),
    ClassificationRule(
        name="w2",
        category=LeadCategory.W2,
        applies=lambda f: f.employment_type is EmploymentType.W2,
        resolve=_w2_subtype,
    ),
)


def match_rule(facts: BuyerFacts) -> tuple[LeadType, LeadCategory]:
    """Apply ``CLASSIFICATION_RULES`` in order, falling back to STANDARD_BUYER."""
    for rule in CLASSIFICATION_RULES:
        if rule.applies(facts):
            return rule.resolve(facts), rule.category
    return LeadType.STANDARD_BUYER, LeadCategory.STANDARD


def employment_stability(
    employment_type: EmploymentType,
    annual_income: float,
    tier: CreditTier,
) -> EmploymentStability:
    if (
        employment_type is EmploymentType.W2
        and tier is CreditTier.EXCELLENT
        and annual_income >= EXCELLENT_STABILITY_INCOME
    ):
        return EmploymentStability.EXCELLENT
    if employment_type is EmploymentType.W2 and tier is CreditTier.GOOD:
        return EmploymentStability.GOOD
    if employment_type.is_self_employed:
        if tier is CreditTier.EXCELLENT:
            return EmploymentStability.GOOD
        return EmploymentStability.MODERATE
    if employment_type in (EmploymentType.ITIN, EmploymentType.MIXED):
        return EmploymentStability.REQUIRES_REVIEW
    return EmploymentStability.MODERATE


def _special_considerations(employment_type: EmploymentType) -> list[str]:
    if employment_type is EmploymentType.ITIN:
        return [
            "ITIN documentation required",
            "Higher down payment needed (10-20%)",
            "Limited to portfolio lenders",
        ]
    if employment_type.is_self_employed:
        return ["2-year tax return requirement", "Higher reserve requirements"]
    return []


def _advisory_tags(
    dti: float | None,
    tier: CreditTier,
    down_payment_percent: float | None,
) -> tuple[list[str], list[str]]:
    """Independent checks; a buyer can carry any combination of tags."""
    risk_factors: list[str] = []
    strengths: list[str] = []

    if dti is None:
        risk_factors.append(RISK_DTI_UNDEFINED)
    elif dti > HIGH_DTI_THRESHOLD:
        risk_factors.append(RISK_HIGH_DTI)

    if tier.needs_improvement:
        risk_factors.append(RISK_CREDIT)

    if tier is CreditTier.EXCELLENT:
        strengths.append(STRENGTH_CREDIT)

    if dti is not None and dti < STRONG_DTI_THRESHOLD:
        strengths.append(STRENGTH_DTI)

    if down_payment_percent is not None and down_payment_percent >= STRONG_DOWN_PAYMENT_PCT:
        strengths.append(STRENGTH_DOWN_PAYMENT)

    return risk_factors, strengths


def classify_lead(answers: WizardAnswers, locale: Locale = Locale.EN) -> LeadProfile:
    """Classify a buyer into one lead type with eligibility and advisory tags."""
    tier = credit_tier(answers.credit_band)
    down_payment_percent = answers.down_payment_percent
    dti = debt_to_income(answers.annual_income, answers.monthly_debts)

    facts = BuyerFacts(answers=answers, credit_tier=tier, down_payment_percent=down_payment_percent)
    lead_type, category = match_rule(facts)

    eligibility = resolve_loan_eligibility(
        answers.employment_type, answers.buyer_tags, tier, down_payment_percent
    )
    risk_factors, strengths = _advisory_tags(dti, tier, down_payment_percent)

    logger.debug("Classified lead as %s (%s)", lead_type.value, category.value)

    return LeadProfile(
        lead_type=lead_type,
        primary_category=category,
        description=describe_lead_type(lead_type, locale),
        is_first_time=answers.is_first_time,
        is_investor=answers.is_investor,
        is_upsizing=answers.is_upsizing,
        is_military=answers.is_veteran,
        employment_type=answers.employment_type,
        employment_stability=employment_stability(
            answers.employment_type, answers.annual_income, tier
        ),
        credit_tier=tier,
        credit_band=answers.credit_band,
        debt_to_income=round(dti, 1) if dti is not None else None,
        down_payment_percent=(
            round(down_payment_percent, 1) if down_payment_percent is not None else None
        ),
        income_level=income_level(answers.annual_income),
        target_city=answers.city,
        target_price=answers.target_price,
        timeline=answers.timeline,
        loan_eligibility=eligibility,
        locale=locale,
        special_considerations=_special_considerations(answers.employment_type),
        risk_factors=risk_factors,
        strengths=strengths,
    )


def describe_lead_type(lead_type: LeadType, locale: Locale = Locale.EN) -> str:
    """Human-readable lead type label in the requested locale."""
    return lead_type_label(lead_type, locale)
