# This project was developed with assistance from AI tools.
"""Report assembly.

Builds the rule-based report from finalized answers: affordability figures,
program fit, tips, a numbered action plan and a markdown narrative in the
buyer's language. ``generate_report`` optionally layers an AI draft on top
and falls back to the rule-based report on any AI failure.
"""

import logging
from dataclasses import dataclass

from ..inference.report_writer import AIReportError, AIReportWriter
from ..schemas.census import CensusAreaInsights
from ..schemas.enums import BuyerTag, CreditBand, CreditTier, EmploymentType, Locale, Timeline
from ..schemas.lead import LeadProfile, LoanEligibility
from ..schemas.metrics import FinancialMetrics
from ..schemas.report import AIReportDraft, ReportData
from ..schemas.wizard import ContactInfo, WizardAnswers
from .calculator import (
    BACK_END_RATIO,
    FRONT_END_RATIO,
    PRICE_FACTOR,
    PRINCIPAL_AND_INTEREST_SHARE,
    format_dti,
    metrics_for_answers,
)
from .classifier import classify_lead
from .messages import MessageKey, render
from .normalizer import format_currency

logger = logging.getLogger(__name__)

MIN_MONTHLY_PAYMENT = 1000.0
MAX_PRICE_STRETCH = 1.2
MAX_AREA_INCOME_RATIO = 1.5
LOW_DOWN_PAYMENT_PCT = 10.0
MIN_DOWN_PAYMENT_PCT = 5.0
PMI_THRESHOLD_PCT = 20.0
HIGH_INCOME = 100_000

_BASE_TIPS = (
    MessageKey.TIP_PREAPPROVAL,
    MessageKey.TIP_COMPARE_RATES,
    MessageKey.TIP_CLOSING_COSTS,
    MessageKey.TIP_INSPECTION,
    MessageKey.TIP_EMERGENCY_FUND,
)

_BASE_ACTIONS = (
    MessageKey.ACTION_REVIEW_CREDIT,
    MessageKey.ACTION_SAVE_DOWN_PAYMENT,
    MessageKey.ACTION_PREAPPROVAL,
    MessageKey.ACTION_FIND_AGENT,
    MessageKey.ACTION_START_SEARCH,
)


@dataclass(frozen=True)
class Affordability:
    """Rounded dollar figures shown on the report."""

    estimated_price: int
    max_affordable: int
    monthly_payment: int


@dataclass(frozen=True)
class Narrative:
    tips: list[str]
    action_plan: list[str]
    report_markdown: str


# -- Figures --


def estimate_affordability(
    answers: WizardAnswers,
    census: CensusAreaInsights | None = None,
    *,
    price_factor: float = PRICE_FACTOR,
) -> Affordability:
    """Price range from the 28/36 rules, nudged toward the area median when known.

    The estimate never exceeds 120% of what income alone supports. A buyer
    with no income gets a zero payment rather than the 1,000 floor.
    """
    monthly_income = answers.annual_income / 12
    max_housing = monthly_income * FRONT_END_RATIO
    max_total_debt = monthly_income * BACK_END_RATIO
    available = min(max_housing, max_total_debt - answers.monthly_debts)

    if monthly_income > 0:
        monthly_payment = max(available * PRINCIPAL_AND_INTEREST_SHARE, MIN_MONTHLY_PAYMENT)
    else:
        monthly_payment = 0.0
    price = monthly_payment * price_factor
    ceiling = price * MAX_PRICE_STRETCH

    target = answers.target_price or price
    demographics = census.demographics if census else None
    if (
        answers.target_price is None
        and demographics is not None
        and demographics.median_home_value > 0
        and demographics.median_household_income > 0
    ):
        income_ratio = answers.annual_income / demographics.median_household_income
        adjusted = demographics.median_home_value * min(income_ratio, MAX_AREA_INCOME_RATIO)
        target = min(adjusted, ceiling)

    return Affordability(
        estimated_price=round(min(target, ceiling)),
        max_affordable=round(price),
        monthly_payment=round(monthly_payment),
    )


def determine_program_fit(answers: WizardAnswers) -> list[str]:
    """Program names to highlight for the buyer, in display order."""
    programs: list[str] = []
    if answers.is_first_time:
        programs += ["FHA Loan", "First-Time Buyer Programs", "Down Payment Assistance"]
    if answers.is_veteran:
        programs += ["VA Loan", "Military Housing Assistance"]
    percent = answers.down_payment_percent
    if percent is not None and 0 < percent < LOW_DOWN_PAYMENT_PCT:
        programs += ["Low Down Payment Options", "PMI Programs"]
    if answers.annual_income > HIGH_INCOME:
        programs += ["Conventional Loan", "Jumbo Loan Options"]
    if answers.employment_type.is_self_employed:
        programs += ["Bank Statement Loans", "Non-QM Programs"]
    return programs or ["Conventional Loan", "FHA Loan", "Down Payment Assistance"]


# -- Narrative --


def build_tips(answers: WizardAnswers, tier: CreditTier, locale: Locale = Locale.EN) -> list[str]:
    keys = list(_BASE_TIPS)
    if answers.credit_band == CreditBand.VERY_POOR.value or tier is CreditTier.POOR:
        keys.append(MessageKey.TIP_IMPROVE_CREDIT)
    percent = answers.down_payment_percent
    if percent is not None and 0 < percent < MIN_DOWN_PAYMENT_PCT:
        keys.append(MessageKey.TIP_AVOID_PMI)
    if answers.employment_type.is_self_employed:
        keys.append(MessageKey.TIP_SELF_EMPLOYED_DOCS)
    if answers.employment_type is EmploymentType.ITIN:
        keys.append(MessageKey.TIP_ITIN_DOCS)
    if BuyerTag.VETERAN in answers.buyer_tags:
        keys.append(MessageKey.TIP_VA_BENEFIT)
    return [render(key, locale) for key in keys]


def build_action_plan(answers: WizardAnswers, locale: Locale = Locale.EN) -> list[str]:
    """Numbered steps. Urgent buyers act first; long-horizon buyers fix their profile first."""
    keys = list(_BASE_ACTIONS)
    if answers.timeline is Timeline.ZERO_TO_THREE:
        keys.insert(0, MessageKey.ACTION_ACT_QUICKLY)
    elif answers.timeline is Timeline.TWELVE_PLUS:
        keys.insert(1, MessageKey.ACTION_IMPROVE_PROFILE)
    return [f"{number}. {render(key, locale)}" for number, key in enumerate(keys, start=1)]


def _format_percent(value: float) -> str:
    return f"{round(value, 1):g}"


def _financial_section(
    figures: Affordability, metrics: FinancialMetrics, locale: Locale
) -> list[str]:
    return [
        render(MessageKey.SECTION_FINANCIAL, locale),
        render(MessageKey.LINE_PRICE_RANGE, locale, amount=format_currency(figures.estimated_price)),
        render(
            MessageKey.LINE_MAX_AFFORDABLE, locale, amount=format_currency(figures.max_affordable)
        ),
        render(
            MessageKey.LINE_MONTHLY_PAYMENT, locale, amount=format_currency(figures.monthly_payment)
        ),
        render(MessageKey.LINE_DTI, locale, dti=format_dti(metrics, locale)),
    ]


def _profile_section(answers: WizardAnswers, profile: LeadProfile, locale: Locale) -> list[str]:
    lines = [
        render(MessageKey.SECTION_PROFILE, locale),
        render(MessageKey.LINE_BUYER_TYPE, locale, lead_type=profile.description),
    ]
    if answers.is_first_time:
        lines.append(render(MessageKey.LINE_FIRST_TIME_ADVANTAGES, locale))
    if answers.credit_band != CreditBand.UNKNOWN.value:
        lines.append(render(MessageKey.LINE_CREDIT_PROFILE, locale, band=answers.credit_band))
    return lines


def _programs_section(eligibility: LoanEligibility, locale: Locale) -> list[str]:
    lines = [
        render(MessageKey.SECTION_PROGRAMS, locale),
        render(MessageKey.LINE_RECOMMENDED_PROGRAM, locale, program=eligibility.recommended),
        render(
            MessageKey.LINE_ELIGIBLE_PROGRAMS, locale, programs=", ".join(eligibility.eligible)
        ),
    ]
    if eligibility.requires_special_documentation:
        lines.append(render(MessageKey.LINE_SPECIAL_DOCUMENTATION, locale))
    return lines


def _location_section(
    answers: WizardAnswers, census: CensusAreaInsights | None, locale: Locale
) -> list[str]:
    if not answers.city and census is None:
        return []
    lines = [render(MessageKey.SECTION_LOCATION, locale)]
    if answers.city:
        lines.append(render(MessageKey.LINE_TARGET_AREA, locale, city=answers.city))
    demographics = census.demographics if census else None
    if demographics is not None:
        if demographics.median_home_value:
            lines.append(
                render(
                    MessageKey.LINE_AREA_MEDIAN_HOME,
                    locale,
                    amount=format_currency(demographics.median_home_value),
                )
            )
        if demographics.median_household_income:
            lines.append(
                render(
                    MessageKey.LINE_AREA_MEDIAN_INCOME,
                    locale,
                    amount=format_currency(demographics.median_household_income),
                )
            )
    return lines


def _timeline_section(answers: WizardAnswers, locale: Locale) -> list[str]:
    if answers.timeline is None:
        return []
    lines = [
        render(MessageKey.SECTION_TIMELINE, locale),
        render(
            MessageKey.LINE_TARGET_TIMELINE,
            locale,
            timeline=render(MessageKey.TIMELINE_MONTHS, locale, value=answers.timeline.value),
        ),
    ]
    if answers.timeline in (Timeline.ZERO_TO_THREE, Timeline.THREE_TO_SIX):
        lines.append(render(MessageKey.LINE_TIMELINE_URGENT, locale))
    elif answers.timeline.is_long_term:
        lines.append(render(MessageKey.LINE_TIMELINE_LONG, locale))
    return lines


def _recommendations_section(answers: WizardAnswers, locale: Locale) -> list[str]:
    lines = [render(MessageKey.SECTION_RECOMMENDATIONS, locale)]
    percent = answers.down_payment_percent
    if percent is not None and 0 < percent < PMI_THRESHOLD_PCT:
        lines.append(
            render(MessageKey.LINE_DOWN_PAYMENT_PMI, locale, percent=_format_percent(percent))
        )
    if answers.employment_type is EmploymentType.W2:
        lines.append(render(MessageKey.LINE_W2_ADVANTAGE, locale))
    lines.append(render(MessageKey.LINE_NEXT_STEP, locale))
    return lines


def assemble_narrative(
    answers: WizardAnswers,
    metrics: FinancialMetrics,
    eligibility: LoanEligibility,
    profile: LeadProfile,
    locale: Locale = Locale.EN,
    census: CensusAreaInsights | None = None,
    *,
    buyer_name: str,
    figures: Affordability | None = None,
) -> Narrative:
    """Tips, action plan and markdown report in one locale. Never raises."""
    if figures is None:
        figures = Affordability(
            estimated_price=round(metrics.estimated_affordability),
            max_affordable=round(metrics.estimated_affordability),
            monthly_payment=round(metrics.max_housing_payment * PRINCIPAL_AND_INTEREST_SHARE),
        )

    sections = [
        [render(MessageKey.REPORT_TITLE, locale, name=buyer_name)],
        _financial_section(figures, metrics, locale),
        _profile_section(answers, profile, locale),
        _programs_section(eligibility, locale),
        _location_section(answers, census, locale),
        _timeline_section(answers, locale),
        _recommendations_section(answers, locale),
        [render(MessageKey.SECTION_MARKET, locale), render(MessageKey.LINE_MARKET_CONTEXT, locale)],
    ]
    markdown = "\n\n".join("\n".join(lines) for lines in sections if lines)

    return Narrative(
        tips=build_tips(answers, profile.credit_tier, locale),
        action_plan=build_action_plan(answers, locale),
        report_markdown=markdown,
    )


# -- Notes --


def build_privacy_safe_note(
    answers: WizardAnswers, census: CensusAreaInsights | None = None
) -> str:
    """Semicolon-joined buyer summary with no contact details."""
    parts: list[str] = []

    if answers.city or answers.zip_code:
        parts.append(f"Location: {answers.city or ''} {answers.zip_code or ''}".strip())
    if answers.location_priorities:
        priorities = ", ".join(sorted(p.value for p in answers.location_priorities))
        parts.append(f"Location priorities: {priorities}")
    if answers.timeline:
        parts.append(f"Timeline: {answers.timeline.label}")

    if answers.target_price is not None:
        parts.append(f"Target price: {format_currency(answers.target_price)}")
    elif answers.monthly_budget is not None:
        parts.append(f"Monthly budget: {format_currency(answers.monthly_budget)}")

    if answers.annual_income:
        parts.append(f"Annual income: {format_currency(answers.annual_income)}")
    if answers.monthly_debts:
        parts.append(f"Monthly debts: {format_currency(answers.monthly_debts)}")
    if answers.credit_band != CreditBand.UNKNOWN.value:
        parts.append(f"Credit score range: {answers.credit_band}")

    if answers.down_payment is not None:
        if answers.down_payment.amount is not None:
            parts.append(f"Down payment: {format_currency(answers.down_payment.amount)}")
        else:
            parts.append(f"Down payment: {_format_percent(answers.down_payment.percent)}%")

    parts.append(f"Employment: {answers.employment_type.value}")
    if answers.buyer_tags:
        parts.append(f"Buyer type: {', '.join(sorted(t.value for t in answers.buyer_tags))}")
    parts.append(f"Household size: {answers.household_size}")

    demographics = census.demographics if census else None
    if demographics is not None:
        parts.append(
            f"Area demographics: Population {demographics.population:,}, "
            f"Median income {format_currency(demographics.median_household_income)}, "
            f"Median home value {format_currency(demographics.median_home_value)}, "
            f"Unemployment {demographics.unemployment_rate}%"
        )
        if census.economic_indicators is not None:
            indicators = census.economic_indicators
            parts.append(
                f"Market trend: {indicators.market_trend.value}, "
                f"Cost of living index: {indicators.cost_of_living}"
            )
        if census.recommendations:
            parts.append(f"Area insights: {', '.join(census.recommendations[:2])}")

    return "; ".join(parts)


# -- Reports --


def _rule_based_report(
    answers: WizardAnswers,
    contact: ContactInfo,
    locale: Locale,
    census: CensusAreaInsights | None,
    price_factor: float,
) -> tuple[ReportData, LeadProfile]:
    profile = classify_lead(answers, locale)
    metrics = metrics_for_answers(answers, price_factor=price_factor)
    figures = estimate_affordability(answers, census, price_factor=price_factor)
    narrative = assemble_narrative(
        answers,
        metrics,
        profile.loan_eligibility,
        profile,
        locale,
        census,
        buyer_name=contact.full_name,
        figures=figures,
    )
    report = ReportData(
        estimated_price=figures.estimated_price,
        max_affordable=figures.max_affordable,
        monthly_payment=figures.monthly_payment,
        program_fit=determine_program_fit(answers),
        action_plan=narrative.action_plan,
        tips=narrative.tips,
        notes=build_privacy_safe_note(answers, census),
        primary_lead_type=profile.lead_type.value,
        report_content=narrative.report_markdown,
        ai_generated=False,
    )
    return report, profile


def build_fallback_report(
    answers: WizardAnswers,
    contact: ContactInfo,
    locale: Locale = Locale.EN,
    census: CensusAreaInsights | None = None,
    *,
    price_factor: float = PRICE_FACTOR,
) -> ReportData:
    """Rule-based report. Deterministic and never raises."""
    report, _ = _rule_based_report(answers, contact, locale, census, price_factor)
    return report


def merge_ai_draft(fallback: ReportData, draft: AIReportDraft) -> ReportData:
    """Layer an AI draft over the rule-based report. Empty AI fields keep the fallback."""
    update: dict = {"report_content": draft.report_markdown, "ai_generated": True}
    if draft.estimated_price is not None:
        update["estimated_price"] = round(draft.estimated_price)
    if draft.monthly_payment is not None:
        update["monthly_payment"] = round(draft.monthly_payment)
    if draft.program_fit:
        update["program_fit"] = draft.program_fit
    if draft.action_plan:
        update["action_plan"] = draft.action_plan
    if draft.tips:
        update["tips"] = draft.tips
    return fallback.model_copy(update=update)


async def generate_report(
    answers: WizardAnswers,
    contact: ContactInfo,
    locale: Locale = Locale.EN,
    census: CensusAreaInsights | None = None,
    *,
    writer: AIReportWriter | None = None,
    price_factor: float = PRICE_FACTOR,
) -> ReportData:
    """Build the report, asking ``writer`` for an AI draft when one is given."""
    fallback, profile = _rule_based_report(answers, contact, locale, census, price_factor)
    if writer is None:
        return fallback

    try:
        draft = await writer.write(answers, profile, fallback, locale)
    except AIReportError:
        logger.warning("AI report generation failed, using rule-based report", exc_info=True)
        return fallback

    return merge_ai_draft(fallback, draft)
