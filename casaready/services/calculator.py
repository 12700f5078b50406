# This project was developed with assistance from AI tools.
"""Financial metrics calculation.

Pure math, no I/O. Shared by the public API route, the classifier and the
report assembler.

Affordability uses the front-end rule: 28% of gross monthly income may go to
housing, 80% of that to principal and interest. The P&I budget is turned into
a price with a fixed factor of 166 loan dollars per payment dollar, a linear
stand-in for a 6.5% / 30-year amortization (the exact factor is ~158).
``amortized_price_factor`` gives the exact value for callers that opt in.
"""

import re

from ..schemas.enums import CreditTier, DtiStatus, IncomeLevel, Locale
from ..schemas.metrics import CreditScoreRange, FinancialMetrics
from ..schemas.wizard import DEFAULT_PRICE_FACTOR, WizardAnswers
from .messages import MessageKey, render
from .normalizer import format_percentage

FRONT_END_RATIO = 0.28
BACK_END_RATIO = 0.36
PRINCIPAL_AND_INTEREST_SHARE = 0.8
RECOMMENDED_DOWN_PAYMENT_SHARE = 0.20
PRICE_FACTOR = DEFAULT_PRICE_FACTOR

HIGH_DTI_THRESHOLD = 43.0
STRONG_DTI_THRESHOLD = 36.0

# Band string -> tier. Wizard bands first, then labels older clients still send.
_CREDIT_TIERS: tuple[tuple[str, CreditTier], ...] = (
    ("800-850", CreditTier.EXCELLENT),
    ("800+", CreditTier.EXCELLENT),
    ("780-800+", CreditTier.EXCELLENT),
    ("740-799", CreditTier.EXCELLENT),
    ("720-779", CreditTier.GOOD),
    ("680-739", CreditTier.GOOD),
    ("670-739", CreditTier.GOOD),
    ("640-679", CreditTier.FAIR),
    ("620-679", CreditTier.FAIR),
    ("580-669", CreditTier.FAIR),
    ("600-639", CreditTier.POOR),
    ("580-619", CreditTier.POOR),
    ("300-579", CreditTier.POOR),
)
_CREDIT_TIER_LOOKUP = dict(_CREDIT_TIERS)

_BAND_RANGE = re.compile(r"^(\d{3})\s*-\s*(\d{3})\+?$")
_BAND_OPEN = re.compile(r"^(\d{3})\+$")
MAX_CREDIT_SCORE = 850


def credit_tier(band: str | None) -> CreditTier:
    """Map a credit band string to a tier. Unrecognized input is UNKNOWN, never an error."""
    if not band:
        return CreditTier.UNKNOWN
    return _CREDIT_TIER_LOOKUP.get(band.strip(), CreditTier.UNKNOWN)


def credit_score_range(band: str | None) -> CreditScoreRange | None:
    """Parse ``"680-739"`` into (680, 739); ``"800+"`` runs to 850."""
    if not band:
        return None
    band = band.strip()
    if match := _BAND_RANGE.match(band):
        low, high = int(match.group(1)), int(match.group(2))
        return CreditScoreRange(min=min(low, high), max=max(low, high))
    if match := _BAND_OPEN.match(band):
        return CreditScoreRange(min=int(match.group(1)), max=MAX_CREDIT_SCORE)
    return None


def income_level(annual_income: float) -> IncomeLevel:
    if annual_income >= 150_000:
        return IncomeLevel.HIGH
    if annual_income >= 70_000:
        return IncomeLevel.MEDIUM
    return IncomeLevel.LOW


def amortized_price_factor(interest_rate: float, loan_term_years: int) -> float:
    """Loan dollars supported by one dollar of monthly payment.

    Inverse of the loan constant P = L * r(1+r)^n / ((1+r)^n - 1).
    """
    monthly_rate = interest_rate / 100 / 12
    n_payments = loan_term_years * 12

    if monthly_rate > 0:
        compound = (1 + monthly_rate) ** n_payments
        payment_per_dollar = monthly_rate * compound / (compound - 1)
    else:
        payment_per_dollar = 1 / n_payments

    return 1 / payment_per_dollar


def configured_price_factor(cfg) -> float:
    """Price factor selected by ``AFFORDABILITY_METHOD`` on a Settings object."""
    if cfg.AFFORDABILITY_METHOD == "amortized":
        return amortized_price_factor(cfg.ASSUMED_INTEREST_RATE, cfg.ASSUMED_LOAN_TERM_YEARS)
    return cfg.PRICE_FACTOR


def debt_to_income(annual_income: float, monthly_debts: float) -> float | None:
    """DTI as a percentage, or None when there is no income to divide by."""
    monthly_income = annual_income / 12
    if monthly_income <= 0:
        return None
    return monthly_debts / monthly_income * 100


def compute_financial_metrics(
    annual_income: float,
    monthly_debts: float = 0,
    down_payment: float | None = None,
    credit_band: str | None = None,
    *,
    price_factor: float = PRICE_FACTOR,
) -> FinancialMetrics:
    """Derive monthly income, DTI and affordability from validated inputs."""
    monthly_income = annual_income / 12
    dti = debt_to_income(annual_income, monthly_debts)

    max_housing_payment = monthly_income * FRONT_END_RATIO
    available_for_pi = max_housing_payment * PRINCIPAL_AND_INTEREST_SHARE
    estimated_affordability = available_for_pi * price_factor

    return FinancialMetrics(
        monthly_income=monthly_income,
        debt_to_income_ratio=dti,
        dti_status=DtiStatus.DEFINED if dti is not None else DtiStatus.UNDEFINED,
        max_housing_payment=max_housing_payment,
        estimated_affordability=estimated_affordability,
        recommended_down_payment=estimated_affordability * RECOMMENDED_DOWN_PAYMENT_SHARE,
        down_payment=down_payment or 0,
        credit_tier=credit_tier(credit_band),
        credit_score_range=credit_score_range(credit_band),
    )


def metrics_for_answers(
    answers: WizardAnswers, *, price_factor: float = PRICE_FACTOR
) -> FinancialMetrics:
    return compute_financial_metrics(
        answers.annual_income,
        answers.monthly_debts,
        answers.down_payment_amount,
        answers.credit_band,
        price_factor=price_factor,
    )


def format_dti(metrics: FinancialMetrics, locale: Locale = Locale.EN) -> str:
    """DTI for display. The undefined sentinel never renders as inf or nan."""
    if not metrics.dti_defined or metrics.debt_to_income_ratio is None:
        return render(MessageKey.DTI_UNDEFINED, locale)
    return format_percentage(metrics.debt_to_income_ratio)
