# This project was developed with assistance from AI tools.
"""Tests for the financial metrics calculator."""

import pytest

from casaready.core.config import Settings
from casaready.schemas.enums import CreditTier, DtiStatus, IncomeLevel, Locale
from casaready.schemas.wizard import DownPayment
from casaready.services.calculator import (
    amortized_price_factor,
    compute_financial_metrics,
    configured_price_factor,
    credit_score_range,
    credit_tier,
    debt_to_income,
    format_dti,
    income_level,
    metrics_for_answers,
)

from .factories import make_answers

# -- Metrics --


def test_metrics_happy_path():
    metrics = compute_financial_metrics(120_000, 500, 40_000, "740-799")
    assert metrics.monthly_income == pytest.approx(10_000)
    assert metrics.max_housing_payment == pytest.approx(2_800)
    assert metrics.estimated_affordability == pytest.approx(2_800 * 0.8 * 166)
    assert metrics.recommended_down_payment == pytest.approx(2_800 * 0.8 * 166 * 0.2)
    assert metrics.debt_to_income_ratio == pytest.approx(5.0)
    assert metrics.dti_status is DtiStatus.DEFINED
    assert metrics.down_payment == 40_000
    assert metrics.credit_tier is CreditTier.EXCELLENT
    assert metrics.credit_score_range.min == 740
    assert metrics.credit_score_range.max == 799


def test_zero_income_dti_is_undefined_not_infinite():
    metrics = compute_financial_metrics(0, 500)
    assert metrics.debt_to_income_ratio is None
    assert metrics.dti_status is DtiStatus.UNDEFINED
    assert not metrics.dti_defined
    assert metrics.estimated_affordability == 0


def test_dti_monotonic_in_debts_and_income():
    debts = [0, 100, 500, 1_000, 2_500, 5_000]
    ratios = [debt_to_income(60_000, d) for d in debts]
    assert ratios == sorted(ratios)

    incomes = [10_000, 30_000, 60_000, 120_000, 500_000]
    ratios = [debt_to_income(i, 800) for i in incomes]
    assert ratios == sorted(ratios, reverse=True)


def test_affordability_scales_linearly_with_housing_payment():
    base = compute_financial_metrics(50_000)
    doubled = compute_financial_metrics(100_000)
    assert doubled.max_housing_payment == pytest.approx(2 * base.max_housing_payment)
    assert doubled.estimated_affordability == pytest.approx(2 * base.estimated_affordability)
    ratio = base.estimated_affordability / base.max_housing_payment
    assert ratio == pytest.approx(0.8 * 166)


def test_custom_price_factor():
    metrics = compute_financial_metrics(120_000, price_factor=150)
    assert metrics.estimated_affordability == pytest.approx(2_240 * 150)


def test_metrics_for_answers_uses_derived_down_payment():
    answers = make_answers(
        annual_income=120_000,
        budget={"target_price": 400_000},
        down_payment=DownPayment(percent=10),
    )
    metrics = metrics_for_answers(answers)
    assert metrics.down_payment == pytest.approx(40_000)


# -- Credit --


@pytest.mark.parametrize(
    "band, tier",
    [
        ("800-850", CreditTier.EXCELLENT),
        ("800+", CreditTier.EXCELLENT),
        ("740-799", CreditTier.EXCELLENT),
        ("680-739", CreditTier.GOOD),
        ("670-739", CreditTier.GOOD),
        ("580-669", CreditTier.FAIR),
        ("620-679", CreditTier.FAIR),
        ("300-579", CreditTier.POOR),
        ("unknown", CreditTier.UNKNOWN),
        ("", CreditTier.UNKNOWN),
        (None, CreditTier.UNKNOWN),
        ("great", CreditTier.UNKNOWN),
    ],
)
def test_credit_tier(band, tier):
    assert credit_tier(band) is tier


def test_credit_score_range():
    assert credit_score_range("680-739").model_dump() == {"min": 680, "max": 739}
    assert credit_score_range("800+").model_dump() == {"min": 800, "max": 850}
    assert credit_score_range("unknown") is None
    assert credit_score_range(None) is None


def test_income_level():
    assert income_level(200_000) is IncomeLevel.HIGH
    assert income_level(150_000) is IncomeLevel.HIGH
    assert income_level(70_000) is IncomeLevel.MEDIUM
    assert income_level(30_000) is IncomeLevel.LOW


# -- Price factor --


def test_amortized_price_factor_matches_standard_loan_constant():
    factor = amortized_price_factor(6.5, 30)
    assert 158.0 < factor < 158.5


def test_amortized_price_factor_zero_rate():
    assert amortized_price_factor(0, 30) == pytest.approx(360)


def test_configured_price_factor():
    assert configured_price_factor(Settings(_env_file=None)) == 166
    amortized = Settings(_env_file=None, AFFORDABILITY_METHOD="amortized")
    assert configured_price_factor(amortized) == pytest.approx(amortized_price_factor(6.5, 30))


# -- Display --


def test_format_dti():
    assert format_dti(compute_financial_metrics(60_000, 500)) == "10.0%"
    assert format_dti(compute_financial_metrics(0, 500)) == "N/A"
    assert format_dti(compute_financial_metrics(0, 500), Locale.ES) == "No disponible"
