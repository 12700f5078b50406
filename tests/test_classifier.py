# This project was developed with assistance from AI tools.
"""Tests for lead classification.

Covers each rule in the priority table, the reference scenarios, and
the never-raises property over a grid of sparse inputs.
"""

import itertools

import pytest

from casaready.schemas.enums import (
    BuyerTag,
    CreditTier,
    EmploymentStability,
    EmploymentType,
    LeadCategory,
    LeadType,
    Locale,
)
from casaready.schemas.wizard import DownPayment, WizardAnswers
from casaready.services.classifier import (
    CLASSIFICATION_RULES,
    RISK_CREDIT,
    RISK_DTI_UNDEFINED,
    RISK_HIGH_DTI,
    STRENGTH_CREDIT,
    STRENGTH_DOWN_PAYMENT,
    STRENGTH_DTI,
    classify_lead,
    describe_lead_type,
    employment_stability,
)
from casaready.services.eligibility import CONVENTIONAL, FHA, ITIN_PORTFOLIO, VA

from .factories import make_answers

# -- Reference scenarios --


def test_w2_first_time_good_credit():
    profile = classify_lead(make_answers())
    assert profile.lead_type is LeadType.W2_FIRST_TIME_GOOD_CREDIT
    assert profile.primary_category is LeadCategory.W2
    assert profile.loan_eligibility.recommended == FHA
    assert profile.debt_to_income == pytest.approx(11.1)


def test_itin_investor():
    profile = classify_lead(
        make_answers(
            employment_type=EmploymentType.ITIN,
            buyer_tags=frozenset({BuyerTag.INVESTOR}),
        )
    )
    assert profile.lead_type is LeadType.ITIN_INVESTOR
    assert profile.primary_category is LeadCategory.ITIN
    assert profile.loan_eligibility.eligible == [ITIN_PORTFOLIO]
    assert {"FHA", "VA", "Conventional"} <= set(profile.loan_eligibility.not_eligible)
    assert "ITIN documentation required" in profile.special_considerations


def test_high_net_worth_overrides_employment():
    profile = classify_lead(
        make_answers(
            annual_income=200_000,
            monthly_debts=0,
            down_payment=DownPayment(percent=25),
            buyer_tags=frozenset(),
            employment_type=EmploymentType.SELF_EMPLOYED,
        )
    )
    assert profile.lead_type is LeadType.HIGH_NET_WORTH
    assert profile.primary_category is LeadCategory.HIGH_NET_WORTH
    assert STRENGTH_DOWN_PAYMENT in profile.strengths


def test_zero_income_dti_is_undefined():
    profile = classify_lead(make_answers(annual_income=0, monthly_debts=500))
    assert profile.debt_to_income is None
    assert RISK_DTI_UNDEFINED in profile.risk_factors
    assert STRENGTH_DTI not in profile.strengths


# -- Rule order --


def test_rules_are_evaluated_in_priority_order():
    assert [rule.name for rule in CLASSIFICATION_RULES] == [
        "itin",
        "military",
        "high_net_worth",
        "retired",
        "self_employed",
        "mixed",
        "w2",
    ]


def test_itin_beats_veteran():
    profile = classify_lead(
        make_answers(
            employment_type=EmploymentType.ITIN,
            buyer_tags=frozenset({BuyerTag.VETERAN, BuyerTag.FIRST_TIME}),
        )
    )
    assert profile.lead_type is LeadType.ITIN_FIRST_TIME
    assert profile.loan_eligibility.eligible == [ITIN_PORTFOLIO]


def test_veteran_first_time():
    profile = classify_lead(
        make_answers(buyer_tags=frozenset({BuyerTag.VETERAN, BuyerTag.FIRST_TIME}))
    )
    assert profile.lead_type is LeadType.MILITARY_VETERAN_FIRST_TIME
    assert profile.is_military
    assert profile.loan_eligibility.recommended == VA
    assert FHA in profile.loan_eligibility.eligible


def test_veteran_upsizing():
    profile = classify_lead(make_answers(buyer_tags=frozenset({BuyerTag.VETERAN})))
    assert profile.lead_type is LeadType.MILITARY_VETERAN_UPSIZING


def test_veteran_beats_high_net_worth():
    profile = classify_lead(
        make_answers(
            annual_income=250_000,
            down_payment=DownPayment(percent=30),
            buyer_tags=frozenset({BuyerTag.VETERAN}),
        )
    )
    assert profile.primary_category is LeadCategory.MILITARY


def test_high_net_worth_needs_known_down_payment():
    profile = classify_lead(make_answers(annual_income=200_000, buyer_tags=frozenset()))
    assert profile.lead_type is LeadType.W2_UPSIZING


def test_retired():
    profile = classify_lead(make_answers(employment_type=EmploymentType.RETIRED))
    assert profile.lead_type is LeadType.RETIRED_BUYER


@pytest.mark.parametrize(
    "tags, expected",
    [
        ({BuyerTag.INVESTOR}, LeadType.SELF_EMPLOYED_INVESTOR),
        ({BuyerTag.FIRST_TIME}, LeadType.SELF_EMPLOYED_FIRST_TIME),
        (set(), LeadType.SELF_EMPLOYED_UPSIZING),
    ],
)
def test_self_employed_subtypes(tags, expected):
    for employment in (EmploymentType.SELF_EMPLOYED, EmploymentType.CONTRACTOR_1099):
        profile = classify_lead(
            make_answers(employment_type=employment, buyer_tags=frozenset(tags))
        )
        assert profile.lead_type is expected
        assert profile.loan_eligibility.requires_special_documentation


def test_mixed_income():
    profile = classify_lead(make_answers(employment_type=EmploymentType.MIXED))
    assert profile.lead_type is LeadType.MIXED_INCOME_BUYER
    assert profile.employment_stability is EmploymentStability.REQUIRES_REVIEW


@pytest.mark.parametrize(
    "band, expected",
    [
        ("300-579", LeadType.W2_FIRST_TIME_LOW_CREDIT),
        ("580-669", LeadType.W2_FIRST_TIME_LOW_CREDIT),
        ("740-799", LeadType.W2_FIRST_TIME_GOOD_CREDIT),
        ("unknown", LeadType.W2_FIRST_TIME_GOOD_CREDIT),
    ],
)
def test_w2_first_time_credit_split(band, expected):
    assert classify_lead(make_answers(credit_band=band)).lead_type is expected


def test_w2_investor():
    profile = classify_lead(make_answers(buyer_tags=frozenset({BuyerTag.INVESTOR})))
    assert profile.lead_type is LeadType.W2_INVESTOR
    assert profile.loan_eligibility.recommended == CONVENTIONAL


def test_other_employment_falls_back_to_standard():
    profile = classify_lead(make_answers(employment_type=EmploymentType.OTHER))
    assert profile.lead_type is LeadType.STANDARD_BUYER
    assert profile.primary_category is LeadCategory.STANDARD


# -- Never raises --


@pytest.mark.parametrize(
    "employment, tags, income",
    list(
        itertools.product(
            EmploymentType,
            [frozenset(), frozenset({BuyerTag.FIRST_TIME}), frozenset(BuyerTag)],
            [0, 45_000, 300_000],
        )
    ),
)
def test_every_combination_yields_one_lead_type(employment, tags, income):
    answers = WizardAnswers(annual_income=income, employment_type=employment, buyer_tags=tags)
    profile = classify_lead(answers)
    assert profile.lead_type in set(LeadType)
    assert profile.description


# -- Advisory tags --


def test_high_dti_and_poor_credit_are_risks():
    profile = classify_lead(
        make_answers(annual_income=48_000, monthly_debts=2_000, credit_band="300-579")
    )
    assert RISK_HIGH_DTI in profile.risk_factors
    assert RISK_CREDIT in profile.risk_factors
    assert profile.strengths == []


def test_excellent_profile_strengths():
    profile = classify_lead(
        make_answers(
            annual_income=120_000,
            monthly_debts=500,
            credit_band="800-850",
            budget={"target_price": 400_000},
            down_payment=DownPayment(amount=100_000),
        )
    )
    assert profile.strengths == [STRENGTH_CREDIT, STRENGTH_DTI, STRENGTH_DOWN_PAYMENT]
    assert profile.risk_factors == []
    assert profile.down_payment_percent == pytest.approx(25.0)


# -- Stability and labels --


def test_employment_stability():
    assert (
        employment_stability(EmploymentType.W2, 90_000, CreditTier.EXCELLENT)
        is EmploymentStability.EXCELLENT
    )
    assert (
        employment_stability(EmploymentType.W2, 50_000, CreditTier.GOOD)
        is EmploymentStability.GOOD
    )
    assert (
        employment_stability(EmploymentType.SELF_EMPLOYED, 50_000, CreditTier.FAIR)
        is EmploymentStability.MODERATE
    )
    assert (
        employment_stability(EmploymentType.ITIN, 50_000, CreditTier.GOOD)
        is EmploymentStability.REQUIRES_REVIEW
    )


def test_description_follows_locale():
    english = classify_lead(make_answers(), Locale.EN)
    spanish = classify_lead(make_answers(), Locale.ES)
    assert english.description == describe_lead_type(english.lead_type, Locale.EN)
    assert spanish.description == describe_lead_type(spanish.lead_type, Locale.ES)
    assert english.description != spanish.description
    assert spanish.locale is Locale.ES
