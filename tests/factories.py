# This project was developed with assistance from AI tools.
"""Builders for wizard answers, contacts and census insights used across tests."""

from datetime import UTC, datetime

from casaready.schemas.census import (
    AgeDistribution,
    CensusAreaInsights,
    CensusDemographics,
    CensusLocation,
    EconomicIndicators,
    EducationLevel,
)
from casaready.schemas.enums import BuyerTag, DataQuality, EmploymentType, MarketTrend
from casaready.schemas.wizard import ContactInfo, WizardAnswers


def make_answers(**overrides) -> WizardAnswers:
    """W2 first-time buyer earning 65k with 600/month debts and good credit."""
    fields = {
        "city": "Austin",
        "annual_income": 65_000,
        "monthly_debts": 600,
        "credit_band": "680-739",
        "employment_type": EmploymentType.W2,
        "buyer_tags": frozenset({BuyerTag.FIRST_TIME}),
    }
    fields.update(overrides)
    return WizardAnswers(**fields)


def make_contact(**overrides) -> ContactInfo:
    fields = {
        "first_name": "Maria",
        "last_name": "Garcia",
        "email": "maria.garcia@example.com",
        "phone": "(512) 555-0123",
    }
    fields.update(overrides)
    return ContactInfo(**fields)


def make_census(
    median_home_value: int = 400_000,
    median_household_income: int = 80_000,
    **overrides,
) -> CensusAreaInsights:
    demographics = CensusDemographics(
        population=overrides.pop("population", 960_000),
        median_household_income=median_household_income,
        median_home_value=median_home_value,
        unemployment_rate=overrides.pop("unemployment_rate", 4.5),
        education_level=EducationLevel(high_school=100_000, bachelors=200_000, graduate=90_000),
        age_distribution=AgeDistribution(under_18=200_000, working=660_000, senior=100_000),
    )
    fields = {
        "location": CensusLocation(city="Austin", state="TX"),
        "demographics": demographics,
        "economic_indicators": EconomicIndicators(
            job_growth=3.2, cost_of_living=105, market_trend=MarketTrend.GROWING
        ),
        "recommendations": ["Strong job market with good employment opportunities"],
        "data_quality": DataQuality.HIGH,
        "last_updated": datetime(2024, 1, 1, tzinfo=UTC),
    }
    fields.update(overrides)
    return CensusAreaInsights(**fields)
