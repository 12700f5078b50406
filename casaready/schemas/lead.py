# This project was developed with assistance from AI tools.
"""Lead classification schemas."""

from pydantic import BaseModel, Field

from .enums import (
    CreditTier,
    EmploymentStability,
    EmploymentType,
    IncomeLevel,
    LeadCategory,
    LeadType,
    Locale,
    Timeline,
)
from .wizard import WizardAnswers


class LoanEligibility(BaseModel):
    """Loan programs a buyer can and cannot use, plus the top pick."""

    eligible: list[str]
    not_eligible: list[str]
    recommended: str
    requires_special_documentation: bool
    pmi_likely: bool = False


class LeadProfile(BaseModel):
    """Terminal output of lead classification."""

    lead_type: LeadType
    primary_category: LeadCategory
    description: str

    is_first_time: bool
    is_investor: bool
    is_upsizing: bool
    is_military: bool

    employment_type: EmploymentType
    employment_stability: EmploymentStability

    credit_tier: CreditTier
    credit_band: str
    debt_to_income: float | None
    down_payment_percent: float | None
    income_level: IncomeLevel

    target_city: str | None
    target_price: float | None
    timeline: Timeline | None

    loan_eligibility: LoanEligibility

    locale: Locale
    special_considerations: list[str] = []
    risk_factors: list[str] = []
    strengths: list[str] = []


class ClassifyRequest(BaseModel):
    answers: WizardAnswers
    locale: Locale = Locale.EN


class ProgramInfo(BaseModel):
    """Loan program information for public display."""

    name: str
    description: str
    min_down_payment_pct: float = Field(ge=0)
    requires_special_documentation: bool = False
