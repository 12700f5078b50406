# This project was developed with assistance from AI tools.
"""Financial metrics schemas."""

from pydantic import BaseModel, Field

from .enums import CreditBand, CreditTier, DtiStatus
from .wizard import MAX_ANNUAL_INCOME, MAX_MONTHLY_DEBTS, MAX_PRICE


class MetricsRequest(BaseModel):
    """Input for the financial metrics calculator."""

    annual_income: float = Field(ge=0, le=MAX_ANNUAL_INCOME, allow_inf_nan=False)
    monthly_debts: float = Field(default=0, ge=0, le=MAX_MONTHLY_DEBTS, allow_inf_nan=False)
    down_payment: float = Field(default=0, ge=0, le=MAX_PRICE, allow_inf_nan=False)
    credit_band: str = CreditBand.UNKNOWN.value


class CreditScoreRange(BaseModel):
    min: int
    max: int


class FinancialMetrics(BaseModel):
    """Derived affordability figures. Recomputed on demand, never stored.

    ``debt_to_income_ratio`` is a percentage. When income is zero the ratio
    has no meaning: it is ``None`` and ``dti_status`` is ``undefined``.
    """

    monthly_income: float
    debt_to_income_ratio: float | None
    dti_status: DtiStatus
    max_housing_payment: float
    estimated_affordability: float
    recommended_down_payment: float
    down_payment: float = 0
    credit_tier: CreditTier
    credit_score_range: CreditScoreRange | None = None

    @property
    def dti_defined(self) -> bool:
        return self.dti_status is DtiStatus.DEFINED
