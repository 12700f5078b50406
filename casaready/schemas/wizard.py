# This project was developed with assistance from AI tools.
"""Wizard answer schemas.

``WizardDraft`` is what the front end accumulates step by step: every field
is optional and numeric inputs may still be raw strings (``"$65,000"``).
``WizardAnswers`` is the frozen snapshot the engine runs on, produced once by
``services.wizard.finalize_answers``.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import BuyerTag, CreditBand, EmploymentType, LocationPriority, Timeline

# Loan dollars per dollar of monthly payment at ~6.5% over 30 years.
# Shared with the calculator; kept here so schemas do not import services.
DEFAULT_PRICE_FACTOR = 166.0

# Upper bounds keep every derived figure finite.
MAX_ANNUAL_INCOME = 100_000_000.0
MAX_MONTHLY_DEBTS = 10_000_000.0
MAX_PRICE = 1_000_000_000.0

RawNumber = float | int | str | None


class Budget(BaseModel):
    """Either a target purchase price or a monthly payment budget, never both."""

    model_config = ConfigDict(frozen=True)

    target_price: float | None = Field(default=None, gt=0, le=MAX_PRICE, allow_inf_nan=False)
    monthly_budget: float | None = Field(default=None, gt=0, le=MAX_PRICE, allow_inf_nan=False)

    @model_validator(mode="after")
    def _exactly_one(self) -> "Budget":
        if (self.target_price is None) == (self.monthly_budget is None):
            raise ValueError("Provide exactly one of target_price or monthly_budget")
        return self


class DownPayment(BaseModel):
    """Either an absolute amount or a percentage of the price, never both."""

    model_config = ConfigDict(frozen=True)

    amount: float | None = Field(default=None, ge=0, le=MAX_PRICE, allow_inf_nan=False)
    percent: float | None = Field(default=None, ge=0, le=100)

    @model_validator(mode="after")
    def _exactly_one(self) -> "DownPayment":
        if (self.amount is None) == (self.percent is None):
            raise ValueError("Provide exactly one of amount or percent")
        return self


class WizardDraft(BaseModel):
    """Partially-populated wizard state, one group of fields per step."""

    # Location step
    city: str | None = None
    zip_code: str | None = None
    location_priorities: list[str] = []

    # Timeline step
    timeline: str | None = None

    # Budget step
    target_price: RawNumber = None
    monthly_budget: RawNumber = None

    # Income / debts / credit steps
    annual_income: RawNumber = None
    monthly_debts: RawNumber = None
    credit_score: str | None = None

    # Down payment step
    down_payment_amount: RawNumber = None
    down_payment_percent: RawNumber = None

    # Employment + buyer profile steps
    employment_type: str | None = None
    buyer_type: list[str] = []
    household_size: RawNumber = None


class WizardAnswers(BaseModel):
    """Finalized wizard answers. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    city: str | None = Field(default=None, max_length=100)
    zip_code: str | None = Field(default=None, max_length=10)
    location_priorities: frozenset[LocationPriority] = frozenset()
    timeline: Timeline | None = None
    budget: Budget | None = None
    annual_income: float = Field(ge=0, le=MAX_ANNUAL_INCOME, allow_inf_nan=False)
    monthly_debts: float = Field(default=0.0, ge=0, le=MAX_MONTHLY_DEBTS, allow_inf_nan=False)
    credit_band: str = CreditBand.UNKNOWN.value
    down_payment: DownPayment | None = None
    employment_type: EmploymentType = EmploymentType.W2
    buyer_tags: frozenset[BuyerTag] = frozenset()
    household_size: int = Field(default=1, ge=1, le=10)

    @property
    def is_first_time(self) -> bool:
        return BuyerTag.FIRST_TIME in self.buyer_tags

    @property
    def is_investor(self) -> bool:
        return BuyerTag.INVESTOR in self.buyer_tags

    @property
    def is_veteran(self) -> bool:
        return BuyerTag.VETERAN in self.buyer_tags

    @property
    def is_upsizing(self) -> bool:
        return BuyerTag.UPSIZING in self.buyer_tags

    @property
    def target_price(self) -> float | None:
        return self.budget.target_price if self.budget else None

    @property
    def monthly_budget(self) -> float | None:
        return self.budget.monthly_budget if self.budget else None

    @property
    def reference_price(self) -> float | None:
        """Price the down payment is measured against, if the buyer gave one."""
        if self.budget is None:
            return None
        if self.budget.target_price is not None:
            return self.budget.target_price
        return self.budget.monthly_budget * DEFAULT_PRICE_FACTOR

    @property
    def down_payment_percent(self) -> float | None:
        if self.down_payment is None:
            return None
        if self.down_payment.percent is not None:
            return self.down_payment.percent
        price = self.reference_price
        if not price:
            return None
        return min(self.down_payment.amount / price * 100, 100.0)

    @property
    def down_payment_amount(self) -> float | None:
        if self.down_payment is None:
            return None
        if self.down_payment.amount is not None:
            return self.down_payment.amount
        price = self.reference_price
        if price is None:
            return None
        return price * self.down_payment.percent / 100


class ContactInfo(BaseModel):
    """Contact details captured on the final wizard step."""

    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    email: str
    phone: str
    date_of_birth: str | None = None
    marital_status: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
