# This project was developed with assistance from AI tools.
"""Home-buying report schemas."""

from pydantic import BaseModel, Field

from .enums import Locale
from .wizard import ContactInfo, WizardAnswers


class ReportData(BaseModel):
    """Report shown on the results step and attached to the CRM lead."""

    estimated_price: int
    max_affordable: int
    monthly_payment: int
    program_fit: list[str]
    action_plan: list[str]
    tips: list[str]
    notes: str = ""
    primary_lead_type: str
    report_content: str
    ai_generated: bool = False


class ReportRequest(BaseModel):
    answers: WizardAnswers
    contact: ContactInfo
    locale: Locale = Locale.EN
    include_census: bool = Field(
        default=True,
        description="Look up census demographics for the target city before building the report.",
    )


class AIReportDraft(BaseModel):
    """JSON shape the AI writer must return. Numeric fields are optional overrides."""

    report_markdown: str = Field(min_length=1)
    estimated_price: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    monthly_payment: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    program_fit: list[str] = []
    action_plan: list[str] = []
    tips: list[str] = []
