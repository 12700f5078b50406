# This project was developed with assistance from AI tools.
"""Lead submission schemas."""

from pydantic import BaseModel

from .enums import Locale
from .report import ReportData
from .wizard import ContactInfo, WizardAnswers


class LeadPayload(BaseModel):
    """Lead record posted to the CRM API."""

    first_name: str
    last_name: str
    email: str
    phone: str
    language: Locale = Locale.EN

    annual_income: float | None = None
    monthly_debts: float | None = None
    credit_score: str | None = None
    down_payment_amount: float | None = None
    down_payment_percent: float | None = None
    target_price: float | None = None
    monthly_budget: float | None = None
    max_budget: float | None = None

    preferred_state: str | None = None
    preferred_city: str | None = None
    preferred_zip_code: str | None = None
    timeframe: str | None = None
    first_time_buyer: bool = False
    employment_status: str | None = None

    lead_type: str | None = None
    estimated_price: int | None = None

    source: str | None = None
    campaign: str | None = None
    page: str | None = None
    notes: str = ""


class WebhookLeadPayload(BaseModel):
    """KW Command lead format accepted by the Zapier webhook."""

    first_name: str
    last_name: str
    email: str
    phone: str
    address1: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = "US"
    notes: str = ""
    tags: str = ""
    description: str = ""


class ChannelResult(BaseModel):
    """Outcome of posting a lead to a single channel."""

    channel: str
    success: bool
    message: str = ""
    lead_id: str | None = None
    error: str | None = None


class LeadSubmissionResult(BaseModel):
    success: bool
    message: str
    lead_id: str | None = None
    error: str | None = None
    channels: list[ChannelResult] = []


class LeadSubmissionRequest(BaseModel):
    answers: WizardAnswers
    contact: ContactInfo
    locale: Locale = Locale.EN
    report: ReportData | None = None
