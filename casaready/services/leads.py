# This project was developed with assistance from AI tools.
"""Lead submission.

Builds the CRM lead record from finalized answers and contact details,
validates it, and delivers it: CRM first, then the Zapier webhook. When the
CRM accepts the lead the webhook still receives a copy; its failure is only
logged.
"""

import logging
from datetime import UTC, date, datetime

from ..core.config import Settings
from ..integrations.crm import CRMClient
from ..integrations.zapier import ZapierClient
from ..schemas import FieldError, FieldErrorCode
from ..schemas.enums import CreditBand, Locale, Timeline
from ..schemas.report import ReportData
from ..schemas.submission import ChannelResult, LeadPayload, LeadSubmissionResult
from ..schemas.wizard import ContactInfo, WizardAnswers
from .normalizer import format_currency, sanitize_string, validate_email, validate_phone

logger = logging.getLogger(__name__)

_TIMELINE_NOTES = {
    Timeline.ZERO_TO_THREE: "0-3 months (urgent)",
    Timeline.THREE_TO_SIX: "3-6 months",
    Timeline.SIX_TO_TWELVE: "6-12 months",
    Timeline.TWELVE_PLUS: "12+ months (planning ahead)",
}


def generate_lead_notes(
    answers: WizardAnswers,
    locale: Locale = Locale.EN,
    *,
    submitted_on: date | None = None,
) -> str:
    """Multi-line notes for the agent who picks up the lead."""
    submitted_on = submitted_on or datetime.now(UTC).date()
    notes = [
        "Lead generated via Interactive Home Buying Wizard",
        f"Language preference: {'Spanish' if locale is Locale.ES else 'English'}",
        f"Submission date: {submitted_on.isoformat()}",
    ]

    if answers.annual_income:
        notes.append(f"Annual Income: {format_currency(answers.annual_income)}")
    if answers.monthly_debts:
        notes.append(f"Monthly Debts: {format_currency(answers.monthly_debts)}")
    if answers.credit_band != CreditBand.UNKNOWN.value:
        notes.append(f"Credit Score Range: {answers.credit_band}")

    if answers.target_price is not None:
        notes.append(f"Target Price: {format_currency(answers.target_price)}")
    elif answers.monthly_budget is not None:
        notes.append(f"Monthly Payment Budget: {format_currency(answers.monthly_budget)}")

    if answers.down_payment is not None:
        if answers.down_payment.amount is not None:
            notes.append(f"Down Payment Amount: {format_currency(answers.down_payment.amount)}")
        else:
            notes.append(f"Down Payment Percentage: {answers.down_payment.percent:g}%")

    if answers.city or answers.zip_code:
        notes.append(f"Preferred Location: {answers.city or ''} {answers.zip_code or ''}".strip())
    if answers.location_priorities:
        priorities = ", ".join(sorted(p.value for p in answers.location_priorities))
        notes.append(f"Location Priorities: {priorities}")
    if answers.timeline:
        notes.append(f"Buying Timeline: {_TIMELINE_NOTES[answers.timeline]}")

    notes.append(f"Employment Type: {answers.employment_type.value}")
    if answers.buyer_tags:
        notes.append(f"Buyer Profile: {', '.join(sorted(t.value for t in answers.buyer_tags))}")
    notes.append(f"Household Size: {answers.household_size}")

    notes.append("\n--- Key Insights ---")
    if answers.is_first_time:
        notes.append("✓ First-time buyer - eligible for special programs")
    if answers.is_veteran:
        notes.append("✓ Veteran - VA loan eligible")
    if answers.employment_type.is_self_employed:
        notes.append("⚠ Self-employed - may need alternative documentation")
    if answers.credit_band == CreditBand.VERY_POOR.value:
        notes.append("⚠ Credit improvement needed")
    if answers.timeline is Timeline.ZERO_TO_THREE:
        notes.append("🔥 Urgent timeline - prioritize pre-approval")

    return "\n".join(notes)


def validate_contact(contact: ContactInfo) -> list[FieldError]:
    errors: list[FieldError] = []
    for field, label in (("first_name", "First name"), ("last_name", "Last name")):
        if sanitize_string(getattr(contact, field)) is None:
            errors.append(
                FieldError(field=field, code=FieldErrorCode.REQUIRED, message=f"{label} is required")
            )
    for result in (validate_email(contact.email), validate_phone(contact.phone)):
        if isinstance(result, FieldError):
            errors.append(result)
    return errors


def build_lead_payload(
    answers: WizardAnswers,
    contact: ContactInfo,
    locale: Locale,
    settings: Settings,
    report: ReportData | None = None,
) -> LeadPayload:
    """Flatten answers, contact and the optional report into one CRM record."""
    notes = generate_lead_notes(answers, locale)
    if report is not None and report.notes:
        notes = f"{notes}\n\n--- Report Summary ---\n{report.notes}"

    return LeadPayload(
        first_name=contact.first_name.strip(),
        last_name=contact.last_name.strip(),
        email=contact.email.strip().lower(),
        phone=contact.phone.strip(),
        language=locale,
        annual_income=answers.annual_income or None,
        monthly_debts=answers.monthly_debts or None,
        credit_score=(
            answers.credit_band if answers.credit_band != CreditBand.UNKNOWN.value else None
        ),
        down_payment_amount=answers.down_payment_amount,
        down_payment_percent=answers.down_payment_percent,
        target_price=answers.target_price,
        monthly_budget=answers.monthly_budget,
        max_budget=answers.target_price,
        preferred_city=answers.city,
        preferred_zip_code=answers.zip_code,
        timeframe=answers.timeline.label if answers.timeline else None,
        first_time_buyer=answers.is_first_time,
        employment_status=answers.employment_type.value,
        lead_type=report.primary_lead_type if report else None,
        estimated_price=report.estimated_price if report else None,
        source=settings.LEAD_SOURCE,
        campaign=settings.LEAD_CAMPAIGN,
        page=settings.LEAD_PAGE,
        notes=notes,
    )


class LeadSubmissionService:
    """Delivers leads to the CRM with the webhook as secondary channel."""

    def __init__(self, crm: CRMClient | None, webhook: ZapierClient, settings: Settings):
        self.crm = crm
        self.webhook = webhook
        self.settings = settings

    async def submit(
        self,
        answers: WizardAnswers,
        contact: ContactInfo,
        locale: Locale = Locale.EN,
        report: ReportData | None = None,
    ) -> LeadSubmissionResult:
        errors = validate_contact(contact)
        if errors:
            return LeadSubmissionResult(
                success=False,
                message="Lead data validation failed",
                error=", ".join(error.message for error in errors),
            )

        payload = build_lead_payload(answers, contact, locale, self.settings, report)
        channels: list[ChannelResult] = []

        if self.crm is not None:
            crm_result = await self.crm.submit(payload)
            channels.append(crm_result)
            if crm_result.success:
                logger.info("Lead submitted via CRM: %s (%s)", payload.email, crm_result.lead_id)
                webhook_result = await self.webhook.submit(payload)
                channels.append(webhook_result)
                if not webhook_result.success:
                    logger.warning(
                        "Webhook submission failed (CRM submission succeeded): %s",
                        webhook_result.error,
                    )
                return LeadSubmissionResult(
                    success=True,
                    message=crm_result.message,
                    lead_id=crm_result.lead_id,
                    channels=channels,
                )
            logger.warning("CRM submission failed, trying webhook: %s", crm_result.error)

        webhook_result = await self.webhook.submit(payload)
        channels.append(webhook_result)
        if webhook_result.success:
            logger.info("Lead submitted via webhook: %s", payload.email)
            return LeadSubmissionResult(
                success=True,
                message=(
                    "Lead submitted successfully via backup system"
                    if self.crm is not None
                    else webhook_result.message
                ),
                lead_id=f"zapier_{int(datetime.now(UTC).timestamp() * 1000)}",
                channels=channels,
            )

        logger.error("Lead submission failed on all channels for %s", payload.email)
        return LeadSubmissionResult(
            success=False,
            message="Lead submission failed on all channels",
            error=", ".join(f"{c.channel}: {c.error or 'Unknown error'}" for c in channels),
            channels=channels,
        )
