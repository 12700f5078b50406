# This project was developed with assistance from AI tools.
"""Zapier webhook client.

Sends leads in the KW Command webhook format: snake_case contact and
address fields plus free-text notes, comma-separated tags and a source
description.
"""

import logging
import re

import httpx

from ..core.config import Settings
from ..schemas.enums import Locale
from ..schemas.submission import ChannelResult, LeadPayload, WebhookLeadPayload
from ..services.normalizer import format_currency

logger = logging.getLogger(__name__)

CHANNEL = "webhook"
USER_AGENT = "CasaReady/1.0"
NOTES_SEPARATOR = " • "
DEFAULT_SOURCE = "CasaReady App"
DEFAULT_CAMPAIGN = "AI Home Buying Assistant"
HIGH_INCOME = 100_000
MID_INCOME = 50_000


def format_webhook_phone(phone: str) -> str:
    """US numbers as ``+1XXXXXXXXXX``; other lengths pass through as digits."""
    digits = re.sub(r"\D", "", phone or "")
    if len(digits) == 10:
        return f"+1{digits}"
    if len(digits) == 11 and digits.startswith("1"):
        return f"+{digits}"
    return digits or phone


def build_webhook_notes(lead: LeadPayload, realtor_name: str | None = None) -> str:
    notes: list[str] = []
    if lead.annual_income:
        notes.append(f"Annual Income: {format_currency(lead.annual_income)}")
    if lead.down_payment_amount:
        notes.append(f"Down Payment Available: {format_currency(lead.down_payment_amount)}")
    if lead.credit_score:
        notes.append(f"Credit Score Range: {lead.credit_score}")
    if lead.monthly_debts:
        notes.append(f"Monthly Debts: {format_currency(lead.monthly_debts)}")
    if lead.max_budget:
        notes.append(f"Max Budget: {format_currency(lead.max_budget)}")
    if lead.timeframe:
        notes.append(f"Timeline: {lead.timeframe}")
    if lead.first_time_buyer:
        notes.append("First-time homebuyer")
    if lead.employment_status:
        notes.append(f"Employment: {lead.employment_status}")
    if lead.lead_type:
        notes.append(f"Lead Type: {lead.lead_type}")
    if lead.language is Locale.ES:
        notes.append("Prefers Spanish communication")
    notes.append("Requested AI-powered home buying guidance")
    if realtor_name:
        notes.append(f"Assigned Realtor: {realtor_name}")
    return NOTES_SEPARATOR.join(notes)


def build_webhook_tags(lead: LeadPayload) -> str:
    tags = ["CasaReady"]
    if lead.source:
        tags.append(lead.source)
    if lead.page:
        tags.append(lead.page)
    if lead.language is Locale.ES:
        tags.append("Spanish")
    if lead.first_time_buyer:
        tags.append("FirstTime")
    if lead.annual_income:
        if lead.annual_income >= HIGH_INCOME:
            tags.append("HighIncome")
        elif lead.annual_income >= MID_INCOME:
            tags.append("MidIncome")
    if lead.preferred_state:
        tags.append(lead.preferred_state)
    if lead.timeframe:
        if lead.timeframe.startswith("0-3"):
            tags.append("Urgent")
        elif lead.timeframe.startswith("3-6"):
            tags.append("Active")
    tags += ["LeadWizard", "AI"]
    return ",".join(tags)


def build_webhook_description(lead: LeadPayload) -> str:
    parts = [f"Source: {lead.source or DEFAULT_SOURCE}"]
    if lead.page:
        parts.append(f"Page: {lead.page}")
    parts.append(f"Campaign: {lead.campaign or DEFAULT_CAMPAIGN}")
    return NOTES_SEPARATOR.join(parts)


class ZapierClient:
    """Posts leads to the configured Zapier catch hook.

    With no webhook URL the lead is only logged and the submission counts as
    successful, so local development never loses a lead silently.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        self.client = client
        self.settings = settings
        self.webhook_url = settings.ZAPIER_WEBHOOK_URL

    @property
    def configured(self) -> bool:
        return bool(self.webhook_url)

    def transform(self, lead: LeadPayload) -> WebhookLeadPayload:
        return WebhookLeadPayload(
            first_name=lead.first_name,
            last_name=lead.last_name,
            email=lead.email,
            phone=format_webhook_phone(lead.phone),
            address1=self.settings.REALTOR_ADDRESS,
            city=lead.preferred_city or self.settings.DEFAULT_CITY,
            state=lead.preferred_state or self.settings.DEFAULT_STATE,
            zip=lead.preferred_zip_code or "",
            notes=build_webhook_notes(lead, self.settings.REALTOR_NAME),
            tags=build_webhook_tags(lead),
            description=build_webhook_description(lead),
        )

    async def submit(self, lead: LeadPayload) -> ChannelResult:
        body = self.transform(lead)
        logger.info("Submitting lead to webhook: %s", body.email)

        if not self.configured:
            logger.info("Lead logged (webhook not configured): %s [%s]", body.email, body.tags)
            return ChannelResult(
                channel=CHANNEL,
                success=True,
                message="Lead logged successfully (webhook not configured)",
            )

        try:
            response = await self.client.post(
                self.webhook_url,
                json=body.model_dump(),
                headers={"User-Agent": USER_AGENT},
                timeout=self.settings.HTTP_TIMEOUT_SECONDS,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Webhook submission failed", exc_info=True)
            return ChannelResult(
                channel=CHANNEL,
                success=False,
                message="Failed to submit lead",
                error=str(exc) or type(exc).__name__,
            )

        return ChannelResult(channel=CHANNEL, success=True, message="Lead submitted successfully")
