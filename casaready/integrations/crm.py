# This project was developed with assistance from AI tools.
"""CRM lead API client."""

import logging

import httpx

from ..schemas.submission import ChannelResult, LeadPayload

logger = logging.getLogger(__name__)

CHANNEL = "crm"


class CRMClient:
    """Posts leads to the primary CRM endpoint.

    The endpoint answers ``{"success": bool, "message": str, "data":
    {"submissionId": str}}``; anything else counts as a failure.
    """

    def __init__(self, client: httpx.AsyncClient, url: str, timeout_seconds: float = 10.0):
        self.client = client
        self.url = url
        self.timeout_seconds = timeout_seconds

    async def submit(self, payload: LeadPayload) -> ChannelResult:
        try:
            response = await self.client.post(
                self.url,
                json=payload.model_dump(mode="json"),
                timeout=self.timeout_seconds,
            )
            body = response.json() if response.content else {}
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("CRM submission failed", exc_info=True)
            return ChannelResult(
                channel=CHANNEL,
                success=False,
                message="Network error during CRM submission",
                error=str(exc) or type(exc).__name__,
            )

        if not isinstance(body, dict):
            body = {}
        if response.is_success and body.get("success"):
            data = body.get("data") or {}
            return ChannelResult(
                channel=CHANNEL,
                success=True,
                message=body.get("message") or "Lead submitted successfully",
                lead_id=data.get("submissionId") if isinstance(data, dict) else None,
            )

        logger.warning("CRM rejected lead: HTTP %s", response.status_code)
        return ChannelResult(
            channel=CHANNEL,
            success=False,
            message=body.get("message") or "CRM submission failed",
            error=body.get("error") or f"HTTP {response.status_code}",
        )
