# This project was developed with assistance from AI tools.
"""AI report writer.

Asks the LLM for a richer narrative on top of the rule-based report. Every
failure mode surfaces as ``AIReportError`` so the caller has one thing to
catch before falling back.
"""

import asyncio
import json
import logging
import re

from openai import OpenAIError
from pydantic import ValidationError

from ..schemas.enums import Locale
from ..schemas.lead import LeadProfile
from ..schemas.report import AIReportDraft, ReportData
from ..schemas.wizard import WizardAnswers
from .client import get_completion
from .report_prompts import build_report_messages

logger = logging.getLogger(__name__)

# Matches ```json ... ``` or ``` ... ``` fences that LLMs often wrap around JSON.
_FENCE_RE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)


class AIReportError(Exception):
    """The AI writer could not produce a usable draft."""


def _strip_json_fences(text: str) -> str:
    stripped = text.strip()
    m = _FENCE_RE.match(stripped)
    return m.group(1).strip() if m else stripped


def parse_draft(raw: str) -> AIReportDraft:
    """Validate raw model output into an ``AIReportDraft``."""
    if not raw or not raw.strip():
        raise AIReportError("LLM returned an empty response")
    try:
        payload = json.loads(_strip_json_fences(raw))
    except json.JSONDecodeError as exc:
        raise AIReportError("LLM returned non-JSON output") from exc
    if not isinstance(payload, dict):
        raise AIReportError("LLM returned JSON that is not an object")
    try:
        return AIReportDraft.model_validate(payload)
    except ValidationError as exc:
        raise AIReportError(f"LLM output failed validation: {exc.error_count()} errors") from exc


class AIReportWriter:
    """Generates report drafts through the OpenAI-compatible completion endpoint."""

    def __init__(self, timeout_seconds: float = 30.0, model: str | None = None):
        self.timeout_seconds = timeout_seconds
        self.model = model

    async def write(
        self,
        answers: WizardAnswers,
        profile: LeadProfile,
        fallback: ReportData,
        locale: Locale = Locale.EN,
    ) -> AIReportDraft:
        """Request a draft for one buyer.

        ``answers`` is accepted so callers hand over the full buyer picture,
        but only the privacy-safe summary on ``fallback.notes`` is sent.

        Raises:
            AIReportError: on timeout, transport failure, or unusable output.
        """
        messages = build_report_messages(profile, fallback, locale)
        try:
            raw = await asyncio.wait_for(
                get_completion(messages, model=self.model, temperature=0.4),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise AIReportError(f"LLM timed out after {self.timeout_seconds}s") from exc
        except OpenAIError as exc:
            raise AIReportError(f"LLM request failed: {exc}") from exc
        except Exception as exc:
            logger.exception("Unexpected error from the LLM client")
            raise AIReportError(f"LLM request failed: {type(exc).__name__}") from exc

        draft = parse_draft(raw)
        logger.info(
            "AI report drafted for %s (%d chars)", profile.lead_type.value, len(draft.report_markdown)
        )
        return draft
