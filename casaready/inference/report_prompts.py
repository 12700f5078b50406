# This project was developed with assistance from AI tools.
"""AI report prompt templates.

Keeps prompt construction separate from the writer so prompts can be
reviewed and iterated on independently. Prompts carry the privacy-safe
buyer summary only; names, email and phone never reach the model.
"""

import json

from ..schemas.enums import Locale
from ..schemas.lead import LeadProfile
from ..schemas.report import ReportData

_LANGUAGE = {
    Locale.EN: "English",
    Locale.ES: "Spanish",
}

SYSTEM_PROMPT = """\
You are a bilingual home-buying advisor writing for first-time and repeat \
buyers in the United States. You explain affordability, loan programs and \
next steps in plain language. Never invent programs the buyer is not \
eligible for and never address the buyer by name.

Respond with a single JSON object and nothing else, using exactly these keys:
- "report_markdown": the full analysis as markdown with ### section headings
- "estimated_price": recommended home price in dollars, or null
- "monthly_payment": estimated monthly principal and interest, or null
- "program_fit": list of recommended loan program names
- "action_plan": ordered list of short next steps
- "tips": list of at most five practical tips"""


def build_report_messages(
    profile: LeadProfile,
    fallback: ReportData,
    locale: Locale,
) -> list[dict[str, str]]:
    """Build the chat messages for one report request."""
    baseline = {
        "estimated_price": fallback.estimated_price,
        "max_affordable": fallback.max_affordable,
        "monthly_payment": fallback.monthly_payment,
        "lead_type": profile.lead_type.value,
        "recommended_program": profile.loan_eligibility.recommended,
        "eligible_programs": profile.loan_eligibility.eligible,
        "not_eligible_programs": profile.loan_eligibility.not_eligible,
        "risk_factors": profile.risk_factors,
        "strengths": profile.strengths,
    }
    user_prompt = (
        f"Write the buyer's personalized home-buying analysis in {_LANGUAGE[locale]}.\n\n"
        f"Buyer summary: {fallback.notes or 'not provided'}\n\n"
        "Rule-based baseline (keep estimates within 20% of these figures):\n"
        f"{json.dumps(baseline, indent=2)}"
    )
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ]
