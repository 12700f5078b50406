# This project was developed with assistance from AI tools.
"""Public API routes -- no authentication required.

Everything the home-buying wizard calls: metrics, classification, report,
draft finalization, census lookups and lead submission.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from ..core.config import settings
from ..inference.report_writer import AIReportWriter
from ..schemas.census import CensusLookupResult, CityValidation
from ..schemas.enums import Locale
from ..schemas.lead import ClassifyRequest, LeadProfile, ProgramInfo
from ..schemas.metrics import FinancialMetrics, MetricsRequest
from ..schemas.report import ReportData, ReportRequest
from ..schemas.submission import LeadSubmissionRequest, LeadSubmissionResult
from ..schemas.wizard import WizardAnswers, WizardDraft
from ..services.calculator import compute_financial_metrics, configured_price_factor
from ..services.census import CensusService
from ..services.classifier import classify_lead
from ..services.eligibility import PROGRAMS
from ..services.leads import LeadSubmissionService
from ..services.rate_limit import FixedWindowRateLimiter
from ..services.report import generate_report
from ..services.wizard import finalize_answers

logger = logging.getLogger(__name__)

router = APIRouter()


# -- Dependencies (collaborators live on app.state, built in the lifespan) --


def get_census_service(request: Request) -> CensusService:
    return request.app.state.census_service


def get_lead_service(request: Request) -> LeadSubmissionService:
    return request.app.state.lead_service


def get_rate_limiter(request: Request) -> FixedWindowRateLimiter:
    return request.app.state.lead_rate_limiter


def get_report_writer() -> AIReportWriter | None:
    if not settings.AI_REPORTS_ENABLED:
        return None
    return AIReportWriter(timeout_seconds=settings.AI_TIMEOUT_SECONDS, model=settings.LLM_MODEL)


def _client_ip(request: Request, trust_forwarded_for: bool = False) -> str:
    forwarded = request.headers.get("x-forwarded-for") if trust_forwarded_for else None
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


# -- Engine --


@router.get("/programs", response_model=list[ProgramInfo])
async def list_programs() -> list[ProgramInfo]:
    """Return the loan programs the eligibility resolver knows about."""
    return PROGRAMS


@router.post("/metrics", response_model=FinancialMetrics)
async def calculate_metrics(req: MetricsRequest) -> FinancialMetrics:
    """Monthly income, DTI and estimated affordability.

    DTI is ``null`` with ``dti_status = "undefined"`` when income is zero.
    """
    return compute_financial_metrics(
        req.annual_income,
        req.monthly_debts,
        req.down_payment,
        req.credit_band,
        price_factor=configured_price_factor(settings),
    )


@router.post("/wizard/finalize", response_model=WizardAnswers)
async def finalize_wizard(draft: WizardDraft) -> WizardAnswers:
    """Validate a raw draft. Field problems come back as a 422 with ``errors``."""
    return finalize_answers(draft)


@router.post("/classify", response_model=LeadProfile)
async def classify(req: ClassifyRequest) -> LeadProfile:
    return classify_lead(req.answers, req.locale)


@router.post("/report", response_model=ReportData)
async def build_report(
    req: ReportRequest,
    census_service: CensusService = Depends(get_census_service),
    writer: AIReportWriter | None = Depends(get_report_writer),
) -> ReportData:
    """Personalized report; AI-written when enabled, rule-based otherwise."""
    census = None
    if req.include_census and req.answers.city:
        lookup = await census_service.get_area_insights(req.answers.city, None, req.locale)
        census = lookup.insights

    return await generate_report(
        req.answers,
        req.contact,
        req.locale,
        census,
        writer=writer,
        price_factor=configured_price_factor(settings),
    )


# -- Census --


@router.get("/census", response_model=CensusLookupResult)
async def census_insights(
    city: str = Query(..., max_length=100),
    state: str | None = Query(default=None, max_length=50),
    locale: Locale = Locale.EN,
    census_service: CensusService = Depends(get_census_service),
) -> CensusLookupResult:
    """Area demographics. Lookup failures still return 200 with ``fallback_data``."""
    return await census_service.get_area_insights(city, state, locale)


@router.get("/census/validate", response_model=CityValidation)
async def validate_city(
    city: str = Query(..., min_length=1, max_length=100),
    state: str | None = Query(default=None, max_length=50),
    census_service: CensusService = Depends(get_census_service),
) -> CityValidation:
    return await census_service.validate_city(city, state)


# -- Leads --


@router.post("/leads", response_model=LeadSubmissionResult)
async def submit_lead(
    req: LeadSubmissionRequest,
    request: Request,
    lead_service: LeadSubmissionService = Depends(get_lead_service),
    limiter: FixedWindowRateLimiter = Depends(get_rate_limiter),
) -> LeadSubmissionResult:
    """Deliver a lead to the CRM and webhook. Limited per client IP."""
    client_ip = _client_ip(request, settings.TRUST_FORWARDED_FOR)
    if not limiter.allow(client_ip):
        logger.warning("Lead submission rate limited for %s", client_ip)
        raise HTTPException(
            status_code=429,
            detail="Too many submissions. Please try again later.",
            headers={"Retry-After": str(limiter.retry_after(client_ip))},
        )

    return await lead_service.submit(req.answers, req.contact, req.locale, req.report)
