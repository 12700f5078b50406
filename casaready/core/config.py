# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Related settings are grouped; each group maps to one collaborator.
"""

import logging
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "casaready"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:3000"]

    # -- Affordability --
    AFFORDABILITY_METHOD: Literal["multiplier", "amortized"] = Field(
        default="multiplier",
        description="'multiplier' keeps the fixed 166x price factor; 'amortized' derives it "
        "from ASSUMED_INTEREST_RATE and ASSUMED_LOAN_TERM_YEARS.",
    )
    PRICE_FACTOR: float = Field(
        default=166.0,
        gt=0,
        description="Loan dollars per dollar of monthly P&I (approximates 6.5% over 30 years).",
    )
    ASSUMED_INTEREST_RATE: float = Field(default=6.5, ge=0, le=15)
    ASSUMED_LOAN_TERM_YEARS: int = Field(default=30, ge=10, le=40)

    # -- AI report writer --
    AI_REPORTS_ENABLED: bool = Field(
        default=False,
        description="Ask the LLM for a richer narrative. The rule-based report is always built.",
    )
    LLM_API_KEY: str = Field(
        default="not-needed",
        description="API key for OpenAI-compatible LLM endpoint.",
    )
    LLM_BASE_URL: str = Field(
        default="https://api.openai.com/v1",
        description="Base URL for OpenAI-compatible LLM endpoint.",
    )
    LLM_MODEL: str = "gpt-4o-mini"
    AI_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)

    # -- US Census --
    CENSUS_API_KEY: str | None = None
    CENSUS_BASE_URL: str = "https://api.census.gov/data"
    CENSUS_GEOCODING_URL: str = "https://geocoding.geo.census.gov/geocoder"
    CENSUS_ACS_YEAR: str = "2022"
    CENSUS_CACHE_TTL: int = Field(
        default=24 * 60 * 60,
        description="Census lookup cache lifetime in seconds (default 24 hours).",
    )
    CENSUS_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)

    # -- Lead submission --
    CRM_API_URL: str | None = Field(
        default=None,
        description="Primary CRM endpoint. When unset, leads go straight to the webhook.",
    )
    ZAPIER_WEBHOOK_URL: str | None = Field(
        default=None,
        description="Secondary webhook endpoint. When unset, leads are logged only.",
    )
    HTTP_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)
    LEAD_SOURCE: str = "CasaReady Website"
    LEAD_PAGE: str = "Interactive Wizard"
    LEAD_CAMPAIGN: str = "Home Buying Wizard"
    LEAD_RATE_LIMIT: int = Field(default=5, description="Submissions allowed per window per IP.")
    LEAD_RATE_WINDOW_SECONDS: int = 15 * 60
    TRUST_FORWARDED_FOR: bool = Field(
        default=False,
        description="Rate-limit on the first X-Forwarded-For entry. Enable only behind a proxy "
        "that overwrites the header.",
    )

    # -- Realtor --
    REALTOR_NAME: str = "Real Estate Professional"
    REALTOR_ADDRESS: str = ""
    DEFAULT_CITY: str = "Austin"
    DEFAULT_STATE: str = "TX"


settings = Settings()


def log_integration_status(cfg: Settings) -> None:
    """Log which outbound integrations are live. Call at startup."""
    if cfg.AI_REPORTS_ENABLED:
        logger.info("AI reports: ENABLED (model=%s, endpoint=%s)", cfg.LLM_MODEL, cfg.LLM_BASE_URL)
    else:
        logger.info("AI reports: DISABLED (rule-based reports only)")

    if cfg.CRM_API_URL:
        logger.info("CRM lead API: configured")
    else:
        logger.warning("CRM lead API: NOT CONFIGURED (leads go to the webhook only)")

    if cfg.ZAPIER_WEBHOOK_URL:
        logger.info("Zapier webhook: configured")
    else:
        logger.warning("Zapier webhook: NOT CONFIGURED (leads are logged only)")

    if not cfg.CENSUS_API_KEY:
        logger.info("Census API key not set (anonymous quota applies)")
