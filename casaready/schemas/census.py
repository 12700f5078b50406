# This project was developed with assistance from AI tools.
"""US Census area insight schemas."""

from datetime import datetime

from pydantic import BaseModel

from .enums import DataQuality, MarketTrend


class Coordinates(BaseModel):
    lat: float
    lng: float


class CensusLocation(BaseModel):
    city: str
    state: str = ""
    county: str = ""
    zip_code: str | None = None
    coordinates: Coordinates | None = None


class EducationLevel(BaseModel):
    high_school: int = 0
    bachelors: int = 0
    graduate: int = 0


class AgeDistribution(BaseModel):
    under_18: int = 0
    working: int = 0
    senior: int = 0


class CensusDemographics(BaseModel):
    population: int
    median_household_income: int
    median_home_value: int
    unemployment_rate: float
    education_level: EducationLevel
    age_distribution: AgeDistribution


class EconomicIndicators(BaseModel):
    job_growth: float
    cost_of_living: int
    market_trend: MarketTrend


class CensusAreaInsights(BaseModel):
    """Demographic context for the buyer's target city."""

    location: CensusLocation
    demographics: CensusDemographics | None = None
    economic_indicators: EconomicIndicators | None = None
    recommendations: list[str] = []
    data_quality: DataQuality
    last_updated: datetime


class CensusLookupResult(BaseModel):
    """Outcome of a census lookup. ``fallback_data`` is set whenever ``data`` is not."""

    success: bool
    data: CensusAreaInsights | None = None
    error: str | None = None
    fallback_data: CensusAreaInsights | None = None

    @property
    def insights(self) -> CensusAreaInsights | None:
        return self.data if self.success else None


class CityValidation(BaseModel):
    is_valid: bool
    standardized_name: str | None = None
    state: str | None = None
    county: str | None = None
