# This project was developed with assistance from AI tools.
"""US Census area insights.

Geocodes the buyer's target city with the Census geocoder, pulls ACS 5-year
demographics for the matching place, and derives simple economic indicators
and localized recommendations. Lookups are cached per city/state; every
failure degrades to low-quality fallback insights instead of raising.
"""

import asyncio
import logging
from datetime import UTC, datetime

import httpx

from ..core.config import Settings
from ..schemas.census import (
    AgeDistribution,
    CensusAreaInsights,
    CensusDemographics,
    CensusLocation,
    CensusLookupResult,
    CityValidation,
    Coordinates,
    EconomicIndicators,
    EducationLevel,
)
from ..schemas.enums import DataQuality, Locale, MarketTrend
from .cache import TTLCache
from .messages import MessageKey, render

logger = logging.getLogger(__name__)

GEOCODER_BENCHMARK = "Public_AR_Current"

# ACS 5-year variables, in the order the response rows are unpacked.
ACS_VARIABLES = (
    "B01003_001E",  # total population
    "B19013_001E",  # median household income
    "B25077_001E",  # median home value
    "B23025_005E",  # unemployed
    "B23025_002E",  # labor force
    "B15003_017E",  # high school diploma
    "B15003_022E",  # bachelor's degree
    "B15003_023E",  # master's degree
    "B01001_001E",  # total population (age table)
    "B01001_003E",  # under 18
    "B01001_020E",  # 65 and over
)

_FALLBACK_MESSAGES = (
    MessageKey.CENSUS_UNAVAILABLE,
    MessageKey.CENSUS_CONSULT_AGENTS,
    MessageKey.CENSUS_CHECK_STATISTICS,
)


class CensusLookupError(Exception):
    """A Census endpoint returned something we could not use."""


def _to_int(value) -> int:
    """ACS values arrive as strings; missing data uses large negative sentinels."""
    try:
        number = int(float(value))
    except (TypeError, ValueError):
        return 0
    return max(number, 0)


def derive_economic_indicators(demographics: CensusDemographics) -> EconomicIndicators:
    if demographics.unemployment_rate < 5:
        job_growth = 3.2
    elif demographics.unemployment_rate < 7:
        job_growth = 1.8
    else:
        job_growth = 0.5

    if demographics.median_home_value > 500_000:
        cost_of_living = 120
    elif demographics.median_home_value > 300_000:
        cost_of_living = 105
    else:
        cost_of_living = 95

    if demographics.population > 50_000 and demographics.median_household_income > 60_000:
        trend = MarketTrend.GROWING
    elif demographics.population > 20_000:
        trend = MarketTrend.STABLE
    else:
        trend = MarketTrend.DECLINING

    return EconomicIndicators(
        job_growth=job_growth, cost_of_living=cost_of_living, market_trend=trend
    )


def build_recommendations(
    demographics: CensusDemographics, locale: Locale = Locale.EN
) -> list[str]:
    keys = []
    if demographics.median_home_value < 300_000:
        keys.append(MessageKey.CENSUS_AFFORDABLE_MARKET)
    if demographics.unemployment_rate < 5:
        keys.append(MessageKey.CENSUS_STRONG_JOBS)
    if demographics.education_level.bachelors > 10_000:
        keys.append(MessageKey.CENSUS_EDUCATED)
    if demographics.population > 50_000:
        keys.append(MessageKey.CENSUS_URBAN)
    if demographics.age_distribution.working > demographics.age_distribution.senior:
        keys.append(MessageKey.CENSUS_YOUNG_POPULATION)
    return [render(key, locale) for key in keys]


def build_fallback_insights(
    city: str,
    state: str | None = None,
    locale: Locale = Locale.EN,
    location: CensusLocation | None = None,
) -> CensusAreaInsights:
    return CensusAreaInsights(
        location=location or CensusLocation(city=city, state=state or ""),
        recommendations=[render(key, locale) for key in _FALLBACK_MESSAGES],
        data_quality=DataQuality.LOW,
        last_updated=datetime.now(UTC),
    )


def parse_demographics_row(row: list) -> CensusDemographics:
    (
        _name,
        population,
        median_income,
        median_home_value,
        unemployed,
        labor_force,
        high_school,
        bachelors,
        masters,
        total_population,
        under_18,
        over_65,
    ) = row[: len(ACS_VARIABLES) + 1]

    labor = _to_int(labor_force)
    unemployment_rate = round(_to_int(unemployed) / labor * 100, 1) if labor > 0 else 0.0
    working = _to_int(total_population) - _to_int(under_18) - _to_int(over_65)

    return CensusDemographics(
        population=_to_int(population),
        median_household_income=_to_int(median_income),
        median_home_value=_to_int(median_home_value),
        unemployment_rate=unemployment_rate,
        education_level=EducationLevel(
            high_school=_to_int(high_school),
            bachelors=_to_int(bachelors),
            graduate=_to_int(masters),
        ),
        age_distribution=AgeDistribution(
            under_18=_to_int(under_18),
            working=max(working, 0),
            senior=_to_int(over_65),
        ),
    )


class CensusService:
    """Census lookups over a shared ``httpx.AsyncClient`` and ``TTLCache``.

    The cache holds location and demographics only; indicators and the
    localized recommendations are derived per request so one cached lookup
    serves both languages.
    """

    def __init__(self, client: httpx.AsyncClient, cache: TTLCache, settings: Settings):
        self.client = client
        self.cache = cache
        self.settings = settings

    @staticmethod
    def cache_key(city: str, state: str | None) -> str:
        return f"{city.strip().lower()}-{(state or '').strip().lower()}"

    async def geocode(self, city: str, state: str | None = None) -> CensusLocation | None:
        """Resolve a city to its standardized name and coordinates, or None if unmatched."""
        query = f"{city}, {state}" if state else city
        response = await self.client.get(
            f"{self.settings.CENSUS_GEOCODING_URL}/locations/onelineaddress",
            params={"address": query, "benchmark": GEOCODER_BENCHMARK, "format": "json"},
            timeout=self.settings.CENSUS_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        payload = response.json()
        result = payload.get("result") if isinstance(payload, dict) else None
        if not isinstance(result, dict):
            raise CensusLookupError("Geocoder response has no result object")
        matches = result.get("addressMatches") or []
        if not isinstance(matches, list):
            raise CensusLookupError("Geocoder addressMatches is not a list")
        if not matches:
            return None

        match = matches[0]
        components = (match.get("addressComponents") or {}) if isinstance(match, dict) else None
        if not isinstance(components, dict):
            raise CensusLookupError("Geocoder match is malformed")
        coordinates = match.get("coordinates") or {}
        try:
            coords = Coordinates(lat=float(coordinates["y"]), lng=float(coordinates["x"]))
        except (KeyError, TypeError, ValueError):
            coords = None

        return CensusLocation(
            city=components.get("city") or city,
            state=components.get("state") or state or "",
            county=components.get("county") or "",
            zip_code=components.get("zip") or None,
            coordinates=coords,
        )

    async def fetch_demographics(self, location: CensusLocation) -> CensusDemographics | None:
        """ACS 5-year figures for the first place whose name contains the city."""
        params = {
            "get": ",".join(("NAME", *ACS_VARIABLES)),
            "for": "place:*",
            "in": "state:*",
        }
        if self.settings.CENSUS_API_KEY:
            params["key"] = self.settings.CENSUS_API_KEY

        response = await self.client.get(
            f"{self.settings.CENSUS_BASE_URL}/{self.settings.CENSUS_ACS_YEAR}/acs/acs5",
            params=params,
            timeout=self.settings.CENSUS_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        rows = response.json()
        if not isinstance(rows, list) or len(rows) < 2:
            raise CensusLookupError("ACS response has no data rows")

        needle = location.city.lower()
        for row in rows[1:]:
            if not (isinstance(row, list) and row and isinstance(row[0], str)):
                continue
            if needle in row[0].lower():
                if len(row) < len(ACS_VARIABLES) + 1:
                    raise CensusLookupError(f"ACS row for {row[0]!r} is truncated")
                return parse_demographics_row(row)
        return None

    async def get_area_insights(
        self,
        city: str,
        state: str | None = None,
        locale: Locale = Locale.EN,
    ) -> CensusLookupResult:
        if not city or not city.strip():
            return CensusLookupResult(
                success=False,
                error="City name is required",
                fallback_data=build_fallback_insights(city or "", state, locale),
            )

        key = self.cache_key(city, state)
        cached = self.cache.get(key)
        if cached is not None:
            location, demographics = cached
            logger.debug("Census cache hit for %s", key)
            return CensusLookupResult(
                success=True, data=self._insights(location, demographics, locale)
            )

        try:
            location = await self.geocode(city, state)
            if location is None:
                return CensusLookupResult(
                    success=False,
                    error="Location not found",
                    fallback_data=build_fallback_insights(city, state, locale),
                )

            demographics = await self.fetch_demographics(location)
            if demographics is None:
                return CensusLookupResult(
                    success=False,
                    error="Demographics data not available",
                    fallback_data=build_fallback_insights(city, state, locale, location),
                )
        except (httpx.HTTPError, ValueError, CensusLookupError) as exc:
            logger.warning("Census lookup failed for %s", key, exc_info=True)
            return CensusLookupResult(
                success=False,
                error=str(exc) or type(exc).__name__,
                fallback_data=build_fallback_insights(city, state, locale),
            )

        self.cache.set(key, (location, demographics))
        logger.info("Census insights loaded for %s", key)
        return CensusLookupResult(success=True, data=self._insights(location, demographics, locale))

    async def validate_city(self, city: str, state: str | None = None) -> CityValidation:
        try:
            location = await self.geocode(city, state)
        except (httpx.HTTPError, ValueError, CensusLookupError):
            logger.warning("City validation failed for %s", city, exc_info=True)
            return CityValidation(is_valid=False)
        if location is None:
            return CityValidation(is_valid=False)
        return CityValidation(
            is_valid=True,
            standardized_name=location.city,
            state=location.state,
            county=location.county,
        )

    async def compare_areas(
        self,
        cities: list[tuple[str, str | None]],
        locale: Locale = Locale.EN,
    ) -> list[CensusAreaInsights]:
        """Insights for every city that resolved; failed lookups are left out."""
        results = await asyncio.gather(
            *(self.get_area_insights(city, state, locale) for city, state in cities)
        )
        return [result.data for result in results if result.success and result.data]

    @staticmethod
    def _insights(
        location: CensusLocation, demographics: CensusDemographics, locale: Locale
    ) -> CensusAreaInsights:
        return CensusAreaInsights(
            location=location,
            demographics=demographics,
            economic_indicators=derive_economic_indicators(demographics),
            recommendations=build_recommendations(demographics, locale),
            data_quality=DataQuality.HIGH,
            last_updated=datetime.now(UTC),
        )
