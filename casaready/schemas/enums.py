# This project was developed with assistance from AI tools.
"""
Domain enums for the home-buying wizard and lead engine.

Wizard option values match the strings the front end submits, so they can be
used directly as request payload values.
"""

import enum


class Locale(str, enum.Enum):
    EN = "en"
    ES = "es"


class Timeline(str, enum.Enum):
    ZERO_TO_THREE = "0-3"
    THREE_TO_SIX = "3-6"
    SIX_TO_TWELVE = "6-12"
    TWELVE_PLUS = "12+"

    @property
    def label(self) -> str:
        return f"{self.value} months"

    @property
    def is_long_term(self) -> bool:
        return self is Timeline.TWELVE_PLUS


class CreditBand(str, enum.Enum):
    """Credit score ranges offered by the wizard, lowest first."""

    VERY_POOR = "300-579"
    FAIR = "580-669"
    GOOD = "670-739"
    VERY_GOOD = "740-799"
    EXCEPTIONAL = "800-850"
    UNKNOWN = "unknown"


class EmploymentType(str, enum.Enum):
    W2 = "w2"
    CONTRACTOR_1099 = "1099"
    SELF_EMPLOYED = "self-employed"
    MIXED = "mixed"
    RETIRED = "retired"
    ITIN = "itin"
    OTHER = "other"

    @property
    def is_self_employed(self) -> bool:
        """1099 contractors are underwritten like self-employed borrowers."""
        return self in (EmploymentType.SELF_EMPLOYED, EmploymentType.CONTRACTOR_1099)


class BuyerTag(str, enum.Enum):
    FIRST_TIME = "first-time"
    VETERAN = "veteran"
    INVESTOR = "investor"
    RELOCATING = "relocating"
    DOWNSIZING = "downsizing"
    UPSIZING = "upsizing"
    REPEAT = "repeat"


class LocationPriority(str, enum.Enum):
    SCHOOLS = "schools"
    COMMUTE = "commute"
    SAFETY = "safety"
    WALKABILITY = "walkability"
    SHOPPING = "shopping"
    PARKS = "parks"
    NIGHTLIFE = "nightlife"
    DIVERSITY = "diversity"


class CreditTier(str, enum.Enum):
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"
    UNKNOWN = "UNKNOWN"

    @property
    def needs_improvement(self) -> bool:
        return self in (CreditTier.FAIR, CreditTier.POOR)


class EmploymentStability(str, enum.Enum):
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    MODERATE = "MODERATE"
    REQUIRES_REVIEW = "REQUIRES_REVIEW"


class IncomeLevel(str, enum.Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class LeadCategory(str, enum.Enum):
    ITIN = "ITIN"
    SELF_EMPLOYED = "SELF_EMPLOYED"
    W2 = "W2"
    MILITARY = "MILITARY"
    RETIRED = "RETIRED"
    MIXED = "MIXED"
    HIGH_NET_WORTH = "HIGH_NET_WORTH"
    STANDARD = "STANDARD"


class LeadType(str, enum.Enum):
    # ITIN borrowers
    ITIN_FIRST_TIME = "ITIN_FIRST_TIME"
    ITIN_INVESTOR = "ITIN_INVESTOR"
    ITIN_UPSIZING = "ITIN_UPSIZING"

    # Self-employed / 1099
    SELF_EMPLOYED_FIRST_TIME = "SELF_EMPLOYED_FIRST_TIME"
    SELF_EMPLOYED_INVESTOR = "SELF_EMPLOYED_INVESTOR"
    SELF_EMPLOYED_UPSIZING = "SELF_EMPLOYED_UPSIZING"

    # W2 employees
    W2_FIRST_TIME_LOW_CREDIT = "W2_FIRST_TIME_LOW_CREDIT"
    W2_FIRST_TIME_GOOD_CREDIT = "W2_FIRST_TIME_GOOD_CREDIT"
    W2_INVESTOR = "W2_INVESTOR"
    W2_UPSIZING = "W2_UPSIZING"

    # Special categories
    MILITARY_VETERAN_FIRST_TIME = "MILITARY_VETERAN_FIRST_TIME"
    MILITARY_VETERAN_UPSIZING = "MILITARY_VETERAN_UPSIZING"
    RETIRED_BUYER = "RETIRED_BUYER"
    HIGH_NET_WORTH = "HIGH_NET_WORTH"
    MIXED_INCOME_BUYER = "MIXED_INCOME_BUYER"

    STANDARD_BUYER = "STANDARD_BUYER"


class DtiStatus(str, enum.Enum):
    DEFINED = "defined"
    UNDEFINED = "undefined"


class DataQuality(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class MarketTrend(str, enum.Enum):
    GROWING = "growing"
    STABLE = "stable"
    DECLINING = "declining"
