"""Data models for the Capital Match API."""

from .base import CamelModel
from .deal import (
    Deal,
    InvestorProfile,
    RiskProfile,
    RISK_LEVELS,
    REQUIRED_DEAL_FIELDS,
)
from .match import MatchDetails, MatchResult, MatchResponse
from .market import MarketStats, MetricComparison, MarketContext, MarketComparison
from .records import (
    Permit,
    PermitReport,
    Coordinates,
    ZoningInfo,
    ParcelInfo,
    ZoningRecord,
    Parcel,
    ParcelFilters,
    SearchBoundary,
    ZoningFilterRequest,
    ZoningFilterResult,
)

__all__ = [
    "CamelModel",
    "Deal",
    "InvestorProfile",
    "RiskProfile",
    "RISK_LEVELS",
    "REQUIRED_DEAL_FIELDS",
    "MatchDetails",
    "MatchResult",
    "MatchResponse",
    "MarketStats",
    "MetricComparison",
    "MarketContext",
    "MarketComparison",
    "Permit",
    "PermitReport",
    "Coordinates",
    "ZoningInfo",
    "ParcelInfo",
    "ZoningRecord",
    "Parcel",
    "ParcelFilters",
    "SearchBoundary",
    "ZoningFilterRequest",
    "ZoningFilterResult",
]
