"""Static reference data loaded once per process."""

from .investors import DEFAULT_INVESTORS, load_investors, get_investors
from .markets import MARKET_DATA
from .entitlements import ENTITLEMENT_TYPES, PERMIT_FILINGS
from .zoning import ZONING_RECORDS, FALLBACK_ZONING, PARCELS, NEIGHBORHOOD_STREETS

__all__ = [
    "DEFAULT_INVESTORS",
    "load_investors",
    "get_investors",
    "MARKET_DATA",
    "ENTITLEMENT_TYPES",
    "PERMIT_FILINGS",
    "ZONING_RECORDS",
    "FALLBACK_ZONING",
    "PARCELS",
    "NEIGHBORHOOD_STREETS",
]
