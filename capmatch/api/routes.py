"""API routes for investor matching and reference lookups."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, HTTPException, Query

from capmatch.entitlements import PermitTracker, entitlement_types, supported_cities
from capmatch.market import MarketComparator
from capmatch.match import match_deal
from capmatch.models import (
    CamelModel,
    InvestorProfile,
    MarketComparison,
    MatchResponse,
    PermitReport,
    ZoningFilterRequest,
    ZoningFilterResult,
    ZoningRecord,
)
from capmatch.reference import get_investors
from capmatch.zoning import ParcelFilter, ZoningLookup

logger = logging.getLogger(__name__)

router = APIRouter()

# Shared across requests; the reference data behind them is read-only
market_comparator = MarketComparator()
permit_tracker = PermitTracker()
zoning_lookup = ZoningLookup()
parcel_filter = ParcelFilter()


class SupportedCitiesResponse(CamelModel):
    """Cities with entitlement data."""
    supported_cities: list[str]


class EntitlementTypesResponse(CamelModel):
    """Entitlement types for a city."""
    city: str
    entitlement_types: list[str]


@router.post("/investor-match", response_model=MatchResponse)
async def investor_match(deal: Any = Body(...)):
    """Score a deal against every investor and return the top matches."""
    logger.debug(f"Received deal data: {deal}")
    response = match_deal(deal)
    logger.info(f"Sending response with {len(response.matches)} matches")
    return response


@router.get("/investors", response_model=list[InvestorProfile])
async def list_investors():
    """List the investor profiles used for matching."""
    return list(get_investors())


@router.get(
    "/market-comparison",
    response_model=MarketComparison,
    response_model_exclude_none=True,
)
async def market_comparison(
    city: Optional[str] = None,
    asset_type: Optional[str] = Query(default=None, alias="assetType"),
    cap_rate: Optional[float] = Query(default=None, alias="capRate"),
    rent_per_sqft: Optional[float] = Query(default=None, alias="rentPerSqFt"),
    price_per_sqft: Optional[float] = Query(default=None, alias="pricePerSqFt"),
    price_per_unit: Optional[float] = Query(default=None, alias="pricePerUnit"),
):
    """Compare deal metrics with the market averages for a city and asset type."""
    if not city or not asset_type:
        raise HTTPException(status_code=400, detail="City and assetType parameters are required")

    return market_comparator.compare(
        city,
        asset_type,
        cap_rate=cap_rate,
        rent_per_sqft=rent_per_sqft,
        price_per_sqft=price_per_sqft,
        price_per_unit=price_per_unit,
    )


@router.get("/supported-cities", response_model=SupportedCitiesResponse)
async def get_supported_cities():
    """List cities with entitlement tracking."""
    return SupportedCitiesResponse(supported_cities=supported_cities())


@router.get("/entitlement-types", response_model=EntitlementTypesResponse)
async def get_entitlement_types(city: Optional[str] = None):
    """List entitlement types available in a city."""
    if not city:
        raise HTTPException(status_code=400, detail="City parameter is required.")

    return EntitlementTypesResponse(city=city.lower(), entitlement_types=entitlement_types(city))


@router.get("/entitlement-tracking", response_model=PermitReport, response_model_exclude_none=True)
async def entitlement_tracking(city: Optional[str] = None, address: Optional[str] = None):
    """Look up permit filings for an address."""
    if not city or not address:
        raise HTTPException(status_code=400, detail="Both city and address are required.")

    return permit_tracker.track(city, address)


@router.get("/zoning-mock", response_model=ZoningRecord)
async def zoning_mock(address: Optional[str] = None):
    """Look up zoning and parcel data for an address."""
    if not address:
        raise HTTPException(status_code=400, detail="Address parameter is required")

    return zoning_lookup.lookup(address)


@router.post("/zoning-filter", response_model=ZoningFilterResult, response_model_exclude_none=True)
async def zoning_filter(request: ZoningFilterRequest):
    """Search a city's parcels by zoning district, lot size, overlays and transit distance."""
    if not request.city:
        raise HTTPException(status_code=400, detail="City parameter is required")
    if request.filters is None:
        raise HTTPException(status_code=400, detail="Filters parameter is required")

    return parcel_filter.search(request.city, request.filters, request.boundary)
