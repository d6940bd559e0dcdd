"""Permit and zoning record schemas.

These mirror the city data feeds, so keys stay snake_case on the wire.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Permit(BaseModel):
    """One permit or entitlement filing."""

    type: str
    status: str
    reference_number: str
    filing_date: str
    last_update: str
    description: str
    note: Optional[str] = None


class PermitReport(BaseModel):
    """Permits found for an address."""

    city: str
    address: str
    permits: list[Permit] = Field(default_factory=list)


class Coordinates(BaseModel):
    lat: float
    lng: float


class ZoningInfo(BaseModel):
    zoning_classification: str
    description: str


class ParcelInfo(BaseModel):
    pin: str
    property_class: str
    township_name: str
    square_footage: int


class ZoningRecord(BaseModel):
    """Zoning and parcel data for a looked-up address."""

    coordinates: Coordinates
    zoning: ZoningInfo
    parcel: ParcelInfo
    address_queried: Optional[str] = None


class Parcel(BaseModel):
    """A parcel with its zoning attributes."""

    address: str
    parcel_id: str
    zoning: str
    overlays: list[str] = Field(default_factory=list)
    lot_size: int
    opportunity_zone: bool
    distance_to_transit: Optional[float] = None


class ParcelFilters(BaseModel):
    """Criteria a parcel must meet; unset criteria are ignored."""

    zoning_districts: Optional[list[str]] = None
    min_lot_size: Optional[float] = None
    max_lot_size: Optional[float] = None
    overlays: Optional[list[str]] = None
    opportunity_zone: Optional[bool] = None
    proximity_to_transit: Optional[float] = Field(default=None, description="Maximum miles to transit")


class SearchBoundary(BaseModel):
    """Area to search within. Only the neighborhood is applied."""

    center: Optional[Coordinates] = None
    radius: Optional[float] = None
    neighborhood: Optional[str] = None


class ZoningFilterRequest(BaseModel):
    city: Optional[str] = None
    filters: Optional[ParcelFilters] = None
    boundary: Optional[SearchBoundary] = None


class ZoningFilterResult(BaseModel):
    """Parcels that passed every filter."""

    city: str
    parcels_found: int
    parcels: list[Parcel] = Field(default_factory=list)
    filter_applied: dict
