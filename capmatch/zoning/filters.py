"""Parcel search by zoning criteria."""

import logging
from typing import Optional

from capmatch.errors import UnsupportedCityError
from capmatch.models import Parcel, ParcelFilters, SearchBoundary, ZoningFilterResult
from capmatch.reference import NEIGHBORHOOD_STREETS, PARCELS

logger = logging.getLogger(__name__)


class ParcelFilter:
    """Filter a city's parcels on zoning district, lot size, overlays and location."""

    def __init__(self, parcels: Optional[dict[str, list[dict]]] = None):
        parcels = PARCELS if parcels is None else parcels
        self.parcels = {
            city.lower(): [Parcel.model_validate(p) for p in city_parcels]
            for city, city_parcels in parcels.items()
        }

    @property
    def supported_cities(self) -> list[str]:
        return list(self.parcels)

    def search(
        self,
        city: str,
        filters: ParcelFilters,
        boundary: Optional[SearchBoundary] = None,
    ) -> ZoningFilterResult:
        """Parcels in ``city`` passing every filter that is set.

        Raises:
            UnsupportedCityError: if there is no parcel data for the city
        """
        candidates = self.parcels.get(city.lower())
        if candidates is None:
            supported = ", ".join(c.title() for c in self.supported_cities)
            raise UnsupportedCityError(
                city,
                message=f"City '{city}' is not supported. Supported cities: {supported}.",
            )

        matched = [p for p in candidates if self.matches(p, filters, boundary)]
        logger.info(f"{len(matched)} of {len(candidates)} parcels in {city} passed filters")

        return ZoningFilterResult(
            city=city,
            parcels_found=len(matched),
            parcels=matched,
            filter_applied=filters.model_dump(exclude_unset=True),
        )

    def matches(
        self,
        parcel: Parcel,
        filters: ParcelFilters,
        boundary: Optional[SearchBoundary] = None,
    ) -> bool:
        """Check one parcel against the filters and boundary."""
        if filters.zoning_districts and parcel.zoning not in filters.zoning_districts:
            return False

        if filters.min_lot_size is not None and parcel.lot_size < filters.min_lot_size:
            return False
        if filters.max_lot_size is not None and parcel.lot_size > filters.max_lot_size:
            return False

        # Any one requested overlay is enough
        if filters.overlays and not any(o in parcel.overlays for o in filters.overlays):
            return False

        if filters.opportunity_zone is not None and parcel.opportunity_zone != filters.opportunity_zone:
            return False

        if filters.proximity_to_transit is not None:
            if parcel.distance_to_transit is None or parcel.distance_to_transit > filters.proximity_to_transit:
                return False

        if boundary and boundary.neighborhood:
            return self._in_neighborhood(parcel, boundary.neighborhood)

        return True

    @staticmethod
    def _in_neighborhood(parcel: Parcel, neighborhood: str) -> bool:
        streets = NEIGHBORHOOD_STREETS.get(neighborhood.lower())
        if streets is None:
            # Unknown neighborhoods do not narrow the search
            return True
        address = parcel.address.lower()
        return any(street in address for street in streets)
