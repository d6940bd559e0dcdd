"""Entitlement type and permit tracking per city."""

import logging
from typing import Optional

from capmatch.errors import UnsupportedCityError
from capmatch.models import PermitReport
from capmatch.reference import ENTITLEMENT_TYPES
from .base import PermitSource
from .mock import MockPermitSource

logger = logging.getLogger(__name__)


def supported_cities() -> list[str]:
    """Cities with entitlement data, in display order."""
    return list(ENTITLEMENT_TYPES)


def entitlement_types(city: str) -> list[str]:
    """Entitlement types filed in ``city``.

    Raises:
        UnsupportedCityError: if the city has no entitlement data
    """
    types = ENTITLEMENT_TYPES.get(PermitSource.normalize_city(city))
    if types is None:
        raise UnsupportedCityError(city)
    return list(types)


class PermitTracker:
    """Route permit lookups to the source registered for each city."""

    def __init__(self, sources: Optional[dict[str, PermitSource]] = None):
        if sources is None:
            sources = {city: MockPermitSource(city) for city in supported_cities()}
        self.sources = {PermitSource.normalize_city(c): s for c, s in sources.items()}

    def track(self, city: str, address: str) -> PermitReport:
        """Collect permits for an address in a supported city."""
        source = self.sources.get(PermitSource.normalize_city(city))
        if source is None:
            logger.info(f"No permit source for city: {city}")
            raise UnsupportedCityError(city)

        permits = source.lookup(address)
        logger.info(f"Found {len(permits)} permits for {address} via {source.name}")
        return PermitReport(city=city, address=address, permits=permits)
