"""Mock permit source backed by the reference filings."""

import logging
from typing import Optional

from capmatch.models import Permit
from capmatch.reference import PERMIT_FILINGS
from .base import PermitSource

logger = logging.getLogger(__name__)


class MockPermitSource(PermitSource):
    """Permit source that returns predefined filings for one city."""

    name = "mock"

    def __init__(self, city: str, filings: Optional[list[dict]] = None):
        self.city = self.normalize_city(city)
        if filings is None:
            filings = PERMIT_FILINGS.get(self.city, [])
        self._permits = [Permit.model_validate(f) for f in filings]

    def lookup(self, address: str) -> list[Permit]:
        """Return the city's filings; the address does not narrow them."""
        logger.info(f"Looking up {self.city} permit data for: {address}")
        return [p.model_copy() for p in self._permits]
