"""Zoning and parcel lookup by address."""

import logging
from typing import Optional

from capmatch.models import ZoningRecord
from capmatch.reference import FALLBACK_ZONING, ZONING_RECORDS

logger = logging.getLogger(__name__)


class ZoningLookup:
    """Resolve an address to its zoning classification and parcel data."""

    def __init__(
        self,
        records: Optional[dict[str, dict]] = None,
        fallback: Optional[dict] = None,
    ):
        records = ZONING_RECORDS if records is None else records
        self.records = {addr: ZoningRecord.model_validate(r) for addr, r in records.items()}
        self.fallback = ZoningRecord.model_validate(fallback or FALLBACK_ZONING)

    def find(self, address: str) -> Optional[str]:
        """Return the first known address contained in the query."""
        query = address.lower()
        for known in self.records:
            if known.lower() in query:
                return known
        return None

    def lookup(self, address: str) -> ZoningRecord:
        """Zoning record for ``address``; unknown addresses get the fallback record."""
        matched = self.find(address)
        if matched is None:
            logger.debug(f"No zoning record for '{address}', using fallback")
            record = self.fallback
        else:
            record = self.records[matched]
        return record.model_copy(update={"address_queried": address})
