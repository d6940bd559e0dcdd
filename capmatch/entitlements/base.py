"""Abstract base class for permit data sources."""

from abc import ABC, abstractmethod

from capmatch.models import Permit


class PermitSource(ABC):
    """Abstract interface for a city's permit and entitlement records."""

    name: str = "base"

    @abstractmethod
    def lookup(self, address: str) -> list[Permit]:
        """
        Find permit filings for an address.

        Args:
            address: Street address as entered by the user

        Returns:
            List of permits on file, newest filings not guaranteed first
        """
        pass

    @staticmethod
    def normalize_city(city: str) -> str:
        """Normalize a city name for table lookups."""
        return " ".join(city.split()).lower()
