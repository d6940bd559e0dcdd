"""Exceptions raised by the matching and reference-data services."""

from typing import Any


class CapMatchError(Exception):
    """Base error carrying an HTTP status and a client-facing message."""

    status_code: int = 500

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, **self.context}


class DealValidationError(CapMatchError):
    """A required deal field is missing or unusable."""

    status_code = 400

    def __init__(self, field: str, reason: str = "Missing required field"):
        super().__init__(f"{reason}: {field}", field=field)
        self.field = field


class MarketNotFoundError(CapMatchError):
    """No market averages exist for the requested city or asset type."""

    status_code = 404


class UnsupportedCityError(CapMatchError):
    """The city has no entitlement or permit data."""

    status_code = 400

    def __init__(self, city: str, message: str = "Unsupported city."):
        super().__init__(message, city=city)
        self.city = city
