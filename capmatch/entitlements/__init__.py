"""Entitlement and permit tracking."""

from .base import PermitSource
from .mock import MockPermitSource
from .tracker import PermitTracker, supported_cities, entitlement_types

__all__ = [
    "PermitSource",
    "MockPermitSource",
    "PermitTracker",
    "supported_cities",
    "entitlement_types",
]
