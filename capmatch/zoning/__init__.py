"""Zoning lookups and parcel search."""

from .lookup import ZoningLookup
from .filters import ParcelFilter

__all__ = ["ZoningLookup", "ParcelFilter"]
