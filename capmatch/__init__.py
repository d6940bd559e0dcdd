"""Capital matching API for real-estate deals and investors."""

__version__ = "0.1.0"
