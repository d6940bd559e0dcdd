"""Investor matching engine."""

from .scorer import MatchScorer
from .validation import validate_deal
from .service import match_deal

__all__ = ["MatchScorer", "validate_deal", "match_deal"]
