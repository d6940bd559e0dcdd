"""Match result schemas."""

from typing import Any

from pydantic import Field

from .base import CamelModel


class MatchDetails(CamelModel):
    """Full-credit flags per criterion; partial credit never sets a flag."""

    asset_type_match: bool
    market_match: bool
    investment_size_match: bool
    return_expectation_match: bool
    risk_profile_match: bool


class MatchResult(CamelModel):
    """Score of one investor against a deal."""

    investor_id: str
    investor_name: str
    match_score: int = Field(ge=0, le=100)
    match_details: MatchDetails


class MatchResponse(CamelModel):
    """Top matches for a deal plus the overall count of good matches."""

    deal: dict[str, Any]
    matches: list[MatchResult]
    total_matches: int
