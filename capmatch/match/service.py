"""Match a deal against the investor reference list."""

import logging
from collections.abc import Sequence
from typing import Any, Optional

from capmatch.config import settings
from capmatch.models import InvestorProfile, MatchResponse
from capmatch.reference import get_investors
from .scorer import MatchScorer
from .validation import validate_deal

logger = logging.getLogger(__name__)


def match_deal(
    payload: dict[str, Any],
    investors: Optional[Sequence[InvestorProfile]] = None,
    top_n: Optional[int] = None,
    threshold: Optional[int] = None,
) -> MatchResponse:
    """Validate a deal, score all investors and summarize the best matches.

    Args:
        payload: Raw deal object as received from the client
        investors: Profiles to score; defaults to the reference list
        top_n: Number of matches to return; defaults to ``settings.top_matches``
        threshold: Scores strictly above this count as good matches

    Returns:
        The echoed deal, the top matches and the count of good matches
    """
    deal = validate_deal(payload)
    investors = get_investors() if investors is None else investors
    top_n = settings.top_matches if top_n is None else top_n
    threshold = settings.good_match_threshold if threshold is None else threshold

    logger.debug(f"Matching {deal.asset_type} deal in {deal.market} against {len(investors)} investors")

    results = MatchScorer().rank(deal, investors)
    total_matches = sum(1 for r in results if r.match_score > threshold)

    logger.info(f"Scored {len(results)} investors, {total_matches} above {threshold}")

    return MatchResponse(
        deal={**payload, "assetType": deal.asset_type},
        matches=results[:top_n],
        total_matches=total_matches,
    )
