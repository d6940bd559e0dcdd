"""Deal/investor compatibility scoring."""

import logging
import math
from collections.abc import Sequence

from capmatch.models import (
    Deal,
    InvestorProfile,
    MatchDetails,
    MatchResult,
    RISK_LEVELS,
)

logger = logging.getLogger(__name__)


class MatchScorer:
    """Score investors against a deal on a 0-100 scale.

    Each criterion contributes up to a fixed number of points; the total is
    rounded once at the end, so partial credit of 7.5 survives until then.
    """

    WEIGHTS = {
        "asset_type": 30,
        "market": 25,
        "investment_size": 20,
        "return_expectation": 15,
        "risk_profile": 10,
    }

    # Tolerance band around the investor's size range before credit drops to zero
    SIZE_LOWER_TOLERANCE = 0.8
    SIZE_UPPER_TOLERANCE = 1.2
    RETURN_TOLERANCE = 0.8
    PARTIAL_CREDIT = 0.5

    def score(self, deal: Deal, investor: InvestorProfile) -> int:
        """Compute the match score of one investor for a deal."""
        breakdown = self.score_breakdown(deal, investor)
        return _round_half_up(sum(breakdown.values()))

    def score_breakdown(self, deal: Deal, investor: InvestorProfile) -> dict[str, float]:
        """Points awarded per criterion, before rounding."""
        return {
            "asset_type": self._score_asset_type(deal, investor),
            "market": self._score_market(deal, investor),
            "investment_size": self._score_investment_size(deal, investor),
            "return_expectation": self._score_return(deal, investor),
            "risk_profile": self._score_risk(deal, investor),
        }

    def match_details(self, deal: Deal, investor: InvestorProfile) -> MatchDetails:
        """Full-credit flags for each criterion."""
        return MatchDetails(
            asset_type_match=investor.prefers_asset_type(deal.asset_type),
            market_match=investor.prefers_market(deal.market),
            investment_size_match=_in_range(deal, investor),
            return_expectation_match=deal.expected_return >= investor.minimum_return_expectation,
            risk_profile_match=deal.risk_profile == investor.risk_profile,
        )

    def rank(
        self,
        deal: Deal,
        investors: Sequence[InvestorProfile],
    ) -> list[MatchResult]:
        """Score every investor and return results, highest score first.

        Ties keep the order of ``investors``.
        """
        results = [
            MatchResult(
                investor_id=investor.id,
                investor_name=investor.name,
                match_score=self.score(deal, investor),
                match_details=self.match_details(deal, investor),
            )
            for investor in investors
        ]
        # list.sort is stable
        results.sort(key=lambda r: r.match_score, reverse=True)

        for result in results:
            logger.debug(f"{result.investor_name}: {result.match_score}")

        return results

    def _score_asset_type(self, deal: Deal, investor: InvestorProfile) -> float:
        if investor.prefers_asset_type(deal.asset_type):
            return self.WEIGHTS["asset_type"]
        return 0.0

    def _score_market(self, deal: Deal, investor: InvestorProfile) -> float:
        if investor.prefers_market(deal.market):
            return self.WEIGHTS["market"]
        return 0.0

    def _score_investment_size(self, deal: Deal, investor: InvestorProfile) -> float:
        weight = self.WEIGHTS["investment_size"]
        amount = deal.investment_amount

        if _in_range(deal, investor):
            return weight

        too_small = amount < investor.minimum_investment * self.SIZE_LOWER_TOLERANCE
        too_large = amount > investor.maximum_investment * self.SIZE_UPPER_TOLERANCE
        if too_small or too_large:
            return 0.0

        return weight * self.PARTIAL_CREDIT

    def _score_return(self, deal: Deal, investor: InvestorProfile) -> float:
        weight = self.WEIGHTS["return_expectation"]
        minimum = investor.minimum_return_expectation

        if deal.expected_return >= minimum:
            return weight
        if deal.expected_return >= minimum * self.RETURN_TOLERANCE:
            return weight * self.PARTIAL_CREDIT
        return 0.0

    def _score_risk(self, deal: Deal, investor: InvestorProfile) -> float:
        weight = self.WEIGHTS["risk_profile"]

        if deal.risk_profile == investor.risk_profile:
            return weight

        # Investor tolerates exactly one level more risk than the deal carries
        deal_level = RISK_LEVELS.index(deal.risk_profile)
        investor_level = RISK_LEVELS.index(investor.risk_profile)
        if investor_level - deal_level == 1:
            return weight * self.PARTIAL_CREDIT
        return 0.0


def _in_range(deal: Deal, investor: InvestorProfile) -> bool:
    return investor.minimum_investment <= deal.investment_amount <= investor.maximum_investment


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
