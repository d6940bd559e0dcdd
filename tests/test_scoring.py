"""Tests for match scoring."""

import pytest

from capmatch.match.scorer import MatchScorer
from capmatch.models import Deal, InvestorProfile
from capmatch.reference import load_investors


def make_deal(**kwargs) -> Deal:
    """Create test deal with defaults."""
    defaults = {
        "asset_type": "multifamily",
        "market": "Chicago",
        "investment_amount": 4_000_000,
        "expected_return": 9,
        "risk_profile": "moderate",
    }
    defaults.update(kwargs)
    return Deal(**defaults)


def make_investor(**kwargs) -> InvestorProfile:
    """Create test investor profile with defaults."""
    defaults = {
        "id": "TEST001",
        "name": "Test Capital",
        "minimum_investment": 2_000_000,
        "maximum_investment": 50_000_000,
        "preferred_asset_types": ["multifamily", "student housing"],
        "preferred_markets": ["Chicago", "Austin"],
        "minimum_return_expectation": 8,
        "risk_profile": "moderate",
        "investment_horizon": "5-10 years",
    }
    defaults.update(kwargs)
    return InvestorProfile(**defaults)


def investor_by_name(name: str) -> InvestorProfile:
    return next(inv for inv in load_investors() if inv.name.startswith(name))


class TestMatchScorer:
    """Tests for the per-investor score."""

    def test_perfect_match(self):
        scorer = MatchScorer()
        assert scorer.score(make_deal(), make_investor()) == 100

    def test_no_match(self):
        scorer = MatchScorer()
        deal = make_deal(
            asset_type="hotel",
            market="Boston",
            investment_amount=500_000,
            expected_return=2,
            risk_profile="high",
        )
        investor = make_investor(risk_profile="low")
        assert scorer.score(deal, investor) == 0

    def test_greystar_example(self):
        # Full credit on four criteria; deal risk is above the investor's tolerance
        scorer = MatchScorer()
        assert scorer.score(make_deal(), investor_by_name("Greystar")) == 90

    def test_brookfield_example(self):
        # Only the return is near the minimum: 7.5 points, rounded up
        scorer = MatchScorer()
        assert scorer.score(make_deal(), investor_by_name("Brookfield")) == 8

    def test_half_points_round_up(self):
        scorer = MatchScorer()
        # 30 + 25 + 10 (near range) + 7.5 (near return) + 10 = 82.5
        assert scorer.score(make_deal(), investor_by_name("Hines")) == 83

    def test_asset_type_case_insensitive(self):
        scorer = MatchScorer()
        deal = make_deal(asset_type="MULTIFAMILY")
        assert deal.asset_type == "multifamily"
        assert scorer.score_breakdown(deal, make_investor())["asset_type"] == 30

    def test_market_case_insensitive(self):
        scorer = MatchScorer()
        deal = make_deal(market="chicago")
        assert scorer.score_breakdown(deal, make_investor())["market"] == 25


class TestInvestmentSize:
    """Tests for the investment size criterion."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (2_000_000, 20),     # at minimum
            (50_000_000, 20),    # at maximum
            (1_600_000, 10),     # exactly 0.8 x minimum
            (1_599_999, 0),      # just below the tolerance band
            (60_000_000, 10),    # exactly 1.2 x maximum
            (60_000_001, 0),     # just above the tolerance band
        ],
    )
    def test_size_bands(self, amount, expected):
        scorer = MatchScorer()
        deal = make_deal(investment_amount=amount)
        assert scorer.score_breakdown(deal, make_investor())["investment_size"] == expected


class TestReturnExpectation:
    """Tests for the return criterion."""

    @pytest.mark.parametrize(
        "expected_return,points",
        [(12, 15), (10, 15), (8, 7.5), (7.99, 0), (0, 0)],
    )
    def test_return_bands(self, expected_return, points):
        scorer = MatchScorer()
        deal = make_deal(expected_return=expected_return)
        investor = make_investor(minimum_return_expectation=10)
        assert scorer.score_breakdown(deal, investor)["return_expectation"] == points


class TestRiskProfile:
    """Tests for the risk criterion."""

    @pytest.mark.parametrize(
        "deal_risk,investor_risk,points",
        [
            ("low", "low", 10),
            ("moderate", "moderate", 10),
            ("high", "high", 10),
            ("low", "moderate", 5),
            ("moderate", "high", 5),
            ("low", "high", 0),
            ("moderate", "low", 0),
            ("high", "moderate", 0),
            ("high", "low", 0),
        ],
    )
    def test_risk_tolerance(self, deal_risk, investor_risk, points):
        scorer = MatchScorer()
        deal = make_deal(risk_profile=deal_risk)
        investor = make_investor(risk_profile=investor_risk)
        assert scorer.score_breakdown(deal, investor)["risk_profile"] == points


class TestScoreProperties:
    """Invariants that hold for every deal and investor."""

    def test_score_is_bounded_integer(self):
        scorer = MatchScorer()
        for investor in load_investors():
            for asset in ["multifamily", "office", "hotel"]:
                for amount in [1_000_000, 9_000_000, 250_000_000]:
                    for risk in ["low", "moderate", "high"]:
                        deal = make_deal(asset_type=asset, investment_amount=amount, risk_profile=risk)
                        score = scorer.score(deal, investor)
                        assert isinstance(score, int)
                        assert 0 <= score <= 100

    def test_preference_order_does_not_matter(self):
        scorer = MatchScorer()
        deal = make_deal(asset_type="office", market="Austin")
        forward = make_investor(
            preferred_asset_types=["retail", "office", "multifamily"],
            preferred_markets=["Austin", "Chicago"],
        )
        reverse = make_investor(
            preferred_asset_types=["multifamily", "office", "retail"],
            preferred_markets=["Chicago", "Austin"],
        )
        assert scorer.score(deal, forward) == scorer.score(deal, reverse)

    def test_higher_return_never_lowers_score(self):
        scorer = MatchScorer()
        for investor in load_investors():
            previous = -1
            for expected_return in [0, 4, 7.9, 8, 8.8, 9.6, 10, 11, 12, 15, 20]:
                score = scorer.score(make_deal(expected_return=expected_return), investor)
                assert score >= previous
                previous = score

    def test_score_is_idempotent(self):
        scorer = MatchScorer()
        deal = make_deal()
        investor = investor_by_name("Starwood")
        assert scorer.score(deal, investor) == scorer.score(deal, investor)


class TestMatchDetails:
    """Tests for the per-criterion match flags."""

    def test_partial_credit_is_not_a_match(self):
        scorer = MatchScorer()
        details = scorer.match_details(make_deal(), investor_by_name("Hines"))
        assert details.asset_type_match
        assert details.market_match
        assert not details.investment_size_match
        assert not details.return_expectation_match
        assert details.risk_profile_match

    def test_details_serialize_camel_case(self):
        scorer = MatchScorer()
        details = scorer.match_details(make_deal(), make_investor())
        assert details.model_dump(by_alias=True) == {
            "assetTypeMatch": True,
            "marketMatch": True,
            "investmentSizeMatch": True,
            "returnExpectationMatch": True,
            "riskProfileMatch": True,
        }


class TestRanking:
    """Tests for ranking investors."""

    def test_rank_default_investors(self):
        scorer = MatchScorer()
        results = scorer.rank(make_deal(), load_investors())
        assert [r.investor_id for r in results] == ["INV004", "INV005", "INV003", "INV001", "INV002"]
        assert [r.match_score for r in results] == [90, 83, 80, 75, 8]

    def test_rank_scores_every_investor(self):
        scorer = MatchScorer()
        investors = load_investors()
        results = scorer.rank(make_deal(asset_type="hotel", market="Tokyo"), investors)
        assert len(results) == len(investors)

    def test_ties_keep_input_order(self):
        scorer = MatchScorer()
        investors = [make_investor(id=f"T{i}", name=f"Tied {i}") for i in range(4)]
        results = scorer.rank(make_deal(), investors)
        assert [r.investor_id for r in results] == ["T0", "T1", "T2", "T3"]

    def test_rank_is_non_increasing(self):
        scorer = MatchScorer()
        results = scorer.rank(make_deal(asset_type="office", market="New York"), load_investors())
        scores = [r.match_score for r in results]
        assert scores == sorted(scores, reverse=True)
