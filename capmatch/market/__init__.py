"""Market comparison against reference averages."""

from .comparison import MarketComparator, compare_to_market, percentile_rank, get_rating

__all__ = ["MarketComparator", "compare_to_market", "percentile_rank", "get_rating"]
