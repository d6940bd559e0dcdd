"""Market average and comparison schemas."""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class MarketStats(CamelModel):
    """Average figures for one asset type in one city."""

    average_cap_rate: float
    average_rent_per_sq_ft: float
    vacancy_rate: float
    average_price_per_unit: Optional[float] = None
    average_price_per_sq_ft: Optional[float] = None
    year_over_year_value_change: float


class MetricComparison(CamelModel):
    """A user-supplied metric measured against the market average."""

    user_value: float
    market_average: Optional[float]
    percentile: int = Field(ge=0, le=100)
    difference: Optional[float]
    is_better_than_market: bool
    rating: str


class MarketContext(CamelModel):
    vacancy_rate: str
    year_over_year_value_change: str
    market_trend: str


class MarketComparison(CamelModel):
    """Response for a market comparison request."""

    city: str
    asset_type: str
    market_averages: MarketStats
    comparison: dict[str, MetricComparison] = Field(default_factory=dict)
    insights: list[str] = Field(default_factory=list)
    market_context: MarketContext
