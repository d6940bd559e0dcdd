"""Compare a deal's metrics with market averages."""

import logging
import math
from typing import Optional

from capmatch.errors import MarketNotFoundError
from capmatch.models import MarketComparison, MarketContext, MarketStats, MetricComparison
from capmatch.reference import MARKET_DATA

logger = logging.getLogger(__name__)

# Metrics where a lower value is the better deal
LOWER_IS_BETTER = {"average_cap_rate", "vacancy_rate"}

GOOD_PERCENTILE = 67
AVERAGE_PERCENTILE = 33


def percentile_rank(values: list[float], value: float) -> int:
    """Percentage of values strictly below ``value``, rounded half-up."""
    if not values:
        return 0
    below = sum(1 for v in values if v < value)
    return int(math.floor(below / len(values) * 100 + 0.5))


def get_rating(percentile: int) -> str:
    if percentile >= GOOD_PERCENTILE:
        return "Good"
    if percentile >= AVERAGE_PERCENTILE:
        return "Average"
    return "Poor"


def is_better(metric: str, value: float, average: float) -> bool:
    if metric in LOWER_IS_BETTER:
        return value < average
    return value > average


class MarketComparator:
    """Measure user-supplied deal metrics against city averages."""

    def __init__(self, market_data: Optional[dict[str, dict[str, MarketStats]]] = None):
        self.market_data = market_data if market_data is not None else MARKET_DATA

    def get_stats(self, city: str, asset_type: str) -> MarketStats:
        """Look up averages for a city and asset type."""
        city_data = self.market_data.get(city)
        if city_data is None:
            raise MarketNotFoundError(f"Market data not available for city: {city}")

        stats = city_data.get(asset_type.lower())
        if stats is None:
            raise MarketNotFoundError(
                f"Asset type '{asset_type.lower()}' not available for city: {city}"
            )
        return stats

    def compare(
        self,
        city: str,
        asset_type: str,
        cap_rate: Optional[float] = None,
        rent_per_sqft: Optional[float] = None,
        price_per_sqft: Optional[float] = None,
        price_per_unit: Optional[float] = None,
    ) -> MarketComparison:
        """Compare supplied metrics with the market for ``city`` and ``asset_type``.

        Price per square foot applies to every asset type except multifamily,
        which is priced per unit instead.
        """
        asset_type = asset_type.lower()
        stats = self.get_stats(city, asset_type)
        is_multifamily = asset_type == "multifamily"

        comparison: dict[str, MetricComparison] = {}
        insights: list[str] = []

        if cap_rate is not None:
            result = self._compare_metric("average_cap_rate", asset_type, cap_rate, stats)
            comparison["capRate"] = result
            if result.is_better_than_market:
                insights.append(
                    f"The cap rate of {_fmt(cap_rate)}% is favorable compared to the "
                    f"market average of {_fmt(stats.average_cap_rate)}%."
                )
            else:
                insights.append(
                    f"The cap rate of {_fmt(cap_rate)}% is below the market average "
                    f"of {_fmt(stats.average_cap_rate)}%."
                )

        if rent_per_sqft is not None:
            result = self._compare_metric("average_rent_per_sq_ft", asset_type, rent_per_sqft, stats)
            comparison["rentPerSqFt"] = result
            if result.is_better_than_market:
                insights.append(
                    f"The rent of ${_fmt(rent_per_sqft)}/sqft is higher than the market "
                    f"average of ${_fmt(stats.average_rent_per_sq_ft)}/sqft."
                )
            else:
                insights.append(
                    f"The rent of ${_fmt(rent_per_sqft)}/sqft is below the market "
                    f"average of ${_fmt(stats.average_rent_per_sq_ft)}/sqft."
                )

        if price_per_sqft is not None and not is_multifamily:
            result = self._compare_metric("average_price_per_sq_ft", asset_type, price_per_sqft, stats)
            comparison["pricePerSqFt"] = result
            if not result.is_better_than_market:
                insights.append(
                    f"The price of ${_fmt(price_per_sqft)}/sqft is higher than the market "
                    f"average of ${_fmt(stats.average_price_per_sq_ft)}/sqft."
                )
            else:
                insights.append(
                    f"The price of ${_fmt(price_per_sqft)}/sqft is favorable compared to "
                    f"the market average of ${_fmt(stats.average_price_per_sq_ft)}/sqft."
                )

        if price_per_unit is not None and is_multifamily:
            result = self._compare_metric("average_price_per_unit", asset_type, price_per_unit, stats)
            comparison["pricePerUnit"] = result
            if not result.is_better_than_market:
                insights.append(
                    f"The price per unit of ${_fmt(price_per_unit)} is higher than the "
                    f"market average of ${_fmt(stats.average_price_per_unit)}."
                )
            else:
                insights.append(
                    f"The price per unit of ${_fmt(price_per_unit)} is favorable compared "
                    f"to the market average of ${_fmt(stats.average_price_per_unit)}."
                )

        logger.debug(f"Compared {len(comparison)} metrics for {asset_type} in {city}")

        return MarketComparison(
            city=city,
            asset_type=asset_type,
            market_averages=stats,
            comparison=comparison,
            insights=insights,
            market_context=self._market_context(city, asset_type, stats),
        )

    def _compare_metric(
        self,
        metric: str,
        asset_type: str,
        value: float,
        stats: MarketStats,
    ) -> MetricComparison:
        peers = [
            getattr(assets[asset_type], metric)
            for assets in self.market_data.values()
            if asset_type in assets and getattr(assets[asset_type], metric) is not None
        ]
        average = getattr(stats, metric)
        percentile = percentile_rank(peers, value)

        return MetricComparison(
            user_value=value,
            market_average=average,
            percentile=percentile,
            difference=value - average if average is not None else None,
            is_better_than_market=average is not None and is_better(metric, value, average),
            rating=get_rating(percentile),
        )

    def _market_context(self, city: str, asset_type: str, stats: MarketStats) -> MarketContext:
        change = stats.year_over_year_value_change
        if change > 3:
            trend = "Strong growth market"
        elif change > 0:
            trend = "Stable growth market"
        else:
            trend = "Declining market"

        sign = "+" if change > 0 else ""
        return MarketContext(
            vacancy_rate=f"{_fmt(stats.vacancy_rate)}% vacancy rate in {city} for {asset_type} properties",
            year_over_year_value_change=f"{sign}{_fmt(change)}% year-over-year value change",
            market_trend=trend,
        )


def _fmt(value: Optional[float]) -> str:
    """Render a number without a trailing '.0' for whole values."""
    if value is None:
        return "n/a"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def compare_to_market(city: str, asset_type: str, **metrics: Optional[float]) -> MarketComparison:
    """Compare metrics using the built-in market table."""
    return MarketComparator().compare(city, asset_type, **metrics)
