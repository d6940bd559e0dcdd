"""Investor reference profiles."""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter

from capmatch.config import settings
from capmatch.models import InvestorProfile

logger = logging.getLogger(__name__)

DEFAULT_INVESTORS: list[dict] = [
    {
        "id": "INV001",
        "name": "Blackstone Real Estate",
        "minimumInvestment": 5_000_000,
        "maximumInvestment": 100_000_000,
        "preferredAssetTypes": ["multifamily", "office", "industrial", "retail"],
        "preferredMarkets": ["Chicago", "New York", "Los Angeles", "Miami", "Dallas"],
        "minimumReturnExpectation": 12,
        "riskProfile": "moderate",
        "investmentHorizon": "5-7 years",
    },
    {
        "id": "INV002",
        "name": "Brookfield Properties",
        "minimumInvestment": 10_000_000,
        "maximumInvestment": 200_000_000,
        "preferredAssetTypes": ["office", "retail", "mixed-use"],
        "preferredMarkets": ["New York", "Boston", "Washington DC", "San Francisco"],
        "minimumReturnExpectation": 10,
        "riskProfile": "low",
        "investmentHorizon": "7-10 years",
    },
    {
        "id": "INV003",
        "name": "Starwood Capital",
        "minimumInvestment": 3_000_000,
        "maximumInvestment": 75_000_000,
        "preferredAssetTypes": ["multifamily", "hotel", "mixed-use"],
        "preferredMarkets": ["Chicago", "Miami", "Phoenix", "Nashville", "Austin"],
        "minimumReturnExpectation": 15,
        "riskProfile": "high",
        "investmentHorizon": "3-5 years",
    },
    {
        "id": "INV004",
        "name": "Greystar Real Estate",
        "minimumInvestment": 2_000_000,
        "maximumInvestment": 50_000_000,
        "preferredAssetTypes": ["multifamily", "student housing"],
        "preferredMarkets": ["Chicago", "Austin", "Atlanta", "Denver", "Seattle"],
        "minimumReturnExpectation": 8,
        "riskProfile": "low",
        "investmentHorizon": "5-10 years",
    },
    {
        "id": "INV005",
        "name": "Hines",
        "minimumInvestment": 5_000_000,
        "maximumInvestment": 150_000_000,
        "preferredAssetTypes": ["office", "multifamily", "industrial", "mixed-use"],
        "preferredMarkets": ["Chicago", "New York", "Houston", "San Francisco", "London"],
        "minimumReturnExpectation": 11,
        "riskProfile": "moderate",
        "investmentHorizon": "5-8 years",
    },
]

_investor_list = TypeAdapter(list[InvestorProfile])


def load_investors(path: Optional[Path] = None) -> tuple[InvestorProfile, ...]:
    """Load investor profiles from a JSON file, or the built-in list if no path is given."""
    if path is None:
        raw = DEFAULT_INVESTORS
    else:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        logger.info(f"Loaded {len(raw)} investor profiles from {path}")

    investors = _investor_list.validate_python(raw)
    ids = [inv.id for inv in investors]
    if len(ids) != len(set(ids)):
        raise ValueError("Investor ids must be unique")
    return tuple(investors)


@lru_cache(maxsize=1)
def get_investors() -> tuple[InvestorProfile, ...]:
    """Process-wide investor list, loaded on first use."""
    return load_investors(settings.investors_file)
