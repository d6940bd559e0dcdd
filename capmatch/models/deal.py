"""Deal and investor profile schemas."""

from typing import Literal

from pydantic import ConfigDict, Field, PrivateAttr, field_validator, model_validator

from .base import CamelModel

RiskProfile = Literal["low", "moderate", "high"]

# Ordered from least to most risk tolerant
RISK_LEVELS: tuple[str, ...] = ("low", "moderate", "high")

REQUIRED_DEAL_FIELDS: tuple[str, ...] = (
    "assetType",
    "market",
    "investmentAmount",
    "expectedReturn",
    "riskProfile",
)


class Deal(CamelModel):
    """A real-estate opportunity submitted for investor matching.

    Unknown keys are kept so they can be echoed back to the caller.
    """

    model_config = ConfigDict(extra="allow")

    asset_type: str = Field(description="Asset class, normalized to lowercase")
    market: str = Field(description="Metro market, e.g. 'Chicago'")
    investment_amount: float = Field(gt=0, allow_inf_nan=False, description="Capital sought in USD")
    expected_return: float = Field(allow_inf_nan=False, description="Projected return in percent")
    risk_profile: RiskProfile

    @field_validator("asset_type")
    @classmethod
    def _lowercase_asset_type(cls, value: str) -> str:
        return value.lower()


class InvestorProfile(CamelModel):
    """Static acceptance criteria for one investor."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    minimum_investment: float
    maximum_investment: float
    preferred_asset_types: tuple[str, ...] = ()
    preferred_markets: tuple[str, ...] = ()
    minimum_return_expectation: float
    risk_profile: RiskProfile
    investment_horizon: str = ""

    _asset_type_keys: frozenset[str] = PrivateAttr(default=frozenset())
    _market_keys: frozenset[str] = PrivateAttr(default=frozenset())

    @model_validator(mode="after")
    def _check_investment_range(self) -> "InvestorProfile":
        if self.minimum_investment > self.maximum_investment:
            raise ValueError(
                f"minimumInvestment {self.minimum_investment} exceeds "
                f"maximumInvestment {self.maximum_investment}"
            )
        return self

    def model_post_init(self, __context) -> None:
        self._asset_type_keys = frozenset(t.casefold() for t in self.preferred_asset_types)
        self._market_keys = frozenset(m.casefold() for m in self.preferred_markets)

    def prefers_asset_type(self, asset_type: str) -> bool:
        return asset_type.casefold() in self._asset_type_keys

    def prefers_market(self, market: str) -> bool:
        return market.casefold() in self._market_keys
