"""
Data models for the price gateway.

Wire shapes coming from the vendor are pydantic models (they need
validation); everything the gateway builds itself is a plain dataclass.
"""
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)


MONTHLY_PERIOD_DAYS = 30
YEARLY_PERIOD_DAYS = 365


class Plan(str, Enum):
    """Subscription tier. Unknown vendor tiers collapse to OTHER."""
    CONNECT = "Connect"
    PRODUCTION = "Production"
    OTHER = "Other"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return cls.OTHER
        return None

    @classmethod
    def parse(cls, value: Any) -> Any:
        """Map a wire value onto a Plan; non-strings are left for validation to reject."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        return value


@dataclass(frozen=True)
class PriceQuote:
    """One (plan, period, list price, discounted price) row from the vendor."""
    plan: Plan
    period_days: int
    list_price: Optional[float]  # parsed, never priced
    discounted_price: float


WirePlan = Annotated[Plan, BeforeValidator(Plan.parse)]
# Strict scalars: a string or boolean where a number belongs is a shape error
WireQuote = tuple[WirePlan, StrictInt, Optional[StrictFloat], StrictFloat]


class PricesResponse(BaseModel):
    """Body of the vendor `_prices.asp` call: `{"Type": ..., "Results": [[...], ...]}`."""
    model_config = ConfigDict(populate_by_name=True)

    type: StrictStr = Field(alias="Type")
    results: list[WireQuote] = Field(alias="Results")

    @property
    def quotes(self) -> list[PriceQuote]:
        """Results as named records, in the order the vendor sent them."""
        return [
            PriceQuote(plan=plan, period_days=days, list_price=list_price, discounted_price=discounted)
            for plan, days, list_price, discounted in self.results
        ]


class Driver(BaseModel):
    """A print driver as listed by the vendor. Wire keys are PascalCase."""
    name: str
    code: str

    @model_validator(mode="before")
    @classmethod
    def _lowercase_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {str(k).lower(): v for k, v in data.items()}
        return data


@dataclass
class PlanPrice:
    """Price per plan tier, in cents. 0 means no quote was received."""
    connect: int = 0
    production: int = 0


@dataclass
class PriceGrid:
    """Normalized prices: billing cadence × plan tier."""
    yearly: PlanPrice = field(default_factory=PlanPrice)
    monthly: PlanPrice = field(default_factory=PlanPrice)

    def to_dict(self) -> dict:
        return asdict(self)
