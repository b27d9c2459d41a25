"""
Price Normalizer - folds vendor quotes into a PriceGrid.

For each quote, in the order received:
- Connect/Production at 30 days   -> monthly slot, discounted price in cents
- Connect/Production at 365 days  -> yearly slot, discounted price / 12 in cents
- anything else                   -> ignored

A later quote for the same slot overwrites an earlier one. The fold never
raises: bad or unknown data yields an incomplete grid, not an error.
"""
import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from .models import (
    MONTHLY_PERIOD_DAYS,
    YEARLY_PERIOD_DAYS,
    Plan,
    PriceGrid,
    PriceQuote,
)

logger = logging.getLogger(__name__)


def to_minor_units(amount: float) -> int:
    """
    Convert a currency amount to whole cents.

    Rounds half away from zero. Negative and non-finite results clamp to 0.
    """
    cents = amount * 100.0
    if not math.isfinite(cents) or cents <= 0:
        return 0
    return int(Decimal(cents).to_integral_value(rounding=ROUND_HALF_UP))


def _slot_value(quote: PriceQuote) -> int:
    if quote.period_days == YEARLY_PERIOD_DAYS:
        return to_minor_units(quote.discounted_price / 12.0)
    return to_minor_units(quote.discounted_price)


class PriceNormalizer:
    """
    Reduces vendor quotes to the fixed Yearly/Monthly × Connect/Production grid.

    Keeps a list of the quotes it skipped on the last run for logging.
    """

    PLAN_FIELDS = {
        Plan.CONNECT: 'connect',
        Plan.PRODUCTION: 'production',
    }
    PERIOD_FIELDS = {
        MONTHLY_PERIOD_DAYS: 'monthly',
        YEARLY_PERIOD_DAYS: 'yearly',
    }

    def __init__(self):
        self.skipped: list[PriceQuote] = []

    def normalize(self, quotes: Iterable[PriceQuote]) -> PriceGrid:
        """Fold quotes left to right into a fresh grid."""
        self.skipped = []
        grid = PriceGrid()

        for quote in quotes:
            plan_field = self.PLAN_FIELDS.get(quote.plan)
            period_field = self.PERIOD_FIELDS.get(quote.period_days)
            if plan_field is None or period_field is None:
                self.skipped.append(quote)
                continue

            setattr(getattr(grid, period_field), plan_field, _slot_value(quote))

        if self.skipped:
            logger.debug(f"Ignored {len(self.skipped)} quote(s) with unknown plan or period")
        return grid


def normalize(quotes: Iterable[PriceQuote]) -> PriceGrid:
    """Normalize quotes into a PriceGrid."""
    return PriceNormalizer().normalize(quotes)
