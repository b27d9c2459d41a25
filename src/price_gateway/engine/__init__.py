"""Engine subpackage - wire models and price normalization."""
from .price_normalizer import PriceNormalizer, normalize, to_minor_units
from .models import Driver, Plan, PlanPrice, PriceGrid, PriceQuote, PricesResponse

__all__ = [
    'PriceNormalizer', 'normalize', 'to_minor_units',
    'Driver', 'Plan', 'PlanPrice', 'PriceGrid', 'PriceQuote', 'PricesResponse',
]
