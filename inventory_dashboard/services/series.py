"""Chart series derived from the catalog and seed data"""

from typing import Iterable

from ..models.dashboard import CategoryBreakdown, TrendSeries
from ..models.product import Product


def trend_series(seed: TrendSeries) -> TrendSeries:
    """Stock movement is supplied as seed data and passed through unchanged"""
    return TrendSeries(
        months=list(seed.months),
        stock_in=list(seed.stock_in),
        stock_out=list(seed.stock_out),
    )


def category_breakdown(catalog: Iterable[Product]) -> CategoryBreakdown:
    """Count products per category, keeping categories in first-seen order"""
    counts: dict[str, int] = {}
    for product in catalog:
        counts[product.category] = counts.get(product.category, 0) + 1
    return CategoryBreakdown(counts=counts)
