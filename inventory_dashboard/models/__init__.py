# Inventory Dashboard Models

from .product import (
    LOW_STOCK_THRESHOLD,
    Product,
    ProductActionResponse,
    ProductListResponse,
    StockStatus,
    classify_stock,
)
from .dashboard import (
    CategoryBreakdown,
    ChartsResponse,
    NavigationResponse,
    StatsSnapshot,
    TrendSeries,
)

__all__ = [
    "LOW_STOCK_THRESHOLD",
    "Product",
    "ProductActionResponse",
    "ProductListResponse",
    "StockStatus",
    "classify_stock",
    "CategoryBreakdown",
    "ChartsResponse",
    "NavigationResponse",
    "StatsSnapshot",
    "TrendSeries",
]
