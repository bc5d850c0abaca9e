# Database modules

from .products import Catalog, SEED_PRODUCTS, SEED_TREND, build_catalog, load_trend

__all__ = [
    "Catalog",
    "SEED_PRODUCTS",
    "SEED_TREND",
    "build_catalog",
    "load_trend",
]
