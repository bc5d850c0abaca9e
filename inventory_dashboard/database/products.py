"""Seed product catalog"""

import logging
from collections.abc import Sequence
from typing import Any, Iterable, Iterator, Optional, Union

from ..models.dashboard import TrendSeries
from ..models.product import Product

logger = logging.getLogger(__name__)

# Seed records. The status labels are kept as they were entered; the catalog
# derives status from quantity and reports any label that disagrees.
SEED_PRODUCTS: list[dict[str, Any]] = [
    {"id": 1, "name": "Wireless Headphones", "category": "Electronics", "quantity": 45, "price": 120, "status": "In Stock"},
    {"id": 2, "name": "Mechanical Keyboard", "category": "Electronics", "quantity": 12, "price": 85, "status": "In Stock"},
    {"id": 3, "name": "Ergonomic Office Chair", "category": "Furniture", "quantity": 5, "price": 250, "status": "Low Stock"},
    {"id": 4, "name": "USB-C Hub", "category": "Accessories", "quantity": 0, "price": 40, "status": "Out of Stock"},
    {"id": 5, "name": 'Gaming Monitor 27"', "category": "Electronics", "quantity": 8, "price": 300, "status": "Low Stock"},
    {"id": 6, "name": "Desk Lamp", "category": "Furniture", "quantity": 30, "price": 45, "status": "In Stock"},
    {"id": 7, "name": "Notebook Set", "category": "Stationery", "quantity": 100, "price": 15, "status": "In Stock"},
    {"id": 8, "name": "Bluetooth Mouse", "category": "Electronics", "quantity": 2, "price": 25, "status": "Low Stock"},
]

# Mock monthly stock movement
SEED_TREND: dict[str, list] = {
    "months": ["Jan", "Feb", "Mar", "Apr", "May", "Jun"],
    "stock_in": [150, 200, 180, 220, 250, 300],
    "stock_out": [120, 160, 140, 190, 210, 240],
}


class Catalog(Sequence):
    """Immutable, ordered product catalog for a dashboard session"""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id: dict[int, Product] = {}
        for product in self._products:
            if product.id in self._by_id:
                raise ValueError(f"Duplicate product id: {product.id}")
            self._by_id[product.id] = product

    def __getitem__(self, index: Union[int, slice]):
        return self._products[index]

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __repr__(self) -> str:
        return f"Catalog({len(self._products)} products)"

    def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by ID"""
        return self._by_id.get(product_id)

    def get_all_products(self) -> tuple[Product, ...]:
        """Get all products in display order"""
        return self._products

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order"""
        return list(dict.fromkeys(product.category for product in self._products))


def build_catalog(records: Iterable[dict[str, Any]] = SEED_PRODUCTS) -> Catalog:
    """
    Build a catalog from raw records.

    A stored ``status`` label is not trusted: status follows quantity, and a
    label that disagrees is logged and dropped.
    """
    products = []
    for record in records:
        data = dict(record)
        label = data.pop("status", None)
        product = Product(**data)
        if label is not None and label != product.status.value:
            logger.warning(
                f"Product {product.id} ({product.name}) is labelled '{label}' "
                f"but quantity {product.quantity} means '{product.status.value}'"
            )
        products.append(product)

    catalog = Catalog(products)
    logger.debug(f"Built catalog with {len(catalog)} products")
    return catalog


def load_trend(seed: Optional[dict[str, list]] = None) -> TrendSeries:
    """Load the monthly stock movement series"""
    return TrendSeries(**(seed if seed is not None else SEED_TREND))
