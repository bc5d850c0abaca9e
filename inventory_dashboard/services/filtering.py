"""Free-text product filtering"""

from typing import Iterable, Optional

from ..models.product import Product


def matches(product: Product, query: str) -> bool:
    """Case-insensitive substring match on name or category"""
    query_lower = query.lower()
    return query_lower in product.name.lower() or query_lower in product.category.lower()


def filter_catalog(
    catalog: Iterable[Product],
    query: Optional[str] = None,
) -> tuple[Product, ...]:
    """
    Filter products by a search query.

    An empty query matches everything. Catalog order is preserved and the
    catalog itself is never modified.
    """
    if not query:
        return tuple(catalog)
    return tuple(p for p in catalog if matches(p, query))
