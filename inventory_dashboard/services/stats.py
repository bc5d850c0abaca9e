"""Summary statistics for the dashboard cards"""

import logging
from typing import Iterable, Optional

from ..core.config import get_settings
from ..core.document import Document, LOW_STOCK, TODAY_SALES, TOTAL_PRODUCTS, TOTAL_STOCK
from ..models.dashboard import StatsSnapshot
from ..models.product import LOW_STOCK_THRESHOLD, Product

logger = logging.getLogger(__name__)


def compute_stats(
    catalog: Iterable[Product],
    today_sales: Optional[str] = None,
) -> StatsSnapshot:
    """
    Derive the card counters from the catalog.

    Low stock means 0 < quantity < LOW_STOCK_THRESHOLD; out of stock means
    quantity == 0. Today's sales is a fixed figure, not derived from stock.
    """
    products = list(catalog)
    if today_sales is None:
        today_sales = get_settings().today_sales

    return StatsSnapshot(
        total_products=len(products),
        total_stock=sum(p.quantity for p in products),
        low_stock_count=sum(1 for p in products if 0 < p.quantity < LOW_STOCK_THRESHOLD),
        out_of_stock_count=sum(1 for p in products if p.quantity == 0),
        today_sales=today_sales,
    )


def publish_stats(snapshot: StatsSnapshot, document: Document) -> list[str]:
    """
    Write the snapshot into the stat targets that exist.

    Returns:
        Ids of the targets written
    """
    values = {
        TOTAL_PRODUCTS: snapshot.total_products,
        TOTAL_STOCK: snapshot.total_stock,
        LOW_STOCK: snapshot.attention_count,
        TODAY_SALES: snapshot.today_sales,
    }

    written = []
    for mount_id, value in values.items():
        target = document.get(mount_id)
        if target is None:
            logger.debug(f"Stat target '{mount_id}' not present, skipping")
            continue
        target.set_text(value)
        written.append(mount_id)
    return written
