"""Product table rendering"""

import logging
from typing import Iterable, Optional

from jinja2 import Environment

from ..core.document import Document, TABLE_BODY
from ..core.templating import templates
from ..models.product import Product, StockStatus

logger = logging.getLogger(__name__)

BADGE_CLASSES = {
    StockStatus.LOW_STOCK: "status-low",
    StockStatus.OUT_OF_STOCK: "status-out",
}
DEFAULT_BADGE_CLASS = "status-instock"


def badge_class(status: StockStatus) -> str:
    """CSS class of the status badge"""
    return BADGE_CLASSES.get(status, DEFAULT_BADGE_CLASS)


class TableRenderer:
    """
    Renders product rows into the table body mount point.

    Every render replaces the previous rows entirely; there is no diffing.
    """

    ROW_TEMPLATE = "partials/product_row.html"

    def __init__(
        self,
        document: Document,
        target_id: str = TABLE_BODY,
        env: Optional[Environment] = None,
    ):
        self.document = document
        self.target_id = target_id
        self.env = env or templates.env

    def render_row(self, product: Product) -> str:
        template = self.env.get_template(self.ROW_TEMPLATE)
        return template.render(product=product, badge_class=badge_class(product.status))

    def render(self, view: Iterable[Product]) -> Optional[int]:
        """
        Replace the table rows with one row per product in ``view``.

        Returns:
            Number of rows rendered, or None if the table body is absent
        """
        tbody = self.document.get(self.target_id)
        if tbody is None:
            logger.debug(f"Table body '{self.target_id}' not present, skipping render")
            return None

        # Build every row before touching the mount point
        rows = [self.render_row(product) for product in view]

        tbody.clear()
        for row in rows:
            tbody.append(row)
        return len(rows)
