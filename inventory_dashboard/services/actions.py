"""Product edit/delete capabilities"""

import logging

from ..database.products import Catalog

logger = logging.getLogger(__name__)


class ProductActions:
    """
    Hooks behind the table's edit and delete buttons.

    The catalog is read-only for a session, so both hooks are no-ops that
    report the request as unhandled.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def on_edit(self, product_id: int) -> bool:
        logger.info(f"Edit requested for product {product_id}; catalog is read-only")
        return False

    def on_delete(self, product_id: int) -> bool:
        logger.info(f"Delete requested for product {product_id}; catalog is read-only")
        return False
