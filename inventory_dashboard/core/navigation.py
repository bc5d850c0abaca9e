"""Sidebar navigation state"""

import logging
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


class MenuItem(str, Enum):
    """Sidebar menu entries"""
    DASHBOARD = "dashboard"
    INVENTORY = "inventory"
    ORDERS = "orders"
    SUPPLIERS = "suppliers"
    REPORTS = "reports"
    SETTINGS = "settings"

    @property
    def label(self) -> str:
        return self.value.title()

    @property
    def icon(self) -> str:
        return MENU_ICONS[self]


MENU_ICONS = {
    MenuItem.DASHBOARD: "bi-grid-1x2",
    MenuItem.INVENTORY: "bi-box-seam",
    MenuItem.ORDERS: "bi-cart3",
    MenuItem.SUPPLIERS: "bi-truck",
    MenuItem.REPORTS: "bi-bar-chart-line",
    MenuItem.SETTINGS: "bi-gear",
}


class NavigationState:
    """Tracks which menu item is active; exactly one is active at a time"""

    def __init__(self, active: MenuItem = MenuItem.DASHBOARD):
        self._active = active

    @property
    def active(self) -> MenuItem:
        return self._active

    def select(self, item: Union[MenuItem, str]) -> MenuItem:
        """
        Make ``item`` the active menu item.

        Raises:
            ValueError: if ``item`` is not a known menu item
        """
        selected = MenuItem(item)
        self._active = selected
        logger.info(f"Navigated to: {selected.label}")
        return selected

    def is_active(self, item: Union[MenuItem, str]) -> bool:
        return self._active == MenuItem(item)
