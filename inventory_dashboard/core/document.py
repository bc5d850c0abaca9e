"""
Named mount points of a composed dashboard page.

A Document stands in for the page the browser holds: every widget writes into
a mount point looked up by id, and a missing mount point means the widget is
skipped.
"""

from typing import Any, Iterable, Optional

from markupsafe import Markup, escape


# Page regions filled by fragment composition
SIDEBAR_REGION = "sidebar-container"
HEADER_REGION = "header-container"
CARDS_REGION = "cards-container"

# Stat targets
TOTAL_PRODUCTS = "total-products"
TOTAL_STOCK = "total-stock"
LOW_STOCK = "low-stock"
TODAY_SALES = "today-sales"

CURRENT_DATE = "current-date"

# Chart canvases
BAR_CHART = "barChart"
PIE_CHART = "pieChart"

TABLE_BODY = "product-table-body"
SEARCH_INPUT = "search-products"

# Mount points that live in the page shell rather than in a fragment
SHELL_MOUNT_POINTS = (
    SIDEBAR_REGION,
    HEADER_REGION,
    CARDS_REGION,
    BAR_CHART,
    PIE_CHART,
    TABLE_BODY,
    SEARCH_INPUT,
)


class MountPoint:
    """A single render target: plain text, a list of HTML children, or a chart"""

    def __init__(self, mount_id: str):
        self.id = mount_id
        self.text: Optional[str] = None
        self.children: list[str] = []
        self.chart: Optional[dict[str, Any]] = None

    def set_text(self, value: Any) -> None:
        self.text = str(value)

    def append(self, html: str) -> None:
        self.children.append(html)

    def clear(self) -> None:
        """Drop all rendered content"""
        self.text = None
        self.children = []

    @property
    def inner_html(self) -> Markup:
        if self.children:
            return Markup("".join(self.children))
        return escape(self.text or "")

    def __repr__(self) -> str:
        return f"MountPoint({self.id!r}, children={len(self.children)})"


class Document:
    """Registry of the mount points currently present on the page"""

    def __init__(self, mount_ids: Iterable[str] = ()):
        self._mount_points: dict[str, MountPoint] = {}
        # region container id -> template name, for regions that loaded
        self.regions: dict[str, str] = {}
        self.add(*mount_ids)

    def add(self, *mount_ids: str) -> None:
        for mount_id in mount_ids:
            self._mount_points.setdefault(mount_id, MountPoint(mount_id))

    def get(self, mount_id: str) -> Optional[MountPoint]:
        return self._mount_points.get(mount_id)

    def has_all(self, *mount_ids: str) -> bool:
        return all(mount_id in self._mount_points for mount_id in mount_ids)

    def __contains__(self, mount_id: object) -> bool:
        return mount_id in self._mount_points

    # Template helpers

    def text(self, mount_id: str) -> str:
        mount = self.get(mount_id)
        if mount is None or mount.text is None:
            return ""
        return mount.text

    def inner_html(self, mount_id: str) -> Markup:
        mount = self.get(mount_id)
        return mount.inner_html if mount else Markup("")

    def chart_config(self, mount_id: str) -> Optional[dict[str, Any]]:
        mount = self.get(mount_id)
        return mount.chart if mount else None
