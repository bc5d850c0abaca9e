"""
Dashboard orchestration

Wires the catalog, aggregators and renderers of one page session together:
a single initialization pass at page load, then a filter-and-render cycle for
every change of the search query.
"""

import logging
from datetime import date
from enum import Enum
from typing import Callable, Optional

from ..core.config import Settings, get_settings
from ..core.document import CURRENT_DATE, SEARCH_INPUT, SIDEBAR_REGION, Document
from ..core.fragments import FragmentComposer
from ..core.navigation import MenuItem, NavigationState
from ..database.products import Catalog
from ..models.dashboard import StatsSnapshot, TrendSeries
from ..models.product import Product
from .actions import ProductActions
from .charts import ChartHandle, ChartMount, DocumentChartMount, mount_charts
from .filtering import filter_catalog
from .series import category_breakdown, trend_series
from .stats import compute_stats, publish_stats
from .table import TableRenderer

logger = logging.getLogger(__name__)


class FilterState(str, Enum):
    """Progress of the filter/render loop"""
    IDLE = "idle"
    FILTERING = "filtering"
    RENDERED = "rendered"


def format_long_date(day: date) -> str:
    """e.g. 'Sunday, October 18, 2026'"""
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


class Dashboard:
    """One page session's view of the catalog"""

    def __init__(
        self,
        catalog: Catalog,
        trend: TrendSeries,
        document: Document,
        chart_mount: Optional[ChartMount] = None,
        table: Optional[TableRenderer] = None,
        settings: Optional[Settings] = None,
        today: Callable[[], date] = date.today,
    ):
        self.catalog = catalog
        self.trend = trend
        self.document = document
        self.chart_mount = chart_mount or DocumentChartMount(document)
        self.table = table or TableRenderer(document)
        self.settings = settings or get_settings()
        self.today = today
        self.actions = ProductActions(catalog)

        self.stats: Optional[StatsSnapshot] = None
        self.charts: tuple[ChartHandle, ...] = ()
        self.navigation: Optional[NavigationState] = None
        self.query = ""
        self.view: tuple[Product, ...] = ()
        self.filter_state = FilterState.IDLE

        self._initialized = False
        self._search_attached = False

    @property
    def search_attached(self) -> bool:
        return self._search_attached

    def initialize(self) -> list[str]:
        """
        Run the startup sequence once.

        A failing step is logged and skipped; later steps still run.

        Returns:
            Names of the steps that failed
        """
        if self._initialized:
            logger.debug("Dashboard already initialized")
            return []
        self._initialized = True

        steps = [
            ("date", self.update_date),
            ("stats", self.update_stats),
            ("charts", self.render_charts),
            ("table", self.render_table),
            ("search", self.attach_search),
            ("navigation", self.attach_navigation),
        ]

        failed = []
        for name, step in steps:
            try:
                step()
            except Exception:
                logger.exception(f"Dashboard step '{name}' failed")
                failed.append(name)
        return failed

    # Startup steps

    def update_date(self) -> None:
        target = self.document.get(CURRENT_DATE)
        if target is not None:
            target.set_text(format_long_date(self.today()))

    def update_stats(self) -> None:
        self.stats = compute_stats(self.catalog, self.settings.today_sales)
        publish_stats(self.stats, self.document)

    def render_charts(self) -> None:
        self.charts = mount_charts(
            self.document,
            self.chart_mount,
            trend_series(self.trend),
            category_breakdown(self.catalog),
        )

    def render_table(self) -> None:
        self.view = self.catalog.get_all_products()
        self.table.render(self.view)

    def attach_search(self) -> None:
        if SEARCH_INPUT not in self.document:
            logger.debug("Search input not present, query changes will be ignored")
            return
        self._search_attached = True

    def attach_navigation(self) -> None:
        if SIDEBAR_REGION not in self.document.regions:
            logger.debug("Sidebar not loaded, navigation disabled")
            return
        self.navigation = NavigationState()

    # Event handlers

    def on_query_change(self, query: Optional[str]) -> Optional[tuple[Product, ...]]:
        """
        Filter the catalog by ``query`` and re-render the table.

        Returns:
            The filtered view, or None if no search input is attached
        """
        if not self._search_attached:
            logger.debug("Query change ignored, search input not attached")
            return None

        self.filter_state = FilterState.FILTERING
        try:
            view = filter_catalog(self.catalog, query)
            self.table.render(view)
            self.filter_state = FilterState.RENDERED

            self.query = query or ""
            self.view = view
            logger.debug(f"Query '{self.query}' matched {len(view)} of {len(self.catalog)} products")
        finally:
            self.filter_state = FilterState.IDLE
        return view

    def on_navigate(self, item: str) -> Optional[MenuItem]:
        """Select a menu item; None if navigation is not attached"""
        if self.navigation is None:
            return None
        return self.navigation.select(item)


def build_dashboard(
    catalog: Catalog,
    trend: TrendSeries,
    composer: FragmentComposer,
    settings: Optional[Settings] = None,
) -> Dashboard:
    """Compose a fresh page and initialize a dashboard on it"""
    document = composer.compose()
    dashboard = Dashboard(catalog, trend, document, settings=settings)
    failed = dashboard.initialize()
    if failed:
        logger.warning(f"Dashboard initialized with failed steps: {', '.join(failed)}")
    return dashboard
