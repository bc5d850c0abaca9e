# Dashboard services

from .stats import compute_stats, publish_stats
from .filtering import filter_catalog
from .series import category_breakdown, trend_series
from .table import TableRenderer, badge_class
from .charts import ChartHandle, ChartMount, DocumentChartMount, mount_charts
from .actions import ProductActions
from .dashboard import Dashboard, FilterState, build_dashboard

__all__ = [
    "compute_stats",
    "publish_stats",
    "filter_catalog",
    "category_breakdown",
    "trend_series",
    "TableRenderer",
    "badge_class",
    "ChartHandle",
    "ChartMount",
    "DocumentChartMount",
    "mount_charts",
    "ProductActions",
    "Dashboard",
    "FilterState",
    "build_dashboard",
]
