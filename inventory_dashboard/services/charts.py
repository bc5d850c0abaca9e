"""
Chart mounting

Builds Chart.js configurations for the stock trend and category charts and
hands them to a ChartMount. The default mount stores the configuration on the
canvas mount point; the page template serializes it for the browser.
"""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from ..core.document import BAR_CHART, PIE_CHART, Document
from ..models.dashboard import CategoryBreakdown, TrendSeries

logger = logging.getLogger(__name__)

STOCK_IN_COLOR = "#4f46e5"
STOCK_OUT_COLOR = "#8b5cf6"
CATEGORY_PALETTE = ("#4f46e5", "#8b5cf6", "#10b981", "#f59e0b")
GRID_COLOR = "rgba(0,0,0,0.05)"


@dataclass(frozen=True)
class ChartHandle:
    """A chart registered against a canvas"""
    canvas_id: str
    chart_type: str
    config: dict[str, Any]


class ChartMount(Protocol):
    """Anything that can register a chart definition on a named canvas"""

    def mount(self, canvas_id: str, config: dict[str, Any]) -> ChartHandle:
        ...


class DocumentChartMount:
    """Stores chart configurations on the document's canvas mount points"""

    def __init__(self, document: Document):
        self.document = document

    def mount(self, canvas_id: str, config: dict[str, Any]) -> ChartHandle:
        canvas = self.document.get(canvas_id)
        if canvas is None:
            raise KeyError(f"Canvas '{canvas_id}' not found")
        canvas.chart = config
        return ChartHandle(canvas_id=canvas_id, chart_type=config["type"], config=config)


def category_colors(count: int) -> list[str]:
    """Cycle the fixed palette over ``count`` categories"""
    return [CATEGORY_PALETTE[i % len(CATEGORY_PALETTE)] for i in range(count)]


def build_trend_chart(trend: TrendSeries) -> dict[str, Any]:
    """Bar chart of stock in vs. stock out per month"""
    return {
        "type": "bar",
        "data": {
            "labels": list(trend.months),
            "datasets": [
                {
                    "label": "Stock In",
                    "data": list(trend.stock_in),
                    "backgroundColor": STOCK_IN_COLOR,
                    "borderRadius": 5,
                },
                {
                    "label": "Stock Out",
                    "data": list(trend.stock_out),
                    "backgroundColor": STOCK_OUT_COLOR,
                    "borderRadius": 5,
                },
            ],
        },
        "options": {
            "responsive": True,
            "maintainAspectRatio": False,
            "plugins": {
                "legend": {"position": "top"},
            },
            "scales": {
                "y": {"beginAtZero": True, "grid": {"color": GRID_COLOR}},
                "x": {"grid": {"display": False}},
            },
        },
    }


def build_category_chart(breakdown: CategoryBreakdown) -> dict[str, Any]:
    """Doughnut chart of product count per category"""
    return {
        "type": "doughnut",
        "data": {
            "labels": breakdown.labels,
            "datasets": [
                {
                    "data": breakdown.values,
                    "backgroundColor": category_colors(len(breakdown.labels)),
                    "borderWidth": 0,
                }
            ],
        },
        "options": {
            "responsive": True,
            "maintainAspectRatio": False,
            "cutout": "70%",
            "plugins": {
                "legend": {"position": "bottom"},
            },
        },
    }


def mount_charts(
    document: Document,
    chart_mount: ChartMount,
    trend: TrendSeries,
    breakdown: CategoryBreakdown,
) -> tuple[ChartHandle, ...]:
    """
    Mount both charts, or neither.

    Returns:
        The two chart handles, or an empty tuple if either canvas is missing
    """
    if not document.has_all(BAR_CHART, PIE_CHART):
        logger.debug("Chart canvases not present, skipping charts")
        return ()

    bar = chart_mount.mount(BAR_CHART, build_trend_chart(trend))
    pie = chart_mount.mount(PIE_CHART, build_category_chart(breakdown))
    logger.debug(f"Mounted charts: {len(trend.months)} months, {len(breakdown.labels)} categories")
    return bar, pie
