import pytest

from inventory_dashboard.core.document import BAR_CHART, PIE_CHART, Document
from inventory_dashboard.models.dashboard import CategoryBreakdown
from inventory_dashboard.services.charts import (
    CATEGORY_PALETTE,
    DocumentChartMount,
    build_category_chart,
    build_trend_chart,
    category_colors,
    mount_charts,
)
from inventory_dashboard.services.series import category_breakdown


def test_trend_chart_config(trend):
    config = build_trend_chart(trend)
    assert config["type"] == "bar"
    assert config["data"]["labels"] == trend.months

    stock_in, stock_out = config["data"]["datasets"]
    assert stock_in["label"] == "Stock In"
    assert stock_in["data"] == trend.stock_in
    assert stock_out["label"] == "Stock Out"
    assert stock_out["data"] == trend.stock_out
    assert stock_in["backgroundColor"] != stock_out["backgroundColor"]
    assert stock_in["borderRadius"] == stock_out["borderRadius"] == 5

    options = config["options"]
    assert options["responsive"] is True
    assert options["plugins"]["legend"]["position"] == "top"
    assert options["scales"]["y"]["beginAtZero"] is True
    assert options["scales"]["y"]["grid"]["color"] == "rgba(0,0,0,0.05)"
    assert options["scales"]["x"]["grid"]["display"] is False


def test_category_chart_config(catalog):
    config = build_category_chart(category_breakdown(catalog))
    assert config["type"] == "doughnut"
    assert config["data"]["labels"] == ["Electronics", "Furniture", "Accessories", "Stationery"]

    (dataset,) = config["data"]["datasets"]
    assert dataset["data"] == [4, 2, 1, 1]
    assert dataset["backgroundColor"] == list(CATEGORY_PALETTE)
    assert config["options"]["cutout"] == "70%"
    assert config["options"]["plugins"]["legend"]["position"] == "bottom"


def test_palette_cycles_past_four_categories():
    breakdown = CategoryBreakdown(counts={f"C{i}": 1 for i in range(6)})
    colors = build_category_chart(breakdown)["data"]["datasets"][0]["backgroundColor"]
    assert colors == category_colors(6)
    assert colors[4] == CATEGORY_PALETTE[0]
    assert colors[5] == CATEGORY_PALETTE[1]


def test_mount_both_charts(catalog, trend, chart_mount):
    document = Document([BAR_CHART, PIE_CHART])
    handles = mount_charts(document, chart_mount, trend, category_breakdown(catalog))

    assert [h.canvas_id for h in handles] == [BAR_CHART, PIE_CHART]
    assert [canvas for canvas, _ in chart_mount.mounted] == [BAR_CHART, PIE_CHART]
    assert chart_mount.mounted[0][1]["type"] == "bar"
    assert chart_mount.mounted[1][1]["type"] == "doughnut"


@pytest.mark.parametrize("present", [[BAR_CHART], [PIE_CHART], []])
def test_missing_canvas_mounts_nothing(catalog, trend, chart_mount, present):
    document = Document(present)
    assert mount_charts(document, chart_mount, trend, category_breakdown(catalog)) == ()
    assert chart_mount.mounted == []


def test_document_mount_stores_config(catalog, trend):
    document = Document([BAR_CHART, PIE_CHART])
    mount_charts(document, DocumentChartMount(document), trend, category_breakdown(catalog))

    assert document.chart_config(BAR_CHART)["type"] == "bar"
    assert document.chart_config(PIE_CHART)["data"]["datasets"][0]["data"] == [4, 2, 1, 1]


def test_document_mount_requires_canvas():
    with pytest.raises(KeyError):
        DocumentChartMount(Document()).mount(BAR_CHART, {"type": "bar"})
