from inventory_dashboard.core.document import (
    CARDS_REGION,
    CURRENT_DATE,
    HEADER_REGION,
    SIDEBAR_REGION,
    TOTAL_PRODUCTS,
    TOTAL_STOCK,
)
from inventory_dashboard.core.fragments import DEFAULT_REGIONS, FragmentComposer, Region
from inventory_dashboard.core.navigation import MenuItem, NavigationState
from inventory_dashboard.core.templating import templates


def test_compose_loads_every_region(document):
    assert set(document.regions) == {SIDEBAR_REGION, HEADER_REGION, CARDS_REGION}
    assert CURRENT_DATE in document
    assert TOTAL_PRODUCTS in document


def test_failed_region_shows_error_and_drops_mount_points():
    regions = [
        Region(HEADER_REGION, "header.html", (CURRENT_DATE,)),
        Region(CARDS_REGION, "missing-cards.html", (TOTAL_PRODUCTS, TOTAL_STOCK)),
    ]
    document = FragmentComposer(templates.env, regions).compose()

    assert CURRENT_DATE in document
    assert TOTAL_PRODUCTS not in document
    assert CARDS_REGION not in document.regions
    html = str(document.inner_html(CARDS_REGION))
    assert 'class="alert alert-danger"' in html
    assert "missing-cards.html" in html


def test_render_regions_fills_mount_points(document):
    document.get(TOTAL_PRODUCTS).set_text(8)
    composer = FragmentComposer(templates.env)
    rendered = composer.render_regions(
        document,
        navigation=NavigationState(MenuItem.REPORTS),
        menu_items=list(MenuItem),
    )

    assert '<h3 class="fw-bold mb-0" id="total-products">8</h3>' in rendered[CARDS_REGION]
    assert 'id="current-date"' in rendered[HEADER_REGION]
    assert 'class="menu-item active" data-menu-item="reports"' in rendered[SIDEBAR_REGION]
    assert rendered[SIDEBAR_REGION].count(" active") == 1


def test_render_failed_region_returns_alert():
    regions = [Region(SIDEBAR_REGION, "nope.html")]
    composer = FragmentComposer(templates.env, regions)
    document = composer.compose()
    rendered = composer.render_regions(document)
    assert "Error loading component: nope.html." in rendered[SIDEBAR_REGION]


def test_default_regions_cover_stat_targets():
    provided = {mount_id for region in DEFAULT_REGIONS for mount_id in region.mount_points}
    assert {"total-products", "total-stock", "low-stock", "today-sales", "current-date"} <= provided
