import re

import pytest

from inventory_dashboard.core.document import Document, TABLE_BODY
from inventory_dashboard.database.products import Catalog
from inventory_dashboard.models.product import Product, StockStatus
from inventory_dashboard.services.filtering import filter_catalog
from inventory_dashboard.services.table import TableRenderer, badge_class


def row_ids(document):
    return [int(m) for m in re.findall(r'<tr data-product-id="(\d+)"', str(document.inner_html(TABLE_BODY)))]


@pytest.fixture
def table_document():
    return Document([TABLE_BODY])


def test_renders_one_row_per_product(catalog, table_document):
    renderer = TableRenderer(table_document)
    assert renderer.render(catalog) == 8
    assert row_ids(table_document) == [1, 2, 3, 4, 5, 6, 7, 8]


def test_rerender_replaces_previous_rows(catalog, table_document):
    renderer = TableRenderer(table_document)
    renderer.render(catalog)
    renderer.render(filter_catalog(catalog, "furniture"))

    assert row_ids(table_document) == [3, 6]
    assert len(table_document.get(TABLE_BODY).children) == 2


def test_empty_view_clears_table(catalog, table_document):
    renderer = TableRenderer(table_document)
    renderer.render(catalog)
    assert renderer.render(filter_catalog(catalog, "zzz")) == 0
    assert table_document.inner_html(TABLE_BODY) == ""


def test_missing_table_body_is_noop(catalog):
    document = Document()
    assert TableRenderer(document).render(catalog) is None
    assert TABLE_BODY not in document


@pytest.mark.parametrize(
    "status, expected",
    [
        (StockStatus.IN_STOCK, "status-instock"),
        (StockStatus.LOW_STOCK, "status-low"),
        (StockStatus.OUT_OF_STOCK, "status-out"),
    ],
)
def test_badge_class(status, expected):
    assert badge_class(status) == expected


def test_row_content(catalog, table_document):
    renderer = TableRenderer(table_document)
    renderer.render([catalog.get_product(4)])
    html = str(table_document.inner_html(TABLE_BODY))

    assert "USB-C Hub" in html
    assert "Accessories" in html
    assert '<span class="status-badge status-out">Out of Stock</span>' in html
    assert 'data-action="edit" data-product-id="4"' in html
    assert 'data-action="delete" data-product-id="4"' in html


def test_row_content_is_escaped(table_document):
    product = Product(id=1, name="<b>Bold</b>", category="Tags & Labels", quantity=3, price=1)
    TableRenderer(table_document).render(Catalog([product]))
    html = str(table_document.inner_html(TABLE_BODY))

    assert "<b>Bold</b>" not in html
    assert "&lt;b&gt;Bold&lt;/b&gt;" in html
    assert "Tags &amp; Labels" in html
