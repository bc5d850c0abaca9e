from datetime import date
from typing import Any

import pytest
from fastapi.testclient import TestClient

from inventory_dashboard.core.document import SHELL_MOUNT_POINTS, Document
from inventory_dashboard.core.fragments import FragmentComposer
from inventory_dashboard.core.templating import templates
from inventory_dashboard.database.products import build_catalog, load_trend
from inventory_dashboard.services.charts import ChartHandle


class FakeChartMount:
    """Records every chart definition instead of drawing it."""

    def __init__(self):
        self.mounted: list[tuple[str, dict[str, Any]]] = []

    def mount(self, canvas_id: str, config: dict[str, Any]) -> ChartHandle:
        self.mounted.append((canvas_id, config))
        return ChartHandle(canvas_id=canvas_id, chart_type=config["type"], config=config)


@pytest.fixture
def catalog():
    """The eight seed products."""
    return build_catalog()


@pytest.fixture
def trend():
    return load_trend()


@pytest.fixture
def composer():
    return FragmentComposer(templates.env)


@pytest.fixture
def document(composer):
    """A fully composed page: shell plus every region."""
    return composer.compose()


@pytest.fixture
def shell_document():
    """Shell mount points only, no region fragments."""
    return Document(SHELL_MOUNT_POINTS)


@pytest.fixture
def chart_mount():
    return FakeChartMount()


@pytest.fixture
def fixed_today():
    return lambda: date(2026, 10, 18)


@pytest.fixture
def client():
    from inventory_dashboard.main import app

    with TestClient(app) as test_client:
        yield test_client
