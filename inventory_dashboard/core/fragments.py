"""
Page fragment composition

The dashboard page is assembled from region fragments (sidebar, header,
stat cards). Each region brings its own mount points; a region that fails to
load is replaced by an inline error and its mount points stay absent.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from jinja2 import Environment, TemplateError
from markupsafe import Markup

from .document import (
    CARDS_REGION,
    CURRENT_DATE,
    HEADER_REGION,
    LOW_STOCK,
    SHELL_MOUNT_POINTS,
    SIDEBAR_REGION,
    TODAY_SALES,
    TOTAL_PRODUCTS,
    TOTAL_STOCK,
    Document,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Region:
    """A page region filled from a fragment template"""
    container_id: str
    template: str
    mount_points: tuple[str, ...] = ()


DEFAULT_REGIONS = (
    Region(SIDEBAR_REGION, "sidebar.html"),
    Region(HEADER_REGION, "header.html", (CURRENT_DATE,)),
    Region(CARDS_REGION, "dashboard-cards.html", (TOTAL_PRODUCTS, TOTAL_STOCK, LOW_STOCK, TODAY_SALES)),
)


def error_alert(template: str) -> Markup:
    return Markup('<div class="alert alert-danger">Error loading component: {}.</div>').format(template)


class FragmentComposer:
    """Loads region fragments into a Document"""

    def __init__(
        self,
        env: Environment,
        regions: Iterable[Region] = DEFAULT_REGIONS,
        shell_mount_points: Iterable[str] = SHELL_MOUNT_POINTS,
    ):
        self.env = env
        self.regions = tuple(regions)
        self.shell_mount_points = tuple(shell_mount_points)

    def compose(self) -> Document:
        """Build a document with the shell plus every region that loads"""
        document = Document(self.shell_mount_points)
        for region in self.regions:
            self.load_region(document, region)
        return document

    def load_region(self, document: Document, region: Region) -> bool:
        container = document.get(region.container_id)
        if container is None:
            logger.debug(f"Region container '{region.container_id}' not present, skipping")
            return False

        try:
            self.env.get_template(region.template)
        except TemplateError as e:
            logger.error(f"Failed to load component {region.template}: {e}")
            container.clear()
            container.append(error_alert(region.template))
            return False

        document.regions[region.container_id] = region.template
        document.add(*region.mount_points)
        return True

    def render_regions(self, document: Document, **context: Any) -> dict[str, Markup]:
        """Render every region container to HTML for the page shell"""
        return {
            region.container_id: self.render_region(document, region, **context)
            for region in self.regions
        }

    def render_region(self, document: Document, region: Region, **context: Any) -> Markup:
        template_name: Optional[str] = document.regions.get(region.container_id)
        if template_name is None:
            return document.inner_html(region.container_id)

        try:
            html = self.env.get_template(template_name).render(document=document, **context)
        except TemplateError as e:
            logger.error(f"Failed to render component {template_name}: {e}")
            return error_alert(template_name)
        return Markup(html)
