"""Dashboard page and widget routes"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse

from ..core.config import settings
from ..core.document import BAR_CHART, PIE_CHART, TABLE_BODY
from ..core.navigation import MenuItem
from ..core.session import DashboardSession, SessionManager, get_current_session, get_session_manager
from ..core.templating import templates
from ..models.dashboard import ChartsResponse, StatsSnapshot

router = APIRouter(tags=["Dashboard"])


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    manager: SessionManager = Depends(get_session_manager),
):
    """Compose and initialize a new dashboard page, replacing any earlier one"""
    manager.delete_session(request.cookies.get(settings.session_cookie))
    session = manager.create_session()
    dashboard = session.dashboard
    composer = request.app.state.composer

    regions = composer.render_regions(
        dashboard.document,
        navigation=dashboard.navigation,
        menu_items=list(MenuItem),
    )
    response = templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": settings.app_name,
            "document": dashboard.document,
            "regions": regions,
            "query": dashboard.query,
        },
    )
    response.set_cookie(settings.session_cookie, session.session_id, httponly=True, samesite="lax")
    return response


@router.get("/partials/product-table", response_class=HTMLResponse)
async def product_table(
    query: Optional[str] = Query(None, description="Current search input"),
    session: DashboardSession = Depends(get_current_session),
):
    """
    Search input changed: filter, re-render the table and return its body.
    """
    dashboard = session.dashboard
    dashboard.on_query_change(query)
    return str(dashboard.document.inner_html(TABLE_BODY))


@router.get("/api/stats", response_model=StatsSnapshot)
async def get_stats(session: DashboardSession = Depends(get_current_session)):
    """Summary counters computed at page load"""
    stats = session.dashboard.stats
    if stats is None:
        raise HTTPException(status_code=404, detail="Stats not available")
    return stats


@router.get("/api/charts", response_model=ChartsResponse)
async def get_charts(session: DashboardSession = Depends(get_current_session)):
    """Chart configurations mounted at page load"""
    document = session.dashboard.document
    return ChartsResponse(
        trend=document.chart_config(BAR_CHART),
        category=document.chart_config(PIE_CHART),
    )
