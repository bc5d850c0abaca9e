"""Sidebar navigation routes"""

from fastapi import APIRouter, Depends, HTTPException

from ..core.navigation import MenuItem
from ..core.session import DashboardSession, get_current_session
from ..models.dashboard import NavigationResponse

router = APIRouter(prefix="/api/navigation", tags=["Navigation"])


def to_response(item: MenuItem) -> NavigationResponse:
    return NavigationResponse(active=item.value, label=item.label)


@router.get("", response_model=NavigationResponse)
async def get_active_item(session: DashboardSession = Depends(get_current_session)):
    """Currently active menu item"""
    navigation = session.dashboard.navigation
    if navigation is None:
        raise HTTPException(status_code=404, detail="Navigation not available")
    return to_response(navigation.active)


@router.post("/{item}", response_model=NavigationResponse)
async def select_item(
    item: str,
    session: DashboardSession = Depends(get_current_session),
):
    """Make a menu item active"""
    try:
        selected = session.dashboard.on_navigate(item)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown menu item: {item}")
    if selected is None:
        raise HTTPException(status_code=404, detail="Navigation not available")
    return to_response(selected)
