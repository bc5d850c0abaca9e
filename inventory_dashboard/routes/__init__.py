# API Routes

from .dashboard import router as dashboard_router
from .products import router as products_router
from .navigation import router as navigation_router

__all__ = ["dashboard_router", "products_router", "navigation_router"]
