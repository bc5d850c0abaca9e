"""
Inventory Dashboard Application

Server-rendered dashboard over an in-memory inventory catalog: summary
cards, stock trend and category charts, and a searchable product table.
"""

import os
import logging
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .core.config import settings
from .core.fragments import FragmentComposer
from .core.session import SessionManager
from .core.templating import static_dir, templates
from .database.products import build_catalog, load_trend
from .routes import dashboard_router, products_router, navigation_router
from .services.dashboard import build_dashboard

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Inventory Dashboard starting up...")

    catalog = build_catalog()
    trend = load_trend()
    composer = FragmentComposer(templates.env)

    app.state.catalog = catalog
    app.state.composer = composer
    app.state.sessions = SessionManager(
        factory=partial(build_dashboard, catalog, trend, composer, settings),
        max_age_hours=settings.session_max_age_hours,
    )
    logger.info(f"Catalog loaded: {len(catalog)} products in {len(catalog.categories())} categories")

    yield

    logger.info("Inventory Dashboard shutting down...")
    app.state.sessions.sessions.clear()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Inventory overview with stock statistics, charts and product search",
    version="1.0.0",
    lifespan=lifespan,
)

if os.path.exists(static_dir):
    app.mount("/static", StaticFiles(directory=static_dir), name="static")

# Include routers
app.include_router(dashboard_router)
app.include_router(products_router)
app.include_router(navigation_router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "inventory-dashboard"}


def run() -> None:
    import uvicorn

    uvicorn.run(
        "inventory_dashboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
