"""Product API routes for the inventory dashboard"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Depends, Request

from ..core.session import DashboardSession, get_current_session
from ..database.products import Catalog
from ..models.product import Product, ProductActionResponse, ProductListResponse
from ..services.filtering import filter_catalog
from ..services.series import category_breakdown

router = APIRouter(prefix="/api/products", tags=["Products"])


def get_catalog(request: Request) -> Catalog:
    """The catalog loaded at startup"""
    return request.app.state.catalog


def require_product(catalog: Catalog, product_id: int) -> Product:
    product = catalog.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.get("", response_model=ProductListResponse)
async def search_products(
    query: Optional[str] = Query(None, description="Search product name or category"),
    catalog: Catalog = Depends(get_catalog),
):
    """Filter the catalog by a free-text query"""
    products = filter_catalog(catalog, query)
    return ProductListResponse(products=list(products), total=len(products), query=query)


@router.get("/categories", response_model=dict[str, int])
async def list_categories(catalog: Catalog = Depends(get_catalog)):
    """Product count per category, in catalog order"""
    return category_breakdown(catalog).counts


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: int, catalog: Catalog = Depends(get_catalog)):
    """Get a product by ID"""
    return require_product(catalog, product_id)


@router.post("/{product_id}/edit", response_model=ProductActionResponse)
async def edit_product(
    product_id: int,
    session: DashboardSession = Depends(get_current_session),
):
    """Edit button hook; the catalog is read-only so nothing changes"""
    dashboard = session.dashboard
    product = require_product(dashboard.catalog, product_id)
    handled = dashboard.actions.on_edit(product.id)
    return ProductActionResponse(
        product_id=product.id,
        action="edit",
        handled=handled,
        message=None if handled else "Editing is not available",
    )


@router.post("/{product_id}/delete", response_model=ProductActionResponse)
async def delete_product(
    product_id: int,
    session: DashboardSession = Depends(get_current_session),
):
    """Delete button hook; the catalog is read-only so nothing changes"""
    dashboard = session.dashboard
    product = require_product(dashboard.catalog, product_id)
    handled = dashboard.actions.on_delete(product.id)
    return ProductActionResponse(
        product_id=product.id,
        action="delete",
        handled=handled,
        message=None if handled else "Deleting is not available",
    )
