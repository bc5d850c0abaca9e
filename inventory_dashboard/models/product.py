"""Product models for the inventory dashboard"""

from pydantic import BaseModel, Field, computed_field
from typing import Optional
from enum import Enum


LOW_STOCK_THRESHOLD = 10


class StockStatus(str, Enum):
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"


def classify_stock(quantity: int) -> StockStatus:
    """Map an on-hand quantity to its stock status"""
    if quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if quantity < LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


class Product(BaseModel):
    """Product in the catalog"""
    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    quantity: int = Field(ge=0)
    price: float = Field(ge=0)

    class Config:
        frozen = True
        from_attributes = True

    @computed_field
    @property
    def status(self) -> StockStatus:
        """Always derived from quantity, never stored"""
        return classify_stock(self.quantity)


class ProductListResponse(BaseModel):
    """Filtered view of the catalog"""
    products: list[Product]
    total: int
    query: Optional[str] = None


class ProductActionResponse(BaseModel):
    """Outcome of an edit/delete request"""
    product_id: int
    action: str
    handled: bool
    message: Optional[str] = None
