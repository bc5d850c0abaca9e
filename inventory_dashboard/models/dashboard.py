"""Aggregate models shown on the dashboard"""

from typing import Any, Optional

from pydantic import BaseModel, Field, computed_field, model_validator


class StatsSnapshot(BaseModel):
    """Summary counters derived once from the catalog"""
    total_products: int = Field(ge=0)
    total_stock: int = Field(ge=0)
    low_stock_count: int = Field(ge=0)
    out_of_stock_count: int = Field(ge=0)
    today_sales: str

    @computed_field
    @property
    def attention_count(self) -> int:
        """Low and out-of-stock products, shown as a single figure"""
        return self.low_stock_count + self.out_of_stock_count


class TrendSeries(BaseModel):
    """Monthly stock movement, index-aligned by month"""
    months: list[str]
    stock_in: list[int]
    stock_out: list[int]

    @model_validator(mode="after")
    def check_aligned(self) -> "TrendSeries":
        if not len(self.months) == len(self.stock_in) == len(self.stock_out):
            raise ValueError(
                f"Trend series are not aligned: {len(self.months)} months, "
                f"{len(self.stock_in)} stock-in, {len(self.stock_out)} stock-out"
            )
        return self


class CategoryBreakdown(BaseModel):
    """Product count per category in first-seen order"""
    counts: dict[str, int] = Field(default_factory=dict)

    @property
    def labels(self) -> list[str]:
        return list(self.counts)

    @property
    def values(self) -> list[int]:
        return list(self.counts.values())

    @property
    def total(self) -> int:
        return sum(self.counts.values())


class ChartsResponse(BaseModel):
    """Chart configurations mounted for a session"""
    trend: Optional[dict[str, Any]] = None
    category: Optional[dict[str, Any]] = None


class NavigationResponse(BaseModel):
    """Currently selected menu item"""
    active: str
    label: str
