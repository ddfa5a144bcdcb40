"""
Aggregation Result Models

Derived values computed from collection snapshots. They are never
persisted; the presentation layer renders them directly.
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class BalanceSummary(BaseModel):
    """Income, expense and their difference over a set of transactions."""

    total_income: Decimal = Decimal("0")
    total_expense: Decimal = Decimal("0")
    balance: Decimal = Field(
        default=Decimal("0"),
        description="total_income - total_expense"
    )


class CategoryShare(BaseModel):
    """One bar of the spending-by-category chart."""

    category: str
    amount: Decimal
    width_pct: Decimal = Field(
        ...,
        description="Bar width relative to the largest category, one decimal"
    )


class AssetPerformance(BaseModel):
    """Derived value, cost and profit of one holding."""

    asset_id: Optional[UUID] = None
    asset_name: str
    value: Decimal = Field(
        ...,
        description="quantity * current_value"
    )
    cost: Decimal = Field(
        ...,
        description="quantity * purchase_price"
    )
    profit: Decimal = Field(
        ...,
        description="value - cost"
    )


class PortfolioSummary(BaseModel):
    """Totals across every holding."""

    total_value: Decimal = Decimal("0")
    total_cost: Decimal = Decimal("0")
    total_profit: Decimal = Decimal("0")
    profit_pct: Decimal = Field(
        default=Decimal("0"),
        description="total_profit / total_cost * 100, 0 when nothing was invested"
    )
    assets: list[AssetPerformance] = Field(default_factory=list)


class Briefing(BaseModel):
    """Dashboard greeting data."""

    display_name: Optional[str] = None
    pending_task_count: int = Field(ge=0)
    spent_today: Decimal = Decimal("0")
