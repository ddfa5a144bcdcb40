"""
Portfolio Aggregations

Value, cost and profit per holding and across the portfolio.
"""

from collections.abc import Iterable
from decimal import Decimal

from lifemanager.models.records import InvestmentAsset
from lifemanager.models.summaries import AssetPerformance, PortfolioSummary


ZERO = Decimal("0")


def asset_performance(asset: InvestmentAsset) -> AssetPerformance:
    value = asset.quantity * asset.current_value
    cost = asset.quantity * asset.purchase_price
    return AssetPerformance(
        asset_id=asset.id,
        asset_name=asset.asset_name,
        value=value,
        cost=cost,
        profit=value - cost,
    )


def portfolio_summary(assets: Iterable[InvestmentAsset]) -> PortfolioSummary:
    """
    Totals across all holdings.

    profit_pct is total_profit / total_cost * 100, and 0 when nothing
    (or a non-positive amount) was invested.
    """
    performances = [asset_performance(a) for a in assets]
    total_value = sum((p.value for p in performances), ZERO)
    total_cost = sum((p.cost for p in performances), ZERO)
    total_profit = total_value - total_cost
    profit_pct = total_profit / total_cost * 100 if total_cost > 0 else ZERO
    return PortfolioSummary(
        total_value=total_value,
        total_cost=total_cost,
        total_profit=total_profit,
        profit_pct=profit_pct,
        assets=performances,
    )
