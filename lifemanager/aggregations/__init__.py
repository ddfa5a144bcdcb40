"""
Aggregations Package

Pure, deterministic computations over collection snapshots. Nothing
here touches storage; results are recomputed on every read.
"""

from lifemanager.aggregations.finance import (
    category_breakdown,
    compute_balance,
    daily_spend,
    rank_categories,
    total_expense,
    total_income,
)
from lifemanager.aggregations.health import total_duration, workouts_in_week
from lifemanager.aggregations.portfolio import asset_performance, portfolio_summary
from lifemanager.aggregations.tasks import (
    completed_tasks,
    count_pending,
    order_tasks,
    pending_tasks,
    toggled_status,
)
from lifemanager.aggregations.timeline import local_date, newest_first

__all__ = [
    # Finance
    "category_breakdown",
    "compute_balance",
    "daily_spend",
    "rank_categories",
    "total_expense",
    "total_income",
    # Health
    "total_duration",
    "workouts_in_week",
    # Portfolio
    "asset_performance",
    "portfolio_summary",
    # Tasks
    "completed_tasks",
    "count_pending",
    "order_tasks",
    "pending_tasks",
    "toggled_status",
    # Dates
    "local_date",
    "newest_first",
]
