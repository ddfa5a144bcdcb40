"""Tests for the pure aggregation functions."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from lifemanager.aggregations import (
    asset_performance,
    category_breakdown,
    completed_tasks,
    compute_balance,
    count_pending,
    daily_spend,
    local_date,
    newest_first,
    order_tasks,
    pending_tasks,
    portfolio_summary,
    rank_categories,
    toggled_status,
    total_duration,
    workouts_in_week,
)
from lifemanager.models import (
    InvestmentAsset,
    Task,
    TaskStatus,
    Transaction,
    TransactionType,
    Workout,
)


def income(amount, category="Salary", when=None):
    return Transaction(
        type=TransactionType.INCOME,
        amount=Decimal(amount),
        category=category,
        date=when or datetime(2024, 5, 1, 9, 0),
    )


def expense(amount, category="Food", when=None):
    return Transaction(
        type=TransactionType.EXPENSE,
        amount=Decimal(amount),
        category=category,
        date=when or datetime(2024, 5, 1, 9, 0),
    )


class TestBalance:
    """Tests for income/expense totals."""

    def test_balance(self):
        """Test income minus expense."""
        summary = compute_balance([income("100"), expense("30"), expense("20")])
        assert summary.total_income == Decimal("100")
        assert summary.total_expense == Decimal("50")
        assert summary.balance == Decimal("50")

    def test_empty_balance(self):
        """Test no transactions means zeros."""
        summary = compute_balance([])
        assert summary.balance == Decimal("0")

    def test_balance_accepts_generators(self):
        """Test single-pass iterables are handled."""
        summary = compute_balance(tx for tx in [income("10"), expense("4")])
        assert summary.balance == Decimal("6")


class TestCategoryBreakdown:
    """Tests for spending by category."""

    def test_breakdown_sums_expenses(self):
        """Test amounts are summed per category."""
        breakdown = category_breakdown([
            expense("20", "Food"),
            expense("10", "Food"),
            expense("5", "Transport"),
        ])
        assert breakdown == {"Food": Decimal("30"), "Transport": Decimal("5")}

    def test_breakdown_ignores_income(self):
        """Test income never shows up in the breakdown."""
        breakdown = category_breakdown([income("100", "Investment"), expense("5", "Investment")])
        assert breakdown == {"Investment": Decimal("5")}

    def test_rank_categories_widths(self):
        """Test bars are sorted and normalized against the largest."""
        ranked = rank_categories({"Transport": Decimal("5"), "Food": Decimal("30")})
        assert [share.category for share in ranked] == ["Food", "Transport"]
        assert ranked[0].width_pct == Decimal("100.0")
        assert ranked[1].width_pct == Decimal("16.7")

    def test_rank_categories_small_amounts(self):
        """Test the denominator is at least 1."""
        ranked = rank_categories({"Food": Decimal("0.5")})
        assert ranked[0].width_pct == Decimal("50.0")

    def test_rank_categories_empty(self):
        """Test an empty breakdown gives no bars."""
        assert rank_categories({}) == []


class TestDailySpend:
    """Tests for today's spending."""

    def test_daily_spend_counts_only_today(self):
        """Test other days and income are excluded."""
        today = date(2024, 5, 1)
        transactions = [
            expense("12", when=datetime(2024, 5, 1, 8, 30)),
            expense("8", when=datetime(2024, 5, 1, 22, 0)),
            expense("50", when=datetime(2024, 4, 30, 23, 59)),
            income("1000", when=datetime(2024, 5, 1, 9, 0)),
        ]
        assert daily_spend(transactions, today) == Decimal("20")

    def test_daily_spend_defaults_to_now(self):
        """Test an expense stamped now counts for today."""
        now = datetime.now(timezone.utc)
        assert daily_spend([expense("7", when=now)]) == Decimal("7")

    def test_local_date_converts_aware_timestamps(self):
        """Test aware timestamps are compared in local time."""
        moment = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        assert local_date(moment) == moment.astimezone().date()
        assert local_date(datetime(2024, 5, 1, 23, 0)) == date(2024, 5, 1)


class TestTaskOrdering:
    """Tests for the task list order."""

    def test_pending_ordering(self):
        """Test open tasks by due date, undated after dated, done last."""
        today = date(2024, 5, 1)
        done = Task(title="done", status=TaskStatus.DONE)
        later = Task(title="T+2", due_date=today + timedelta(days=2))
        sooner = Task(title="T+1", due_date=today + timedelta(days=1))
        undated = Task(title="no due date")

        ordered = order_tasks([done, later, sooner, undated])

        assert [t.title for t in ordered] == ["T+1", "T+2", "no due date", "done"]

    def test_done_tasks_are_also_sorted_by_due_date(self):
        """Test ordering inside the done group."""
        a = Task(title="a", status=TaskStatus.DONE)
        b = Task(title="b", status=TaskStatus.DONE, due_date=date(2024, 1, 2))
        assert [t.title for t in order_tasks([a, b])] == ["b", "a"]

    def test_same_day_tasks_ordered_by_time(self):
        """Test the time of day breaks ties between tasks due the same day."""
        evening = Task(title="evening", due_date=datetime(2024, 5, 1, 18, 0))
        morning = Task(title="morning", due_date=datetime(2024, 5, 1, 8, 30))
        midnight = Task(title="midnight", due_date=date(2024, 5, 1))
        next_day = Task(title="next day", due_date=datetime(2024, 5, 2, 7, 0))

        ordered = order_tasks([next_day, evening, morning, midnight])

        assert [t.title for t in ordered] == ["midnight", "morning", "evening", "next day"]

    def test_ties_keep_input_order(self):
        """Test the sort is stable."""
        tasks = [Task(title=str(i)) for i in range(5)]
        assert [t.title for t in order_tasks(tasks)] == ["0", "1", "2", "3", "4"]

    def test_pending_and_completed_views(self):
        """Test the todo and done views."""
        tasks = [
            Task(title="open"),
            Task(title="closed", status=TaskStatus.DONE),
        ]
        assert [t.title for t in pending_tasks(tasks)] == ["open"]
        assert [t.title for t in completed_tasks(tasks)] == ["closed"]
        assert count_pending(tasks) == 1

    def test_toggled_status(self):
        """Test todo <-> done."""
        assert toggled_status(TaskStatus.TODO) == TaskStatus.DONE
        assert toggled_status(TaskStatus.DONE) == TaskStatus.TODO


class TestPortfolio:
    """Tests for profit and loss."""

    def test_single_asset(self):
        """Test value, cost, profit and percentage."""
        asset = InvestmentAsset(
            asset_name="ACME",
            quantity=Decimal("10"),
            purchase_price=Decimal("5"),
            current_value=Decimal("8"),
        )
        perf = asset_performance(asset)
        assert perf.value == Decimal("80")
        assert perf.cost == Decimal("50")
        assert perf.profit == Decimal("30")

        summary = portfolio_summary([asset])
        assert summary.total_value == Decimal("80")
        assert summary.total_cost == Decimal("50")
        assert summary.total_profit == Decimal("30")
        assert summary.profit_pct == Decimal("60.0")

    def test_loss_across_assets(self):
        """Test totals sum across holdings."""
        summary = portfolio_summary([
            InvestmentAsset(asset_name="A", quantity=2, purchase_price=10, current_value=15),
            InvestmentAsset(asset_name="B", quantity=1, purchase_price=30, current_value=10),
        ])
        assert summary.total_value == Decimal("40")
        assert summary.total_cost == Decimal("50")
        assert summary.total_profit == Decimal("-10")
        assert summary.profit_pct == Decimal("-20")
        assert [a.asset_name for a in summary.assets] == ["A", "B"]

    def test_zero_cost_percentage(self):
        """Test the percentage is 0 when nothing was invested."""
        summary = portfolio_summary([
            InvestmentAsset(asset_name="Gift", quantity=3, purchase_price=0, current_value=4),
        ])
        assert summary.total_profit == Decimal("12")
        assert summary.profit_pct == Decimal("0")

    def test_empty_portfolio(self):
        """Test an empty portfolio is all zeros."""
        summary = portfolio_summary([])
        assert summary.total_value == Decimal("0")
        assert summary.profit_pct == Decimal("0")
        assert summary.assets == []


class TestWorkouts:
    """Tests for workout statistics and recency ordering."""

    def test_workouts_in_week(self):
        """Test only the Monday-to-Sunday week of today counts."""
        today = date(2024, 5, 1)  # a Wednesday
        workouts = [
            Workout(date=datetime(2024, 4, 29, 7, 0)),   # Monday
            Workout(date=datetime(2024, 5, 5, 18, 0)),   # Sunday
            Workout(date=datetime(2024, 4, 28, 18, 0)),  # previous Sunday
        ]
        assert workouts_in_week(workouts, today) == 2

    def test_total_duration(self):
        """Test minutes are summed."""
        assert total_duration([Workout(duration=30), Workout(duration=45)]) == 75

    def test_total_duration_skips_missing(self):
        """Test workouts without a duration add nothing."""
        assert total_duration([Workout(duration=None), Workout(duration=20)]) == 20

    def test_newest_first(self):
        """Test dated records are sorted newest first."""
        old = Workout(type="Yoga", date=datetime(2024, 1, 1, tzinfo=timezone.utc))
        new = Workout(type="HIIT", date=datetime(2024, 2, 1, tzinfo=timezone.utc))
        assert [w.type for w in newest_first([old, new])] == ["HIIT", "Yoga"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
