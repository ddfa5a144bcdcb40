"""
Expense Aggregations

Balance, spending by category and daily spend over a snapshot of
transactions. Amounts are summed as Decimal; nothing is rounded except
the chart bar widths.
"""

from collections.abc import Iterable
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from lifemanager.aggregations.timeline import local_date, today_local
from lifemanager.models.records import Transaction, TransactionType
from lifemanager.models.summaries import BalanceSummary, CategoryShare


ZERO = Decimal("0")
ONE_DECIMAL = Decimal("0.1")


def _total(transactions: Iterable[Transaction], tx_type: TransactionType) -> Decimal:
    return sum((tx.amount for tx in transactions if tx.type == tx_type), ZERO)


def total_income(transactions: Iterable[Transaction]) -> Decimal:
    return _total(transactions, TransactionType.INCOME)


def total_expense(transactions: Iterable[Transaction]) -> Decimal:
    return _total(transactions, TransactionType.EXPENSE)


def compute_balance(transactions: Iterable[Transaction]) -> BalanceSummary:
    """Income minus expense."""
    transactions = list(transactions)
    income = total_income(transactions)
    expense = total_expense(transactions)
    return BalanceSummary(
        total_income=income,
        total_expense=expense,
        balance=income - expense,
    )


def category_breakdown(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """
    Summed expense amount per category.

    Income is ignored. Keys appear in order of first occurrence.
    """
    breakdown: dict[str, Decimal] = {}
    for tx in transactions:
        if tx.type != TransactionType.EXPENSE:
            continue
        breakdown[tx.category] = breakdown.get(tx.category, ZERO) + tx.amount
    return breakdown


def rank_categories(breakdown: dict[str, Decimal]) -> list[CategoryShare]:
    """
    Chart rows, largest category first.

    Bar widths are relative to the largest bucket; the denominator is at
    least 1 so an all-zero breakdown does not divide by zero.
    """
    largest = max(max(breakdown.values(), default=ZERO), Decimal("1"))
    ranked = sorted(breakdown.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryShare(
            category=category,
            amount=amount,
            width_pct=(amount / largest * 100).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP),
        )
        for category, amount in ranked
    ]


def daily_spend(
    transactions: Iterable[Transaction],
    today: Optional[date] = None,
) -> Decimal:
    """Sum of expenses dated on `today` (local calendar day, default now)."""
    day = today_local(today)
    return sum(
        (
            tx.amount for tx in transactions
            if tx.type == TransactionType.EXPENSE and local_date(tx.date) == day
        ),
        ZERO,
    )
