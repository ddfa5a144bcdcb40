"""
Data Models Package

This package contains all Pydantic models used in LifeManager.
All data flowing through the store must conform to these schemas.
"""

from lifemanager.models.records import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    WORKOUT_TYPES,
    InvestmentAsset,
    Record,
    Task,
    TaskPriority,
    TaskStatus,
    Transaction,
    TransactionType,
    UserProfile,
    Workout,
    categories_for,
    default_category,
    utc_now,
)
from lifemanager.models.session import UserSession
from lifemanager.models.summaries import (
    AssetPerformance,
    BalanceSummary,
    Briefing,
    CategoryShare,
    PortfolioSummary,
)

__all__ = [
    # Records
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
    "WORKOUT_TYPES",
    "InvestmentAsset",
    "Record",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "Transaction",
    "TransactionType",
    "UserProfile",
    "Workout",
    "categories_for",
    "default_category",
    "utc_now",
    # Session
    "UserSession",
    # Summaries
    "AssetPerformance",
    "BalanceSummary",
    "Briefing",
    "CategoryShare",
    "PortfolioSummary",
]
