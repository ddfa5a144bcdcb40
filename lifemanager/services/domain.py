"""
Domain Services

Each service is a RecordStore pinned to one collection and one record
model. They add no behaviour beyond that binding; the persisted keys
are the settings' key_prefix (default "pm_") plus the collection name.
"""

from enum import Enum

from lifemanager.models.records import (
    InvestmentAsset,
    Task,
    Transaction,
    UserProfile,
    Workout,
)
from lifemanager.services.record_store import RecordStore


class Collection(str, Enum):
    """Logical collection names."""
    USERS = "users"
    TASKS = "tasks"
    EXPENSES = "expenses"
    WORKOUTS = "workouts"
    INVESTMENTS = "investments"


class UserService(RecordStore[UserProfile]):
    collection = Collection.USERS.value
    model = UserProfile


class TaskService(RecordStore[Task]):
    collection = Collection.TASKS.value
    model = Task


class ExpenseService(RecordStore[Transaction]):
    """Income and expense transactions."""
    collection = Collection.EXPENSES.value
    model = Transaction


class WorkoutService(RecordStore[Workout]):
    collection = Collection.WORKOUTS.value
    model = Workout


class InvestmentService(RecordStore[InvestmentAsset]):
    collection = Collection.INVESTMENTS.value
    model = InvestmentAsset
