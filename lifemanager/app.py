"""
Application Composition Root

This module ties together all the components:
1. One blob storage backend
2. The five domain services bound to it
3. The session provider (the only holder of the signed-in identity)

The presentation layer receives a LifeManagerApp and calls through it;
nothing here is module-global.
"""

from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Optional

import structlog

from lifemanager.aggregations import count_pending, daily_spend, newest_first
from lifemanager.config import Settings, get_settings
from lifemanager.models.records import Transaction, TransactionType, utc_now
from lifemanager.models.session import UserSession
from lifemanager.models.summaries import Briefing
from lifemanager.observability import configure_logging
from lifemanager.services.auth import SessionProvider
from lifemanager.services.domain import (
    ExpenseService,
    InvestmentService,
    TaskService,
    UserService,
    WorkoutService,
)
from lifemanager.services.storage import (
    BlobStorageInterface,
    FileBlobStorage,
    InMemoryBlobStorage,
)


logger = structlog.get_logger(__name__)


def demo_transactions(user_id: Optional[str], now: Optional[datetime] = None) -> list[Transaction]:
    """
    Sample transactions shown when a user has none yet.

    They are NOT persisted: one salary today and four expenses on each
    of the four previous days.
    """
    now = now or utc_now()
    samples = [
        (TransactionType.INCOME, "12500", "Salary", "Monthly Salary"),
        (TransactionType.EXPENSE, "450", "Utilities", "DEWA Bill"),
        (TransactionType.EXPENSE, "120", "Food", "Grocery Run"),
        (TransactionType.EXPENSE, "35", "Transport", "Taxi to Mall"),
        (TransactionType.EXPENSE, "60", "Entertainment", "Cinema"),
    ]
    return [
        Transaction(
            user_id=user_id,
            type=tx_type,
            amount=Decimal(amount),
            category=category,
            description=description,
            date=now - timedelta(days=days_ago),
        )
        for days_ago, (tx_type, amount, category, description) in enumerate(samples)
    ]


class LifeManagerApp:
    """
    Owns storage, services and the session.

    Lifecycle:
        app = create_app()
        await app.start()      # restore session, optional auto-login
        ...
        await app.shutdown()
    """

    def __init__(
        self,
        storage: BlobStorageInterface,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or get_settings()
        storage_settings = self._settings.storage

        self.storage = storage
        self.users = UserService(storage, storage_settings)
        self.tasks = TaskService(storage, storage_settings)
        self.expenses = ExpenseService(storage, storage_settings)
        self.workouts = WorkoutService(storage, storage_settings)
        self.investments = InvestmentService(storage, storage_settings)
        self.session = SessionProvider(
            storage,
            storage_settings=storage_settings,
            auth_settings=self._settings.auth,
        )

    @property
    def current_user(self) -> Optional[UserSession]:
        return self.session.current_user

    async def start(self) -> Optional[UserSession]:
        """
        Restore the persisted session.

        If nobody was signed in and dev_auto_login_email is configured,
        sign that user in (development convenience).
        """
        user = await self.session.init()
        auto_email = self._settings.auth.dev_auto_login_email
        if user is None and auto_email:
            logger.info("dev_auto_login", email=auto_email)
            user = await self.session.login(auto_email, "")
        return user

    async def shutdown(self) -> None:
        """Drop in-process session state. The persisted identity is kept."""
        self.session.clear()

    async def load_transactions(self, with_demo_fallback: bool = False) -> list[Transaction]:
        """
        The signed-in user's transactions, newest first.

        Args:
            with_demo_fallback: Return unsaved demo data instead of an
                empty list when the user has no transactions yet

        Raises:
            NotSignedInError: If nobody is signed in
        """
        user = self.session.require_user()
        transactions = await self.expenses.get_all(user.uid)
        if not transactions and with_demo_fallback:
            transactions = demo_transactions(user.uid)
        return newest_first(transactions)

    async def morning_briefing(self, today: Optional[date] = None) -> Briefing:
        """
        Dashboard greeting: open task count and today's spending.

        Raises:
            NotSignedInError: If nobody is signed in
        """
        user = self.session.require_user()
        tasks = await self.tasks.get_all(user.uid)
        transactions = await self.expenses.get_all(user.uid)
        return Briefing(
            display_name=user.display_name,
            pending_task_count=count_pending(tasks),
            spent_today=daily_spend(transactions, today),
        )


def create_storage(settings: Optional[Settings] = None) -> BlobStorageInterface:
    """Build the blob backend named in settings."""
    storage_settings = (settings or get_settings()).storage
    if storage_settings.backend == "file":
        return FileBlobStorage(storage_settings.data_dir)
    return InMemoryBlobStorage()


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[BlobStorageInterface] = None,
    configure_logs: bool = True,
) -> LifeManagerApp:
    """
    Factory function to create all application components.

    Args:
        settings: Settings to use (defaults to get_settings())
        storage: Blob backend; built from settings when None
        configure_logs: Whether to configure structlog/stdlib logging

    Returns:
        A LifeManagerApp that has not been started yet
    """
    settings = settings or get_settings()
    if configure_logs:
        configure_logging(settings.app)
    return LifeManagerApp(storage or create_storage(settings), settings)
