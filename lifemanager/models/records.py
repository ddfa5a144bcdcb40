"""
Record Models for LifeManager

Every persisted entity is a Record: an identifier, an owning user and
the creation/update timestamps, plus the entity's own fields.

DESIGN DECISION: Records are persisted with camelCase keys (userId,
createdAt, dueDate, ...) so that data written by the browser mock stays
readable. Python code uses snake_case attributes; both spellings are
accepted on input.

DESIGN DECISION: Only field TYPES are checked. Negative amounts, empty
titles and unknown categories are accepted as-is. Unknown fields are
kept (extra="allow") so free-form records survive a round trip.
"""

from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Timezone-aware current time, used for every stamped timestamp."""
    return datetime.now(timezone.utc)


def as_json_number(value: Decimal) -> Union[int, float]:
    """Whole values persist as ints, the rest as floats."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Decimal in Python, a plain JSON number in the persisted layout
Money = Annotated[
    Decimal,
    PlainSerializer(as_json_number, return_type=Union[int, float], when_used="json"),
]


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TaskStatus(str, Enum):
    """
    Task status.

    todo <-> done is the only state transition in the system.
    """
    TODO = "todo"
    DONE = "done"


class TaskPriority(str, Enum):
    """Task priority."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TransactionType(str, Enum):
    """Direction of a money movement."""
    INCOME = "income"
    EXPENSE = "expense"


# Category vocabularies offered by the expense form. Not enforced.
EXPENSE_CATEGORIES = (
    "Food",
    "Transport",
    "Utilities",
    "Entertainment",
    "Health",
    "Shopping",
    "Investment",
    "Other",
)
INCOME_CATEGORIES = (
    "Salary",
    "Freelance",
    "Investment",
    "Gift",
    "Other",
)

# Workout types offered by the health form. Not enforced.
WORKOUT_TYPES = (
    "Strength",
    "Cardio",
    "HIIT",
    "Yoga",
    "Sports",
)


def categories_for(tx_type: TransactionType) -> tuple[str, ...]:
    """Category vocabulary for a transaction type."""
    if tx_type == TransactionType.INCOME:
        return INCOME_CATEGORIES
    return EXPENSE_CATEGORIES


def default_category(tx_type: TransactionType) -> str:
    """First category of the vocabulary: Food for expenses, Salary for income."""
    return categories_for(tx_type)[0]


# =============================================================================
# BASE RECORD
# =============================================================================

class Record(BaseModel):
    """
    Base for every persisted entity.

    id and created_at are assigned by RecordStore.create; updated_at is
    stamped by RecordStore.update. user_id is a client-side filter only,
    never an access boundary.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: Optional[UUID] = Field(
        default=None,
        description="Unique record ID (assigned on create)"
    )
    user_id: Optional[str] = Field(
        default=None,
        description="Owning user's uid"
    )
    created_at: Optional[datetime] = Field(
        default=None,
        description="When the record was created"
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        description="Last update timestamp"
    )

    def to_document(self) -> dict:
        """JSON-ready dict with persisted (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def field_name_for(cls, key: str) -> str:
        """
        Map a persisted key or attribute name to the attribute name.

        Keys that are neither are returned unchanged (extra fields).
        """
        if key in cls.model_fields:
            return key
        for name, info in cls.model_fields.items():
            if info.alias == key:
                return name
        return key


# =============================================================================
# DOMAIN RECORDS
# =============================================================================

class Task(Record):
    """A to-do item."""

    title: str = Field(
        default="",
        description="What needs doing"
    )
    status: TaskStatus = Field(
        default=TaskStatus.TODO,
        description="todo or done"
    )
    priority: Optional[TaskPriority] = Field(
        default=TaskPriority.MEDIUM,
        description="Priority, if any"
    )
    due_date: Optional[datetime] = Field(
        default=None,
        description="Due date and time; naive values are local time"
    )
    remarks: Optional[str] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def due_date_from_day(cls, v):
        """A bare date means midnight of that day."""
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime.combine(v, time())
        return v

    @property
    def is_done(self) -> bool:
        return self.status == TaskStatus.DONE


class Transaction(Record):
    """
    A single income or expense entry.

    The category vocabulary depends on the type (see categories_for),
    but any string is stored.
    """

    type: TransactionType = Field(
        default=TransactionType.EXPENSE,
        description="income or expense"
    )
    amount: Money = Field(
        default=Decimal("0"),
        description="Amount (not validated)"
    )
    category: str = Field(
        default="Other",
        description="Category label"
    )
    description: str = ""
    date: datetime = Field(
        default_factory=utc_now,
        description="When the money moved"
    )

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE


class Workout(Record):
    """One logged workout. The workout log is append-only in practice."""

    type: str = Field(
        default="Strength",
        description="Workout type (see WORKOUT_TYPES)"
    )
    duration: Optional[int] = Field(
        default=30,
        description="Duration in minutes; None when the form field was left empty"
    )
    notes: str = ""
    date: datetime = Field(
        default_factory=utc_now,
        description="When the workout happened"
    )


class InvestmentAsset(Record):
    """
    A holding in the investment portfolio.

    Profit and loss are derived (see aggregations.portfolio), never stored.
    """

    asset_name: str = Field(
        default="",
        description="Ticker or asset name"
    )
    quantity: Money = Decimal("0")
    purchase_price: Money = Field(
        default=Decimal("0"),
        description="Price per unit at purchase"
    )
    current_value: Money = Field(
        default=Decimal("0"),
        description="Current price per unit"
    )
    last_updated: Optional[datetime] = None


class UserProfile(Record):
    """A user known to the users collection."""

    email: str = ""
    display_name: Optional[str] = None
