"""Date helpers shared by the aggregations."""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Optional, TypeVar


T = TypeVar("T")


def local_date(moment: datetime) -> date:
    """
    Calendar day of a timestamp in local time.

    Aware timestamps are converted to the local zone first; naive ones
    are taken to be local already.
    """
    if moment.tzinfo is not None:
        return moment.astimezone().date()
    return moment.date()


def today_local(today: Optional[date] = None) -> date:
    return today if today is not None else date.today()


def newest_first(records: Iterable[T]) -> list[T]:
    """Sort dated records (transactions, workouts) newest first."""
    # timestamp() treats naive datetimes as local, so mixed inputs compare
    return sorted(records, key=lambda r: r.date.timestamp(), reverse=True)
