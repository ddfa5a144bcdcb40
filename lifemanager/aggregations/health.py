"""Workout statistics."""

from collections.abc import Iterable
from datetime import date, timedelta
from typing import Optional

from lifemanager.aggregations.timeline import local_date, today_local
from lifemanager.models.records import Workout


def workouts_in_week(
    workouts: Iterable[Workout],
    today: Optional[date] = None,
) -> int:
    """Workouts dated in the Monday-to-Sunday week containing `today`."""
    day = today_local(today)
    week_start = day - timedelta(days=day.weekday())
    week_end = week_start + timedelta(days=6)
    return sum(1 for w in workouts if week_start <= local_date(w.date) <= week_end)


def total_duration(workouts: Iterable[Workout]) -> int:
    """Total minutes logged. Workouts without a duration count as 0."""
    return sum(w.duration or 0 for w in workouts)
