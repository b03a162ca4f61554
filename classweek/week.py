"""
Week resolution.

Two week conventions are supported:
- MONDAY_WEEK: week starts on Monday, classes recur Mon..Fri
- SUNDAY_WEEK: week starts on Sunday, classes recur Sun..Thu
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict

from classweek.model import DAY_NAMES, WeekBounds, WeekConvention


MONDAY_WEEK = WeekConvention(
    week_start="Mon",
    recurring_days=("Mon", "Tue", "Wed", "Thu", "Fri"),
)

SUNDAY_WEEK = WeekConvention(
    week_start="Sun",
    recurring_days=("Sun", "Mon", "Tue", "Wed", "Thu"),
)

CONVENTIONS: Dict[str, WeekConvention] = {
    "mon": MONDAY_WEEK,
    "sun": SUNDAY_WEEK,
}


def weekday_token(moment: datetime) -> str:
    return DAY_NAMES[moment.weekday()]


def week_bounds(now: datetime, convention: WeekConvention = MONDAY_WEEK) -> WeekBounds:
    """
    Return the week containing `now`.

    start = midnight of the most recent convention.week_start (today included)
    end   = 23:59:59.999 six days later
    """
    first = DAY_NAMES.index(convention.week_start)
    offset = (now.weekday() - first) % 7

    start = (now - timedelta(days=offset)).replace(hour=0, minute=0, second=0, microsecond=0)
    end = (start + timedelta(days=6)).replace(hour=23, minute=59, second=59, microsecond=999000)
    return WeekBounds(start=start, end=end)
