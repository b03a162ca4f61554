"""
Upcoming class selection.

Scoring (lower is better):
    score = day_diff * 1440 + start_minute_of_day

- day_diff is the distance in days from today, wrapping around the week
- a class that already started today and is still running is "ongoing"
  and wins over everything else; the first ongoing block found is kept
- a class that already ended today counts as next week's (day_diff = 7)
- equal scores keep the block found first
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from classweek.model import ClassBlock, UpcomingClass, WeekConvention
from classweek.timetable import this_week_classes
from classweek.week import MONDAY_WEEK, weekday_token

MINUTES_PER_DAY = 24 * 60
_ONGOING_SCORE = -1


def select_upcoming(
    blocks: Sequence[ClassBlock],
    now: datetime,
    convention: WeekConvention = MONDAY_WEEK,
) -> Optional[UpcomingClass]:
    """
    Pick the ongoing class, or else the closest upcoming one. None if nothing qualifies.
    """
    day_order = convention.cycle()
    current_day = weekday_token(now)
    current_minutes = now.hour * 60 + now.minute

    cur_idx = day_order.index(current_day)

    best: Optional[UpcomingClass] = None
    best_score: Optional[int] = None

    for block in blocks:
        if block.day not in day_order:
            continue

        day_diff = (day_order.index(block.day) - cur_idx) % 7
        start = block.start_minutes

        if day_diff == 0 and start <= current_minutes:
            if block.end_minutes > current_minutes:
                if best_score is None or best_score > _ONGOING_SCORE:
                    best = UpcomingClass(block=block, ongoing=True)
                    best_score = _ONGOING_SCORE
                continue
            day_diff = 7

        score = day_diff * MINUTES_PER_DAY + start
        if best_score is None or score < best_score:
            best = UpcomingClass(block=block, ongoing=False)
            best_score = score

    return best


def upcoming_class(
    repository,
    flag,
    now: Optional[datetime] = None,
    convention: WeekConvention = MONDAY_WEEK,
) -> Optional[UpcomingClass]:
    """
    Project this week from the repository and select the next/ongoing class.
    """
    moment = now if now is not None else datetime.now()
    blocks = this_week_classes(repository, flag, now=moment, convention=convention)
    return select_upcoming(blocks, moment, convention)
