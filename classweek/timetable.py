"""
Weekly projection: stored courses -> flat list of class blocks for this week.

Week membership rule:
1. occurrence has a date inside this week -> included
2. otherwise -> included if its weekday is one of the recurring weekdays
   (dated occurrences outside the week only take this path when the
   convention sets recurring_dated)

Order of the result: course order, then occurrence order. No sorting by time.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from classweek.model import ClassBlock, ClassOccurrence, Course, WeekBounds, WeekConvention
from classweek.parse import extract_date, extract_day_name, parse_time_range
from classweek.remap import remap
from classweek.week import MONDAY_WEEK, week_bounds

logger = logging.getLogger(__name__)


COURSE_COLORS: List[Dict[str, str]] = [
    {"bg": "#dbeafe", "border": "#3b82f6", "text": "#1e3a5f"},
    {"bg": "#dcfce7", "border": "#22c55e", "text": "#14532d"},
    {"bg": "#fef9c3", "border": "#eab308", "text": "#713f12"},
    {"bg": "#fce7f3", "border": "#ec4899", "text": "#831843"},
    {"bg": "#e0e7ff", "border": "#6366f1", "text": "#312e81"},
    {"bg": "#ffedd5", "border": "#f97316", "text": "#7c2d12"},
    {"bg": "#f3e8ff", "border": "#a855f7", "text": "#581c87"},
    {"bg": "#ccfbf1", "border": "#14b8a6", "text": "#134e4a"},
]


def in_this_week(occurrence: ClassOccurrence, bounds: WeekBounds, convention: WeekConvention) -> bool:
    day_name = extract_day_name(occurrence.day)
    cls_date = extract_date(occurrence.day)

    if cls_date is not None:
        if bounds.contains_date(cls_date):
            return True
        if not convention.recurring_dated:
            return False

    # recurring schedules: match by day name
    return day_name in convention.recurring_days


def project_week(
    courses: Sequence[Course],
    now: datetime,
    ramadan_active: bool = False,
    convention: WeekConvention = MONDAY_WEEK,
    palette_size: int = len(COURSE_COLORS),
) -> List[ClassBlock]:
    """
    Return the class blocks of the week containing `now`.

    When ramadan_active is True, standard slots are compressed via remap().
    """
    bounds = week_bounds(now, convention)
    blocks: List[ClassBlock] = []

    for ci, course in enumerate(courses):
        color_index = ci % palette_size
        for occurrence in course.classes:
            if not in_this_week(occurrence, bounds, convention):
                continue

            time_range = parse_time_range(occurrence.time)
            if time_range is None:
                logger.debug("Skipping unparseable time %r of %s", occurrence.time, course.name)
                continue
            (start_h, start_m), (end_h, end_m) = time_range

            if ramadan_active:
                start_h, start_m, end_h, end_m = remap(start_h, start_m, end_h, end_m)

            blocks.append(
                ClassBlock(
                    course_name=course.name,
                    lecturer=course.lecturer,
                    day=extract_day_name(occurrence.day),
                    start_h=start_h,
                    start_m=start_m,
                    end_h=end_h,
                    end_m=end_m,
                    room=occurrence.room,
                    color_index=color_index,
                )
            )

    return blocks


def this_week_classes(
    repository,
    flag,
    now: Optional[datetime] = None,
    convention: WeekConvention = MONDAY_WEEK,
) -> List[ClassBlock]:
    """
    Load the courses once, read the Ramadan flag once, and project this week.

    repository needs load(), flag needs is_active() (see classweek.storage).
    """
    moment = now if now is not None else datetime.now()
    return project_week(
        repository.load(),
        moment,
        ramadan_active=flag.is_active(),
        convention=convention,
    )
