"""
Central data model definitions used across the project.

This module defines the canonical structure of courses, class occurrences
and projected timetable blocks so that:
- parsing, storage, projection and display share the same field names
- the stored JSON shape is produced and consumed in exactly one place
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Tuple


# Python weekday() order: Monday == 0
DAY_NAMES: Tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class ClassOccurrence:
    """
    One scheduled meeting of a course, exactly as extracted from the schedule text.

    day  -> "Mon(02/26/2026)"
    time -> "08:00:00 - 10:00:00"
    room -> "Block-A 101"
    """

    day: str
    time: str
    room: str

    def to_dict(self) -> Dict[str, str]:
        return {"day": self.day, "time": self.time, "room": self.room}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClassOccurrence":
        return cls(
            day=str(data["day"]),
            time=str(data["time"]),
            room=str(data.get("room", "") or ""),
        )


@dataclass(frozen=True)
class Course:
    """
    Represents one course as stored in the data file.

    The classes tuple is derived from one schedule string when the course is
    created and is only ever replaced as a whole.
    """

    name: str
    lecturer: str
    classes: Tuple[ClassOccurrence, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "lecturer": self.lecturer,
            "classes": [c.to_dict() for c in self.classes],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Course":
        classes = data.get("classes") or []
        return cls(
            name=str(data.get("name", "") or ""),
            lecturer=str(data.get("lecturer", "") or ""),
            classes=tuple(ClassOccurrence.from_dict(c) for c in classes),
        )


@dataclass(frozen=True)
class WeekBounds:
    """
    The 7-day window of the current week: midnight of the first day up to
    23:59:59.999 of the last day, both ends inclusive.
    """

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end

    def contains_date(self, day: date) -> bool:
        return self.start.date() <= day <= self.end.date()


@dataclass(frozen=True)
class WeekConvention:
    """
    Which weekday starts the week and which weekdays hold recurring classes.

    recurring_dated controls dated occurrences that fall outside the week:
    False -> the date decides (excluded), True -> they still recur on their weekday.
    """

    week_start: str
    recurring_days: Tuple[str, ...]
    recurring_dated: bool = False

    def cycle(self) -> Tuple[str, ...]:
        i = DAY_NAMES.index(self.week_start)
        return DAY_NAMES[i:] + DAY_NAMES[:i]


@dataclass(frozen=True)
class ClassBlock:
    """
    One class occurrence projected into the current week.

    Times are post-remap when Ramadan mode is active.
    color_index is the course position modulo the palette size.
    """

    course_name: str
    lecturer: str
    day: str
    start_h: int
    start_m: int
    end_h: int
    end_m: int
    room: str
    color_index: int = 0

    @property
    def start_minutes(self) -> int:
        return self.start_h * 60 + self.start_m

    @property
    def end_minutes(self) -> int:
        return self.end_h * 60 + self.end_m


@dataclass(frozen=True)
class UpcomingClass:
    """
    Result of the upcoming-class selection: the block plus whether it is running now.
    """

    block: ClassBlock
    ongoing: bool = False
