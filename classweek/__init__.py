"""
classweek – weekly class timetable built from pasted schedule text.
"""

from pathlib import Path

__version__ = (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()

from classweek.model import ClassBlock, ClassOccurrence, Course, UpcomingClass, WeekBounds, WeekConvention
from classweek.parse import parse_schedule_string
from classweek.remap import remap
from classweek.storage import CourseRepository, JsonFileStore, MemoryStore, RamadanModeFlag, delete_course, save_course
from classweek.timetable import project_week, this_week_classes
from classweek.upcoming import select_upcoming, upcoming_class
from classweek.week import MONDAY_WEEK, SUNDAY_WEEK, week_bounds

__all__ = [
    "ClassBlock",
    "ClassOccurrence",
    "Course",
    "CourseRepository",
    "JsonFileStore",
    "MONDAY_WEEK",
    "MemoryStore",
    "RamadanModeFlag",
    "SUNDAY_WEEK",
    "UpcomingClass",
    "WeekBounds",
    "WeekConvention",
    "delete_course",
    "parse_schedule_string",
    "project_week",
    "remap",
    "save_course",
    "select_upcoming",
    "this_week_classes",
    "upcoming_class",
    "week_bounds",
]
