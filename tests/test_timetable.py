"""
Unit tests for the weekly projection.

Reference week (Monday convention): Mon 23 Feb 2026 .. Sun 1 Mar 2026.
"""

import unittest
from dataclasses import replace
from datetime import datetime

from classweek.model import ClassOccurrence, Course
from classweek.storage import CourseRepository, MemoryStore, RamadanModeFlag, save_course
from classweek.timetable import COURSE_COLORS, project_week, this_week_classes
from classweek.week import MONDAY_WEEK, SUNDAY_WEEK

NOW = datetime(2026, 2, 25, 10, 0)  # Wednesday


def _course(name: str, *days_and_times: tuple) -> Course:
    classes = tuple(ClassOccurrence(day=d, time=t, room="Block-A 101") for d, t in days_and_times)
    return Course(name=name, lecturer="Dr. X", classes=classes)


class TestWeekMembership(unittest.TestCase):
    def test_dated_inside_week_included_including_weekend(self) -> None:
        course = _course(
            "Algebra",
            ("Mon(02/23/2026)", "08:00:00 - 10:00:00"),
            ("Sat(02/28/2026)", "10:00:00 - 12:00:00"),
        )
        blocks = project_week([course], NOW)
        self.assertEqual([b.day for b in blocks], ["Mon", "Sat"])

    def test_date_on_week_end_included(self) -> None:
        course = _course("Algebra", ("Sun(03/01/2026)", "08:00:00 - 10:00:00"))
        self.assertEqual(len(project_week([course], NOW)), 1)

    def test_date_before_week_start_excluded_even_for_recurring_weekday(self) -> None:
        course = _course(
            "Algebra",
            ("Mon(02/22/2026)", "08:00:00 - 10:00:00"),
            ("Mon(02/16/2026)", "08:00:00 - 10:00:00"),
        )
        self.assertEqual(project_week([course], NOW), [])

    def test_recurring_dated_convention_falls_back_to_weekday(self) -> None:
        convention = replace(MONDAY_WEEK, recurring_dated=True)
        course = _course(
            "Algebra",
            ("Mon(02/16/2026)", "08:00:00 - 10:00:00"),
            ("Sat(02/21/2026)", "08:00:00 - 10:00:00"),
        )
        blocks = project_week([course], NOW, convention=convention)
        self.assertEqual([b.day for b in blocks], ["Mon"])

    def test_missing_or_invalid_date_uses_weekday(self) -> None:
        course = _course(
            "Algebra",
            ("Tue(02/30/2026)", "08:00:00 - 10:00:00"),
            ("Sat(02/30/2026)", "08:00:00 - 10:00:00"),
            ("Thu", "08:00:00 - 10:00:00"),
        )
        blocks = project_week([course], NOW)
        self.assertEqual([b.day for b in blocks], ["Tue", "Thu"])

    def test_sunday_convention_recurring_days(self) -> None:
        course = _course(
            "Algebra",
            ("Sun", "08:00:00 - 10:00:00"),
            ("Fri", "08:00:00 - 10:00:00"),
        )
        self.assertEqual([b.day for b in project_week([course], NOW, convention=SUNDAY_WEEK)], ["Sun"])
        self.assertEqual([b.day for b in project_week([course], NOW, convention=MONDAY_WEEK)], ["Fri"])


class TestProjection(unittest.TestCase):
    def test_block_fields_and_order(self) -> None:
        a = _course("A", ("Thu(02/26/2026)", "14:00:00 - 16:00:00"), ("Mon(02/23/2026)", "08:30:00 - 10:00:00"))
        b = _course("B", ("Tue(02/24/2026)", "10:00:00 - 12:00:00"))
        blocks = project_week([a, b], NOW)

        self.assertEqual([(x.course_name, x.day) for x in blocks], [("A", "Thu"), ("A", "Mon"), ("B", "Tue")])
        second = blocks[1]
        self.assertEqual((second.start_h, second.start_m, second.end_h, second.end_m), (8, 30, 10, 0))
        self.assertEqual(second.lecturer, "Dr. X")
        self.assertEqual(second.room, "Block-A 101")

    def test_ramadan_mode_remaps_standard_slots_only(self) -> None:
        course = _course(
            "A",
            ("Mon(02/23/2026)", "08:00:00 - 10:00:00"),
            ("Tue(02/24/2026)", "07:00:00 - 09:00:00"),
        )
        blocks = project_week([course], NOW, ramadan_active=True)
        self.assertEqual((blocks[0].start_h, blocks[0].start_m, blocks[0].end_h, blocks[0].end_m), (8, 0, 9, 15))
        self.assertEqual((blocks[1].start_h, blocks[1].start_m, blocks[1].end_h, blocks[1].end_m), (7, 0, 9, 0))

    def test_color_index_wraps_palette(self) -> None:
        courses = [_course(str(i), ("Mon", "08:00:00 - 10:00:00")) for i in range(len(COURSE_COLORS) + 1)]
        blocks = project_week(courses, NOW)
        self.assertEqual(blocks[0].color_index, 0)
        self.assertEqual(blocks[-1].color_index, 0)
        self.assertEqual(blocks[-2].color_index, len(COURSE_COLORS) - 1)

    def test_unparseable_time_is_skipped(self) -> None:
        course = _course("A", ("Mon", "whenever"), ("Tue", "08:00:00 - 10:00:00"))
        self.assertEqual([b.day for b in project_week([course], NOW)], ["Tue"])

    def test_empty_repository(self) -> None:
        self.assertEqual(project_week([], NOW), [])


class TestThisWeekClasses(unittest.TestCase):
    def test_reads_repository_and_flag(self) -> None:
        store = MemoryStore()
        repo = CourseRepository(store)
        flag = RamadanModeFlag(store)
        save_course(repo, "Algebra", "Dr. X", "Mon(02/23/2026) 10:00:00 - 12:00:00 Block-A 101")

        blocks = this_week_classes(repo, flag, now=NOW)
        self.assertEqual((blocks[0].start_h, blocks[0].end_h), (10, 12))

        flag.set_active(True)
        blocks = this_week_classes(repo, flag, now=NOW)
        self.assertEqual((blocks[0].start_h, blocks[0].start_m, blocks[0].end_h, blocks[0].end_m), (9, 15, 10, 30))


if __name__ == "__main__":
    unittest.main()
