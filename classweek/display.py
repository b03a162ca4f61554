"""
Terminal rendering of courses, the weekly timetable and the next class (rich).
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from classweek.model import ClassBlock, Course, UpcomingClass, WeekConvention
from classweek.timetable import COURSE_COLORS
from classweek.week import MONDAY_WEEK


def format_time12(h: int, m: int) -> str:
    """
    (8, 5) -> "8:05 AM", (0, 0) -> "12:00 AM", (12, 30) -> "12:30 PM"
    """
    ampm = "PM" if h >= 12 else "AM"
    hour = h % 12 or 12
    return f"{hour}:{m:02d} {ampm}"


def block_time_label(block: ClassBlock) -> str:
    return f"{format_time12(block.start_h, block.start_m)} - {format_time12(block.end_h, block.end_m)}"


def _block_style(block: ClassBlock) -> str:
    color = COURSE_COLORS[block.color_index % len(COURSE_COLORS)]
    return f"{color['text']} on {color['bg']}"


def _block_cell(block: ClassBlock) -> Text:
    cell = Text(style=_block_style(block))
    cell.append(block.course_name, style="bold")
    cell.append(f"\n{block_time_label(block)}")
    if block.room:
        cell.append(f"\n@ {block.room}")
    return cell


def render_courses(courses: Sequence[Course], console: Console) -> None:
    if not courses:
        console.print("No courses saved yet.")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Course")
    table.add_column("Lecturer")
    table.add_column("Classes", justify="right")
    for i, course in enumerate(courses, start=1):
        table.add_row(str(i), Text(course.name), Text(course.lecturer), str(len(course.classes)))
    console.print(table)


def render_week(
    blocks: Sequence[ClassBlock],
    console: Console,
    convention: WeekConvention = MONDAY_WEEK,
    ramadan_active: bool = False,
) -> None:
    """
    One column per day: the recurring weekdays plus any other day that has classes.
    """
    title = "This week (Ramadan timings)" if ramadan_active else "This week"
    if not blocks:
        console.print(f"{title}: no classes.")
        return

    buckets: Dict[str, List[ClassBlock]] = {day: [] for day in convention.cycle()}
    for block in blocks:
        buckets.setdefault(block.day, []).append(block)

    days = [d for d, items in buckets.items() if items or d in convention.recurring_days]

    table = Table(title=title, box=box.SIMPLE, show_lines=True)
    for day in days:
        table.add_column(day)
        buckets[day].sort(key=lambda b: b.start_minutes)

    max_len = max(len(buckets[d]) for d in days)
    for r in range(max_len):
        row = [_block_cell(buckets[d][r]) if r < len(buckets[d]) else Text("") for d in days]
        table.add_row(*row)
    console.print(table)


def render_upcoming(result: Optional[UpcomingClass], console: Console) -> None:
    if result is None:
        console.print("No upcoming classes.")
        return

    block = result.block
    label = "[bold green]Ongoing now[/]" if result.ongoing else "[bold cyan]Next class[/]"
    console.print(f"{label}: [bold]{escape(block.course_name)}[/] ({escape(block.lecturer)})")
    console.print(f"  {block.day} {block_time_label(block)} @ {escape(block.room)}")
