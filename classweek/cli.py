"""
CLI (Command Line Interface).

    classweek add <name> <lecturer> <schedule text>
    classweek list
    classweek delete <number>
    classweek week
    classweek next
    classweek ramadan on|off|status

Global options:
    --data PATH          data file (default: $CLASSWEEK_DATA or ~/.classweek/classweek.json)
    --week-start mon|sun week convention (Mon..Fri or Sun..Thu classes)
    -v / --verbose       debug logging
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime

from rich.console import Console

from classweek import __version__
from classweek.display import render_courses, render_upcoming, render_week
from classweek.model import WeekConvention
from classweek.storage import (
    CourseRepository,
    JsonFileStore,
    RamadanModeFlag,
    delete_course,
    save_course,
)
from classweek.timetable import this_week_classes
from classweek.upcoming import upcoming_class
from classweek.week import CONVENTIONS


def _cmd_add(args: argparse.Namespace, repo: CourseRepository) -> int:
    """
    Parse the schedule text and append a new course.
    """
    name = (args.name or "").strip()
    if not name:
        print("Please provide a course name.")
        return 1

    course = save_course(repo, name, (args.lecturer or "").strip(), args.timings or "")
    if not course.classes:
        print(f"Warning: no classes found in the schedule text of '{name}' (saved anyway).")
    print(f"Added: {course.name} ({len(course.classes)} classes)")
    return 0


def _cmd_list(console: Console, repo: CourseRepository) -> int:
    render_courses(repo.load(), console)
    return 0


def _cmd_delete(args: argparse.Namespace, repo: CourseRepository) -> int:
    """
    Delete by 1-based position as shown by `list`.
    """
    removed = delete_course(repo, args.number - 1)
    if removed is None:
        print(f"No course number {args.number}.")
        return 1
    print(f"Deleted: {removed.name}")
    return 0


def _cmd_week(
    console: Console, repo: CourseRepository, flag: RamadanModeFlag, convention: WeekConvention
) -> int:
    blocks = this_week_classes(repo, flag, now=datetime.now(), convention=convention)
    render_week(blocks, console, convention=convention, ramadan_active=flag.is_active())
    return 0


def _cmd_next(
    console: Console, repo: CourseRepository, flag: RamadanModeFlag, convention: WeekConvention
) -> int:
    render_upcoming(upcoming_class(repo, flag, now=datetime.now(), convention=convention), console)
    return 0


def _cmd_ramadan(args: argparse.Namespace, flag: RamadanModeFlag) -> int:
    if args.state == "on":
        flag.set_active(True)
    elif args.state == "off":
        flag.set_active(False)
    print(f"Ramadan mode: {'on' if flag.is_active() else 'off'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="classweek", description="Weekly class timetable")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--data", type=str, default=None, help="Path of the JSON data file")
    parser.add_argument(
        "--week-start",
        choices=sorted(CONVENTIONS),
        default="mon",
        help="First day of the week: mon (classes Mon-Fri) or sun (classes Sun-Thu)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_add = sub.add_parser("add", help="Add a course from its schedule text")
    p_add.add_argument("name", type=str, help="Course name")
    p_add.add_argument("lecturer", type=str, help="Lecturer name")
    p_add.add_argument(
        "timings",
        type=str,
        help='Schedule text, e.g. "Mon(02/23/2026) 08:00:00 - 10:00:00 Block-A 101"',
    )

    sub.add_parser("list", help="List saved courses")

    p_delete = sub.add_parser("delete", help="Delete a course by its number in `list`")
    p_delete.add_argument("number", type=int, help="Course number (1-based)")

    sub.add_parser("week", help="Show this week's timetable")
    sub.add_parser("next", help="Show the ongoing or next upcoming class")

    p_ramadan = sub.add_parser("ramadan", help="Toggle Ramadan timings")
    p_ramadan.add_argument("state", choices=["on", "off", "status"])

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    store = JsonFileStore(args.data)
    repo = CourseRepository(store)
    flag = RamadanModeFlag(store)
    convention = CONVENTIONS[args.week_start]
    console = Console()

    if args.command == "add":
        raise SystemExit(_cmd_add(args, repo))
    if args.command == "list":
        raise SystemExit(_cmd_list(console, repo))
    if args.command == "delete":
        raise SystemExit(_cmd_delete(args, repo))
    if args.command == "week":
        raise SystemExit(_cmd_week(console, repo, flag, convention))
    if args.command == "next":
        raise SystemExit(_cmd_next(console, repo, flag, convention))
    if args.command == "ramadan":
        raise SystemExit(_cmd_ramadan(args, flag))

    raise SystemExit(2)
