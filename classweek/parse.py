"""
Parsing (schedule text -> structured class occurrences).

A schedule string is whatever the student copied from the registration
portal, e.g.

    Mon(02/23/2026) 08:00:00 - 10:00:00 Block-A 101  Wed(02/25/2026) 10:00:00 - 12:00:00 Block-B 204

Important rules:
- every match of the pattern becomes exactly ONE occurrence
- text that does not fit the pattern is skipped, never an error
- day and time are kept in their original text form; they are decomposed
  again at projection time by the helpers below
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import List, Optional, Tuple

from classweek.model import ClassOccurrence


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# <Weekday>(<MM>/<DD>/<YYYY>) <HH>:<MM>:<SS> - <HH>:<MM>:<SS> <Building-Room> <Suffix>
SCHEDULE_RE = re.compile(
    r"(\w+)\((\d{2}/\d{2}/\d{4})\)\s+"
    r"(\d{2}:\d{2}:\d{2})\s+-\s+(\d{2}:\d{2}:\d{2})\s+"
    r"([\w-]+\s+\w+)"
)

_DATE_IN_DAY_RE = re.compile(r"\((\d{2}/\d{2}/\d{4})\)")


# ---------------------------------------------------------------------------
# Schedule string parsing (CORE LOGIC)
# ---------------------------------------------------------------------------


def parse_schedule_string(raw: Optional[str]) -> List[ClassOccurrence]:
    """
    Extract all (day, time, room) occurrences from one raw schedule string.

    Returns an empty list when nothing matches.
    """
    if not raw:
        return []

    results: List[ClassOccurrence] = []
    for match in SCHEDULE_RE.finditer(raw):
        weekday, day_date, start, end, room = match.groups()
        results.append(
            ClassOccurrence(
                day=f"{weekday}({day_date})",
                time=f"{start} - {end}",
                room=room.strip(),
            )
        )
    return results


# ---------------------------------------------------------------------------
# Token helpers
# ---------------------------------------------------------------------------


def extract_day_name(day: str) -> str:
    # "Mon(02/26/2026)" -> "Mon"
    return day.split("(", 1)[0].strip()


def extract_date(day: str) -> Optional[date]:
    """
    Return the calendar date inside the parentheses of a day token, if any.

    Impossible dates (02/30/2026) are treated as missing.
    """
    match = _DATE_IN_DAY_RE.search(day)
    if not match:
        return None
    try:
        return datetime.strptime(match.group(1), "%m/%d/%Y").date()
    except ValueError:
        return None


def parse_time(text: str) -> Optional[Tuple[int, int]]:
    """
    "08:30:00" -> (8, 30). Seconds are dropped.
    """
    parts = text.strip().split(":")
    if len(parts) < 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def parse_time_range(text: str) -> Optional[Tuple[Tuple[int, int], Tuple[int, int]]]:
    """
    "08:00:00 - 10:00:00" -> ((8, 0), (10, 0)), or None if unparseable.
    """
    if " - " not in text:
        return None
    start_s, end_s = text.split(" - ", 1)
    start = parse_time(start_s)
    end = parse_time(end_s)
    if start is None or end is None:
        return None
    return start, end
