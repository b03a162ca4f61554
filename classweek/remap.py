"""
Ramadan mode: compress the standard two-hour slots onto the shortened grid.

Normal day: five back-to-back 2h slots from 08:00 to 18:00.
Ramadan day: the same five slots, 1h15 each, from 08:00 to 14:15.

Only exact slot matches are compressed. Anything else (labs, 3h seminars,
slots starting at odd times) is returned unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

HourMinute = Tuple[int, int]


@dataclass(frozen=True)
class SlotMapping:
    from_start: HourMinute
    from_end: HourMinute
    to_start: HourMinute
    to_end: HourMinute


RAMADAN_SLOTS: Tuple[SlotMapping, ...] = (
    SlotMapping((8, 0), (10, 0), (8, 0), (9, 15)),
    SlotMapping((10, 0), (12, 0), (9, 15), (10, 30)),
    SlotMapping((12, 0), (14, 0), (10, 30), (11, 45)),
    SlotMapping((14, 0), (16, 0), (11, 45), (13, 0)),
    SlotMapping((16, 0), (18, 0), (13, 0), (14, 15)),
)


def remap(
    start_h: int,
    start_m: int,
    end_h: int,
    end_m: int,
    table: Sequence[SlotMapping] = RAMADAN_SLOTS,
) -> Tuple[int, int, int, int]:
    """
    Map a normal time range to its compressed slot, first match wins.

    >>> remap(8, 0, 10, 0)
    (8, 0, 9, 15)
    >>> remap(7, 0, 9, 0)
    (7, 0, 9, 0)
    """
    start = (start_h, start_m)
    end = (end_h, end_m)
    for slot in table:
        if slot.from_start == start and slot.from_end == end:
            return slot.to_start + slot.to_end
    return start_h, start_m, end_h, end_m
