"""Feasibility: does a span fit business hours, avoid the break, and lie free?

Both predicates are read-only over grid state.
"""

from __future__ import annotations

from meeting_grid.catalog import SLOT_COUNT, SLOT_TIMES, is_break_time
from meeting_grid.clock import DAY_END_HOUR, end_hour
from meeting_grid.grid import TimeGrid


def fits_business_hours(start_slot: int, duration_slots: int) -> bool:
    """Span starts on a real slot, ends by 17:00 and never touches the break.

    The end-of-day boundary is inclusive: 16:00 + 60 minutes is allowed.

    SLOT_TIMES holds no break labels, so the two break checks never fire for
    an in-range slot. They only matter if the slot table ever gains the
    12:00/12:30 entries.
    """
    if start_slot < 0 or start_slot >= SLOT_COUNT:
        return False
    if is_break_time(SLOT_TIMES[start_slot]):
        return False
    if end_hour(start_slot, duration_slots) > DAY_END_HOUR:
        return False
    for slot in range(start_slot, start_slot + duration_slots):
        if slot >= SLOT_COUNT or is_break_time(SLOT_TIMES[slot]):
            return False
    return True


def can_place(
    grid: TimeGrid,
    week: int,
    day: int,
    start_slot: int,
    duration_slots: int,
) -> bool:
    """True iff the span fits business hours and is free in this (week, day)."""
    if not fits_business_hours(start_slot, duration_slots):
        return False
    return not any(
        grid.is_blocked(week, day, slot)
        for slot in range(start_slot, start_slot + duration_slots)
    )
