"""Boundary: slot index ↔ clock time, and grid position → datetime."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

# Latest permitted end of any span, in decimal hours (inclusive).
DAY_END_HOUR = 17.0

_FIRST_HOUR = 9
_AFTERNOON_SLOT = 6


def slot_to_hour(slot: int) -> float:
    """Decimal start hour for a slot: slot 2 -> 10.0, slot 3 -> 10.5.

    From slot 6 on, one hour is added for the lunch break.
    """
    hour = slot // 2 + _FIRST_HOUR
    minute = (slot % 2) * 30
    if slot >= _AFTERNOON_SLOT:
        hour += 1
    return hour + minute / 60.0


def end_hour(slot: int, duration_slots: int) -> float:
    """Decimal end hour of a span of `duration_slots` starting at `slot`."""
    return slot_to_hour(slot) + duration_slots * 0.5


def slot_to_clock(slot: int) -> time:
    hours = slot_to_hour(slot)
    whole = int(hours)
    return time(whole, int(round((hours - whole) * 60)))


def end_time(slot: int, duration_slots: int) -> str:
    """End of a span as "HH:MM", e.g. end_time(2, 2) -> "11:00"."""
    hours = end_hour(slot, duration_slots)
    whole = int(hours)
    return f"{whole:02d}:{int(round((hours - whole) * 60)):02d}"


def occurrence_start(anchor: date, week: int, day: int, slot: int) -> datetime:
    """Datetime of a grid position: anchor Monday + 7*week + day days.

    All datetimes are naive (local wall-clock time).
    """
    d = anchor + timedelta(days=7 * week + day)
    return datetime.combine(d, slot_to_clock(slot))
