"""Reservation planning: external commitments repeated across all four weeks."""

from __future__ import annotations

import logging

from meeting_grid.catalog import WEEK_COUNT, day_index, duration_slots, slot_index
from meeting_grid.feasibility import can_place, fits_business_hours
from meeting_grid.grid import TimeGrid
from meeting_grid.types import InfeasibleError, Reservation

logger = logging.getLogger(__name__)


def reserve(
    grid: TimeGrid,
    reservations: list[Reservation],
    day: str,
    start_time: str,
    duration_minutes: int,
) -> Reservation:
    """Block the same span in every week, all-or-nothing.

    Every week is checked before any is booked, so a failure leaves the grid
    untouched. On success the reservation is appended to `reservations` and
    the day's total load grows by the span's hours times four weeks.

    Raises:
        ValidationError: unknown day or time, break time, bad duration.
        InfeasibleError: span leaves business hours or is occupied in any week.
    """
    d = day_index(day)
    start = slot_index(start_time)
    slots = duration_slots(duration_minutes)
    subject = f"reservation {day} {start_time}"

    if not fits_business_hours(start, slots):
        raise InfeasibleError(subject, WEEK_COUNT, WEEK_COUNT, reason="business_hours")

    blocked_weeks = [
        week for week in range(WEEK_COUNT) if not can_place(grid, week, d, start, slots)
    ]
    if blocked_weeks:
        logger.debug("%s collides in weeks %s", subject, blocked_weeks)
        raise InfeasibleError(subject, WEEK_COUNT, WEEK_COUNT, reason="occupied")

    for week in range(WEEK_COUNT):
        grid.mark_span(week, d, start, slots)
    grid.total_hours[d] += slots * 0.5 * WEEK_COUNT

    record = Reservation(day=d, start_slot=start, duration_slots=slots)
    reservations.append(record)
    return record
