"""Meeting planning: greedy placement of recurring meetings.

walk() is the read-only selection phase: it visits days in ascending load
order and returns the lowest-scoring (day, slot) at which enough weeks are
free. allocate() runs walk() and then commits occurrences to the grid.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence

from meeting_grid.catalog import (
    DAY_COUNT,
    FORTNIGHT_PAIRS,
    SLOT_COUNT,
    WEEK_COUNT,
    day_index,
    duration_slots,
    occurrences,
    slot_index,
)
from meeting_grid.feasibility import can_place
from meeting_grid.grid import TimeGrid
from meeting_grid.types import (
    InfeasibleError,
    MeetingRequest,
    PartialCommitError,
    ScheduleEntry,
    ValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_WEEKLY_MEETING_HOURS = 2.5


def build_request(
    name: str,
    meeting_type: str,
    duration_minutes: int,
    preferred_times: Sequence[str] | str = (),
    fixed_day: str = "",
    fixed_time: str = "",
    frequency: str = "weekly",
) -> MeetingRequest:
    """Resolve string/minute inputs into an index-based MeetingRequest.

    `preferred_times` may be a sequence of "HH:MM" labels or one
    comma-separated string; blank items are ignored and order is kept.
    Empty `fixed_day` / `fixed_time` mean unset.

    Raises ValidationError on the first input that does not resolve.
    """
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name", name, "must not be empty")
    if isinstance(preferred_times, str):
        preferred_times = preferred_times.split(",")
    for label in preferred_times:
        if not isinstance(label, str):
            raise ValidationError("preferred_times", label, "must be an HH:MM string")

    slots = duration_slots(duration_minutes)
    occurrences(frequency)  # validates
    preferred = tuple(
        slot_index(label.strip(), "preferred_times")
        for label in preferred_times
        if label.strip()
    )
    return MeetingRequest(
        name=name.strip(),
        meeting_type=meeting_type,
        duration_slots=slots,
        frequency=frequency,
        preferred_slots=preferred,
        fixed_day=day_index(fixed_day) if fixed_day else None,
        fixed_slot=slot_index(fixed_time, "fixed_time") if fixed_time else None,
    )


@dataclass(frozen=True)
class Placement:
    """Winning candidate from the selection phase.

    For fortnightly requests `weeks` is the week pair the candidate was
    found feasible under; commit reuses it rather than re-deriving it.
    For other frequencies it lists the first feasible weeks in index order.
    """

    day: int
    start_slot: int
    score: float
    weeks: tuple[int, ...]


def day_order(grid: TimeGrid) -> list[int]:
    """Days by ascending total load; ties keep Monday-first order."""
    return sorted(range(DAY_COUNT), key=lambda d: grid.total_hours[d])


def time_candidates(request: MeetingRequest) -> list[int]:
    """Fixed slot, else preferred slots as supplied, else every slot."""
    if request.fixed_slot is not None:
        return [request.fixed_slot]
    if request.preferred_slots:
        return list(request.preferred_slots)
    return list(range(SLOT_COUNT))


def _feasible_weeks(
    grid: TimeGrid,
    request: MeetingRequest,
    day: int,
    slot: int,
    pair: tuple[int, int] | None,
) -> tuple[int, ...]:
    if pair is not None:
        if all(can_place(grid, w, day, slot, request.duration_slots) for w in pair):
            return pair
        return ()

    found: list[int] = []
    for week in range(WEEK_COUNT):
        if can_place(grid, week, day, slot, request.duration_slots):
            found.append(week)
        if len(found) >= request.occurrences:
            break
    return tuple(found)


def walk(
    grid: TimeGrid,
    request: MeetingRequest,
    max_weekly_meeting_hours: float = DEFAULT_MAX_WEEKLY_MEETING_HOURS,
) -> Placement:
    """Read-only: choose a day and start slot. Does NOT mutate the grid.

    Days whose average weekly meeting load already exceeds
    `max_weekly_meeting_hours` are skipped; reservations do not count
    toward that cap. The score is the day's total load plus the meeting's
    own hours, so it only discriminates between days. The first candidate
    found keeps ties.

    Raises:
        InfeasibleError: no candidate reaches the required occurrence count.
    """
    needed = request.occurrences
    pools: tuple[tuple[int, int] | None, ...] = (
        FORTNIGHT_PAIRS if request.is_fortnightly else (None,)
    )
    days = [request.fixed_day] if request.fixed_day is not None else day_order(grid)

    best: Placement | None = None
    for pair in pools:
        for day in days:
            if grid.meeting_hours[day] / WEEK_COUNT > max_weekly_meeting_hours:
                continue
            for slot in time_candidates(request):
                if slot < 0 or slot >= SLOT_COUNT:
                    continue
                weeks = _feasible_weeks(grid, request, day, slot, pair)
                if len(weeks) < needed:
                    continue
                score = grid.total_hours[day] + request.duration_slots * 0.5
                if best is None or score < best.score:
                    best = Placement(day=day, start_slot=slot, score=score, weeks=weeks)

    if best is None:
        raise InfeasibleError(request.name, needed, needed, reason="no_candidate")

    logger.debug(
        "%r: chose day=%d slot=%d score=%.1f weeks=%s",
        request.name, best.day, best.start_slot, best.score, best.weeks,
    )
    return best


def _commit(
    grid: TimeGrid,
    entries: list[ScheduleEntry],
    request: MeetingRequest,
    week: int,
    placement: Placement,
) -> ScheduleEntry:
    entry = ScheduleEntry(
        week=week,
        day=placement.day,
        start_slot=placement.start_slot,
        name=request.name,
        meeting_type=request.meeting_type,
        duration_slots=request.duration_slots,
        frequency=request.frequency,
    )
    grid.mark_span(week, placement.day, placement.start_slot, request.duration_slots)
    hours = request.duration_slots * 0.5
    grid.total_hours[placement.day] += hours
    grid.meeting_hours[placement.day] += hours
    entries.append(entry)
    return entry


def allocate(
    grid: TimeGrid,
    entries: list[ScheduleEntry],
    request: MeetingRequest,
    rng: random.Random,
    max_weekly_meeting_hours: float = DEFAULT_MAX_WEEKLY_MEETING_HOURS,
) -> tuple[ScheduleEntry, ...]:
    """Walk + commit. Returns the committed entries in commit order.

    Fortnightly meetings commit to the week pair chosen by walk(). Every
    other frequency shuffles the four weeks once with `rng` and, for each
    occurrence, takes the first unassigned week still free at the chosen
    slot.

    Raises:
        InfeasibleError: walk() found nothing; the grid is untouched.
        PartialCommitError: weeks ran out after some occurrences were
            committed. Those occurrences stay committed.
    """
    placement = walk(grid, request, max_weekly_meeting_hours)

    if request.is_fortnightly:
        return tuple(
            _commit(grid, entries, request, week, placement)
            for week in placement.weeks
        )

    weeks = list(range(WEEK_COUNT))
    rng.shuffle(weeks)

    needed = request.occurrences
    assigned: set[int] = set()
    committed: list[ScheduleEntry] = []
    for _ in range(needed):
        week = next(
            (
                w for w in weeks
                if w not in assigned
                and can_place(grid, w, placement.day, placement.start_slot,
                              request.duration_slots)
            ),
            None,
        )
        if week is None:
            if committed:
                logger.warning(
                    "%r: committed %d of %d occurrences before weeks ran out",
                    request.name, len(committed), needed,
                )
                raise PartialCommitError(request.name, tuple(committed), needed)
            raise InfeasibleError(request.name, needed, needed, reason="weeks_exhausted")
        committed.append(_commit(grid, entries, request, week, placement))
        assigned.add(week)

    return tuple(committed)
