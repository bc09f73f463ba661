"""Shared types: schedule records, meeting requests and the error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class Reservation:
    """An external commitment repeated identically in all four weeks.

    Removed only by a full reset of the owning scheduler.
    """

    day: int
    start_slot: int
    duration_slots: int

    @property
    def day_name(self) -> str:
        from meeting_grid.catalog import day_name

        return day_name(self.day)

    @property
    def start_time(self) -> str:
        from meeting_grid.catalog import slot_time

        return slot_time(self.start_slot)

    @property
    def end_time(self) -> str:
        from meeting_grid.clock import end_time

        return end_time(self.start_slot, self.duration_slots)

    @property
    def duration_minutes(self) -> int:
        return self.duration_slots * 30

    def slots(self) -> range:
        return range(self.start_slot, self.start_slot + self.duration_slots)

    def start_datetimes(self, anchor: date) -> tuple[datetime, ...]:
        """One start datetime per week, relative to the anchor Monday."""
        from meeting_grid.catalog import WEEK_COUNT
        from meeting_grid.clock import occurrence_start

        return tuple(
            occurrence_start(anchor, week, self.day, self.start_slot)
            for week in range(WEEK_COUNT)
        )


@dataclass(frozen=True)
class ScheduleEntry:
    """One committed occurrence of a recurring meeting.

    A weekly meeting produces four entries that differ only in `week`.
    """

    week: int
    day: int
    start_slot: int
    name: str
    meeting_type: str
    duration_slots: int
    frequency: str

    @property
    def day_name(self) -> str:
        from meeting_grid.catalog import day_name

        return day_name(self.day)

    @property
    def start_time(self) -> str:
        from meeting_grid.catalog import slot_time

        return slot_time(self.start_slot)

    @property
    def end_time(self) -> str:
        from meeting_grid.clock import end_time

        return end_time(self.start_slot, self.duration_slots)

    @property
    def duration_minutes(self) -> int:
        return self.duration_slots * 30

    def slots(self) -> range:
        return range(self.start_slot, self.start_slot + self.duration_slots)

    def start_datetime(self, anchor: date) -> datetime:
        from meeting_grid.clock import occurrence_start

        return occurrence_start(anchor, self.week, self.day, self.start_slot)


@dataclass(frozen=True)
class MeetingRequest:
    """Resolved, index-based meeting request. Transient; never stored.

    `fixed_day` and `fixed_slot` are None when unset. An empty
    `preferred_slots` means every slot is tried in table order.
    """

    name: str
    meeting_type: str
    duration_slots: int
    frequency: str
    preferred_slots: tuple[int, ...] = ()
    fixed_day: int | None = None
    fixed_slot: int | None = None

    @property
    def is_fortnightly(self) -> bool:
        return self.frequency == "fortnightly"

    @property
    def occurrences(self) -> int:
        from meeting_grid.catalog import occurrences

        return occurrences(self.frequency)


class SchedulingError(Exception):
    """Base class for every rejected reservation or meeting."""


class ValidationError(SchedulingError, ValueError):
    """Raised when an input value does not resolve against the catalog."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class InfeasibleError(SchedulingError):
    """Raised when no day/time/week combination satisfies the constraints."""

    def __init__(
        self,
        subject: str,
        occurrences_remaining: int,
        occurrences_requested: int,
        reason: str,
    ) -> None:
        self.subject = subject
        self.occurrences_remaining = occurrences_remaining
        self.occurrences_requested = occurrences_requested
        self.reason = reason
        super().__init__(
            f"Infeasible: {subject!r} cannot be placed, "
            f"{occurrences_remaining}/{occurrences_requested} occurrences remaining "
            f"(reason: {reason})"
        )


class PartialCommitError(InfeasibleError):
    """A weekly-family commit ran out of weeks after committing some.

    The committed entries stay on the grid; they are carried here so the
    caller can see exactly what was kept.
    """

    def __init__(
        self,
        subject: str,
        entries: tuple[ScheduleEntry, ...],
        occurrences_requested: int,
    ) -> None:
        self.entries = entries
        super().__init__(
            subject,
            occurrences_remaining=occurrences_requested - len(entries),
            occurrences_requested=occurrences_requested,
            reason="weeks_exhausted",
        )

    @property
    def occurrences_committed(self) -> int:
        return len(self.entries)
