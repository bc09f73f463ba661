"""Scheduler: the aggregate that owns the grid, counters and record lists.

All mutating operations and snapshots go through one lock per instance, so
a Scheduler can be shared by concurrent request handlers. Planner errors
never escape: each mutating call answers True or False. The try_* variants
also return the rejection itself; `last_error` only holds the most recent
one and is shared by every caller.
"""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from typing import Sequence

from meeting_grid.config import DEFAULT_CONFIG, SchedulerConfig
from meeting_grid.grid import TimeGrid
from meeting_grid.meetings import allocate, build_request
from meeting_grid.reservations import reserve
from meeting_grid.types import (
    PartialCommitError,
    Reservation,
    ScheduleEntry,
    SchedulingError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchedulerSnapshot:
    """Read-only copy of scheduler state for renderers and exporters."""

    entries: tuple[ScheduleEntry, ...]
    reservations: tuple[Reservation, ...]
    blocked: tuple[tuple[tuple[bool, ...], ...], ...]
    total_hours: tuple[float, ...]
    meeting_hours: tuple[float, ...]

    def entries_for(self, week: int, day: int) -> tuple[ScheduleEntry, ...]:
        return tuple(e for e in self.entries if e.week == week and e.day == day)

    def reservations_for(self, day: int) -> tuple[Reservation, ...]:
        return tuple(r for r in self.reservations if r.day == day)

    def is_empty(self) -> bool:
        return (
            not self.entries
            and not self.reservations
            and not any(any(any(row) for row in days) for days in self.blocked)
        )


class Scheduler:
    """Owns one TimeGrid plus the reservation and schedule-entry lists.

    Args:
        config: Tunables; defaults to DEFAULT_CONFIG.
        rng: Source of randomness for week shuffling. When omitted a private
            random.Random seeded from `config.seed` is used; process-global
            random state is never touched.
    """

    def __init__(
        self,
        config: SchedulerConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG
        self._rng = rng if rng is not None else random.Random(self.config.seed)
        self._lock = threading.RLock()
        self._grid = TimeGrid()
        self._reservations: list[Reservation] = []
        self._entries: list[ScheduleEntry] = []
        self.last_error: SchedulingError | None = None

    # ------------------------------------------------------------------
    # Mutating surface
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Clear grid, counters, reservations and entries in one step."""
        with self._lock:
            self._grid.clear()
            self._reservations.clear()
            self._entries.clear()
            self.last_error = None
        logger.info("scheduler reset")

    def reserve(self, day: str, start_time: str, duration_minutes: int) -> bool:
        """Reserve the same span in all four weeks. False on any rejection."""
        return self.try_reserve(day, start_time, duration_minutes)[0]

    def try_reserve(
        self, day: str, start_time: str, duration_minutes: int
    ) -> tuple[bool, SchedulingError | None]:
        """Like reserve(), but also hands back this call's own rejection.

        Concurrent callers should use this rather than reading `last_error`,
        which another caller may overwrite as soon as the lock is released.
        """
        with self._lock:
            try:
                record = reserve(
                    self._grid, self._reservations, day, start_time, duration_minutes
                )
            except SchedulingError as exc:
                return self._reject(exc), exc
            self.last_error = None
        logger.info(
            "reserved %s %s-%s in all weeks",
            record.day_name, record.start_time, record.end_time,
        )
        return True, None

    def schedule_meeting(
        self,
        name: str,
        meeting_type: str,
        duration_minutes: int,
        preferred_times: Sequence[str] | str = (),
        fixed_day: str = "",
        fixed_time: str = "",
        frequency: str = "weekly",
    ) -> bool:
        """Place a recurring meeting. False on any rejection.

        A weekly-family meeting may end up partially committed; that still
        answers False, and `last_error` is then a PartialCommitError listing
        the entries that were kept.
        """
        return self.try_schedule_meeting(
            name, meeting_type, duration_minutes,
            preferred_times, fixed_day, fixed_time, frequency,
        )[0]

    def try_schedule_meeting(
        self,
        name: str,
        meeting_type: str,
        duration_minutes: int,
        preferred_times: Sequence[str] | str = (),
        fixed_day: str = "",
        fixed_time: str = "",
        frequency: str = "weekly",
    ) -> tuple[bool, SchedulingError | None]:
        """Like schedule_meeting(), but also hands back this call's rejection."""
        with self._lock:
            try:
                request = build_request(
                    name, meeting_type, duration_minutes,
                    preferred_times, fixed_day, fixed_time, frequency,
                )
                committed = allocate(
                    self._grid, self._entries, request, self._rng,
                    self.config.max_weekly_meeting_hours,
                )
            except SchedulingError as exc:
                return self._reject(exc), exc
            self.last_error = None
        first = committed[0]
        logger.info(
            "scheduled %r on %s at %s in weeks %s",
            request.name, first.day_name, first.start_time,
            [e.week + 1 for e in committed],
        )
        return True, None

    def _reject(self, exc: SchedulingError) -> bool:
        self.last_error = exc
        if isinstance(exc, PartialCommitError):
            logger.warning("partially committed: %s", exc)
        else:
            logger.info("rejected: %s", exc)
        return False

    # ------------------------------------------------------------------
    # Read surface
    # ------------------------------------------------------------------

    def snapshot(self) -> SchedulerSnapshot:
        with self._lock:
            return SchedulerSnapshot(
                entries=tuple(self._entries),
                reservations=tuple(self._reservations),
                blocked=self._grid.as_nested(),
                total_hours=tuple(self._grid.total_hours),
                meeting_hours=tuple(self._grid.meeting_hours),
            )

    @property
    def entries(self) -> tuple[ScheduleEntry, ...]:
        with self._lock:
            return tuple(self._entries)

    @property
    def reservations(self) -> tuple[Reservation, ...]:
        with self._lock:
            return tuple(self._reservations)
