"""Scheduler configuration."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from meeting_grid.meetings import DEFAULT_MAX_WEEKLY_MEETING_HOURS


@dataclass(frozen=True)
class SchedulerConfig:
    """Tunables for one Scheduler instance. Immutable.

    seed:
        Seeds the scheduler's own random.Random when no RNG is injected.
        None draws from OS entropy.
    anchor_monday:
        Calendar date of week 0, day 0 for clock export.
    max_weekly_meeting_hours:
        Days whose average weekly meeting load exceeds this are skipped
        when placing new meetings.
    """

    seed: int | None = None
    anchor_monday: date = date(2025, 4, 14)
    max_weekly_meeting_hours: float = DEFAULT_MAX_WEEKLY_MEETING_HOURS

    def __post_init__(self) -> None:
        if self.anchor_monday.weekday() != 0:
            raise ValueError(
                f"anchor_monday must be a Monday, got {self.anchor_monday.isoformat()} "
                f"({self.anchor_monday.strftime('%A')})"
            )
        if self.max_weekly_meeting_hours < 0:
            raise ValueError(
                f"max_weekly_meeting_hours must be >= 0, "
                f"got {self.max_weekly_meeting_hours}"
            )


DEFAULT_CONFIG = SchedulerConfig()
