"""Batch application: run a Plan through a Scheduler in input order.

Reservations go first, then meetings. Earlier requests get first choice of
capacity, so input order is priority order.
"""

from __future__ import annotations

from dataclasses import dataclass

from meeting_grid.loaders import MeetingSpec, Plan, ReservationSpec
from meeting_grid.scheduler import Scheduler
from meeting_grid.types import SchedulingError


@dataclass(frozen=True)
class Outcome:
    """Result of one request in a batch."""

    request: ReservationSpec | MeetingSpec
    accepted: bool
    error: SchedulingError | None = None


@dataclass(frozen=True)
class PlanResult:
    reservations: tuple[Outcome, ...]
    meetings: tuple[Outcome, ...]

    @property
    def accepted(self) -> int:
        return sum(o.accepted for o in self.reservations + self.meetings)

    @property
    def rejected(self) -> tuple[Outcome, ...]:
        return tuple(o for o in self.reservations + self.meetings if not o.accepted)


def apply_plan(scheduler: Scheduler, plan: Plan) -> PlanResult:
    """Apply every request in `plan` to `scheduler`.

    Args:
        scheduler: Target scheduler; mutated in place.
        plan: Validated batch from loaders.load_plan_json / plan_from_dict.

    Returns:
        PlanResult with one Outcome per request, in input order. Rejections
        do not stop the batch.
    """
    reservations = []
    for spec in plan.reservations:
        ok, error = scheduler.try_reserve(spec.day, spec.start_time, spec.duration)
        reservations.append(Outcome(spec, ok, error))

    meetings = []
    for spec in plan.meetings:
        ok, error = scheduler.try_schedule_meeting(
            spec.name,
            spec.type,
            spec.duration,
            preferred_times=spec.preferred_times,
            fixed_day=spec.fixed_day,
            fixed_time=spec.fixed_time,
            frequency=spec.frequency,
        )
        meetings.append(Outcome(spec, ok, error))

    return PlanResult(reservations=tuple(reservations), meetings=tuple(meetings))
