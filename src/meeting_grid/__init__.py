"""meeting-grid: Slot allocation for recurring meetings on a four-week grid."""

from meeting_grid.config import SchedulerConfig
from meeting_grid.feasibility import can_place
from meeting_grid.grid import TimeGrid
from meeting_grid.meetings import Placement, allocate, build_request, walk
from meeting_grid.reservations import reserve
from meeting_grid.scheduler import Scheduler, SchedulerSnapshot
from meeting_grid.types import (
    InfeasibleError,
    MeetingRequest,
    PartialCommitError,
    Reservation,
    ScheduleEntry,
    SchedulingError,
    ValidationError,
)

__all__ = [
    "InfeasibleError",
    "MeetingRequest",
    "PartialCommitError",
    "Placement",
    "Reservation",
    "ScheduleEntry",
    "Scheduler",
    "SchedulerConfig",
    "SchedulerSnapshot",
    "SchedulingError",
    "TimeGrid",
    "ValidationError",
    "allocate",
    "build_request",
    "can_place",
    "reserve",
    "walk",
]
