"""Data loading utilities for scheduler config and batch plans."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from meeting_grid.config import SchedulerConfig
from meeting_grid.schema import validate_config, validate_plan


@dataclass(frozen=True)
class ReservationSpec:
    day: str
    start_time: str
    duration: int


@dataclass(frozen=True)
class MeetingSpec:
    name: str
    duration: int
    type: str = ""
    preferred_times: tuple[str, ...] = ()
    fixed_day: str = ""
    fixed_time: str = ""
    frequency: str = "weekly"


@dataclass(frozen=True)
class Plan:
    """A validated batch of requests, applied in input order."""

    reservations: tuple[ReservationSpec, ...] = ()
    meetings: tuple[MeetingSpec, ...] = ()


def _read_json(path: Path):
    with open(path) as f:
        return json.load(f)


def _raise_errors(path: Path, errors: list[str]) -> None:
    if errors:
        raise ValueError(
            f"Validation errors in {path.name}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


def load_config_json(path: str | Path) -> SchedulerConfig:
    """Load a SchedulerConfig from a JSON file. All keys are optional:

    {"seed": 7, "anchor_monday": "2025-04-14", "max_weekly_meeting_hours": 2.5}

    Raises ValueError if validation fails.
    """
    path = Path(path)
    data = _read_json(path)
    _raise_errors(path, validate_config(data))

    kwargs: dict = {}
    if "seed" in data:
        kwargs["seed"] = data["seed"]
    if "anchor_monday" in data:
        kwargs["anchor_monday"] = date.fromisoformat(data["anchor_monday"])
    if "max_weekly_meeting_hours" in data:
        kwargs["max_weekly_meeting_hours"] = float(data["max_weekly_meeting_hours"])
    return SchedulerConfig(**kwargs)


def plan_from_dict(data: dict, source: str = "<plan>") -> Plan:
    """Build a Plan from an already-parsed document. Raises ValueError."""
    _raise_errors(Path(source), validate_plan(data))

    reservations = tuple(
        ReservationSpec(r["day"], r["start_time"], r["duration"])
        for r in data.get("reservations", [])
    )
    meetings = []
    for m in data.get("meetings", []):
        preferred = m.get("preferred_times", [])
        if isinstance(preferred, str):
            preferred = preferred.split(",")
        meetings.append(
            MeetingSpec(
                name=m["name"],
                duration=m["duration"],
                type=m.get("type", ""),
                preferred_times=tuple(p.strip() for p in preferred if p.strip()),
                fixed_day=m.get("fixed_day") or "",
                fixed_time=m.get("fixed_time") or "",
                frequency=m.get("frequency", "weekly"),
            )
        )
    return Plan(reservations=reservations, meetings=tuple(meetings))


def load_plan_json(path: str | Path) -> Plan:
    """Load a batch plan from a JSON file.

    The JSON file must have the format:
    {
        "reservations": [{"day": "Tuesday", "start_time": "14:00", "duration": 60}],
        "meetings": [{"name": "Team Sync", "type": "Design", "duration": 30,
                      "preferred_times": ["09:30"], "fixed_day": "",
                      "fixed_time": "", "frequency": "weekly"}]
    }

    The whole document is validated before a Plan is returned.
    Raises ValueError if validation fails.
    """
    path = Path(path)
    return plan_from_dict(_read_json(path), source=str(path))
