"""Input validation for plan and config documents."""

from __future__ import annotations

from datetime import date

from meeting_grid.catalog import (
    BREAK_TIMES,
    DAYS,
    DURATION_MINUTES,
    FREQUENCIES,
    SLOT_TIMES,
)


def _check_time(label: object, where: str, errors: list[str]) -> None:
    if label in BREAK_TIMES:
        errors.append(f"{where}: {label!r} falls in the 12:00-13:00 break")
    elif label not in SLOT_TIMES:
        errors.append(f"{where}: unknown time {label!r}")


def _check_duration(value: object, where: str, errors: list[str]) -> None:
    if type(value) is not int or value not in DURATION_MINUTES:
        errors.append(f"{where}: duration must be 30, 60 or 90, got {value!r}")


def validate_config(data: dict) -> list[str]:
    """Validate a config document. Returns list of error messages (empty = valid).

    Checks:
    - Only known keys are present
    - seed is an integer or null
    - anchor_monday is an ISO date falling on a Monday
    - max_weekly_meeting_hours is a non-negative number
    """
    errors: list[str] = []
    known = {"seed", "anchor_monday", "max_weekly_meeting_hours"}
    for key in data:
        if key not in known:
            errors.append(f"Unknown config key: {key!r}")

    seed = data.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        errors.append(f"seed must be an integer or null, got {seed!r}")

    if "anchor_monday" in data:
        try:
            anchor = date.fromisoformat(data["anchor_monday"])
        except (ValueError, TypeError):
            errors.append(f"Invalid anchor_monday: {data['anchor_monday']!r}")
        else:
            if anchor.weekday() != 0:
                errors.append(f"anchor_monday {anchor.isoformat()} is not a Monday")

    if "max_weekly_meeting_hours" in data:
        cap = data["max_weekly_meeting_hours"]
        if isinstance(cap, bool) or not isinstance(cap, (int, float)) or cap < 0:
            errors.append(
                f"max_weekly_meeting_hours must be a non-negative number, got {cap!r}"
            )

    return errors


def validate_plan(data: dict) -> list[str]:
    """Validate a batch plan. Returns list of error messages.

    Checks every reservation and meeting so the whole document can be
    rejected before anything is applied:
    - Days and times resolve against the catalog (break times rejected)
    - Durations are 30, 60 or 90 minutes
    - Meetings have a non-empty name and a known frequency
    """
    errors: list[str] = []

    for section in ("reservations", "meetings"):
        if not isinstance(data.get(section, []), list):
            errors.append(f"{section} must be a list")
    if errors:
        return errors

    for i, res in enumerate(data.get("reservations", [])):
        where = f"Reservation {i}"
        if not isinstance(res, dict):
            errors.append(f"{where}: expected an object, got {res!r}")
            continue
        for key in ("day", "start_time", "duration"):
            if key not in res:
                errors.append(f"{where}: missing {key!r}")
        if "day" in res and res["day"] not in DAYS:
            errors.append(f"{where}: unknown day {res['day']!r}")
        if "start_time" in res:
            _check_time(res["start_time"], where, errors)
        if "duration" in res:
            _check_duration(res["duration"], where, errors)

    for i, mtg in enumerate(data.get("meetings", [])):
        where = f"Meeting {i}"
        if not isinstance(mtg, dict):
            errors.append(f"{where}: expected an object, got {mtg!r}")
            continue
        name = mtg.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append(f"{where}: missing or empty 'name'")
        if "duration" not in mtg:
            errors.append(f"{where}: missing 'duration'")
        else:
            _check_duration(mtg["duration"], where, errors)
        frequency = mtg.get("frequency", "weekly")
        if not isinstance(frequency, str) or frequency not in FREQUENCIES:
            errors.append(f"{where}: unknown frequency {frequency!r}")
        if mtg.get("fixed_day") and mtg["fixed_day"] not in DAYS:
            errors.append(f"{where}: unknown fixed_day {mtg['fixed_day']!r}")
        if mtg.get("fixed_time"):
            _check_time(mtg["fixed_time"], f"{where} fixed_time", errors)

        preferred = mtg.get("preferred_times", [])
        if isinstance(preferred, str):
            preferred = preferred.split(",")
        if not isinstance(preferred, list):
            errors.append(f"{where}: preferred_times must be a list or string")
            continue
        for label in preferred:
            if isinstance(label, str) and not label.strip():
                continue
            _check_time(
                label.strip() if isinstance(label, str) else label,
                f"{where} preferred_times",
                errors,
            )

    return errors
