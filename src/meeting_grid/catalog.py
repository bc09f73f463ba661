"""Static reference tables: days, slots, break, frequencies, durations.

Every name ↔ index translation in the package goes through this module.
The slot table skips the 12:00-13:00 lunch hour: slot 5 ends at 12:00 and
slot 6 begins at 13:00.
"""

from __future__ import annotations

from meeting_grid.types import ValidationError

DAYS: tuple[str, ...] = ("Monday", "Tuesday", "Wednesday", "Thursday")

SLOT_TIMES: tuple[str, ...] = (
    "09:00", "09:30", "10:00", "10:30", "11:00", "11:30",
    "13:00", "13:30", "14:00", "14:30", "15:00", "15:30",
    "16:00", "16:30",
)

# Membership checks only; never addressable as slots.
BREAK_TIMES: tuple[str, ...] = ("12:00", "12:30")

WEEK_COUNT = 4
DAY_COUNT = len(DAYS)
SLOT_COUNT = len(SLOT_TIMES)

SLOT_MINUTES = 30
DURATION_MINUTES: tuple[int, ...] = (30, 60, 90)

# Frequency -> number of occurrences in the four-week window.
# third_week and monthly both yield a single occurrence.
FREQUENCIES: dict[str, int] = {
    "weekly": 4,
    "fortnightly": 2,
    "third_week": 1,
    "monthly": 1,
}

# The only week pairings a fortnightly meeting may occupy, in scan order.
FORTNIGHT_PAIRS: tuple[tuple[int, int], ...] = ((0, 2), (1, 3))

_DAY_INDEX = {name: i for i, name in enumerate(DAYS)}
_SLOT_INDEX = {label: i for i, label in enumerate(SLOT_TIMES)}


def is_break_time(label: str) -> bool:
    """True for "12:00" and "12:30"."""
    return label in BREAK_TIMES


def day_index(name: str) -> int:
    """Day name -> ordinal 0..3. Raises ValidationError for unknown names."""
    try:
        return _DAY_INDEX[name]
    except (KeyError, TypeError):
        raise ValidationError("day", name, f"must be one of {', '.join(DAYS)}") from None


def day_name(index: int) -> str:
    return DAYS[index]


def slot_index(label: str, field: str = "start_time") -> int:
    """Clock label "HH:MM" -> slot ordinal 0..13.

    Break times are rejected with their own reason so callers can tell a
    lunch-hour request apart from a malformed one.
    """
    if is_break_time(label):
        raise ValidationError(field, label, "falls in the 12:00-13:00 break")
    try:
        return _SLOT_INDEX[label]
    except (KeyError, TypeError):
        raise ValidationError(
            field, label, "must be a half-hour slot between 09:00 and 16:30"
        ) from None


def slot_time(index: int) -> str:
    return SLOT_TIMES[index]


def duration_slots(minutes: int) -> int:
    """Minutes (30, 60 or 90) -> slot count (1, 2 or 3).

    Only ints are accepted; 60.0 or True are rejected like any other value.
    """
    if type(minutes) is not int or minutes not in DURATION_MINUTES:
        raise ValidationError("duration", minutes, "must be 30, 60 or 90 minutes")
    return minutes // SLOT_MINUTES


def occurrences(frequency: str) -> int:
    """Frequency kind -> occurrence count in the four-week window."""
    try:
        return FREQUENCIES[frequency]
    except (KeyError, TypeError):
        raise ValidationError(
            "frequency", frequency, f"must be one of {', '.join(FREQUENCIES)}"
        ) from None
