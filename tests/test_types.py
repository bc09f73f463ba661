"""Tests for schedule records and the error taxonomy."""

from __future__ import annotations

from datetime import datetime

import pytest

from conftest import ANCHOR


def _entry(**overrides):
    from meeting_grid.types import ScheduleEntry

    fields = dict(
        week=1, day=2, start_slot=5, name="Design Review",
        meeting_type="Design", duration_slots=3, frequency="weekly",
    )
    fields.update(overrides)
    return ScheduleEntry(**fields)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------
class TestScheduleEntry:

    def test_display_fields(self):
        entry = _entry()
        assert entry.day_name == "Wednesday"
        assert entry.start_time == "11:30"
        assert entry.duration_minutes == 90
        assert list(entry.slots()) == [5, 6, 7]

    def test_end_time_uses_decimal_hours(self):
        """End is start hour + duration, without re-adding the lunch hour."""
        assert _entry().end_time == "13:00"
        assert _entry(start_slot=6, duration_slots=2).end_time == "14:00"

    def test_start_datetime(self):
        assert _entry().start_datetime(ANCHOR) == datetime(2025, 4, 23, 11, 30)

    def test_frozen(self):
        entry = _entry()
        with pytest.raises(AttributeError):
            entry.week = 3  # type: ignore[misc]


class TestReservation:

    def test_display_fields(self):
        from meeting_grid.types import Reservation

        res = Reservation(day=1, start_slot=8, duration_slots=2)
        assert res.day_name == "Tuesday"
        assert res.start_time == "14:00"
        assert res.end_time == "15:00"
        assert res.duration_minutes == 60

    def test_one_start_per_week(self):
        from meeting_grid.types import Reservation

        starts = Reservation(day=0, start_slot=0, duration_slots=1).start_datetimes(ANCHOR)
        assert [s.day for s in starts] == [14, 21, 28, 5]
        assert all(s.hour == 9 and s.minute == 0 for s in starts)


class TestMeetingRequest:

    @pytest.mark.parametrize(
        "frequency,expected", [("weekly", 4), ("fortnightly", 2),
                               ("third_week", 1), ("monthly", 1)],
    )
    def test_occurrences(self, frequency, expected):
        from meeting_grid.types import MeetingRequest

        req = MeetingRequest("X", "Design", 1, frequency)
        assert req.occurrences == expected
        assert req.is_fortnightly is (frequency == "fortnightly")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class TestErrors:

    def test_hierarchy(self):
        from meeting_grid.types import (
            InfeasibleError,
            PartialCommitError,
            SchedulingError,
            ValidationError,
        )

        assert issubclass(ValidationError, SchedulingError)
        assert issubclass(ValidationError, ValueError)
        assert issubclass(InfeasibleError, SchedulingError)
        assert issubclass(PartialCommitError, InfeasibleError)

    def test_validation_error_attributes(self):
        from meeting_grid.types import ValidationError

        err = ValidationError("day", "Friday", "must be one of Monday")
        assert (err.field, err.value, err.reason) == ("day", "Friday", "must be one of Monday")
        assert "'Friday'" in str(err)

    def test_infeasible_error_attributes(self):
        from meeting_grid.types import InfeasibleError

        err = InfeasibleError("Team Sync", 4, 4, reason="no_candidate")
        assert err.subject == "Team Sync"
        assert err.occurrences_remaining == 4
        assert err.occurrences_requested == 4
        assert err.reason == "no_candidate"
        assert "Team Sync" in str(err)

    def test_partial_commit_counts(self):
        from meeting_grid.types import PartialCommitError

        entries = (_entry(week=0), _entry(week=3))
        err = PartialCommitError("Design Review", entries, 4)
        assert err.occurrences_committed == 2
        assert err.occurrences_remaining == 2
        assert err.reason == "weeks_exhausted"
        assert "2/4" in str(err)

    def test_raise_and_catch_as_base(self):
        from meeting_grid.types import InfeasibleError, SchedulingError

        with pytest.raises(SchedulingError) as exc_info:
            raise InfeasibleError("X", 1, 1, reason="occupied")
        assert exc_info.value.reason == "occupied"
