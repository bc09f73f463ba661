"""Tests for apply_plan(): batch application in input order.

Test data loaded from: data/plans/sample_plan.json
"""

from __future__ import annotations

import random

from conftest import PLANS_DIR, blocked_cells, covered_cells, make_scheduler


def _apply_sample():
    from meeting_grid.batch import apply_plan
    from meeting_grid.loaders import load_plan_json

    sched = make_scheduler()
    result = apply_plan(sched, load_plan_json(PLANS_DIR / "sample_plan.json"))
    return sched, result


class TestApplyPlan:

    def test_outcomes_in_input_order(self):
        sched, result = _apply_sample()
        assert [o.accepted for o in result.reservations] == [True, True]
        assert [o.accepted for o in result.meetings] == [True, True, True, True, False]
        assert result.accepted == 6
        assert [o.request.name for o in result.rejected] == ["Clash"]

    def test_rejection_carries_error(self):
        from meeting_grid.types import InfeasibleError

        _, result = _apply_sample()
        clash = result.meetings[-1]
        assert isinstance(clash.error, InfeasibleError)
        assert clash.error.reason == "no_candidate"
        assert all(o.error is None for o in result.meetings[:-1])

    def test_placements(self):
        """Reservations load Tuesday and Thursday, steering meetings elsewhere."""
        sched, _ = _apply_sample()
        snap = sched.snapshot()
        by_name: dict[str, list] = {}
        for e in snap.entries:
            by_name.setdefault(e.name, []).append(e)

        assert {(e.day, e.start_slot) for e in by_name["Team Sync"]} == {(0, 0)}
        assert len(by_name["Team Sync"]) == 4
        assert {(e.day, e.start_slot) for e in by_name["Design Review"]} == {(2, 2)}
        assert sorted(e.week for e in by_name["Design Review"]) == [0, 2]
        assert {(e.day, e.start_slot) for e in by_name["Client Check-in"]} == {(2, 10)}
        assert [(e.day, e.start_slot) for e in by_name["Contractor Catch-up"]] == [(0, 1)]
        assert len(snap.entries) == 11

    def test_grid_consistent(self):
        sched, _ = _apply_sample()
        snap = sched.snapshot()
        cells = covered_cells(snap)
        assert len(cells) == len(set(cells))
        assert set(cells) == blocked_cells(snap)
        for total, meeting in zip(snap.total_hours, snap.meeting_hours):
            assert total >= meeting

    def test_empty_plan(self):
        from meeting_grid.batch import apply_plan
        from meeting_grid.loaders import Plan

        sched = make_scheduler()
        result = apply_plan(sched, Plan())
        assert result.accepted == 0
        assert result.rejected == ()
        assert sched.snapshot().is_empty()

    def test_unvalidated_float_duration(self):
        """A hand-built plan with 60.0 is rejected per request, not raised."""
        from meeting_grid.batch import apply_plan
        from meeting_grid.loaders import MeetingSpec, Plan, ReservationSpec
        from meeting_grid.types import ValidationError

        sched = make_scheduler()
        result = apply_plan(sched, Plan(
            reservations=(ReservationSpec("Monday", "09:00", 60.0),),
            meetings=(MeetingSpec("A", 60.0), MeetingSpec("B", 60)),
        ))
        assert [o.accepted for o in result.reservations + result.meetings] == [
            False, False, True,
        ]
        for outcome in result.rejected:
            assert isinstance(outcome.error, ValidationError)
            assert outcome.error.field == "duration"

    def test_errors_are_per_request(self):
        """Outcome.error is the request's own rejection, not last_error."""
        from meeting_grid.batch import apply_plan
        from meeting_grid.loaders import load_plan_json
        from meeting_grid.scheduler import Scheduler

        class OtherCallerSucceeds(Scheduler):
            # Another handler's success lands right after each of ours.
            def try_reserve(self, *args, **kwargs):
                result = super().try_reserve(*args, **kwargs)
                self.last_error = None
                return result

            def try_schedule_meeting(self, *args, **kwargs):
                result = super().try_schedule_meeting(*args, **kwargs)
                self.last_error = None
                return result

        sched = OtherCallerSucceeds(rng=random.Random(1234))
        result = apply_plan(sched, load_plan_json(PLANS_DIR / "sample_plan.json"))
        assert sched.last_error is None
        clash = result.meetings[-1]
        assert not clash.accepted
        assert clash.error is not None
        assert clash.error.reason == "no_candidate"
