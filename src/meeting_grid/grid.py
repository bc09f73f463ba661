"""TimeGrid: week × day × slot occupancy with per-day load counters.

Occupancy is a flat bytearray indexed by (week, day, slot):
    bits[i] = 1 → blocked (reservation or committed occurrence)
    bits[i] = 0 → free
"""

from __future__ import annotations

from dataclasses import dataclass, field

from meeting_grid.catalog import DAY_COUNT, SLOT_COUNT, WEEK_COUNT

_SIZE = WEEK_COUNT * DAY_COUNT * SLOT_COUNT


def _zeros() -> list[float]:
    return [0.0] * DAY_COUNT


@dataclass
class TimeGrid:
    """Mutable occupancy state. Pure data plus queries; planners mutate it.

    Invariants:
        - meeting_hours[d] <= total_hours[d] for every day
        - a set bit is covered by exactly one reservation or occurrence span
    """

    bits: bytearray = field(default_factory=lambda: bytearray(_SIZE))
    total_hours: list[float] = field(default_factory=_zeros)
    meeting_hours: list[float] = field(default_factory=_zeros)

    @staticmethod
    def _offset(week: int, day: int, slot: int) -> int:
        return (week * DAY_COUNT + day) * SLOT_COUNT + slot

    def is_blocked(self, week: int, day: int, slot: int) -> bool:
        return self.bits[self._offset(week, day, slot)] == 1

    def mark_span(self, week: int, day: int, start: int, duration: int) -> None:
        """Block `duration` consecutive slots from `start`. Caller checks feasibility."""
        offset = self._offset(week, day, start)
        for i in range(offset, offset + duration):
            self.bits[i] = 1

    def clear(self) -> None:
        """Free every slot and zero both counters. Mutates in place."""
        self.bits[:] = bytes(_SIZE)
        self.total_hours[:] = _zeros()
        self.meeting_hours[:] = _zeros()

    def copy(self) -> TimeGrid:
        return TimeGrid(
            bits=bytearray(self.bits),
            total_hours=list(self.total_hours),
            meeting_hours=list(self.meeting_hours),
        )

    def blocked_count(self) -> int:
        return sum(self.bits)

    def as_nested(self) -> tuple[tuple[tuple[bool, ...], ...], ...]:
        """Immutable week → day → slot view of the occupancy map."""
        return tuple(
            tuple(
                tuple(self.is_blocked(week, day, slot) for slot in range(SLOT_COUNT))
                for day in range(DAY_COUNT)
            )
            for week in range(WEEK_COUNT)
        )
