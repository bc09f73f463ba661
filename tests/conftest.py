"""Shared test fixtures and data loading for meeting-grid.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Reference grid: four weeks, Monday-Thursday, fourteen slots per day.
Anchor: Mon 2025-04-14 is week 1, Monday.
"""

from __future__ import annotations

import json
import random
from datetime import date
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT_DIR = Path(__file__).resolve().parent.parent
FIXTURES_DIR = ROOT_DIR / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"
PLANS_DIR = ROOT_DIR / "data" / "plans"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


_reference = _load_json(FIXTURES_DIR / "reference.json")


# ---------------------------------------------------------------------------
# Reference constants derived from reference.json
# ---------------------------------------------------------------------------
ANCHOR = date.fromisoformat(_reference["anchor_monday"])
DAY_END_HOUR = _reference["day_end_hour"]
BREAK_TIMES: list[str] = _reference["break_times"]
FREQUENCIES: dict[str, int] = _reference["frequencies"]

# Day lookup:  DAYS["Tuesday"] → {"index": 1, "date": date(2025, 4, 15)}
DAYS: dict[str, dict] = {
    d["name"]: {"index": d["index"], "date": date.fromisoformat(d["date"])}
    for d in _reference["days"]
}

# Slot lookup:  SLOTS["13:00"] → {"index": 6, "hour": 13.0}
SLOTS: dict[str, dict] = {
    s["label"]: {"index": s["index"], "hour": s["hour"]} for s in _reference["slots"]
}


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def slot(label: str) -> int:
    """Slot index for a clock label.

    >>> slot("13:00")
    6
    """
    return SLOTS[label]["index"]


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


def make_scheduler(seed: int = 1234):
    """Scheduler with an injected, seeded RNG."""
    from meeting_grid.scheduler import Scheduler

    return Scheduler(rng=random.Random(seed))


def blocked_cells(snapshot) -> set[tuple[int, int, int]]:
    """Every (week, day, slot) marked blocked in a snapshot."""
    return {
        (w, d, s)
        for w, days in enumerate(snapshot.blocked)
        for d, slots in enumerate(days)
        for s, is_blocked in enumerate(slots)
        if is_blocked
    }


def covered_cells(snapshot) -> list[tuple[int, int, int]]:
    """Every (week, day, slot) covered by a record, with repeats on overlap."""
    cells: list[tuple[int, int, int]] = []
    for res in snapshot.reservations:
        for w in range(4):
            cells.extend((w, res.day, s) for s in res.slots())
    for entry in snapshot.entries:
        cells.extend((entry.week, entry.day, s) for s in entry.slots())
    return cells


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def anchor() -> date:
    return ANCHOR


@pytest.fixture
def grid():
    """Empty TimeGrid."""
    from meeting_grid.grid import TimeGrid

    return TimeGrid()


@pytest.fixture
def scheduler():
    """Empty Scheduler with a seeded RNG."""
    return make_scheduler()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
