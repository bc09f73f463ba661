#!/usr/bin/env python
"""Visual verification report for meeting-grid.

Run:  uv run python scripts/verify.py [plan.json] [config.json]

Produces a formatted report showing:
  1. Reference data (day table, slot/hour table)
  2. Plan outcomes (accepted / rejected, with reasons)
  3. The resulting grid as ASCII, one row per week and day
  4. Committed entries with calendar datetimes
"""

from __future__ import annotations

import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
DEFAULT_PLAN = ROOT / "data" / "plans" / "sample_plan.json"

sys.path.insert(0, str(ROOT / "src"))

from meeting_grid.batch import apply_plan
from meeting_grid.catalog import DAYS, SLOT_TIMES
from meeting_grid.clock import slot_to_hour
from meeting_grid.config import SchedulerConfig
from meeting_grid.debug import show_grid
from meeting_grid.loaders import load_config_json, load_plan_json
from meeting_grid.scheduler import Scheduler

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        print(fmt.format(*row))


def main(argv: list[str]) -> int:
    plan_path = Path(argv[1]) if len(argv) > 1 else DEFAULT_PLAN
    config = load_config_json(argv[2]) if len(argv) > 2 else SchedulerConfig(seed=0)

    banner("1. Reference data")
    table(["Index", "Day"], [[str(i), name] for i, name in enumerate(DAYS)])
    print()
    table(
        ["Slot", "Label", "Hour"],
        [[str(i), label, f"{slot_to_hour(i):.1f}"] for i, label in enumerate(SLOT_TIMES)],
    )

    banner(f"2. Plan outcomes: {plan_path.name}")
    scheduler = Scheduler(config)
    result = apply_plan(scheduler, load_plan_json(plan_path))
    rows = []
    for outcome in result.reservations:
        spec = outcome.request
        rows.append([
            "reserve", f"{spec.day} {spec.start_time}", f"{spec.duration}",
            "ok" if outcome.accepted else str(outcome.error),
        ])
    for outcome in result.meetings:
        spec = outcome.request
        rows.append([
            "meeting", spec.name, f"{spec.duration}",
            "ok" if outcome.accepted else str(outcome.error),
        ])
    table(["Kind", "Request", "Min", "Outcome"], rows)

    banner("3. Grid")
    snapshot = scheduler.snapshot()
    show_grid(snapshot)

    banner("4. Entries")
    table(
        ["Week", "Day", "Start", "End", "Name", "Frequency", "Datetime"],
        [
            [
                str(e.week + 1), e.day_name, e.start_time, e.end_time, e.name,
                e.frequency, e.start_datetime(config.anchor_monday).isoformat(),
            ]
            for e in sorted(snapshot.entries, key=lambda e: (e.week, e.day, e.start_slot))
        ],
    )
    print()
    return 0 if not result.rejected else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
