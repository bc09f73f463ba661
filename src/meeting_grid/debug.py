"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from meeting_grid.catalog import DAY_COUNT, DAYS, SLOT_COUNT, SLOT_TIMES, WEEK_COUNT

# Slot index at which the lunch gap is drawn.
_AFTERNOON_SLOT = 6


def show_grid(snapshot: "SchedulerSnapshot") -> str:  # noqa: F821
    """Print ASCII grid view: one row per (week, day), one char per slot.

    Legend: '-' = free, '#' = reservation, 'A'-'Z' = meeting (by name).
    A '|' marks the 12:00-13:00 break between slots 5 and 6.
    Returns the string and also prints to stdout.
    """
    lines: list[str] = []

    # Meeting label map: name -> letter, in commit order
    labels: dict[str, str] = {}
    label_chars = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    for entry in snapshot.entries:
        if entry.name not in labels:
            labels[entry.name] = label_chars[len(labels) % len(label_chars)]

    # Per-cell owner: (week, day, slot) -> label char
    owner: dict[tuple[int, int, int], str] = {}
    for res in snapshot.reservations:
        for week in range(WEEK_COUNT):
            for slot in res.slots():
                owner[(week, res.day, slot)] = "#"
    for entry in snapshot.entries:
        for slot in entry.slots():
            owner[(entry.week, entry.day, slot)] = labels[entry.name]

    # Header: two chars per full hour, e.g. "091011|13141516"
    morning = "".join(t[:2] for t in SLOT_TIMES[:_AFTERNOON_SLOT:2])
    afternoon = "".join(t[:2] for t in SLOT_TIMES[_AFTERNOON_SLOT::2])
    lines.append(f"{'':>10s}  {morning}|{afternoon}")

    for week in range(WEEK_COUNT):
        for day in range(DAY_COUNT):
            row = []
            for slot in range(SLOT_COUNT):
                if slot == _AFTERNOON_SLOT:
                    row.append("|")
                cell = owner.get((week, day, slot))
                if cell is None:
                    cell = "#" if snapshot.blocked[week][day][slot] else "-"
                row.append(cell)
            label = f"W{week + 1} {DAYS[day][:3]}"
            lines.append(f"{label:>10s}  {''.join(row)}")

    if labels:
        legend_parts = [f"{v}={k}" for k, v in labels.items()]
        lines.append(f"\nLegend: - = free, # = reserved, {', '.join(legend_parts)}")

    result = "\n".join(lines)
    print(result)
    return result
