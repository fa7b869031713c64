"""Save and load garden layouts and plans.

Layout format (CSV):
    Plain matrix, one row per line.  Each value is a variety id, ``#`` for
    a blocked cell, or empty / ``.`` for a free cell.  Simple enough to
    sketch a garden in any spreadsheet tool.

Plan format (JSON):
    The dict returned by ``plan_garden``, plus whatever request metadata
    the caller adds.
"""

import csv
import json
import os

from .request import BLOCKED, FREE

BLOCKED_MARK = "#"
FREE_MARKS = ("", ".")


# ---------------------------------------------------------------------------
# Layout persistence (CSV)
# ---------------------------------------------------------------------------

def save_layout_csv(layout: list[list], filepath: str):
    """Write a layout matrix (free None / blocked True / id) to CSV."""
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, "w", newline="") as f:
        writer = csv.writer(f)
        for row in layout:
            writer.writerow([
                BLOCKED_MARK if v is BLOCKED else "." if v is FREE else v
                for v in row
            ])


def load_layout_csv(filepath: str) -> list[list]:
    """Read a layout matrix from a CSV file produced by *save_layout_csv*.

    Blank lines are ignored.
    """
    with open(filepath, "r", newline="") as f:
        reader = csv.reader(f)
        layout = []
        for row in reader:
            if not row:
                continue
            layout.append([_parse_cell(v) for v in row])
    return layout


def _parse_cell(value: str):
    value = value.strip()
    if value in FREE_MARKS:
        return FREE
    if value == BLOCKED_MARK:
        return BLOCKED
    return value


# ---------------------------------------------------------------------------
# Plan persistence (JSON)
# ---------------------------------------------------------------------------

def save_plan_json(plan: dict, filepath: str):
    """Write a plan dict to a JSON file."""
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, "w") as f:
        json.dump(plan, f, indent=2, default=str)


def load_plan_json(filepath: str) -> dict:
    """Read a plan dict from a JSON file."""
    with open(filepath, "r") as f:
        return json.load(f)
