"""Garden planning tool: command-line entry point.

Builds a layout (an empty R x C grid, or one read from CSV), runs the
planner with the given growing conditions and preferences, and displays
+ optionally saves the result.

Examples:
    python3 main.py --season summer --rows 7 --cols 10
    python3 main.py --season spring --layout data/bed.csv --prefer lettuce:6 --prefer radish
"""

import argparse
import logging
import os
import sys

# Ensure project root is on the path so ``garden`` and the data module
# can be imported regardless of the working directory.
_PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, _PROJECT_ROOT)

from garden import (
    PlanRequest,
    PlanningError,
    VarietyCatalogue,
    filter_candidates,
    load_layout_csv,
    plan_garden,
    save_plan_json,
)
from garden.request import free_layout
from plantVarieties import variety_records

logger = logging.getLogger("garden.cli")


# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------

def render_plan(plan: dict) -> str:
    """Text rendering of a plan grid.

    Anchors show the variety id, covered cells '^', blocked '#', empty '.'.
    """
    labels = []
    for row in plan["grid"]:
        line = []
        for cell in row:
            kind = cell["type"]
            if kind in ("plant", "overflowing"):
                line.append(cell["id"])
            elif kind == "overflowed":
                line.append("^")
            elif kind == "blocked":
                line.append("#")
            else:
                line.append(".")
        labels.append(line)
    w = max(3, max(len(v) for row in labels for v in row))
    return "\n".join(" ".join(v.rjust(w) for v in row) for row in labels)


def display_plan(plan: dict):
    """Pretty-print a plan to stdout."""
    print(f"\n{'=' * 55}")
    print(f"  Garden Plan  ({plan['rows']} x {plan['cols']} cells)")
    print(f"{'=' * 55}\n")
    print(render_plan(plan))
    print(f"\nCompanion score: {plan['score']:+d}")

    print("\n--- Placements ---")
    for r, row in enumerate(plan["grid"]):
        for c, cell in enumerate(row):
            if cell["type"] == "plant":
                print(f"  [{r}][{c}] {cell['name']} x{cell['plants_per_cell']}: {cell['reason']}")
            elif cell["type"] == "overflowing":
                print(f"  [{r}][{c}] {cell['name']} ({cell['width']}x{cell['length']} cells): "
                      f"{cell['reason']}")

    if plan["warnings"]:
        print("\n--- Warnings ---")
        for w in plan["warnings"]:
            print(f"  ! {w}")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Companion-planting garden planner")
    parser.add_argument("--season", required=True,
                        help="spring, summer, autumn or winter")
    parser.add_argument("--rows", type=int, default=7, help="grid rows (no --layout)")
    parser.add_argument("--cols", type=int, default=10, help="grid columns (no --layout)")
    parser.add_argument("--layout", help="CSV layout: id, '#' blocked, '.' or empty free")
    parser.add_argument("--sun")
    parser.add_argument("--soil")
    parser.add_argument("--region")
    parser.add_argument("--level", help="beginner or expert")
    parser.add_argument("--prefer", action="append", default=[], metavar="ID[:N]",
                        help="preferred variety, optionally with a quantity; repeatable")
    parser.add_argument("--out", help="save the plan as JSON to this path")
    return parser


# -------------------------------------------------------------------
# Main
# -------------------------------------------------------------------

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=os.environ.get("GARDEN_LOG_LEVEL", "INFO").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.layout:
        layout = load_layout_csv(args.layout)
    else:
        layout = free_layout(args.rows, args.cols)

    catalogue = VarietyCatalogue.from_records(variety_records)
    try:
        request = PlanRequest.from_dict({
            "season": args.season,
            "sun": args.sun,
            "soil": args.soil,
            "region": args.region,
            "level": args.level,
            "preferences": args.prefer,
            "layout": layout,
        })
        candidates = filter_candidates(catalogue, request)
        logger.info("%d candidate varieties for %s", len(candidates), request.season)
        plan = plan_garden(candidates, request, catalogue)
    except PlanningError as e:
        logger.error("%s", e)
        return 2

    display_plan(plan)

    if args.out:
        save_plan_json(plan, args.out)
        print(f"Plan saved to {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
