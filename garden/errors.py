"""Exceptions raised by the garden planner.

Only malformed requests and the two structurally invalid layouts (no rows,
or a first row with no columns) are fatal.  Everything else the planner
can recover from is reported as a warning string in the plan result.
"""


class PlanningError(ValueError):
    """Base class for errors that reject a planning request outright."""


class LayoutError(PlanningError):
    """The layout matrix cannot describe a grid."""


class RequestError(PlanningError):
    """A request body field is missing or holds an unknown value."""
