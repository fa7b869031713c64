"""Planning request parsing.

Turns a JSON-like dict (HTTP body, CLI arguments) into a ``PlanRequest``.
Enumerated values are normalised so ``"FullSun"``, ``"full sun"`` and
``"full_sun"`` all mean the same thing.

Layout cells use the same encoding as the original API:
    None / False / ""  → free
    True               → blocked
    "<variety id>"     → already planted
"""

import math
import re

from .errors import RequestError
from .spacing import meters_to_cells
from .varieties import LEVELS, REGIONS, SEASONS, SOIL_TYPES, SUN_EXPOSURES

FREE = None
BLOCKED = True

# 100 m per side is 334 cells per axis
MAX_DIMENSION_M = 100

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_choice(value: str) -> str:
    """Lowercase snake-case form of an enumerated value."""
    value = _CAMEL_BOUNDARY.sub("_", str(value).strip())
    return re.sub(r"[\s\-]+", "_", value).lower()


def _choice(body: dict, key: str, allowed, required: bool = False):
    raw = body.get(key)
    if raw is None or raw == "":
        if required:
            raise RequestError(f"Missing required field '{key}'.")
        return None
    value = normalize_choice(raw)
    if value not in allowed:
        raise RequestError(
            f"Unknown {key} {raw!r}; expected one of: {', '.join(allowed)}."
        )
    return value


class Preference:
    """A variety the user wants, with an optional instance count."""

    def __init__(self, variety_id: str, quantity: int | None = None):
        self.variety_id = variety_id
        self.quantity = quantity

    def __repr__(self) -> str:
        return f"Preference({self.variety_id!r}, quantity={self.quantity})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Preference)
            and self.variety_id == other.variety_id
            and self.quantity == other.quantity
        )

    @classmethod
    def parse(cls, raw) -> "Preference":
        """Accept ``"tomato"``, ``"tomato:3"`` or ``{"id": ..., "quantity": ...}``."""
        if isinstance(raw, str):
            variety_id, _, count = raw.partition(":")
            quantity = count if count else None
        elif isinstance(raw, dict):
            variety_id = raw.get("id") or raw.get("variety") or ""
            quantity = raw.get("quantity")
        else:
            raise RequestError(f"Invalid preference entry: {raw!r}")

        variety_id = str(variety_id).strip()
        if not variety_id:
            raise RequestError(f"Preference entry without an id: {raw!r}")
        if quantity is not None:
            try:
                quantity = max(0, int(quantity))
            except (TypeError, ValueError, OverflowError):
                raise RequestError(
                    f"Invalid quantity for preference {variety_id!r}: {quantity!r}"
                ) from None
        return cls(variety_id, quantity)


def normalize_layout(layout) -> list[list]:
    """Coerce a layout matrix to free/blocked/id cells of uniform width.

    Rows shorter than the first are padded with free cells, longer ones are
    truncated.  Emptiness is not checked here; the planner rejects it.
    """
    if not isinstance(layout, list):
        raise RequestError("Field 'layout' must be a list of rows.")
    if not layout:
        return []
    for row in layout:
        if not isinstance(row, list):
            raise RequestError("Each layout row must be a list of cells.")
    width = len(layout[0])
    normalized = []
    for row in layout:
        cells = [_coerce_cell(v) for v in row[:width]]
        cells += [FREE] * (width - len(cells))
        normalized.append(cells)
    return normalized


def _coerce_cell(value):
    if value is None or value is False:
        return FREE
    if value is True:
        return BLOCKED
    if isinstance(value, str):
        value = value.strip()
        return value or FREE
    raise RequestError(f"Invalid layout cell: {value!r}")


def free_layout(rows: int, cols: int) -> list[list]:
    return [[FREE] * cols for _ in range(rows)]


class PlanRequest:
    """Constraints and starting layout for one planning run.

    Attributes:
        season:      Required season (``"summer"``...).
        sun, soil, region, level: Optional filters (``None`` = any).
        preferences: Ordered list of ``Preference``.
        layout:      Matrix of free (None) / blocked (True) / id cells.
    """

    def __init__(self, season: str, layout: list[list], sun: str | None = None,
                 soil: str | None = None, region: str | None = None,
                 level: str | None = None, preferences=None):
        self.season = season
        self.sun = sun
        self.soil = soil
        self.region = region
        self.level = level
        self.preferences: list[Preference] = list(preferences or [])
        self.layout = layout

    @property
    def preference_ids(self) -> list[str]:
        return [p.variety_id for p in self.preferences]

    @classmethod
    def from_dict(cls, body: dict) -> "PlanRequest":
        """Parse a request body.

        Either ``layout`` or both ``width_m`` and ``length_m`` (camelCase
        ``widthM``/``lengthM`` also accepted) must be given; the latter
        produce an all-free grid of ``ceil(m * 100 / 30)`` cells per axis.

        Raises:
            RequestError: on missing or unknown values.
        """
        if not isinstance(body, dict):
            raise RequestError("Request body must be a JSON object.")

        prefs_raw = body.get("preferences") or []
        if not isinstance(prefs_raw, list):
            raise RequestError("Field 'preferences' must be a list.")

        layout = body.get("layout", body.get("existing_layout"))
        if layout is None:
            layout = cls._layout_from_dimensions(body)
        else:
            layout = normalize_layout(layout)

        return cls(
            season=_choice(body, "season", SEASONS, required=True),
            sun=_choice(body, "sun", SUN_EXPOSURES),
            soil=_choice(body, "soil", SOIL_TYPES),
            region=_choice(body, "region", REGIONS),
            level=_choice(body, "level", LEVELS),
            preferences=[Preference.parse(p) for p in prefs_raw],
            layout=layout,
        )

    @staticmethod
    def _layout_from_dimensions(body: dict) -> list[list]:
        width = body.get("width_m", body.get("widthM"))
        length = body.get("length_m", body.get("lengthM"))
        if width is None or length is None:
            raise RequestError(
                "Either 'layout' or both 'width_m' and 'length_m' are required."
            )
        try:
            width, length = float(width), float(length)
        except (TypeError, ValueError):
            raise RequestError("Garden dimensions must be numbers.") from None
        if not (math.isfinite(width) and math.isfinite(length)):
            raise RequestError("Garden dimensions must be finite numbers.")
        if width <= 0 or length <= 0:
            raise RequestError(
                "Garden dimensions (width_m, length_m) must be strictly positive."
            )
        if width > MAX_DIMENSION_M or length > MAX_DIMENSION_M:
            raise RequestError(
                f"Garden dimensions must not exceed {MAX_DIMENSION_M:g} m per side."
            )
        return free_layout(meters_to_cells(length), meters_to_cells(width))
