"""Plant varieties and the read-only catalogue that holds them.

The raw records live in *plantVarieties.py* at the project root; entry
points wrap them in a ``VarietyCatalogue`` and hand it to the planner,
which never reaches for the data module itself.
"""

from .spacing import cell_span, plants_per_cell

SEASONS = ("spring", "summer", "autumn", "winter")
SUN_EXPOSURES = ("full_sun", "partial_shade", "shade")
SOIL_TYPES = ("clay", "sandy", "loamy", "chalky", "humus")
REGIONS = ("temperate", "mediterranean", "oceanic", "continental", "mountain")
CATEGORIES = ("fruit", "produce", "herb", "root", "bulb", "leafy", "pod")
LEVELS = ("beginner", "expert")


class Variety:
    """A single catalogue entry.

    Collections are stored as tuples so a variety can be shared between
    concurrent planning runs without anyone mutating it.
    """

    def __init__(self, id: str, name: str, seasons, sun, soils, regions,
                 spacing_cm: int, good_companions=(), bad_companions=(),
                 beginner_friendly: bool = False, category: str = "produce",
                 latin_name: str = ""):
        self.id = id
        self.name = name
        self.latin_name = latin_name
        self.seasons = tuple(seasons)
        self.sun = tuple(sun)
        self.soils = tuple(soils)
        self.regions = tuple(regions)
        self.spacing_cm = spacing_cm
        self.good_companions = tuple(good_companions)
        self.bad_companions = tuple(bad_companions)
        self.beginner_friendly = bool(beginner_friendly)
        self.category = category

    def __repr__(self) -> str:
        return f"Variety({self.id!r}, spacing={self.spacing_cm}cm)"

    @property
    def span(self) -> int:
        return cell_span(self.spacing_cm)

    @property
    def plants_per_cell(self) -> int:
        return plants_per_cell(self.spacing_cm)

    @classmethod
    def from_dict(cls, data: dict) -> "Variety":
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            latin_name=data.get("latin_name", ""),
            seasons=data.get("seasons", ()),
            sun=data.get("sun", ()),
            soils=data.get("soils", ()),
            regions=data.get("regions", ()),
            spacing_cm=data.get("spacing_cm", 30),
            good_companions=data.get("good_companions", ()),
            bad_companions=data.get("bad_companions", ()),
            beginner_friendly=data.get("beginner_friendly", False),
            category=data.get("category", "produce"),
        )

    def to_dict(self) -> dict:
        """JSON-friendly representation, including derived grid footprint."""
        return {
            "id": self.id,
            "name": self.name,
            "latin_name": self.latin_name,
            "seasons": list(self.seasons),
            "sun": list(self.sun),
            "soils": list(self.soils),
            "regions": list(self.regions),
            "spacing_cm": self.spacing_cm,
            "span": self.span,
            "plants_per_cell": self.plants_per_cell,
            "good_companions": list(self.good_companions),
            "bad_companions": list(self.bad_companions),
            "beginner_friendly": self.beginner_friendly,
            "category": self.category,
        }


class VarietyCatalogue:
    """Ordered, read-only collection of varieties with lookup by id.

    Args:
        varieties: Iterable of ``Variety``.  Order is kept for ``all()``.

    Raises:
        ValueError: if two varieties share an identifier.
    """

    def __init__(self, varieties):
        self._varieties: list[Variety] = list(varieties)
        self._by_id: dict[str, Variety] = {}
        for v in self._varieties:
            if v.id in self._by_id:
                raise ValueError(f"Duplicate variety id: {v.id!r}")
            self._by_id[v.id] = v

    @classmethod
    def from_records(cls, records) -> "VarietyCatalogue":
        return cls(Variety.from_dict(r) for r in records)

    def get(self, variety_id: str) -> Variety | None:
        return self._by_id.get(variety_id)

    def all(self) -> list[Variety]:
        return list(self._varieties)

    def __len__(self) -> int:
        return len(self._varieties)

    def __contains__(self, variety_id) -> bool:
        return variety_id in self._by_id

    def __iter__(self):
        return iter(self._varieties)
