import pytest

from garden import PlanRequest, Variety, VarietyCatalogue
from plantVarieties import variety_records


def make_variety(id, spacing_cm=30, good=(), bad=(), seasons=("summer",),
                 beginner=True, category="produce", **kwargs):
    """Small synthetic variety for tests that must not depend on catalogue data."""
    return Variety(
        id=id,
        name=kwargs.pop("name", id.title()),
        seasons=seasons,
        sun=kwargs.pop("sun", ("full_sun",)),
        soils=kwargs.pop("soils", ("loamy",)),
        regions=kwargs.pop("regions", ("temperate",)),
        spacing_cm=spacing_cm,
        good_companions=good,
        bad_companions=bad,
        beginner_friendly=beginner,
        category=category,
    )


def make_request(rows=3, cols=3, season="summer", layout=None, **body):
    body.setdefault("season", season)
    if layout is None:
        layout = [[None] * cols for _ in range(rows)]
    body["layout"] = layout
    return PlanRequest.from_dict(body)


@pytest.fixture(scope="session")
def catalogue():
    return VarietyCatalogue.from_records(variety_records)
