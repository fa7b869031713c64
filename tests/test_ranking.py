from conftest import make_request, make_variety
from garden import VarietyCatalogue
from garden.ranking import POPULARITY_RANK, filter_candidates, popularity_rank


def test_filter_by_season_summer(catalogue):
    result = filter_candidates(catalogue, make_request(season="summer"))
    assert result
    assert all("summer" in v.seasons for v in result)


def test_filter_by_season_excludes_wrong_season(catalogue):
    result = filter_candidates(catalogue, make_request(season="winter"))
    ids = [v.id for v in result]
    assert "tomato" not in ids
    assert "garlic" in ids


def test_filter_by_beginner_excludes_advanced(catalogue):
    result = filter_candidates(catalogue, make_request(level="beginner"))
    assert all(v.beginner_friendly for v in result)
    assert "fennel" not in [v.id for v in result]


def test_filter_by_sun_soil_region(catalogue):
    request = make_request(season="spring", sun="shade", soil="clay", region="mountain")
    result = filter_candidates(catalogue, request)
    assert result
    for v in result:
        assert "shade" in v.sun
        assert "clay" in v.soils
        assert "mountain" in v.regions


def test_filter_incompatible_constraints_may_be_empty(catalogue):
    request = make_request(season="summer", sun="shade", soil="chalky",
                           region="mountain", level="beginner")
    for v in filter_candidates(catalogue, request):
        assert "summer" in v.seasons and "shade" in v.sun
        assert "chalky" in v.soils and "mountain" in v.regions
        assert v.beginner_friendly


def test_preferences_come_first_in_user_order(catalogue):
    request = make_request(preferences=["basil", "corn", "not-a-plant"])
    ids = [v.id for v in filter_candidates(catalogue, request)]
    assert ids[:2] == ["basil", "corn"]


def test_others_ordered_by_popularity(catalogue):
    result = filter_candidates(catalogue, make_request(season="summer"))
    assert result[0].id == "tomato"
    ranks = [popularity_rank(v.id) for v in result]
    assert ranks == sorted(ranks)


def test_unknown_ids_rank_last_in_catalogue_order():
    varieties = [
        make_variety("zzz"),
        make_variety("lettuce"),
        make_variety("aaa"),
        make_variety("tomato"),
    ]
    result = filter_candidates(VarietyCatalogue(varieties), make_request())
    assert [v.id for v in result] == ["tomato", "lettuce", "zzz", "aaa"]
    assert popularity_rank("zzz") > max(POPULARITY_RANK.values())


def test_duplicate_preference_uses_first_position():
    varieties = [make_variety("a"), make_variety("b")]
    request = make_request(preferences=["b", "a", "b"])
    result = filter_candidates(VarietyCatalogue(varieties), request)
    assert [v.id for v in result] == ["b", "a"]
