from brokeuni_travel.api.cities import POPULAR_CITIES, filter_cities


def test_filter_is_case_insensitive_substring_in_list_order():
    assert filter_cities("BRIG") == ["Brighton", "Brighton & Hove"]


def test_filter_matches_inside_names():
    matches = filter_cities("upon")
    assert "Newcastle upon Tyne" in matches
    assert "Stratford-upon-Avon" in matches
    assert matches == sorted(matches, key=POPULAR_CITIES.index)


def test_filter_with_no_match_is_empty():
    assert filter_cities("zzz") == []


def test_filter_accepts_custom_list():
    assert filter_cities("ab", ["Abbey", "Crab", "York"]) == ["Abbey", "Crab"]


def test_city_list_has_no_duplicates():
    assert len(set(POPULAR_CITIES)) == len(POPULAR_CITIES)
