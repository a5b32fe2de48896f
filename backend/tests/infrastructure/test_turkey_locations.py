"""Tests for the bundled Turkish location dataset."""

import pytest
from domain.services.location_search import LocationSearchIndex
from domain.value_objects import DistrictSuggestion
from infrastructure.locations import build_turkey_catalog, get_turkey_catalog


@pytest.fixture(scope="module")
def catalog():
    return build_turkey_catalog()


class TestTurkeyCatalog:
    """Test the production dataset."""

    def test_city_order(self, catalog):
        slugs = [c.slug for c in catalog]
        assert slugs[:6] == ["istanbul", "ankara", "izmir", "antalya", "bursa", "adana"]
        assert slugs[-1] == "sanliurfa"
        assert len(catalog) == 15

    def test_istanbul_lookup(self, catalog):
        istanbul = catalog.find_city_by_slug("istanbul")
        assert istanbul.name == "İstanbul"
        assert len(istanbul.districts) == 39

    def test_not_a_real_city(self, catalog):
        assert catalog.find_city_by_slug("not-a-real-city") is None

    @pytest.mark.parametrize(
        "city_slug, district_slug, name",
        [
            ("istanbul", "eyupsultan", "Eyüpsultan"),
            ("ankara", "golbasi", "Gölbaşı"),
            ("izmir", "karsiyaka", "Karşıyaka"),
            ("adana", "yuregir", "Yüreğir"),
        ],
    )
    def test_district_lookup(self, catalog, city_slug, district_slug, name):
        assert catalog.find_district_by_slug(city_slug, district_slug).name == name

    def test_neighborhoods(self, catalog):
        kadikoy = catalog.find_district_by_slug("istanbul", "kadikoy")
        assert kadikoy.find_neighborhood_by_slug("moda").name == "Moda"

    def test_cities_without_districts(self, catalog):
        assert catalog.find_city_by_slug("diyarbakir").districts == ()

    def test_cached_catalog_is_shared(self):
        assert get_turkey_catalog() is get_turkey_catalog()


class TestTurkeySearch:
    """Test search against the production dataset."""

    def test_kadikoy(self, catalog):
        results = LocationSearchIndex(catalog).search("kadikoy")
        assert DistrictSuggestion(
            city_name="İstanbul",
            district_name="Kadıköy",
            city_slug="istanbul",
            district_slug="kadikoy",
        ) in results
        assert results[0].to_dict() == {
            "kind": "district",
            "cityName": "İstanbul",
            "districtName": "Kadıköy",
            "slugPath": "istanbul/kadikoy",
        }

    def test_broad_query_is_capped(self, catalog):
        assert len(LocationSearchIndex(catalog).search("a")) == 10
