"""Unit tests for LocationCatalog lookups."""

import pytest
from domain.entities import City
from domain.services.location_catalog import LocationCatalog


class TestLocationCatalogLookups:
    """Test slug lookups."""

    def test_find_city_by_slug(self, small_catalog):
        city = small_catalog.find_city_by_slug("istanbul")
        assert city is not None
        assert city.name == "İstanbul"

    def test_unknown_city_is_none(self, small_catalog):
        assert small_catalog.find_city_by_slug("not-a-real-city") is None

    def test_lookup_is_case_sensitive(self, small_catalog):
        assert small_catalog.find_city_by_slug("Istanbul") is None

    def test_find_district_by_slug(self, small_catalog):
        district = small_catalog.find_district_by_slug("istanbul", "kadikoy")
        assert district is not None
        assert district.name == "Kadıköy"
        assert [n.slug for n in district.neighborhoods] == ["moda", "caferaga"]

    def test_district_of_other_city_is_none(self, small_catalog):
        assert small_catalog.find_district_by_slug("ankara", "kadikoy") is None

    def test_district_of_unknown_city_is_none(self, small_catalog):
        assert small_catalog.find_district_by_slug("nope", "kadikoy") is None

    def test_catalog_order_is_preserved(self, small_catalog):
        assert len(small_catalog) == 3
        assert [c.slug for c in small_catalog] == ["istanbul", "ankara", "canakkale"]


class TestLocationCatalogConstruction:
    """Test catalog invariants."""

    def test_duplicate_city_slug_rejected(self):
        with pytest.raises(ValueError, match="Duplicate city slug 'izmir'"):
            LocationCatalog([City.from_names("İzmir"), City.from_names("Izmir")])

    def test_same_district_slug_in_different_cities_allowed(self):
        catalog = LocationCatalog([
            City.from_names("İstanbul", ["Merkez"]),
            City.from_names("Ankara", ["Merkez"]),
        ])
        assert catalog.find_district_by_slug("ankara", "merkez").name == "Merkez"

    def test_cities_cannot_be_replaced(self, small_catalog):
        with pytest.raises(AttributeError):
            small_catalog.cities = ()


class TestLocationValidation:
    """Test name-based validation used by listing forms."""

    def test_full_path_is_valid(self, small_catalog):
        assert small_catalog.is_valid_location("istanbul", "kadıköy", "MODA") is True

    def test_city_only_is_valid(self, small_catalog):
        assert small_catalog.is_valid_location("Ankara") is True

    def test_unknown_city_is_invalid(self, small_catalog):
        assert small_catalog.is_valid_location("Bursa") is False

    def test_district_from_other_city_is_invalid(self, small_catalog):
        assert small_catalog.is_valid_location("Ankara", "Kadıköy") is False

    def test_unknown_neighborhood_is_invalid(self, small_catalog):
        assert small_catalog.is_valid_location("İstanbul", "Kadıköy", "Bebek") is False


class TestLocationSerialization:
    """Test the picker payload."""

    def test_to_dict(self, small_catalog):
        data = small_catalog.to_dict()
        istanbul = data["cities"][0]
        assert istanbul["name"] == "İstanbul"
        assert istanbul["slug"] == "istanbul"
        assert istanbul["districts"][0]["neighborhoods"][0] == {"name": "Moda", "slug": "moda"}
        assert data["cities"][2] == {"name": "Çanakkale", "slug": "canakkale", "districts": []}
