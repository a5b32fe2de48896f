"""HTTP tests for the v1 API using in-memory repositories."""

import pytest
from fastapi.testclient import TestClient

from main import app
from presentation.api.v1.dependencies import (
    get_listing_repository,
    get_location_catalog,
    get_seeker_repository,
    get_slug_generator,
)


@pytest.fixture
def client(small_catalog, listing_repo, seeker_repo, fixed_slug_generator):
    """Client wired to fixtures instead of PostgreSQL; lifespan is not run."""
    app.dependency_overrides[get_location_catalog] = lambda: small_catalog
    app.dependency_overrides[get_listing_repository] = lambda: listing_repo
    app.dependency_overrides[get_seeker_repository] = lambda: seeker_repo
    app.dependency_overrides[get_slug_generator] = lambda: fixed_slug_generator

    yield TestClient(app)

    app.dependency_overrides.clear()


class TestHealth:

    def test_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestLocationEndpoints:
    """Test catalog and autocomplete endpoints."""

    def test_tree(self, client):
        response = client.get("/api/v1/locations")
        assert response.status_code == 200
        cities = response.json()["cities"]
        assert [c["slug"] for c in cities] == ["istanbul", "ankara", "canakkale"]
        assert cities[0]["districts"][0]["neighborhoods"][0] == {"name": "Moda", "slug": "moda"}

    def test_search(self, client):
        response = client.get("/api/v1/locations/search", params={"q": "kadikoy"})
        assert response.status_code == 200
        assert response.json() == [
            {
                "kind": "district",
                "cityName": "İstanbul",
                "districtName": "Kadıköy",
                "slugPath": "istanbul/kadikoy",
            }
        ]

    def test_search_city(self, client):
        response = client.get("/api/v1/locations/search", params={"q": "ankara"})
        assert response.json()[0] == {"kind": "city", "cityName": "Ankara", "slugPath": "ankara"}

    def test_short_query_returns_empty_list(self, client):
        response = client.get("/api/v1/locations/search", params={"q": "a"})
        assert response.status_code == 200
        assert response.json() == []

    def test_city(self, client):
        response = client.get("/api/v1/locations/istanbul")
        assert response.status_code == 200
        assert response.json()["name"] == "İstanbul"

    def test_unknown_city(self, client):
        assert client.get("/api/v1/locations/not-a-real-city").status_code == 404

    def test_district(self, client):
        response = client.get("/api/v1/locations/istanbul/kadikoy")
        assert response.status_code == 200
        assert response.json()["name"] == "Kadıköy"

    def test_unknown_district(self, client):
        assert client.get("/api/v1/locations/ankara/kadikoy").status_code == 404


class TestFeedEndpoint:
    """Test the interleaved home feed."""

    def test_feed(self, client, listings, seekers):
        response = client.get("/api/v1/feed")
        assert response.status_code == 200

        items = response.json()["items"]
        assert [item["kind"] for item in items] == ["seeker", "listing", "seeker", "listing", "listing"]
        assert items[0]["data"]["displayName"] == "Mehmet Ö."
        assert items[1]["data"]["title"] == "Oda 3"
        assert items[1]["data"]["id"] == str(listings[2].id)

    def test_feed_limit(self, client):
        items = client.get("/api/v1/feed", params={"limit": 1}).json()["items"]
        assert len(items) == 2

    def test_invalid_limit(self, client):
        assert client.get("/api/v1/feed", params={"limit": 0}).status_code == 422

    def test_empty_feed(self, client, listing_repo, seeker_repo):
        listing_repo.listings.clear()
        seeker_repo.profiles.clear()
        response = client.get("/api/v1/feed")
        assert response.status_code == 200
        assert response.json() == {"items": []}


class TestListingEndpoints:
    """Test listing creation and lookup."""

    def test_create_listing(self, client):
        response = client.post(
            "/api/v1/listings",
            json={
                "title": "Moda'da Deniz Manzaralı Oda",
                "address": "Caferağa Mah.",
                "city": "İstanbul",
                "district": "Kadıköy",
                "rentAmount": 12500,
            },
        )
        assert response.status_code == 201
        body = response.json()
        assert body["slug"] == "modada-deniz-manzarali-oda-caferaga-mah-abc123"

        fetched = client.get(f"/api/v1/listings/{body['slug']}")
        assert fetched.status_code == 200
        assert fetched.json()["title"] == "Moda'da Deniz Manzaralı Oda"

    def test_create_listing_with_unknown_district(self, client):
        response = client.post(
            "/api/v1/listings",
            json={"title": "Oda", "city": "Ankara", "district": "Kadıköy"},
        )
        assert response.status_code == 422

    def test_blank_title_is_rejected(self, client):
        response = client.post("/api/v1/listings", json={"title": "    "})
        assert response.status_code == 422

    def test_create_listing_slug_exhausted(self, client, listing_repo):
        listing_repo.taken_slugs.add("kucuk-oda-abc123")
        response = client.post("/api/v1/listings", json={"title": "Küçük Oda"})
        assert response.status_code == 409

    def test_get_listing_by_legacy_id(self, client, listings):
        response = client.get(f"/api/v1/listings/{listings[0].id}")
        assert response.status_code == 200
        assert response.json()["title"] == "Oda 1"

    def test_unknown_listing(self, client):
        assert client.get("/api/v1/listings/yok-boyle-ilan").status_code == 404


class TestSeekerEndpoints:
    """Test seeker profile creation and lookup."""

    def test_create_seeker(self, client):
        response = client.post(
            "/api/v1/seekers",
            json={"fullName": "Zeynep Demir", "preferredLocation": "Şişli", "age": 27},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["slug"] == "zeynep-demir-sisli-abc123"
        assert body["displayName"] == "Zeynep D."

    def test_seeker_without_location_gets_default_city(self, client):
        response = client.post("/api/v1/seekers", json={"fullName": "Cem Kaya"})
        assert response.status_code == 201
        assert response.json()["slug"] == "cem-kaya-istanbul-abc123"

    def test_create_seeker_validation(self, client):
        response = client.post("/api/v1/seekers", json={"fullName": "Zeynep Demir", "age": 12})
        assert response.status_code == 422

    def test_unpublished_seeker_is_not_found(self, client, seekers):
        seekers[0].is_published = False
        assert client.get(f"/api/v1/seekers/{seekers[0].id}").status_code == 404
