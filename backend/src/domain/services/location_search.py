"""In-memory location autocomplete over a LocationCatalog."""

from domain.services.location_catalog import LocationCatalog
from domain.services.text_normalizer import normalize_turkish
from domain.value_objects import CitySuggestion, DistrictSuggestion, SearchSuggestion

DEFAULT_SUGGESTION_LIMIT = 10


class LocationSearchIndex:
    """
    Substring matcher returning city and district suggestions.

    A location matches when its slug contains the normalized query, or when
    its display name contains the raw query ignoring case. Results keep
    catalog order with every city match ahead of every district match; there
    is no scoring. The index does not enforce a minimum query length.
    """

    def __init__(self, catalog: LocationCatalog, limit: int = DEFAULT_SUGGESTION_LIMIT):
        if limit < 1:
            raise ValueError("Suggestion limit must be positive")
        self.catalog = catalog
        self.limit = limit

    def search(self, query: str) -> list[SearchSuggestion]:
        """
        Return up to ``limit`` suggestions for ``query``.

        Args:
            query: Free text typed by the user

        Returns:
            City suggestions followed by district suggestions
        """
        normalized = normalize_turkish(query)
        raw = query.lower()

        cities: list[SearchSuggestion] = []
        districts: list[SearchSuggestion] = []

        for city in self.catalog:
            if _matches(city.slug, city.name, normalized, raw):
                cities.append(CitySuggestion(city_name=city.name, city_slug=city.slug))

            for district in city.districts:
                if _matches(district.slug, district.name, normalized, raw):
                    districts.append(
                        DistrictSuggestion(
                            city_name=city.name,
                            district_name=district.name,
                            city_slug=city.slug,
                            district_slug=district.slug,
                        )
                    )

        return (cities + districts)[:self.limit]


def _matches(slug: str, name: str, normalized_query: str, raw_query: str) -> bool:
    return normalized_query in slug or raw_query in name.lower()
