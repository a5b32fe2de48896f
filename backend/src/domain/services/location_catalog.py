"""Read-only catalog over the city/district/neighborhood hierarchy."""

from typing import Iterable, Iterator, Optional

from domain.entities import City, District
from domain.services.text_normalizer import transliterate_turkish


class LocationCatalog:
    """
    Immutable collection of cities built once at startup.

    City slugs must be unique across the catalog; district and neighborhood
    slug uniqueness is checked by the entities themselves, scoped to their
    parent.
    """

    def __init__(self, cities: Iterable[City]):
        self._cities: tuple[City, ...] = tuple(cities)
        self._by_slug: dict[str, City] = {}
        for city in self._cities:
            if city.slug in self._by_slug:
                raise ValueError(f"Duplicate city slug '{city.slug}' in catalog")
            self._by_slug[city.slug] = city

    @property
    def cities(self) -> tuple[City, ...]:
        return self._cities

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def __len__(self) -> int:
        return len(self._cities)

    def find_city_by_slug(self, slug: str) -> Optional[City]:
        """Exact, case-sensitive slug lookup."""
        return self._by_slug.get(slug)

    def find_district_by_slug(self, city_slug: str, district_slug: str) -> Optional[District]:
        """Look up a district under the city with ``city_slug``."""
        city = self.find_city_by_slug(city_slug)
        if city is None:
            return None
        return city.find_district_by_slug(district_slug)

    def is_valid_location(
        self,
        city: str,
        district: Optional[str] = None,
        neighborhood: Optional[str] = None,
    ) -> bool:
        """
        Check that display names form a path through the hierarchy.

        Names are compared case-insensitively after Turkish transliteration,
        so "istanbul" matches "İstanbul". Omitted lower levels are not
        checked, so a known city alone is valid.
        """
        match = next((c for c in self._cities if _same_name(c.name, city)), None)
        if match is None:
            return False
        if not district:
            return True

        district_match = next((d for d in match.districts if _same_name(d.name, district)), None)
        if district_match is None:
            return False
        if not neighborhood:
            return True

        return any(_same_name(n.name, neighborhood) for n in district_match.neighborhoods)

    def to_dict(self) -> dict:
        """Serialize the whole tree for cascading location pickers."""
        return {"cities": [city.to_dict() for city in self._cities]}


def _same_name(left: str, right: str) -> bool:
    return transliterate_turkish(left.strip()) == transliterate_turkish(right.strip())
