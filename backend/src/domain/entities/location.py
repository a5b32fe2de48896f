"""Administrative location hierarchy: city, district, neighborhood."""

from dataclasses import dataclass, field
from typing import Iterable, Union

from domain.services.text_normalizer import normalize_turkish


def _check_unique_slugs(items: Iterable, scope: str) -> None:
    seen = set()
    for item in items:
        if item.slug in seen:
            raise ValueError(f"Duplicate slug '{item.slug}' in {scope}")
        seen.add(item.slug)


@dataclass(frozen=True)
class Neighborhood:
    """
    Leaf of the location hierarchy.

    Attributes:
        name: Display name in Turkish orthography
        slug: Normalized key, unique within its district
    """

    name: str
    slug: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Neighborhood name cannot be empty")
        if not self.slug:
            raise ValueError(f"Neighborhood '{self.name}' has an empty slug")

    @classmethod
    def from_name(cls, name: str) -> "Neighborhood":
        return cls(name=name, slug=normalize_turkish(name))

    def to_dict(self) -> dict:
        return {"name": self.name, "slug": self.slug}


@dataclass(frozen=True)
class District:
    """
    District (ilçe) of a city.

    Attributes:
        name: Display name
        slug: Normalized key, unique within its city
        neighborhoods: Ordered neighborhoods, possibly empty
    """

    name: str
    slug: str
    neighborhoods: tuple[Neighborhood, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("District name cannot be empty")
        if not self.slug:
            raise ValueError(f"District '{self.name}' has an empty slug")
        object.__setattr__(self, "neighborhoods", tuple(self.neighborhoods))
        _check_unique_slugs(self.neighborhoods, f"district '{self.name}'")

    @classmethod
    def from_names(cls, name: str, neighborhoods: Iterable[str] = ()) -> "District":
        """Build a district, deriving every slug from its display name."""
        return cls(
            name=name,
            slug=normalize_turkish(name),
            neighborhoods=tuple(Neighborhood.from_name(n) for n in neighborhoods),
        )

    def find_neighborhood_by_slug(self, slug: str) -> Union[Neighborhood, None]:
        return next((n for n in self.neighborhoods if n.slug == slug), None)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "slug": self.slug,
            "neighborhoods": [n.to_dict() for n in self.neighborhoods],
        }


@dataclass(frozen=True)
class City:
    """
    City (il) at the top of the hierarchy.

    Attributes:
        name: Display name
        slug: Normalized key, unique within the catalog
        districts: Ordered districts, possibly empty
    """

    name: str
    slug: str
    districts: tuple[District, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("City name cannot be empty")
        if not self.slug:
            raise ValueError(f"City '{self.name}' has an empty slug")
        object.__setattr__(self, "districts", tuple(self.districts))
        _check_unique_slugs(self.districts, f"city '{self.name}'")

    @classmethod
    def from_names(
        cls,
        name: str,
        districts: Iterable[Union[str, District]] = (),
    ) -> "City":
        """Build a city from display names; districts may be names or prebuilt."""
        return cls(
            name=name,
            slug=normalize_turkish(name),
            districts=tuple(
                d if isinstance(d, District) else District.from_names(d)
                for d in districts
            ),
        )

    def find_district_by_slug(self, slug: str) -> Union[District, None]:
        return next((d for d in self.districts if d.slug == slug), None)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "slug": self.slug,
            "districts": [d.to_dict() for d in self.districts],
        }

    def __str__(self) -> str:
        return self.name
