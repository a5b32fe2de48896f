"""Location autocomplete suggestions."""

from dataclasses import dataclass
from typing import Union

from domain.enums import SuggestionKind


@dataclass(frozen=True)
class CitySuggestion:
    """
    Suggestion pointing at a whole city.

    Attributes:
        city_name: City display name
        city_slug: City slug, also the suggestion's slug path
    """

    city_name: str
    city_slug: str

    @property
    def kind(self) -> SuggestionKind:
        return SuggestionKind.CITY

    @property
    def slug_path(self) -> str:
        return self.city_slug

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "cityName": self.city_name,
            "slugPath": self.slug_path,
        }

    def __str__(self) -> str:
        return self.city_name


@dataclass(frozen=True)
class DistrictSuggestion:
    """
    Suggestion pointing at a district inside a city.

    Attributes:
        city_name: Parent city display name
        district_name: District display name
        city_slug: Parent city slug
        district_slug: District slug
    """

    city_name: str
    district_name: str
    city_slug: str
    district_slug: str

    @property
    def kind(self) -> SuggestionKind:
        return SuggestionKind.DISTRICT

    @property
    def slug_path(self) -> str:
        return f"{self.city_slug}/{self.district_slug}"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "cityName": self.city_name,
            "districtName": self.district_name,
            "slugPath": self.slug_path,
        }

    def __str__(self) -> str:
        return f"{self.district_name}, {self.city_name}"


SearchSuggestion = Union[CitySuggestion, DistrictSuggestion]
