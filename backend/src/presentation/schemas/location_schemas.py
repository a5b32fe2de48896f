"""Location-related Pydantic schemas."""

from typing import Annotated, Literal, Union
from pydantic import Field

from domain.entities import City, District
from domain.value_objects import CitySuggestion, SearchSuggestion
from presentation.schemas.base import CamelModel


class NeighborhoodResponse(CamelModel):
    name: str
    slug: str


class DistrictResponse(CamelModel):
    """District with its neighborhoods."""

    name: str
    slug: str
    neighborhoods: list[NeighborhoodResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, district: District) -> "DistrictResponse":
        return cls(
            name=district.name,
            slug=district.slug,
            neighborhoods=[
                NeighborhoodResponse(name=n.name, slug=n.slug)
                for n in district.neighborhoods
            ],
        )


class CityResponse(CamelModel):
    """City with its full district tree."""

    name: str
    slug: str
    districts: list[DistrictResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, city: City) -> "CityResponse":
        return cls(
            name=city.name,
            slug=city.slug,
            districts=[DistrictResponse.from_entity(d) for d in city.districts],
        )


class LocationTreeResponse(CamelModel):
    """Whole catalog for cascading location pickers."""

    cities: list[CityResponse]


class CitySuggestionResponse(CamelModel):
    kind: Literal["city"] = "city"
    city_name: str = Field(..., description="City display name")
    slug_path: str = Field(..., description="City slug")


class DistrictSuggestionResponse(CamelModel):
    kind: Literal["district"] = "district"
    city_name: str = Field(..., description="Parent city display name")
    district_name: str = Field(..., description="District display name")
    slug_path: str = Field(..., description="citySlug/districtSlug")


SuggestionResponse = Annotated[
    Union[CitySuggestionResponse, DistrictSuggestionResponse],
    Field(discriminator="kind"),
]


def suggestion_to_response(suggestion: SearchSuggestion):
    """Convert a domain suggestion into its response variant."""
    if isinstance(suggestion, CitySuggestion):
        return CitySuggestionResponse(
            city_name=suggestion.city_name,
            slug_path=suggestion.slug_path,
        )
    return DistrictSuggestionResponse(
        city_name=suggestion.city_name,
        district_name=suggestion.district_name,
        slug_path=suggestion.slug_path,
    )
