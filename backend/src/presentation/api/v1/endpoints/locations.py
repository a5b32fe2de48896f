"""Location catalog and autocomplete endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from application.use_cases import SearchLocationsUseCase
from domain.services.location_catalog import LocationCatalog
from presentation.api.v1.dependencies import get_location_catalog, get_search_locations_use_case
from presentation.schemas import (
    CityResponse,
    DistrictResponse,
    LocationTreeResponse,
    SuggestionResponse,
    suggestion_to_response,
)

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=LocationTreeResponse)
async def list_locations(
    catalog: LocationCatalog = Depends(get_location_catalog),
) -> LocationTreeResponse:
    """Return the whole city/district/neighborhood tree."""
    return LocationTreeResponse(
        cities=[CityResponse.from_entity(city) for city in catalog]
    )


@router.get("/search", response_model=list[SuggestionResponse])
async def search_locations(
    q: str = Query("", max_length=100, description="Free text typed by the user"),
    use_case: SearchLocationsUseCase = Depends(get_search_locations_use_case),
):
    """
    Autocomplete cities and districts.

    Queries shorter than two characters return an empty list.
    """
    return [suggestion_to_response(s) for s in use_case.execute(q)]


@router.get("/{city_slug}", response_model=CityResponse)
async def get_city(
    city_slug: str,
    catalog: LocationCatalog = Depends(get_location_catalog),
) -> CityResponse:
    city = catalog.find_city_by_slug(city_slug)
    if city is None:
        raise HTTPException(status_code=404, detail="Şehir bulunamadı")
    return CityResponse.from_entity(city)


@router.get("/{city_slug}/{district_slug}", response_model=DistrictResponse)
async def get_district(
    city_slug: str,
    district_slug: str,
    catalog: LocationCatalog = Depends(get_location_catalog),
) -> DistrictResponse:
    district = catalog.find_district_by_slug(city_slug, district_slug)
    if district is None:
        raise HTTPException(status_code=404, detail="İlçe bulunamadı")
    return DistrictResponse.from_entity(district)
