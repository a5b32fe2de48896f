"""Listing endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from application.use_cases import CreateListingUseCase, GetListingUseCase
from domain.exceptions import SlugGenerationError
from domain.services.location_catalog import LocationCatalog
from infrastructure.config import get_logger
from presentation.api.v1.dependencies import (
    get_create_listing_use_case,
    get_listing_use_case,
    get_location_catalog,
)
from presentation.schemas import ListingCreateRequest, ListingResponse

router = APIRouter(prefix="/listings", tags=["listings"])
logger = get_logger(__name__)


@router.post("", response_model=ListingResponse, status_code=status.HTTP_201_CREATED)
async def create_listing(
    request: ListingCreateRequest,
    use_case: CreateListingUseCase = Depends(get_create_listing_use_case),
    catalog: LocationCatalog = Depends(get_location_catalog),
) -> ListingResponse:
    """Publish a listing under a newly generated slug."""
    if request.city and not catalog.is_valid_location(request.city, request.district):
        raise HTTPException(status_code=422, detail="Geçersiz şehir veya ilçe")

    try:
        listing = await use_case.execute(request.to_entity())
    except SlugGenerationError as e:
        logger.error(f"Listing slug error: {str(e)}")
        raise HTTPException(status_code=409, detail="İlan oluşturulamadı, lütfen tekrar deneyin")
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Listing create error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="İlan kaydedilemedi")

    return ListingResponse.model_validate(listing)


@router.get("/{slug_or_id}", response_model=ListingResponse)
async def get_listing(
    slug_or_id: str,
    use_case: GetListingUseCase = Depends(get_listing_use_case),
) -> ListingResponse:
    """Resolve a listing by slug, or by ID for old links."""
    listing = await use_case.execute(slug_or_id)
    if listing is None:
        raise HTTPException(status_code=404, detail="İlan bulunamadı")
    return ListingResponse.model_validate(listing)
