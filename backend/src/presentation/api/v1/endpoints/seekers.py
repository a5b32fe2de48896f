"""Seeker profile endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from application.use_cases import CreateSeekerProfileUseCase, GetSeekerProfileUseCase
from domain.exceptions import SlugGenerationError
from infrastructure.config import get_logger
from presentation.api.v1.dependencies import get_create_seeker_use_case, get_seeker_use_case
from presentation.schemas import SeekerProfileCreateRequest, SeekerProfileResponse

router = APIRouter(prefix="/seekers", tags=["seekers"])
logger = get_logger(__name__)


@router.post("", response_model=SeekerProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_seeker_profile(
    request: SeekerProfileCreateRequest,
    use_case: CreateSeekerProfileUseCase = Depends(get_create_seeker_use_case),
) -> SeekerProfileResponse:
    try:
        profile = await use_case.execute(request.to_entity())
    except SlugGenerationError as e:
        logger.error(f"Seeker slug error: {str(e)}")
        raise HTTPException(status_code=409, detail="Profil oluşturulamadı, lütfen tekrar deneyin")
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Seeker create error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Profil kaydedilemedi")

    return SeekerProfileResponse.model_validate(profile)


@router.get("/{slug_or_id}", response_model=SeekerProfileResponse)
async def get_seeker_profile(
    slug_or_id: str,
    use_case: GetSeekerProfileUseCase = Depends(get_seeker_use_case),
) -> SeekerProfileResponse:
    profile = await use_case.execute(slug_or_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Oda arayan profil bulunamadı")
    return SeekerProfileResponse.model_validate(profile)
