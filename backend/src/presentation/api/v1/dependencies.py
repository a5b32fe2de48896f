"""FastAPI dependency injection setup."""

from typing import AsyncGenerator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.config import Settings, get_settings
from infrastructure.database import get_session
from infrastructure.database.repositories import (
    SQLAlchemyListingRepository,
    SQLAlchemySeekerProfileRepository,
)
from infrastructure.locations import get_turkey_catalog
from application.use_cases import (
    CreateListingUseCase,
    CreateSeekerProfileUseCase,
    GetFeedUseCase,
    GetListingUseCase,
    GetSeekerProfileUseCase,
    SearchLocationsUseCase,
)
from domain.repositories import IListingRepository, ISeekerProfileRepository
from domain.services.location_catalog import LocationCatalog
from domain.services.location_search import LocationSearchIndex
from domain.services.slug_generator import SlugGenerator


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


# Repository dependencies
def get_listing_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IListingRepository:
    """Get listing repository dependency."""
    return SQLAlchemyListingRepository(session)


def get_seeker_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ISeekerProfileRepository:
    """Get seeker profile repository dependency."""
    return SQLAlchemySeekerProfileRepository(session)


# Location dependencies
def get_location_catalog() -> LocationCatalog:
    """Get the static location catalog."""
    return get_turkey_catalog()


def get_search_index(
    catalog: LocationCatalog = Depends(get_location_catalog),
    settings: Settings = Depends(get_settings),
) -> LocationSearchIndex:
    """Get location search index dependency."""
    return LocationSearchIndex(catalog, limit=settings.search_result_limit)


def get_slug_generator(settings: Settings = Depends(get_settings)) -> SlugGenerator:
    """Get slug generator dependency."""
    return SlugGenerator(
        suffix_length=settings.slug_suffix_length,
        max_base_length=settings.slug_max_base_length,
    )


# Use case dependencies
def get_search_locations_use_case(
    search_index: LocationSearchIndex = Depends(get_search_index),
    settings: Settings = Depends(get_settings),
) -> SearchLocationsUseCase:
    return SearchLocationsUseCase(search_index, min_query_length=settings.search_min_query_length)


def get_feed_use_case(
    listing_repo: IListingRepository = Depends(get_listing_repository),
    seeker_repo: ISeekerProfileRepository = Depends(get_seeker_repository),
) -> GetFeedUseCase:
    return GetFeedUseCase(listing_repo, seeker_repo)


def get_create_listing_use_case(
    listing_repo: IListingRepository = Depends(get_listing_repository),
    slug_generator: SlugGenerator = Depends(get_slug_generator),
    settings: Settings = Depends(get_settings),
) -> CreateListingUseCase:
    return CreateListingUseCase(listing_repo, slug_generator, settings.slug_max_attempts)


def get_create_seeker_use_case(
    seeker_repo: ISeekerProfileRepository = Depends(get_seeker_repository),
    slug_generator: SlugGenerator = Depends(get_slug_generator),
    settings: Settings = Depends(get_settings),
) -> CreateSeekerProfileUseCase:
    return CreateSeekerProfileUseCase(
        seeker_repo,
        slug_generator,
        settings.slug_max_attempts,
        default_location=settings.seeker_default_location,
    )


def get_listing_use_case(
    listing_repo: IListingRepository = Depends(get_listing_repository),
) -> GetListingUseCase:
    return GetListingUseCase(listing_repo)


def get_seeker_use_case(
    seeker_repo: ISeekerProfileRepository = Depends(get_seeker_repository),
) -> GetSeekerProfileUseCase:
    return GetSeekerProfileUseCase(seeker_repo)
