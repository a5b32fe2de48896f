"""Application use cases."""

from .backfill_slugs import BackfillReport, BackfillSlugsUseCase
from .create_listing import CreateListingUseCase
from .create_seeker_profile import CreateSeekerProfileUseCase
from .get_by_slug import GetListingUseCase, GetSeekerProfileUseCase
from .get_feed import GetFeedUseCase
from .search_locations import SearchLocationsUseCase

__all__ = [
    "BackfillReport",
    "BackfillSlugsUseCase",
    "CreateListingUseCase",
    "CreateSeekerProfileUseCase",
    "GetListingUseCase",
    "GetSeekerProfileUseCase",
    "GetFeedUseCase",
    "SearchLocationsUseCase",
]
