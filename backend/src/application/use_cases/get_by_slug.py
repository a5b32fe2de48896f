"""Use Cases for resolving public detail pages by slug or legacy ID."""

from typing import Optional

from domain.entities import Listing, SeekerProfile
from domain.repositories import IListingRepository, ISeekerProfileRepository


class GetListingUseCase:
    """Resolve a listing from the identifier in its URL."""

    def __init__(self, listing_repository: IListingRepository):
        self.listing_repo = listing_repository

    async def execute(self, slug_or_id: str) -> Optional[Listing]:
        return await self.listing_repo.get_by_slug_or_id(slug_or_id)


class GetSeekerProfileUseCase:
    """Resolve a public seeker profile from the identifier in its URL."""

    def __init__(self, seeker_repository: ISeekerProfileRepository):
        self.seeker_repo = seeker_repository

    async def execute(self, slug_or_id: str) -> Optional[SeekerProfile]:
        profile = await self.seeker_repo.get_by_slug_or_id(slug_or_id)
        if profile is None or not profile.is_public:
            return None
        return profile
