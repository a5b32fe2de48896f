"""Use Case for assigning slugs to legacy records created without one."""

from dataclasses import dataclass

from domain.repositories import IListingRepository, ISeekerProfileRepository
from domain.services.slug_generator import SlugGenerator
from application.use_cases.slug_assignment import save_with_unique_slug
from infrastructure.config import get_logger


@dataclass(frozen=True)
class BackfillReport:
    """Number of records that received a slug."""

    listings: int
    seekers: int

    def __str__(self) -> str:
        return f"{self.listings} listings, {self.seekers} seeker profiles"


class BackfillSlugsUseCase:
    """
    Give every listing and seeker profile without a slug a fresh one.

    Seeker profiles without a preferred location are seeded with
    ``default_location`` so their slugs still read like a place.
    """

    def __init__(
        self,
        listing_repository: IListingRepository,
        seeker_repository: ISeekerProfileRepository,
        slug_generator: SlugGenerator,
        default_location: str = "istanbul",
        max_attempts: int = 3,
    ):
        self.listing_repo = listing_repository
        self.seeker_repo = seeker_repository
        self.slug_generator = slug_generator
        self.default_location = default_location
        self.max_attempts = max_attempts
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self) -> BackfillReport:
        listings = await self._backfill_listings()
        seekers = await self._backfill_seekers()
        report = BackfillReport(listings=listings, seekers=seekers)
        self.logger.info(f"✨ Slug backfill finished: {report}")
        return report

    async def _backfill_listings(self) -> int:
        pending = await self.listing_repo.list_without_slug()
        self.logger.info(f"🔧 Found {len(pending)} listings without slugs")

        for listing in pending:
            slug = await save_with_unique_slug(
                listing.slug_seed,
                lambda s, listing_id=listing.id: self._store_listing_slug(listing_id, s),
                self.slug_generator,
                self.max_attempts,
            )
            self.logger.debug(f"{listing.title} → {slug}")

        return len(pending)

    async def _backfill_seekers(self) -> int:
        pending = await self.seeker_repo.list_without_slug()
        self.logger.info(f"🔧 Found {len(pending)} seeker profiles without slugs")

        for profile in pending:
            slug = await save_with_unique_slug(
                profile.slug_seed(self.default_location),
                lambda s, profile_id=profile.id: self._store_seeker_slug(profile_id, s),
                self.slug_generator,
                self.max_attempts,
            )
            self.logger.debug(f"{profile.full_name} → {slug}")

        return len(pending)

    async def _store_listing_slug(self, listing_id, slug: str) -> str:
        await self.listing_repo.update_slug(listing_id, slug)
        return slug

    async def _store_seeker_slug(self, profile_id, slug: str) -> str:
        await self.seeker_repo.update_slug(profile_id, slug)
        return slug
