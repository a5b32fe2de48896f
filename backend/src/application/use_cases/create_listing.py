"""Use Case for publishing a room listing."""

from domain.entities import Listing
from domain.repositories import IListingRepository
from domain.services.slug_generator import SlugGenerator
from application.use_cases.slug_assignment import save_with_unique_slug
from infrastructure.config import get_logger


class CreateListingUseCase:
    """Assign a slug to a new listing and persist it."""

    def __init__(
        self,
        listing_repository: IListingRepository,
        slug_generator: SlugGenerator,
        max_attempts: int = 3,
    ):
        self.listing_repo = listing_repository
        self.slug_generator = slug_generator
        self.max_attempts = max_attempts
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, listing: Listing) -> Listing:
        """
        Persist ``listing`` under a freshly generated slug.

        Raises:
            SlugGenerationError: If every slug candidate was already taken
        """
        if listing.slug is not None:
            raise ValueError("New listings must not carry a slug")

        async def save(slug: str) -> Listing:
            listing.slug = slug
            return await self.listing_repo.create(listing)

        try:
            created = await save_with_unique_slug(
                listing.slug_seed, save, self.slug_generator, self.max_attempts
            )
        except Exception:
            listing.slug = None
            raise

        self.logger.info(f"✅ Listing created: {created.slug}")
        return created
