"""Use Case for assembling the home feed."""

from domain.repositories import IListingRepository, ISeekerProfileRepository
from domain.services.feed_interleaver import interleave_feed
from domain.value_objects import FeedItem
from infrastructure.config import get_logger


class GetFeedUseCase:
    """Fetch recent listings and public seekers and interleave them."""

    def __init__(
        self,
        listing_repository: IListingRepository,
        seeker_repository: ISeekerProfileRepository,
    ):
        self.listing_repo = listing_repository
        self.seeker_repo = seeker_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, limit: int) -> list[FeedItem]:
        """
        Build the feed.

        Args:
            limit: Maximum number of items fetched from each source

        Returns:
            Seeker-first interleaved feed, empty when both sources are empty
        """
        listings = await self.listing_repo.list_recent(limit)
        seekers = await self.seeker_repo.list_public(limit)
        self.logger.info(f"📰 Feed sources: {len(seekers)} seekers, {len(listings)} listings")
        return interleave_feed(seekers, listings)
