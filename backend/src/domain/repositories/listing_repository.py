"""Listing repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import Listing


class IListingRepository(ABC):
    """
    Abstract repository interface for Listing entity.

    Concrete implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, listing: Listing) -> Listing:
        """
        Persist a new listing.

        Args:
            listing: Listing with its slug already assigned

        Returns:
            Created Listing

        Raises:
            SlugConflictError: If another listing already uses the slug
        """
        pass

    @abstractmethod
    async def get_by_slug_or_id(self, value: str) -> Optional[Listing]:
        """
        Retrieve a listing by slug, falling back to its ID.

        Old links carry the UUID instead of a slug.

        Args:
            value: Slug or stringified UUID

        Returns:
            Listing if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_recent(self, limit: int) -> list[Listing]:
        """
        List active listings, newest first.

        Args:
            limit: Maximum number of listings

        Returns:
            Listings ordered by creation time, descending
        """
        pass

    @abstractmethod
    async def list_without_slug(self) -> list[Listing]:
        """Return every listing whose slug is still null."""
        pass

    @abstractmethod
    async def update_slug(self, listing_id: UUID, slug: str) -> None:
        """
        Store a slug for an existing listing.

        Raises:
            SlugConflictError: If another listing already uses the slug
        """
        pass
