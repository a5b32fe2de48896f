"""Seeker profile repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import SeekerProfile


class ISeekerProfileRepository(ABC):
    """Abstract repository interface for SeekerProfile entity."""

    @abstractmethod
    async def create(self, profile: SeekerProfile) -> SeekerProfile:
        """
        Persist a new seeker profile.

        Raises:
            SlugConflictError: If another profile already uses the slug
        """
        pass

    @abstractmethod
    async def get_by_slug_or_id(self, value: str) -> Optional[SeekerProfile]:
        """Retrieve a profile by slug, falling back to its ID."""
        pass

    @abstractmethod
    async def list_public(self, limit: int) -> list[SeekerProfile]:
        """List active, published profiles, newest first."""
        pass

    @abstractmethod
    async def list_without_slug(self) -> list[SeekerProfile]:
        """Return every profile whose slug is still null."""
        pass

    @abstractmethod
    async def update_slug(self, profile_id: UUID, slug: str) -> None:
        """
        Store a slug for an existing profile.

        Raises:
            SlugConflictError: If another profile already uses the slug
        """
        pass
