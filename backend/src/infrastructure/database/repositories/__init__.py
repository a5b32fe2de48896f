"""Repository implementations."""

from .sqlalchemy_listing_repository import SQLAlchemyListingRepository
from .sqlalchemy_seeker_profile_repository import SQLAlchemySeekerProfileRepository

__all__ = ["SQLAlchemyListingRepository", "SQLAlchemySeekerProfileRepository"]
