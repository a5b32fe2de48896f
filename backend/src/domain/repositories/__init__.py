"""Domain Repository Interfaces - Abstract definitions."""

from .listing_repository import IListingRepository
from .seeker_profile_repository import ISeekerProfileRepository

__all__ = ["IListingRepository", "ISeekerProfileRepository"]
