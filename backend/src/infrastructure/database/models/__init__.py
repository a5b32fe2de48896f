"""SQLAlchemy ORM models."""

from .listing_model import ListingModel
from .seeker_profile_model import SeekerProfileModel

__all__ = ["ListingModel", "SeekerProfileModel"]
