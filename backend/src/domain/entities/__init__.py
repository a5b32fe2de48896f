"""Domain Entities - Objects with identity, plus the location hierarchy."""

from .location import City, District, Neighborhood
from .listing import Listing
from .seeker_profile import SeekerProfile

__all__ = ["City", "District", "Neighborhood", "Listing", "SeekerProfile"]
