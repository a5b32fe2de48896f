"""Database infrastructure module."""

from .session import get_session, init_db, close_db
from .models import ListingModel, SeekerProfileModel

__all__ = [
    "get_session",
    "init_db",
    "close_db",
    "ListingModel",
    "SeekerProfileModel",
]
