"""Pydantic schemas for request/response validation."""

from .health_schemas import HealthResponse
from .location_schemas import (
    CityResponse,
    DistrictResponse,
    LocationTreeResponse,
    SuggestionResponse,
    suggestion_to_response,
)
from .marketplace_schemas import (
    FeedResponse,
    ListingCreateRequest,
    ListingResponse,
    SeekerProfileCreateRequest,
    SeekerProfileResponse,
    feed_item_to_response,
)

__all__ = [
    "HealthResponse",
    "CityResponse",
    "DistrictResponse",
    "LocationTreeResponse",
    "SuggestionResponse",
    "suggestion_to_response",
    "FeedResponse",
    "ListingCreateRequest",
    "ListingResponse",
    "SeekerProfileCreateRequest",
    "SeekerProfileResponse",
    "feed_item_to_response",
]
