"""Domain Value Objects - Immutable objects without identity."""

from .search_suggestion import CitySuggestion, DistrictSuggestion, SearchSuggestion
from .feed_item import FeedItem

__all__ = ["CitySuggestion", "DistrictSuggestion", "SearchSuggestion", "FeedItem"]
