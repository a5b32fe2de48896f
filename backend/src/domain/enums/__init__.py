"""Domain Enums - Constant values used across the domain."""

from .suggestion_kind import SuggestionKind
from .feed_item_kind import FeedItemKind

__all__ = ["SuggestionKind", "FeedItemKind"]
