"""Kinds of entries in the home feed."""

from enum import Enum


class FeedItemKind(str, Enum):
    """Source collection a feed entry was taken from."""

    SEEKER = "seeker"
    LISTING = "listing"

    def __str__(self) -> str:
        return self.value
