"""Feed entry wrapping a listing or a seeker profile."""

from dataclasses import dataclass
from typing import Union

from domain.entities import Listing, SeekerProfile
from domain.enums import FeedItemKind


@dataclass(frozen=True)
class FeedItem:
    """
    Tagged feed entry.

    Attributes:
        kind: Which collection ``data`` came from
        data: The wrapped listing or seeker profile
    """

    kind: FeedItemKind
    data: Union[Listing, SeekerProfile]

    @classmethod
    def seeker(cls, profile: SeekerProfile) -> "FeedItem":
        return cls(kind=FeedItemKind.SEEKER, data=profile)

    @classmethod
    def listing(cls, listing: Listing) -> "FeedItem":
        return cls(kind=FeedItemKind.LISTING, data=listing)
