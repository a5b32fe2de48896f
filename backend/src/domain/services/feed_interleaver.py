"""Round-robin merge of seeker profiles and listings into one feed."""

from typing import Sequence

from domain.entities import Listing, SeekerProfile
from domain.value_objects import FeedItem


def interleave_feed(
    seekers: Sequence[SeekerProfile],
    listings: Sequence[Listing],
) -> list[FeedItem]:
    """
    Alternate seeker, listing, seeker, listing... starting with seekers.

    Each source keeps its own order and nothing is re-sorted across sources.
    Once the shorter source runs out, the rest of the longer one follows.
    """
    items: list[FeedItem] = []
    for i in range(max(len(seekers), len(listings))):
        if i < len(seekers):
            items.append(FeedItem.seeker(seekers[i]))
        if i < len(listings):
            items.append(FeedItem.listing(listings[i]))
    return items
