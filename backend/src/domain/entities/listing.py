"""Room listing entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Listing:
    """
    Entity representing a room offered for rent.

    ``slug`` stays ``None`` until one is assigned and never changes after.
    ``title`` and ``address`` are the slug seed material.
    """

    title: str
    address: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    slug: Optional[str] = None
    city: Optional[str] = None
    district: Optional[str] = None
    rent_amount: Optional[Decimal] = None
    images: list[str] = field(default_factory=list)
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        """Validate listing data."""
        if not self.title or not self.title.strip():
            raise ValueError("Listing title cannot be empty")
        if self.rent_amount is not None and self.rent_amount < 0:
            raise ValueError("Rent amount cannot be negative")

    @property
    def slug_seed(self) -> list[Optional[str]]:
        return [self.title, self.address]

    def assign_slug(self, slug: str) -> None:
        """Set the slug once; reassigning a different slug is an error."""
        if self.slug is not None and self.slug != slug:
            raise ValueError(f"Listing {self.id} already has slug '{self.slug}'")
        self.slug = slug

    @property
    def primary_image(self) -> Optional[str]:
        return self.images[0] if self.images else None

    def __str__(self) -> str:
        return f"Listing(id={self.id}, title={self.title[:40]})"
