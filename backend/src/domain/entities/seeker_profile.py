"""Seeker profile entity: a person looking for a room or flatmate."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class SeekerProfile:
    """
    Entity representing a room seeker.

    ``full_name`` and ``preferred_location`` are the slug seed material.
    """

    full_name: str
    preferred_location: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    slug: Optional[str] = None
    budget_monthly: Optional[int] = None
    age: Optional[int] = None
    occupation: Optional[str] = None
    photo_url: Optional[str] = None
    is_active: bool = True
    is_published: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate profile data."""
        if not self.full_name or not self.full_name.strip():
            raise ValueError("Seeker name cannot be empty")
        if self.budget_monthly is not None and self.budget_monthly < 0:
            raise ValueError("Monthly budget cannot be negative")
        if self.age is not None and not 16 <= self.age <= 120:
            raise ValueError("Age must be between 16 and 120")

    def slug_seed(self, default_location: Optional[str] = None) -> list[Optional[str]]:
        """Seed fragments, falling back to ``default_location`` when unset."""
        return [self.full_name, self.preferred_location or default_location]

    def assign_slug(self, slug: str) -> None:
        """Set the slug once; reassigning a different slug is an error."""
        if self.slug is not None and self.slug != slug:
            raise ValueError(f"Seeker profile {self.id} already has slug '{self.slug}'")
        self.slug = slug

    @property
    def is_public(self) -> bool:
        return self.is_active and self.is_published

    @property
    def display_name(self) -> str:
        """First name plus surname initial, as shown on public cards."""
        parts = self.full_name.split()
        if len(parts) < 2:
            return self.full_name.strip()
        return f"{parts[0]} {parts[-1][0]}."

    def __str__(self) -> str:
        return f"SeekerProfile(id={self.id}, name={self.display_name})"
