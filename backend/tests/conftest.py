"""Pytest configuration and shared fixtures."""

import itertools
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

import pytest

from domain.entities import City, District, Listing, SeekerProfile
from domain.exceptions import SlugConflictError
from domain.repositories import IListingRepository, ISeekerProfileRepository
from domain.services.location_catalog import LocationCatalog
from domain.services.slug_generator import SlugGenerator


class CyclingRandom:
    """Stand-in random source returning characters from a fixed sequence."""

    def __init__(self, chars: str):
        self._chars = itertools.cycle(chars)

    def choice(self, seq):
        return next(self._chars)


class InMemoryListingRepository(IListingRepository):
    """Listing repository backed by a dict, with reserved slugs."""

    def __init__(self, listings=(), taken_slugs=()):
        self.listings: dict[UUID, Listing] = {listing.id: listing for listing in listings}
        self.taken_slugs = set(taken_slugs)

    def _slug_in_use(self, slug: str) -> bool:
        return slug in self.taken_slugs or any(item.slug == slug for item in self.listings.values())

    async def create(self, listing: Listing) -> Listing:
        if self._slug_in_use(listing.slug):
            raise SlugConflictError(listing.slug)
        self.listings[listing.id] = listing
        return listing

    async def get_by_slug_or_id(self, value: str) -> Optional[Listing]:
        for listing in self.listings.values():
            if listing.slug == value or str(listing.id) == value:
                return listing
        return None

    async def list_recent(self, limit: int) -> list[Listing]:
        active = [item for item in self.listings.values() if item.is_active]
        return sorted(active, key=lambda item: item.created_at, reverse=True)[:limit]

    async def list_without_slug(self) -> list[Listing]:
        return [item for item in self.listings.values() if item.slug is None]

    async def update_slug(self, listing_id: UUID, slug: str) -> None:
        if self._slug_in_use(slug):
            raise SlugConflictError(slug)
        self.listings[listing_id].slug = slug


class InMemorySeekerRepository(ISeekerProfileRepository):
    """Seeker profile repository backed by a dict, with reserved slugs."""

    def __init__(self, profiles=(), taken_slugs=()):
        self.profiles: dict[UUID, SeekerProfile] = {p.id: p for p in profiles}
        self.taken_slugs = set(taken_slugs)

    def _slug_in_use(self, slug: str) -> bool:
        return slug in self.taken_slugs or any(p.slug == slug for p in self.profiles.values())

    async def create(self, profile: SeekerProfile) -> SeekerProfile:
        if self._slug_in_use(profile.slug):
            raise SlugConflictError(profile.slug)
        self.profiles[profile.id] = profile
        return profile

    async def get_by_slug_or_id(self, value: str) -> Optional[SeekerProfile]:
        for profile in self.profiles.values():
            if profile.slug == value or str(profile.id) == value:
                return profile
        return None

    async def list_public(self, limit: int) -> list[SeekerProfile]:
        public = [p for p in self.profiles.values() if p.is_public]
        return sorted(public, key=lambda p: p.created_at, reverse=True)[:limit]

    async def list_without_slug(self) -> list[SeekerProfile]:
        return [p for p in self.profiles.values() if p.slug is None]

    async def update_slug(self, profile_id: UUID, slug: str) -> None:
        if self._slug_in_use(slug):
            raise SlugConflictError(slug)
        self.profiles[profile_id].slug = slug


@pytest.fixture
def small_catalog():
    """Fixture for a compact catalog covering the interesting cases."""
    return LocationCatalog([
        City.from_names("İstanbul", [
            District.from_names("Kadıköy", ["Moda", "Caferağa"]),
            "Beşiktaş",
            "Şişli",
        ]),
        City.from_names("Ankara", ["Çankaya", "Keçiören"]),
        City.from_names("Çanakkale"),
    ])


@pytest.fixture
def fixed_slug_generator():
    """Slug generator whose suffix is always 'abc123'."""
    return SlugGenerator(random_source=CyclingRandom("abc123"))


@pytest.fixture
def listings():
    """Three listings, oldest first."""
    base = datetime(2025, 3, 1, tzinfo=timezone.utc)
    return [
        Listing(
            title=f"Oda {i}",
            address="Moda Cad. Kadıköy",
            city="İstanbul",
            district="Kadıköy",
            rent_amount=Decimal("10000") + i,
            created_at=base + timedelta(days=i),
        )
        for i in range(1, 4)
    ]


@pytest.fixture
def seekers():
    """Two public seeker profiles, oldest first."""
    base = datetime(2025, 3, 1, tzinfo=timezone.utc)
    return [
        SeekerProfile(
            full_name=name,
            preferred_location="Beşiktaş",
            budget_monthly=12000,
            created_at=base + timedelta(days=i),
        )
        for i, name in enumerate(["Ayşe Yılmaz", "Mehmet Öztürk"], start=1)
    ]


@pytest.fixture
def listing_repo(listings):
    return InMemoryListingRepository(listings)


@pytest.fixture
def seeker_repo(seekers):
    return InMemorySeekerRepository(seekers)


@pytest.fixture
def slug_generator_factory():
    """Build slug generators drawing suffix characters from ``chars``."""
    def factory(chars: str) -> SlugGenerator:
        return SlugGenerator(random_source=CyclingRandom(chars))
    return factory


@pytest.fixture
def listing_repo_factory():
    return InMemoryListingRepository


@pytest.fixture
def seeker_repo_factory():
    return InMemorySeekerRepository
