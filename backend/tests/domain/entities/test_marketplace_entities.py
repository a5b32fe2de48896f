"""Unit tests for Listing and SeekerProfile."""

from decimal import Decimal

import pytest
from domain.entities import Listing, SeekerProfile


class TestListing:
    """Test Listing validation and slug handling."""

    def test_empty_title_raises_error(self):
        with pytest.raises(ValueError, match="Listing title cannot be empty"):
            Listing(title="  ")

    def test_negative_rent_raises_error(self):
        with pytest.raises(ValueError, match="Rent amount cannot be negative"):
            Listing(title="Oda", rent_amount=Decimal("-1"))

    def test_slug_seed(self):
        listing = Listing(title="Moda'da Oda", address="Kadıköy")
        assert listing.slug_seed == ["Moda'da Oda", "Kadıköy"]

    def test_slug_is_unset_by_default(self):
        assert Listing(title="Oda").slug is None

    def test_slug_cannot_change_once_assigned(self):
        listing = Listing(title="Oda")
        listing.assign_slug("oda-abc123")
        listing.assign_slug("oda-abc123")
        with pytest.raises(ValueError, match="already has slug"):
            listing.assign_slug("oda-zzz999")

    def test_primary_image(self):
        assert Listing(title="Oda").primary_image is None
        assert Listing(title="Oda", images=["/a.jpg", "/b.jpg"]).primary_image == "/a.jpg"


class TestSeekerProfile:
    """Test SeekerProfile validation and derived fields."""

    def test_empty_name_raises_error(self):
        with pytest.raises(ValueError, match="Seeker name cannot be empty"):
            SeekerProfile(full_name="")

    @pytest.mark.parametrize("age", [15, 121])
    def test_age_out_of_range_raises_error(self, age):
        with pytest.raises(ValueError, match="Age must be between"):
            SeekerProfile(full_name="Ayşe Yılmaz", age=age)

    def test_slug_seed_falls_back_to_default_location(self):
        profile = SeekerProfile(full_name="Ayşe Yılmaz")
        assert profile.slug_seed("istanbul") == ["Ayşe Yılmaz", "istanbul"]
        assert profile.slug_seed() == ["Ayşe Yılmaz", None]

    def test_slug_seed_prefers_own_location(self):
        profile = SeekerProfile(full_name="Ayşe Yılmaz", preferred_location="Kadıköy")
        assert profile.slug_seed("istanbul") == ["Ayşe Yılmaz", "Kadıköy"]

    def test_display_name_abbreviates_surname(self):
        assert SeekerProfile(full_name="Ayşe Nur Yılmaz").display_name == "Ayşe Y."
        assert SeekerProfile(full_name="Cem").display_name == "Cem"

    def test_is_public(self):
        assert SeekerProfile(full_name="Cem").is_public is True
        assert SeekerProfile(full_name="Cem", is_published=False).is_public is False
        assert SeekerProfile(full_name="Cem", is_active=False).is_public is False
