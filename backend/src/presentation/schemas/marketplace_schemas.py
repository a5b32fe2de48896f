"""Listing, seeker profile and feed Pydantic schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal, Optional, Union
from uuid import UUID
from pydantic import Field

from domain.entities import Listing, SeekerProfile
from domain.enums import FeedItemKind
from domain.value_objects import FeedItem
from presentation.schemas.base import CamelModel


class ListingCreateRequest(CamelModel):
    """Request schema for publishing a listing."""

    title: str = Field(..., min_length=3, max_length=255)
    address: Optional[str] = Field(None, max_length=1000)
    city: Optional[str] = Field(None, max_length=100)
    district: Optional[str] = Field(None, max_length=100)
    rent_amount: Optional[Decimal] = Field(None, ge=0)
    images: list[str] = Field(default_factory=list, max_length=20)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Moda'da deniz manzaralı oda",
                    "address": "Caferağa Mah. Moda Cad. Kadıköy",
                    "city": "İstanbul",
                    "district": "Kadıköy",
                    "rentAmount": "12500",
                    "images": []
                }
            ]
        }
    }

    def to_entity(self) -> Listing:
        return Listing(
            title=self.title,
            address=self.address,
            city=self.city,
            district=self.district,
            rent_amount=self.rent_amount,
            images=list(self.images),
        )


class ListingResponse(CamelModel):
    id: UUID
    slug: Optional[str]
    title: str
    address: Optional[str]
    city: Optional[str]
    district: Optional[str]
    rent_amount: Optional[Decimal]
    images: list[str]
    created_at: datetime


class SeekerProfileCreateRequest(CamelModel):
    """Request schema for publishing a seeker profile."""

    full_name: str = Field(..., min_length=2, max_length=255)
    preferred_location: Optional[str] = Field(None, max_length=255)
    budget_monthly: Optional[int] = Field(None, ge=0)
    age: Optional[int] = Field(None, ge=16, le=120)
    occupation: Optional[str] = Field(None, max_length=100)
    photo_url: Optional[str] = Field(None, max_length=500)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "fullName": "Ayşe Yılmaz",
                    "preferredLocation": "Kadıköy",
                    "budgetMonthly": 15000,
                    "age": 24,
                    "occupation": "Öğrenci"
                }
            ]
        }
    }

    def to_entity(self) -> SeekerProfile:
        return SeekerProfile(
            full_name=self.full_name,
            preferred_location=self.preferred_location,
            budget_monthly=self.budget_monthly,
            age=self.age,
            occupation=self.occupation,
            photo_url=self.photo_url,
        )


class SeekerProfileResponse(CamelModel):
    id: UUID
    slug: Optional[str]
    display_name: str
    preferred_location: Optional[str]
    budget_monthly: Optional[int]
    age: Optional[int]
    occupation: Optional[str]
    photo_url: Optional[str]
    created_at: datetime


class ListingFeedItem(CamelModel):
    kind: Literal["listing"] = "listing"
    data: ListingResponse


class SeekerFeedItem(CamelModel):
    kind: Literal["seeker"] = "seeker"
    data: SeekerProfileResponse


FeedItemResponse = Annotated[
    Union[SeekerFeedItem, ListingFeedItem],
    Field(discriminator="kind"),
]


class FeedResponse(CamelModel):
    """Interleaved home feed."""

    items: list[FeedItemResponse]


def feed_item_to_response(item: FeedItem):
    """Convert a domain feed item into its response variant."""
    if item.kind == FeedItemKind.SEEKER:
        return SeekerFeedItem(data=SeekerProfileResponse.model_validate(item.data))
    return ListingFeedItem(data=ListingResponse.model_validate(item.data))
