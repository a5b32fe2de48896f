"""Listing SQLAlchemy model."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4
from sqlalchemy import String, Text, Numeric, Boolean, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from infrastructure.database.session import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ListingModel(Base):
    """SQLAlchemy model for room listings."""

    __tablename__ = "listings"

    # Primary key
    id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid4
    )

    # Public identifier, null until assigned
    slug: Mapped[str | None] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=True
    )

    # Listing information
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    district: Mapped[str | None] = mapped_column(String(100), nullable=True)
    rent_amount: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    images: Mapped[list] = mapped_column(JSON, default=list, nullable=False)

    # Status
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
        index=True
    )

    def __repr__(self) -> str:
        return f"<ListingModel(id={self.id}, slug={self.slug})>"
