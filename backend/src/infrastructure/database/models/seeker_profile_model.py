"""Seeker profile SQLAlchemy model."""

from datetime import datetime, timezone
from uuid import uuid4
from sqlalchemy import String, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from infrastructure.database.session import Base


class SeekerProfileModel(Base):
    """SQLAlchemy model for seeker profiles."""

    __tablename__ = "seeker_profiles"

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

    # Profile information
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    preferred_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    budget_monthly: Mapped[int | None] = mapped_column(Integer, nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    occupation: Mapped[str | None] = mapped_column(String(100), nullable=True)
    photo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Visibility
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    is_published: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True
    )

    def __repr__(self) -> str:
        return f"<SeekerProfileModel(id={self.id}, slug={self.slug})>"
