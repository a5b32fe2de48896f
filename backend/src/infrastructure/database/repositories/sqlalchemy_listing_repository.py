"""SQLAlchemy implementation of listing repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Listing
from domain.exceptions import SlugConflictError
from domain.repositories import IListingRepository
from infrastructure.database.models import ListingModel
from infrastructure.database.repositories._errors import is_slug_violation


class SQLAlchemyListingRepository(IListingRepository):
    """Concrete implementation of IListingRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, listing: Listing) -> Listing:
        """Insert a listing inside a savepoint so a slug clash can be retried."""
        model = self._entity_to_model(listing)
        try:
            async with self.session.begin_nested():
                self.session.add(model)
        except IntegrityError as e:
            if is_slug_violation(e):
                raise SlugConflictError(listing.slug) from e
            raise

        await self.session.refresh(model)
        return self._model_to_entity(model)

    async def get_by_slug_or_id(self, value: str) -> Optional[Listing]:
        """Retrieve a listing by slug, then by ID for legacy links."""
        stmt = select(ListingModel).where(ListingModel.slug == value)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            try:
                listing_id = UUID(value)
            except ValueError:
                return None
            model = await self.session.get(ListingModel, listing_id)

        if model is None:
            return None

        return self._model_to_entity(model)

    async def list_recent(self, limit: int) -> list[Listing]:
        """List active listings, newest first."""
        stmt = (
            select(ListingModel)
            .where(ListingModel.is_active.is_(True))
            .order_by(ListingModel.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(m) for m in result.scalars().all()]

    async def list_without_slug(self) -> list[Listing]:
        """Return listings whose slug is still null."""
        stmt = (
            select(ListingModel)
            .where(ListingModel.slug.is_(None))
            .order_by(ListingModel.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(m) for m in result.scalars().all()]

    async def update_slug(self, listing_id: UUID, slug: str) -> None:
        """Store the slug of an existing listing."""
        stmt = (
            update(ListingModel)
            .where(ListingModel.id == listing_id)
            .values(slug=slug)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except IntegrityError as e:
            if is_slug_violation(e):
                raise SlugConflictError(slug) from e
            raise

        if result.rowcount == 0:
            raise ValueError(f"Listing {listing_id} not found")

    def _entity_to_model(self, entity: Listing) -> ListingModel:
        """Convert domain entity to ORM model."""
        return ListingModel(
            id=entity.id,
            slug=entity.slug,
            title=entity.title,
            address=entity.address,
            city=entity.city,
            district=entity.district,
            rent_amount=entity.rent_amount,
            images=list(entity.images),
            is_active=entity.is_active,
            created_at=entity.created_at,
        )

    def _model_to_entity(self, model: ListingModel) -> Listing:
        """Convert ORM model to domain entity."""
        return Listing(
            id=model.id,
            slug=model.slug,
            title=model.title,
            address=model.address,
            city=model.city,
            district=model.district,
            rent_amount=model.rent_amount,
            images=list(model.images or []),
            is_active=model.is_active,
            created_at=model.created_at,
        )
