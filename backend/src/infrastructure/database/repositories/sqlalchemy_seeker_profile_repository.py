"""SQLAlchemy implementation of seeker profile repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import SeekerProfile
from domain.exceptions import SlugConflictError
from domain.repositories import ISeekerProfileRepository
from infrastructure.database.models import SeekerProfileModel
from infrastructure.database.repositories._errors import is_slug_violation


class SQLAlchemySeekerProfileRepository(ISeekerProfileRepository):
    """Concrete implementation of ISeekerProfileRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, profile: SeekerProfile) -> SeekerProfile:
        """Insert a profile inside a savepoint so a slug clash can be retried."""
        model = self._entity_to_model(profile)
        try:
            async with self.session.begin_nested():
                self.session.add(model)
        except IntegrityError as e:
            if is_slug_violation(e):
                raise SlugConflictError(profile.slug) from e
            raise

        await self.session.refresh(model)
        return self._model_to_entity(model)

    async def get_by_slug_or_id(self, value: str) -> Optional[SeekerProfile]:
        """Retrieve a profile by slug, then by ID for legacy links."""
        stmt = select(SeekerProfileModel).where(SeekerProfileModel.slug == value)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            try:
                profile_id = UUID(value)
            except ValueError:
                return None
            model = await self.session.get(SeekerProfileModel, profile_id)

        if model is None:
            return None

        return self._model_to_entity(model)

    async def list_public(self, limit: int) -> list[SeekerProfile]:
        """List active, published profiles, newest first."""
        stmt = (
            select(SeekerProfileModel)
            .where(
                SeekerProfileModel.is_active.is_(True),
                SeekerProfileModel.is_published.is_(True),
            )
            .order_by(SeekerProfileModel.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(m) for m in result.scalars().all()]

    async def list_without_slug(self) -> list[SeekerProfile]:
        """Return profiles whose slug is still null."""
        stmt = (
            select(SeekerProfileModel)
            .where(SeekerProfileModel.slug.is_(None))
            .order_by(SeekerProfileModel.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(m) for m in result.scalars().all()]

    async def update_slug(self, profile_id: UUID, slug: str) -> None:
        """Store the slug of an existing profile."""
        stmt = (
            update(SeekerProfileModel)
            .where(SeekerProfileModel.id == profile_id)
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
            raise ValueError(f"Seeker profile {profile_id} not found")

    def _entity_to_model(self, entity: SeekerProfile) -> SeekerProfileModel:
        """Convert domain entity to ORM model."""
        return SeekerProfileModel(
            id=entity.id,
            slug=entity.slug,
            full_name=entity.full_name,
            preferred_location=entity.preferred_location,
            budget_monthly=entity.budget_monthly,
            age=entity.age,
            occupation=entity.occupation,
            photo_url=entity.photo_url,
            is_active=entity.is_active,
            is_published=entity.is_published,
            created_at=entity.created_at,
        )

    def _model_to_entity(self, model: SeekerProfileModel) -> SeekerProfile:
        """Convert ORM model to domain entity."""
        return SeekerProfile(
            id=model.id,
            slug=model.slug,
            full_name=model.full_name,
            preferred_location=model.preferred_location,
            budget_monthly=model.budget_monthly,
            age=model.age,
            occupation=model.occupation,
            photo_url=model.photo_url,
            is_active=model.is_active,
            is_published=model.is_published,
            created_at=model.created_at,
        )
