"""Use Case for publishing a seeker profile."""

from typing import Optional

from domain.entities import SeekerProfile
from domain.repositories import ISeekerProfileRepository
from domain.services.slug_generator import SlugGenerator
from application.use_cases.slug_assignment import save_with_unique_slug
from infrastructure.config import get_logger


class CreateSeekerProfileUseCase:
    """Assign a slug to a new seeker profile and persist it."""

    def __init__(
        self,
        seeker_repository: ISeekerProfileRepository,
        slug_generator: SlugGenerator,
        max_attempts: int = 3,
        default_location: Optional[str] = "istanbul",
    ):
        self.seeker_repo = seeker_repository
        self.slug_generator = slug_generator
        self.max_attempts = max_attempts
        self.default_location = default_location
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, profile: SeekerProfile) -> SeekerProfile:
        if profile.slug is not None:
            raise ValueError("New seeker profiles must not carry a slug")

        async def save(slug: str) -> SeekerProfile:
            profile.slug = slug
            return await self.seeker_repo.create(profile)

        try:
            created = await save_with_unique_slug(
                profile.slug_seed(self.default_location), save, self.slug_generator, self.max_attempts
            )
        except Exception:
            profile.slug = None
            raise

        self.logger.info(f"✅ Seeker profile created: {created.slug}")
        return created
