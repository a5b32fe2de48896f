"""Slug assignment with retry on storage conflicts."""

from typing import Awaitable, Callable, Optional, Sequence, TypeVar

from domain.exceptions import SlugConflictError, SlugGenerationError
from domain.services.slug_generator import SlugGenerator
from infrastructure.config import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


async def save_with_unique_slug(
    seed: Sequence[Optional[str]],
    save: Callable[[str], Awaitable[T]],
    slug_generator: SlugGenerator,
    max_attempts: int,
) -> T:
    """
    Generate a slug and hand it to ``save`` until storage accepts it.

    Args:
        seed: Ordered seed fragments for the slug
        save: Coroutine function persisting the record under the given slug;
            raises SlugConflictError when the slug is taken
        slug_generator: Source of candidate slugs
        max_attempts: How many candidates to try

    Returns:
        Whatever ``save`` returned for the accepted slug

    Raises:
        SlugGenerationError: If every candidate collided
    """
    for attempt in range(1, max_attempts + 1):
        slug = slug_generator.generate(seed)
        try:
            return await save(slug)
        except SlugConflictError:
            logger.warning(f"⚠️ Slug collision on '{slug}' (attempt {attempt}/{max_attempts})")

    raise SlugGenerationError(max_attempts)
