"""
Slug Backfill Script
Run this once to give legacy listings and seeker profiles a slug.
"""

import asyncio
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent / "src"))

from application.use_cases import BackfillSlugsUseCase
from domain.services.slug_generator import SlugGenerator
from infrastructure.config import get_settings, setup_logger, get_logger
from infrastructure.database import get_session, close_db
from infrastructure.database.repositories import (
    SQLAlchemyListingRepository,
    SQLAlchemySeekerProfileRepository,
)

logger = get_logger(__name__)


async def backfill_slugs():
    """Assign slugs to every record that is still missing one."""
    settings = get_settings()
    try:
        async for session in get_session():
            use_case = BackfillSlugsUseCase(
                listing_repository=SQLAlchemyListingRepository(session),
                seeker_repository=SQLAlchemySeekerProfileRepository(session),
                slug_generator=SlugGenerator(
                    suffix_length=settings.slug_suffix_length,
                    max_base_length=settings.slug_max_base_length,
                ),
                default_location=settings.seeker_default_location,
                max_attempts=settings.slug_max_attempts,
            )
            report = await use_case.execute()
            logger.info(f"🎉 Updated {report}")
    except Exception as e:
        logger.error(f"❌ Error generating slugs: {e}", exc_info=True)
        raise
    finally:
        await close_db()


if __name__ == "__main__":
    settings = get_settings()
    setup_logger(level=settings.log_level, log_format="text")
    asyncio.run(backfill_slugs())
