"""
Database Reset Script
Drops the listings and seeker_profiles tables and rebuilds them empty.
"""

import asyncio
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent / "src"))

from infrastructure.database.session import engine, Base
from infrastructure.database import models  # noqa: F401  registers tables on Base.metadata
from infrastructure.config import get_logger, setup_logger

logger = get_logger(__name__)


async def reset_database() -> None:
    """Drop all Odanet tables and recreate them."""
    tables = ", ".join(sorted(Base.metadata.tables))
    try:
        logger.info(f"🔥 Dropping tables: {tables}")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

        logger.info("🏗️ Creating fresh tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ Fresh database ready, run backfill_slugs.py after importing legacy rows")
    except Exception as e:
        logger.error(f"❌ Reset failed: {e}")
        raise
    finally:
        await engine.dispose()


if __name__ == "__main__":
    setup_logger(log_format="text")
    print("\n⚠️  WARNING: This will DELETE ALL listings and seeker profiles!\n")
    response = input("Are you sure? Type 'yes' to continue: ")

    if response.lower() == "yes":
        asyncio.run(reset_database())
    else:
        print("\n❌ Cancelled.\n")
