"""Translation of storage errors into domain errors."""

from sqlalchemy.exc import IntegrityError


def is_slug_violation(error: IntegrityError) -> bool:
    """Unique index on ``slug`` rejected the row (e.g. ix_listings_slug)."""
    return "slug" in str(error.orig).lower()
