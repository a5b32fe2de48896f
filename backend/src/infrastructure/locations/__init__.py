"""Static location datasets."""

from .turkey import build_turkey_catalog, get_turkey_catalog

__all__ = ["build_turkey_catalog", "get_turkey_catalog"]
