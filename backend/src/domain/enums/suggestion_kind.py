"""Kinds of location search suggestions."""

from enum import Enum


class SuggestionKind(str, Enum):
    """Level of the location hierarchy a suggestion points at."""

    CITY = "city"
    DISTRICT = "district"

    def __str__(self) -> str:
        return self.value
