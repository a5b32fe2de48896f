"""Use Case for location autocomplete."""

from domain.services.location_search import LocationSearchIndex
from domain.value_objects import SearchSuggestion


class SearchLocationsUseCase:
    """Run the search index, suppressing queries too short to be useful."""

    def __init__(self, search_index: LocationSearchIndex, min_query_length: int = 2):
        self.search_index = search_index
        self.min_query_length = min_query_length

    def execute(self, query: str) -> list[SearchSuggestion]:
        query = query.strip()
        if len(query) < self.min_query_length:
            return []
        return self.search_index.search(query)
