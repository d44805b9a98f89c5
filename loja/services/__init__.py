from .search_index_service import SearchIndexService, get_search_index_service

__all__ = [
    'SearchIndexService',
    'get_search_index_service',
]
