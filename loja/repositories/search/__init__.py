from .tamanhos_search_repository import (
    TamanhosSearchRepository,
    create_search_client,
    INDEX_MAPPING,
)

__all__ = [
    'TamanhosSearchRepository',
    'create_search_client',
    'INDEX_MAPPING',
]
