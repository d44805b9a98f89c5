"""
Repositórios de Tamanhos: banco relacional (fonte de verdade) e índice de busca.

As instâncias ficam em app.extensions e são obtidas pelos helpers abaixo
dentro do contexto da aplicação.
"""

from flask import current_app

from .tamanhos_repository import TamanhosRepository
from .search import TamanhosSearchRepository, create_search_client

TAMANHOS_REPOSITORY = 'tamanhos_repository'
TAMANHOS_SEARCH_REPOSITORY = 'tamanhos_search_repository'


def init_repositories(app):
    """Registra os repositórios da aplicação em app.extensions"""
    index_name = f"{app.config.get('OPENSEARCH_INDEX_PREFIX', '')}tamanhos"
    app.extensions[TAMANHOS_REPOSITORY] = TamanhosRepository()
    app.extensions[TAMANHOS_SEARCH_REPOSITORY] = TamanhosSearchRepository(
        create_search_client(app.config),
        index_name=index_name,
        refresh=app.config.get('OPENSEARCH_REFRESH', 'false'),
    )


def get_tamanhos_repository() -> TamanhosRepository:
    return current_app.extensions[TAMANHOS_REPOSITORY]


def get_tamanhos_search_repository() -> TamanhosSearchRepository:
    return current_app.extensions[TAMANHOS_SEARCH_REPOSITORY]


__all__ = [
    'TamanhosRepository',
    'TamanhosSearchRepository',
    'create_search_client',
    'init_repositories',
    'get_tamanhos_repository',
    'get_tamanhos_search_repository',
]
