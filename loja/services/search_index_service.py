"""
Sincronização do índice de busca com o banco.

A escrita dupla (banco e depois índice) feita pelos endpoints não é
transacional: se a escrita no índice falhar depois do commit no banco, o
índice fica defasado até a próxima reindexação. reindex_all reconstrói o
índice inteiro a partir do banco e pode ser executado quantas vezes for
necessário.
"""
import logging

from loja.utils.pagination import PageRequest

logger = logging.getLogger(__name__)


class SearchIndexService:
    """Reconstrói o índice de busca a partir do repositório relacional"""

    def __init__(self, repository, search_repository, batch_size=500):
        self.repository = repository
        self.search_repository = search_repository
        self.batch_size = batch_size

    def reindex_all(self):
        """
        Recria o índice e indexa todas as entidades em lotes.

        Returns:
            Quantidade de documentos indexados
        """
        logger.info("Reindexando Tamanhos (lote=%s)", self.batch_size)
        self.search_repository.recreate_index()

        indexed = 0
        page_request = PageRequest(page=0, size=self.batch_size, sort=(('id', 'asc'),))
        while True:
            page = self.repository.find_all(page_request)
            if page.content:
                indexed += self.search_repository.save_all(page.content)
            if not page.has_next():
                break
            page_request = PageRequest(page=page_request.page + 1, size=self.batch_size,
                                       sort=page_request.sort)

        logger.info("Reindexação concluída: %s documentos", indexed)
        return indexed


def get_search_index_service():
    """Monta o serviço com os repositórios e configuração da aplicação atual"""
    from flask import current_app
    from loja.repositories import get_tamanhos_repository, get_tamanhos_search_repository

    return SearchIndexService(
        get_tamanhos_repository(),
        get_tamanhos_search_repository(),
        batch_size=current_app.config.get('REINDEX_BATCH_SIZE', 500),
    )
