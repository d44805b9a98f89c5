"""Repositório de busca (OpenSearch) de Tamanhos."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from opensearchpy import OpenSearch
from opensearchpy.exceptions import NotFoundError
from opensearchpy.helpers import bulk

from loja.serializers import TamanhosSerializer
from loja.utils.pagination import Page, PageRequest

logger = logging.getLogger(__name__)

INDEX_MAPPING = {
    "mappings": {
        "properties": {
            "id": {"type": "long"},
            "name": {
                "type": "text",
                "fields": {"keyword": {"type": "keyword", "ignore_above": 256}}
            }
        }
    },
    "settings": {
        "index": {
            "number_of_shards": 1,
            "number_of_replicas": 0
        }
    }
}

# Campos de texto são ordenados pelo sub-campo keyword
SORT_FIELDS = {
    'id': 'id',
    'name': 'name.keyword',
}


def create_search_client(config) -> OpenSearch:
    """Cria o client OpenSearch a partir da configuração da aplicação"""
    hosts = config['OPENSEARCH_HOSTS']
    username = config.get('OPENSEARCH_USERNAME')
    password = config.get('OPENSEARCH_PASSWORD')
    return OpenSearch(
        hosts=hosts,
        http_auth=(username, password) if username and password else None,
        use_ssl=hosts[0].startswith('https') if hosts else False,
        verify_certs=config.get('OPENSEARCH_VERIFY_CERTS', False),
        ssl_show_warn=False,
    )


class TamanhosSearchRepository:
    """
    Espelho de Tamanhos no índice de busca.

    Nunca é fonte de verdade: é atualizado depois de cada escrita no banco
    e só é lido pela busca textual.
    """

    def __init__(self, client: OpenSearch, index_name: str = "tamanhos", refresh: str = "false"):
        self.client = client
        self.index_name = index_name
        self.refresh = refresh
        self._initialized = False

    def ensure_index(self) -> None:
        """Cria o índice com o mapping se ainda não existir"""
        if self._initialized:
            return
        if not self.client.indices.exists(index=self.index_name):
            self.client.indices.create(index=self.index_name, body=INDEX_MAPPING)
            logger.info("Índice de busca criado: %s", self.index_name)
        self._initialized = True

    def recreate_index(self) -> None:
        """Apaga e recria o índice (usado pela reindexação)"""
        if self.client.indices.exists(index=self.index_name):
            self.client.indices.delete(index=self.index_name)
            logger.info("Índice de busca removido: %s", self.index_name)
        self._initialized = False
        self.ensure_index()

    def save(self, entity):
        self.ensure_index()
        document = TamanhosSerializer.to_dict(entity)
        self.client.index(
            index=self.index_name,
            id=str(entity.id),
            body=document,
            refresh=self.refresh,
        )
        logger.debug("Tamanhos indexado: id=%s", entity.id)
        return entity

    def save_all(self, entities: Iterable[Any]) -> int:
        """Indexa em lote; retorna a quantidade de documentos indexados"""
        self.ensure_index()
        actions = [
            {
                "_index": self.index_name,
                "_id": str(entity.id),
                "_source": TamanhosSerializer.to_dict(entity),
            }
            for entity in entities
        ]
        if not actions:
            return 0

        success_count, failed_items = bulk(self.client, actions, refresh=self.refresh)
        if failed_items:
            logger.warning("Falha ao indexar %s de %s documentos", len(failed_items), len(actions))
        return success_count

    def delete(self, entity_id) -> None:
        """Remove o documento; documento inexistente não é erro."""
        try:
            self.client.delete(index=self.index_name, id=str(entity_id), refresh=self.refresh)
        except NotFoundError:
            logger.debug("Tamanhos %s não estava no índice %s", entity_id, self.index_name)

    def search(self, query: str, page_request: PageRequest) -> Page:
        """Busca textual (query_string) paginada"""
        self.ensure_index()
        body: Dict[str, Any] = {
            "query": {"query_string": {"query": query}},
            "from": page_request.offset,
            "size": page_request.size,
            "track_total_hits": True,
        }
        sort = self._build_sort(page_request)
        if sort:
            body["sort"] = sort

        response = self.client.search(index=self.index_name, body=body)
        hits = response.get("hits", {})
        content = [TamanhosSerializer.from_document(hit["_source"]) for hit in hits.get("hits", [])]
        return Page(content=content, total_elements=self._total(hits), page_request=page_request)

    def ping(self) -> bool:
        return bool(self.client.ping())

    @staticmethod
    def _build_sort(page_request: PageRequest) -> List[Dict[str, Any]]:
        return [
            {SORT_FIELDS[prop]: {"order": direction}}
            for prop, direction in page_request.sort
            if prop in SORT_FIELDS
        ]

    @staticmethod
    def _total(hits: Dict[str, Any]) -> int:
        total: Optional[Any] = hits.get("total", 0)
        # OpenSearch >= 1.x retorna {"value": N, "relation": "eq"}
        if isinstance(total, dict):
            return int(total.get("value", 0))
        return int(total or 0)
