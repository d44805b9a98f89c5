"""
Tests for the search index rebuild (loja/services/search_index_service.py)
"""

from unittest.mock import MagicMock

from loja.models import Tamanhos
from loja.repositories import get_tamanhos_repository
from loja.services import SearchIndexService, get_search_index_service
from loja.utils.pagination import Page


class TestReindexAll:
    """reindex_all rebuilds the index from the database"""

    def test_reindex_walks_every_page(self, app, search_repository):
        with app.app_context():
            repository = get_tamanhos_repository()
            for name in ['PP', 'P', 'M', 'G', 'GG']:
                repository.save(Tamanhos(name=name))

            service = SearchIndexService(repository, search_repository, batch_size=2)
            indexed = service.reindex_all()

        assert indexed == 5
        assert ('recreate_index',) in search_repository.calls
        assert sorted(doc['name'] for doc in search_repository.documents.values()) == \
            ['G', 'GG', 'M', 'P', 'PP']

    def test_reindex_drops_stale_documents(self, app, search_repository):
        """Documents missing from the database disappear from the index"""
        search_repository.documents[99] = {'id': 99, 'name': 'Fantasma'}

        with app.app_context():
            service = get_search_index_service()
            indexed = service.reindex_all()

        assert indexed == 0
        assert search_repository.documents == {}

    def test_reindex_with_empty_batches(self):
        repository = MagicMock()
        repository.find_all.return_value = Page(content=[], total_elements=0)
        search = MagicMock()

        indexed = SearchIndexService(repository, search, batch_size=10).reindex_all()

        assert indexed == 0
        search.recreate_index.assert_called_once()
        search.save_all.assert_not_called()

    def test_service_uses_configured_batch_size(self, app):
        app.config['REINDEX_BATCH_SIZE'] = 42

        with app.app_context():
            service = get_search_index_service()

        assert service.batch_size == 42


class TestSearchCli:
    """flask search ..."""

    def test_reindex_command(self, app, client, create_tamanhos, search_repository):
        create_tamanhos('M')
        create_tamanhos('G')
        search_repository.documents.clear()

        result = app.test_cli_runner().invoke(args=['search', 'reindex', '--batch-size', '1'])

        assert result.exit_code == 0
        assert '2 tamanhos reindexados' in result.output
        assert len(search_repository.documents) == 2

    def test_init_index_command(self, app, search_repository):
        result = app.test_cli_runner().invoke(args=['search', 'init-index'])

        assert result.exit_code == 0
        assert ('ensure_index',) in search_repository.calls
