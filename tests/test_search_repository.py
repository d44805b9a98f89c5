"""
Tests for loja/repositories/search/tamanhos_search_repository.py
"""

from unittest.mock import MagicMock, patch

import pytest
from opensearchpy.exceptions import NotFoundError

from loja.models import Tamanhos
from loja.repositories.search import INDEX_MAPPING, TamanhosSearchRepository, create_search_client
from loja.utils.pagination import PageRequest


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.indices.exists.return_value = True
    return client


@pytest.fixture
def repository(mock_client):
    return TamanhosSearchRepository(mock_client, index_name='tamanhos', refresh='wait_for')


class TestIndexLifecycle:
    """Index creation"""

    def test_creates_missing_index_once(self, mock_client, repository):
        mock_client.indices.exists.return_value = False

        repository.ensure_index()
        repository.ensure_index()

        mock_client.indices.create.assert_called_once_with(index='tamanhos', body=INDEX_MAPPING)

    def test_existing_index_is_not_recreated(self, mock_client, repository):
        repository.ensure_index()

        mock_client.indices.create.assert_not_called()

    def test_recreate_index(self, mock_client, repository):
        mock_client.indices.exists.side_effect = [True, False]

        repository.recreate_index()

        mock_client.indices.delete.assert_called_once_with(index='tamanhos')
        mock_client.indices.create.assert_called_once()


class TestWrites:
    """save / delete"""

    def test_save_indexes_document(self, mock_client, repository):
        repository.save(Tamanhos(id=5, name='L'))

        mock_client.index.assert_called_once_with(
            index='tamanhos',
            id='5',
            body={'id': 5, 'name': 'L'},
            refresh='wait_for',
        )

    def test_delete_document(self, mock_client, repository):
        repository.delete(5)

        mock_client.delete.assert_called_once_with(index='tamanhos', id='5', refresh='wait_for')

    def test_delete_missing_document_is_ignored(self, mock_client, repository):
        mock_client.delete.side_effect = NotFoundError(404, 'not_found', {})

        repository.delete(404)

    def test_save_all_uses_bulk(self, repository):
        with patch('loja.repositories.search.tamanhos_search_repository.bulk') as mock_bulk:
            mock_bulk.return_value = (2, [])

            count = repository.save_all([Tamanhos(id=1, name='P'), Tamanhos(id=2, name='M')])

        assert count == 2
        actions = mock_bulk.call_args[0][1]
        assert [action['_id'] for action in actions] == ['1', '2']
        assert actions[1]['_source'] == {'id': 2, 'name': 'M'}

    def test_save_all_empty(self, repository):
        assert repository.save_all([]) == 0


class TestSearch:
    """query_string search"""

    def test_search_builds_query_and_page(self, mock_client, repository):
        mock_client.search.return_value = {
            'hits': {
                'total': {'value': 3, 'relation': 'eq'},
                'hits': [{'_source': {'id': 2, 'name': 'Medio'}}],
            }
        }

        page = repository.search('med*', PageRequest(page=1, size=1, sort=(('name', 'desc'),)))

        body = mock_client.search.call_args.kwargs['body']
        assert body['query'] == {'query_string': {'query': 'med*'}}
        assert body['from'] == 1
        assert body['size'] == 1
        assert body['sort'] == [{'name.keyword': {'order': 'desc'}}]
        assert page.total_elements == 3
        assert page.content[0].id == 2
        assert page.content[0].name == 'Medio'

    def test_search_legacy_total_format(self, mock_client, repository):
        mock_client.search.return_value = {'hits': {'total': 7, 'hits': []}}

        page = repository.search('*', PageRequest())

        assert page.total_elements == 7
        assert page.content == []
        assert 'sort' not in mock_client.search.call_args.kwargs['body']


class TestClientFactory:
    """create_search_client"""

    def test_builds_client_with_auth(self):
        config = {
            'OPENSEARCH_HOSTS': ['https://search:9200'],
            'OPENSEARCH_USERNAME': 'admin',
            'OPENSEARCH_PASSWORD': 'secret',
            'OPENSEARCH_VERIFY_CERTS': False,
        }
        with patch('loja.repositories.search.tamanhos_search_repository.OpenSearch') as mock_cls:
            create_search_client(config)

        kwargs = mock_cls.call_args.kwargs
        assert kwargs['hosts'] == ['https://search:9200']
        assert kwargs['http_auth'] == ('admin', 'secret')
        assert kwargs['use_ssl'] is True
