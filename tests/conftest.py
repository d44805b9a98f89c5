"""
Pytest fixtures para os testes da API de Tamanhos
"""

import pytest

from loja import create_app
from loja.config import TestingConfig
from loja.database import db
from loja.repositories import TAMANHOS_SEARCH_REPOSITORY
from loja.utils.pagination import DESC, Page


class InMemorySearchRepository:
    """Índice de busca em memória com a mesma interface do repositório OpenSearch"""

    def __init__(self):
        self.index_name = 'test-tamanhos'
        self.documents = {}
        self.calls = []

    def ensure_index(self):
        self.calls.append(('ensure_index',))

    def recreate_index(self):
        self.calls.append(('recreate_index',))
        self.documents.clear()

    def save(self, entity):
        self.calls.append(('save', entity.id))
        self.documents[entity.id] = {'id': entity.id, 'name': entity.name}
        return entity

    def save_all(self, entities):
        count = 0
        for entity in entities:
            self.save(entity)
            count += 1
        return count

    def delete(self, entity_id):
        self.calls.append(('delete', entity_id))
        self.documents.pop(entity_id, None)

    def search(self, query, page_request):
        from loja.serializers import TamanhosSerializer

        self.calls.append(('search', query))
        term = query.strip('*').lower()
        matches = [
            doc for doc in self.documents.values()
            if not term or term in doc['name'].lower()
        ]
        for prop, direction in reversed(page_request.sort):
            matches.sort(key=lambda doc: doc[prop], reverse=direction == DESC)
        window = matches[page_request.offset:page_request.offset + page_request.size]
        return Page(
            content=[TamanhosSerializer.from_document(doc) for doc in window],
            total_elements=len(matches),
            page_request=page_request,
        )

    def ping(self):
        return True


@pytest.fixture
def app():
    """Aplicação com SQLite em memória e índice de busca em memória"""
    app = create_app(TestingConfig)
    app.extensions[TAMANHOS_SEARCH_REPOSITORY] = InMemorySearchRepository()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def search_repository(app):
    return app.extensions[TAMANHOS_SEARCH_REPOSITORY]


@pytest.fixture
def create_tamanhos(client):
    """Cria um tamanhos via API e retorna o corpo da resposta"""
    def _create(name):
        response = client.post('/api/tamanhos', json={'name': name})
        assert response.status_code == 201
        return response.get_json()
    return _create
