"""
Tests for TamanhosSerializer
"""

import pytest

from loja.models import Tamanhos
from loja.serializers import TamanhosSerializer, ValidationError


class TestTamanhosSerializer:
    """Serialization and payload validation"""

    def test_to_dict(self):
        assert TamanhosSerializer.to_dict(Tamanhos(id=1, name='P')) == {'id': 1, 'name': 'P'}

    def test_to_list(self):
        items = [Tamanhos(id=1, name='P'), Tamanhos(id=2, name='M')]

        assert TamanhosSerializer.to_list(items) == [{'id': 1, 'name': 'P'}, {'id': 2, 'name': 'M'}]

    def test_load_without_id(self):
        tamanhos = TamanhosSerializer.load({'name': 'M'})

        assert tamanhos.id is None
        assert tamanhos.name == 'M'

    def test_load_ignores_unknown_fields(self):
        tamanhos = TamanhosSerializer.load({'id': 3, 'name': 'G', 'extra': True})

        assert tamanhos.id == 3
        assert not hasattr(tamanhos, 'extra')

    @pytest.mark.parametrize('payload, field', [
        ({'name': None}, 'name'),
        ({'name': ''}, 'name'),
        ({'name': 10}, 'name'),
        ({'id': True, 'name': 'M'}, 'id'),
        ({'id': '5', 'name': 'M'}, 'id'),
        ({'id': 2 ** 63, 'name': 'M'}, 'id'),
    ])
    def test_invalid_payloads(self, payload, field):
        with pytest.raises(ValidationError) as exc_info:
            TamanhosSerializer.load(payload)

        assert [error['field'] for error in exc_info.value.field_errors] == [field]

    def test_load_rejects_non_object(self):
        with pytest.raises(ValidationError):
            TamanhosSerializer.load(['M'])

    def test_from_document(self):
        tamanhos = TamanhosSerializer.from_document({'id': 4, 'name': 'GG'})

        assert (tamanhos.id, tamanhos.name) == (4, 'GG')
