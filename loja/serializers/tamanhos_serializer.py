"""
Serializer de Tamanhos.
"""

from typing import Any, Dict, List

from loja.models import Tamanhos
from .base import BaseSerializer


class TamanhosSerializer(BaseSerializer):
    object_name = 'tamanhos'
    model = Tamanhos
    fields = ['id', 'name']

    def validate(self, data: Dict[str, Any]) -> List[Dict[str, str]]:
        errors = []

        entity_id = data.get('id')
        # bool é subclasse de int
        if entity_id is not None and (isinstance(entity_id, bool) or not isinstance(entity_id, int)):
            errors.append(self.field_error('id', 'must be an integer'))
        elif entity_id is not None and not Tamanhos.is_valid_id(entity_id):
            errors.append(self.field_error('id', 'out of range'))

        name = data.get('name')
        if name is None:
            errors.append(self.field_error('name', 'NotNull'))
        elif not isinstance(name, str):
            errors.append(self.field_error('name', 'must be a string'))
        elif not 1 <= len(name) <= Tamanhos.NAME_MAX_LENGTH:
            errors.append(self.field_error('name', f'size must be between 1 and {Tamanhos.NAME_MAX_LENGTH}'))

        return errors

    @classmethod
    def from_document(cls, source: Dict[str, Any]) -> Tamanhos:
        """Reconstrói um Tamanhos (transiente) a partir do _source do índice"""
        return Tamanhos(id=source.get('id'), name=source.get('name'))
