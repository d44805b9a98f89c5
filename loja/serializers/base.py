"""
Base Serializer - Classe base para todos os serializers.
"""

from typing import Any, Dict, List, Optional
from datetime import datetime


class ValidationError(Exception):
    """
    Payload inválido.

    Carrega a lista de erros por campo no formato
    {'objectName': ..., 'field': ..., 'message': ...}.
    """

    def __init__(self, field_errors: List[Dict[str, str]]):
        super().__init__('error.validation')
        self.field_errors = field_errors


class BaseSerializer:
    """
    Classe base para serializers.

    Define interface comum e helpers para transformar objetos do banco
    em dicionários JSON e payloads JSON em objetos do banco.
    """

    # Nome usado nos erros de validação
    object_name: str = ''

    # Campos a serem incluídos na serialização
    fields: List[str] = []

    # Model usado em load()
    model: Optional[type] = None

    def __init__(self, instance: Any = None, many: bool = False):
        """
        Inicializa serializer.

        Args:
            instance: Objeto ou lista de objetos a serializar
            many: Se True, instance é uma lista
        """
        self.instance = instance
        self.many = many

    def serialize(self) -> Dict[str, Any] | List[Dict[str, Any]]:
        """
        Serializa a instância.

        Returns:
            Dict ou lista de dicts
        """
        if self.instance is None:
            return {} if not self.many else []

        if self.many:
            return [self._serialize_one(item) for item in self.instance]

        return self._serialize_one(self.instance)

    def _serialize_one(self, instance: Any) -> Dict[str, Any]:
        result = {}

        for field in self.fields:
            result[field] = self._serialize_value(getattr(instance, field, None))

        return result

    def _serialize_value(self, value: Any) -> Any:
        if value is None:
            return None

        if isinstance(value, datetime):
            return value.isoformat()

        if isinstance(value, (dict, list, str, int, float, bool)):
            return value

        return str(value)

    def validate(self, data: Dict[str, Any]) -> List[Dict[str, str]]:
        """
        Valida o payload. Subclasses retornam a lista de erros por campo.
        """
        return []

    def field_error(self, field: str, message: str) -> Dict[str, str]:
        return {'objectName': self.object_name, 'field': field, 'message': message}

    @classmethod
    def load(cls, data: Any) -> Any:
        """
        Valida o payload e cria uma instância (transiente) do model.

        Args:
            data: Corpo JSON já decodificado

        Returns:
            Instância do model

        Raises:
            ValidationError: se o payload não for um objeto ou tiver campos inválidos
        """
        serializer = cls()
        if not isinstance(data, dict):
            raise ValidationError([serializer.field_error('', 'must be a JSON object')])

        errors = serializer.validate(data)
        if errors:
            raise ValidationError(errors)

        values = {field: data.get(field) for field in serializer.fields}
        return cls.model(**values)

    @classmethod
    def to_dict(cls, instance: Any, **kwargs) -> Dict[str, Any]:
        """Atalho para serializar um objeto."""
        serializer = cls(instance, **kwargs)
        return serializer.serialize()

    @classmethod
    def to_list(cls, instances: List[Any], **kwargs) -> List[Dict[str, Any]]:
        """Atalho para serializar uma lista."""
        serializer = cls(instances, many=True, **kwargs)
        return serializer.serialize()
