from .base import BaseSerializer, ValidationError
from .tamanhos_serializer import TamanhosSerializer

__all__ = [
    'BaseSerializer',
    'ValidationError',
    'TamanhosSerializer',
]
