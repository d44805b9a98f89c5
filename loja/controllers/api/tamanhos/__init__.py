"""
Tamanhos Controllers.

Controllers para gerenciamento de tamanhos.
"""

from .list import list_tamanhos
from .get import get_tamanhos
from .create import create_tamanhos
from .update import update_tamanhos
from .delete import delete_tamanhos
from .search import search_tamanhos

__all__ = [
    'list_tamanhos',
    'get_tamanhos',
    'create_tamanhos',
    'update_tamanhos',
    'delete_tamanhos',
    'search_tamanhos',
]
