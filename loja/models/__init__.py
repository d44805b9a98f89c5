from .tamanhos import Tamanhos

__all__ = [
    'Tamanhos',
]
