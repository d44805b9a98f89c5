"""
API Controllers.

Cada subdiretório contém controllers para um domínio específico.
Controllers são responsáveis por:
- Receber requests
- Validar entrada
- Chamar repositórios
- Retornar resposta formatada
"""

from . import tamanhos
