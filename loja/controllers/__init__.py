"""
Controllers - Camada de controle para endpoints da API.

Cada controller é responsável por uma ação específica (create, update, delete, etc).

Estrutura:
- api/tamanhos/: Controllers de tamanhos
"""
