"""
Tamanhos API - tabela de rotas

Endpoints:
- POST /api/tamanhos - Create tamanhos
- PUT /api/tamanhos - Update tamanhos (cria se vier sem id)
- GET /api/tamanhos - List tamanhos (page, size, sort)
- GET /api/tamanhos/:id - Get tamanhos
- DELETE /api/tamanhos/:id - Delete tamanhos
- GET /api/_search/tamanhos - Search tamanhos (query, page, size, sort)
"""

from flask import Blueprint

from loja.controllers.api.tamanhos import (
    create_tamanhos,
    update_tamanhos,
    list_tamanhos,
    get_tamanhos,
    delete_tamanhos,
    search_tamanhos,
)

tamanhos_bp = Blueprint('tamanhos', __name__, url_prefix='/api')

# (método, caminho, handler)
ROUTES = [
    ('POST', '/tamanhos', create_tamanhos),
    ('PUT', '/tamanhos', update_tamanhos),
    ('GET', '/tamanhos', list_tamanhos),
    ('GET', '/tamanhos/<int:tamanhos_id>', get_tamanhos),
    ('DELETE', '/tamanhos/<int:tamanhos_id>', delete_tamanhos),
    ('GET', '/_search/tamanhos', search_tamanhos),
]

for method, rule, view_func in ROUTES:
    tamanhos_bp.add_url_rule(rule, endpoint=view_func.__name__, view_func=view_func, methods=[method])
