"""
List Tamanhos Controller.
"""

import logging

from flask import jsonify

from loja.repositories import get_tamanhos_repository
from loja.serializers import TamanhosSerializer
from loja.utils.pagination import generate_pagination_http_headers
from .helpers import RESOURCE_PATH, page_request_from_args

logger = logging.getLogger(__name__)


def list_tamanhos():
    """
    Lista uma página de tamanhos.

    Query params:
    - page: número da página, começando em 0 (default: 0)
    - size: itens por página (default: 20)
    - sort: propriedade[,asc|desc], pode repetir
    """
    logger.debug("REST request to get a page of Tamanhos")
    page = get_tamanhos_repository().find_all(page_request_from_args())

    headers = generate_pagination_http_headers(page, RESOURCE_PATH)
    return jsonify(TamanhosSerializer.to_list(page.content)), 200, headers
