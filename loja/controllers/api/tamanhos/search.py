"""
Search Tamanhos Controller.
"""

import logging

from flask import jsonify, request

from loja.repositories import get_tamanhos_search_repository
from loja.serializers import TamanhosSerializer
from loja.utils.header_util import create_failure_alert
from loja.utils.pagination import generate_search_pagination_http_headers
from loja.utils.request_params import MissingParameterError, parse_search_query
from .helpers import ENTITY_NAME, SEARCH_PATH, empty_response, page_request_from_args

logger = logging.getLogger(__name__)


def search_tamanhos():
    """
    Busca textual de tamanhos no índice de busca (nunca no banco).

    Query params:
    - query: expressão query_string (obrigatório)
    - page, size, sort: como na listagem
    """
    try:
        query = parse_search_query(request.args)
    except MissingParameterError as e:
        return empty_response(400, create_failure_alert(ENTITY_NAME, 'queryrequired', str(e)))

    logger.debug("REST request to search for a page of Tamanhos for query %s", query)
    page = get_tamanhos_search_repository().search(query, page_request_from_args())

    headers = generate_search_pagination_http_headers(query, page, SEARCH_PATH)
    return jsonify(TamanhosSerializer.to_list(page.content)), 200, headers
