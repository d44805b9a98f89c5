"""
Helpers compartilhados pelos controllers de Tamanhos.
"""

from flask import current_app, jsonify, request

from loja.serializers import TamanhosSerializer, ValidationError
from loja.utils.header_util import create_failure_alert
from loja.utils.request_params import parse_page_request

ENTITY_NAME = 'tamanhos'
RESOURCE_PATH = '/api/tamanhos'
SEARCH_PATH = '/api/_search/tamanhos'
SORTABLE_FIELDS = ('id', 'name')


def empty_response(status, headers=None):
    """Resposta sem corpo"""
    return '', status, headers or {}


def page_request_from_args():
    return parse_page_request(
        request.args,
        allowed_sort=SORTABLE_FIELDS,
        default_size=current_app.config.get('PAGINATION_DEFAULT_SIZE', 20),
        max_size=current_app.config.get('PAGINATION_MAX_SIZE', 2000),
    )


def load_entity():
    """
    Lê o corpo JSON da requisição e monta um Tamanhos transiente.

    Raises:
        ValidationError: corpo ausente, não-JSON ou com campos inválidos
    """
    return TamanhosSerializer.load(request.get_json(silent=True))


def validation_error_response(error: ValidationError):
    headers = create_failure_alert(ENTITY_NAME, 'validation', 'Invalid tamanhos payload')
    return jsonify({
        'message': 'error.validation',
        'fieldErrors': error.field_errors,
    }), 400, headers
