"""
Tratamento de erros não capturados pelos controllers.

Falhas de infraestrutura (banco, OpenSearch) não são tratadas nos endpoints;
chegam aqui e viram 500 com header de alerta de falha.
"""
import logging

from flask import jsonify
from werkzeug.exceptions import InternalServerError

from loja.utils.header_util import create_failure_alert

logger = logging.getLogger(__name__)


def handle_internal_server_error(error: InternalServerError):
    original = getattr(error, 'original_exception', None) or error
    logger.exception("Erro não tratado na requisição: %r", original, exc_info=original)
    headers = create_failure_alert('', 'internalServerError', str(original))
    return jsonify({'message': 'error.internalServerError'}), 500, headers


def register_error_handlers(app):
    app.register_error_handler(InternalServerError, handle_internal_server_error)
