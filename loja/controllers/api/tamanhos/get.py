"""
Get Tamanhos Controller.
"""

import logging

from flask import jsonify

from loja.models import Tamanhos
from loja.repositories import get_tamanhos_repository
from loja.serializers import TamanhosSerializer
from .helpers import empty_response

logger = logging.getLogger(__name__)


def get_tamanhos(tamanhos_id: int):
    """Retorna um tamanhos pelo id, ou 404 sem corpo"""
    logger.debug("REST request to get Tamanhos : %s", tamanhos_id)
    # id fora do BIGINT não pode existir no banco
    if not Tamanhos.is_valid_id(tamanhos_id):
        return empty_response(404)

    tamanhos = get_tamanhos_repository().find_one(tamanhos_id)

    if tamanhos is None:
        return empty_response(404)

    return jsonify(TamanhosSerializer.to_dict(tamanhos)), 200
