"""
Update Tamanhos Controller.
"""

import logging

from flask import jsonify

from loja.repositories import get_tamanhos_repository, get_tamanhos_search_repository
from loja.serializers import TamanhosSerializer, ValidationError
from loja.utils.header_util import create_entity_update_alert
from .create import create_entity
from .helpers import ENTITY_NAME, load_entity, validation_error_response

logger = logging.getLogger(__name__)


def update_tamanhos():
    """
    Atualiza (substitui) um tamanhos existente.

    Sem id no corpo, o tamanhos é criado como no POST.
    """
    try:
        tamanhos = load_entity()
    except ValidationError as e:
        return validation_error_response(e)

    logger.debug("REST request to update Tamanhos : %s", tamanhos)
    if tamanhos.id is None:
        return create_entity(tamanhos)

    result = get_tamanhos_repository().save(tamanhos)
    get_tamanhos_search_repository().save(result)

    headers = create_entity_update_alert(ENTITY_NAME, str(result.id))
    return jsonify(TamanhosSerializer.to_dict(result)), 200, headers
