"""
Create Tamanhos Controller.
"""

import logging

from flask import jsonify

from loja.repositories import get_tamanhos_repository, get_tamanhos_search_repository
from loja.serializers import TamanhosSerializer, ValidationError
from loja.utils.header_util import create_entity_creation_alert, create_failure_alert
from .helpers import ENTITY_NAME, RESOURCE_PATH, empty_response, load_entity, validation_error_response

logger = logging.getLogger(__name__)


def create_tamanhos():
    """
    Cria um novo tamanhos.

    Body:
    {
        "name": "M"
    }

    Retorna 201 com o tamanhos criado e header Location,
    ou 400 se o tamanhos já tiver id.
    """
    try:
        tamanhos = load_entity()
    except ValidationError as e:
        return validation_error_response(e)

    return create_entity(tamanhos)


def create_entity(tamanhos):
    """Persiste um tamanhos novo no banco e depois no índice de busca"""
    logger.debug("REST request to save Tamanhos : %s", tamanhos)
    if tamanhos.id is not None:
        return empty_response(400, create_failure_alert(
            ENTITY_NAME, 'idexists', 'A new tamanhos cannot already have an ID'
        ))

    result = get_tamanhos_repository().save(tamanhos)
    get_tamanhos_search_repository().save(result)

    headers = create_entity_creation_alert(ENTITY_NAME, str(result.id))
    headers['Location'] = build_location(result.id)
    return jsonify(TamanhosSerializer.to_dict(result)), 201, headers


def build_location(entity_id):
    if entity_id is None:
        raise ValueError("Cannot build Location for a tamanhos without id")
    return f"{RESOURCE_PATH}/{entity_id}"
