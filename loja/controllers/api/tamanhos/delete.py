"""
Delete Tamanhos Controller.
"""

import logging

from loja.models import Tamanhos
from loja.repositories import get_tamanhos_repository, get_tamanhos_search_repository
from loja.utils.header_util import create_entity_deletion_alert
from .helpers import ENTITY_NAME, empty_response

logger = logging.getLogger(__name__)


def delete_tamanhos(tamanhos_id: int):
    """Remove o tamanhos do banco e depois do índice; sempre 200"""
    logger.debug("REST request to delete Tamanhos : %s", tamanhos_id)
    # id fora do BIGINT não existe em nenhum dos dois stores
    if Tamanhos.is_valid_id(tamanhos_id):
        get_tamanhos_repository().delete(tamanhos_id)
        get_tamanhos_search_repository().delete(tamanhos_id)

    return empty_response(200, create_entity_deletion_alert(ENTITY_NAME, str(tamanhos_id)))
