"""
Endpoint de health check geral da API
"""
import logging
from datetime import datetime, timezone

from flask import Blueprint, jsonify
from sqlalchemy import text

from loja.database import db
from loja.repositories import get_tamanhos_search_repository

logger = logging.getLogger(__name__)

bp = Blueprint('health', __name__, url_prefix='/api')


@bp.route('/health', methods=['GET'])
def health_check():
    """Healthcheck: verifica se o banco de dados e o OpenSearch estão acessíveis"""
    checks = {}

    try:
        db.session.execute(text('SELECT 1'))
        checks['database'] = 'up'
    except Exception as e:
        logger.warning("Health check do banco falhou: %s", e)
        checks['database'] = f'down: {e}'

    try:
        checks['search'] = 'up' if get_tamanhos_search_repository().ping() else 'down'
    except Exception as e:
        logger.warning("Health check do OpenSearch falhou: %s", e)
        checks['search'] = f'down: {e}'

    healthy = all(value == 'up' for value in checks.values())
    return jsonify({
        'status': 'healthy' if healthy else 'unhealthy',
        'checks': checks,
        'timestamp': datetime.now(timezone.utc).isoformat()
    }), 200 if healthy else 503
