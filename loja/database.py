"""
Instância do Flask-SQLAlchemy compartilhada pela aplicação.
"""
import logging

from flask_sqlalchemy import SQLAlchemy

logger = logging.getLogger(__name__)

db = SQLAlchemy()


def init_db(app):
    """Cria as tabelas quando DB_CREATE_ALL está ativo (dev e testes)"""
    if not app.config.get('DB_CREATE_ALL'):
        return

    # Garantir que os models estão registrados no metadata
    from loja import models  # noqa: F401

    with app.app_context():
        db.create_all()
        logger.debug("Tabelas criadas em %s", app.config['SQLALCHEMY_DATABASE_URI'])
