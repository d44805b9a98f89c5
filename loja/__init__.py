from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate
import logging
from loja.config import Config
from loja.database import db, init_db

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )

    # Configurar CORS
    allowed_origins = [
        origin.strip() for origin in app.config.get('CORS_ORIGINS', '').split(',') if origin.strip()
    ]
    CORS(app,
         resources={r"/api/*": {"origins": allowed_origins}},
         supports_credentials=False,
         allow_headers=["Content-Type", "Authorization"],
         expose_headers=["Location", "Link", "X-Total-Count",
                         f"X-{app.config['APPLICATION_NAME']}-alert",
                         f"X-{app.config['APPLICATION_NAME']}-error",
                         f"X-{app.config['APPLICATION_NAME']}-params"],
         methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"])

    # Inicializar banco de dados
    db.init_app(app)

    # Inicializar Flask-Migrate
    Migrate(app, db)

    init_db(app)

    # Repositórios (banco + índice de busca)
    from loja.repositories import init_repositories
    init_repositories(app)

    from loja.routes import tamanhos
    app.register_blueprint(tamanhos.tamanhos_bp)

    # Health check endpoint
    from loja.routes import health
    app.register_blueprint(health.bp)

    from loja.cli import search_cli
    app.cli.add_command(search_cli)

    from loja.errors import register_error_handlers
    register_error_handlers(app)

    return app
