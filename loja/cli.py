"""
Comandos Flask CLI do índice de busca.

Uso:
    flask --app loja search init-index
    flask --app loja search reindex
    flask --app loja search reindex --batch-size 1000
"""
import logging

import click
from flask.cli import AppGroup

from loja.repositories import get_tamanhos_search_repository
from loja.services import get_search_index_service

logger = logging.getLogger(__name__)

search_cli = AppGroup('search', help='Gerenciamento do índice de busca')


@search_cli.command('init-index')
def init_index_command():
    """Cria o índice de Tamanhos se ainda não existir"""
    search_repository = get_tamanhos_search_repository()
    search_repository.ensure_index()
    click.echo(f"Índice pronto: {search_repository.index_name}")


@search_cli.command('reindex')
@click.option('--batch-size', type=int, default=None, help='Documentos por lote')
def reindex_command(batch_size):
    """Recria o índice de Tamanhos a partir do banco"""
    service = get_search_index_service()
    if batch_size:
        service.batch_size = batch_size
    indexed = service.reindex_all()
    click.echo(f"{indexed} tamanhos reindexados")
