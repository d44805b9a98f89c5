"""
Headers de alerta para notificação do cliente.
"""
import logging

from flask import current_app

logger = logging.getLogger(__name__)


def _application_name():
    return current_app.config.get('APPLICATION_NAME', 'lojaApp')


def create_alert(message, param):
    app_name = _application_name()
    return {
        f'X-{app_name}-alert': message,
        f'X-{app_name}-params': param,
    }


def create_entity_creation_alert(entity_name, param):
    return create_alert(f'{_application_name()}.{entity_name}.created', param)


def create_entity_update_alert(entity_name, param):
    return create_alert(f'{_application_name()}.{entity_name}.updated', param)


def create_entity_deletion_alert(entity_name, param):
    return create_alert(f'{_application_name()}.{entity_name}.deleted', param)


def create_failure_alert(entity_name, error_key, default_message):
    """
    Headers de falha: X-<app>-error com a chave i18n do erro e
    X-<app>-params com o nome da entidade.
    """
    logger.error("Entity processing failed, %s", default_message)
    app_name = _application_name()
    return {
        f'X-{app_name}-error': f'error.{error_key}',
        f'X-{app_name}-params': entity_name,
    }
