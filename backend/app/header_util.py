"""
En-têtes HTTP d'alerte renvoyés au client après une opération sur une entité.

Format :
    X-<app>-alert  : clé de traduction (<app>.<entité>.created) ou phrase en anglais
    X-<app>-params : identifiant concerné (ou nom de l'entité pour une erreur)
    X-<app>-error  : clé d'erreur (error.<errorKey>)
"""

import logging
from typing import Dict
from urllib.parse import quote

logger = logging.getLogger(__name__)


def create_alert(application_name: str, message: str, param: str) -> Dict[str, str]:
    return {
        f"X-{application_name}-alert": message,
        # Les valeurs d'en-tête doivent rester en latin-1
        f"X-{application_name}-params": quote(param, safe=""),
    }


def _entity_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    param: str,
    action: str,
    sentence: str,
) -> Dict[str, str]:
    if enable_translation:
        message = f"{application_name}.{entity_name}.{action}"
    else:
        message = sentence
    return create_alert(application_name, message, param)


def create_entity_creation_alert(
    application_name: str, enable_translation: bool, entity_name: str, param: str
) -> Dict[str, str]:
    return _entity_alert(
        application_name, enable_translation, entity_name, param,
        "created", f"A new {entity_name} is created with identifier {param}",
    )


def create_entity_update_alert(
    application_name: str, enable_translation: bool, entity_name: str, param: str
) -> Dict[str, str]:
    return _entity_alert(
        application_name, enable_translation, entity_name, param,
        "updated", f"A {entity_name} is updated with identifier {param}",
    )


def create_entity_deletion_alert(
    application_name: str, enable_translation: bool, entity_name: str, param: str
) -> Dict[str, str]:
    return _entity_alert(
        application_name, enable_translation, entity_name, param,
        "deleted", f"A {entity_name} is deleted with identifier {param}",
    )


def create_failure_alert(
    application_name: str, enable_translation: bool, entity_name: str, error_key: str, default_message: str
) -> Dict[str, str]:
    """En-têtes accompagnant une erreur 400 (X-<app>-error / X-<app>-params)."""
    logger.error("Entity processing failed, %s", default_message)
    message = f"error.{error_key}" if enable_translation else default_message
    return {
        f"X-{application_name}-error": message,
        f"X-{application_name}-params": entity_name,
    }
