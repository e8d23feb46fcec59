"""
Response headers announcing entity events to API clients.

Mirrors the alert header convention of the web client: every create, update
and delete answers with ``X-{app}-alert`` (a message or translation key) and
``X-{app}-params`` (the URL-encoded entity id). Failures use ``X-{app}-error``.
"""
import logging
from typing import Dict
from urllib.parse import quote

logger = logging.getLogger(__name__)

def create_alert(application_name: str, message: str, param: str) -> Dict[str, str]:
    return {
        f"X-{application_name}-alert": message,
        f"X-{application_name}-params": quote(param, safe=""),
    }

def create_entity_creation_alert(application_name: str, enable_translation: bool,
                                 entity_name: str, entity_id: str) -> Dict[str, str]:
    if enable_translation:
        message = f"{application_name}.{entity_name}.created"
    else:
        message = f"A new {entity_name} is created with identifier {entity_id}"
    return create_alert(application_name, message, entity_id)

def create_entity_update_alert(application_name: str, enable_translation: bool,
                               entity_name: str, entity_id: str) -> Dict[str, str]:
    if enable_translation:
        message = f"{application_name}.{entity_name}.updated"
    else:
        message = f"A {entity_name} is updated with identifier {entity_id}"
    return create_alert(application_name, message, entity_id)

def create_entity_deletion_alert(application_name: str, enable_translation: bool,
                                 entity_name: str, entity_id: str) -> Dict[str, str]:
    if enable_translation:
        message = f"{application_name}.{entity_name}.deleted"
    else:
        message = f"A {entity_name} is deleted with identifier {entity_id}"
    return create_alert(application_name, message, entity_id)

def create_failure_alert(application_name: str, entity_name: str, error_key: str,
                         default_message: str) -> Dict[str, str]:
    logger.error(f"Entity processing failed, {default_message}")
    return {
        f"X-{application_name}-error": f"error.{error_key}",
        f"X-{application_name}-params": entity_name,
    }
