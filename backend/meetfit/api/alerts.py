"""Alert headers consumed by the web client to show toast notifications.

Success alerts carry a translation key (``<app>.<entity>.<action>``) and the
affected identifier; failure alerts carry ``error.<key>`` and the entity name.
"""

from __future__ import annotations

import logging
from typing import Dict

from meetfit.settings import settings

LOGGER = logging.getLogger(__name__)


def _app_name() -> str:
	return settings.alert_app_name


def alert_header_name() -> str:
	return f"X-{_app_name()}-alert"


def error_header_name() -> str:
	return f"X-{_app_name()}-error"


def params_header_name() -> str:
	return f"X-{_app_name()}-params"


def create_alert(message: str, param: str) -> Dict[str, str]:
	return {alert_header_name(): message, params_header_name(): param}


def entity_creation_alert(entity_name: str, param: str) -> Dict[str, str]:
	return create_alert(f"{_app_name()}.{entity_name}.created", param)


def entity_update_alert(entity_name: str, param: str) -> Dict[str, str]:
	return create_alert(f"{_app_name()}.{entity_name}.updated", param)


def entity_deletion_alert(entity_name: str, param: str) -> Dict[str, str]:
	return create_alert(f"{_app_name()}.{entity_name}.deleted", param)


def failure_alert(entity_name: str, error_key: str, default_message: str) -> Dict[str, str]:
	LOGGER.error(
		"entity_processing_failed",
		extra={"entity": entity_name, "error_key": error_key, "reason": default_message},
	)
	return {error_header_name(): f"error.{error_key}", params_header_name(): entity_name}
