"""JSON logging for the meetfit API.

Every line carries the service identity plus whatever request fields the
HTTP middleware bound for the current task. Profile attributes are opaque
client data, so extras are scrubbed of contact and credential fields
before they are serialised.
"""

from __future__ import annotations

import json
import logging
import random
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from meetfit.settings import settings

_LOGGER_NAME = "meetfit"
ACCESS_LOGGER_NAME = "meetfit.http"

_REQUEST_FIELDS: ContextVar[Mapping[str, str]] = ContextVar("meetfit_request_fields", default={})

_REDACTED_KEYS = ("password", "token", "secret", "authorization", "email", "phone")
_MAX_STRING_LENGTH = 256

# Attributes every LogRecord has; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime", "taskName"}


def bind_context(**fields: Optional[str]) -> Token:
	"""Attach request fields (request_id, route, client_ip) to log lines in this task."""
	merged = dict(_REQUEST_FIELDS.get())
	merged.update({key: value for key, value in fields.items() if value is not None})
	return _REQUEST_FIELDS.set(merged)


def reset_context(token: Token) -> None:
	_REQUEST_FIELDS.reset(token)


def current_request_id() -> Optional[str]:
	return _REQUEST_FIELDS.get().get("request_id")


def _scrub(key: str, value: Any) -> Any:
	if any(word in key.lower() for word in _REDACTED_KEYS):
		return "[redacted]"
	if isinstance(value, Mapping):
		return {str(k): _scrub(str(k), v) for k, v in value.items()}
	if isinstance(value, (list, tuple)):
		return [_scrub(key, item) for item in value]
	if isinstance(value, str) and len(value) > _MAX_STRING_LENGTH:
		return value[:_MAX_STRING_LENGTH] + "…"
	if value is None or isinstance(value, (int, float, bool, str)):
		return value
	return str(value)


class JSONLogFormatter(logging.Formatter):
	"""One JSON object per record."""

	def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (match logging api)
		payload: Dict[str, Any] = {
			"ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
			"level": record.levelname.lower(),
			"msg": record.getMessage(),
			"logger": record.name,
			"service": settings.service_name,
			"env": settings.environment,
			"commit": settings.git_commit,
		}
		fields = _REQUEST_FIELDS.get()
		payload.update(fields)
		if "client_ip" in fields:
			payload["ip"] = payload.pop("client_ip")
		if record.exc_info:
			payload["exc_info"] = self.formatException(record.exc_info)
		for key, value in record.__dict__.items():
			if key in _RECORD_ATTRS or key in payload:
				continue
			payload[key] = _scrub(key, value)
		return json.dumps(payload, separators=(",", ":"))


class AccessLogSamplingFilter(logging.Filter):
	"""Sample the per-request access log; every other record passes."""

	def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
		if record.name != ACCESS_LOGGER_NAME or record.levelno != logging.INFO:
			return True
		rate = max(0.0, min(1.0, settings.obs_log_sampling_rate_info))
		return rate >= 1.0 or random.random() < rate


def configure_logging() -> logging.Logger:
	root = logging.getLogger()
	root.handlers.clear()
	handler = logging.StreamHandler()
	handler.setFormatter(JSONLogFormatter())
	handler.addFilter(AccessLogSamplingFilter())
	root.addHandler(handler)
	root.setLevel(settings.obs_log_level)
	return logging.getLogger(_LOGGER_NAME)


def get_logger(name: Optional[str] = None) -> logging.Logger:
	return logging.getLogger(name or _LOGGER_NAME)
