"""Socket.IO namespace broadcasting profile changes to connected clients."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import socketio

from meetfit.obs import metrics as obs_metrics
from meetfit.settings import settings

LOGGER = logging.getLogger(__name__)

NAMESPACE = "/profiles"
ROOM = "profiles"

_namespace: Optional["ProfileNamespace"] = None


def update_topic() -> str:
	return f"{settings.alert_app_name}:profileUpdate"


def delete_topic() -> str:
	return f"{settings.alert_app_name}:profileDelete"


class ProfileNamespace(socketio.AsyncNamespace):
	"""Every connected client joins a single room that receives all profile changes."""

	def __init__(self) -> None:
		super().__init__(NAMESPACE)

	async def on_connect(self, sid: str, environ: dict, auth: Optional[dict] = None) -> None:
		obs_metrics.socket_connected(self.namespace)
		await self.enter_room(sid, ROOM)

	async def on_disconnect(self, sid: str, reason: Any = None) -> None:
		obs_metrics.socket_disconnected(self.namespace)
		await self.leave_room(sid, ROOM)


def set_namespace(namespace: Optional[ProfileNamespace]) -> None:
	global _namespace
	_namespace = namespace


async def _emit(event: str, payload: Dict[str, Any]) -> None:
	if _namespace is None:
		return
	obs_metrics.socket_event(_namespace.namespace, event)
	await _namespace.emit(event, payload, room=ROOM)


async def emit_profile_update(payload: Dict[str, Any]) -> None:
	await _emit(update_topic(), payload)


async def emit_profile_delete(profile_id: int) -> None:
	await _emit(delete_topic(), {"id": profile_id})
