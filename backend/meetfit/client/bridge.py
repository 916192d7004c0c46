"""Relay server-side Socket.IO broadcasts onto a local BroadcastBus."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Iterable, Optional

import socketio

from meetfit.client.bus import BroadcastBus

LOGGER = logging.getLogger(__name__)


class SocketBridge:
	"""Subscribes to named events of one namespace and re-broadcasts them locally."""

	def __init__(
		self,
		bus: BroadcastBus,
		topics: Iterable[str],
		*,
		namespace: str = "/profiles",
		client: Optional[socketio.AsyncClient] = None,
	) -> None:
		self.bus = bus
		self.namespace = namespace
		self.topics = tuple(topics)
		self.client = client or socketio.AsyncClient(reconnection=True)
		for topic in self.topics:
			self.client.on(topic, handler=self._relay(topic), namespace=self.namespace)

	def _relay(self, topic: str) -> Callable[[Any], Awaitable[None]]:
		async def handler(data: Any = None) -> None:
			LOGGER.debug("socket_relay", extra={"topic": topic, "namespace": self.namespace})
			self.bus.broadcast(topic, data)

		return handler

	async def connect(self, url: str, **kwargs: Any) -> None:
		await self.client.connect(url, namespaces=[self.namespace], **kwargs)

	async def disconnect(self) -> None:
		if self.client.connected:
			await self.client.disconnect()
