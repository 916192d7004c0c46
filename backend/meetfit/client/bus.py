"""In-process publish/subscribe bus for view controllers.

Listeners are plain callables invoked synchronously, in registration order,
as ``listener(event, *args)``. ``on`` returns a callable that removes the
registration again; calling it twice is harmless.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

LOGGER = logging.getLogger(__name__)

Listener = Callable[..., Any]
Deregister = Callable[[], None]


@dataclass(frozen=True, slots=True)
class BroadcastEvent:
	name: str


class BroadcastBus:
	def __init__(self) -> None:
		self._listeners: Dict[str, List[Listener]] = {}

	def on(self, name: str, listener: Listener) -> Deregister:
		listeners = self._listeners.setdefault(name, [])
		listeners.append(listener)

		def deregister() -> None:
			current = self._listeners.get(name)
			if not current:
				return
			try:
				current.remove(listener)
			except ValueError:
				return
			if not current:
				del self._listeners[name]

		return deregister

	def broadcast(self, name: str, *args: Any) -> BroadcastEvent:
		event = BroadcastEvent(name)
		# Snapshot so listeners may deregister themselves while being called
		listeners = list(self._listeners.get(name, ()))
		LOGGER.debug("broadcast", extra={"event": name, "listeners": len(listeners)})
		for listener in listeners:
			listener(event, *args)
		return event

	def listener_count(self, name: str) -> int:
		return len(self._listeners.get(name, ()))

	def clear(self) -> None:
		self._listeners.clear()
