"""View scope with a destroy lifecycle."""

from __future__ import annotations

from typing import Any

from meetfit.client.bus import BroadcastBus, Deregister, Listener

DESTROY = "$destroy"


class Scope:
	"""Listener registry owned by a single view.

	``destroy`` fires :data:`DESTROY` once, then drops every listener so the
	scope can no longer be reached through its registrations.
	"""

	def __init__(self) -> None:
		self._bus = BroadcastBus()
		self.destroyed = False

	def on(self, name: str, listener: Listener) -> Deregister:
		return self._bus.on(name, listener)

	def emit(self, name: str, *args: Any) -> None:
		if self.destroyed:
			return
		self._bus.broadcast(name, *args)

	def destroy(self) -> None:
		if self.destroyed:
			return
		try:
			self._bus.broadcast(DESTROY)
		finally:
			self.destroyed = True
			self._bus.clear()
