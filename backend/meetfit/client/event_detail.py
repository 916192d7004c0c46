"""Controller for the event detail view."""

from __future__ import annotations

from typing import Any

from meetfit.client.bus import BroadcastBus, BroadcastEvent
from meetfit.client.scope import DESTROY, Scope
from meetfit.client.states import PreviousState
from meetfit.settings import settings


def event_update_topic() -> str:
	return f"{settings.alert_app_name}:eventUpdate"


class EventDetailController:
	"""Shows one event and keeps it current.

	``event`` starts as the entity loaded before the view was built and is
	replaced whenever an event update is broadcast on the root bus. The
	subscription is removed when ``scope`` is destroyed.
	"""

	def __init__(
		self,
		scope: Scope,
		root_bus: BroadcastBus,
		entity: Any,
		previous_state: PreviousState,
	) -> None:
		self.event = entity
		self.previous_state = previous_state.name
		unsubscribe = root_bus.on(event_update_topic(), self._on_event_update)
		scope.on(DESTROY, lambda _event: unsubscribe())

	def _on_event_update(self, _event: BroadcastEvent, result: Any) -> None:
		self.event = result
