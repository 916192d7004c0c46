"""Client-side view controllers and the broadcast plumbing they listen on."""

from meetfit.client.bus import BroadcastBus, BroadcastEvent
from meetfit.client.event_detail import EventDetailController, event_update_topic
from meetfit.client.scope import DESTROY, Scope
from meetfit.client.states import PreviousState

__all__ = [
	"DESTROY",
	"BroadcastBus",
	"BroadcastEvent",
	"EventDetailController",
	"PreviousState",
	"Scope",
	"event_update_topic",
]
