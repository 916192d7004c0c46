from meetfit.client import BroadcastBus, EventDetailController, PreviousState, Scope


def _controller(entity=None):
	scope = Scope()
	bus = BroadcastBus()
	controller = EventDetailController(
		scope,
		bus,
		entity if entity is not None else {"id": 1, "name": "Morning run"},
		PreviousState(name="event", params={"page": 2}),
	)
	return controller, scope, bus


def test_initial_event_is_supplied_entity():
	entity = {"id": 1, "name": "Morning run"}
	controller, _, _ = _controller(entity)
	assert controller.event is entity
	assert controller.previous_state == "event"


def test_update_broadcast_replaces_event():
	controller, _, bus = _controller()
	updated = {"id": 1, "name": "Evening run"}

	bus.broadcast("meetFitApp:eventUpdate", updated)

	assert controller.event is updated


def test_other_broadcasts_are_ignored():
	controller, _, bus = _controller()
	before = controller.event

	bus.broadcast("meetFitApp:profileUpdate", {"id": 9})

	assert controller.event is before


def test_destroy_unsubscribes():
	controller, scope, bus = _controller()
	assert bus.listener_count("meetFitApp:eventUpdate") == 1

	scope.destroy()
	bus.broadcast("meetFitApp:eventUpdate", {"id": 1, "name": "Late"})

	assert bus.listener_count("meetFitApp:eventUpdate") == 0
	assert controller.event == {"id": 1, "name": "Morning run"}


def test_controllers_share_root_bus_independently():
	first, first_scope, bus = _controller()
	second = EventDetailController(Scope(), bus, {"id": 2}, PreviousState(name="home"))

	first_scope.destroy()
	bus.broadcast("meetFitApp:eventUpdate", {"id": 2, "name": "Swim"})

	assert first.event == {"id": 1, "name": "Morning run"}
	assert second.event == {"id": 2, "name": "Swim"}
