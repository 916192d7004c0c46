"""Central registry for Prometheus metrics used across the backend."""

from __future__ import annotations

import functools
import time
from typing import Awaitable, Callable, TypeVar

from prometheus_client import Counter, Gauge, Histogram

T = TypeVar("T")


REQUEST_COUNTER = Counter(
	"meetfit_http_requests_total",
	"Total HTTP requests processed",
	["route", "method", "status"],
)

REQUEST_LATENCY = Histogram(
	"meetfit_http_request_duration_seconds",
	"HTTP request latency in seconds",
	["route", "method"],
	buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0),
)

SOCKET_CLIENTS = Gauge(
	"meetfit_socketio_clients",
	"Active Socket.IO clients per namespace",
	["namespace"],
)

SOCKET_EVENTS = Counter(
	"meetfit_socketio_events_total",
	"Socket.IO events emitted per namespace",
	["namespace", "event"],
)

PROFILE_OPERATIONS = Counter(
	"meetfit_profile_operations_total",
	"Profile operations completed",
	["operation"],
)

PROFILE_REJECTS = Counter(
	"meetfit_profile_rejects_total",
	"Profile requests rejected",
	["reason"],
)

PROFILE_OPERATION_LATENCY = Histogram(
	"meetfit_profile_operation_duration_seconds",
	"Time spent handling profile operations",
	["operation"],
	buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

POSTGRES_UP = Gauge(
	"meetfit_postgres_up",
	"Postgres availability as seen by readiness checks",
)

POSTGRES_LATENCY = Histogram(
	"meetfit_postgres_ping_seconds",
	"Latency of Postgres readiness pings",
	buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25),
)


def observe_request(route: str, method: str, status: int, elapsed_seconds: float) -> None:
	REQUEST_COUNTER.labels(route=route, method=method, status=str(status)).inc()
	REQUEST_LATENCY.labels(route=route, method=method).observe(elapsed_seconds)


def socket_connected(namespace: str) -> None:
	SOCKET_CLIENTS.labels(namespace=namespace).inc()


def socket_disconnected(namespace: str) -> None:
	SOCKET_CLIENTS.labels(namespace=namespace).dec()


def socket_event(namespace: str, event: str) -> None:
	SOCKET_EVENTS.labels(namespace=namespace, event=event).inc()


def inc_profile_operation(operation: str) -> None:
	PROFILE_OPERATIONS.labels(operation=operation).inc()


def inc_profile_reject(reason: str) -> None:
	PROFILE_REJECTS.labels(reason=reason).inc()


def mark_postgres(ok: bool, *, latency_seconds: float | None = None) -> None:
	POSTGRES_UP.set(1 if ok else 0)
	if latency_seconds is not None:
		POSTGRES_LATENCY.observe(latency_seconds)


def timed(operation: str) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
	"""Record the wall time of an async handler, including failed calls."""

	def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
		@functools.wraps(func)
		async def wrapper(*args, **kwargs) -> T:
			start = time.perf_counter()
			try:
				return await func(*args, **kwargs)
			finally:
				PROFILE_OPERATION_LATENCY.labels(operation=operation).observe(time.perf_counter() - start)

		return wrapper

	return decorator
